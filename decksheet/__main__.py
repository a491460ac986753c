"""Entry point for python -m decksheet

Usage:
  python -m decksheet <deck id or url> -o deck.png
"""

from decksheet.cli import main

if __name__ == "__main__":
    main()
