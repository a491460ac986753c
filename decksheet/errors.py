"""Exception hierarchy for the deck sheet downloader.

Each stage raises the most specific error it can determine and chains
the underlying cause with ``raise ... from``.
"""


class DeckSheetError(Exception):
    """Base exception for all deck sheet errors."""
    pass


class InputError(DeckSheetError):
    """Unusable user input, such as an output path that cannot be written."""
    pass


class NetworkError(DeckSheetError):
    """Transport failure reaching the deck catalog or a card image."""
    pass


class FormatError(DeckSheetError):
    """Deck data is missing expected structure or references an unknown card."""
    pass


class DecodeError(DeckSheetError):
    """Downloaded bytes are not a decodable image."""
    pass


class LayoutError(DeckSheetError):
    """Card size mismatch, grid overflow, or use of a finished sheet."""
    pass


class ConfigurationError(DeckSheetError):
    """Invalid settings."""
    pass
