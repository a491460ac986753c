"""Build a deck sheet from card image URLs, one card at a time."""

import logging
from typing import Optional, Sequence

from PIL import Image

from decksheet.fetcher import CardFetcher
from decksheet.progress import NullListener, Progress, ProgressListener
from decksheet.sheet import DeckSheet

logger = logging.getLogger(__name__)

BUILD_MESSAGE = "Building deck"


def compose(
    urls: Sequence[str],
    fetcher: CardFetcher,
    listener: Optional[ProgressListener] = None,
) -> DeckSheet:
    """Fetch every card in order and draw it onto a new sheet.

    A card whose URL equals the previous card's URL reuses the previous
    image instead of being fetched again. Only adjacent repeats are reused.

    Args:
        urls: Card image URLs in deck order, duplicates preserved
        fetcher: Source of decoded card images
        listener: Receives a "Building deck" record before the first card
            and after every card

    Returns:
        The filled, unsaved sheet. The caller owns it and must save or close it.

    Raises:
        NetworkError, DecodeError: If a card cannot be fetched
        LayoutError: If a card does not fit the sheet
    """
    listener = listener or NullListener()
    total = len(urls)
    listener.notify(Progress(BUILD_MESSAGE, 0, total))

    sheet = DeckSheet(total)
    try:
        last_url: Optional[str] = None
        card: Optional[Image.Image] = None

        for i, url in enumerate(urls, start=1):
            if url != last_url:
                card = fetcher.fetch(url)
                last_url = url
            else:
                logger.debug("Reusing previous image for card %d", i)

            sheet.add_card(card)
            listener.notify(Progress(BUILD_MESSAGE, i, total))
    except BaseException:
        sheet.close()
        raise

    return sheet
