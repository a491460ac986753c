"""End-to-end deck download: id -> card URLs -> sheet image on disk."""

import logging
from pathlib import Path
from typing import Optional, Union

from decksheet.client import KeyforgeClient
from decksheet.composer import compose
from decksheet.fetcher import ImageFetcher
from decksheet.identifier import find_id
from decksheet.progress import NullListener, Progress, ProgressListener
from decksheet.resolver import DeckResolver

logger = logging.getLogger(__name__)


def download_deck(
    deck: str,
    path: Union[str, Path],
    listener: Optional[ProgressListener] = None,
    client: Optional[KeyforgeClient] = None,
) -> Path:
    """Download every card of a deck and save them as one sheet image.

    Args:
        deck: Deck id, or any text containing one (such as a deck URL)
        path: Output image path; the extension picks the format
        listener: Progress listener (default: none)
        client: HTTP client (default: KeyforgeClient with default settings)

    Returns:
        The path written

    Raises:
        DeckSheetError: Any failure; nothing is written unless every card
            was added
    """
    listener = listener or NullListener()
    path = Path(path)
    deck_id = find_id(deck)
    if deck_id != deck:
        logger.info("Using deck id %s", deck_id)

    owns_client = client is None
    client = client or KeyforgeClient()
    try:
        urls = DeckResolver(client, listener).resolve(deck_id)
        with compose(urls, ImageFetcher(client), listener) as sheet:
            listener.notify(Progress("Saving"))
            sheet.save(path)
    finally:
        if owns_client:
            client.close()

    return path
