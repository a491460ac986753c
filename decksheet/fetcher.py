"""Download and decode card images."""

import io
import logging
from typing import Optional, Protocol

from PIL import Image

from decksheet.client import KeyforgeClient
from decksheet.errors import DecodeError

logger = logging.getLogger(__name__)


class CardFetcher(Protocol):
    """Anything that can turn a card image URL into a decoded image."""

    def fetch(self, url: str) -> Image.Image:
        ...


def decode_image(data: bytes, source: str = "<bytes>") -> Image.Image:
    """Decode image bytes fully into memory.

    Raises:
        DecodeError: If the bytes are not a readable image
    """
    try:
        image = Image.open(io.BytesIO(data))
        image.load()
    except (OSError, SyntaxError, ValueError, Image.DecompressionBombError) as e:
        raise DecodeError(f"Not a valid image: {source}") from e
    return image


class ImageFetcher:
    """Fetches card images over HTTP. Holds no state between calls."""

    def __init__(self, client: Optional[KeyforgeClient] = None):
        self.client = client or KeyforgeClient()

    def fetch(self, url: str) -> Image.Image:
        """Download and decode one card image.

        Raises:
            NetworkError: If the download fails
            DecodeError: If the response is not an image
        """
        data = self.client.get_bytes(url)
        image = decode_image(data, url)
        logger.debug("Fetched %s (%dx%d)", url, image.width, image.height)
        return image
