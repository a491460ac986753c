"""Assemble card images into a single deck sheet."""

import logging
from pathlib import Path
from typing import Optional, Union

from PIL import Image

from decksheet.errors import InputError, LayoutError
from decksheet.layout import GridSize, SheetCursor, compute_grid

logger = logging.getLogger(__name__)

BACKGROUND = (0, 0, 0)


class DeckSheet:
    """A grid of equally sized card images on a black background.

    The output image is allocated when the first card is added, since that
    card decides the cell size. Use as a context manager so the buffer is
    released whether or not ``save`` is reached::

        with DeckSheet(len(urls)) as sheet:
            for card in cards:
                sheet.add_card(card)
            sheet.save("deck.png")
    """

    def __init__(self, count: int):
        """Initialize sheet.

        Args:
            count: Total number of cards that will be added
        """
        self.grid: GridSize = compute_grid(count)
        self.cursor = SheetCursor(self.grid)
        self.card_size: Optional[tuple[int, int]] = None
        self.cards_added = 0
        self._image: Optional[Image.Image] = None
        self._finished = False

    @property
    def size(self) -> Optional[tuple[int, int]]:
        """Pixel size of the sheet, once known."""
        if self.card_size is None:
            return None
        w, h = self.card_size
        return w * self.grid.columns, h * self.grid.rows

    @property
    def image(self) -> Optional[Image.Image]:
        return self._image

    def _initialize(self, card: Image.Image) -> None:
        self.card_size = card.size
        self._image = Image.new("RGB", self.size, BACKGROUND)
        logger.debug("Allocated %dx%d sheet for %dx%d grid of %dx%d cards",
                     *self.size, self.grid.columns, self.grid.rows, *self.card_size)

    def _validate(self, card: Image.Image, position: tuple[int, int]) -> None:
        if self.cursor.full:
            raise LayoutError("Attempted to add too many cards")

        if card.size != self.card_size:
            raise LayoutError(
                "Cards must have the same dimensions. The first card added was "
                f"{self.card_size[0]}x{self.card_size[1]}, and this card is "
                f"{card.width}x{card.height}."
            )

        x, y = position
        w, h = self.card_size
        if x + w > self._image.width or y + h > self._image.height:
            raise LayoutError("This card overflows the edge of the output image")

    def add_card(self, card: Image.Image) -> None:
        """Draw ``card`` unscaled into the next free cell.

        Raises:
            LayoutError: If the sheet is full, the card size differs from
                the first card, or the sheet has been saved or closed
        """
        if self._finished:
            raise LayoutError("Cannot add cards to a finished deck sheet")

        if self._image is None:
            self._initialize(card)

        position = self.cursor.offset(*self.card_size)
        self._validate(card, position)

        if card.mode in ("RGBA", "LA") or (card.mode == "P" and "transparency" in card.info):
            card = card.convert("RGBA")
            self._image.paste(card, position, card)
        else:
            self._image.paste(card, position)

        self.cursor.advance()
        self.cards_added += 1

    def save(self, path: Union[str, Path]) -> None:
        """Write the sheet to ``path``; the format follows the file extension.

        May be called once. The buffer is released afterwards.

        Raises:
            LayoutError: If no card was added or the sheet is already finished
            InputError: If the path has an unknown extension or cannot be written
        """
        if self._finished:
            raise LayoutError("Deck sheet has already been saved")
        if self._image is None:
            raise LayoutError("Cannot save a deck sheet with no cards")

        try:
            self._image.save(path)
        except (ValueError, KeyError) as e:
            raise InputError(f"Unsupported image format: {path}") from e
        except OSError as e:
            raise InputError(f"Could not write image: {path}") from e
        finally:
            self.close()

        logger.info("Saved %d cards to %s", self.cards_added, path)

    def close(self) -> None:
        """Release the image buffer. Safe to call more than once."""
        self._finished = True
        if self._image is not None:
            self._image.close()
            self._image = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
