"""Grid arithmetic for deck sheets, kept separate from image handling."""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class GridSize:
    """Number of card cells across and down."""

    columns: int
    rows: int

    @property
    def capacity(self) -> int:
        return self.columns * self.rows


def compute_grid(count: int) -> GridSize:
    """Determine a roughly square grid large enough to hold ``count`` cards.

    ``columns = floor(sqrt(count))`` and ``rows = ceil(count / columns)``.
    """
    if count < 1:
        raise ValueError(f"Card count must be positive, got {count}")
    columns = math.isqrt(count)
    rows = -(-count // columns)
    return GridSize(columns, rows)


@dataclass
class SheetCursor:
    """Cell where the next card goes. Advances row-major and never moves back."""

    grid: GridSize
    column: int = 0
    row: int = 0

    @property
    def full(self) -> bool:
        return self.row >= self.grid.rows

    def offset(self, card_width: int, card_height: int) -> tuple[int, int]:
        """Top-left pixel of the current cell."""
        return self.column * card_width, self.row * card_height

    def advance(self) -> None:
        self.column += 1
        if self.column >= self.grid.columns:
            self.column = 0
            self.row += 1
