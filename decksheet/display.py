"""Console rendering of progress records with an in-place progress bar."""

import shutil
import sys
from typing import Callable, Optional, TextIO

from decksheet.progress import Progress

FILL_CHAR = "#"


def _terminal_width() -> int:
    return shutil.get_terminal_size().columns


def render_bar(current: int, total: int, width: int) -> str:
    """Render ``[###   ]`` spanning ``width`` characters including brackets."""
    inner = max(width - 2, 0)
    completed = round(current * inner / total)
    completed = max(min(completed, inner), 0)
    return "[" + FILL_CHAR * completed + " " * (inner - completed) + "]"


class ProgressDisplay:
    """Shows each operation on its own line and a bar beneath stepped ones.

    A record starts a new operation line when it has no step count or its
    message differs from the previous record's. Otherwise only the bar is
    redrawn, in place.
    """

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        width: Optional[Callable[[], int]] = None,
    ):
        """Initialize display.

        Args:
            stream: Output stream (default sys.stdout)
            width: Callable returning the line width (default: terminal columns)
        """
        self.stream = stream or sys.stdout
        self._width = width or _terminal_width
        self.last_progress: Optional[Progress] = None
        self.bar_visible = False

    def notify(self, progress: Progress) -> None:
        if self._is_new_operation(progress):
            self._next_operation(progress)
        self._show_bar(progress)

    def finish(self) -> None:
        """Remove any visible bar."""
        self._clear_bar()

    def _is_new_operation(self, progress: Progress) -> bool:
        if progress.total == 0:
            return True
        return self.last_progress is None or progress.message != self.last_progress.message

    def _next_operation(self, progress: Progress) -> None:
        self._clear_bar()
        self.stream.write(progress.message + "\n")
        self.stream.flush()
        self.last_progress = progress

    def _clear_bar(self) -> None:
        if not self.bar_visible:
            return
        self.bar_visible = False
        self._write_line(" " * self._width())

    def _show_bar(self, progress: Progress) -> None:
        if progress.total == 0:
            self._clear_bar()
            return
        self.bar_visible = True
        self._write_line(render_bar(progress.current, progress.total, self._width()))

    def _write_line(self, line: str) -> None:
        # Return to column 0 so the next write replaces this line.
        self.stream.write(line + "\r")
        self.stream.flush()
