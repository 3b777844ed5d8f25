"""Fixed-size arrows pointing left or right."""

from __future__ import annotations

import contextlib
import curses
from typing import Any

from .box import Box, Dim


class Arrow(Box):
    """Draws a left or right arrow of a fixed size."""

    width = 3
    height = 6

    def __init__(self, left: bool) -> None:
        super().__init__()
        self.left = bool(left)

    def cells(self) -> list[tuple[int, int, str]]:
        """Return the (row, column, character) cells of the arrow, relative to its corner."""
        last = self.width - 1
        upper = "/" if self.left else "\\"
        lower = "\\" if self.left else "/"
        top = [
            (row, last - row if self.left else row, upper) for row in range(self.width)
        ]
        bottom = [
            (self.width + row, row if self.left else last - row, lower)
            for row in range(self.width)
        ]
        return top + bottom

    def show(self, window: Any, x: int, y: int, max_width: int, max_height: int) -> None:
        self._start_color(window)
        if window is not None:
            for row, column, char in self.cells():
                with contextlib.suppress(curses.error):
                    window.addch(y + row, x + column, char)
        self._end_color(window)

    def size(self, max_width: int, max_height: int) -> Dim:
        return (self.width, self.height)