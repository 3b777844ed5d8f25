"""A box showing text wrapped to the width it is given."""

from __future__ import annotations

import contextlib
import curses
from typing import Any

from .box import Box, Dim


def split_content(content: str, max_width: int) -> list[str]:
    """Split text into lines at most ``max_width`` characters long.

    A word cut in the middle gets a trailing '-'; a single letter left at
    the end of a line moves to the next one.
    """
    lines: list[str] = []
    if max_width <= 0:
        return lines

    pos = 0
    while len(content) - pos > max_width:
        wrote = max_width
        sub = content[pos : pos + wrote]
        if content[pos + wrote].isspace():
            # the cut falls right before a blank: drop it from the next line
            wrote += 1
        elif wrote > 1 and not sub[-1].isspace():
            if not sub[-2].isspace():
                sub = sub[:-1] + "-"
            else:
                sub = sub[:-1]
            wrote -= 1
        lines.append(sub)
        pos += wrote

    if pos != len(content) - 1:
        lines.append(content[pos:])
    return lines


class TextBox(Box):
    """Shows its text wrapped over several lines.

    Padding is not taken into account; wrap the element in a Box for that.
    """

    def __init__(self, content: str = "") -> None:
        super().__init__()
        self._content = str(content)
        self.lines: list[str] = []
        self._lines_width: int | None = None

    @property
    def content(self) -> str:
        return self._content

    @content.setter
    def content(self, value: str) -> None:
        self._content = str(value)
        self._lines_width = None

    def _split(self, max_width: int) -> list[str]:
        return split_content(self._content, max_width)

    def _update_lines(self, max_width: int) -> None:
        if max_width != self._lines_width:
            self.lines = self._split(max_width)
        self._lines_width = max_width

    def show(self, window: Any, x: int, y: int, max_width: int, max_height: int) -> None:
        self._update_lines(max_width)
        self._start_color(window)
        if window is not None:
            for row, line in enumerate(self.lines[: max(0, max_height)]):
                offset = max_width - len(line) if self.float_right else 0
                with contextlib.suppress(curses.error):
                    window.addstr(y + row, x + offset, line)
        self._end_color(window)
        self._refresh(window)

    def size(self, max_width: int, max_height: int) -> Dim:
        self._update_lines(max_width)
        height = min(len(self.lines), max_height)
        if self.float_right:
            width = max_width
        else:
            width = min(len(self.lines[0]) if self.lines else 0, max_width)
        return (width, height)