"""A short text drawn on a solid background with wide margins."""

from __future__ import annotations

import curses
from typing import Any

from .box import Dim
from .text_box import TextBox

# Room left for the text when the paddings take more than the space given:
# the text is then laid out without a limit, as with the 16-bit size unit.
_NO_LIMIT = 0xFFFF


def _available(space: int) -> int:
    return space if space >= 0 else _NO_LIMIT


class Button(TextBox):
    """A single-line text box with big side margins, coloured like a button."""

    side_padding = 4

    def __init__(self, content: str = "") -> None:
        super().__init__(content)

    def _text_size(self, max_width: int, max_height: int) -> Dim:
        width = max_width - 2 * self.side_padding - self.padding_left - self.padding_right
        height = max_height - 2 * self.side_padding - self.padding_top - self.padding_bottom
        return (_available(width), _available(height))

    def show(self, window: Any, x: int, y: int, max_width: int, max_height: int) -> None:
        text_width, text_height = self._text_size(max_width, max_height)
        width, height = TextBox.size(self, text_width, text_height)

        self._start_color(window)
        self._fill(
            window,
            x + self.padding_left,
            y + self.padding_top,
            width + 2 * self.side_padding,
            height + 2,
        )
        self._end_color(window)

        if window is not None:
            window.attron(curses.A_BOLD)
        TextBox.show(
            self,
            window,
            x + self.side_padding + self.padding_left,
            y + 1 + self.padding_top,
            text_width,
            text_height,
        )
        if window is not None:
            window.attroff(curses.A_BOLD)

    def size(self, max_width: int, max_height: int) -> Dim:
        text_width, text_height = self._text_size(max_width, max_height)
        width, height = TextBox.size(self, text_width, text_height)
        return (
            self.padding_left + self.padding_right + width + 2 * self.side_padding,
            self.padding_top + self.padding_bottom + height + 2,
        )