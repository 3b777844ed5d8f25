"""A box that centres its children horizontally or vertically."""

from __future__ import annotations

from typing import Any

from .box import Box, Dim, Property


class Center(Box):
    """Centres its children vertically, or horizontally when CENTER_HORIZONTAL is set.

    Padding is not taken into account; wrap the element in a Box for that.
    """

    def __init__(self) -> None:
        super().__init__()
        self.center_horizontally = False

    def propb(self, key: Property, value: bool) -> None:
        if key is Property.CENTER_HORIZONTAL:
            self.center_horizontally = bool(value)
            self.horizontal = bool(value)
        else:
            super().propb(key, value)

    def show(self, window: Any, x: int, y: int, max_width: int, max_height: int) -> None:
        self._start_color(window)
        width, height = self.size(max_width, max_height)
        self._fill(window, x, y, width, height)

        content_width, content_height = Box.size(self, max_width, max_height)
        if self.center_horizontally:
            rel_x, rel_y = max((max_width - content_width) // 2, 0), 0
        else:
            rel_x, rel_y = 0, max((max_height - content_height) // 2, 0)
        remaining_width = max_width

        for child in self._children:
            # children are measured against the remaining width on both axes
            child_width, child_height = child.size(remaining_width, remaining_width)
            child.show(window, x + rel_x, y + rel_y, child_width, child_height)
            if self.center_horizontally:
                rel_x += child_width
                remaining_width = max(0, remaining_width - child_width)
            else:
                rel_y += child_height

        self._end_color(window)
        self._refresh(window)

    def size(self, max_width: int, max_height: int) -> Dim:
        width, height = Box.size(self, max_width, max_height)
        if self.center_horizontally:
            width = max_width
        else:
            height = max_height
        return (width, height)