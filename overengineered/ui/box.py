"""The basic container every element of the text user interface builds on."""

from __future__ import annotations

import contextlib
import curses
from enum import Enum, auto
from typing import Any, Optional, TypeVar

from .. import screen
from ..colorable import Color, Colorable

Dim = tuple[int, int]

_B = TypeVar("_B", bound="Box")


class Property(Enum):
    """Settable properties of a box."""

    DIRECTION_HORIZONTAL = auto()
    FLOAT_RIGHT = auto()
    CENTER_HORIZONTAL = auto()

    PADDING_LEFT = auto()
    PADDING_RIGHT = auto()
    PADDING_TOP = auto()
    PADDING_BOTTOM = auto()

    FOREGROUND = auto()
    BACKGROUND = auto()


_COLOR_PROPERTIES = {Property.FOREGROUND: "fg", Property.BACKGROUND: "bg"}
_BOOL_PROPERTIES = {
    Property.DIRECTION_HORIZONTAL: "horizontal",
    Property.FLOAT_RIGHT: "float_right",
}
_SIZE_PROPERTIES = {
    Property.PADDING_LEFT: "padding_left",
    Property.PADDING_RIGHT: "padding_right",
    Property.PADDING_TOP: "padding_top",
    Property.PADDING_BOTTOM: "padding_bottom",
}


class Box(Colorable):
    """A plain container that lays out its children one after another.

    Children are stacked vertically, or horizontally when
    DIRECTION_HORIZONTAL is set, and surrounded by the box's padding.
    Passing ``None`` as the window to ``show`` performs the layout without
    drawing anything.
    """

    def __init__(self) -> None:
        self.padding_left = 0
        self.padding_right = 0
        self.padding_top = 0
        self.padding_bottom = 0
        self.horizontal = False
        self.float_right = False
        self.fg: Color = super().foreground()
        self.bg: Color = super().background()
        self.parent: Optional[Box] = None
        self._children: list[Box] = []

    # tree -----------------------------------------------------------------

    @property
    def children(self) -> tuple[Box, ...]:
        return tuple(self._children)

    @property
    def first_child(self) -> Optional[Box]:
        return self._children[0] if self._children else None

    @property
    def last_child(self) -> Optional[Box]:
        return self._children[-1] if self._children else None

    @property
    def sibling(self) -> Optional[Box]:
        """The child of the same parent that follows this one."""
        if self.parent is None:
            return None
        siblings = self.parent._children
        for box, following in zip(siblings, siblings[1:]):
            if box is self:
                return following
        return None

    def append(self, box: Optional[_B] = None) -> _B | Box:
        """Add ``box`` (a new plain Box by default) as the last child and return it."""
        if box is None:
            box = Box()
        box.parent = self
        self._children.append(box)
        return box

    def child(self, n: int) -> Optional[Box]:
        """Return the n-th child, or None when there is no such child."""
        if 0 <= n < len(self._children):
            return self._children[n]
        return None

    # properties -----------------------------------------------------------

    def foreground(self) -> Color:
        return self.fg

    def background(self) -> Color:
        return self.bg

    def propc(self, key: Property, color: Color) -> None:
        """Set a colour property; raises ValueError for any other property."""
        try:
            setattr(self, _COLOR_PROPERTIES[key], Color(color))
        except KeyError:
            raise ValueError(f"{key} is not a colour property") from None

    def propb(self, key: Property, value: bool) -> None:
        """Set a boolean property; raises ValueError for any other property."""
        try:
            setattr(self, _BOOL_PROPERTIES[key], bool(value))
        except KeyError:
            raise ValueError(f"{key} is not a boolean property") from None

    def props(self, key: Property, value: int) -> None:
        """Set a size property; raises ValueError for any other property."""
        try:
            setattr(self, _SIZE_PROPERTIES[key], int(value))
        except KeyError:
            raise ValueError(f"{key} is not a size property") from None

    # drawing --------------------------------------------------------------

    def _color_pair(self) -> int:
        return screen.color_pair(self.fg, self.bg)

    def _start_color(self, window: Any) -> None:
        if window is not None:
            screen.start_color(window, self._color_pair())

    def _end_color(self, window: Any) -> None:
        if window is not None:
            screen.end_color(window, self._color_pair())

    @staticmethod
    def _fill(window: Any, x: int, y: int, width: int, height: int) -> None:
        if window is None or width <= 0:
            return
        for row in range(height):
            with contextlib.suppress(curses.error):
                window.hline(y + row, x, " ", width)

    @staticmethod
    def _refresh(window: Any) -> None:
        if window is not None:
            window.noutrefresh()

    def show(self, window: Any, x: int, y: int, max_width: int, max_height: int) -> None:
        """Fill the box's area with its background and draw its children."""
        self._start_color(window)
        width, height = self.size(max_width, max_height)
        self._fill(window, x, y, width, height)

        rel_x, rel_y = self.padding_left, self.padding_top
        remaining_width = max(0, max_width - self.padding_left - self.padding_right)
        remaining_height = max(0, max_height - self.padding_top - self.padding_bottom)

        for child in self._children:
            child_width, child_height = child.size(remaining_width, remaining_height)
            if self.float_right:
                child_x = x + max_width - self.padding_right - rel_x
            else:
                child_x = x + rel_x
            child.show(window, child_x, y + rel_y, child_width, child_height)

            if self.horizontal:
                rel_x += child_width
                remaining_width = max(0, remaining_width - child_width)
            else:
                rel_y += child_height
                remaining_height = max(0, remaining_height - child_height)

        self._end_color(window)
        self._refresh(window)

    def size(self, max_width: int, max_height: int) -> Dim:
        """Return the (width, height) the box takes when drawn."""
        width = height = 0
        inner_width = max_width - self.padding_left - self.padding_right
        inner_height = max_height - self.padding_top - self.padding_bottom
        for child in self._children:
            child_width, child_height = child.size(
                max(0, inner_width - (width if self.horizontal else 0)),
                max(0, inner_height - (0 if self.horizontal else height)),
            )
            if self.horizontal:
                width += child_width
                height = max(height, child_height)
            else:
                width = max(width, child_width)
                height += child_height
        if self.float_right:
            width = max_width
        return (
            width + self.padding_left + self.padding_right,
            height + self.padding_top + self.padding_bottom,
        )