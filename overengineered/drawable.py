"""The interface of content shown inside the game screen."""

from __future__ import annotations

from enum import Enum, auto
from typing import Any


class Kind(Enum):
    """What a drawable shows: nothing, a menu or the game."""

    NONE = auto()
    MENU = auto()
    GAME = auto()


class Event(Enum):
    """Events sent to the drawable currently on screen."""

    REDRAW = auto()
    MOVE_UP = auto()
    MOVE_DOWN = auto()
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    INTERACT = auto()


class Drawable:
    """Content drawn on a window that reacts to events."""

    drawable_kind: Kind = Kind.NONE

    def __init__(self, window: Any, width: int, height: int):
        self.window = window
        self.width = width
        self.height = height

    def kind(self) -> Kind:
        return self.drawable_kind

    def handle_event(self, event: Event) -> None:
        """React to an event; the base drawable ignores all of them."""

    def is_over(self) -> bool:
        return False