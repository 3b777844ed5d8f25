"""The shared behaviour of all menus: a UI tree driven by events."""

from __future__ import annotations

import curses
from abc import ABCMeta, abstractmethod
from typing import Any, Optional

from .drawable import Drawable, Event, Kind
from .screen import Screen
from .ui.box import Box


class Menu(Drawable, metaclass=ABCMeta):
    """A drawable holding a tree of UI boxes with focusable items.

    Subclasses build the tree in ``generate`` and say which box is focused,
    how focus moves and how a focused box reacts to interaction.
    """

    drawable_kind = Kind.MENU

    def __init__(self, window: Any) -> None:
        super().__init__(window, Screen.columns, Screen.lines)
        self.root: Optional[Box] = None
        self._first_draw = True

    def kind(self) -> Kind:
        return Kind.MENU

    def _redraw(self) -> None:
        if self._first_draw:
            root = self.generate()
            if root is None:
                raise RuntimeError("the menu generated no interface")
            self.root = root
            box = self.curr_box()
            if box is not None:
                self.focus(box)
            self._first_draw = False

        assert self.root is not None
        self.root.show(self.window, 0, 0, self.width, self.height)
        if self.window is not None:
            curses.doupdate()

    def handle_event(self, event: Event) -> None:
        if event is Event.REDRAW:
            self._redraw()
        elif event in (Event.MOVE_UP, Event.MOVE_DOWN):
            old_box = self.curr_box()
            if old_box is not None:
                self.unfocus(old_box)
            new_box = self.prev_box() if event is Event.MOVE_UP else self.next_box()
            if new_box is not None:
                self.focus(new_box)
            self._redraw()
        elif event is Event.INTERACT:
            box = self.curr_box()
            if box is not None:
                self.interact(box)
        elif event in (Event.MOVE_LEFT, Event.MOVE_RIGHT):
            box = self.curr_box()
            if box is not None:
                if event is Event.MOVE_LEFT:
                    self.decrement(box)
                else:
                    self.increment(box)
            self._redraw()

    @abstractmethod
    def generate(self) -> Optional[Box]:
        """Build the menu's UI tree."""

    @abstractmethod
    def curr_box(self) -> Optional[Box]:
        """Return the focused box, if any."""

    @abstractmethod
    def next_box(self) -> Optional[Box]:
        """Move focus forward and return the newly focused box."""

    @abstractmethod
    def prev_box(self) -> Optional[Box]:
        """Move focus backward and return the newly focused box."""

    @abstractmethod
    def focus(self, box: Box) -> None:
        """Show that ``box`` has gained focus."""

    @abstractmethod
    def unfocus(self, box: Box) -> None:
        """Show that ``box`` has lost focus."""

    @abstractmethod
    def interact(self, box: Box) -> None:
        """React to the user activating ``box``."""

    @abstractmethod
    def increment(self, box: Box) -> None:
        """Raise the value held by ``box``."""

    @abstractmethod
    def decrement(self, box: Box) -> None:
        """Lower the value held by ``box``."""