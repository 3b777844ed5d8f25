"""The terminal screen: a centred, bordered box holding the current content."""

from __future__ import annotations

import curses
import locale
from typing import Any, Callable

from .colorable import Color
from .drawable import Drawable, Event, Kind


class ScreenError(Exception):
    """The terminal cannot be set up or is too small for the game."""


class ColorPairs:
    """Allocates terminal colour pairs on demand and caches them."""

    def __init__(
        self,
        init_pair: Callable[[int, int, int], Any] | None = None,
        attr: Callable[[int], int] | None = None,
    ):
        self._init_pair = init_pair if init_pair is not None else curses.init_pair
        self._attr = attr if attr is not None else curses.color_pair
        self._pairs: dict[tuple[int, int], int] = {}
        self._count = 0

    def pair(self, fg: int, bg: int) -> int:
        """Return the attribute for drawing ``fg`` on ``bg``.

        A transparent background is drawn as black.
        """
        fg, bg = int(fg), int(bg)
        if bg == Color.TRANSPARENT:
            bg = int(Color.BLACK)
        key = (fg, bg)
        if key not in self._pairs:
            self._count += 1
            self._init_pair(self._count, fg, bg)
            self._pairs[key] = self._attr(self._count)
        return self._pairs[key]

    def reset(self) -> None:
        """Forget cached pairs; later requests allocate them again."""
        self._pairs.clear()


_PAIRS = ColorPairs()


def color_pair(fg: int, bg: int) -> int:
    """Return the shared colour-pair attribute for ``fg`` on ``bg``."""
    return _PAIRS.pair(fg, bg)


def start_color(window: Any, pair: int) -> None:
    if pair != -1:
        window.attron(pair)


def end_color(window: Any, pair: int) -> None:
    if pair != -1:
        window.attroff(pair)


class Screen:
    """Wraps the terminal in a bordered box of ``columns`` x ``lines`` cells.

    The box is centred and moved on resizes; the screen also owns the
    drawable currently shown and forwards events to it.
    """

    columns = 80
    lines = 25

    def __init__(self, terminal: Any = curses):
        self._terminal = terminal
        self._stdscreen: Any = None
        self._outer_box: Any = None
        self._container: Any = None
        self._content: Drawable | None = None
        self.x = 0
        self.y = 0
        _PAIRS.reset()

    @property
    def content(self) -> Drawable | None:
        return self._content

    @property
    def container(self) -> Any:
        return self._container

    def state(self) -> Kind:
        """What is shown: a menu, the game or nothing."""
        if self._content is None:
            return Kind.NONE
        return self._content.kind()

    def set_content(self, factory: Callable[..., Drawable], *args: Any) -> Drawable:
        """Replace the content with ``factory(container, *args)`` and draw it."""
        self._clear_content()
        self._content = factory(self._container, *args)
        self.send_event(Event.REDRAW)
        return self._content

    def is_over(self) -> bool:
        if self._content is None:
            return False
        return self._content.is_over()

    def send_event(self, event: Event) -> None:
        if self._content is not None:
            self._content.handle_event(event)

    def open(self) -> None:
        """Set up the terminal and draw the box; raises ScreenError on failure."""
        try:
            locale.setlocale(locale.LC_ALL, "")
        except locale.Error:
            pass
        try:
            self._stdscreen = self._terminal.initscr()
            self._terminal.start_color()
        except curses.error as err:
            raise ScreenError("could not initialise the terminal") from err
        if self._stdscreen is None:
            raise ScreenError("could not initialise the terminal")

        self._terminal.use_default_colors()
        self._terminal.noecho()
        self._stdscreen.nodelay(True)
        self._terminal.raw()
        try:
            self._terminal.curs_set(0)
        except curses.error:
            pass
        self._stdscreen.keypad(True)

        self._require_fit()
        self._outer_box = self._terminal.newwin(
            self.lines + 2, self.columns + 2, self.y, self.x
        )
        self._container = self._terminal.newwin(
            self.lines, self.columns, self.y + 1, self.x + 1
        )
        self.reposition()

    def reposition(self) -> None:
        """Centre the box again, e.g. after a resize; raises ScreenError if it no longer fits."""
        self._require_fit()
        self._stdscreen.erase()
        self._stdscreen.refresh()

        self._outer_box.mvwin(self.y, self.x)
        self._outer_box.box()
        self._outer_box.noutrefresh()

        self._container.mvwin(self.y + 1, self.x + 1)
        self.send_event(Event.REDRAW)
        # keep the container drawn above the border window
        self._container.redrawwin()
        self._container.noutrefresh()
        self._terminal.doupdate()

    def close(self) -> None:
        """Give the terminal back, keeping the current content."""
        if self._stdscreen is not None:
            self._terminal.endwin()
        self._stdscreen = None
        self._outer_box = None
        self._container = None

    def __enter__(self) -> Screen:
        self.open()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
        self._clear_content()

    def _can_fit(self) -> bool:
        terminal_lines, terminal_cols = self._stdscreen.getmaxyx()
        if terminal_cols < self.columns or terminal_lines < self.lines:
            return False
        self.x = (terminal_cols - self.columns) // 2
        self.y = (terminal_lines - self.lines) // 2
        return True

    def _require_fit(self) -> None:
        if not self._can_fit():
            raise ScreenError(
                f"the terminal must be at least {self.columns}x{self.lines}"
            )

    def _clear_content(self) -> None:
        self._content = None
        if self._container is not None:
            self._container.erase()
            self._container.refresh()