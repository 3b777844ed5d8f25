"""The game's title drawn as ASCII art."""

from __future__ import annotations

from typing import Any

from ..colorable import Color
from .box import Dim, Property
from .text_box import TextBox

LOGO: tuple[str, ...] = (
    " _____                                _                              _  "
    "  ",
    "|  _  |                              (_)                            | | "
    "  ",
    "| | | |_   _____ _ __ ___ _ __   __ _ _ _ __   ___  ___ _ __ ___  __| | "
    "  ",
    "| | | \\ \\ / / _ \\ '__/ _ \\ '_ \\ / _` | | '_ \\ / _ \\/ _ \\ '__/ _ "
    "\\/ _` |   ",
    "\\ \\_/ /\\ V /  __/ | |  __/ | | | (_| | | | | |  __/  __/ | |  __/ "
    "(_| |   ",
    " \\___/  \\_/ \\___|_|  \\___|_| |_|\\__, |_|_| |_|\\___|\\___|_|  "
    "\\___|\\__,_|   ",
    "                                 __/ |                                  "
    "  ",
    "                                |___/                                   "
    "  ",
)


class Logo(TextBox):
    """A text box that always shows the fixed logo.

    Padding is not taken into account; wrap the element in a Box for that.
    """

    logo_width = 70
    logo_height = len(LOGO)

    def __init__(
        self,
        foreground: Color = Color.WHITE,
        background: Color = Color.TRANSPARENT,
    ) -> None:
        super().__init__("")
        self.propc(Property.FOREGROUND, foreground)
        self.propc(Property.BACKGROUND, background)

    def _split(self, max_width: int) -> list[str]:
        return list(LOGO)

    def show(self, window: Any, x: int, y: int, max_width: int, max_height: int) -> None:
        self.lines = self._split(max_width)
        super().show(window, x, y, max_width, max_height)

    def size(self, max_width: int, max_height: int) -> Dim:
        return (self.logo_width, self.logo_height)