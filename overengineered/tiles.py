"""Single-character coloured cells drawn by the game scene."""

from __future__ import annotations

from .colorable import Color, Colorable


class Tile(Colorable):
    """A colourable entity printed with a single character."""

    def character(self) -> str:
        return " "

    def _key(self) -> tuple[str, Color, Color]:
        return (self.character(), self.background(), self.foreground())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tile):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())


class EntityTile(Tile):
    """A tile with its own character and foreground; the background is transparent."""

    def __init__(self, character: str = " ", foreground: Color = Color.TRANSPARENT):
        self._character = character
        self._foreground = foreground

    def character(self) -> str:
        return self._character

    def foreground(self) -> Color:
        return self._foreground

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._character!r}, {self._foreground!r})"


class BlockTile(EntityTile):
    """A tile with its own character, foreground and background."""

    def __init__(
        self,
        character: str = " ",
        foreground: Color = Color.TRANSPARENT,
        background: Color = Color.TRANSPARENT,
    ):
        super().__init__(character, foreground)
        self._background = background

    def background(self) -> Color:
        return self._background

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self._character!r}, "
            f"{self._foreground!r}, {self._background!r})"
        )