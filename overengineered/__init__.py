"""Terminal game engine: colours, tiles, UI boxes, a menu base, screen and audio."""

__version__ = "0.1.0"