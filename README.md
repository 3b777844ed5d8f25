# overengineered

The engine layer of a terminal side-scrolling arcade game. It draws with
curses and is made of these modules:

- `overengineered.colorable` holds the `Color` enum, an `IntEnum` with the 256
  terminal palette colours (`Color.BLACK` is 0 and `Color.GREY93` is 255) plus
  `Color.TRANSPARENT` (-1). It also provides `color_to_short`, `short_to_color`
  and the `Colorable` base class, whose foreground is white and whose
  background is transparent.
- `overengineered.tiles` provides `Tile`, `EntityTile` and `BlockTile`. These
  are single-character cells. Two tiles compare equal when their character,
  foreground and background are all the same.
- `overengineered.utils` has small helpers:
  - `digits(n)` counts the digits of a positive number.
  - `digitize(n)` returns the digit character for 0 to 9 and `'-'` above 9.
  - `stringify(n, prefix)` returns the prefix followed by the number.
  - `leftpad(n, text)` pads the text on the left with spaces. A text longer than
    `n` is cut to `n - 1` characters.
- `overengineered.drawable` provides the `Drawable` base class and its `Kind`
  and `Event` enums.
- `overengineered.audio` provides `Audio`, which loops a wav file in a
  background thread using `aplay` or `afplay`, whichever is found first on the
  PATH.
  - `play(path)` starts the loop. It raises `NoToolError` when no player is
    found and `InvalidFileError` when the file cannot be read. Both are
    subclasses of `AudioError`.
  - `status()` returns an `AudioState`.
  - `stop()` ends playback.
  - An `Audio` object can be used as a context manager, which stops playback on
    exit.
- `overengineered.screen` provides `Screen`, a centred, bordered 80×25 curses
  container that holds one drawable at a time.
  - `open()` sets up the terminal and raises `ScreenError` when the terminal is
    too small or cannot be set up.
  - `set_content(factory, *args)` replaces the content, `send_event(event)`
    forwards an event to it, and `state()` and `is_over()` report on it.
  - `reposition()` centres the box again and `close()` gives the terminal back.
  - The module also has `color_pair`, `start_color` and `end_color`. Colour
    pairs are allocated lazily and cached by `ColorPairs`.
- `overengineered.ui` holds the layout elements:
  - `box.Box`, configured through `box.Property`.
  - `center.Center`, `strict_box.StrictBox` and `arrow.Arrow`.
  - `text_box.TextBox`, which wraps its text with `text_box.split_content`.
  - `button.Button` and `logo.Logo`.

  Boxes support paddings, horizontal direction, float-right and horizontal
  centring. Passing `None` as the window to `show` runs the layout without
  drawing anything.
- `overengineered.menu` provides `Menu`, an abstract base class for menus
  built from UI boxes. It handles redraw, focus movement, interaction and
  increment or decrement events. Subclasses implement `generate`, `curr_box`,
  `next_box`, `prev_box`, `focus`, `unfocus`, `interact`, `increment` and
  `decrement`.

## Install

```
pip install .
```

## Example

Word wrapping and layout sizes can be computed without a terminal:

```python
from overengineered.ui.box import Box, Property
from overengineered.ui.text_box import TextBox, split_content

split_content("this is a test line", 12)   # ['this is a t-', 'est line']

root = Box()
root.props(Property.PADDING_LEFT, 2)
root.append(TextBox("hello"))
root.size(80, 25)                           # (7, 1)
```

## What it does not include

This package is the engine only. It does not include any of the following:

- a game loop or a command to start a game;
- a game world, player or enemies;
- rendering of the game scene or a HUD;
- concrete menus such as a main menu, settings, hero selection or a
  scoreboard;
- storage for settings or scores.

`Menu` and `Drawable` are the building blocks for such pieces.

## Tests

```
pip install .[test]
pytest
```