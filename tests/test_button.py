from overengineered.colorable import Color
from overengineered.ui.box import Box, Property
from overengineered.ui.button import Button


def test_size_adds_side_margins_and_two_rows():
    button = Button("Play")
    width, height = button.size(80, 25)
    assert width == len("Play") + 2 * Button.side_padding
    assert height == 3


def test_vertical_padding_grows_height():
    plain = Button("Settings")
    padded = Button("Settings")
    padded.props(Property.PADDING_BOTTOM, 1)
    padded.props(Property.PADDING_TOP, 2)
    assert padded.size(80, 25)[1] == plain.size(80, 25)[1] + 3
    assert padded.size(80, 25)[0] == plain.size(80, 25)[0]


def test_horizontal_padding_grows_width():
    plain = Button("Quit")
    padded = Button("Quit")
    padded.props(Property.PADDING_LEFT, 2)
    padded.props(Property.PADDING_RIGHT, 1)
    assert padded.size(80, 25)[0] == plain.size(80, 25)[0] + 3


def test_small_height_still_shows_the_text():
    button = Button("Quit")
    assert button.size(80, 5) == button.size(80, 25)
    assert button.lines == ["Quit"]


def test_wrapped_text_height_matches_lines():
    button = Button("hello world")
    width, height = button.size(15, 25)
    assert len(button.lines) > 1
    assert height == len(button.lines) + 2
    assert width <= 15


def test_show_without_window_lays_out_text():
    button = Button("Back")
    button.show(None, 0, 0, 80, 25)
    assert button.lines == ["Back"]


def test_colours_can_be_set_and_appended_to_box():
    parent = Box()
    button = parent.append(Button("Save"))
    button.propc(Property.BACKGROUND, Color.RED)
    button.propc(Property.FOREGROUND, Color.BLACK)
    assert parent.child(0) is button
    assert button.background() == Color.RED
    assert button.foreground() == Color.BLACK