import pytest

from overengineered.ui.box import Property
from overengineered.ui.text_box import TextBox, split_content

SENTENCE = "this is a test line"


def test_does_not_split_a_short_line():
    lines = split_content(SENTENCE, 100)
    assert lines == [SENTENCE]


def test_splits_at_whitespace():
    lines = split_content(SENTENCE, 10)
    assert len(lines) == 2
    assert lines[0] == "this is a "


def test_splits_across_a_word():
    lines = split_content(SENTENCE, 12)
    assert len(lines) == 2
    assert len(lines[0]) <= 12
    assert len(lines[1]) <= 12
    assert lines[0] == "this is a t-"
    assert lines[1] == "est line"


def test_zero_width_gives_no_lines():
    assert split_content(SENTENCE, 0) == []


@pytest.mark.parametrize("width", range(2, 25))
def test_lines_never_exceed_width(width):
    lines = split_content(SENTENCE, width)
    assert lines
    assert all(len(line) <= width for line in lines)


def test_width_one_terminates():
    lines = split_content("abc", 1)
    assert all(len(line) <= 1 for line in lines)


def test_size_of_single_line():
    tb = TextBox(SENTENCE)
    assert tb.size(100, 100) == (len(SENTENCE), 1)


def test_size_caps_height():
    tb = TextBox(SENTENCE)
    assert len(split_content(SENTENCE, 5)) > 2
    assert tb.size(5, 2)[1] == 2


def test_float_right_takes_full_width():
    tb = TextBox(SENTENCE)
    tb.propb(Property.FLOAT_RIGHT, True)
    assert tb.size(100, 100)[0] == 100


def test_empty_text_box_has_no_width():
    assert TextBox().size(100, 100)[0] == 0


def test_changing_content_resplits():
    tb = TextBox("ab")
    assert tb.size(100, 100)[0] == len("ab")
    tb.content = SENTENCE
    assert tb.size(100, 100)[0] == len(SENTENCE)


def test_show_without_window_updates_lines():
    tb = TextBox(SENTENCE)
    tb.show(None, 0, 0, 12, 10)
    assert tb.lines == split_content(SENTENCE, 12)