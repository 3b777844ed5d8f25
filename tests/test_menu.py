import pytest

from overengineered.colorable import Color
from overengineered.drawable import Event, Kind
from overengineered.menu import Menu
from overengineered.screen import Screen
from overengineered.ui.box import Box, Property
from overengineered.ui.text_box import TextBox


class ListMenu(Menu):
    def __init__(self, labels=("a", "b", "c"), empty=False):
        super().__init__(None)
        self.labels = labels
        self.empty = empty
        self.focused = 0
        self.clicked = None
        self.generated = 0
        self.value = 0

    def generate(self):
        self.generated += 1
        if self.empty:
            return None
        root = Box()
        for label in self.labels:
            root.append(TextBox(label))
        return root

    def curr_box(self):
        return self.root.child(self.focused)

    def next_box(self):
        self.focused = (self.focused + 1) % len(self.labels)
        return self.curr_box()

    def prev_box(self):
        self.focused = (self.focused - 1) % len(self.labels)
        return self.curr_box()

    def focus(self, box):
        box.propc(Property.BACKGROUND, Color.RED)

    def unfocus(self, box):
        box.propc(Property.BACKGROUND, Color.TRANSPARENT)

    def interact(self, box):
        self.clicked = self.focused

    def increment(self, box):
        self.value += 1

    def decrement(self, box):
        self.value -= 1

    def is_over(self):
        return self.clicked is not None


def backgrounds(menu):
    return [Box.background(child) for child in menu.root.children]


def test_kind_and_dimensions():
    menu = ListMenu()
    assert Menu.kind(menu) is Kind.MENU
    assert (menu.width, menu.height) == (Screen.columns, Screen.lines)


def test_menu_is_abstract():
    with pytest.raises(TypeError):
        Menu(None)


def test_first_redraw_generates_and_focuses():
    menu = ListMenu()
    Menu.handle_event(menu, Event.REDRAW)
    Menu.handle_event(menu, Event.REDRAW)
    assert menu.generated == 1
    assert backgrounds(menu) == [Color.RED, Color.TRANSPARENT, Color.TRANSPARENT]


def test_empty_generation_raises():
    menu = ListMenu(empty=True)
    with pytest.raises(RuntimeError):
        Menu.handle_event(menu, Event.REDRAW)


def test_move_down_moves_focus():
    menu = ListMenu()
    Menu.handle_event(menu, Event.REDRAW)
    Menu.handle_event(menu, Event.MOVE_DOWN)
    assert menu.focused == 1
    assert backgrounds(menu) == [Color.TRANSPARENT, Color.RED, Color.TRANSPARENT]


def test_move_up_wraps_to_last():
    menu = ListMenu()
    Menu.handle_event(menu, Event.REDRAW)
    Menu.handle_event(menu, Event.MOVE_UP)
    assert menu.focused == 2
    assert backgrounds(menu) == [Color.TRANSPARENT, Color.TRANSPARENT, Color.RED]


def test_interact_ends_menu_on_focused_item():
    menu = ListMenu()
    Menu.handle_event(menu, Event.REDRAW)
    assert not menu.is_over()
    Menu.handle_event(menu, Event.MOVE_DOWN)
    Menu.handle_event(menu, Event.INTERACT)
    assert menu.is_over()
    assert menu.clicked == 1


def test_left_and_right_change_value():
    menu = ListMenu()
    Menu.handle_event(menu, Event.REDRAW)
    Menu.handle_event(menu, Event.MOVE_RIGHT)
    Menu.handle_event(menu, Event.MOVE_RIGHT)
    Menu.handle_event(menu, Event.MOVE_LEFT)
    assert menu.value == 1
    assert menu.generated == 1