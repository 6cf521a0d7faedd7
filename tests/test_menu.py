import pytest

from boxpusher.man import Direction
from boxpusher.menu import MENU_LINES, MenuState, room_label, set_bounds


def test_set_bounds_wraps():
    assert set_bounds(-1, 5) == 5
    assert set_bounds(6, 5) == 0
    assert set_bounds(3, 5) == 3
    assert set_bounds(0, 0) == 0


@pytest.mark.parametrize("room, text", [(0, "000"), (7, "007"), (45, "045"), (123, "123")])
def test_room_label(room, text):
    assert room_label(room) == text


def test_room_label_negative():
    with pytest.raises(ValueError):
        room_label(-1)


def test_needs_rooms():
    with pytest.raises(ValueError):
        MenuState(0)


def _ready(count=5):
    menu = MenuState(count)
    assert menu.handle_joystick(0) is False
    assert menu.wait_release is False
    return menu


def test_ignores_input_until_centred():
    menu = MenuState(5)
    assert menu.handle_joystick(Direction.RIGHT) is False
    assert menu.room == 0


def test_right_selects_next_room():
    menu = _ready()
    assert menu.handle_joystick(Direction.RIGHT) is True
    assert menu.room == 1
    assert menu.wait_release is True
    assert menu.label == "001"


def test_left_wraps_to_last_room():
    menu = _ready(5)
    menu.handle_joystick(Direction.LEFT)
    assert menu.room == 4


def test_right_wraps_to_first_room():
    menu = _ready(2)
    menu.handle_joystick(Direction.RIGHT)
    menu.handle_joystick(0)
    menu.handle_joystick(Direction.RIGHT)
    assert menu.room == 0


def test_down_moves_line_and_toggles_option():
    menu = _ready()
    menu.handle_joystick(Direction.DOWN)
    assert menu.menu_line == 1
    menu.handle_joystick(0)
    menu.handle_joystick(Direction.RIGHT)
    assert menu.enable_icc is False
    assert menu.label == "OFF>>>"
    assert menu.room == 0


def test_up_wraps_menu_line():
    menu = _ready()
    menu.handle_joystick(Direction.UP)
    assert menu.menu_line == MENU_LINES - 1


def test_centred_stick_changes_nothing():
    menu = _ready()
    assert menu.handle_joystick(0) is False
    assert (menu.room, menu.menu_line, menu.enable_icc) == (0, 0, True)