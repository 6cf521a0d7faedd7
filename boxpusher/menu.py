"""Title menu: room selection and the interleave option."""

from __future__ import annotations

from .man import joystick_delta

__all__ = [
    "MUSTWATCH_STATS",
    "MUSTWATCH_COPYRIGHT",
    "MUSTWATCH_MENU",
    "MENU_LINES",
    "MenuState",
    "set_bounds",
    "room_label",
]

MUSTWATCH_STATS = 0x200
MUSTWATCH_COPYRIGHT = 50
MUSTWATCH_MENU = 0x400

MENU_LINES = 2

_LINE_ROOM = 0
_RESET_GAME_FRAME = 16


def set_bounds(value: int, maximum: int) -> int:
    """Wrap ``value`` into 0..``maximum``: below zero gives ``maximum``, above gives 0."""
    if value < 0:
        return maximum
    if value > maximum:
        return 0
    return value


def room_label(room: int) -> str:
    """Three-character room number as shown on the menu."""
    if room < 0:
        raise ValueError(f"room number must not be negative: {room}")
    hundreds, rest = divmod(room, 100)
    tens, units = divmod(rest, 10)
    return "".join(chr(ord("0") + d) for d in (hundreds, tens, units))


class MenuState:
    """Menu selection driven by joystick direction bits."""

    def __init__(self, room_count: int) -> None:
        if room_count < 1:
            raise ValueError("there must be at least one room")
        self.room_count = room_count
        self.room = 0
        self.menu_line = 0
        self.enable_icc = True
        self.wait_release = True
        self.game_frame = _RESET_GAME_FRAME
        self.must_watch = MUSTWATCH_MENU

    def _reset_mode(self) -> None:
        self.game_frame = _RESET_GAME_FRAME
        self.wait_release = True
        self.must_watch = MUSTWATCH_MENU

    def handle_joystick(self, bits: int) -> bool:
        """Apply one frame of pushed direction bits; True if the selection changed.

        After each change the stick must be centred before the next one.
        """
        if self.wait_release:
            if bits == 0:
                self.wait_release = False
            return False

        dx, dy = joystick_delta(bits)
        if dy:
            self.menu_line = set_bounds(self.menu_line + dy, MENU_LINES - 1)
        elif dx:
            if self.menu_line == _LINE_ROOM:
                self.room = set_bounds(self.room + dx, self.room_count - 1)
            else:
                self.enable_icc = not self.enable_icc
        else:
            return False

        self._reset_mode()
        return True

    @property
    def label(self) -> str:
        """Text shown for the selected menu line."""
        if self.menu_line == _LINE_ROOM:
            return room_label(self.room)
        return "ON>>>>" if self.enable_icc else "OFF>>>"