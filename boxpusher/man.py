"""Joystick directions and the movement tables used for the man."""

from __future__ import annotations

from enum import IntEnum, IntFlag

__all__ = [
    "Direction",
    "FaceDirection",
    "JOY_DIRECTIONS",
    "joystick_delta",
    "row_offset",
]


class Direction(IntFlag):
    """Joystick direction bits (set when pushed)."""

    UP = 1
    DOWN = 2
    LEFT = 4
    RIGHT = 8


class FaceDirection(IntEnum):
    """Which way the man faces horizontally."""

    LEFT = -1
    RIGHT = 1


JOY_DIRECTIONS = (Direction.LEFT, Direction.RIGHT, Direction.UP, Direction.DOWN)

_X_INC = (0, 0, 0, 0, -1, -1, -1, 0, 1, 1, 1, 0, 0, 0, 0, 0)
_Y_INC = (0, -1, 1, 0, 0, -1, 1, 0, 0, -1, 1, 0, 0, 0, 0, 0)


def joystick_delta(bits: int) -> tuple[int, int]:
    """Return (dx, dy) for a combination of :class:`Direction` bits."""
    if not 0 <= bits <= 15:
        raise ValueError(f"joystick bits out of range: {bits}")
    return _X_INC[bits], _Y_INC[bits]


def row_offset(direction: Direction, row_width: int) -> int:
    """Board offset of one step in a single ``direction`` on rows ``row_width`` wide."""
    offsets = {
        Direction.LEFT: -1,
        Direction.RIGHT: 1,
        Direction.UP: -row_width,
        Direction.DOWN: row_width,
    }
    try:
        return offsets[Direction(direction)]
    except (KeyError, ValueError):
        raise ValueError(f"not a single direction: {direction!r}") from None