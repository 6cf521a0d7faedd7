"""Board storage and detection of boxes that can no longer be moved to a goal."""

from __future__ import annotations

from typing import Iterable, Optional

from .attribute import Att, CharName, ObjectType, attributes_of, char_type

__all__ = ["Board", "is_wall", "is_goal", "is_box", "check_deadlocks"]

_CHAR_MASK = 0x7F


class Board:
    """A grid of character codes stored row by row."""

    def __init__(self, width: int, depth: int, cells: Optional[Iterable[int]] = None) -> None:
        if width <= 0 or depth <= 0:
            raise ValueError("board dimensions must be positive")
        self.width = width
        self.depth = depth
        size = width * depth
        if cells is None:
            self.cells = bytearray(size)
        else:
            self.cells = bytearray(cells)
            if len(self.cells) != size:
                raise ValueError(f"board needs {size} cells, got {len(self.cells)}")

    def _check(self, position: int) -> None:
        if not 0 <= position < len(self.cells):
            raise IndexError(f"board position out of range: {position}")

    def get(self, position: int) -> int:
        """Character at flat ``position``."""
        self._check(position)
        return self.cells[position]

    def set(self, position: int, ch: int) -> None:
        """Store ``ch`` at flat ``position``."""
        self._check(position)
        self.cells[position] = ch

    def index(self, col: int, row: int) -> int:
        """Flat position of column ``col`` in row ``row``."""
        if not (0 <= col < self.width and 0 <= row < self.depth):
            raise IndexError(f"cell ({col}, {row}) outside board")
        return row * self.width + col


def is_wall(ch: int) -> bool:
    """True for a brick wall."""
    return ch == CharName.BRICKWALL


def is_goal(ch: int) -> bool:
    """True for anything that holds a target."""
    return bool(attributes_of(ch & _CHAR_MASK) & Att.TARGETLIKE)


def is_box(ch: int) -> bool:
    """True for a box that is not sitting on a target."""
    ch &= _CHAR_MASK
    if char_type(ch) in (ObjectType.BOX_LOCKED, ObjectType.BOX_CORRECT):
        return False
    return bool(attributes_of(ch) & Att.BOX)


def check_deadlocks(board: Board, position: int) -> bool:
    """Mark deadlocked boxes around the box at ``position``; True if any were found."""
    row = board.width
    found = False

    up = is_wall(board.get(position - row))
    down = is_wall(board.get(position + row))
    left = is_wall(board.get(position - 1))
    right = is_wall(board.get(position + 1))
    if (up or down) and (left or right):
        board.set(position, CharName.BOX_DEADLOCK)
        found = True

    block = (position + row, position + 1, position + row + 1)
    if all(is_box(board.get(p)) for p in block):
        for p in (*block, position):
            board.set(p, CharName.BOX_DEADLOCK)
        found = True

    return found