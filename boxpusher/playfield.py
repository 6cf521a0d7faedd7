"""Playfield buffers for the arena: six PF columns and single-pixel plotting."""

from __future__ import annotations

__all__ = [
    "SCORE_SCANLINES",
    "ROW_WIDTH",
    "PF_COLUMNS",
    "Playfield",
    "reverse_bits",
    "roll_order",
]

SCORE_SCANLINES = 21
ROW_WIDTH = 40
PF_COLUMNS = 6

_HALF_WIDTH = ROW_WIDTH // 2


def _reverse(value: int) -> int:
    result = 0
    for bit in range(8):
        if value >> bit & 1:
            result |= 1 << (7 - bit)
    return result


_BIT_REVERSE = bytes(_reverse(v) for v in range(256))

_ROLL_DIRECT: tuple[tuple[int, ...], ...] = (
    tuple(base + offset for base in range(0, 27, 3) for offset in (2, 0, 1)),
    tuple(range(27)),
    tuple(base + offset for base in range(0, 27, 3) for offset in (1, 2, 0)),
)


def reverse_bits(value: int) -> int:
    """Return the byte ``value`` with its bit order reversed."""
    if not 0 <= value <= 0xFF:
        raise ValueError(f"not a byte: {value}")
    return _BIT_REVERSE[value]


def roll_order(roller: int) -> tuple[int, ...]:
    """Order in which the 27 glyph lines are read for interleave phase ``roller``."""
    if not 0 <= roller < len(_ROLL_DIRECT):
        raise ValueError(f"roller must be 0..2, got {roller}")
    return _ROLL_DIRECT[roller]


class Playfield:
    """Six playfield columns (PF0..PF2 left, PF0..PF2 right), one byte per scanline."""

    def __init__(self, scanlines: int) -> None:
        if scanlines <= SCORE_SCANLINES + 3:
            raise ValueError(f"too few scanlines for an arena: {scanlines}")
        self.scanlines = scanlines
        self._columns = [bytearray(scanlines) for _ in range(PF_COLUMNS)]

    def draw_bit(self, x: int, y: int) -> bool:
        """Set the pixel at column ``x``, trixel row ``y``; False if it is off the arena."""
        line = y * 3 + SCORE_SCANLINES
        if line >= self.scanlines - 3 or line < SCORE_SCANLINES:
            return False
        if not 0 <= x < ROW_WIDTH:
            return False

        col = x
        column = 0
        if col >= _HALF_WIDTH:
            col -= _HALF_WIDTH
            column = 3
        column += (col + 4) >> 3

        if col < 4:
            shift = col + 4
        elif col < 12:
            shift = 11 - col
        else:
            shift = col - 12
        bit = 1 << shift

        buffer = self._columns[column]
        for offset in range(3):
            buffer[line + offset] |= bit
        return True

    def column(self, index: int) -> bytes:
        """Contents of playfield column ``index`` (0..5)."""
        if not 0 <= index < PF_COLUMNS:
            raise IndexError(f"playfield column out of range: {index}")
        return bytes(self._columns[index])