"""Glyph builders: shifted box frames and masked pill shapes."""

from __future__ import annotations

from typing import Sequence

__all__ = [
    "CHAR_HEIGHT",
    "CHAR_HEIGHT_HALF",
    "BOX_SHAPE",
    "vertical_shifts",
    "horizontal_shifts",
    "pill_glyph",
    "small_pill_glyph",
]

CHAR_HEIGHT = 27
CHAR_HEIGHT_HALF = 18

_LINE = 3
_VERTICAL_STEPS = 9
_HORIZONTAL_STEPS = 5
_PIXELS = 5

BOX_SHAPE: tuple[int, ...] = (
    0b00011111, 0b00011111, 0b00011111,
    0b00011111, 0b00000000, 0b00010001,
    0b00011111, 0b00000000, 0b00010000,
    0b00011111, 0b00000000, 0b00010001,
    0b00011111, 0b00000000, 0b00010000,
    0b00011111, 0b00000000, 0b00010001,
    0b00011111, 0b00000000, 0b00010000,
    0b00011111, 0b00000000, 0b00010001,
    0b00011111, 0b00000000, 0b00011111,
)

_PILL_ROWS = (0x00, 0x00, 0x44, 0x4E, 0x0E, 0x0E, 0x04, 0x00, 0x00)

_SMALL_PILL_BYTES = (
    0x00, 0x00, 0x00,
    0x00, 0x03, 0x03,
    0x00, 0x48, 0x48,
    0x00, 0x48, 0x48,
    0x00, 0x00, 0x00,
    0x00, 0x00, 0x00,
)


def _check_shape(shape: Sequence[int]) -> tuple[int, ...]:
    data = tuple(shape)
    if len(data) != CHAR_HEIGHT:
        raise ValueError(f"shape must hold {CHAR_HEIGHT} bytes, got {len(data)}")
    return data


def vertical_shifts(shape: Sequence[int]) -> list[tuple[tuple[int, ...], tuple[int, ...]]]:
    """Return the nine (top, bottom) cell pairs of ``shape`` moved down 0..8 lines."""
    data = _check_shape(shape)
    pairs = []
    for step in range(_VERTICAL_STEPS):
        cut = CHAR_HEIGHT - step * _LINE
        top = (0,) * (step * _LINE) + data[:cut]
        bottom = data[cut:] + (0,) * cut
        pairs.append((top, bottom))
    return pairs


def horizontal_shifts(shape: Sequence[int]) -> list[tuple[tuple[int, ...], tuple[int, ...]]]:
    """Return the five (left, right) cell pairs of ``shape`` moved right 0..4 pixels."""
    data = _check_shape(shape)
    pairs = []
    for step in range(_HORIZONTAL_STEPS):
        low = (1 << step) - 1
        left = tuple(b >> step for b in data)
        right = tuple((b & low) << (_PIXELS - step) for b in data)
        pairs.append((left, right))
    return pairs


def _channel_mask(bit: int) -> int:
    return (bit | bit << 1 | bit << 2 | bit << 3 | bit << 4 | 0xC0) & 0xFF


def _check_mask(mask: int) -> None:
    if not 0 <= mask <= 7:
        raise ValueError(f"colour mask must be 0..7, got {mask}")


def _masked(data: Sequence[int], mask: int) -> tuple[int, ...]:
    _check_mask(mask)
    masks = tuple(_channel_mask((mask >> (2 - n)) & 1) for n in range(_LINE))
    return tuple(b & masks[i % _LINE] for i, b in enumerate(data))


def pill_glyph(mask: int) -> tuple[int, ...]:
    """Large pill glyph with the red/green/blue lines enabled by bits 2/1/0 of ``mask``."""
    data = [row for row in _PILL_ROWS for _ in range(_LINE)]
    return _masked(data, mask)


def small_pill_glyph(mask: int) -> tuple[int, ...]:
    """Half-height pill glyph masked the same way as :func:`pill_glyph`."""
    return _masked(_SMALL_PILL_BYTES, mask)