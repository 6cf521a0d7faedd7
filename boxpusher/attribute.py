"""Board character names, object types and the attribute bits attached to them."""

from __future__ import annotations

from enum import IntEnum, IntFlag

__all__ = [
    "ObjectType",
    "CharName",
    "Att",
    "CHAR_TABLE_SIZE",
    "char_type",
    "attributes_of",
    "has_attribute",
]

CHAR_TABLE_SIZE = 128


class ObjectType(IntEnum):
    """Kinds of object a board character can represent."""

    SPACE = 0
    BRICKWALL = 1
    STEELWALL = 2
    BOX = 3
    MAN = 4
    PILL1 = 5
    PILL2 = 6
    BOX_LTOR_LHS = 7
    BOX_LTOR_RHS = 8
    BOX_RTOL_LHS = 9
    BOX_RTOL_RHS = 10
    BOX_UTOD_TOP = 11
    BOX_UTOD_BOT = 12
    BOX_DTOU_TOP = 13
    BOX_DTOU_BOT = 14
    BOX_LTOR_LEFT = 15
    BOX_LTOR_RIGHT = 16
    BOX_RTOL_LEFT = 17
    BOX_RTOL_RIGHT = 18
    BOX_LOCKED = 19
    BOX_CORRECT = 20
    BOX_DEADLOCKED = 21


class CharName(IntEnum):
    """Character codes stored in the board."""

    BLANK = 0
    BRICKWALL = 1
    STEELWALL = 2
    PILL1 = 3
    PILL2 = 4
    BOX = 5
    MAN = 6
    BOX_UTOD_TOP_0 = 7
    BOX_UTOD_TOP_1 = 8
    BOX_UTOD_TOP_2 = 9
    BOX_UTOD_TOP_3 = 10
    BOX_UTOD_TOP_4 = 11
    BOX_UTOD_TOP_5 = 12
    BOX_UTOD_TOP_6 = 13
    BOX_UTOD_TOP_7 = 14
    BOX_UTOD_TOP_8 = 15
    BOX_UTOD_BOTTOM_0 = 16
    BOX_UTOD_BOTTOM_1 = 17
    BOX_UTOD_BOTTOM_2 = 18
    BOX_UTOD_BOTTOM_3 = 19
    BOX_UTOD_BOTTOM_4 = 20
    BOX_UTOD_BOTTOM_5 = 21
    BOX_UTOD_BOTTOM_6 = 22
    BOX_UTOD_BOTTOM_7 = 23
    BOX_UTOD_BOTTOM_8 = 24
    BOX_LTOR_LEFT_0 = 25
    BOX_LTOR_LEFT_1 = 26
    BOX_LTOR_LEFT_2 = 27
    BOX_LTOR_LEFT_3 = 28
    BOX_LTOR_LEFT_4 = 29
    BOX_LTOR_RIGHT_0 = 30
    BOX_LTOR_RIGHT_1 = 31
    BOX_LTOR_RIGHT_2 = 32
    BOX_LTOR_RIGHT_3 = 33
    BOX_LTOR_RIGHT_4 = 34
    PILL_1 = 35
    PILL_2 = 36
    PILL_3 = 37
    PILL_4 = 38
    PILL_5 = 39
    PILL_6 = 40
    PILL_7 = 41
    BOX_LOCKED = 42
    BOX_LOCKED2 = 43
    BOX_CORRECT = 44
    BOX_DEADLOCK = 45


class Att(IntFlag):
    """Attribute bits describing how an object type behaves."""

    NONE = 0
    ROLL = 1 << 0
    BOX = 1 << 1
    EXPLODABLE = 1 << 2
    PERMEABLE = 1 << 3
    BLANK = 1 << 4
    DIRT = 1 << 5
    ACTIVE = 1 << 7
    SQUASHABLE_TO_BLANKS = 1 << 8
    HARD = 1 << 9
    EXIT = 1 << 10
    NOROCKNOISE = 1 << 11
    PUSH = 1 << 12
    MANYBLANK = 1 << 13
    DRIP = 1 << 14
    PHASE1 = 1 << 15
    PHASE2 = 1 << 16
    PHASE4 = 1 << 17
    FALLING = 1 << 18
    TARGETLIKE = 1 << 19


_T = ObjectType

_CHAR_TO_TYPE: tuple[ObjectType, ...] = (
    _T.SPACE,  # BLANK
    _T.BRICKWALL,
    _T.STEELWALL,
    _T.PILL1,  # PILL1
    _T.PILL1,  # PILL2
    _T.BOX,
    _T.MAN,
    _T.BOX_UTOD_TOP,  # BOX_UTOD_TOP_0
    _T.BOX_DTOU_TOP,  # BOX_UTOD_TOP_1
    *([_T.BOX_UTOD_TOP] * 7),  # BOX_UTOD_TOP_2..8
    _T.BOX_UTOD_BOT,  # BOX_UTOD_BOTTOM_0
    _T.BOX_DTOU_BOT,  # BOX_UTOD_BOTTOM_1
    *([_T.BOX_UTOD_BOT] * 7),  # BOX_UTOD_BOTTOM_2..8
    _T.BOX_LTOR_LHS,  # BOX_LTOR_LEFT_0
    _T.BOX_RTOL_LHS,  # BOX_LTOR_LEFT_1
    *([_T.BOX_LTOR_LHS] * 3),  # BOX_LTOR_LEFT_2..4
    _T.BOX_LTOR_RHS,  # BOX_LTOR_RIGHT_0
    _T.BOX_RTOL_RHS,  # BOX_LTOR_RIGHT_1
    *([_T.BOX_LTOR_RHS] * 3),  # BOX_LTOR_RIGHT_2..4
    *([_T.PILL1] * 7),  # PILL_1..7
    _T.BOX_LOCKED,  # BOX_LOCKED
    _T.BOX_LOCKED,  # BOX_LOCKED2
    _T.BOX_CORRECT,
    _T.BOX_DEADLOCKED,
)
_CHAR_TO_TYPE += (_T.SPACE,) * (CHAR_TABLE_SIZE - len(_CHAR_TO_TYPE))

_A = Att
_BOX_SLIDE = _A.PHASE1 | _A.PUSH | _A.HARD

_ATTRIBUTES: dict[ObjectType, Att] = {
    _T.SPACE: _A.MANYBLANK | _A.NOROCKNOISE | _A.BLANK | _A.PERMEABLE | _A.EXPLODABLE,
    _T.BRICKWALL: _A.DRIP | _A.HARD | _A.EXPLODABLE | _A.ROLL,
    _T.STEELWALL: _A.DRIP | _A.HARD,
    _T.BOX: _A.PHASE2 | _A.PUSH | _A.HARD | _A.ACTIVE | _A.EXPLODABLE | _A.BOX | _A.ROLL,
    _T.MAN: _A.PHASE2
    | _A.MANYBLANK
    | _A.NOROCKNOISE
    | _A.SQUASHABLE_TO_BLANKS
    | _A.EXPLODABLE,
    _T.PILL1: _A.DIRT
    | _A.DRIP
    | _A.BLANK
    | _A.PERMEABLE
    | _A.EXPLODABLE
    | _A.TARGETLIKE,
    _T.PILL2: _A.DIRT
    | _A.DRIP
    | _A.BLANK
    | _A.PERMEABLE
    | _A.EXPLODABLE
    | _A.TARGETLIKE,
    _T.BOX_LTOR_LHS: _A.PHASE1 | _A.HARD | _A.EXPLODABLE,
    _T.BOX_LTOR_RHS: _A.PHASE1 | _A.HARD | _A.EXPLODABLE,
    _T.BOX_RTOL_LHS: _A.PHASE1 | _A.HARD,
    _T.BOX_RTOL_RHS: _A.PHASE1 | _A.HARD,
    _T.BOX_UTOD_TOP: _BOX_SLIDE,
    _T.BOX_UTOD_BOT: _BOX_SLIDE,
    _T.BOX_DTOU_TOP: _BOX_SLIDE,
    _T.BOX_DTOU_BOT: _BOX_SLIDE,
    _T.BOX_LTOR_LEFT: _BOX_SLIDE,
    _T.BOX_LTOR_RIGHT: _BOX_SLIDE,
    _T.BOX_RTOL_LEFT: _BOX_SLIDE,
    _T.BOX_RTOL_RIGHT: _BOX_SLIDE,
    _T.BOX_LOCKED: _A.PHASE2
    | _A.PUSH
    | _A.HARD
    | _A.EXPLODABLE
    | _A.BOX
    | _A.ROLL
    | _A.TARGETLIKE,
    _T.BOX_CORRECT: _A.PHASE2
    | _A.PUSH
    | _A.HARD
    | _A.ACTIVE
    | _A.EXPLODABLE
    | _A.BOX
    | _A.ROLL
    | _A.TARGETLIKE,
    _T.BOX_DEADLOCKED: _A.PHASE2
    | _A.PUSH
    | _A.HARD
    | _A.ACTIVE
    | _A.EXPLODABLE
    | _A.BOX
    | _A.ROLL,
}


def char_type(ch: int) -> ObjectType:
    """Return the object type of board character ``ch`` (0..127)."""
    if not 0 <= ch < CHAR_TABLE_SIZE:
        raise ValueError(f"character code out of range: {ch}")
    return _CHAR_TO_TYPE[ch]


def attributes_of(ch: int) -> Att:
    """Return the attribute bits of board character ``ch``."""
    return _ATTRIBUTES[char_type(ch)]


def has_attribute(ch: int, flag: Att) -> bool:
    """True if ``ch`` carries any of the bits in ``flag``."""
    return bool(attributes_of(ch) & flag)