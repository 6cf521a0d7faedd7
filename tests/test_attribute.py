import pytest

from boxpusher.attribute import (
    Att,
    CharName,
    ObjectType,
    attributes_of,
    char_type,
    has_attribute,
)


def test_simple_characters_map_to_their_types():
    assert char_type(CharName.BLANK) is ObjectType.SPACE
    assert char_type(CharName.BOX) is ObjectType.BOX
    assert char_type(CharName.MAN) is ObjectType.MAN
    assert char_type(CharName.BRICKWALL) is ObjectType.BRICKWALL


def test_first_slide_frames_map_to_reverse_directions():
    assert char_type(CharName.BOX_UTOD_TOP_1) is ObjectType.BOX_DTOU_TOP
    assert char_type(CharName.BOX_UTOD_BOTTOM_1) is ObjectType.BOX_DTOU_BOT
    assert char_type(CharName.BOX_LTOR_LEFT_1) is ObjectType.BOX_RTOL_LHS
    assert char_type(CharName.BOX_LTOR_RIGHT_1) is ObjectType.BOX_RTOL_RHS
    assert char_type(CharName.BOX_UTOD_TOP_5) is ObjectType.BOX_UTOD_TOP


def test_box_states():
    assert char_type(CharName.BOX_LOCKED) is ObjectType.BOX_LOCKED
    assert char_type(CharName.BOX_LOCKED2) is ObjectType.BOX_LOCKED
    assert char_type(CharName.BOX_CORRECT) is ObjectType.BOX_CORRECT
    assert char_type(CharName.BOX_DEADLOCK) is ObjectType.BOX_DEADLOCKED


def test_unnamed_codes_are_space():
    assert char_type(100) is ObjectType.SPACE
    assert char_type(127) is ObjectType.SPACE


@pytest.mark.parametrize("code", [-1, 128, 255])
def test_out_of_range_code_raises(code):
    with pytest.raises(ValueError):
        char_type(code)


def test_every_char_name_has_attributes():
    for ch in CharName:
        assert isinstance(attributes_of(ch), Att)
        assert char_type(ch) in ObjectType


def test_steelwall_attributes():
    assert attributes_of(CharName.STEELWALL) == Att.DRIP | Att.HARD


def test_target_like():
    assert has_attribute(CharName.PILL1, Att.TARGETLIKE)
    assert has_attribute(CharName.BOX_LOCKED, Att.TARGETLIKE)
    assert has_attribute(CharName.BOX_CORRECT, Att.TARGETLIKE)
    assert not has_attribute(CharName.BOX, Att.TARGETLIKE)
    assert not has_attribute(CharName.BOX_DEADLOCK, Att.TARGETLIKE)


def test_box_flag_only_on_whole_boxes():
    boxes = {ch for ch in CharName if has_attribute(ch, Att.BOX)}
    assert boxes == {
        CharName.BOX,
        CharName.BOX_LOCKED,
        CharName.BOX_LOCKED2,
        CharName.BOX_CORRECT,
        CharName.BOX_DEADLOCK,
    }


def test_has_attribute_matches_any_bit():
    assert has_attribute(CharName.BRICKWALL, Att.BOX | Att.ROLL)
    assert not has_attribute(CharName.BRICKWALL, Att.BOX | Att.EXIT)


def test_space_and_man_are_many_blank():
    assert has_attribute(CharName.BLANK, Att.MANYBLANK)
    assert has_attribute(CharName.MAN, Att.MANYBLANK)
    assert not has_attribute(CharName.BOX, Att.MANYBLANK)