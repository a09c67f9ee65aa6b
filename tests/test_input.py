import pytest

from simple2d.input import Key, KeyMods, Mod, Mouse

FLAGS = [Mod.SHIFT, Mod.CONTROL, Mod.ALT, Mod.SUPER, Mod.CAPS_LOCK, Mod.NUM_LOCK]


def _flags(mods):
    return [
        mods.shift,
        mods.control,
        mods.alt,
        mods.super,
        mods.caps_lock,
        mods.num_lock,
    ]


def test_key_codes_match_source():
    assert Key(256) is Key.ESCAPE
    assert Key(32) is Key.SPACE
    assert Key(-1) is Key.UNKNOWN
    assert Key(348) is Key.MENU


def test_letter_keys_follow_ascii():
    assert Key(ord("A")) is Key.A
    assert Key(ord("Z")) is Key.Z
    assert Key(ord("0")) is Key.NUM0


def test_unknown_key_code_is_rejected():
    with pytest.raises(ValueError):
        Key(1000)


def test_mouse_aliases():
    assert Mouse(0) is Mouse.LEFT
    assert Mouse(1) is Mouse.RIGHT
    assert Mouse(2) is Mouse.MIDDLE
    assert Mouse(7) is Mouse.LAST
    assert Mouse(0) is Mouse.MB1
    assert Mouse(7) is Mouse.MB8


def test_mouse_has_eight_distinct_buttons():
    buttons = {Mouse(code) for code in range(8)}
    assert len(buttons) == 8
    with pytest.raises(ValueError):
        Mouse(8)


def test_mod_flags_are_distinct_single_bits():
    values = [int(Mod(int(flag))) for flag in FLAGS]
    assert len(set(values)) == len(values)
    for value in values:
        assert value != 0
        assert value & (value - 1) == 0


def test_no_mods():
    mods = KeyMods(0)
    assert _flags(mods) == [False] * 6


@pytest.mark.parametrize("index", range(6))
def test_single_modifier(index):
    mods = KeyMods(int(FLAGS[index]))
    expected = [i == index for i in range(6)]
    assert _flags(mods) == expected


def test_combined_modifiers():
    mods = KeyMods(Mod.SHIFT | Mod.ALT)
    assert _flags(mods) == [True, False, True, False, False, False]


def test_all_modifiers():
    combined = 0
    for flag in FLAGS:
        combined |= int(flag)
    mods = KeyMods(combined)
    assert _flags(mods) == [True] * 6