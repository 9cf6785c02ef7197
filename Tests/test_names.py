"""tests/test_names.py – unit tests for rime_modifiers.names"""
import pytest

from rime_modifiers.errors import MaskRangeError, UnknownModifierError
from rime_modifiers.modifiers import Modifier
from rime_modifiers.names import (
    format_modifiers,
    modifier_by_name,
    modifier_name,
    parse_modifiers,
)


def test_modifier_name():
    assert modifier_name(Modifier.SHIFT_MASK) == "Shift"
    assert modifier_name(Modifier.ALT_MASK) == "Alt"
    assert modifier_name(Modifier.FORWARD_MASK) == "Ignored"
    assert modifier_name(Modifier.RELEASE_MASK) == "Release"
    assert modifier_name(1 << 29) is None
    assert modifier_name(1 << 13) is None
    assert modifier_name(0) is None
    assert modifier_name(Modifier.SHIFT_MASK | Modifier.LOCK_MASK) is None


def test_modifier_by_name():
    assert modifier_by_name("Control") is Modifier.CONTROL_MASK
    assert modifier_by_name("Alt") is Modifier.MOD1_MASK
    assert modifier_by_name("Mod1") is Modifier.ALT_MASK
    assert modifier_by_name("Forward") is Modifier.IGNORED_MASK
    assert modifier_by_name("Button5") == 0x1000


@pytest.mark.parametrize("name", ["control", "Ctrl", "", " Shift"])
def test_modifier_by_name_unknown(name):
    with pytest.raises(UnknownModifierError) as exc:
        modifier_by_name(name)
    assert exc.value.name == name
    assert isinstance(exc.value, ValueError)


def test_format_modifiers():
    assert format_modifiers(0x40000005) == "Shift+Control+Release"
    assert format_modifiers(0) == ""
    assert format_modifiers(Modifier.SUPER_MASK | Modifier.HANDLED_MASK) == "Handled+Super"
    assert format_modifiers(0x5, separator="-") == "Shift-Control"


def test_format_drops_unnamed_bits():
    assert format_modifiers((1 << 29) | Modifier.SHIFT_MASK) == "Shift"
    assert format_modifiers(1 << 31) == ""


def test_format_out_of_range():
    with pytest.raises(MaskRangeError):
        format_modifiers(1 << 32)


def test_parse_modifiers():
    assert parse_modifiers("Control+Shift") == 0x5
    assert parse_modifiers(" Control + Shift ") == 0x5
    assert parse_modifiers("Shift+Shift") == Modifier.SHIFT_MASK
    assert parse_modifiers("Release") == Modifier.RELEASE_MASK
    assert parse_modifiers("") == 0
    assert parse_modifiers("Alt-Meta", separator="-") == 0x10000008


def test_parse_rejects_bad_tokens():
    with pytest.raises(UnknownModifierError):
        parse_modifiers("Shift++Control")
    with pytest.raises(UnknownModifierError):
        parse_modifiers("Shift+Bogus")


def test_full_mask_spelled_out():
    text = format_modifiers(Modifier.MODIFIER_MASK)
    assert text.split("+")[0] == "Shift"
    assert text.split("+")[-1] == "Release"
    assert parse_modifiers(text) == Modifier.MODIFIER_MASK
