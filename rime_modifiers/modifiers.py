"""rime_modifiers.modifiers
=========================
Modifier flags of a Rime key event.

The values are bit-for-bit those of librime's ``RimeModifier``
(``key_table.h``, v1.8.5) and travel unchanged to and from the engine,
so they must never be renumbered.

Bit layout of the 32-bit modifier word:
-------------
- 0-7    keyboard modifiers (Shift, Lock, Control, Mod1..Mod5)
- 8-12   pointer buttons
- 13-14  unassigned
- 15-23  reserved for XKB
- 24-25  ibus flags (Handled, Forward)
- 26-28  Super, Hyper, Meta
- 29     used internally by the engine
- 30     Release
"""

from __future__ import annotations

from enum import IntFlag
from typing import Any

from rime_modifiers.constants import WORD_MAX
from rime_modifiers.errors import MaskRangeError


class Modifier(IntFlag):
    """Modifier bits of a key event mask."""

    # Keyboard modifiers
    SHIFT_MASK = 1 << 0
    LOCK_MASK = 1 << 1  # Caps Lock
    CONTROL_MASK = 1 << 2
    MOD1_MASK = 1 << 3
    ALT_MASK = MOD1_MASK
    MOD2_MASK = 1 << 4
    MOD3_MASK = 1 << 5
    MOD4_MASK = 1 << 6
    MOD5_MASK = 1 << 7

    # Pointer buttons
    BUTTON1_MASK = 1 << 8
    BUTTON2_MASK = 1 << 9
    BUTTON3_MASK = 1 << 10
    BUTTON4_MASK = 1 << 11
    BUTTON5_MASK = 1 << 12

    # ibus flags
    HANDLED_MASK = 1 << 24
    FORWARD_MASK = 1 << 25
    IGNORED_MASK = FORWARD_MASK

    SUPER_MASK = 1 << 26
    HYPER_MASK = 1 << 27
    META_MASK = 1 << 28

    RELEASE_MASK = 1 << 30

    # Every named bit above, Release included
    MODIFIER_MASK = 0x5F001FFF


# Individual flags covered by MODIFIER_MASK, in bit order
MODIFIER_FLAGS = (
    Modifier.SHIFT_MASK,
    Modifier.LOCK_MASK,
    Modifier.CONTROL_MASK,
    Modifier.MOD1_MASK,
    Modifier.MOD2_MASK,
    Modifier.MOD3_MASK,
    Modifier.MOD4_MASK,
    Modifier.MOD5_MASK,
    Modifier.BUTTON1_MASK,
    Modifier.BUTTON2_MASK,
    Modifier.BUTTON3_MASK,
    Modifier.BUTTON4_MASK,
    Modifier.BUTTON5_MASK,
    Modifier.HANDLED_MASK,
    Modifier.FORWARD_MASK,
    Modifier.SUPER_MASK,
    Modifier.HYPER_MASK,
    Modifier.META_MASK,
    Modifier.RELEASE_MASK,
)

# Bits 15-23 (XKB) and 29 (engine internal) never carry a named flag
RESERVED_BITS = 0x20FF8000

SHIFT_MASK = Modifier.SHIFT_MASK
LOCK_MASK = Modifier.LOCK_MASK
CONTROL_MASK = Modifier.CONTROL_MASK
MOD1_MASK = Modifier.MOD1_MASK
ALT_MASK = Modifier.ALT_MASK
MOD2_MASK = Modifier.MOD2_MASK
MOD3_MASK = Modifier.MOD3_MASK
MOD4_MASK = Modifier.MOD4_MASK
MOD5_MASK = Modifier.MOD5_MASK
BUTTON1_MASK = Modifier.BUTTON1_MASK
BUTTON2_MASK = Modifier.BUTTON2_MASK
BUTTON3_MASK = Modifier.BUTTON3_MASK
BUTTON4_MASK = Modifier.BUTTON4_MASK
BUTTON5_MASK = Modifier.BUTTON5_MASK
HANDLED_MASK = Modifier.HANDLED_MASK
FORWARD_MASK = Modifier.FORWARD_MASK
IGNORED_MASK = Modifier.IGNORED_MASK
SUPER_MASK = Modifier.SUPER_MASK
HYPER_MASK = Modifier.HYPER_MASK
META_MASK = Modifier.META_MASK
RELEASE_MASK = Modifier.RELEASE_MASK
MODIFIER_MASK = Modifier.MODIFIER_MASK


def to_word(value: Any) -> Modifier:
    """Validate *value* as an unsigned 32-bit modifier word.

    Args:
        value: Integer mask, possibly with bits that have no name

    Returns:
        The value as a :class:`Modifier`

    Raises:
        MaskRangeError: If *value* is not an int or does not fit 32 bits
    """
    if (
        not isinstance(value, int)
        or isinstance(value, bool)
        or not 0 <= value <= WORD_MAX
    ):
        raise MaskRangeError(value)
    return Modifier(value)
