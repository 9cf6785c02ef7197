"""rime_modifiers.names
=====================
Human-readable modifier names, as librime spells them in key
representations such as ``Control+Shift+a`` or ``Release+space``.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from rime_modifiers.constants import NAME_SEPARATOR, WORD_BITS
from rime_modifiers.errors import UnknownModifierError
from rime_modifiers.modifiers import Modifier, to_word

logger = logging.getLogger(__name__)

# Bit position -> name; positions without an entry have no name
MODIFIER_NAMES: Dict[int, str] = {
    0: "Shift",
    1: "Lock",
    2: "Control",
    3: "Alt",
    4: "Mod2",
    5: "Mod3",
    6: "Mod4",
    7: "Mod5",
    8: "Button1",
    9: "Button2",
    10: "Button3",
    11: "Button4",
    12: "Button5",
    24: "Handled",
    25: "Ignored",
    26: "Super",
    27: "Hyper",
    28: "Meta",
    30: "Release",
}

_BY_NAME: Dict[str, Modifier] = {
    name: Modifier(1 << bit) for bit, name in MODIFIER_NAMES.items()
}
# Alternative spellings of the two aliased bits
_BY_NAME["Mod1"] = Modifier.MOD1_MASK
_BY_NAME["Forward"] = Modifier.FORWARD_MASK


def modifier_name(flag: int) -> Optional[str]:
    """Return the name of a single-bit *flag*, or None if it has none."""
    if flag <= 0 or flag & (flag - 1):
        return None
    return MODIFIER_NAMES.get(flag.bit_length() - 1)


def modifier_by_name(name: str) -> Modifier:
    """Look up a modifier by its exact (case-sensitive) name.

    Raises:
        UnknownModifierError: If *name* is not a known modifier name
    """
    try:
        return _BY_NAME[name]
    except KeyError:
        raise UnknownModifierError(name) from None


def format_modifiers(mask: int, separator: str = NAME_SEPARATOR) -> str:
    """Spell out the named bits of *mask* in ascending bit order.

    ``0x40000005`` becomes ``"Shift+Control+Release"``. Bits without a
    name are left out.

    Raises:
        MaskRangeError: If *mask* does not fit a 32-bit word
    """
    word = int(to_word(mask))
    names: List[str] = []
    for bit in range(WORD_BITS):
        if not word & (1 << bit):
            continue
        name = MODIFIER_NAMES.get(bit)
        if name is None:
            logger.debug("Dropping unnamed modifier bit %d from 0x%08x", bit, word)
            continue
        names.append(name)
    return separator.join(names)


def parse_modifiers(text: str, separator: str = NAME_SEPARATOR) -> Modifier:
    """Inverse of :func:`format_modifiers`.

    Whitespace around names is ignored and an empty string yields an
    empty mask.

    Raises:
        UnknownModifierError: On an unknown or empty name
    """
    result = Modifier(0)
    if not text.strip():
        return result
    for token in text.split(separator):
        result |= modifier_by_name(token.strip())
    return result
