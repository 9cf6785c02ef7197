"""Rime key event modifier flags and helpers"""

from rime_modifiers.errors import (
    KeyEventError,
    MaskRangeError,
    ModifierError,
    UnknownModifierError,
)
from rime_modifiers.key_event import KeyEvent
from rime_modifiers.modifiers import (
    MODIFIER_FLAGS,
    MODIFIER_MASK,
    RELEASE_MASK,
    RESERVED_BITS,
    Modifier,
    to_word,
)
from rime_modifiers.names import (
    format_modifiers,
    modifier_by_name,
    modifier_name,
    parse_modifiers,
)

__version__ = "0.1.0"
