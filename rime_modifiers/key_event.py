"""rime_modifiers.key_event
=========================
The key event record handed to the engine: a keysym plus a modifier word.

Two serialized forms are provided:

1. Binary - 8 bytes, network order ``(keycode, mask)``
2. JSON-ready dict - ``{"keycode": int, "mask": int}``
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Any, Dict, Mapping

from rime_modifiers.constants import NAME_SEPARATOR
from rime_modifiers.errors import KeyEventError
from rime_modifiers.modifiers import Modifier, to_word
from rime_modifiers.names import format_modifiers

KEY_EVENT_STRUCT = struct.Struct("!II")  # keycode, mask


@dataclass(frozen=True)
class KeyEvent:
    """A single key press or release.

    Attributes:
        keycode: X11 keysym of the key
        mask: Modifier word, normalized to :class:`Modifier`
    """

    keycode: int
    mask: int = 0

    def __post_init__(self) -> None:
        to_word(self.keycode)
        object.__setattr__(self, "mask", to_word(self.mask))

    @property
    def is_release(self) -> bool:
        return bool(self.mask & Modifier.RELEASE_MASK)

    @property
    def modifiers(self) -> Modifier:
        """Named modifier bits only, with reserved and unassigned bits cleared."""
        return Modifier(self.mask & Modifier.MODIFIER_MASK)

    def has(self, flag: int) -> bool:
        """True if every bit of *flag* is set in the mask."""
        return flag != 0 and (self.mask & flag) == flag

    def with_modifiers(self, *flags: int) -> "KeyEvent":
        mask = self.mask
        for flag in flags:
            mask |= flag
        return KeyEvent(self.keycode, mask)

    def without_modifiers(self, *flags: int) -> "KeyEvent":
        mask = int(self.mask)
        for flag in flags:
            mask &= ~int(flag)
        return KeyEvent(self.keycode, mask)

    def released(self) -> "KeyEvent":
        """Return the release counterpart of this event."""
        return self.with_modifiers(Modifier.RELEASE_MASK)

    def describe(self) -> str:
        """Readable form such as ``Shift+Control+0x0061``."""
        key = f"0x{self.keycode:04x}"
        names = format_modifiers(self.mask)
        return f"{names}{NAME_SEPARATOR}{key}" if names else key

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def pack(self) -> bytes:
        return KEY_EVENT_STRUCT.pack(self.keycode, int(self.mask))

    @classmethod
    def unpack(cls, data: bytes) -> "KeyEvent":
        """Decode the output of :meth:`pack`.

        Raises:
            KeyEventError: If *data* is not exactly 8 bytes
        """
        if len(data) != KEY_EVENT_STRUCT.size:
            raise KeyEventError(
                f"expected {KEY_EVENT_STRUCT.size} bytes, got {len(data)}"
            )
        keycode, mask = KEY_EVENT_STRUCT.unpack(data)
        return cls(keycode, mask)

    def as_dict(self) -> Dict[str, int]:
        return {"keycode": self.keycode, "mask": int(self.mask)}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "KeyEvent":
        """Build an event from :meth:`as_dict` output.

        Raises:
            KeyEventError: On a non-mapping, a missing field or a non-integer value
        """
        if not isinstance(data, Mapping):
            raise KeyEventError(f"key event must be a mapping, got {type(data).__name__}")
        try:
            keycode, mask = data["keycode"], data["mask"]
        except KeyError as e:
            raise KeyEventError(f"missing key event field: {e.args[0]}") from e
        if any(not isinstance(v, int) or isinstance(v, bool) for v in (keycode, mask)):
            raise KeyEventError("key event fields must be integers")
        return cls(keycode, mask)
