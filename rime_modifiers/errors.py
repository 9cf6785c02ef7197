"""rime_modifiers.errors
=======================
Exceptions raised by the modifier helpers.

All of them derive from :class:`ValueError`, so callers that only care
about "bad input" can keep catching that.
"""

from __future__ import annotations

from typing import Any


class ModifierError(ValueError):
    """Base class for every error raised by this package."""


class UnknownModifierError(ModifierError):
    """A modifier name is not in the name table."""

    def __init__(self, name: str) -> None:
        super().__init__(f"unknown modifier name: {name!r}")
        self.name = name


class MaskRangeError(ModifierError):
    """A value does not fit an unsigned 32-bit word."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"value out of 32-bit range: {value!r}")
        self.value = value


class KeyEventError(ModifierError):
    """A serialized key event could not be decoded."""
