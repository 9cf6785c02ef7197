"""
Translation between Qt keyboard modifier state and Rime modifier words
"""

import logging

from PyQt5.QtCore import Qt

from rime_modifiers.key_event import KeyEvent
from rime_modifiers.modifiers import Modifier

logger = logging.getLogger(__name__)

# Qt modifier -> Rime modifier. On X11 Qt reports the Super key as Meta.
QT_MODIFIER_MAP = (
    (int(Qt.ShiftModifier), Modifier.SHIFT_MASK),
    (int(Qt.ControlModifier), Modifier.CONTROL_MASK),
    (int(Qt.AltModifier), Modifier.ALT_MASK),
    (int(Qt.MetaModifier), Modifier.SUPER_MASK),
    (int(Qt.GroupSwitchModifier), Modifier.MOD5_MASK),
)

# Bits that have no Rime counterpart and are dropped silently
_QT_IGNORED = int(Qt.KeypadModifier)


def qt_to_mask(modifiers, released=False):
    """Convert Qt.KeyboardModifiers (or its int value) to a Rime mask"""
    value = int(modifiers)
    mask = Modifier(0)
    for qt_flag, rime_flag in QT_MODIFIER_MAP:
        if value & qt_flag:
            mask |= rime_flag
            value &= ~qt_flag
    value &= ~_QT_IGNORED
    if value:
        logger.debug("Ignoring unmapped Qt modifier bits 0x%08x", value)
    if released:
        mask |= Modifier.RELEASE_MASK
    return mask


def mask_to_qt(mask):
    """Convert the Qt-representable part of a Rime mask to a Qt modifier int"""
    value = 0
    for qt_flag, rime_flag in QT_MODIFIER_MAP:
        if mask & rime_flag:
            value |= qt_flag
    return value


def key_event_from_qt(keycode, modifiers, released=False):
    """Build a KeyEvent from a keysym and the Qt modifier state"""
    return KeyEvent(keycode, qt_to_mask(modifiers, released))


def tracked_modifier_keys():
    """Get list of Qt keys that are modifiers themselves and need release tracking"""
    return [
        Qt.Key_Shift,
        Qt.Key_Control,
        Qt.Key_Alt,
        Qt.Key_AltGr,
        Qt.Key_Meta,
        Qt.Key_Super_L,
        Qt.Key_Super_R,
        Qt.Key_Hyper_L,
        Qt.Key_Hyper_R,
        Qt.Key_CapsLock,
    ]
