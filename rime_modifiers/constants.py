"""rime_modifiers.constants
==========================
Shared constants for the modifier helpers and the command-line tool.
"""

# Modifier words are unsigned 32-bit integers on the engine side
WORD_BITS = 32
WORD_MAX = (1 << WORD_BITS) - 1

# Separator used by librime's key representation ("Control+Shift+a")
NAME_SEPARATOR = "+"

# Logging
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_LEVEL_ENV = "RIME_MODIFIERS_LOG_LEVEL"
