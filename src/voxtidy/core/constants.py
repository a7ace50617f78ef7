"""Default configuration values for voxtidy."""

from typing import Final

# Pipeline flag defaults
DEFAULT_AUTO_PUNCTUATION: Final = True
DEFAULT_NUMBERS_AS_DIGITS: Final = False
DEFAULT_VOICE_COMMANDS: Final = True
DEFAULT_DEBUG: Final = False

# Stage names, in pipeline order
STAGE_COMMANDS: Final = "commands"
STAGE_NUMBERS: Final = "numbers"
STAGE_PUNCTUATION: Final = "punctuation"
STAGE_CLEANUP: Final = "cleanup"

# Punctuation classes
TERMINAL_MARKS: Final = ".!?"
CLEANUP_MARKS: Final = ",.;:!?"
CLOSING_DELIMITERS: Final = ")]}\"'"

# Command table categories, in declaration order
CATEGORY_PUNCTUATION: Final = "punctuation"
CATEGORY_NAVIGATION: Final = "navigation"
CATEGORY_SYMBOLS: Final = "symbols"
CATEGORY_OPERATORS: Final = "operators"
CATEGORY_CUSTOM: Final = "custom"

# Config file
DEFAULT_CONFIG_DIR: Final = "~/.config/voxtidy"
DEFAULT_CONFIG_DIR_ENV: Final = "VOXTIDY_CONFIG_DIR"
DEFAULT_CONFIG_FILE: Final = "config.json"

LOGGER_NAME: Final = "voxtidy"
