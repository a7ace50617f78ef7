"""Core data types shared across voxtidy modules."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

from voxtidy.core.constants import (
    DEFAULT_AUTO_PUNCTUATION,
    DEFAULT_DEBUG,
    DEFAULT_NUMBERS_AS_DIGITS,
    DEFAULT_VOICE_COMMANDS,
    LOGGER_NAME,
)

_log = logging.getLogger(LOGGER_NAME)

# camelCase spellings used by the desktop settings UI
_CAMEL_ALIASES = {
    "autoPunctuation": "auto_punctuation",
    "numbersAsDigits": "numbers_as_digits",
    "voiceCommands": "voice_commands",
}


@dataclass(frozen=True, slots=True)
class PipelineConfig:
    """Per-call switches for the text pipeline.

    Attributes:
        auto_punctuation: Capitalize sentences and add a final period.
        numbers_as_digits: Convert number words to digits.
        voice_commands: Replace spoken command phrases with symbols.
        debug: Log the text produced by every stage.
    """

    auto_punctuation: bool = DEFAULT_AUTO_PUNCTUATION
    numbers_as_digits: bool = DEFAULT_NUMBERS_AS_DIGITS
    voice_commands: bool = DEFAULT_VOICE_COMMANDS
    debug: bool = DEFAULT_DEBUG

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any] | None) -> PipelineConfig:
        """Build a config from loosely-typed settings.

        Accepts snake_case or camelCase keys. Unknown keys are ignored and
        any value that is not a bool falls back to the field default, so a
        bad setting never blocks dictation.
        """
        if not raw:
            return cls()
        valid = {f.name for f in fields(cls)}
        values: dict[str, bool] = {}
        for key, value in raw.items():
            name = _CAMEL_ALIASES.get(key, key)
            if name not in valid:
                _log.debug("Ignoring unknown pipeline option %r", key)
                continue
            if not isinstance(value, bool):
                _log.debug(
                    "Option %r expects a bool, got %r; using default", key, value,
                )
                continue
            values[name] = value
        return cls(**values)


@dataclass(frozen=True, slots=True)
class ProcessResult:
    """Immutable result of a pipeline run, with per-stage snapshots."""

    original: str
    text: str
    stages: tuple[tuple[str, str], ...] = ()

    def stage(self, name: str) -> str | None:
        """Return the text after stage *name*, or None if it is not recorded."""
        for stage_name, stage_text in self.stages:
            if stage_name == name:
                return stage_text
        return None
