"""Public API: run dictated text through the voxtidy pipeline.

The stage order is fixed: commands → numbers → auto-punctuation →
cleanup. Spoken commands resolve before numbers so "period" is already a
"." when digits are compounded, and auto-punctuation sees the final
symbol-bearing text rather than spoken words.

Typical usage::

    from voxtidy.api import PipelineConfig, process

    process("hello world period new line thank you")
    # 'Hello world.\\nThank you.'
    process("three hundred twenty five", PipelineConfig(numbers_as_digits=True))
    # '325.'
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from voxtidy.core.commands import substitute_commands
from voxtidy.core.constants import (
    LOGGER_NAME,
    STAGE_CLEANUP,
    STAGE_COMMANDS,
    STAGE_NUMBERS,
    STAGE_PUNCTUATION,
)
from voxtidy.core.errors import InvalidInputError
from voxtidy.core.numbers import convert_numbers
from voxtidy.core.punctuation import auto_punctuate
from voxtidy.core.symbols import CommandTable
from voxtidy.core.text import cleanup
from voxtidy.core.types import PipelineConfig, ProcessResult

_log = logging.getLogger(LOGGER_NAME)


def _stages(
    config: PipelineConfig,
    table: CommandTable | None,
) -> tuple[tuple[str, Callable[[str], str]], ...]:
    return (
        (STAGE_COMMANDS, lambda t: substitute_commands(t, table, config.voice_commands)),
        (STAGE_NUMBERS, lambda t: convert_numbers(t, config.numbers_as_digits)),
        (STAGE_PUNCTUATION, lambda t: auto_punctuate(t, config.auto_punctuation)),
        (STAGE_CLEANUP, cleanup),
    )


def process_with_trace(
    text: str,
    config: PipelineConfig | None = None,
    *,
    table: CommandTable | None = None,
) -> ProcessResult:
    """Run the pipeline and keep the text produced by every stage.

    Args:
        text: Raw transcript for one utterance. ``""`` is valid.
        config: Stage switches; ``None`` means :class:`PipelineConfig` defaults.
        table: Command table; ``None`` means the built-in table.

    Raises:
        InvalidInputError: *text* is ``None`` or not a string. No stage runs.
    """
    if not isinstance(text, str):
        raise InvalidInputError(f"expected text as str, got {type(text).__name__}")
    if config is None:
        config = PipelineConfig()

    if config.debug:
        _log.info("%-12s %r", "input", text)
    current = text
    stages: list[tuple[str, str]] = []
    for name, stage in _stages(config, table):
        current = stage(current)
        stages.append((name, current))
        if config.debug:
            _log.info("%-12s %r", name, current)

    return ProcessResult(original=text, text=current, stages=tuple(stages))


def process(
    text: str,
    config: PipelineConfig | None = None,
    *,
    table: CommandTable | None = None,
) -> str:
    """Turn a raw transcript into punctuated, symbol-substituted text.

    Raises:
        InvalidInputError: *text* is ``None`` or not a string.
    """
    return process_with_trace(text, config, table=table).text
