"""Core text pipeline — no UI or filesystem dependencies.

Re-exports key symbols for convenience.
"""

from voxtidy.core.commands import CommandSubstituter, substitute_commands
from voxtidy.core.errors import InvalidInputError, VoxtidyError
from voxtidy.core.numbers import convert_numbers
from voxtidy.core.punctuation import ProcessingContext, SentenceState, auto_punctuate
from voxtidy.core.symbols import DEFAULT_COMMAND_TABLE, CommandEntry, CommandTable
from voxtidy.core.text import cleanup
from voxtidy.core.types import PipelineConfig, ProcessResult

__all__ = [
    "DEFAULT_COMMAND_TABLE",
    "CommandEntry",
    "CommandSubstituter",
    "CommandTable",
    "InvalidInputError",
    "PipelineConfig",
    "ProcessResult",
    "ProcessingContext",
    "SentenceState",
    "VoxtidyError",
    "auto_punctuate",
    "cleanup",
    "convert_numbers",
    "substitute_commands",
]
