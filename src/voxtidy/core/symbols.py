"""Spoken command phrases and the symbols they stand for.

The built-in table is grouped by category. Categories are declared in a
fixed order, and that order is the final tie-break when the substitution
engine sorts rules of equal word count and length.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Final

from voxtidy.core.constants import (
    CATEGORY_CUSTOM,
    CATEGORY_NAVIGATION,
    CATEGORY_OPERATORS,
    CATEGORY_PUNCTUATION,
    CATEGORY_SYMBOLS,
)


def normalize_phrase(phrase: str) -> str:
    """Lowercase *phrase* and collapse inner whitespace to single spaces."""
    return " ".join(phrase.lower().split())


@dataclass(frozen=True, slots=True)
class CommandEntry:
    """A spoken phrase and its literal replacement."""

    phrase: str
    output: str
    category: str = CATEGORY_CUSTOM

    def __post_init__(self) -> None:
        phrase = normalize_phrase(self.phrase)
        if not phrase:
            raise ValueError("command phrase must not be empty")
        object.__setattr__(self, "phrase", phrase)

    @property
    def word_count(self) -> int:
        return len(self.phrase.split(" "))


@dataclass(frozen=True, slots=True)
class CommandTable:
    """Ordered, read-only set of command entries.

    Behaves as a mapping from phrase to output for lookups. Phrases are
    unique (case-insensitive); a duplicate raises ``ValueError``.
    """

    entries: tuple[CommandEntry, ...] = ()
    _index: dict[str, CommandEntry] = field(
        init=False, repr=False, compare=False, default_factory=dict,
    )

    def __post_init__(self) -> None:
        entries = tuple(self.entries)
        index: dict[str, CommandEntry] = {}
        for entry in entries:
            if entry.phrase in index:
                raise ValueError(f"duplicate command phrase: {entry.phrase!r}")
            index[entry.phrase] = entry
        object.__setattr__(self, "entries", entries)
        object.__setattr__(self, "_index", index)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[CommandEntry]:
        return iter(self.entries)

    def __contains__(self, phrase: object) -> bool:
        return isinstance(phrase, str) and normalize_phrase(phrase) in self._index

    def get(self, phrase: str, default: str | None = None) -> str | None:
        """Return the output for *phrase*, matched case-insensitively."""
        entry = self._index.get(normalize_phrase(phrase))
        return entry.output if entry is not None else default

    def as_dict(self) -> dict[str, str]:
        return {entry.phrase: entry.output for entry in self.entries}

    def categories(self) -> tuple[str, ...]:
        """Category names in declaration order."""
        return tuple(dict.fromkeys(entry.category for entry in self.entries))

    def by_category(self, category: str) -> tuple[CommandEntry, ...]:
        return tuple(e for e in self.entries if e.category == category)

    def extended(
        self,
        commands: Mapping[str, str],
        category: str = CATEGORY_CUSTOM,
    ) -> CommandTable:
        """Return a new table with *commands* added.

        A phrase that already exists keeps its position but takes the new
        output and category; new phrases are appended after the built-ins.
        """
        overrides = {
            normalize_phrase(phrase): CommandEntry(phrase, output, category)
            for phrase, output in commands.items()
        }
        merged = [overrides.pop(e.phrase, e) for e in self.entries]
        merged.extend(overrides.values())
        return CommandTable(tuple(merged))


def _category(name: str, pairs: Iterable[tuple[str, str]]) -> list[CommandEntry]:
    return [CommandEntry(phrase, output, name) for phrase, output in pairs]


PUNCTUATION_COMMANDS: Final = (
    ("period", "."),
    ("full stop", "."),
    ("comma", ","),
    ("question mark", "?"),
    ("exclamation mark", "!"),
    ("exclamation point", "!"),
    ("colon", ":"),
    ("semicolon", ";"),
    ("semi colon", ";"),
    ("hyphen", "-"),
    ("dash", "-"),
    ("em dash", "—"),
    ("apostrophe", "'"),
    ("quote", '"'),
    ("open quote", '"'),
    ("close quote", '"'),
    ("single quote", "'"),
)

NAVIGATION_COMMANDS: Final = (
    ("new line", "\n"),
    ("newline", "\n"),
    ("next line", "\n"),
    ("new paragraph", "\n\n"),
    ("next paragraph", "\n\n"),
    ("tab key", "\t"),
)

SYMBOL_COMMANDS: Final = (
    ("open paren", "("),
    ("close paren", ")"),
    ("open parenthesis", "("),
    ("close parenthesis", ")"),
    ("open bracket", "["),
    ("close bracket", "]"),
    ("open brace", "{"),
    ("close brace", "}"),
    ("open angle", "<"),
    ("close angle", ">"),
    ("at sign", "@"),
    ("hash sign", "#"),
    ("hashtag", "#"),
    ("dollar sign", "$"),
    ("percent sign", "%"),
    ("caret", "^"),
    ("ampersand", "&"),
    ("asterisk", "*"),
    ("underscore", "_"),
    ("slash", "/"),
    ("forward slash", "/"),
    ("backslash", "\\"),
    ("back slash", "\\"),
    ("pipe symbol", "|"),
    ("tilde", "~"),
    ("backtick", "`"),
)

OPERATOR_COMMANDS: Final = (
    ("plus sign", "+"),
    ("minus sign", "-"),
    ("equals sign", "="),
    ("double equals", "=="),
    ("triple equals", "==="),
    ("plus equals", "+="),
    ("minus equals", "-="),
    ("less than", "<"),
    ("greater than", ">"),
    ("less or equal", "<="),
    ("greater or equal", ">="),
    ("thin arrow", "->"),
    ("fat arrow", "=>"),
    ("double ampersand", "&&"),
    ("double pipe", "||"),
)

DEFAULT_COMMAND_TABLE: Final = CommandTable(
    tuple(
        _category(CATEGORY_PUNCTUATION, PUNCTUATION_COMMANDS)
        + _category(CATEGORY_NAVIGATION, NAVIGATION_COMMANDS)
        + _category(CATEGORY_SYMBOLS, SYMBOL_COMMANDS)
        + _category(CATEGORY_OPERATORS, OPERATOR_COMMANDS)
    )
)
