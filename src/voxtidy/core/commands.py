"""Voice-command substitution: spoken phrases → symbols.

Rules are tried longest first (word count, then character length, then
table order), each over the whole text, in a single pass over the rule
list. Matching is case-insensitive and respects word boundaries.

By default a replaced span is frozen: later rules never see text that an
earlier rule produced. ``allow_chaining=True`` lets later rules match
inside earlier output, which is harder to predict for table authors.
"""

from __future__ import annotations

import functools
import re

from voxtidy.core.symbols import DEFAULT_COMMAND_TABLE, CommandEntry, CommandTable


_WORD_CHAR = re.compile(r"\w")


def _compile_phrase(phrase: str) -> re.Pattern[str]:
    words = r"\s+".join(re.escape(word) for word in phrase.split(" "))
    return re.compile(rf"(?<!\w){words}(?!\w)", re.IGNORECASE)


def sort_rules(entries: tuple[CommandEntry, ...]) -> list[CommandEntry]:
    """Order entries for substitution: most words, then longest, then table order."""
    return sorted(entries, key=lambda e: (-e.word_count, -len(e.phrase)))


class CommandSubstituter:
    """Precompiled substitution rules for one command table."""

    __slots__ = ("table", "allow_chaining", "_rules")

    def __init__(self, table: CommandTable, *, allow_chaining: bool = False) -> None:
        self.table = table
        self.allow_chaining = allow_chaining
        self._rules: tuple[tuple[re.Pattern[str], str, bool], ...] = tuple(
            (
                _compile_phrase(entry.phrase),
                entry.output,
                _WORD_CHAR.match(entry.phrase[0]) is not None
                and _WORD_CHAR.match(entry.phrase[-1]) is not None,
            )
            for entry in sort_rules(table.entries)
        )

    @property
    def rule_count(self) -> int:
        return len(self._rules)

    def __call__(self, text: str) -> str:
        if not text:
            return text
        if self.allow_chaining:
            return self._substitute_chained(text)
        return self._substitute_frozen(text)

    def _substitute_chained(self, text: str) -> str:
        for pattern, output, _ in self._rules:
            text = pattern.sub(lambda _m, out=output: out, text)
        return text

    def _substitute_frozen(self, text: str) -> str:
        # A phrase bounded by word characters can only match inside a
        # segment if it also matches the untouched input.
        rules = [
            (pattern, output)
            for pattern, output, word_bounded in self._rules
            if not word_bounded or pattern.search(text)
        ]
        # (segment, frozen) pairs; frozen segments are earlier replacements
        segments: list[tuple[str, bool]] = [(text, False)]
        for pattern, output in rules:
            next_segments: list[tuple[str, bool]] = []
            for segment, frozen in segments:
                if frozen:
                    next_segments.append((segment, True))
                    continue
                pos = 0
                for match in pattern.finditer(segment):
                    if match.start() > pos:
                        next_segments.append((segment[pos:match.start()], False))
                    next_segments.append((output, True))
                    pos = match.end()
                if pos < len(segment):
                    next_segments.append((segment[pos:], False))
            segments = next_segments
        return "".join(segment for segment, _ in segments)


@functools.lru_cache(maxsize=8)
def get_substituter(
    table: CommandTable = DEFAULT_COMMAND_TABLE,
    allow_chaining: bool = False,
) -> CommandSubstituter:
    """Return a cached substituter so rules are compiled once per table."""
    return CommandSubstituter(table, allow_chaining=allow_chaining)


def substitute_commands(
    text: str,
    table: CommandTable | None = None,
    enabled: bool = True,
) -> str:
    """Replace spoken command phrases in *text* with their symbols.

    Returns *text* unchanged when *enabled* is false.
    """
    if not enabled:
        return text
    return get_substituter(table if table is not None else DEFAULT_COMMAND_TABLE)(text)
