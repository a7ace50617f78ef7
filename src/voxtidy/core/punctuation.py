"""Auto-punctuation: sentence capitalization and a closing period.

A small state machine walks the text once. It capitalizes the first
letter of the text (unless a digit comes first), re-capitalizes a lowercase letter that follows a
terminal mark and whitespace, and remembers the last non-whitespace
character so a final period can be added when the text lacks one.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from voxtidy.core.constants import TERMINAL_MARKS


class SentenceState(enum.Enum):
    SENTENCE_START = "sentence_start"  # nothing capitalized yet
    IN_SENTENCE = "in_sentence"
    AFTER_TERMINAL = "after_terminal"  # just saw . ! or ?
    RESTART = "restart"  # terminal mark + whitespace; next letter opens a sentence


@dataclass(slots=True)
class ProcessingContext:
    """Per-call scratch state for :func:`auto_punctuate`. Never shared."""

    state: SentenceState = SentenceState.SENTENCE_START
    last_mark: str = ""
    last_char: str = ""

    def feed(self, ch: str) -> str:
        """Advance the machine by one character; return the character to emit."""
        out = ch
        if self.state is SentenceState.SENTENCE_START:
            if ch.isalpha():
                out = ch.upper()
                self.state = SentenceState.IN_SENTENCE
            elif ch.isalnum():
                # a leading digit opens the sentence ("1st place")
                self.state = SentenceState.IN_SENTENCE
        elif ch in TERMINAL_MARKS:
            self.state = SentenceState.AFTER_TERMINAL
        elif ch.isspace():
            if self.state is SentenceState.AFTER_TERMINAL:
                self.state = SentenceState.RESTART
        elif self.state is SentenceState.RESTART:
            if ch.isalpha() and ch.islower():
                out = ch.upper()
            self.state = SentenceState.IN_SENTENCE
        else:
            self.state = SentenceState.IN_SENTENCE

        if ch in TERMINAL_MARKS:
            self.last_mark = ch
        if not ch.isspace():
            self.last_char = ch
        return out

    @property
    def terminated(self) -> bool:
        return bool(self.last_char) and self.last_char in TERMINAL_MARKS


def auto_punctuate(text: str, enabled: bool = True) -> str:
    """Capitalize sentence starts and make sure *text* ends with a terminal mark.

    Returns *text* unchanged when *enabled* is false or the text is empty
    or whitespace-only.
    """
    if not enabled or not text or text.isspace():
        return text

    ctx = ProcessingContext()
    out = "".join(ctx.feed(ch) for ch in text)
    if ctx.terminated:
        return out
    body = out.rstrip()
    return body + "." + out[len(body):]
