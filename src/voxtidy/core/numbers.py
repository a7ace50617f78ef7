"""Number words to digits, with compound collapsing.

Conversion runs in two stages. First every ordinal and cardinal word is
swapped for its digits ("twenty three" → "20 3"). Then adjacent digit
tokens are merged until nothing changes ("100 20 3" → "120 3" → "123").
Two numbers that fail the magnitude test stay apart: "5 3" is kept.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

CARDINAL_WORDS: Final[Mapping[str, str]] = MappingProxyType({
    "zero": "0", "one": "1", "two": "2", "three": "3", "four": "4",
    "five": "5", "six": "6", "seven": "7", "eight": "8", "nine": "9",
    "ten": "10", "eleven": "11", "twelve": "12", "thirteen": "13",
    "fourteen": "14", "fifteen": "15", "sixteen": "16", "seventeen": "17",
    "eighteen": "18", "nineteen": "19",
    "twenty": "20", "thirty": "30", "forty": "40", "fifty": "50",
    "sixty": "60", "seventy": "70", "eighty": "80", "ninety": "90",
    "hundred": "100", "thousand": "1000", "million": "1000000",
    "billion": "1000000000",
})

ORDINAL_WORDS: Final[Mapping[str, str]] = MappingProxyType({
    "first": "1st", "second": "2nd", "third": "3rd", "fourth": "4th",
    "fifth": "5th", "sixth": "6th", "seventh": "7th", "eighth": "8th",
    "ninth": "9th", "tenth": "10th", "eleventh": "11th", "twelfth": "12th",
    "thirteenth": "13th", "fourteenth": "14th", "fifteenth": "15th",
    "sixteenth": "16th", "seventeenth": "17th", "eighteenth": "18th",
    "nineteenth": "19th",
    "twentieth": "20th", "thirtieth": "30th", "fortieth": "40th",
    "fiftieth": "50th", "sixtieth": "60th", "seventieth": "70th",
    "eightieth": "80th", "ninetieth": "90th",
    "hundredth": "100th", "thousandth": "1000th", "millionth": "1000000th",
    "billionth": "1000000000th",
})

SCALE_VALUES: Final = frozenset({100, 1_000, 1_000_000, 1_000_000_000})


def _word_pattern(words: Mapping[str, str]) -> re.Pattern[str]:
    alternatives = "|".join(re.escape(w) for w in sorted(words, key=len, reverse=True))
    return re.compile(rf"(?<!\w)(?:{alternatives})(?!\w)", re.IGNORECASE)


_ORDINAL_RE = _word_pattern(ORDINAL_WORDS)
_CARDINAL_RE = _word_pattern(CARDINAL_WORDS)

# Left token of a pair; the right token is matched with a lookahead so
# that pairs overlap ("1000 2 100" yields "1000 2" and "2 100").
_PAIR_RE = re.compile(
    r"(?<!\w)(?P<a>\d+)(?=(?P<sep>[ \t]+)(?P<b>\d+)(?P<suffix>st|nd|rd|th)?(?!\w))"
)
_NEXT_TOKEN_RE = re.compile(r"[ \t]+(\d+)(?:st|nd|rd|th)?(?!\w)")


def ordinal_suffix(n: int) -> str:
    """English ordinal suffix for *n* (1 → "st", 12 → "th", 23 → "rd")."""
    if 11 <= n % 100 <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")


def words_to_digits(text: str) -> str:
    """Replace ordinal, then cardinal, number words with digit strings."""
    text = _ORDINAL_RE.sub(lambda m: ORDINAL_WORDS[m.group(0).lower()], text)
    return _CARDINAL_RE.sub(lambda m: CARDINAL_WORDS[m.group(0).lower()], text)


def _passes_magnitude_test(a: int, b: int) -> bool:
    return a > b and (a % 10 == 0 or a % 100 == 0)


def _merge_pair(match: re.Match[str], next_value: int | None) -> str | None:
    """Merged token for one candidate pair, or None if the pair stays apart."""
    a = int(match.group("a"))
    b = int(match.group("b"))
    suffix = match.group("suffix")

    if suffix:
        if b in SCALE_VALUES and a < b:
            total = a * b
        elif _passes_magnitude_test(a, b):
            total = a + b
        else:
            return None
        return f"{total}{ordinal_suffix(total)}"
    if b in SCALE_VALUES and a < b:
        return str(a * b)
    if next_value is not None and next_value in SCALE_VALUES and b < next_value <= a:
        # b is about to be scaled ("1000 2 100"), so it must not be added yet
        return None
    if _passes_magnitude_test(a, b):
        return str(a + b)
    return None


def _collapse_once(text: str) -> str | None:
    for match in _PAIR_RE.finditer(text):
        end = match.end("b") + len(match.group("suffix") or "")
        next_value = None
        if not match.group("suffix"):
            nxt = _NEXT_TOKEN_RE.match(text, end)
            if nxt is not None:
                next_value = int(nxt.group(1))
        merged = _merge_pair(match, next_value)
        if merged is not None:
            return text[: match.start("a")] + merged + text[end:]
    return None


def collapse_compounds(text: str) -> str:
    """Merge adjacent digit tokens into compound numbers until stable.

    Each merge removes one token, so the loop ends after at most as many
    iterations as there are digit tokens.
    """
    while True:
        collapsed = _collapse_once(text)
        if collapsed is None:
            return text
        text = collapsed


def convert_numbers(text: str, enabled: bool = True) -> str:
    """Convert number words in *text* to digits.

    Returns *text* unchanged when *enabled* is false.
    """
    if not enabled or not text:
        return text
    return collapse_compounds(words_to_digits(text))
