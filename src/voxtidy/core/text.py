"""Whitespace and punctuation cleanup, the last pipeline stage.

The rules run in a fixed order and the result is stable under a second
application: ``cleanup(cleanup(s)) == cleanup(s)``.
"""

import re

from voxtidy.core.constants import CLEANUP_MARKS, CLOSING_DELIMITERS

_MARKS = re.escape(CLEANUP_MARKS)
_NO_SPACE_AFTER = re.escape(CLEANUP_MARKS + CLOSING_DELIMITERS)

_SPACE_BEFORE_MARK = re.compile(rf"\s+(?=[{_MARKS}])")
_MISSING_SPACE_AFTER_MARK = re.compile(rf"([{_MARKS}])(?=[^\s{_NO_SPACE_AFTER}])")
_REPEATED_MARK = re.compile(rf"([{_MARKS}])\1+")
_MULTI_SPACE = re.compile(r" {2,}")
_SPACE_AFTER_OPENER = re.compile(r"([(\[{]) +")
_SPACE_BEFORE_CLOSER = re.compile(r" +([)\]}])")
# Pairs double quotes left to right on one line; apostrophes are left alone.
_QUOTED = re.compile(r'"[ \t]*([^"\n]*?)[ \t]*"')
_SPACE_AROUND_NEWLINE = re.compile(r" *\n *")
_EXCESS_NEWLINES = re.compile(r"\n{3,}")


def cleanup(text: str) -> str:
    """Normalize spacing around punctuation and collapse repeats.

    - no whitespace before ``, . ; : ! ?``
    - one space after them when a word follows
    - ``",,"`` / ``".."`` runs become a single mark
    - runs of spaces become one space; no spaces hugging brackets or newlines
    - paired double quotes hug their contents: ``" hi "`` → ``"hi"``
    - at most one blank line in a row
    - leading and trailing whitespace trimmed
    """
    text = _SPACE_BEFORE_MARK.sub("", text)
    text = _MISSING_SPACE_AFTER_MARK.sub(r"\1 ", text)
    text = _REPEATED_MARK.sub(r"\1", text)
    text = _MULTI_SPACE.sub(" ", text)
    text = _SPACE_AFTER_OPENER.sub(r"\1", text)
    text = _SPACE_BEFORE_CLOSER.sub(r"\1", text)
    text = _QUOTED.sub(r'"\1"', text)
    text = _SPACE_AROUND_NEWLINE.sub("\n", text)
    text = _EXCESS_NEWLINES.sub("\n\n", text)
    return text.strip()
