"""
Guess parsing and range checks.

Only plain base-10 integers are accepted: an optional leading sign
followed by ASCII digits. Surrounding whitespace is ignored. Python's
int() is more permissive (underscores, non-ASCII digits), so the text
is matched first.
"""

from __future__ import annotations
import re

from ..exceptions import GuessOverflowError, GuessParseError

GUESS_MIN = 1
GUESS_MAX = 100
MAX_GUESS_DIGITS = 18

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def parse_guess(raw: str) -> int:
    """
    Parse guess text into an integer.

    Raises GuessParseError if the text is not a base-10 integer, and
    GuessOverflowError if it has more than MAX_GUESS_DIGITS significant
    digits (never in range, and not worth converting).
    """
    text = raw.strip()
    if not _INTEGER_RE.fullmatch(text):
        raise GuessParseError(raw)
    if len(text.lstrip("+-").lstrip("0")) > MAX_GUESS_DIGITS:
        raise GuessOverflowError(raw)
    return int(text)


def in_range(value: int) -> bool:
    """Check if a value is inside [GUESS_MIN, GUESS_MAX]."""
    return GUESS_MIN <= value <= GUESS_MAX
