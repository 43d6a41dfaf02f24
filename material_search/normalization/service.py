"""Text canonicalization used on both sides of a search comparison.

Records and queries go through the same normalize() so that casing,
spacing, stray punctuation and spelled-out numbers (as produced by speech
recognition, e.g. "zero one one") do not affect matching.
"""

import re
from typing import Mapping

from .numbers import NUMBER_WORDS

_WHITESPACE_RE = re.compile(r"\s+")

# Periods survive so decimal measurements such as "1.2mm" stay intact.
# Everything else is deleted outright, not replaced by a space.
_DISALLOWED_RE = re.compile(r"[^a-z0-9. ]")


def _fold(text: str) -> str:
    # Upper-casing first maps dotless "ı" to "i", which casefold() alone keeps.
    return text.upper().casefold()


def substitute_number_words(text: str, table: Mapping[str, str] = NUMBER_WORDS) -> str:
    """Replace whole tokens that are number words with their digits.

    Tokens are split on whitespace runs and rejoined with single spaces.

    Example:
        >>> substitute_number_words("Zero  one ONE")
        '0 1 1'
    """
    tokens = []
    for token in text.split():
        folded = _fold(token)
        tokens.append(table.get(folded, folded))
    return " ".join(tokens)


def normalize(text: str) -> str:
    """Return the canonical comparable form of ``text``.

    Steps, in order:
    1. Substitute number-word tokens with digits (tokens are case-folded)
    2. Case-fold the whole string
    3. Drop every character outside ``[a-z0-9. ]``
    4. Collapse whitespace runs to one space
    5. Trim
    6. Substitute tokens that only became number words after step 3
       ("one," -> "one" -> "1"), which keeps the function idempotent

    Non-ASCII letters are dropped by step 3. That loss is accepted.

    Args:
        text: Any string, including empty or whitespace-only

    Returns:
        String made only of ``[a-z0-9. ]`` with no leading, trailing or
        repeated spaces

    Example:
        >>> normalize("  1.2mm RR, Electrical-Case ")
        '1.2mm rr electricalcase'
        >>> normalize("DM zero zero one")
        'dm 0 0 1'
    """
    result = substitute_number_words(text)
    result = _fold(result)
    result = _DISALLOWED_RE.sub("", result)
    result = _WHITESPACE_RE.sub(" ", result)
    result = result.strip()
    return substitute_number_words(result)
