"""Spoken number words recognised by the normalizer."""

from types import MappingProxyType
from typing import Mapping

_WORDS = (
    "zero", "one", "two", "three", "four", "five", "six", "seven", "eight",
    "nine", "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen",
    "sixteen", "seventeen", "eighteen", "nineteen", "twenty",
)

# Read-only so it can be shared by concurrent callers.
NUMBER_WORDS: Mapping[str, str] = MappingProxyType(
    {word: str(value) for value, word in enumerate(_WORDS)}
)
