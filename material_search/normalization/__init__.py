"""Text normalization for record/query comparison.

This module provides:
- normalize: canonical comparable form of a record or query
- substitute_number_words: spoken number word to digit substitution
- NUMBER_WORDS: read-only "zero".."twenty" lookup table
"""

from .numbers import NUMBER_WORDS
from .service import normalize, substitute_number_words

__all__ = [
    "NUMBER_WORDS",
    "normalize",
    "substitute_number_words",
]
