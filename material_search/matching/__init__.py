"""Query matching over the record dataset.

This module provides:
- matches / evaluate: decide whether one record satisfies a query
- filter_records: order-preserving filter over any sequence of records
- QueryMatcher: filter passes over a fixed dataset with logging
- MatchResult / FilterResult: result models
"""

from .engine import QueryMatcher, evaluate, filter_records, matches
from .models import FilterResult, MatchResult

__all__ = [
    "FilterResult",
    "MatchResult",
    "QueryMatcher",
    "evaluate",
    "filter_records",
    "matches",
]
