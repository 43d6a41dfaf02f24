"""Query matching engine.

A record matches a query when every word of the normalized query occurs
somewhere in the normalized record text. Containment is plain substring
search: "2mm" matches "1.2mm" and "rr" would match "mirror". There is no
whole-word equality, stemming or edit-distance tolerance, and no ranking;
a record is either in the result or out of it.
"""

import logging
from typing import Callable, Iterable, List, Optional, Sequence, TypeVar

from material_search.domain.models import Record
from material_search.logging import get_logger
from material_search.normalization import normalize

from .models import FilterResult, MatchResult

logger = get_logger(__name__, component="matching")

T = TypeVar("T")


def evaluate(candidate_text: str, query_text: str) -> MatchResult:
    """Compare a raw candidate against a raw query.

    Both sides are normalized independently. A query that normalizes to the
    empty string matches everything.

    Args:
        candidate_text: Record text (unnormalized)
        query_text: Query text (unnormalized, may be empty)

    Returns:
        MatchResult with the decision and the words that were not found
    """
    candidate = normalize(candidate_text)
    query = normalize(query_text)

    if not query:
        return MatchResult(is_match=True, candidate_normalized=candidate)

    words = query.split(" ")
    missing = [word for word in words if word not in candidate]

    return MatchResult(
        is_match=not missing,
        candidate_normalized=candidate,
        query_words=words,
        missing_words=missing,
    )


def matches(candidate_text: str, query_text: str) -> bool:
    """Return True if every query word is contained in the candidate.

    Example:
        >>> matches("1.2mm RR Electrical Case", "electrical rr")
        True
        >>> matches("1.2mm RR Electrical Case", "2mm")
        True
        >>> matches("10 A Single Pole MCB Switch Gear", "mcb gear xyz")
        False
    """
    return evaluate(candidate_text, query_text).is_match


def filter_records(
    records: Iterable[T], query: str, key: Callable[[T], str] = str
) -> List[T]:
    """Return the records that match ``query``, preserving their order.

    Args:
        records: Records (or plain strings) to filter
        query: Raw query text
        key: Extracts the searchable text from a record (default: str())

    Returns:
        Matching records in their original relative order. Repeated texts
        are kept as separate entries.
    """
    return [record for record in records if matches(key(record), query)]


class QueryMatcher:
    """Runs filter passes over a fixed dataset.

    The dataset is captured once; each call to search() is a full, stateless
    pass so it is safe to call again on every query change.
    """

    def __init__(self, records: Sequence[Record], logger_instance: Optional[logging.Logger] = None):
        """Initialize QueryMatcher.

        Args:
            records: Dataset to search, in display order
            logger_instance: Optional logger (defaults to module logger)
        """
        self.records = tuple(records)
        self.logger = logger_instance or logger

    def search(self, query: str) -> FilterResult:
        """Filter the dataset for ``query``.

        Args:
            query: Raw query text, typed or recognized

        Returns:
            FilterResult with matching records in dataset order
        """
        normalized_query = normalize(query)
        selected: List[Record] = []

        for record in self.records:
            result = evaluate(record.text, query)
            if result.is_match:
                selected.append(record)
            elif self.logger.isEnabledFor(logging.DEBUG):
                self.logger.debug(
                    f"Record did not match: {record.text}",
                    extra={
                        "event": "search.record.rejected",
                        "record_index": record.index,
                        "missing_words": result.missing_words,
                    },
                )

        self.logger.debug(
            f"Filter pass completed: {len(selected)}/{len(self.records)} records matched",
            extra={
                "event": "search.filter.completed",
                "normalized_query": normalized_query,
                "matched_count": len(selected),
                "total_records": len(self.records),
            },
        )

        return FilterResult(
            query=query,
            normalized_query=normalized_query,
            records=selected,
            total_records=len(self.records),
        )
