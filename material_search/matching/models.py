"""Data models for the matching engine."""

from dataclasses import dataclass, field
from typing import List

from material_search.domain.models import Record


@dataclass(frozen=True)
class MatchResult:
    """Outcome of checking one candidate against one query.

    Attributes:
        is_match: True when every query word occurs in the candidate
        candidate_normalized: Normalized candidate text that was searched
        query_words: Normalized query split into words (empty for "show all")
        missing_words: Query words not found in the candidate
    """

    is_match: bool
    candidate_normalized: str
    query_words: List[str] = field(default_factory=list)
    missing_words: List[str] = field(default_factory=list)

    @property
    def matched_words(self) -> List[str]:
        """Query words that were found, in query order."""
        return [word for word in self.query_words if word not in self.missing_words]


@dataclass(frozen=True)
class FilterResult:
    """Records selected by a single filter pass over the dataset.

    Attributes:
        query: Query text as supplied by the user or recognizer
        normalized_query: Canonical form the records were compared against
        records: Matching records in dataset order
        total_records: Size of the dataset that was searched
    """

    query: str
    normalized_query: str
    records: List[Record]
    total_records: int

    @property
    def texts(self) -> List[str]:
        return [record.text for record in self.records]

    @property
    def is_empty(self) -> bool:
        return not self.records

    @property
    def shows_all(self) -> bool:
        """True when the query is blank after normalization."""
        return not self.normalized_query
