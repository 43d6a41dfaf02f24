"""State and view models for a search session."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from material_search.domain.models import Record


class ListeningState(str, Enum):
    """Where the session is in a recognition pass."""

    IDLE = "idle"
    LISTENING = "listening"
    PROCESSING = "processing"


class StatusLabel:
    """Status texts shown next to the search box."""

    NONE = ""
    STARTING = "Starting..."
    LISTENING = "Listening..."
    PROCESSING = "Processing..."
    ERROR = "Error: Try again"


@dataclass(frozen=True)
class Notice:
    """Blocking message the user has to acknowledge."""

    title: str
    message: str

    def __str__(self) -> str:
        return f"{self.title}: {self.message}"


PERMISSION_NOTICE = Notice(
    title="Permission Required",
    message="Please enable microphone access.",
)


@dataclass(frozen=True)
class SearchView:
    """Everything the presentation layer needs to draw the screen.

    Attributes:
        query: Current query text, as typed or recognized
        status: Status label (empty when there is nothing to report)
        state: Recognition state
        records: Records matching the query, in dataset order
        notice: Pending blocking notice, if any
    """

    query: str
    status: str
    state: ListeningState
    records: List[Record] = field(default_factory=list)
    notice: Optional[Notice] = None

    @property
    def is_listening(self) -> bool:
        return self.state == ListeningState.LISTENING

    @property
    def empty_message(self) -> str:
        """Text shown in place of the list when nothing matches."""
        return f'No materials found for "{self.query}"'
