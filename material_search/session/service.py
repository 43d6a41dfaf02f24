"""Search session: the query, its results and the recognition state machine.

The session sits between the outside world (keyboard input, a speech
recognizer, a microphone permission check) and the pure matching core.
Recognized text is handled exactly like typed text: it replaces the query
and the dataset is filtered again.

State transitions:

    IDLE --toggle--> (permission ok) start recognizer, status "Starting..."
    any  --started--> LISTENING   "Listening..."
    any  --ended----> PROCESSING  "Processing..."
    any  --result---> IDLE        query replaced, status cleared
    any  --error----> IDLE        "Error: Try again", query untouched
    LISTENING --toggle--> stop recognizer, IDLE, status cleared
"""

import logging
import uuid
from typing import Callable, Optional, Sequence, Union

from material_search.domain.models import Record
from material_search.logging import get_logger
from material_search.logging.context import log_context
from material_search.matching import FilterResult, QueryMatcher

from .models import PERMISSION_NOTICE, ListeningState, Notice, SearchView, StatusLabel
from .recognizer import RecognizerError, SpeechRecognizer

logger = get_logger(__name__, component="session")

PermissionGate = Callable[[], bool]


def _always_granted() -> bool:
    return True


class SearchSession:
    """Owns the current query and drives filter passes on every change.

    Not thread-safe: recognizer events must arrive on the owner's thread.
    """

    def __init__(
        self,
        records: Sequence[Record],
        recognizer: Optional[SpeechRecognizer] = None,
        permission_gate: PermissionGate = _always_granted,
        locale: str = "en-US",
        logger_instance: Optional[logging.Logger] = None,
    ):
        """Initialize SearchSession.

        Args:
            records: Dataset to search
            recognizer: Speech recognizer; None disables voice input
            permission_gate: Returns True when microphone access is granted
            locale: Locale passed to the recognizer
            logger_instance: Optional logger (defaults to module logger)
        """
        self.matcher = QueryMatcher(records)
        self.recognizer = recognizer
        self.permission_gate = permission_gate
        self.locale = locale
        self.logger = logger_instance or logger

        self.state = ListeningState.IDLE
        self.status = StatusLabel.NONE
        self.notice: Optional[Notice] = None
        self.recognition_id: Optional[str] = None
        self._query = ""
        self._result = self.matcher.search(self._query)

        if self.recognizer is not None:
            self.recognizer.bind(self)

    @property
    def query(self) -> str:
        return self._query

    @property
    def result(self) -> FilterResult:
        """Result of the last filter pass."""
        return self._result

    @property
    def is_listening(self) -> bool:
        return self.state == ListeningState.LISTENING

    def set_query(self, text: str) -> FilterResult:
        """Replace the query and re-run the filter."""
        self._query = text
        self._result = self.matcher.search(text)
        return self._result

    def clear_query(self) -> FilterResult:
        return self.set_query("")

    def view(self) -> SearchView:
        """Snapshot of what the presentation layer should show."""
        return SearchView(
            query=self._query,
            status=self.status,
            state=self.state,
            records=list(self._result.records),
            notice=self.notice,
        )

    def dismiss_notice(self) -> None:
        self.notice = None

    # -- user actions -------------------------------------------------------

    def toggle_listening(self) -> bool:
        """Microphone button: stop while listening, otherwise start.

        Returns:
            True if a recognition session is now being started or running
        """
        if self.is_listening:
            self.stop_listening()
            return False
        return self.start_listening()

    def start_listening(self) -> bool:
        """Start a recognition pass.

        The query is cleared first. Nothing happens beyond a notice when
        microphone permission is denied.

        Returns:
            True if the recognizer accepted the start request
        """
        if self.recognizer is None:
            self.logger.warning(
                "Voice input requested but no recognizer is configured",
                extra={"event": "session.recognition.unavailable"},
            )
            return False

        if not self.permission_gate():
            self.notice = PERMISSION_NOTICE
            self.logger.warning(
                "Microphone permission denied",
                extra={"event": "session.permission.denied"},
            )
            return False

        self.recognition_id = uuid.uuid4().hex[:12]
        self.clear_query()
        self.status = StatusLabel.STARTING

        with log_context(recognition_id=self.recognition_id):
            self.logger.info(
                "Starting recognition",
                extra={"event": "session.recognition.starting", "locale": self.locale},
            )
            try:
                self.recognizer.start(self.locale)
            except RecognizerError as e:
                self.logger.error(
                    f"Recognizer failed to start: {e}",
                    extra={"event": "session.recognition.start_failed"},
                    exc_info=True,
                )
                self.state = ListeningState.IDLE
                self.status = StatusLabel.ERROR
                return False

        return True

    def stop_listening(self) -> None:
        """Stop the current recognition pass and clear the status."""
        if self.recognizer is None:
            return

        with log_context(recognition_id=self.recognition_id):
            try:
                self.recognizer.stop()
            except RecognizerError as e:
                self.logger.error(
                    f"Recognizer failed to stop: {e}",
                    extra={"event": "session.recognition.stop_failed"},
                    exc_info=True,
                )
            else:
                self.logger.info(
                    "Recognition stopped by user",
                    extra={"event": "session.recognition.stopped"},
                )

        self.state = ListeningState.IDLE
        self.status = StatusLabel.NONE

    def close(self) -> None:
        """Detach from the recognizer; later events are ignored."""
        if self.recognizer is not None:
            self.recognizer.unbind()

    # -- recognizer events --------------------------------------------------

    def on_recognition_started(self) -> None:
        self.state = ListeningState.LISTENING
        self.status = StatusLabel.LISTENING
        self._log_event("Recognition started", "session.recognition.started")

    def on_recognition_ended(self) -> None:
        self.state = ListeningState.PROCESSING
        self.status = StatusLabel.PROCESSING
        self._log_event("Recognition ended", "session.recognition.ended")

    def on_recognition_result(self, alternatives: Union[str, Sequence[str]]) -> None:
        """Use the best transcription as the new query.

        Args:
            alternatives: Transcriptions ordered best first, or a single string.
                An empty sequence is ignored.
        """
        if isinstance(alternatives, str):
            alternatives = [alternatives]

        if not alternatives:
            self._log_event(
                "Recognition result had no transcriptions",
                "session.recognition.empty_result",
                level=logging.DEBUG,
            )
            return

        transcript = alternatives[0]
        self.state = ListeningState.IDLE
        self.status = StatusLabel.NONE
        result = self.set_query(transcript)

        self._log_event(
            "Recognition result applied",
            "session.recognition.result",
            transcript=transcript,
            matched_count=len(result.records),
        )

    def on_recognition_error(self, reason: str) -> None:
        """Report the failure; the query and results stay as they were."""
        self.state = ListeningState.IDLE
        self.status = StatusLabel.ERROR
        self._log_event(
            f"Recognition error: {reason}",
            "session.recognition.error",
            level=logging.WARNING,
            reason=reason,
        )

    def _log_event(self, message: str, event: str, level: int = logging.INFO, **fields) -> None:
        with log_context(recognition_id=self.recognition_id):
            self.logger.log(level, message, extra={"event": event, **fields})
