"""Speech recognizer boundary.

The recognition engine itself lives outside this project. Concrete
recognizers subclass SpeechRecognizer, implement start()/stop(), and
report progress through the emit_* helpers, which forward to the bound
listener (normally a SearchSession).
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Iterable, Optional, Protocol, Sequence, Union

from material_search.logging import get_logger

logger = get_logger(__name__, component="recognizer")


class RecognizerError(Exception):
    """Raised when a recognizer cannot start or stop a session."""


class RecognitionListener(Protocol):
    """Receiver of recognition events."""

    def on_recognition_started(self) -> None: ...

    def on_recognition_ended(self) -> None: ...

    def on_recognition_result(self, alternatives: Union[str, Sequence[str]]) -> None: ...

    def on_recognition_error(self, reason: str) -> None: ...


class SpeechRecognizer(ABC):
    """Base class for speech recognizers.

    Subclasses must implement start() and stop(). Events must be delivered
    on the thread that owns the bound listener.
    """

    def __init__(self) -> None:
        self._listener: Optional[RecognitionListener] = None

    def bind(self, listener: RecognitionListener) -> None:
        """Route subsequent events to ``listener``."""
        self._listener = listener

    def unbind(self) -> None:
        """Stop delivering events. Pending events are dropped."""
        self._listener = None

    @property
    def listener(self) -> Optional[RecognitionListener]:
        return self._listener

    @abstractmethod
    def start(self, locale: str) -> None:
        """Begin a recognition session.

        Raises:
            RecognizerError: If the session could not be started
        """

    @abstractmethod
    def stop(self) -> None:
        """End the current recognition session.

        Raises:
            RecognizerError: If the session could not be stopped
        """

    def emit_started(self) -> None:
        if self._listener is not None:
            self._listener.on_recognition_started()

    def emit_ended(self) -> None:
        if self._listener is not None:
            self._listener.on_recognition_ended()

    def emit_result(self, alternatives: Union[str, Sequence[str]]) -> None:
        """Deliver transcriptions, best first."""
        if self._listener is not None:
            self._listener.on_recognition_result(alternatives)

    def emit_error(self, reason: str) -> None:
        if self._listener is not None:
            self._listener.on_recognition_error(reason)


class TranscriptRecognizer(SpeechRecognizer):
    """Recognizer that "hears" pre-supplied transcripts.

    Each start() plays one full recognition pass for the next queued
    transcript: started, ended, then the result. With nothing queued the
    pass ends in an error, as a real engine does when it hears nothing.
    """

    NO_SPEECH = "No speech detected"

    def __init__(self, transcripts: Iterable[str] = ()) -> None:
        super().__init__()
        self._pending = deque(transcripts)
        self.active = False

    def queue(self, transcript: str) -> None:
        self._pending.append(transcript)

    def start(self, locale: str) -> None:
        logger.debug(
            "Transcript recognition started",
            extra={"event": "recognizer.transcript.started", "locale": locale},
        )
        self.active = True
        self.emit_started()

        if not self._pending:
            self.active = False
            self.emit_error(self.NO_SPEECH)
            return

        transcript = self._pending.popleft()
        self.active = False
        self.emit_ended()
        self.emit_result([transcript])

    def stop(self) -> None:
        self.active = False
