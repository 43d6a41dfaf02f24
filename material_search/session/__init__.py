"""Search session and speech recognizer boundary.

This module provides:
- SearchSession: owns the query and the recognition state machine
- SpeechRecognizer: base class for recognizers feeding a session
- TranscriptRecognizer: recognizer that replays supplied transcripts
- SearchView / ListeningState / StatusLabel / Notice: presentation models
"""

from .models import (
    PERMISSION_NOTICE,
    ListeningState,
    Notice,
    SearchView,
    StatusLabel,
)
from .recognizer import (
    RecognitionListener,
    RecognizerError,
    SpeechRecognizer,
    TranscriptRecognizer,
)
from .service import SearchSession

__all__ = [
    "ListeningState",
    "Notice",
    "PERMISSION_NOTICE",
    "RecognitionListener",
    "RecognizerError",
    "SearchSession",
    "SearchView",
    "SpeechRecognizer",
    "StatusLabel",
    "TranscriptRecognizer",
]
