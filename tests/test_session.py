"""Unit tests for SearchSession and the recognizer boundary.

Tests:
- Typed queries and filter re-runs
- Recognition state machine (started / ended / result / error)
- Permission denial and recognizer failures
- TranscriptRecognizer playback
"""

from unittest.mock import MagicMock

import pytest

from material_search.domain.catalog import default_records
from material_search.session import (
    PERMISSION_NOTICE,
    ListeningState,
    SearchSession,
    StatusLabel,
    TranscriptRecognizer,
)
from tests.helpers import ScriptedRecognizer


@pytest.fixture
def records():
    return default_records()


@pytest.fixture
def recognizer():
    return ScriptedRecognizer()


@pytest.fixture
def session(records, recognizer):
    return SearchSession(records, recognizer=recognizer, locale="en-US")


class TestTypedQueries:
    """Tests for typing into the search box."""

    def test_initial_state_shows_everything(self, session, records):
        view = session.view()

        assert view.query == ""
        assert view.status == StatusLabel.NONE
        assert view.state == ListeningState.IDLE
        assert view.records == records
        assert view.notice is None

    def test_set_query_filters(self, session):
        result = session.set_query("glass tempered")

        assert result.texts == ["10 mm tempered glass"]
        assert session.query == "glass tempered"
        assert [r.text for r in session.view().records] == ["10 mm tempered glass"]

    def test_clear_query(self, session, records):
        session.set_query("glass")
        session.clear_query()

        assert session.query == ""
        assert session.view().records == records

    def test_empty_message(self, session):
        session.set_query("copper")
        view = session.view()

        assert view.records == []
        assert view.empty_message == 'No materials found for "copper"'

    def test_view_is_a_snapshot(self, session):
        view = session.view()
        session.set_query("glass")

        assert view.query == ""
        assert len(view.records) == 7


class TestRecognitionStateMachine:
    """Tests for recognizer-driven transitions."""

    def test_start_clears_query_and_shows_starting(self, session, recognizer):
        session.set_query("glass")

        assert session.start_listening() is True

        assert recognizer.started_locales == ["en-US"]
        assert session.query == ""
        assert session.status == StatusLabel.STARTING
        assert session.state == ListeningState.IDLE

    def test_full_pass(self, session, recognizer):
        session.start_listening()

        recognizer.emit_started()
        assert session.state == ListeningState.LISTENING
        assert session.status == StatusLabel.LISTENING
        assert session.view().is_listening is True

        recognizer.emit_ended()
        assert session.state == ListeningState.PROCESSING
        assert session.status == StatusLabel.PROCESSING
        assert session.view().is_listening is False

        recognizer.emit_result(["glass tempered", "glass temper"])
        assert session.state == ListeningState.IDLE
        assert session.status == StatusLabel.NONE
        assert session.query == "glass tempered"
        assert session.result.texts == ["10 mm tempered glass"]

    def test_result_is_treated_like_typed_text(self, records):
        spoken = SearchSession(records, recognizer=ScriptedRecognizer())
        typed = SearchSession(records)

        spoken.recognizer.hear("Ten mm glass")
        typed.set_query("Ten mm glass")

        assert spoken.view().records == typed.view().records
        assert spoken.query == typed.query

    def test_single_string_result(self, session, recognizer):
        recognizer.hear("DM0000011")

        assert session.result.texts == ["DM0000011"]

    def test_empty_result_is_ignored(self, session, recognizer):
        session.set_query("glass")
        recognizer.emit_started()
        recognizer.emit_ended()
        recognizer.emit_result([])

        assert session.query == "glass"
        assert session.state == ListeningState.PROCESSING
        assert session.status == StatusLabel.PROCESSING

    def test_error_keeps_query_and_results(self, session, recognizer):
        session.start_listening()
        recognizer.emit_started()
        session.set_query("mcb")
        before = session.view().records

        recognizer.emit_error("7/No match")

        assert session.state == ListeningState.IDLE
        assert session.status == StatusLabel.ERROR
        assert session.query == "mcb"
        assert session.view().records == before

    def test_error_is_logged_as_warning(self, records, recognizer):
        mock_logger = MagicMock()
        SearchSession(records, recognizer=recognizer, logger_instance=mock_logger)

        recognizer.emit_error("network")

        level, message = mock_logger.log.call_args.args[:2]
        assert level == 30
        assert "network" in message
        assert mock_logger.log.call_args.kwargs["extra"]["reason"] == "network"

    def test_late_result_while_idle_is_applied(self, session, recognizer):
        recognizer.emit_result(["consultation"])

        assert session.result.texts == ["IT Consultation"]

    def test_toggle_while_listening_stops(self, session, recognizer):
        session.toggle_listening()
        recognizer.emit_started()

        assert session.toggle_listening() is False

        assert recognizer.stop_calls == 1
        assert session.state == ListeningState.IDLE
        assert session.status == StatusLabel.NONE

    def test_toggle_while_processing_starts_again(self, session, recognizer):
        session.toggle_listening()
        recognizer.emit_started()
        recognizer.emit_ended()

        assert session.toggle_listening() is True

        assert recognizer.started_locales == ["en-US", "en-US"]
        assert recognizer.stop_calls == 0

    def test_recognition_id_per_start(self, session):
        session.start_listening()
        first = session.recognition_id
        session.start_listening()

        assert first is not None
        assert session.recognition_id != first

    def test_close_detaches(self, session, recognizer):
        session.close()
        recognizer.emit_result(["glass"])

        assert recognizer.listener is None
        assert session.query == ""


class TestFailures:
    """Tests for permission and recognizer failures."""

    def test_permission_denied(self, records, recognizer):
        session = SearchSession(records, recognizer=recognizer, permission_gate=lambda: False)
        session.set_query("glass")

        assert session.start_listening() is False

        assert recognizer.started_locales == []
        assert session.notice == PERMISSION_NOTICE
        assert str(session.view().notice) == (
            "Permission Required: Please enable microphone access."
        )
        assert session.query == "glass"
        assert session.status == StatusLabel.NONE

    def test_dismiss_notice(self, records, recognizer):
        session = SearchSession(records, recognizer=recognizer, permission_gate=lambda: False)
        session.start_listening()
        session.dismiss_notice()

        assert session.view().notice is None

    def test_permission_checked_every_time(self, records, recognizer):
        answers = iter([False, True])
        session = SearchSession(records, recognizer=recognizer, permission_gate=lambda: next(answers))

        assert session.start_listening() is False
        assert session.start_listening() is True
        assert recognizer.started_locales == ["en-US"]

    def test_start_failure(self, records):
        session = SearchSession(records, recognizer=ScriptedRecognizer(fail_start="busy"))

        assert session.start_listening() is False

        assert session.state == ListeningState.IDLE
        assert session.status == StatusLabel.ERROR

    def test_stop_failure_still_resets(self, records):
        recognizer = ScriptedRecognizer(fail_stop="already stopped")
        session = SearchSession(records, recognizer=recognizer)
        session.start_listening()
        recognizer.emit_started()

        session.stop_listening()

        assert session.state == ListeningState.IDLE
        assert session.status == StatusLabel.NONE

    def test_no_recognizer(self, records):
        session = SearchSession(records)

        assert session.start_listening() is False
        session.stop_listening()
        session.close()
        assert session.state == ListeningState.IDLE


class TestTranscriptRecognizer:
    """Tests for TranscriptRecognizer playback."""

    def test_plays_queued_transcripts(self, records):
        recognizer = TranscriptRecognizer(["glass tempered", "one point two mm"])
        session = SearchSession(records, recognizer=recognizer)

        session.toggle_listening()
        assert session.result.texts == ["10 mm tempered glass"]
        assert session.status == StatusLabel.NONE
        assert session.state == ListeningState.IDLE

        recognizer.queue("mcb switch")
        session.toggle_listening()
        session.toggle_listening()
        assert session.result.texts == ["10 A Single Pole MCB Switch Gear"]

    def test_nothing_queued_is_an_error(self, records):
        recognizer = TranscriptRecognizer()
        session = SearchSession(records, recognizer=recognizer)
        session.set_query("glass")

        session.toggle_listening()

        assert session.status == StatusLabel.ERROR
        assert session.query == ""
        assert recognizer.active is False

    def test_unbound_recognizer_is_silent(self):
        recognizer = TranscriptRecognizer(["glass"])

        recognizer.start("en-US")

        assert recognizer.active is False
