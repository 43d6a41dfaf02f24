"""Tests for domain models and the built-in catalog."""

import pytest
from pydantic import ValidationError

from material_search.domain import DEFAULT_MATERIALS, Record, build_records, default_records


class TestRecord:
    """Tests for the Record model."""

    def test_create(self):
        record = Record(index=0, text="10 mm tempered glass")

        assert record.index == 0
        assert record.text == "10 mm tempered glass"
        assert str(record) == "10 mm tempered glass"

    @pytest.mark.parametrize("text", ["", "   ", "\n"])
    def test_blank_text_rejected(self, text):
        with pytest.raises(ValidationError):
            Record(index=0, text=text)

    def test_negative_index_rejected(self):
        with pytest.raises(ValidationError):
            Record(index=-1, text="glass")

    def test_text_kept_verbatim(self):
        """Display text is not normalized."""
        assert Record(index=0, text=" RR Case ").text == " RR Case "

    def test_frozen(self):
        record = Record(index=0, text="glass")

        with pytest.raises(ValidationError):
            record.text = "steel"

    def test_identity_includes_position(self):
        assert Record(index=0, text="glass") != Record(index=1, text="glass")


class TestBuildRecords:
    """Tests for build_records() and the default catalog."""

    def test_numbers_in_order(self):
        records = build_records(["a", "b", "a"])

        assert [(r.index, r.text) for r in records] == [(0, "a"), (1, "b"), (2, "a")]

    def test_accepts_generators(self):
        assert len(build_records(text for text in ["a", "b"])) == 2

    def test_blank_entry_rejected(self):
        with pytest.raises(ValidationError):
            build_records(["a", " "])

    def test_default_catalog(self):
        records = default_records()

        assert [r.text for r in records] == list(DEFAULT_MATERIALS)
        assert records[0].text == "MuuchStac Growth Pure"
        assert records[-1].text == "DM0000011"
        assert len(records) == 7
