"""Core domain models for searchable records.

A Record is one fixed item of the dataset. Its identity is its position in
the dataset, so two records with identical text are still distinct.
"""

from typing import Iterable, List

from pydantic import BaseModel, Field, field_validator


class Record(BaseModel):
    """One searchable text item, identified by its position in the dataset."""

    index: int = Field(..., ge=0, description="Position of the record in the dataset")
    text: str = Field(..., description="Text shown to the user and matched against queries")

    @field_validator("text")
    @classmethod
    def reject_blank(cls, v: str) -> str:
        """Records must carry searchable text."""
        if not v or not v.strip():
            raise ValueError("Record text cannot be empty or whitespace-only")
        return v

    model_config = {
        "frozen": True,
        "json_schema_extra": {"example": {"index": 1, "text": "10 mm tempered glass"}},
    }

    def __str__(self) -> str:
        return self.text


def build_records(texts: Iterable[str]) -> List[Record]:
    """Wrap texts as Records, numbering them in iteration order.

    Raises:
        pydantic.ValidationError: If any text is blank
    """
    return [Record(index=index, text=text) for index, text in enumerate(texts)]
