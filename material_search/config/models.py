"""Configuration schema models using Pydantic."""

from enum import Enum
from typing import List

from pydantic import BaseModel, Field, field_validator

from material_search.domain.catalog import DEFAULT_MATERIALS
from material_search.domain.models import Record, build_records


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log output formats."""

    JSON = "json"
    KEY_VALUE = "key-value"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.INFO, description="Log level")
    format: LogFormat = Field(
        LogFormat.KEY_VALUE, description="Log output format (json or key-value)"
    )

    model_config = {"use_enum_values": True}


class AppConfig(BaseModel):
    """Root configuration object for Material Search."""

    records: List[str] = Field(
        default_factory=lambda: list(DEFAULT_MATERIALS),
        min_length=1,
        description="Searchable record texts, in display order",
    )
    locale: str = Field("en-US", min_length=1, description="Speech recognizer locale")
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )

    @field_validator("records")
    @classmethod
    def strip_records(cls, v: List[str]) -> List[str]:
        """Strip surrounding whitespace and reject blank records."""
        stripped = []
        for position, text in enumerate(v):
            cleaned = text.strip()
            if not cleaned:
                raise ValueError(f"Record {position} is empty or whitespace-only")
            stripped.append(cleaned)
        return stripped

    @field_validator("locale")
    @classmethod
    def strip_locale(cls, v: str) -> str:
        stripped = v.strip()
        if not stripped:
            raise ValueError("locale cannot be empty")
        return stripped

    def build_records(self) -> List[Record]:
        """Return the configured records as domain Records."""
        return build_records(self.records)
