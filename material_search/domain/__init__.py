"""Domain models for Material Search."""

from .catalog import DEFAULT_MATERIALS, default_records
from .models import Record, build_records

__all__ = [
    "DEFAULT_MATERIALS",
    "Record",
    "build_records",
    "default_records",
]
