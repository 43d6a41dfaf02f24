"""Additional validation utilities for configuration."""

import re
import warnings
from collections import Counter
from typing import Any, Dict, List

from material_search.normalization import normalize

# Characters that normalize() deletes: anything but ASCII letters, digits,
# periods and whitespace.
_STRIPPED_CHARACTERS_RE = re.compile(r"[^A-Za-z0-9.\s]")


def check_for_warnings(config_dict: Dict[str, Any]) -> List[str]:
    """
    Check configuration for potential issues and return warnings.

    Args:
        config_dict: Raw configuration dictionary

    Returns:
        List of warning messages
    """
    warning_messages = []

    records = config_dict.get("records")
    if not isinstance(records, list):
        return warning_messages

    texts = [record.strip() for record in records if isinstance(record, str) and record.strip()]

    duplicates = sorted(text for text, count in Counter(texts).items() if count > 1)
    if duplicates:
        warning_messages.append(
            f"Duplicate records will be listed once per occurrence: {', '.join(duplicates)}"
        )

    for text in texts:
        if not normalize(text):
            warning_messages.append(
                f"Record '{text}' has no searchable characters and only shows for an empty query"
            )
        elif _STRIPPED_CHARACTERS_RE.search(text):
            # e.g. "AB-12" is searched as "ab12"
            warning_messages.append(
                f"Record '{text}' contains characters that are ignored when searching "
                f"(searched as '{normalize(text)}')"
            )

    return warning_messages


def emit_warnings(warning_messages: List[str]) -> None:
    """
    Emit warning messages using Python's warnings module.

    Args:
        warning_messages: List of warning messages to emit
    """
    for message in warning_messages:
        warnings.warn(message, UserWarning, stacklevel=2)
