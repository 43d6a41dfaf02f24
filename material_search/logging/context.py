"""Context propagation for structured logging.

Fields pushed here are stamped onto every log record emitted inside the
scope (see ContextualFilter). Backed by contextvars so each thread and
asyncio task sees its own stack.
"""

from contextvars import ContextVar, Token
from typing import Any, Dict, Optional


LogContextVar: ContextVar[Dict[str, Any]] = ContextVar("material_search_log_context", default={})


def get_log_context() -> Dict[str, Any]:
    """Return a copy of the fields currently in scope."""
    return LogContextVar.get().copy()


def push_log_context(**fields) -> Token:
    """Merge fields into the current logging context.

    Args:
        **fields: Key-value pairs to attach to subsequent log records

    Returns:
        Token to hand to pop_log_context() to restore the previous fields

    Example:
        >>> token = push_log_context(session_id="s-1", locale="en-US")
        >>> pop_log_context(token)
    """
    return LogContextVar.set({**LogContextVar.get(), **fields})


def pop_log_context(token: Token) -> None:
    """Restore the fields that were in scope before the matching push."""
    LogContextVar.reset(token)


def clear_log_context() -> None:
    """Drop every context field. Mostly used by tests."""
    LogContextVar.set({})


class log_context:
    """Context manager form of push/pop.

    Example:
        >>> with log_context(session_id="s-1"):
        ...     logger.info("Recognition started")  # carries session_id
    """

    def __init__(self, **fields):
        self.fields = fields
        self.token: Optional[Token] = None

    def __enter__(self):
        self.token = push_log_context(**self.fields)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.token is not None:
            pop_log_context(self.token)
            self.token = None
        return False
