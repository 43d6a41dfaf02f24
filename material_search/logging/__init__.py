"""Structured logging helpers for Material Search."""

import logging
from typing import Optional, Union

SERVICE_NAME = "material-search"


class ComponentLoggerAdapter(logging.LoggerAdapter):
    """LoggerAdapter that tags records with a component name.

    Fields passed through ``extra=`` on the individual call win over the
    adapter defaults.
    """

    def process(self, msg, kwargs):
        kwargs["extra"] = {**self.extra, **kwargs.get("extra", {})}
        return msg, kwargs


def get_logger(
    name: str, component: Optional[str] = None
) -> Union[logging.Logger, ComponentLoggerAdapter]:
    """Return a logger, optionally bound to a component.

    Args:
        name: Logger name (typically __name__)
        component: Component identifier added to every record

    Example:
        >>> logger = get_logger(__name__, component="matching")
        >>> logger.info("Filter pass completed", extra={"event": "search.filter.completed"})
    """
    logger = logging.getLogger(name)
    if component:
        return ComponentLoggerAdapter(logger, {"component": component})
    return logger
