"""Console logging adapter.

Writes structured entries to stdout through structlog. JSON rendering is
used in testing/CI, the colored console renderer everywhere else.

Every entry carries:
- service and environment (bound once at construction)
- request-scoped values from structlog.contextvars (trace_id)
- plain strings for UUIDs and enums, so event and registration ids
  render the same in both output modes
- error_type/error_message when an exception was passed as ``error``

Implementation intentionally does NOT inherit from LoggerProtocol (PEP 544
structural subtyping).
"""

from __future__ import annotations

import logging
import sys
from enum import Enum
from typing import Any
from uuid import UUID

import structlog


def add_service_context(service: str, environment: str) -> structlog.types.Processor:
    """Build a processor stamping service/environment onto each entry.

    Values already present on the entry win.
    """

    def processor(
        _logger: Any, _method: str, event_dict: structlog.types.EventDict
    ) -> structlog.types.EventDict:
        event_dict.setdefault("service", service)
        event_dict.setdefault("environment", environment)
        return event_dict

    return processor


def stringify_identifiers(
    _logger: Any, _method: str, event_dict: structlog.types.EventDict
) -> structlog.types.EventDict:
    """Render UUID and Enum values as their plain string form."""
    for key, value in event_dict.items():
        if isinstance(value, UUID):
            event_dict[key] = str(value)
        elif isinstance(value, Enum):
            event_dict[key] = str(value.value)
    return event_dict


def flatten_error(
    _logger: Any, _method: str, event_dict: structlog.types.EventDict
) -> structlog.types.EventDict:
    """Replace an ``error`` exception with its type name and message."""
    error = event_dict.pop("error", None)
    if isinstance(error, BaseException):
        event_dict["error_type"] = type(error).__name__
        event_dict["error_message"] = str(error)
    elif error is not None:
        event_dict["error"] = error
    return event_dict


class ConsoleAdapter:
    """Structured stdout logger.

    Args:
        use_json (bool): JSON output when True (CI/testing), console when False.
        level (str): Minimum level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service (str): Service name stamped on every entry.
        environment (str): Environment name stamped on every entry.
    """

    def __init__(
        self,
        *,
        use_json: bool = False,
        level: str = "INFO",
        service: str = "eventdesk",
        environment: str = "development",
    ) -> None:
        renderer: structlog.types.Processor = (
            structlog.processors.JSONRenderer()
            if use_json
            else structlog.dev.ConsoleRenderer(colors=True)
        )
        structlog.configure(
            processors=[
                structlog.contextvars.merge_contextvars,
                add_service_context(service, environment),
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso", utc=True),
                flatten_error,
                stringify_identifiers,
                renderer,
            ],
            wrapper_class=structlog.make_filtering_bound_logger(
                logging.getLevelNamesMapping().get(level.upper(), logging.INFO)
            ),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
            cache_logger_on_first_use=True,
        )
        self._logger = structlog.get_logger()

    @classmethod
    def _wrap(cls, logger: Any) -> ConsoleAdapter:
        adapter = cls.__new__(cls)
        adapter._logger = logger
        return adapter

    def debug(self, message: str, /, **context: Any) -> None:
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error; ``error`` is flattened into error_type/error_message."""
        if error is not None:
            context["error"] = error
        self._logger.error(message, **context)

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical entry; ``error`` is handled as in :meth:`error`."""
        if error is not None:
            context["error"] = error
        self._logger.critical(message, **context)

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return a new adapter with ``context`` on all subsequent entries."""
        return self._wrap(self._logger.bind(**context))

    def with_context(self, **context: Any) -> ConsoleAdapter:
        """Alias for :meth:`bind`."""
        return self.bind(**context)
