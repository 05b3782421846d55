"""Stdout logging setup for applications issuing typed REST calls.

The library only obtains loggers under ``packages.typed_rest``; installing
handlers is the host application's choice. ``configure_logging`` gives hosts a
one-call setup whose records carry the call fields bound by the pipeline.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from . import fields
from .context import bind_context, get_context

if TYPE_CHECKING:
    from packages.typed_rest.config import LoggingSettings

# Correlation fields lead plain-text output; everything else follows sorted.
_LEADING_FIELDS = (fields.CALL_ID, fields.HTTP_METHOD, fields.URL)


class ContextFilter(logging.Filter):
    """Attach the current task's bound fields to each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        context = get_context()
        record.context = context
        for key, value in context.items():
            if not hasattr(record, key):
                setattr(record, key, value)
        return True


def _record_context(record: logging.LogRecord) -> dict[str, str]:
    context = getattr(record, "context", None)
    return context if isinstance(context, dict) else {}


class JsonFormatter(logging.Formatter):
    """Emit one JSON object per line: core fields first, then call fields."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            fields.TIMESTAMP: datetime.fromtimestamp(record.created, UTC).isoformat(),
            fields.LEVEL: record.levelname,
            fields.LOGGER: record.name,
            fields.MESSAGE: record.getMessage(),
            **_record_context(record),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, separators=(",", ":"))


class PlainFormatter(logging.Formatter):
    """Human-readable lines with ``key=value`` call fields appended."""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        context = _record_context(record)
        if not context:
            return message
        leading = [key for key in _LEADING_FIELDS if key in context]
        trailing = sorted(key for key in context if key not in _LEADING_FIELDS)
        suffix = " ".join(f"{key}={context[key]}" for key in [*leading, *trailing])
        return f"{message} {suffix}"


def configure_logging(
    *,
    level: str = "INFO",
    json_output: bool = True,
    service: str | None = None,
    environment: str | None = None,
) -> None:
    """Replace root handlers with a single stdout handler.

    Safe to call repeatedly; earlier root handlers are removed first.
    """
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level.upper())

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setLevel(level.upper())
    handler.addFilter(ContextFilter())
    handler.setFormatter(JsonFormatter() if json_output else PlainFormatter())
    root.addHandler(handler)

    bind_context(**{fields.SERVICE: service, fields.ENVIRONMENT: environment})


def configure_logging_from_settings(settings: LoggingSettings) -> None:
    """Apply ``LoggingSettings`` via ``configure_logging``."""
    configure_logging(
        level=settings.level,
        json_output=settings.json_output,
        service=settings.service,
        environment=settings.environment,
    )


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger from the standard logging hierarchy."""
    return logging.getLogger(name)
