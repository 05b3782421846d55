"""Per-task structured logging context.

Fields live in a ``contextvars`` variable, so every asyncio task sees its own
copy and concurrent calls never leak fields into each other's log lines.
Values are stringified on bind; ``None`` values are skipped so optional fields
such as a missing status code simply do not appear.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Mapping

_LOG_CONTEXT: ContextVar[Mapping[str, str]] = ContextVar("typed_rest_log_context", default={})


def _merged(base: Mapping[str, str], values: Mapping[str, object]) -> dict[str, str]:
    merged = dict(base)
    merged.update({str(key): str(value) for key, value in values.items() if value is not None})
    return merged


def get_context() -> dict[str, str]:
    """Return a copy of the fields bound in the current task."""
    return dict(_LOG_CONTEXT.get())


def bind_context(**values: object) -> None:
    """Bind fields for the remainder of the current task."""
    if values:
        _LOG_CONTEXT.set(_merged(_LOG_CONTEXT.get(), values))


def clear_context(*keys: str) -> None:
    """Drop the named fields, or every field when no names are given."""
    if not keys:
        _LOG_CONTEXT.set({})
        return
    _LOG_CONTEXT.set({key: value for key, value in _LOG_CONTEXT.get().items() if key not in keys})


@contextmanager
def log_context(values: Mapping[str, object]) -> Iterator[None]:
    """Bind fields for the duration of a block, restoring the outer set after."""
    token = _LOG_CONTEXT.set(_merged(_LOG_CONTEXT.get(), values))
    try:
        yield
    finally:
        _LOG_CONTEXT.reset(token)
