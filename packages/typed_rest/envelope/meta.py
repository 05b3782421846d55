"""Per-call metadata attached to every result envelope."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import uuid4


@dataclass(frozen=True)
class CallMeta:
    """Correlation metadata for one pipeline call."""

    call_id: str
    started_at: datetime
    duration_ms: float


def new_call_id() -> str:
    """Return a compact random identifier."""
    return uuid4().hex


def utc_now() -> datetime:
    """Return current UTC timestamp."""
    return datetime.now(UTC)
