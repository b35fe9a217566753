"""Status update schemas for push progress reporting."""

from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum

from pydantic import BaseModel, Field


class StatusKind(StrEnum):
    """Severity of a status line."""

    RUNNING = "running"
    OK = "ok"
    WARN = "warn"
    ERROR = "error"


def _utc_now() -> datetime:
    return datetime.now(UTC)


class StatusUpdate(BaseModel):
    """A single human-readable progress line."""

    kind: StatusKind
    message: str
    timestamp: datetime = Field(default_factory=_utc_now)
