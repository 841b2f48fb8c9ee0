"""Typed trace events for the render pipeline."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


class TraceEventKind(str, Enum):
    """Enumerated trace event kinds."""

    NOTE = "note"
    TRANSFORM = "transform"
    FINAL = "final"
    ERROR = "error"


class TraceEvent(BaseModel):
    """Single line of a render trace."""

    model_config = ConfigDict(extra="forbid")

    event_id: str = Field(min_length=1)
    ts: str
    kind: TraceEventKind
    message: str
    data: dict | None = None


def _utc_iso_z_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def new_event(
    kind: TraceEventKind | str,
    message: str,
    *,
    data: dict | None = None,
) -> TraceEvent:
    """Create a trace event with a fresh id and UTC timestamp."""

    return TraceEvent(
        event_id=uuid4().hex,
        ts=_utc_iso_z_now(),
        kind=TraceEventKind(kind),
        message=message,
        data=data,
    )
