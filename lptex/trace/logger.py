"""Append-only JSONL trace logger."""

from __future__ import annotations

import json
from pathlib import Path

from lptex.trace.event import TraceEvent, TraceEventKind, new_event


class TraceLogger:
    """Append-only JSONL logger for render trace events."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._fh = self.path.open("a", encoding="utf-8")

    def __enter__(self) -> "TraceLogger":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def append(self, event: TraceEvent) -> None:
        """Append one compact JSON event line."""

        payload = event.model_dump(mode="json", exclude_none=True)
        line = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
        self._fh.write(line + "\n")

    def event(
        self,
        kind: TraceEventKind | str,
        message: str,
        *,
        data: dict | None = None,
    ) -> None:
        """Build and append an event in one call."""

        self.append(new_event(kind, message, data=data))

    def flush(self) -> None:
        self._fh.flush()

    def close(self) -> None:
        if not self._fh.closed:
            self._fh.close()


def read_trace(path: str | Path) -> list[TraceEvent]:
    """Load every event from a JSONL trace file."""

    events: list[TraceEvent] = []
    for line in Path(path).read_text(encoding="utf-8").splitlines():
        if line.strip():
            events.append(TraceEvent.model_validate_json(line))
    return events
