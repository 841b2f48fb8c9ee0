"""Trace logging helpers for the render pipeline."""

from lptex.trace.event import TraceEvent, TraceEventKind, new_event
from lptex.trace.logger import TraceLogger, read_trace

__all__ = ["TraceEvent", "TraceEventKind", "TraceLogger", "new_event", "read_trace"]
