"""Trace logging helpers for solver runs."""

from rpnsolve.trace.event import new_event, report_event
from rpnsolve.trace.logger import TraceLogger

__all__ = ["TraceLogger", "new_event", "report_event"]
