"""Append-only JSONL log of solver runs."""

from __future__ import annotations

import json
from pathlib import Path

from rpnsolve.core.models import SolveReport
from rpnsolve.trace.event import report_event


class TraceLogger:
    """Writes one compact JSON event per line; opened in append mode."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._fh = self.path.open("a", encoding="utf-8")
        self.count = 0

    def __enter__(self) -> "TraceLogger":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def append(self, event: dict) -> None:
        # Non-finite floats would produce invalid JSON.
        self._fh.write(json.dumps(event, ensure_ascii=False, separators=(",", ":"), allow_nan=False))
        self._fh.write("\n")
        self.count += 1

    def log_report(self, report: SolveReport) -> dict:
        """Record a solve report as a ``final`` or ``error`` event and return it."""

        event = report_event(report)
        self.append(event)
        return event

    def close(self) -> None:
        self._fh.close()
