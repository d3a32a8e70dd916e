"""Trace event helper utilities."""

from __future__ import annotations

from datetime import datetime, timezone
from uuid import uuid4

from rpnsolve.core.models import SolveReport


def _utc_iso_z_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def new_event(kind: str, message: str, *, data: dict | None = None) -> dict:
    """Create a new trace event dict with id and UTC timestamp."""

    return {
        "event_id": uuid4().hex,
        "ts": _utc_iso_z_now(),
        "kind": kind,
        "message": message,
        "data": data,
    }


def report_event(report: SolveReport) -> dict:
    """Wrap a solve report as a ``final`` or ``error`` trace event."""

    if report.ok:
        return new_event("final", f"solved: {report.result!r}", data=report.to_dict())
    return new_event("error", f"{report.stage.value}: {report.error}", data=report.to_dict())
