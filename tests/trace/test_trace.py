"""Tests for JSONL trace logging."""

from __future__ import annotations

import json
from pathlib import Path

from rpnsolve.engine.solver import solve_report
from rpnsolve.trace import TraceLogger, new_event, report_event


def test_new_event_shape() -> None:
    event = new_event("note", "hello", data={"a": 1})

    assert set(event) == {"event_id", "ts", "kind", "message", "data"}
    assert event["ts"].endswith("Z")
    assert event["data"] == {"a": 1}


def test_report_event_kinds() -> None:
    ok_event = report_event(solve_report("2*3"))
    err_event = report_event(solve_report("2*"))

    assert ok_event["kind"] == "final"
    assert ok_event["data"]["result"] == 6.0
    assert err_event["kind"] == "error"
    assert err_event["data"]["error_kind"] == "invalid_expression"


def test_trace_logger_appends_lines(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "trace.jsonl"

    with TraceLogger(str(path)) as logger:
        logger.append(new_event("note", "first"))
        logger.append(new_event("note", "second"))

    with TraceLogger(path) as logger:
        logger.append(new_event("note", "third"))

    lines = path.read_text(encoding="utf-8").splitlines()
    assert [json.loads(line)["message"] for line in lines] == ["first", "second", "third"]


def test_trace_logger_log_report(tmp_path: Path) -> None:
    path = tmp_path / "trace.jsonl"

    with TraceLogger(path) as logger:
        ok_event = logger.log_report(solve_report("7*6"))
        logger.log_report(solve_report("1" + "0" * 400 + "*2"))
        assert logger.count == 2

    events = [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]
    assert ok_event["kind"] == "final"
    assert [event["kind"] for event in events] == ["final", "error"]
    assert events[1]["data"]["error_kind"] == "non_finite_result"
