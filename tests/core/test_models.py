"""Tests for the solve report model."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from rpnsolve.core.models import SolveReport, SolveStage


def test_report_defaults() -> None:
    report = SolveReport(expression="1+1")

    assert report.stage is SolveStage.START
    assert report.ok is False
    assert report.tokens == []
    assert report.result is None


def test_report_to_dict_is_json_safe() -> None:
    report = SolveReport(
        expression="1+1",
        stage=SolveStage.DONE,
        tokens=["1", "+", "1"],
        postfix=["1", "1", "+"],
        result=2.0,
    )

    payload = report.to_dict()

    assert payload["stage"] == "done"
    assert json.loads(json.dumps(payload)) == payload
    assert report.ok is True


def test_report_rejects_unknown_fields() -> None:
    with pytest.raises(ValidationError):
        SolveReport(expression="1", unknown=True)
