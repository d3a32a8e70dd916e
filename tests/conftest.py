"""Shared fixtures for rpnsolve tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def golden_expressions() -> dict:
    return json.loads((FIXTURES / "expressions.json").read_text(encoding="utf-8"))
