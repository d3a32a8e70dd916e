"""Pydantic models describing a single solve run."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class SolveStage(str, Enum):
    """Pipeline stage a solve run ended in."""

    START = "start"
    SCANNING = "scanning"
    REJECTED = "rejected"
    CONVERTING = "converting"
    EVALUATING = "evaluating"
    DONE = "done"
    FAILED = "failed"


class SolveReport(BaseModel):
    """Outcome of solving one expression, including intermediate forms."""

    model_config = ConfigDict(extra="forbid")

    expression: str | None
    stage: SolveStage = SolveStage.START
    tokens: list[str] = Field(default_factory=list)
    postfix: list[str] = Field(default_factory=list)
    result: float | None = None
    error_kind: str | None = None
    error: str | None = None
    reference: str | None = None
    verified: bool | None = None

    @property
    def ok(self) -> bool:
        return self.stage is SolveStage.DONE

    def to_dict(self) -> dict:
        """Return a JSON-safe dict."""

        return self.model_dump(mode="json")
