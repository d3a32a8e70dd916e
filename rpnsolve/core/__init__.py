"""Core token, error and report types."""

from rpnsolve.core.errors import (
    DivisionByZeroError,
    InvalidExpressionError,
    MalformedResultError,
    NonFiniteResultError,
    SolverError,
)
from rpnsolve.core.models import SolveReport, SolveStage
from rpnsolve.core.tokens import Operator, Token, TokenKind

__all__ = [
    "DivisionByZeroError",
    "InvalidExpressionError",
    "MalformedResultError",
    "NonFiniteResultError",
    "Operator",
    "SolveReport",
    "SolveStage",
    "SolverError",
    "Token",
    "TokenKind",
]
