"""Arithmetic expression solver built on shunting-yard and postfix evaluation."""

from rpnsolve.core.errors import (
    DivisionByZeroError,
    InvalidExpressionError,
    MalformedResultError,
    SolverError,
)
from rpnsolve.engine.solver import ReversePolishSolver, solve, solve_report
from rpnsolve.parse.validator import ExpressionValidator, validate

__all__ = [
    "DivisionByZeroError",
    "ExpressionValidator",
    "InvalidExpressionError",
    "MalformedResultError",
    "ReversePolishSolver",
    "SolverError",
    "solve",
    "solve_report",
    "validate",
]
