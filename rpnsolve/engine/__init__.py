"""Postfix evaluation and the public solver facade."""

from rpnsolve.engine.evaluator import evaluate
from rpnsolve.engine.solver import (
    ReversePolishSolver,
    Solver,
    TaskValidator,
    compile_expression,
    solve,
    solve_report,
)

__all__ = [
    "ReversePolishSolver",
    "Solver",
    "TaskValidator",
    "compile_expression",
    "evaluate",
    "solve",
    "solve_report",
]
