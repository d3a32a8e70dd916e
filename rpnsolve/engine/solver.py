"""Validate-then-solve facade over the tokenizer, converter and evaluator."""

from __future__ import annotations

import math
from typing import Callable, Protocol, Union, runtime_checkable

from rpnsolve.core.errors import InvalidExpressionError, NonFiniteResultError, SolverError
from rpnsolve.core.models import SolveReport, SolveStage
from rpnsolve.core.tokens import Token
from rpnsolve.engine.evaluator import evaluate
from rpnsolve.parse.postfix import to_postfix
from rpnsolve.parse.tokenizer import tokenize
from rpnsolve.parse.validator import ExpressionValidator


@runtime_checkable
class TaskValidator(Protocol):
    """Anything that can accept or reject a task string."""

    def validate(self, text: str) -> bool:
        """Return ``True`` to let the solver proceed with ``text``."""

        raise NotImplementedError


ValidatorLike = Union[TaskValidator, Callable[[str], bool]]


class Solver(Protocol):
    """Solver protocol: turn a task string into a float."""

    def solve(self, text: str, validator: ValidatorLike | None = None) -> float:
        """Solve ``text``, validating it with ``validator`` or the default one."""

        raise NotImplementedError


_DEFAULT_VALIDATOR = ExpressionValidator()


def _check(text: str, validator: ValidatorLike | None) -> None:
    if validator is None:
        validator = _DEFAULT_VALIDATOR
    if isinstance(validator, TaskValidator):
        accepted = validator.validate(text)
    else:
        accepted = validator(text)
    if not accepted:
        raise InvalidExpressionError("invalid mathematical expression", expression=text)


def compile_expression(text: str, validator: ValidatorLike | None = None) -> list[Token]:
    """Validate ``text`` and return its postfix token sequence."""

    _check(text, validator)
    return to_postfix(tokenize(text), expression=text)


class ReversePolishSolver:
    """Solver that evaluates expressions through reverse Polish notation.

    Instances hold no per-call state and can be shared between threads.
    """

    def solve(self, text: str, validator: ValidatorLike | None = None) -> float:
        return evaluate(compile_expression(text, validator), expression=text)


_DEFAULT_SOLVER = ReversePolishSolver()


def solve(text: str, validator: ValidatorLike | None = None) -> float:
    """Solve ``text`` with the shared default solver."""

    return _DEFAULT_SOLVER.solve(text, validator)


def solve_report(
    text: str,
    validator: ValidatorLike | None = None,
    *,
    verify: bool = False,
    tolerance: float = 1e-3,
) -> SolveReport:
    """Solve ``text`` and describe every stage reached instead of raising.

    An overflowing result is reported as a ``non_finite_result`` failure.

    With ``verify`` the result is cross-checked against an exact sympy
    evaluation of the same tokens.
    """

    report = SolveReport(expression=text, stage=SolveStage.SCANNING)
    try:
        _check(text, validator)
    except InvalidExpressionError as exc:
        return _failed(report, SolveStage.REJECTED, exc)

    tokens = tokenize(text)
    report.tokens = [tok.text for tok in tokens]
    report.stage = SolveStage.CONVERTING
    try:
        postfix = to_postfix(tokens, expression=text)
        report.postfix = [tok.text for tok in postfix]
        report.stage = SolveStage.EVALUATING
        result = evaluate(postfix, expression=text)
        if not math.isfinite(result):
            raise NonFiniteResultError(f"result {result!r} is not finite", expression=text)
        report.result = result
    except SolverError as exc:
        return _failed(report, SolveStage.FAILED, exc)
    report.stage = SolveStage.DONE

    if verify:
        from rpnsolve.engine.verify import verify_result

        report.verified, detail = verify_result(tokens, report.result, tolerance=tolerance)
        report.reference = detail
    return report


def _failed(report: SolveReport, stage: SolveStage, exc: SolverError) -> SolveReport:
    report.stage = stage
    report.error_kind = exc.kind
    report.error = exc.message
    return report
