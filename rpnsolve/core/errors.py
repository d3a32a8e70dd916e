"""Error kinds raised by the solver pipeline."""

from __future__ import annotations


class SolverError(Exception):
    """Base solver error carrying a stable kind and the offending expression."""

    kind = "solver_error"

    def __init__(self, message: str, *, expression: str | None = None) -> None:
        self.message = message
        self.expression = expression
        super().__init__(self.__str__())

    def __str__(self) -> str:
        return (
            f"{type(self).__name__}(kind={self.kind!r}, "
            f"expression={self.expression!r}): {self.message}"
        )


class InvalidExpressionError(SolverError):
    """Expression was rejected by the validator."""

    kind = "invalid_expression"


class DivisionByZeroError(SolverError):
    """Right-hand operand of a division evaluated to zero."""

    kind = "division_by_zero"


class MalformedResultError(SolverError):
    """Postfix sequence did not reduce to exactly one value."""

    kind = "malformed_result"


class NonFiniteResultError(SolverError):
    """Evaluation overflowed to an infinite or NaN value."""

    kind = "non_finite_result"
