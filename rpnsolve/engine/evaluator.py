"""Stack evaluation of postfix token sequences."""

from __future__ import annotations

from collections.abc import Iterable

from rpnsolve.core.errors import DivisionByZeroError, MalformedResultError
from rpnsolve.core.tokens import Token, TokenKind


def evaluate(postfix: Iterable[Token], *, expression: str | None = None) -> float:
    """Reduce a postfix sequence to a single float.

    ``expression`` is only used to annotate raised errors.
    """

    stack: list[float] = []
    for token in postfix:
        if token.kind is TokenKind.NUMBER:
            stack.append(float(token.text))
            continue
        if token.kind is not TokenKind.OPERATOR:
            raise MalformedResultError(
                f"unexpected {token.kind.value} token in postfix sequence",
                expression=expression,
            )
        if len(stack) < 2:
            raise MalformedResultError(
                f"operator {token.text!r} needs two operands, stack holds {len(stack)}",
                expression=expression,
            )
        right = stack.pop()
        left = stack.pop()
        try:
            stack.append(token.operator.apply(left, right))
        except ZeroDivisionError as exc:
            raise DivisionByZeroError(
                f"division of {left!r} by zero", expression=expression
            ) from exc

    if len(stack) != 1:
        raise MalformedResultError(
            f"evaluation stack holds {len(stack)} values after solving",
            expression=expression,
        )
    return stack[0]
