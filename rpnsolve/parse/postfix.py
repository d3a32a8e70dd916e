"""Shunting-yard conversion from infix tokens to postfix order."""

from __future__ import annotations

from collections.abc import Iterable

from rpnsolve.core.errors import MalformedResultError
from rpnsolve.core.tokens import Token, TokenKind


def to_postfix(tokens: Iterable[Token], *, expression: str | None = None) -> list[Token]:
    """Reorder validated infix ``tokens`` into postfix (reverse Polish) order.

    Operators of equal precedence are left-associative. Parentheses are
    consumed and never emitted. Both stacks are local to the call.
    """

    output: list[Token] = []
    pending: list[Token] = []

    for token in tokens:
        if token.kind is TokenKind.NUMBER:
            output.append(token)
        elif token.kind is TokenKind.OPERATOR:
            precedence = token.operator.precedence
            while (
                pending
                and pending[-1].kind is TokenKind.OPERATOR
                and pending[-1].operator.precedence >= precedence
            ):
                output.append(pending.pop())
            pending.append(token)
        elif token.kind is TokenKind.OPEN_PAREN:
            pending.append(token)
        else:
            _close_group(pending, output, expression)

    while pending:
        top = pending.pop()
        if top.kind is TokenKind.OPEN_PAREN:
            raise MalformedResultError(
                "unclosed '(' left on the operator stack", expression=expression
            )
        output.append(top)
    return output


def _close_group(pending: list[Token], output: list[Token], expression: str | None) -> None:
    while pending:
        top = pending.pop()
        if top.kind is TokenKind.OPEN_PAREN:
            return
        output.append(top)
    raise MalformedResultError(
        "')' without a matching '(' on the operator stack", expression=expression
    )
