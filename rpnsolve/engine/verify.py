"""Exact cross-checking of solver results with SymPy."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

import sympy

from rpnsolve.core.tokens import Token, TokenKind

if TYPE_CHECKING:
    from sympy.core.expr import Expr


def infix_text(tokens: Sequence[Token]) -> str:
    """Rebuild infix text from tokens with leading zeros stripped from literals."""

    parts: list[str] = []
    for tok in tokens:
        if tok.kind is TokenKind.NUMBER:
            parts.append(tok.text.lstrip("0") or "0")
        else:
            parts.append(tok.text)
    return " ".join(parts)


def reference_value(tokens: Sequence[Token]) -> tuple["Expr | None", str | None]:
    """Evaluate infix ``tokens`` exactly; return ``(value, error)``."""

    try:
        value = sympy.sympify(infix_text(tokens))
    except Exception as exc:  # noqa: BLE001 - defensive parser boundary
        return None, f"parse_error: {exc}"

    if value.has(sympy.zoo, sympy.nan):
        return None, "division by zero"
    if not bool(getattr(value, "is_number", False)):
        return None, "expression did not evaluate to a number"
    return value, None


def verify_result(
    tokens: Sequence[Token],
    value: float,
    *,
    tolerance: float = 1e-3,
) -> tuple[bool, str]:
    """Compare ``value`` with the exact reference.

    Returns ``(matches, detail)`` where ``detail`` is the exact reference
    rendered as text, or the reason it could not be computed.
    """

    reference, error = reference_value(tokens)
    if reference is None:
        return False, error or "no reference value"
    try:
        matches = abs(float(reference) - value) <= tolerance
        detail = str(reference)
    except Exception as exc:  # noqa: BLE001 - defensive evaluation boundary
        return False, f"eval_error: {exc}"
    return matches, detail
