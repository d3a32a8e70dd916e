"""Deterministic scanner turning expression text into tokens."""

from __future__ import annotations

from rpnsolve.core.tokens import OPERATOR_SYMBOLS, Operator, Token

_DIGITS = frozenset("0123456789")


def tokenize(text: str) -> list[Token]:
    """Split ``text`` into number, operator and parenthesis tokens.

    Digit runs become a single NUMBER token. Whitespace and any character
    outside the expression alphabet are skipped; callers validate first.
    """

    out: list[Token] = []
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if ch in _DIGITS:
            j = i + 1
            while j < n and text[j] in _DIGITS:
                j += 1
            out.append(Token.number(text[i:j]))
            i = j
            continue
        if ch in OPERATOR_SYMBOLS:
            out.append(Token.op(Operator.from_symbol(ch)))
        elif ch == "(":
            out.append(Token.open_paren())
        elif ch == ")":
            out.append(Token.close_paren())
        i += 1
    return out
