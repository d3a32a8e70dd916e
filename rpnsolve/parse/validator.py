"""Lexical well-formedness checks run before an expression is compiled.

The rule set works on the expression with spaces removed and rejects:

* any character other than digits, ``+ - * /``, parentheses;
* an operator or ``(`` directly before ``)``;
* anything other than an operator or ``(`` directly before ``(``;
* ``(`` directly before an operator;
* ``)`` directly before anything other than an operator or ``)``;
* an operator or ``(`` as the last character;
* an operator or ``)`` as the first character;
* two consecutive operators;
* ``/0`` followed by an operator, ``)`` or the end of input.

Bracket balance is checked separately on the unmodified text.
"""

from __future__ import annotations

from typing import Callable

from rpnsolve.core.tokens import OPERATOR_SYMBOLS

_DIGITS = frozenset("0123456789")
_ALPHABET = _DIGITS | OPERATOR_SYMBOLS | {"(", ")"}
_OPERATOR_OR_OPEN = OPERATOR_SYMBOLS | {"("}
_OPERATOR_OR_CLOSE = OPERATOR_SYMBOLS | {")"}


def _illegal_character(s: str) -> bool:
    return any(ch not in _ALPHABET for ch in s)


def _operator_or_open_before_close(s: str) -> bool:
    return any(a in _OPERATOR_OR_OPEN and b == ")" for a, b in zip(s, s[1:]))


def _operand_before_open(s: str) -> bool:
    return any(a not in _OPERATOR_OR_OPEN and b == "(" for a, b in zip(s, s[1:]))


def _open_before_operator(s: str) -> bool:
    return any(a == "(" and b in OPERATOR_SYMBOLS for a, b in zip(s, s[1:]))


def _close_before_operand(s: str) -> bool:
    return any(a == ")" and b not in _OPERATOR_OR_CLOSE for a, b in zip(s, s[1:]))


def _dangling_end(s: str) -> bool:
    return s[-1] in _OPERATOR_OR_OPEN


def _dangling_start(s: str) -> bool:
    return s[0] in _OPERATOR_OR_CLOSE


def _consecutive_operators(s: str) -> bool:
    return any(a in OPERATOR_SYMBOLS and b in OPERATOR_SYMBOLS for a, b in zip(s, s[1:]))


def _literal_zero_divisor(s: str) -> bool:
    start = s.find("/0")
    while start != -1:
        after = start + 2
        if after == len(s) or s[after] in _OPERATOR_OR_CLOSE:
            return True
        start = s.find("/0", start + 1)
    return False


# Evaluated in order; the first matching rule rejects the expression.
RULES: tuple[tuple[str, Callable[[str], bool]], ...] = (
    ("illegal_character", _illegal_character),
    ("operator_or_open_before_close", _operator_or_open_before_close),
    ("operand_before_open", _operand_before_open),
    ("open_before_operator", _open_before_operator),
    ("close_before_operand", _close_before_operand),
    ("dangling_end", _dangling_end),
    ("dangling_start", _dangling_start),
    ("consecutive_operators", _consecutive_operators),
    ("literal_zero_divisor", _literal_zero_divisor),
)


def first_violation(text: object) -> str | None:
    """Return the name of the first failed check, or ``None`` if ``text`` is valid."""

    if not isinstance(text, str) or not text.strip():
        return "blank"

    collapsed = text.replace(" ", "")
    for name, rule in RULES:
        if rule(collapsed):
            return name

    if not brackets_balanced(text):
        return "unbalanced_brackets"
    return None


def brackets_balanced(text: str) -> bool:
    """Check that no prefix closes more brackets than it opens and all are closed."""

    depth = 0
    for ch in text:
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
        if depth < 0:
            return False
    return depth == 0


def validate(text: object) -> bool:
    """Return ``True`` when ``text`` is a well-formed expression. Never raises."""

    return first_violation(text) is None


class ExpressionValidator:
    """Default validator for non-negative integer arithmetic with brackets."""

    def validate(self, text: object) -> bool:
        return validate(text)

    def __call__(self, text: object) -> bool:
        return validate(text)
