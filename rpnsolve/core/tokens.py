"""Lexical token types for arithmetic expressions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenKind(str, Enum):
    """Token category."""

    NUMBER = "number"
    OPERATOR = "operator"
    OPEN_PAREN = "open_paren"
    CLOSE_PAREN = "close_paren"


class Operator(str, Enum):
    """Binary arithmetic operator keyed by its symbol."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    @classmethod
    def from_symbol(cls, symbol: str) -> "Operator":
        """Return the operator for ``symbol`` or raise ``ValueError``."""

        return cls(symbol)

    @property
    def precedence(self) -> int:
        """Precedence tier; higher binds tighter."""

        if self is Operator.ADD or self is Operator.SUBTRACT:
            return 1
        return 2

    def apply(self, left: float, right: float) -> float:
        """Apply the operator. Division by ``0.0`` raises ``ZeroDivisionError``."""

        if self is Operator.ADD:
            return left + right
        if self is Operator.SUBTRACT:
            return left - right
        if self is Operator.MULTIPLY:
            return left * right
        if right == 0.0:
            raise ZeroDivisionError("division by zero")
        return left / right


OPERATOR_SYMBOLS = frozenset(op.value for op in Operator)


@dataclass(frozen=True, slots=True)
class Token:
    """Immutable lexical unit: a number literal, an operator or a parenthesis."""

    kind: TokenKind
    text: str

    @classmethod
    def number(cls, text: str) -> "Token":
        return cls(TokenKind.NUMBER, text)

    @classmethod
    def op(cls, operator: Operator) -> "Token":
        return cls(TokenKind.OPERATOR, operator.value)

    @classmethod
    def open_paren(cls) -> "Token":
        return cls(TokenKind.OPEN_PAREN, "(")

    @classmethod
    def close_paren(cls) -> "Token":
        return cls(TokenKind.CLOSE_PAREN, ")")

    @property
    def operator(self) -> Operator:
        """Operator carried by an OPERATOR token."""

        if self.kind is not TokenKind.OPERATOR:
            raise ValueError(f"token {self.text!r} is not an operator")
        return Operator.from_symbol(self.text)

    @property
    def is_paren(self) -> bool:
        return self.kind in (TokenKind.OPEN_PAREN, TokenKind.CLOSE_PAREN)

    def __str__(self) -> str:
        return self.text
