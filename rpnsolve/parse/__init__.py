"""Lexing, validation and postfix conversion."""

from rpnsolve.parse.postfix import to_postfix
from rpnsolve.parse.tokenizer import tokenize
from rpnsolve.parse.validator import ExpressionValidator, validate

__all__ = ["ExpressionValidator", "to_postfix", "tokenize", "validate"]
