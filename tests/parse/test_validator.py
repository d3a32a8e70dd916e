"""Tests for the expression validator."""

from __future__ import annotations

import pytest

from rpnsolve.parse.validator import (
    RULES,
    ExpressionValidator,
    brackets_balanced,
    first_violation,
    validate,
)


@pytest.mark.parametrize(
    "expression",
    [
        "45-2+(9/8)",
        "(2/015)+5",
        "(51/3)+5/2-56+(2-4)",
        "1 + 2 * 3",
        "((7))",
        "10/00",
        "0",
    ],
)
def test_validate_accepts(expression: str) -> None:
    assert validate(expression) is True


@pytest.mark.parametrize(
    ("expression", "rule"),
    [
        ("(1/lorem ipsum)", "illegal_character"),
        ("1\t+2", "illegal_character"),
        ("1.5+2", "illegal_character"),
        ("(5+)6", "operator_or_open_before_close"),
        ("()", "operator_or_open_before_close"),
        ("2(3+4)", "operand_before_open"),
        ("(3+4)(5)", "operand_before_open"),
        ("(+3)", "open_before_operator"),
        ("(3)4", "close_before_operand"),
        ("3+", "dangling_end"),
        ("-3+4", "dangling_start"),
        (")+3", "dangling_start"),
        ("3+*4", "consecutive_operators"),
        ("++45-2+(9/8)", "dangling_start"),
        ("45--2", "consecutive_operators"),
        ("(2/0)+5", "literal_zero_divisor"),
        ("2/0", "literal_zero_divisor"),
        ("2/0*3", "literal_zero_divisor"),
        ("((1+2)", "unbalanced_brackets"),
        ("1", None),
    ],
)
def test_first_violation_names_rule(expression: str, rule: str | None) -> None:
    assert first_violation(expression) == rule


@pytest.mark.parametrize("value", [None, "", "   ", "\n\t", 12, b"1+1"])
def test_validate_is_total(value: object) -> None:
    assert validate(value) is False
    assert first_violation(value) == "blank"


def test_validate_bracket_adjacency_and_balance() -> None:
    assert validate("(5+)6)(") is False


def test_spaces_are_collapsed_before_pattern_scan() -> None:
    assert validate("2 / 0") is False
    assert validate("( 1 + 2 ) * 3") is True
    assert validate("1 2") is True


def test_brackets_balanced_scans_prefixes() -> None:
    assert brackets_balanced("(())") is True
    assert brackets_balanced(")(") is False
    assert brackets_balanced("(()") is False


def test_rules_are_ordered_and_named() -> None:
    names = [name for name, _ in RULES]

    assert names[0] == "illegal_character"
    assert names[-1] == "literal_zero_divisor"
    assert len(names) == len(set(names))


def test_expression_validator_is_callable() -> None:
    validator = ExpressionValidator()

    assert validator.validate("1+1") is True
    assert validator("1+") is False
