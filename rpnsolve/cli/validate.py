"""Validation CLI for arithmetic expressions."""

from __future__ import annotations

import argparse

from rpnsolve.parse.validator import first_violation


def main(argv: list[str] | None = None) -> int:
    """Check each expression and report which ones are malformed."""

    parser = argparse.ArgumentParser(description="Validate arithmetic expressions.")
    parser.add_argument("expressions", nargs="+", help="Expressions to check.")
    parser.add_argument(
        "--explain",
        action="store_true",
        help="Print the name of the failed check next to invalid expressions.",
    )
    args = parser.parse_args(argv)

    exit_code = 0
    for expression in args.expressions:
        violation = first_violation(expression)
        if violation is None:
            print(f"OK: {expression}")
            continue
        exit_code = 1
        if args.explain:
            print(f"INVALID ({violation}): {expression}")
        else:
            print(f"INVALID: {expression}")
    return exit_code


if __name__ == "__main__":
    raise SystemExit(main())
