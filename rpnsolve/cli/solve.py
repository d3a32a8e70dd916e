"""CLI for solving arithmetic expressions."""

from __future__ import annotations

import argparse
import json
import os
from pathlib import Path

from rpnsolve.engine.solver import solve_report
from rpnsolve.trace import TraceLogger

DEFAULT_TOLERANCE = 1e-3


def _read_expressions(args: argparse.Namespace) -> list[str]:
    expressions = list(args.expressions)
    if args.file:
        lines = Path(args.file).read_text(encoding="utf-8").splitlines()
        expressions.extend(line for line in lines if line.strip())
    return expressions


def main(argv: list[str] | None = None) -> int:
    """Solve expressions given as arguments or read from a file."""

    parser = argparse.ArgumentParser(description="Solve arithmetic expressions.")
    parser.add_argument("expressions", nargs="*", help="Expressions to solve.")
    parser.add_argument("--file", help="Read one expression per non-blank line.")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print one solve report JSON object per line.",
    )
    parser.add_argument(
        "--verify",
        action="store_true",
        help="Cross-check results against exact SymPy evaluation.",
    )
    parser.add_argument(
        "--tolerance",
        type=float,
        default=None,
        help="Allowed absolute difference for --verify (env RPNSOLVE_TOLERANCE).",
    )
    parser.add_argument(
        "--trace",
        default=None,
        help="Append JSONL trace events to this path (env RPNSOLVE_TRACE).",
    )
    args = parser.parse_args(argv)

    try:
        expressions = _read_expressions(args)
        if not expressions:
            print("ERROR: no expressions given")
            return 1
        tolerance = args.tolerance
        if tolerance is None:
            tolerance = float(os.getenv("RPNSOLVE_TOLERANCE") or DEFAULT_TOLERANCE)
        trace_path = args.trace or os.getenv("RPNSOLVE_TRACE")
        trace = TraceLogger(trace_path) if trace_path else None
    except Exception as exc:  # noqa: BLE001 - CLI boundary
        print(f"ERROR: {exc}")
        return 1

    exit_code = 0
    try:
        for expression in expressions:
            report = solve_report(expression, verify=args.verify, tolerance=tolerance)
            if trace is not None:
                trace.log_report(report)
            if not report.ok or report.verified is False:
                exit_code = 1

            if args.json:
                print(json.dumps(report.to_dict(), ensure_ascii=False, allow_nan=False))
            elif report.ok:
                line = f"{expression} = {report.result!r}"
                if report.verified is False:
                    line += f" (MISMATCH: reference {report.reference})"
                print(line)
            else:
                print(f"ERROR: {expression}: {report.error_kind}: {report.error}")
    finally:
        if trace is not None:
            trace.close()
    return exit_code


if __name__ == "__main__":
    raise SystemExit(main())
