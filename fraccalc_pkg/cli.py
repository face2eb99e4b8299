"""Command line interface for Fraccalc.

Stands in for the graphical display layer: it reads expressions, picks the
fraction or arithmetic path the same way the calculator's '=' key does, and
prints the result text or the failure message.
"""

from __future__ import annotations

import argparse
import json
import sys

from .api import (
    evaluate,
    evaluate_arithmetic_expression,
    evaluate_fraction_expression,
    format_diagonal_fraction,
)
from .config import VERSION
from .types import FAILURE_MESSAGES, EvalResult

REPL_EXIT_COMMANDS = {"quit", "exit"}


def _health_check() -> int:
    """Run health check to verify dependencies and basic operations.

    Returns:
        Exit code (0 for success, non-zero for failures)
    """
    checks_passed = 0
    checks_failed = 0

    print("Running Fraccalc health check...")
    print("-" * 50)

    # Check SymPy import; it is the reference for exact rational arithmetic
    try:
        import sympy as sp

        print(f"[OK] SymPy {sp.__version__} imported successfully")
        checks_passed += 1
    except ImportError as e:
        print(f"[FAIL] SymPy import failed: {e}")
        sp = None
        checks_failed += 1

    if sp is not None:
        from .fraction import FractionValue

        total = FractionValue(1, 3).add(FractionValue(1, 6)).simplify()
        expected = sp.Rational(1, 3) + sp.Rational(1, 6)
        if (total.numerator, total.denominator) == (expected.p, expected.q):
            print("[OK] Fraction arithmetic matches SymPy")
            checks_passed += 1
        else:
            print(f"[FAIL] Fraction arithmetic: expected {expected}, got {total}")
            checks_failed += 1

    checks = [
        ("Arithmetic evaluation", evaluate_arithmetic_expression("4/2"), "2"),
        (
            "Fraction evaluation",
            evaluate_fraction_expression("2 ³⁄₄ + 1 ¹⁄₂"),
            "4 ¹⁄₄",
        ),
        ("Periodic decimal", evaluate_fraction_expression("¹⁄₃"), "0.333"),
    ]
    for name, result, expected_text in checks:
        if result.ok and result.result == expected_text:
            print(f"[OK] {name} works")
            checks_passed += 1
        else:
            print(f"[FAIL] {name}: expected {expected_text!r}, got {result!r}")
            checks_failed += 1

    print("-" * 50)
    print(f"Health check: {checks_passed} passed, {checks_failed} failed")
    return 0 if checks_failed == 0 else 1


def _evaluate_with_mode(text: str, mode: str) -> EvalResult:
    if mode == "fraction":
        return evaluate_fraction_expression(text)
    if mode == "arithmetic":
        return evaluate_arithmetic_expression(text)
    return evaluate(text)


def _render(result: EvalResult, output_format: str) -> str:
    if output_format == "json":
        return json.dumps(result.to_dict(), ensure_ascii=False)
    if result.ok:
        return result.result or ""
    message = FAILURE_MESSAGES.get(result.error_code, "Error")
    if result.error and result.error != message:
        return f"{message}: {result.error}"
    return message


def repl_loop(mode: str = "auto", output_format: str = "human") -> int:
    """Read expressions from stdin until quit/exit or EOF."""
    print(f"Fraccalc {VERSION}. Type 'quit' to exit.")
    while True:
        try:
            line = input(">>> ")
        except EOFError:
            print()
            return 0
        text = line.strip()
        if not text:
            continue
        if text.lower() in REPL_EXIT_COMMANDS:
            return 0
        print(_render(_evaluate_with_mode(text, mode), output_format))


def main_entry(argv: list[str] | None = None) -> int:
    """
    Main entry point for Fraccalc CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = argparse.ArgumentParser(prog="fraccalc")
    parser.add_argument(
        "-e",
        "--eval",
        type=str,
        help="Evaluate one expression and exit (non-interactive)",
        dest="eval_expr",
    )
    parser.add_argument(
        "--mode",
        type=str,
        choices=["auto", "fraction", "arithmetic"],
        default="auto",
        help="Evaluation path: auto picks fraction mode when the input holds '⁄'",
    )
    parser.add_argument(
        "--diagonal",
        type=int,
        nargs=2,
        metavar=("NUMERATOR", "DENOMINATOR"),
        help="Print a fraction in diagonal notation and exit",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["json", "human"],
        default="human",
        help="Output format: json (machine-readable) or human (human-readable)",
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show program version"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="ERROR",
        help="Set logging level",
    )
    parser.add_argument("--log-file", type=str, help="Write logs to file")
    parser.add_argument(
        "--health-check",
        action="store_true",
        help="Run health check and verify dependencies",
    )
    args = parser.parse_args(argv)

    from .logging_config import setup_logging

    setup_logging(level=args.log_level, log_file=args.log_file)

    if args.version:
        print(VERSION)
        return 0
    if args.health_check:
        return _health_check()
    if args.diagonal:
        numerator, denominator = args.diagonal
        if denominator == 0:
            print("Denominator cannot be zero!")
            return 1
        print(format_diagonal_fraction(numerator, denominator).lstrip())
        return 0
    if args.eval_expr is not None:
        expr = args.eval_expr.strip()
        # Remove ">>>" prompt if present
        if expr.startswith(">>>"):
            expr = expr[3:].strip()
        result = _evaluate_with_mode(expr, args.mode)
        print(_render(result, args.format))
        return 0 if result.ok else 1
    return repl_loop(args.mode, args.format)


if __name__ == "__main__":
    sys.exit(main_entry())
