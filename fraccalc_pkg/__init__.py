"""Fraccalc package: fraction-aware calculator engine with parser, evaluator, formatter, and CLI."""

__all__ = [
    "config",
    "fraction",
    "mixed_fraction",
    "decimal_converter",
    "parser",
    "evaluator",
    "formatting",
    "cli",
    "types",
    "api",
    "logging_config",
]

# Public API exports

__api_exports__ = [
    "evaluate",
    "evaluate_fraction_expression",
    "evaluate_arithmetic_expression",
    "format_diagonal_fraction",
    "validate_expression",
]
