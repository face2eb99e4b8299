"""Public API for Fraccalc - returns structured objects without side effects."""

from __future__ import annotations

from .config import FRACTION_SLASH
from .evaluator import evaluate_expression
from .formatting import ARITHMETIC_MODE, FRACTION_MODE, format_result
from .formatting import format_diagonal_fraction as _format_diagonal_fraction
from .logging_config import get_logger
from .parser import preprocess_arithmetic_input, preprocess_fraction_input
from .types import CalculatorError, EvalResult

logger = get_logger("api")


def _failure(error: CalculatorError, text: str, mode: str) -> EvalResult:
    logger.warning(f"{mode} evaluation of {text!r} failed: {error.code} - {error.message}")
    return EvalResult(ok=False, error=error.message, error_code=error.code, mode=mode)


def evaluate_fraction_expression(text: str) -> EvalResult:
    """Evaluate an expression containing fraction literals.

    Fraction literals (``2 ³⁄₄``, ``¹⁄₂``) are resolved, folded into the
    surrounding expression, evaluated, and the result is rendered as a mixed
    fraction or, for non-terminating decimals, a 3-decimal value.

    Args:
        text: Input text, e.g. "2 ³⁄₄ + 1 ¹⁄₂"

    Returns:
        EvalResult with the display text or a failure kind

    Example:
        >>> from fraccalc_pkg.api import evaluate_fraction_expression
        >>> evaluate_fraction_expression("2 ³⁄₄ + 1 ¹⁄₂").result
        '4 ¹⁄₄'
        >>> evaluate_fraction_expression("¹⁄₃").result
        '0.333'
    """
    try:
        expression, literals = preprocess_fraction_input(text)
        logger.debug(f"Resolved {len(literals)} fraction literal(s) in {text!r}")
        value = evaluate_expression(expression)
        return EvalResult(
            ok=True, result=format_result(value, FRACTION_MODE), mode=FRACTION_MODE
        )
    except CalculatorError as e:
        return _failure(e, text, FRACTION_MODE)


def evaluate_arithmetic_expression(text: str) -> EvalResult:
    """Evaluate a plain '+ - * /' expression.

    Args:
        text: Input text, e.g. "4/2"

    Returns:
        EvalResult with the display text or a failure kind

    Example:
        >>> from fraccalc_pkg.api import evaluate_arithmetic_expression
        >>> evaluate_arithmetic_expression("4/2").result
        '2'
        >>> evaluate_arithmetic_expression("5/0").error_code
        'UNDEFINED'
    """
    try:
        expression = preprocess_arithmetic_input(text)
        value = evaluate_expression(expression)
        return EvalResult(
            ok=True, result=format_result(value, ARITHMETIC_MODE), mode=ARITHMETIC_MODE
        )
    except CalculatorError as e:
        return _failure(e, text, ARITHMETIC_MODE)


def evaluate(text: str) -> EvalResult:
    """Evaluate text in fraction mode if it holds a fraction slash, else in arithmetic mode."""
    if isinstance(text, str) and FRACTION_SLASH in text:
        return evaluate_fraction_expression(text)
    return evaluate_arithmetic_expression(text)


def format_diagonal_fraction(numerator: int, denominator: int) -> str:
    """Render numerator/denominator as a diagonal fraction (e.g. 3, 4 -> ' ³⁄₄').

    Example:
        >>> from fraccalc_pkg.api import format_diagonal_fraction
        >>> format_diagonal_fraction(3, 4)
        ' ³⁄₄'
    """
    return _format_diagonal_fraction(numerator, denominator)


def validate_expression(text: str) -> tuple[bool, str | None]:
    """Check whether text evaluates successfully.

    Returns:
        Tuple of (is_valid, error_message)
    """
    result = evaluate(text)
    if result.ok:
        return True, None
    return False, result.error
