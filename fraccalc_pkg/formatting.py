"""Result formatting policies and diagonal fraction rendering.

Two request modes format a non-integer result differently:
- fraction mode hands the decimal text to the decimal converter, which
  produces a mixed-fraction display (or a 3-decimal periodic value)
- arithmetic mode keeps the decimal text, rounding it to 3 decimals only
  when it is longer than ARITHMETIC_MAX_LENGTH characters

Integer-valued results print as plain integers in both modes.
"""

from __future__ import annotations

import math

from .config import (
    ARITHMETIC_MAX_LENGTH,
    ARITHMETIC_ROUNDED_DECIMALS,
    FRACTION_SLASH,
    SUBSCRIPT_DIGITS,
    SUBSCRIPT_MINUS,
    SUPERSCRIPT_DIGITS,
    SUPERSCRIPT_MINUS,
)
from .types import UndefinedError

FRACTION_MODE = "fraction"
ARITHMETIC_MODE = "arithmetic"

_SUPERSCRIPT_MAP = str.maketrans(
    "0123456789-", SUPERSCRIPT_DIGITS + SUPERSCRIPT_MINUS
)
_SUBSCRIPT_MAP = str.maketrans("0123456789-", SUBSCRIPT_DIGITS + SUBSCRIPT_MINUS)


def superscriptify(input_str: str) -> str:
    """Convert numeric string to Unicode superscript characters.

    Args:
        input_str: Input string with digits and '-' (e.g., "123", "-5")

    Returns:
        String with superscript Unicode characters (e.g., "¹²³", "⁻⁵")
    """
    return input_str.translate(_SUPERSCRIPT_MAP)


def subscriptify(input_str: str) -> str:
    """Convert numeric string to Unicode subscript characters (e.g., "45" -> "₄₅")."""
    return input_str.translate(_SUBSCRIPT_MAP)


def format_diagonal_fraction(numerator: int, denominator: int) -> str:
    """Render a fraction with superscript numerator, fraction slash, subscript denominator.

    The text is prefixed by a space so it can be appended to a whole number
    (``"2" + " ³⁄₄"``).

    Args:
        numerator: Fraction numerator
        denominator: Fraction denominator

    Returns:
        Display string such as " ³⁄₄"; "" when the denominator is 0 and "0"
        when the numerator is 0
    """
    if denominator == 0:
        return ""
    if numerator == 0:
        return "0"
    return (
        " "
        + superscriptify(str(numerator))
        + FRACTION_SLASH
        + subscriptify(str(denominator))
    )


def is_integer_valued(value: float) -> bool:
    return math.floor(value) == value


def format_arithmetic_result(value: float) -> str:
    if is_integer_valued(value):
        return str(int(value))
    text = repr(value)
    if len(text) > ARITHMETIC_MAX_LENGTH:
        text = f"{value:.{ARITHMETIC_ROUNDED_DECIMALS}f}"
    return text


def format_fraction_result(value: float) -> str:
    from .decimal_converter import decimal_to_mixed_fraction

    if is_integer_valued(value):
        return str(int(value))
    return decimal_to_mixed_fraction(float(repr(value)))


def format_result(value: float, mode: str = ARITHMETIC_MODE) -> str:
    """Format an evaluated result for display.

    Args:
        value: Finite evaluation result
        mode: FRACTION_MODE or ARITHMETIC_MODE

    Returns:
        Display string

    Raises:
        UndefinedError: If value is infinite or NaN
        ValueError: If mode is unknown
    """
    if not math.isfinite(value):
        raise UndefinedError()
    if mode == FRACTION_MODE:
        return format_fraction_result(value)
    if mode == ARITHMETIC_MODE:
        return format_arithmetic_result(value)
    raise ValueError(f"Unknown result mode: {mode}")
