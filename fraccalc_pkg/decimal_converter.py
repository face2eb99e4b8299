"""Decimal to mixed-fraction conversion.

A value whose fractional digits end within FINITE_EXPANSION_DIGITS places is
rendered as an exact mixed fraction (``2 ³⁄₄``). Anything else goes through a
cycle search that expands the digits until the remainder hits zero, repeats,
or the search bound is reached. The expansion only decides how far the
digits go: the returned text for that path is always the plain decimal
rounded to PERIODIC_OUTPUT_DECIMALS places (``0.333``).
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .config import (
    FINITE_EXPANSION_DIGITS,
    MAX_PERIODIC_DIGITS,
    PERIODIC_OUTPUT_DECIMALS,
)
from .fraction import FractionValue
from .logging_config import get_logger
from .mixed_fraction import MixedFractionValue
from .types import UndefinedError

logger = get_logger("decimal_converter")


@dataclass
class DecimalExpansion:
    """Digits of a fractional part, with the repeating window if one was found."""

    whole_number: int
    digits: list[int] = field(default_factory=list)
    repeat_start: int | None = None
    terminated: bool = False

    @property
    def is_periodic(self) -> bool:
        return self.repeat_start is not None

    def plain_text(self) -> str:
        digits = "".join(str(d) for d in self.digits) or "0"
        return f"{self.whole_number}.{digits}"

    def notation(self) -> str:
        """Return the expansion with the repeating window in parentheses, e.g. '0.1(6)'."""
        if self.repeat_start is None:
            return self.plain_text()
        head = "".join(str(d) for d in self.digits[: self.repeat_start])
        cycle = "".join(str(d) for d in self.digits[self.repeat_start :])
        return f"{self.whole_number}.{head}({cycle})"


def find_finite_expansion(
    fractional_part: float, max_digits: int = FINITE_EXPANSION_DIGITS
) -> tuple[int, int] | None:
    """Look for the place where the decimal expansion of fractional_part ends.

    The expansion is taken to end at the first place (after the first) whose
    digit is 0.

    Returns:
        (numerator, denominator) with denominator a power of ten, or None when
        no such place exists within max_digits digits
    """
    for digits in range(1, max_digits + 1):
        scale = 10**digits
        scaled = fractional_part * scale
        if math.floor(scaled) % 10 == 0 and digits > 1:
            return round(scaled), scale
    return None


def expand_periodic(
    whole_number: int,
    fractional_part: float,
    max_digits: int = MAX_PERIODIC_DIGITS,
) -> DecimalExpansion:
    """Expand fractional_part digit by digit, stopping at zero or a repeated remainder."""
    expansion = DecimalExpansion(whole_number)
    seen: dict[float, int] = {}
    remainder = fractional_part
    for index in range(max_digits):
        if remainder == 0:
            expansion.terminated = True
            break
        if remainder in seen:
            expansion.repeat_start = seen[remainder]
            break
        seen[remainder] = index
        scaled = remainder * 10
        digit = min(int(math.floor(scaled)), 9)
        expansion.digits.append(digit)
        remainder = scaled - digit
    else:
        expansion.terminated = remainder == 0
    return expansion


def decimal_to_mixed_fraction(value: float) -> str:
    """Convert a finite decimal into mixed-fraction display text.

    Args:
        value: Finite decimal value (may be negative)

    Returns:
        "3" for integral values, "¹⁄₄" or "2 ³⁄₄" for terminating expansions,
        and the value rounded to 3 decimals ("0.333") otherwise. Negative
        values carry a leading "-".

    Raises:
        UndefinedError: If value is infinite or NaN
    """
    if not math.isfinite(value):
        raise UndefinedError()

    sign = "-" if value < 0 else ""
    magnitude = abs(value)
    whole_number = int(magnitude)
    fractional_part = magnitude - whole_number

    expansion = find_finite_expansion(fractional_part)
    if expansion is None:
        periodic = expand_periodic(whole_number, fractional_part)
        logger.debug(f"Periodic expansion of {value!r}: {periodic.notation()}")
        rounded = f"{float(periodic.plain_text()):.{PERIODIC_OUTPUT_DECIMALS}f}"
        return sign + rounded

    numerator, denominator = expansion
    if numerator == 0:
        if whole_number == 0:
            return "0"
        return sign + str(whole_number)

    fraction = FractionValue(numerator, denominator).simplify()
    mixed = MixedFractionValue(whole_number, fraction.numerator, fraction.denominator)
    logger.debug(f"Terminating expansion of {value!r}: {mixed.format()}")
    return sign + mixed.to_display()
