"""Mixed fractions: a whole number plus a proper fractional part.

Arithmetic goes through the improper form, delegates to FractionValue, and
normalizes the result. The improper numerator is the single source of truth
for the sign: after normalization a non-zero whole number carries it and the
fractional numerator is non-negative; a fraction-only value carries it on the
fractional numerator.
"""

from __future__ import annotations

from dataclasses import dataclass

from .formatting import format_diagonal_fraction
from .fraction import FractionValue
from .types import DivideByZeroError


@dataclass(frozen=True)
class MixedFractionValue:
    """Immutable mixed fraction such as 2 3/4."""

    whole_number: int
    fraction_numerator: int
    fraction_denominator: int = 1

    def __post_init__(self) -> None:
        if self.fraction_denominator == 0:
            raise DivideByZeroError(
                f"Mixed fraction {self.whole_number} "
                f"{self.fraction_numerator}/0 has a zero denominator"
            )

    @classmethod
    def from_fraction(cls, fraction: FractionValue) -> MixedFractionValue:
        """Wrap a fraction without splitting it; call normalize() to split."""
        return cls(0, fraction.numerator, fraction.denominator)

    @property
    def fraction_part(self) -> FractionValue:
        return FractionValue(self.fraction_numerator, self.fraction_denominator)

    def to_improper_fraction(self) -> FractionValue:
        numerator = (
            abs(self.whole_number) * self.fraction_denominator
            + self.fraction_numerator
        )
        if self.whole_number < 0:
            numerator = -numerator
        return FractionValue(numerator, self.fraction_denominator)

    def normalize(self) -> MixedFractionValue:
        """Return an equal value in lowest terms with a proper fractional part."""
        improper = self.to_improper_fraction().simplify()
        sign = -1 if improper.numerator < 0 else 1
        magnitude = abs(improper.numerator)
        whole, remainder = divmod(magnitude, improper.denominator)
        if whole:
            return MixedFractionValue(sign * whole, remainder, improper.denominator)
        return MixedFractionValue(0, sign * remainder, improper.denominator)

    def _combine(self, result: FractionValue) -> MixedFractionValue:
        return MixedFractionValue.from_fraction(result).normalize()

    def add(self, other: MixedFractionValue) -> MixedFractionValue:
        return self._combine(
            self.to_improper_fraction().add(other.to_improper_fraction())
        )

    def subtract(self, other: MixedFractionValue) -> MixedFractionValue:
        return self._combine(
            self.to_improper_fraction().subtract(other.to_improper_fraction())
        )

    def multiply_by(self, other: MixedFractionValue) -> MixedFractionValue:
        return self._combine(
            self.to_improper_fraction().multiply(other.to_improper_fraction())
        )

    def divide_by(self, other: MixedFractionValue) -> MixedFractionValue:
        """Divide by other.

        Raises:
            DivideByZeroError: If other is zero.
        """
        return self._combine(
            self.to_improper_fraction().divide(other.to_improper_fraction())
        )

    def to_decimal(self) -> float:
        return self.to_improper_fraction().to_decimal()

    def format(self) -> str:
        if self.fraction_numerator == 0:
            return str(self.whole_number)
        if self.whole_number == 0:
            return self.fraction_part.format()
        return (
            f"{self.whole_number} "
            f"{abs(self.fraction_numerator)}/{self.fraction_denominator}"
        )

    def to_display(self) -> str:
        """Render with a diagonal fractional part, e.g. '2 ³⁄₄' or '¹⁄₄'."""
        if self.fraction_numerator == 0:
            return str(self.whole_number)
        if self.whole_number == 0:
            return format_diagonal_fraction(
                self.fraction_numerator, self.fraction_denominator
            ).lstrip()
        return f"{self.whole_number}" + format_diagonal_fraction(
            abs(self.fraction_numerator), self.fraction_denominator
        )

    def __str__(self) -> str:
        return self.format()
