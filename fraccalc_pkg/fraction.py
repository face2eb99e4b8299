"""Exact rational numbers as numerator/denominator pairs."""

from __future__ import annotations

from dataclasses import dataclass

from .types import DivideByZeroError


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of |a| and |b|.

    Iterative Euclid; gcd(0, x) == |x|, which lets whole numbers reduce to x/1.
    """
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


@dataclass(frozen=True)
class FractionValue:
    """Immutable fraction. Arithmetic never reduces; call simplify() explicitly."""

    numerator: int
    denominator: int = 1

    def __post_init__(self) -> None:
        if self.denominator == 0:
            raise DivideByZeroError(
                f"Fraction {self.numerator}/0 has a zero denominator"
            )

    @classmethod
    def from_int(cls, value: int) -> FractionValue:
        return cls(value, 1)

    def add(self, other: FractionValue) -> FractionValue:
        return FractionValue(
            self.numerator * other.denominator + self.denominator * other.numerator,
            self.denominator * other.denominator,
        )

    def subtract(self, other: FractionValue) -> FractionValue:
        return FractionValue(
            self.numerator * other.denominator - self.denominator * other.numerator,
            self.denominator * other.denominator,
        )

    def multiply(self, other: FractionValue) -> FractionValue:
        return FractionValue(
            self.numerator * other.numerator,
            self.denominator * other.denominator,
        )

    def divide(self, other: FractionValue) -> FractionValue:
        """Divide by other.

        Raises:
            DivideByZeroError: If other is zero.
        """
        if other.numerator == 0:
            raise DivideByZeroError(f"Cannot divide {self.format()} by zero")
        return FractionValue(
            self.numerator * other.denominator,
            self.denominator * other.numerator,
        )

    def simplify(self) -> FractionValue:
        """Return the canonical form: coprime terms and a positive denominator."""
        divisor = gcd(self.numerator, self.denominator)
        numerator = self.numerator // divisor
        denominator = self.denominator // divisor
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        return FractionValue(numerator, denominator)

    @property
    def is_integer(self) -> bool:
        return self.numerator % self.denominator == 0

    def to_decimal(self) -> float:
        return self.numerator / self.denominator

    def format(self) -> str:
        if self.denominator == 1:
            return str(self.numerator)
        return f"{self.numerator}/{self.denominator}"

    def __str__(self) -> str:
        return self.format()
