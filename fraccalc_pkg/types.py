"""Type definitions, result dataclasses, and failure kinds for consistent API responses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# Failure kinds reported in EvalResult.error_code
MATH_ERROR = "MATH_ERROR"
UNDEFINED = "UNDEFINED"
DIVIDE_BY_ZERO = "DIVIDE_BY_ZERO"

# Short messages the display layer shows for each failure kind
FAILURE_MESSAGES = {
    MATH_ERROR: "Math Error",
    UNDEFINED: "Undefined",
    DIVIDE_BY_ZERO: "Division by zero",
}


@dataclass
class EvalResult:
    """Result of evaluating a calculator expression."""

    ok: bool
    result: str | None = None
    error: str | None = None
    error_code: str | None = None
    mode: str | None = None  # "fraction" or "arithmetic"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok}
        if self.result is not None:
            result_dict["result"] = self.result
        if self.error is not None:
            result_dict["error"] = self.error
        if self.error_code is not None:
            result_dict["error_code"] = self.error_code
        if self.mode is not None:
            result_dict["mode"] = self.mode
        return result_dict

    def __repr__(self) -> str:
        """Return string representation of the result."""
        if not self.ok:
            return f"EvalResult(ok=False, error={self.error!r}, error_code={self.error_code!r})"
        parts = [f"ok={self.ok}", f"result={self.result!r}"]
        if self.mode is not None:
            parts.append(f"mode={self.mode!r}")
        return f"EvalResult({', '.join(parts)})"


class CalculatorError(Exception):
    """Base class for every failure the engine reports to its caller."""

    def __init__(self, message: str, code: str = MATH_ERROR):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class MathError(CalculatorError):
    """Raised when an expression cannot be parsed or evaluated."""

    def __init__(self, message: str = FAILURE_MESSAGES[MATH_ERROR], code: str = MATH_ERROR):
        super().__init__(message, code)


class UndefinedError(CalculatorError):
    """Raised when evaluation produces an infinite or undefined value."""

    def __init__(self, message: str = FAILURE_MESSAGES[UNDEFINED], code: str = UNDEFINED):
        super().__init__(message, code)


class DivideByZeroError(CalculatorError, ZeroDivisionError):
    """Raised when a fraction is built or divided with a zero denominator."""

    def __init__(
        self, message: str = FAILURE_MESSAGES[DIVIDE_BY_ZERO], code: str = DIVIDE_BY_ZERO
    ):
        super().__init__(message, code)
