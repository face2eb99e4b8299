"""Input normalization and number extraction.

This module handles:
- Input length validation
- Unicode glyph normalization (superscript/subscript digits, fraction slash)
- Fraction literal detection and folding into the surrounding expression
- Number literal extraction and canonical reinsertion
"""

from __future__ import annotations

from dataclasses import dataclass

from .config import (
    DIVISION_MARKER,
    FRACTION_LITERAL_REGEX,
    FRACTION_SLASH,
    MAX_INPUT_LENGTH,
    NUMBER_LITERAL_REGEX,
    NUMBER_PLACEHOLDER,
    OPERATOR_ALIASES,
    SUBSCRIPT_DIGITS,
    SUBSCRIPT_MINUS,
    SUPERSCRIPT_DIGITS,
    SUPERSCRIPT_MINUS,
)
from .logging_config import get_logger
from .mixed_fraction import MixedFractionValue
from .types import MathError, UndefinedError

logger = get_logger("parser")

_DIGIT_GLYPH_MAP = str.maketrans(
    SUPERSCRIPT_DIGITS + SUBSCRIPT_DIGITS + SUPERSCRIPT_MINUS + SUBSCRIPT_MINUS,
    "0123456789" * 2 + "--",
)


@dataclass(frozen=True)
class FractionLiteral:
    """A fraction literal found in normalized text."""

    start: int
    end: int
    text: str
    value: MixedFractionValue


def validate_input(text: str) -> str:
    """Reject input that is not a string or exceeds MAX_INPUT_LENGTH.

    Raises:
        MathError: If the input is unusable
    """
    if not isinstance(text, str):
        raise MathError(f"Expected text input, got {type(text).__name__}")
    if len(text) > MAX_INPUT_LENGTH:
        raise MathError(f"Input too long (max {MAX_INPUT_LENGTH} characters)")
    return text


def normalize_glyphs(text: str) -> str:
    """Map superscript/subscript digits and minus signs to ASCII and the fraction slash to '/'.

    A plain '/' typed as division is moved out of the way to DIVISION_MARKER
    first, so after this step every '/' in the text belongs to a fraction.
    """
    text = text.translate(_DIGIT_GLYPH_MAP)
    text = text.replace("/", DIVISION_MARKER)
    return text.replace(FRACTION_SLASH, "/")


def restore_division(text: str) -> str:
    return text.replace(DIVISION_MARKER, "/")


def normalize_operators(text: str) -> str:
    """Replace display operator glyphs (×, ÷, −) with their ASCII forms."""
    for glyph, ascii_op in OPERATOR_ALIASES.items():
        text = text.replace(glyph, ascii_op)
    return text


def canonical_literal(value: float) -> str:
    return repr(value)


def extract_number_literals(text: str) -> tuple[list[float], str]:
    """Pull signed decimal literals out of text, left to right.

    Returns:
        (values, shape) where shape is text with each literal replaced by
        NUMBER_PLACEHOLDER
    """
    values = [float(m.group()) for m in NUMBER_LITERAL_REGEX.finditer(text)]
    shape = NUMBER_LITERAL_REGEX.sub(NUMBER_PLACEHOLDER, text)
    return values, shape


def reinsert_literals(shape: str, values: list[float]) -> str:
    """Substitute each placeholder in shape, in order, with its canonical literal."""
    pieces = shape.split(NUMBER_PLACEHOLDER)
    if len(pieces) != len(values) + 1:
        raise MathError(
            f"Expected {len(pieces) - 1} number literals, got {len(values)}"
        )
    parts = [pieces[0]]
    for value, piece in zip(values, pieces[1:]):
        parts.append(canonical_literal(value))
        parts.append(piece)
    return "".join(parts)


def canonicalize(text: str) -> str:
    """Rewrite every number literal in text in one canonical form ('007' -> '7.0')."""
    values, shape = extract_number_literals(text)
    return reinsert_literals(shape, values)


def find_fraction_literals(text: str) -> list[FractionLiteral]:
    """Find 'w n/d' and 'n/d' literals in glyph-normalized text.

    Literals with a zero numerator or denominator are not resolved; they stay
    in the text and are evaluated as ordinary arithmetic.
    """
    literals = []
    for match in FRACTION_LITERAL_REGEX.finditer(text):
        if match.group(1) is not None:
            whole_number = int(match.group(1))
            numerator = int(match.group(2))
            denominator = int(match.group(3))
        else:
            whole_number = 0
            numerator = int(match.group(4))
            denominator = int(match.group(5))
        if numerator <= 0 or denominator <= 0:
            logger.warning(
                f"Fraction literal {match.group()!r} left unresolved: "
                "numerator and denominator must be positive"
            )
            continue
        literals.append(
            FractionLiteral(
                start=match.start(),
                end=match.end(),
                text=match.group(),
                value=MixedFractionValue(whole_number, numerator, denominator),
            )
        )
    return literals


def resolve_fraction_literals(text: str) -> tuple[str, list[FractionLiteral]]:
    """Fold every fraction literal into text as its decimal value.

    Args:
        text: Glyph-normalized text

    Returns:
        (rewritten text, resolved literals in order)
    """
    literals = find_fraction_literals(text)
    parts = []
    position = 0
    for literal in literals:
        parts.append(text[position : literal.start])
        try:
            decimal = literal.value.to_decimal()
        except OverflowError as e:
            raise UndefinedError(f"Fraction {literal.text!r} is too large") from e
        parts.append(canonical_literal(decimal))
        position = literal.end
    parts.append(text[position:])
    return "".join(parts), literals


def preprocess_fraction_input(text: str) -> tuple[str, list[FractionLiteral]]:
    """Turn fraction-entry text into a canonical arithmetic string.

    Returns:
        (canonical expression, resolved fraction literals)
    """
    text = normalize_glyphs(validate_input(text))
    folded, literals = resolve_fraction_literals(text)
    expression = canonicalize(normalize_operators(restore_division(folded)))
    logger.debug(f"Fraction input {text!r} -> {expression!r}")
    return expression, literals


def preprocess_arithmetic_input(text: str) -> str:
    """Turn plain arithmetic text into a canonical arithmetic string."""
    expression = canonicalize(normalize_operators(validate_input(text)))
    logger.debug(f"Arithmetic input {text!r} -> {expression!r}")
    return expression
