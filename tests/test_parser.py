"""Unit tests for parser module."""

import unittest

from fraccalc_pkg.config import MAX_INPUT_LENGTH, NUMBER_PLACEHOLDER
from fraccalc_pkg.mixed_fraction import MixedFractionValue
from fraccalc_pkg.parser import (
    canonicalize,
    extract_number_literals,
    find_fraction_literals,
    normalize_glyphs,
    normalize_operators,
    preprocess_arithmetic_input,
    preprocess_fraction_input,
    reinsert_literals,
    resolve_fraction_literals,
    restore_division,
    validate_input,
)
from fraccalc_pkg.types import MathError


class TestGlyphNormalization(unittest.TestCase):
    """Test superscript/subscript and fraction slash handling."""

    def test_diagonal_fraction(self):
        self.assertEqual(normalize_glyphs("2 ³⁄₄"), "2 3/4")

    def test_all_digits(self):
        self.assertEqual(normalize_glyphs("⁰¹²³⁴⁵⁶⁷⁸⁹"), "0123456789")
        self.assertEqual(normalize_glyphs("₀₁₂₃₄₅₆₇₈₉"), "0123456789")

    def test_plain_division_moves_to_marker(self):
        self.assertEqual(normalize_glyphs("6/2 + ¹⁄₂"), "6÷2 + 1/2")

    def test_restore_division(self):
        self.assertEqual(restore_division("6÷2 + 0.5"), "6/2 + 0.5")

    def test_minus_glyphs(self):
        self.assertEqual(normalize_glyphs("⁻¹⁄₄"), "-1/4")
        self.assertEqual(normalize_glyphs("¹⁄₋₄"), "1/-4")

    def test_operator_aliases(self):
        self.assertEqual(normalize_operators("3×4−1÷2"), "3*4-1/2")


class TestLiteralExtraction(unittest.TestCase):
    """Test number literal extraction and canonical reinsertion."""

    def test_extract_in_order(self):
        values, shape = extract_number_literals("3-2 + 007")
        self.assertEqual(values, [3.0, -2.0, 7.0])
        self.assertEqual(
            shape, f"{NUMBER_PLACEHOLDER}{NUMBER_PLACEHOLDER} + {NUMBER_PLACEHOLDER}"
        )

    def test_extract_decimal(self):
        values, _ = extract_number_literals("1.50*2")
        self.assertEqual(values, [1.5, 2.0])

    def test_canonicalize(self):
        self.assertEqual(canonicalize("3-2 + 007"), "3.0-2.0 + 7.0")
        self.assertEqual(canonicalize("1.50*2"), "1.5*2.0")

    def test_canonicalize_keeps_other_text(self):
        self.assertEqual(canonicalize("2++3"), "2.0++3.0")

    def test_canonicalize_exponent_literal(self):
        self.assertEqual(canonicalize("1e-05+1"), "1e-05+1.0")

    def test_reinsert_count_mismatch(self):
        with self.assertRaises(MathError):
            reinsert_literals(f"{NUMBER_PLACEHOLDER}+{NUMBER_PLACEHOLDER}", [1.0])


class TestFractionLiterals(unittest.TestCase):
    """Test fraction literal detection and folding."""

    def test_two_mixed_literals_in_order(self):
        text = normalize_glyphs("2 3⁄4 + 1 1⁄2")
        literals = find_fraction_literals(text)
        self.assertEqual(len(literals), 2)
        self.assertEqual(literals[0].value, MixedFractionValue(2, 3, 4))
        self.assertEqual(literals[1].value, MixedFractionValue(1, 1, 2))
        self.assertEqual(literals[0].text, "2 3/4")
        self.assertEqual(literals[1].text, "1 1/2")
        self.assertEqual(text[literals[0].end : literals[1].start], " + ")

    def test_simple_fraction(self):
        literals = find_fraction_literals("3/8")
        self.assertEqual(len(literals), 1)
        self.assertEqual(literals[0].value, MixedFractionValue(0, 3, 8))

    def test_zero_denominator_left_unresolved(self):
        self.assertEqual(find_fraction_literals("1/0"), [])
        folded, literals = resolve_fraction_literals("1/0")
        self.assertEqual(folded, "1/0")
        self.assertEqual(literals, [])

    def test_zero_numerator_left_unresolved(self):
        self.assertEqual(find_fraction_literals("0/5"), [])

    def test_does_not_start_inside_decimal(self):
        literals = find_fraction_literals("2.5 1/2")
        self.assertEqual(len(literals), 1)
        self.assertEqual(literals[0].value, MixedFractionValue(0, 1, 2))

    def test_resolve_folds_decimal_values(self):
        folded, literals = resolve_fraction_literals("2 3/4 + 1 1/2")
        self.assertEqual(folded, "2.75 + 1.5")
        self.assertEqual(len(literals), 2)


class TestPreprocess(unittest.TestCase):
    """Test the full preprocessing pipelines."""

    def test_fraction_input(self):
        expression, literals = preprocess_fraction_input("2 ³⁄₄ + 1 ¹⁄₂")
        self.assertEqual(expression, "2.75 + 1.5")
        self.assertEqual(len(literals), 2)

    def test_fraction_input_with_plain_division(self):
        expression, _ = preprocess_fraction_input("6/2 + ¹⁄₂")
        self.assertEqual(expression, "6.0/2.0 + 0.5")

    def test_arithmetic_input(self):
        self.assertEqual(preprocess_arithmetic_input("4÷2"), "4.0/2.0")
        self.assertEqual(preprocess_arithmetic_input("2×3"), "2.0*3.0")

    def test_input_length_limit(self):
        with self.assertRaises(MathError):
            validate_input("1" * (MAX_INPUT_LENGTH + 1))

    def test_non_string_input(self):
        with self.assertRaises(MathError):
            validate_input(None)


if __name__ == "__main__":
    unittest.main()
