"""Centralized configuration for Fraccalc.

This module defines:
- Input validation limits
- Decimal-to-fraction search bounds
- Result formatting thresholds
- Unicode glyph tables shared with the display layer
- Regex patterns for parsing

Numeric settings can be overridden via environment variables
(prefixed with FRACCALC_).
"""

import importlib.metadata
import os
import re

# Version is defined in pyproject.toml [project] section
try:
    VERSION = importlib.metadata.version("fraccalc")
except importlib.metadata.PackageNotFoundError:
    # Running from a source checkout
    VERSION = "1.0.0"

# Input validation limits
MAX_INPUT_LENGTH = int(os.getenv("FRACCALC_MAX_INPUT_LENGTH", "1000"))  # characters

# Decimal converter bounds
FINITE_EXPANSION_DIGITS = int(
    os.getenv("FRACCALC_FINITE_EXPANSION_DIGITS", "12")
)  # digits probed before a value is treated as periodic
MAX_PERIODIC_DIGITS = int(
    os.getenv("FRACCALC_MAX_PERIODIC_DIGITS", "20")
)  # hard cap on the periodic cycle search
PERIODIC_OUTPUT_DECIMALS = int(os.getenv("FRACCALC_PERIODIC_OUTPUT_DECIMALS", "3"))

# Plain arithmetic result formatting
ARITHMETIC_MAX_LENGTH = int(
    os.getenv("FRACCALC_ARITHMETIC_MAX_LENGTH", "10")
)  # longer results are rounded
ARITHMETIC_ROUNDED_DECIMALS = int(
    os.getenv("FRACCALC_ARITHMETIC_ROUNDED_DECIMALS", "3")
)

# Glyph tables. The display layer composes fraction input with these exact
# characters, so they are part of the public normalization contract.
SUPERSCRIPT_DIGITS = "⁰¹²³⁴⁵⁶⁷⁸⁹"
SUBSCRIPT_DIGITS = "₀₁₂₃₄₅₆₇₈₉"
SUPERSCRIPT_MINUS = "⁻"
SUBSCRIPT_MINUS = "₋"
FRACTION_SLASH = "⁄"
DIVISION_MARKER = "÷"

OPERATOR_ALIASES = {
    "×": "*",
    "÷": "/",
    "−": "-",
}

NUMBER_PLACEHOLDER = "\ufffc"  # object replacement character

NUMBER_LITERAL_REGEX = re.compile(r"-?\d+(?:\.\d+)?(?:[eE][-+]?\d+)?")
FRACTION_LITERAL_REGEX = re.compile(
    r"(?<![\d.])(?:(\d+)\s+(\d+)/(\d+)|(\d+)/(\d+))(?![\d.])"
)
TOKEN_REGEX = re.compile(
    r"\s*(?:(?P<number>\d+(?:\.\d+)?(?:[eE][-+]?\d+)?)|(?P<op>[-+*/]))"
)
