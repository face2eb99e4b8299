#!/usr/bin/env python3
"""
Fraccalc - Fraction Calculator

Main entry point for the Fraccalc fraction calculator.
This file serves as a thin wrapper that delegates all functionality
to the fraccalc_pkg package.

Usage:
    python fraccalc.py                        # Interactive REPL
    python fraccalc.py -e "2 ³⁄₄ + 1 ¹⁄₂"     # Evaluate expression
    python fraccalc.py --help                 # Show help
"""

from __future__ import annotations

import sys


def main() -> int:
    """
    Main entry point for Fraccalc.

    Delegates all functionality to the fraccalc_pkg.cli module,
    which handles argument parsing, expression evaluation, and output formatting.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    from fraccalc_pkg.cli import main_entry

    try:
        return main_entry(sys.argv[1:])
    except KeyboardInterrupt:
        print()
        return 130


if __name__ == "__main__":
    sys.exit(main())
