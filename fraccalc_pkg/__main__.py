"""Main entry point for running fraccalc_pkg as a module.

This allows running Fraccalc with:
    python -m fraccalc_pkg
    python -m fraccalc_pkg --health-check
    python -m fraccalc_pkg -e "2 ³⁄₄ + 1 ¹⁄₂"

This is equivalent to running:
    python -m fraccalc_pkg.cli
    python fraccalc.py
"""

from __future__ import annotations

import sys

from .cli import main_entry

if __name__ == "__main__":
    sys.exit(main_entry())
