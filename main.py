#!/usr/bin/env python3
"""
Sweeper - terminal Minesweeper, run from a source checkout.

Usage:
    python main.py [-w WIDTH] [-h HEIGHT] [-m MINES]
"""
import sys
from pathlib import Path

# Run from the checkout without installing
sys.path.insert(0, str(Path(__file__).parent / "src"))

from sweeper.cli import main


if __name__ == "__main__":
    sys.exit(main())
