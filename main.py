#!/usr/bin/env python3
"""
Variant Minesweeper - Main entry point.

Usage:
    python main.py WIDTH HEIGHT MINES VARIANT [--seed N] [--verbose]

Example:
    python main.py 9 9 10 knight-paths
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

from sweeper.cli import main


if __name__ == "__main__":
    sys.exit(main())
