#!/usr/bin/env python3
"""8-Puzzle Solver.

Usage::

    python main.py solve 867254301
    python main.py random --solve
    python main.py check 213456780
"""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from eightpuzzle.cli import app  # noqa: E402

if __name__ == "__main__":
    app()
