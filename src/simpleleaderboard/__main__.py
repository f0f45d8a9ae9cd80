"""Entry point for running simpleleaderboard as a module.

Usage:
    python -m simpleleaderboard get
    python -m simpleleaderboard post NAME SCORE
"""

import sys

from simpleleaderboard.cli import main

if __name__ == "__main__":
    sys.exit(main())
