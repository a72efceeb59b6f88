"""
fabflow — entry point.

Usage:
    python -m fabflow generate layout.gds -f markdown -o flow.md
    python -m fabflow serve --port 3000
"""

import sys

from fabflow.cli import main


if __name__ == "__main__":
    sys.exit(main())
