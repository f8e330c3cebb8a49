"""
Roster entry point.

Usage:
    python -m roster [--config PATH] [--roll-seed N] [--log-level LEVEL]
"""

import sys
from .main import main

if __name__ == "__main__":
    sys.exit(main())
