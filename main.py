"""
gridham command line entry point.

Usage:
    python main.py solve 4 4 0 0 0 1
    python main.py --config configs/gridham.yaml verify
"""

import sys

from gridham.cli import main

if __name__ == "__main__":
    sys.exit(main())
