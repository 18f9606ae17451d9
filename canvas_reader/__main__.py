"""
Entry point for running the reader as a module.

This allows running: python -m canvas_reader
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
