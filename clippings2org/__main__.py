"""Allows running the application as a module (python -m clippings2org)."""

import sys

from .cli.main import main

if __name__ == "__main__":
    sys.exit(main())
