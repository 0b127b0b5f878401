"""Allow running textops as ``python -m textops``."""

import sys

from textops.cli import main

if __name__ == "__main__":
    sys.exit(main())
