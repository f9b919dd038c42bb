"""Entry point for python -m neopilot."""

import sys

from neopilot.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
