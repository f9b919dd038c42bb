"""Command line interface."""

from neopilot.cli.main import main

__all__ = ["main"]
