"""CLI entry point for the neopilot environment check."""

import argparse
import logging
from importlib.metadata import version as get_version
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from neopilot.console import print_path, print_success, print_violations
from neopilot.core import Invalid, snapshot_environ, validate
from neopilot.utils import setup_logging

logger = logging.getLogger(__name__)
VERSION = get_version("neopilot-env")


def _create_parser() -> argparse.ArgumentParser:
    """Create and return the argument parser."""
    parser = argparse.ArgumentParser(
        prog="neopilot-env",
        description="Check that provider environment variables are configured.",
    )
    dotenv_group = parser.add_mutually_exclusive_group()
    dotenv_group.add_argument(
        "--env-file",
        type=Path,
        help="Load variables from this dotenv file (default: nearest .env)",
    )
    dotenv_group.add_argument(
        "--no-dotenv",
        action="store_true",
        help="Do not load any dotenv file",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Print nothing when the environment is valid",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging to stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {VERSION}",
    )
    return parser


def _load_env_file(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    """Load dotenv values without overriding the process environment."""
    if args.no_dotenv:
        return

    if args.env_file is not None:
        if not args.env_file.is_file():
            parser.error(f"env file not found: {args.env_file}")
        env_path = str(args.env_file)
    else:
        env_path = find_dotenv(usecwd=True)
        if not env_path:
            logger.debug("No .env file found")
            return

    load_dotenv(env_path, override=False)
    logger.debug("Loaded dotenv file: %s", env_path)
    if not args.quiet:
        print_path("Loaded", env_path)


def main(argv: list[str] | None = None) -> int:
    """Validate the environment and return the process exit code."""
    parser = _create_parser()
    args = parser.parse_args(argv)

    setup_logging(verbose=args.verbose)
    logger.debug("neopilot-env (v%s)", VERSION)

    _load_env_file(parser, args)

    result = validate(snapshot_environ())
    if isinstance(result, Invalid):
        print_violations(result.violations)
        return 1

    if not args.quiet:
        print_success(
            f"Environment is valid for provider [heading]{result.provider}[/heading]"
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
