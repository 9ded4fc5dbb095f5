"""Story dashboard - unified CLI dispatcher.

All subcommands live in ``storydash/commands/*.py`` and expose a
``register(subparsers)`` function that adds themselves to argparse.
"""
from __future__ import annotations

import argparse
import logging
import sys

from storydash.commands.registry import register_all


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="storydash",
        description="Story dashboard - masterdata tables and story script reader",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable INFO logging")
    sub = parser.add_subparsers(dest="command")
    register_all(sub)

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO if args.verbose else logging.ERROR)

    if not args.command:
        parser.print_help()
        sys.exit(0)

    # Each command stores a ``func`` on the namespace
    rc = args.func(args)
    sys.exit(rc or 0)
