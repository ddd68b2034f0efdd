# SPDX-License-Identifier: MIT
"""Command-line interface for brew."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from brew.core.errors import BrewError
from brew.core.options import DEFAULT_PREFIX, DEFAULT_SYSROOT, Command, Options
from brew.core.orchestrator import Orchestrator
from brew.manifest.parser import load_manifest

# Set up logging
logger = logging.getLogger("brew")


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure logging based on verbosity level.

    Progress messages are logged at INFO, so they show by default and
    are hidden by --quiet. --verbose adds debug output.
    """
    if verbose:
        level = logging.DEBUG
        fmt = "%(levelname)s: %(name)s: %(message)s"
    elif quiet:
        level = logging.WARNING
        fmt = "%(message)s"
    else:
        level = logging.INFO
        fmt = "%(message)s"

    logging.basicConfig(level=level, format=fmt)


def options_from_args(args: argparse.Namespace) -> Options:
    return Options(
        command=Command(args.command),
        verbose=args.verbose,
        quiet=args.quiet,
        sysroot=Path(args.sysroot),
        prefix=Path(args.prefix),
    )


def run(options: Options, directory: Path) -> None:
    """Parse the brewfile in ``directory`` and execute it.

    Raises:
        BrewError: On any failure.
    """
    logger.debug("Options\n%s", options.describe())

    manifest = load_manifest(directory)
    logger.debug("Brewfile\n%s", manifest.describe())

    Orchestrator(options, root=directory).execute(manifest)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="brew",
        description="Build, install and clean LOS projects described by a brewfile.",
    )
    from brew import __version__

    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "command",
        nargs="?",
        default=Command.BUILD.value,
        choices=[c.value for c in Command],
        help="What to do (default: build)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Only print errors"
    )
    parser.add_argument(
        "--sysroot",
        default=DEFAULT_SYSROOT,
        metavar="PATH",
        help=f"Target system root (default: {DEFAULT_SYSROOT})",
    )
    parser.add_argument(
        "--prefix",
        default=DEFAULT_PREFIX,
        metavar="PATH",
        help=f"Install prefix (default: {DEFAULT_PREFIX})",
    )
    parser.add_argument(
        "-C",
        "--directory",
        default=".",
        metavar="DIR",
        help="Project directory containing the brewfile (default: .)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the brew CLI."""
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose, args.quiet)

    try:
        run(options_from_args(args), Path(args.directory))
    except BrewError as e:
        logger.error("Error: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
