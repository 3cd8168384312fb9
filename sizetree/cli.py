"""Command-line front door for sizetree.

Parses CLI options, resolves worker/width settings against the config file,
walks the target directory, and prints the rendered size tree.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import NoReturn

from . import config
from .rendering import DEFAULT_LINE_WIDTH, render_tree
from .size_tree import DEFAULT_MAX_WORKERS, build_size_tree

PATH_ARITY_MESSAGE = "Please provide a path to a file"

logger = logging.getLogger("sizetree")


class UsageError(Exception):
    """Invalid command line; reported as ``ERROR: <message>`` with status 1."""


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="sizetree",
        description="Print a directory tree annotated with aggregated sizes, smallest entries first.",
    )
    parser.add_argument("paths", nargs="*", metavar="path", help="Directory to measure.")
    parser.add_argument("--single-threaded", action="store_true", help="Walk with a single worker.")
    parser.add_argument(
        "--workers",
        type=_positive_int,
        default=None,
        help=f"Maximum concurrent directory walkers (default: config or {DEFAULT_MAX_WORKERS}).",
    )
    parser.add_argument(
        "--width",
        type=_positive_int,
        default=None,
        help=f"Target line width for padding (default: config or {DEFAULT_LINE_WIDTH}).",
    )
    parser.add_argument("--verbose", action="store_true", help="Log walk progress to stderr.")
    return parser


def configure_logging(verbose: bool) -> None:
    """Send package log records to stderr; stdout carries only the tree."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False


def resolve_workers(args: argparse.Namespace) -> int:
    """``--single-threaded`` wins, then ``--workers``, then config, then default."""
    if args.single_threaded:
        return 1
    if args.workers is not None:
        return args.workers
    return config.load_workers() or DEFAULT_MAX_WORKERS


def resolve_width(args: argparse.Namespace) -> int:
    if args.width is not None:
        return args.width
    return config.load_line_width() or DEFAULT_LINE_WIDTH


def _fail(message: str) -> NoReturn:
    sys.stderr.write(f"ERROR: {message}\n")
    raise SystemExit(1)


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments, walk the target path, and print its size tree.

    Usage problems and filesystem failures print ``ERROR: ...`` to stderr and
    exit with status 1 before anything is written to stdout.
    """
    parser = build_parser()
    try:
        args = parser.parse_intermixed_args(argv)
    except UsageError as exc:
        _fail(str(exc))

    if len(args.paths) != 1:
        _fail(PATH_ARITY_MESSAGE)

    configure_logging(args.verbose)
    path = Path(args.paths[0])
    workers = resolve_workers(args)
    width = resolve_width(args)
    logger.debug("walking %s with %d worker(s)", path, workers)

    try:
        tree = build_size_tree(path, max_workers=workers)
    except OSError as exc:
        failed_path = exc.filename if exc.filename is not None else path
        _fail(f"{failed_path}: {exc.strerror or exc}")

    sys.stdout.write(render_tree(tree, width))


if __name__ == "__main__":
    main()
