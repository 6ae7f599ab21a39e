"""Command line interface for the filesystem utilities."""

import argparse
import logging
import os
import sys

from fsutil.config import Config
from fsutil.exceptions import FsutilError
from fsutil.paths import clean_filename, clean_path
from fsutil.predicates import is_empty_dir
from fsutil.shred import shred
from fsutil.umask import umask


logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """
    Configure logging to stderr at Config.LOG_LEVEL (DEBUG when verbose).

    Safe to call again once --verbose is known; the second call only adjusts
    levels.
    """
    level = logging.DEBUG if verbose else getattr(logging, Config.LOG_LEVEL, logging.WARNING)
    logging.basicConfig(
        stream=sys.stderr,
        format=Config.LOG_FORMAT,
        datefmt=Config.LOG_DATE_FORMAT,
    )
    logging.getLogger().setLevel(level)

    # Errors reach the user through the "✗" line in main
    logging.getLogger("fsutil.exceptions").setLevel(logging.DEBUG if verbose else logging.CRITICAL)


class CustomParser(argparse.ArgumentParser):
    def error(self, message):
        """Overrides the default error handler."""
        logger.debug(f"Command parse error: {message}")
        print(f"✗ Invalid command usage: {message}", file=sys.stderr)
        print(f"  For correct usage, run: {self.prog} --help", file=sys.stderr)
        sys.exit(1)


# --- Command handlers ---


def clean_path_command(args):
    for path in args.paths:
        print(clean_path(path))


def clean_filename_command(args):
    for name in args.names:
        print(clean_filename(name))


def shred_command(args):
    logging.debug(f"Shred settings: {dict(Config.get_shred_info(), passes=args.passes)}")
    for path in args.files:
        shred(path, args.passes)
        print(f"✓ Shredded {path}")


def is_empty_dir_command(args):
    empty = is_empty_dir(args.directory)
    print("empty" if empty else "not empty")
    return 0 if empty else 2


def initialize_parser():
    """Builds and returns the argparse parser with all commands."""
    parser = CustomParser(
        description=f"{Config.APP_NAME} - path and secure deletion helpers",
        prog="cypher-fsutil",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {Config.VERSION}")

    subparsers = parser.add_subparsers(
        title="Available Commands",
        metavar="<command>",
        parser_class=CustomParser,
    )
    subparsers.required = True

    path_cmd = subparsers.add_parser("clean-path", help="Print the absolute, cleaned form of paths")
    path_cmd.add_argument("paths", nargs="+", help="Paths to resolve (may start with '~')")
    path_cmd.set_defaults(func=clean_path_command)

    name_cmd = subparsers.add_parser("clean-filename", help="Print filesystem-safe versions of names")
    name_cmd.add_argument("names", nargs="+", help="Names to sanitize")
    name_cmd.set_defaults(func=clean_filename_command)

    shred_cmd = subparsers.add_parser("shred", aliases=["rm"], help="Overwrite files with random data and delete them")
    shred_cmd.add_argument("files", nargs="+", help="Files to destroy")
    shred_cmd.add_argument(
        "-n", "--passes", type=int, default=Config.SHRED_PASSES,
        help=f"Overwrite passes (default: {Config.SHRED_PASSES})",
    )
    shred_cmd.set_defaults(func=shred_command)

    empty_cmd = subparsers.add_parser("is-empty-dir", help="Check whether a directory tree holds no files")
    empty_cmd.add_argument("directory", help="Directory to inspect")
    empty_cmd.set_defaults(func=is_empty_dir_command)

    return parser


def main(argv=None) -> int:
    """Entry point for the cypher-fsutil console script."""
    setup_logging()
    parser = initialize_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        setup_logging(verbose=True)
    os.umask(umask())

    try:
        return args.func(args) or 0
    except (FsutilError, ValueError) as e:
        print(f"✗ {e}", file=sys.stderr)
        return 1
