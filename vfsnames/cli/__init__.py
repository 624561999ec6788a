"""Entry point for the ``vfsnames`` command line."""

import argparse
import logging
from typing import Optional

from vfsnames import log
from vfsnames.domain.exceptions import VfsNameError
from vfsnames.log import logger

logger = logger.getChild(__name__)


def get_parent_parser() -> argparse.ArgumentParser:
    """Options shared by every command."""
    parent_parser = argparse.ArgumentParser(add_help=False)
    group = parent_parser.add_mutually_exclusive_group()
    group.add_argument(
        "-q",
        "--quiet",
        action="count",
        default=0,
        help="Be quiet.",
    )
    group.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Be verbose.",
    )
    return parent_parser


def get_main_parser() -> argparse.ArgumentParser:
    from vfsnames.commands import names

    parent_parser = get_parent_parser()
    parser = argparse.ArgumentParser(
        prog="vfsnames",
        description="Parse and normalize virtual file system names.",
        parents=[parent_parser],
        formatter_class=argparse.RawTextHelpFormatter,
    )
    subparsers = parser.add_subparsers(
        title="Available Commands",
        metavar="COMMAND",
        dest="cmd",
        help="Use `vfsnames COMMAND --help` for command-specific help.",
    )
    subparsers.required = True
    names.add_parser(subparsers, parent_parser)
    return parser


def _log_level(args: argparse.Namespace) -> int:
    if args.quiet:
        return logging.CRITICAL if args.quiet > 1 else logging.ERROR
    if args.verbose:
        return logging.DEBUG
    return logging.INFO


def main(argv: Optional[list[str]] = None) -> int:
    """Run the command line and return the exit code."""
    parser = get_main_parser()
    args = parser.parse_args(argv)
    log.setup(_log_level(args))

    cmd = args.func(args)
    try:
        return cmd.do_run()
    except VfsNameError as exc:
        logger.error(str(exc))
        return 1
