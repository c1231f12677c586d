"""
Command-line runner for the pattern demos.

Runs one or more demonstrations and prints their output:
- singleton: accessor strategies raced from many threads
- simple-factory: shapes picked by key
- factory-method: notification services
- abstract-factory: car part families
- strategy: payment methods

Usage:
    pattern-kit                       # Run every demo
    pattern-kit singleton --threads 500
    pattern-kit --list
"""

import argparse
import functools
import logging
import sys
from typing import List, Optional

from dotenv import find_dotenv, load_dotenv

# Load .env from the working directory before any module reads the config
load_dotenv(find_dotenv(usecwd=True))

from .config import get_config  # noqa: E402
from .constants import LOG_FORMAT  # noqa: E402
from .core.patterns import ConstructionError  # noqa: E402
from .demos import DEMOS, singletons  # noqa: E402

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pattern-kit",
        description="Run design pattern demonstrations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  pattern-kit                          # Run every demo
  pattern-kit strategy factory-method  # Run selected demos
  pattern-kit singleton --threads 500  # Race 500 threads per strategy
        """
    )
    parser.add_argument(
        "demos",
        nargs="*",
        metavar="DEMO",
        help=f"Demos to run (default: all). Choices: {', '.join(DEMOS)}"
    )
    parser.add_argument(
        "--list", "-l",
        action="store_true",
        help="List available demos and exit"
    )
    parser.add_argument(
        "--threads", "-t",
        type=int,
        default=None,
        help="Threads per strategy in the singleton demo (default: from config)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.threads is not None and args.threads < 1:
        parser.error("--threads must be at least 1")
    unknown = [name for name in args.demos if name not in DEMOS]
    if unknown:
        parser.error(f"unknown demo(s): {', '.join(unknown)}. Choices: {', '.join(DEMOS)}")

    try:
        config = get_config()
    except ConstructionError as e:
        parser.error(f"invalid configuration: {e}")
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format=LOG_FORMAT,
    )
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.list:
        for name in DEMOS:
            print(name)
        return 0

    runners = dict(DEMOS)
    runners["singleton"] = functools.partial(singletons.run_demo, threads=args.threads)

    for name in args.demos or list(DEMOS):
        logger.debug(f"Running demo: {name}")
        print(f"== {name} ==")
        for line in runners[name]():
            print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
