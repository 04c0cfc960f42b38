#!/usr/bin/env python
from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from dotenv import load_dotenv

from licensewalk.config import (
    LINE_ENDING_CHOICES,
    VERBOSITY_DEBUG,
    VERBOSITY_INFO,
    ScanConfig,
    set_scan_config,
)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="licensewalk",
        usage="%(prog)s [dir/] -o [outputFile]",
        description="Report the license text of every package in a node_modules tree",
    )
    parser.add_argument("path", nargs="?", help="Package directory to scan (default: current directory)")
    parser.add_argument("-o", "--output", help="Output file")
    parser.add_argument(
        "--eol",
        "--end-of-line",
        dest="eol",
        choices=LINE_ENDING_CHOICES,
        help="Desired line endings (default: host OS)",
    )
    parser.add_argument("-v", "--verbose", action="count", default=None, help="Increase verbosity")
    return parser


def configure_logging(verbosity: int) -> None:
    if verbosity >= VERBOSITY_DEBUG:
        level = logging.DEBUG
    elif verbosity >= VERBOSITY_INFO:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)
    logging.getLogger("licensewalk").setLevel(level)
    # Suppress debug chatter from the event loop
    logging.getLogger("asyncio").setLevel(logging.WARNING)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    load_dotenv(Path.cwd() / ".env")

    config = ScanConfig.from_env().with_overrides(
        root=Path(args.path) if args.path else Path.cwd(),
        line_ending=args.eol,
        verbosity=args.verbose,
        output=args.output,
    )
    configure_logging(config.verbosity)
    set_scan_config(config)

    from licensewalk.cli.commands import report

    return asyncio.run(report.run())


if __name__ == "__main__":
    sys.exit(main())
