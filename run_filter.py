#!/usr/bin/env python3
"""Entry point for filtering siteswaps by class.

Reads a file with one pattern per line and prints the lines whose pattern
belongs to the chosen class. Lines that are not valid patterns are dropped
silently.

Usage:
    python run_filter.py i1 patterns.txt
    python run_filter.py nikolaj patterns.txt
"""

import argparse
import logging
import sys
from pathlib import Path

from siteswap.pattern import FILTERS, filter_lines

log = logging.getLogger(__name__)


def run_filter(name: str, path: Path) -> int:
    """Print the matching lines of ``path``; returns the number printed.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    matched = 0
    with open(path, encoding="utf-8", errors="replace") as f:
        for line in filter_lines(f, name):
            print(line)
            matched += 1
    log.info("Filter %s: %d matching lines in %s", name, matched, path)
    return matched


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Print the siteswaps in a file that belong to a class"
    )
    parser.add_argument(
        "filter",
        type=str.lower,
        choices=sorted(FILTERS),
        help="Class of siteswaps to keep",
    )
    parser.add_argument("filename", type=str, help="File with one pattern per line")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable DEBUG-level logging",
    )
    args = parser.parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    path = Path(args.filename)
    try:
        run_filter(args.filter, path)
    except FileNotFoundError:
        log.error("Could not open file: %s", path)
        sys.exit(1)
    except OSError as e:
        log.error("Error reading %s: %s", path, e)
        sys.exit(1)


if __name__ == "__main__":
    main()
