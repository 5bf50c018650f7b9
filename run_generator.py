#!/usr/bin/env python3
"""Entry point for generating siteswaps.

Builds the juggling state graph, enumerates every pattern over a range of
periods and prints the unique ones to stdout, one per line. Progress and
diagnostics go to stderr through logging.

Usage:
    python run_generator.py 3 5 1 3
    python run_generator.py --config config.json
    python run_generator.py 3 7 1 5 --verbose
"""

import argparse
import logging
import sys
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Generator

from dacite import DaciteError

from siteswap.config import (
    GeneratorConfig,
    GraphConfig,
    SearchConfig,
    config_from_json,
    config_hash,
    graph_config_hash,
)

log = logging.getLogger(__name__)


@contextmanager
def stage_timer(name: str) -> Generator[None, None, None]:
    """Context manager that logs stage start and elapsed time."""
    log.info("Starting: %s", name)
    t0 = time.monotonic()
    yield
    log.info("Completed: %s in %.1fs", name, time.monotonic() - t0)


def run_generation(config: GeneratorConfig) -> list[str]:
    """Enumerate the configured period range.

    Args:
        config: Generator configuration.

    Returns:
        The unique patterns in notation, in deterministic order.
    """
    # Lazy imports to keep argument errors fast
    from siteswap.search import collect_siteswaps, ordered_siteswaps

    with stage_timer("Cycle Enumeration"):
        result = collect_siteswaps(config)
        log.info(
            "Found %d unique patterns (balls=%d, max_height=%d)",
            len(result.siteswaps), result.balls, result.max_height,
        )

    return [str(s) for s in ordered_siteswaps(result)]


def build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Config from --config, or from the four positional numbers."""
    if args.config is not None:
        config_path = Path(args.config)
        if not config_path.exists():
            raise FileNotFoundError(f"config file not found: {config_path}")
        return config_from_json(config_path.read_text())

    values = (args.balls, args.max_height, args.period_from, args.period_to)
    if any(v is None for v in values):
        raise ValueError(
            "give BALLS MAX_HEIGHT PERIOD_FROM PERIOD_TO or --config"
        )
    return GeneratorConfig(
        graph=GraphConfig(balls=args.balls, max_height=args.max_height),
        search=SearchConfig(
            period_from=args.period_from, period_to=args.period_to,
        ),
    )


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Generate all siteswaps for a number of balls"
    )
    parser.add_argument("balls", type=int, nargs="?", help="Number of balls")
    parser.add_argument(
        "max_height", type=int, nargs="?", help="Maximum throw height",
    )
    parser.add_argument(
        "period_from", type=int, nargs="?", help="Shortest period to search",
    )
    parser.add_argument(
        "period_to", type=int, nargs="?", help="Longest period to search",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to generator config JSON file",
    )
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

    try:
        config = build_config(args)
    except (OSError, ValueError, DaciteError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    log.info("Config hash: %s", config_hash(config))
    log.info("Graph hash:  %s", graph_config_hash(config))
    log.info(
        "Balls=%d, max_height=%d, periods %d..%d",
        config.graph.balls, config.graph.max_height,
        config.search.period_from, config.search.period_to,
    )
    if config.description or config.tags:
        log.info(
            "Description: %s, tags: %s",
            config.description or "-", ", ".join(config.tags) or "-",
        )

    try:
        lines = run_generation(config)
    except Exception:
        log.exception("Generation failed")
        sys.exit(1)

    for line in lines:
        print(line)


if __name__ == "__main__":
    main()
