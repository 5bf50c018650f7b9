"""Collection of unique siteswaps across a range of periods."""

import logging
from collections import Counter

from siteswap.config.generation import GeneratorConfig
from siteswap.graph.builder import build_state_graph
from siteswap.pattern.siteswap import Siteswap
from siteswap.search.enumerator import generate
from siteswap.search.types import GenerationResult

log = logging.getLogger(__name__)


def collect_siteswaps(config: GeneratorConfig) -> GenerationResult:
    """Enumerate every period in the configured range and de-duplicate.

    The state graph is built once and shared by all periods. Results are
    accumulated in a set keyed by canonical form and only returned after
    the last period completes.

    Args:
        config: Generator configuration.

    Returns:
        GenerationResult with the unique patterns and per-period counts.
    """
    graph = build_state_graph(config.graph.balls, config.graph.max_height)
    unique: set[Siteswap] = set()
    witnesses: dict[int, int] = {}
    emitted: dict[int, int] = {}

    for period in range(config.search.period_from, config.search.period_to + 1):
        stats: Counter[str] = Counter()
        for siteswap in generate(graph, period, stats):
            if not siteswap.valid:
                log.warning(
                    "Enumerator produced an invalid sequence %s; skipping",
                    siteswap.raw,
                )
                continue
            unique.add(siteswap)
        witnesses[period] = stats["witnesses"]
        emitted[period] = stats["emitted"]
        log.info(
            "Period %d: %d cycle witnesses, %d emitted, %d unique so far",
            period, witnesses[period], emitted[period], len(unique),
        )

    return GenerationResult(
        balls=config.graph.balls,
        max_height=config.graph.max_height,
        siteswaps=frozenset(unique),
        witnesses=witnesses,
        emitted=emitted,
    )


def ordered_siteswaps(result: GenerationResult) -> list[Siteswap]:
    """Unique patterns sorted by period, then canonical sequence."""
    return sorted(result.siteswaps, key=lambda s: (s.period, s.sequence))
