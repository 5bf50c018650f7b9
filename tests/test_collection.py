"""Tests for batch collection across a period range."""

import logging
from unittest.mock import patch

from siteswap.config import DEFAULT_CONFIG, GeneratorConfig, GraphConfig, SearchConfig
from siteswap.pattern import Siteswap
from siteswap.search import collect_siteswaps, ordered_siteswaps


class TestCollectSiteswaps:
    """Unique patterns over several periods."""

    def test_default_config(self) -> None:
        result = collect_siteswaps(DEFAULT_CONFIG)
        assert [str(s) for s in ordered_siteswaps(result)] == [
            "3", "42", "51", "423", "441", "504", "522", "531",
        ]

    def test_counts_per_period(self) -> None:
        result = collect_siteswaps(DEFAULT_CONFIG)
        assert set(result.witnesses) == {1, 2, 3}
        assert result.emitted[1] == 1
        for period in (1, 2, 3):
            assert result.witnesses[period] >= result.emitted[period]

    def test_rotations_collapse(self) -> None:
        result = collect_siteswaps(DEFAULT_CONFIG)
        # each period-3 pattern is found from several states of its cycle
        assert result.emitted[3] > 5
        assert sum(1 for s in result.siteswaps if s.period == 3) == 5

    def test_single_period(self) -> None:
        cfg = GeneratorConfig(
            graph=GraphConfig(balls=2, max_height=3),
            search=SearchConfig(period_from=2, period_to=2),
        )
        result = collect_siteswaps(cfg)
        assert result.siteswaps == frozenset({Siteswap((3, 1))})

    def test_metadata(self) -> None:
        result = collect_siteswaps(DEFAULT_CONFIG)
        assert result.balls == 3
        assert result.max_height == 5

    def test_invalid_candidates_are_dropped(self, caplog) -> None:
        bogus = [Siteswap((4, 1)), Siteswap((3,))]
        with patch(
            "siteswap.search.collection.generate", return_value=iter(bogus)
        ):
            cfg = GeneratorConfig(search=SearchConfig(period_from=1, period_to=1))
            with caplog.at_level(logging.WARNING):
                result = collect_siteswaps(cfg)
        assert result.siteswaps == frozenset({Siteswap((3,))})
        assert "invalid sequence" in caplog.text


class TestOrderedSiteswaps:
    """Deterministic output order."""

    def test_sorted_by_period_then_sequence(self) -> None:
        ordered = ordered_siteswaps(collect_siteswaps(DEFAULT_CONFIG))
        keys = [(s.period, s.sequence) for s in ordered]
        assert keys == sorted(keys)

    def test_repeatable(self) -> None:
        a = ordered_siteswaps(collect_siteswaps(DEFAULT_CONFIG))
        b = ordered_siteswaps(collect_siteswaps(DEFAULT_CONFIG))
        assert [s.sequence for s in a] == [s.sequence for s in b]
