"""Tests for the ranking store."""

import random

from xivparty.core.schemas import PartyConfiguration
from xivparty.pipeline.ranking import RankingStore


def _config(variance: int, indices: tuple[int, ...] = (0, 0), avg: int = 40) -> PartyConfiguration:
    return PartyConfiguration(chosen_indices=indices, variance=variance, average_level=avg)


class TestRankingStore:
    def test_empty(self) -> None:
        store = RankingStore()
        assert len(store) == 0
        assert not store
        assert store.pop_best() is None

    def test_pop_lowest_variance_first(self) -> None:
        store = RankingStore()
        for v in (40, 0, 20, 10):
            store.insert(_config(v))
        assert [store.pop_best().variance for _ in range(4)] == [0, 10, 20, 40]  # type: ignore[union-attr]
        assert store.pop_best() is None

    def test_non_decreasing_for_random_input(self) -> None:
        rng = random.Random(7)
        store = RankingStore()
        for _ in range(200):
            store.insert(_config(rng.randrange(0, 100) * 2))
        variances = [c.variance for c in store.drain()]
        assert len(variances) == 200
        assert variances == sorted(variances)

    def test_ties_all_returned(self) -> None:
        store = RankingStore()
        a = _config(10, (0, 1), avg=30)
        b = _config(10, (1, 0), avg=60)
        c = _config(4, (1, 1))
        for cfg in (a, b, c):
            store.insert(cfg)
        assert store.pop_best() == c
        # Order among equal variance is unspecified.
        assert {store.pop_best(), store.pop_best()} == {a, b}

    def test_len_and_bool(self) -> None:
        store = RankingStore()
        store.insert(_config(2))
        store.insert(_config(4))
        assert len(store) == 2
        assert store
        store.pop_best()
        assert len(store) == 1

    def test_drain_empties_store(self) -> None:
        store = RankingStore()
        store.insert(_config(6))
        store.insert(_config(2))
        assert [c.variance for c in store.drain()] == [2, 6]
        assert len(store) == 0
