"""Min-heap of scored configurations, lowest variance first.

Only ``variance`` takes part in the heap ordering. Configurations with the
same variance come out in no particular order; callers must not rely on it.
"""

import heapq
from collections.abc import Iterator
from dataclasses import dataclass, field

from xivparty.core.schemas import PartyConfiguration


@dataclass(order=True)
class _Entry:
    variance: int
    configuration: PartyConfiguration = field(compare=False)


class RankingStore:
    """Priority queue that hands back the best-balanced configuration first.

    Usage::

        store = RankingStore()
        store.insert(config)
        best = store.pop_best()
    """

    def __init__(self) -> None:
        self._heap: list[_Entry] = []

    def insert(self, configuration: PartyConfiguration) -> None:
        heapq.heappush(self._heap, _Entry(configuration.variance, configuration))

    def pop_best(self) -> PartyConfiguration | None:
        """Remove and return the lowest-variance configuration, or None if empty."""
        if not self._heap:
            return None
        return heapq.heappop(self._heap).configuration

    def drain(self) -> Iterator[PartyConfiguration]:
        """Pop configurations until the store is empty."""
        while self._heap:
            yield heapq.heappop(self._heap).configuration

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
