"""Lowest known ``g_cost`` per state, used to suppress duplicates."""

from __future__ import annotations

from typing import Dict, Hashable, Iterator, List, Optional


class BestCostIndex:
    """Map of state key to the cheapest ``g_cost`` ever pushed for it.

    Values only ever go down. :meth:`offer` is the single write path and
    accepts a cost only when it is strictly lower than the recorded one.
    """

    def __init__(self) -> None:
        self._best: Dict[Hashable, float] = {}
        self._history: Dict[Hashable, List[float]] = {}

    def get(self, key: Hashable) -> Optional[float]:
        return self._best.get(key)

    def offer(self, key: Hashable, cost: float) -> bool:
        """Record ``cost`` for ``key`` if it improves on the current best.

        Returns ``True`` when the index was updated.
        """

        current = self._best.get(key)
        if current is not None and not cost < current:
            return False
        self._best[key] = cost
        self._history.setdefault(key, []).append(cost)
        return True

    def is_stale(self, key: Hashable, cost: float) -> bool:
        """Return ``True`` if a cheaper cost than ``cost`` is known for ``key``."""

        current = self._best.get(key)
        return current is not None and cost > current

    def history(self, key: Hashable) -> List[float]:
        """Return every value recorded for ``key``, oldest first."""

        return list(self._history.get(key, []))

    def __contains__(self, key: object) -> bool:
        return key in self._best

    def __len__(self) -> int:
        return len(self._best)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._best)


__all__ = ["BestCostIndex"]
