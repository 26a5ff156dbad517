"""Abstract state-space interface consumed by the search engine."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Hashable, NamedTuple, Sequence


class Successor(NamedTuple):
    """One transition out of a state."""

    action: str
    state: Hashable
    cost: float


class Environment(ABC):
    """Base class for searchable state spaces.

    Implementations must return non-negative step costs and an admissible
    heuristic (one that never overestimates the remaining cost) for the
    engine's optimality guarantee to hold. Neither is validated during a
    search. States must be hashable; if a state offers a ``key()`` method
    its result is used as the identity key instead of the state itself.
    """

    @abstractmethod
    def initial_state(self) -> Hashable:
        """Return the state the search starts from."""
        raise NotImplementedError

    @abstractmethod
    def is_goal(self, state: Hashable) -> bool:
        """Return ``True`` if ``state`` satisfies the goal."""
        raise NotImplementedError

    @abstractmethod
    def heuristic(self, state: Hashable) -> float:
        """Return a non-negative estimate of the cost left from ``state``."""
        raise NotImplementedError

    @abstractmethod
    def successors(self, state: Hashable) -> Sequence[Successor]:
        """Return ``(action, next_state, step_cost)`` triples in a fixed order."""
        raise NotImplementedError


def state_key(state: Hashable) -> Hashable:
    """Return the identity key used to index ``state``."""

    key = getattr(state, "key", None)
    if callable(key):
        return key()
    return state


__all__ = ["Environment", "Successor", "state_key"]
