"""Exception types raised by the search core."""

from __future__ import annotations


class SearchError(Exception):
    """Base class for search failures."""


class EmptyFrontier(SearchError, IndexError):
    """Raised when popping from a frontier that holds no nodes."""


class EnvironmentContractViolation(SearchError, ValueError):
    """An environment breaks a precondition the engine relies on.

    The engine never checks for this while searching. Concrete environments
    may raise it eagerly when they are constructed with bad data, e.g. a
    negative step cost.
    """


class InconsistentSearchTree(SearchError, RuntimeError):
    """A node's ancestry is not one the engine could have produced."""


__all__ = [
    "SearchError",
    "EmptyFrontier",
    "EnvironmentContractViolation",
    "InconsistentSearchTree",
]
