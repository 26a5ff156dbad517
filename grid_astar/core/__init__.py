"""core package."""

from .coordinate import Coordinate
from .environment import Environment, Successor
from .errors import (
    EmptyFrontier,
    EnvironmentContractViolation,
    InconsistentSearchTree,
    SearchError,
)
from .node import SearchNode, reconstruct_path

__all__ = [
    "Coordinate",
    "Environment",
    "Successor",
    "SearchNode",
    "reconstruct_path",
    "SearchError",
    "EmptyFrontier",
    "EnvironmentContractViolation",
    "InconsistentSearchTree",
]
