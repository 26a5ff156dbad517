"""Search tree nodes and path reconstruction."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Hashable, List, Optional

from .errors import InconsistentSearchTree


@dataclass(frozen=True, eq=False)
class SearchNode:
    """A state reached through ``parent`` by taking ``action``.

    Nodes are never mutated. ``parent`` is a shared back-reference: one
    ancestor may be the parent of several live children. Python's
    reference counting keeps an ancestor chain alive for as long as any
    descendant is held by the frontier or by the caller.
    """

    state: Hashable
    parent: Optional[SearchNode] = field(default=None, repr=False)
    action: Optional[str] = None
    g_cost: float = 0
    h_cost: float = 0
    depth: int = 0

    @property
    def f_cost(self) -> float:
        return self.g_cost + self.h_cost

    @property
    def is_root(self) -> bool:
        return self.parent is None

    def child(self, state: Hashable, action: str, step_cost: float, h_cost: float) -> SearchNode:
        """Return a new node one step below this one."""

        return SearchNode(
            state=state,
            parent=self,
            action=action,
            g_cost=self.g_cost + step_cost,
            h_cost=h_cost,
            depth=self.depth + 1,
        )


def path_nodes(node: SearchNode) -> List[SearchNode]:
    """Return the nodes from the root down to ``node`` inclusive."""

    chain: List[SearchNode] = []
    seen: set[int] = set()
    current: Optional[SearchNode] = node
    while current is not None:
        if id(current) in seen:
            raise InconsistentSearchTree("parent chain contains a cycle")
        seen.add(id(current))
        chain.append(current)
        if current.parent is not None and current.action is None:
            raise InconsistentSearchTree(
                f"non-root node for {current.state!r} has no action"
            )
        current = current.parent
    chain.reverse()
    if len(chain) != node.depth + 1:
        raise InconsistentSearchTree(
            f"node depth {node.depth} does not match chain length {len(chain) - 1}"
        )
    return chain


def reconstruct_path(node: SearchNode) -> List[str]:
    """Return the actions leading from the root to ``node``, in order."""

    return [n.action for n in path_nodes(node)[1:]]  # type: ignore[misc]


__all__ = ["SearchNode", "path_nodes", "reconstruct_path"]
