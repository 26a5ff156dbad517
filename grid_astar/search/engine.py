"""Best-first (A*) search over an :class:`Environment`."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, FrozenSet, Hashable, Iterator, Optional, Tuple, Union

from ..core.best_cost import BestCostIndex
from ..core.environment import Environment, state_key
from ..core.errors import EmptyFrontier
from ..core.frontier import Frontier
from ..core.node import SearchNode, reconstruct_path

logger = logging.getLogger(__name__)


class SearchPhase(Enum):
    INIT = "init"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class StepObservation:
    """What happened in one iteration of the search loop."""

    step: int
    node: SearchNode
    stale: bool
    is_goal: bool
    frontier: Tuple[SearchNode, ...]
    closed: FrozenSet[Hashable]

    @property
    def state(self) -> Hashable:
        return self.node.state

    @property
    def action(self) -> Optional[str]:
        return self.node.action

    @property
    def g_cost(self) -> float:
        return self.node.g_cost

    @property
    def h_cost(self) -> float:
        return self.node.h_cost

    @property
    def f_cost(self) -> float:
        return self.node.f_cost


@dataclass(frozen=True)
class SearchSuccess:
    """A goal state was popped."""

    node: SearchNode
    actions: Tuple[str, ...]
    cost: float
    path_length: int
    total_explored: int
    efficiency: float
    steps: int

    found = True


@dataclass(frozen=True)
class SearchExhausted:
    """The frontier ran dry without reaching a goal."""

    steps: int
    total_explored: int

    found = False


SearchResult = Union[SearchSuccess, SearchExhausted]


class SearchEngine:
    """Run one A* search against ``environment``.

    The engine owns its frontier, best-cost index and closed set for the
    lifetime of a single run. Drive it with :meth:`steps` to observe (and
    pace) every iteration, or call :meth:`run` to finish in one go. State
    is consistent between steps, so a caller may stop iterating at any
    point.
    """

    def __init__(self, environment: Environment) -> None:
        self.environment = environment
        self.frontier = Frontier()
        self.best_costs = BestCostIndex()
        self.closed: set[Hashable] = set()
        self.step_counter: int = 0
        self.phase = SearchPhase.INIT
        self.result: Optional[SearchResult] = None

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def steps(self) -> Iterator[StepObservation]:
        """Yield one :class:`StepObservation` per popped node."""

        if self.phase is SearchPhase.INIT:
            self._initialize()
        while self.phase is SearchPhase.RUNNING:
            observation = self._step()
            if observation is None:
                return
            yield observation

    def run(
        self, on_step: Optional[Callable[[StepObservation], None]] = None
    ) -> SearchResult:
        """Search until success or exhaustion and return the result."""

        for observation in self.steps():
            if on_step is not None:
                on_step(observation)
        assert self.result is not None
        return self.result

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _initialize(self) -> None:
        env = self.environment
        start = env.initial_state()
        root = SearchNode(state=start, h_cost=env.heuristic(start))
        self.frontier.push(root)
        self.best_costs.offer(state_key(start), 0)
        self.phase = SearchPhase.RUNNING
        logger.info("Search started at %s (h=%s)", start, root.h_cost)

    def _step(self) -> Optional[StepObservation]:
        try:
            curr = self.frontier.pop()
        except EmptyFrontier:
            self._exhaust()
            return None

        self.step_counter += 1
        key = state_key(curr.state)
        self.closed.add(key)

        is_goal = self.environment.is_goal(curr.state)
        stale = False
        if is_goal:
            self._succeed(curr)
        elif self.best_costs.is_stale(key, curr.g_cost):
            # A cheaper path to this state was pushed after this node.
            stale = True
        else:
            self._expand(curr)

        logger.debug(
            "Step %d: %s via %s f=%s (g=%s + h=%s)%s",
            self.step_counter,
            curr.state,
            curr.action,
            curr.f_cost,
            curr.g_cost,
            curr.h_cost,
            " [stale]" if stale else "",
        )
        return StepObservation(
            step=self.step_counter,
            node=curr,
            stale=stale,
            is_goal=is_goal,
            frontier=self.frontier.snapshot(),
            closed=frozenset(self.closed),
        )

    def _expand(self, curr: SearchNode) -> None:
        env = self.environment
        for action, next_state, step_cost in env.successors(curr.state):
            new_g = curr.g_cost + step_cost
            # Strict improvement only: an equal-cost alternative is dropped.
            if self.best_costs.offer(state_key(next_state), new_g):
                self.frontier.push(
                    curr.child(next_state, action, step_cost, env.heuristic(next_state))
                )

    def _succeed(self, node: SearchNode) -> None:
        actions = tuple(reconstruct_path(node))
        total = len(self.closed)
        efficiency = (len(actions) / total) * 100 if total else 0.0
        self.result = SearchSuccess(
            node=node,
            actions=actions,
            cost=node.g_cost,
            path_length=len(actions),
            total_explored=total,
            efficiency=efficiency,
            steps=self.step_counter,
        )
        self.phase = SearchPhase.SUCCEEDED
        logger.info(
            "Goal %s reached: cost=%s length=%d explored=%d steps=%d",
            node.state,
            node.g_cost,
            len(actions),
            total,
            self.step_counter,
        )

    def _exhaust(self) -> None:
        self.result = SearchExhausted(
            steps=self.step_counter, total_explored=len(self.closed)
        )
        self.phase = SearchPhase.EXHAUSTED
        logger.info(
            "Search exhausted after %d steps, %d states explored",
            self.step_counter,
            len(self.closed),
        )


__all__ = [
    "SearchEngine",
    "SearchPhase",
    "SearchResult",
    "SearchSuccess",
    "SearchExhausted",
    "StepObservation",
]
