"""Export of search observations for logging and offline inspection."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Hashable, List, Optional

from ..core.node import SearchNode
from ..persistence.event_log import EXHAUSTED, STEP, SUCCESS, append_event
from ..search.engine import SearchResult, SearchSuccess, StepObservation


def _state_data(state: Hashable) -> Any:
    key = getattr(state, "key", None)
    if callable(key):
        return list(key())
    return state


def node_to_dict(node: SearchNode) -> Dict[str, Any]:
    """Return the JSON-friendly fields of ``node``."""

    return {
        "state": _state_data(node.state),
        "action": node.action,
        "g": node.g_cost,
        "h": node.h_cost,
        "f": node.f_cost,
    }


def observation_to_dict(obs: StepObservation) -> Dict[str, Any]:
    data = node_to_dict(obs.node)
    data["stale"] = obs.stale
    data["goal"] = obs.is_goal
    data["frontier"] = [node_to_dict(n) for n in obs.frontier]
    data["closed"] = sorted(
        (list(k) if isinstance(k, tuple) else k for k in obs.closed), key=repr
    )
    return data


def result_to_dict(result: SearchResult) -> Dict[str, Any]:
    if isinstance(result, SearchSuccess):
        return {
            "actions": list(result.actions),
            "cost": result.cost,
            "path_length": result.path_length,
            "total_explored": result.total_explored,
            "efficiency": result.efficiency,
            "steps": result.steps,
        }
    return {"steps": result.steps, "total_explored": result.total_explored}


class SearchRecorder:
    """Step callback that appends every observation to an event log.

    ``dest`` is a JSONL path or an in-memory list, as accepted by
    :func:`append_event`. A file destination is rotated once it reaches
    ``retention_bytes``; ``None`` lets it grow without limit.
    """

    def __init__(
        self,
        dest: str | Path | List[Dict[str, Any]],
        retention_bytes: Optional[int] = None,
    ) -> None:
        self.dest = dest
        self.retention_bytes = retention_bytes

    def __call__(self, obs: StepObservation) -> None:
        append_event(
            self.dest, obs.step, STEP, observation_to_dict(obs), self.retention_bytes
        )

    def finish(self, result: SearchResult) -> None:
        event_type = SUCCESS if result.found else EXHAUSTED
        append_event(
            self.dest, result.steps, event_type, result_to_dict(result), self.retention_bytes
        )


__all__ = [
    "SearchRecorder",
    "node_to_dict",
    "observation_to_dict",
    "result_to_dict",
]
