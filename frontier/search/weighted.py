"""Weighted frontier exploration built on UniquePriorityQueue.

The successor function yields ``(state, cost)`` pairs with non-negative costs. States
are finalized in order of increasing total cost as they are polled from the queue, and
every newly found cheaper route is relaxed through the queue's decrease-key insert.
"""

from __future__ import annotations

from typing import Callable, Collection, Dict, Hashable, Iterable, List, Optional, Set, Tuple, TypeVar

from ..config import Config
from ..errors import UnreachableError, UnreachableTargetsError
from ..logging_utils import log_search
from .queue import UniquePriorityQueue

T = TypeVar("T", bound=Hashable)

WeightedSuccessors = Callable[[T], Iterable[Tuple[T, float]]]


def _relax(
    queue: UniquePriorityQueue,
    finalized: Dict[T, float],
    state: T,
    cost: float,
    successors: WeightedSuccessors,
    parents: Optional[Dict[T, T]] = None,
) -> None:
    for neighbour, step_cost in successors(state):
        if step_cost < 0:
            raise ValueError(f"Negative edge cost {step_cost} from {state!r} to {neighbour!r}")
        if neighbour in finalized:
            continue
        # insert() only reports True when the route is new or strictly cheaper
        if queue.insert(neighbour, cost + step_cost) and parents is not None:
            parents[neighbour] = state


def weighted_distances(
    initial: T,
    successors: WeightedSuccessors,
    targets: Optional[Collection[T]] = None,
    require_all: bool = True,
) -> Dict[T, float]:
    """Return the cheapest total cost from ``initial`` to each target.

    Args:
        initial: State the search starts from
        successors: Function producing ``(neighbour, edge_cost)`` pairs
        targets: States whose cost is wanted; None explores everything reachable
        require_all: Raise if some target cannot be reached

    Returns:
        Mapping state -> cost (only the targets when ``targets`` is given)

    Raises:
        UnreachableTargetsError: If ``require_all`` and a target cannot be reached
        ValueError: If the successor function yields a negative cost
    """
    wanted: Optional[Set[T]] = set(targets) if targets is not None else None
    if wanted is not None and not wanted:
        return {}

    queue: UniquePriorityQueue = UniquePriorityQueue()
    queue.insert(initial, 0)
    finalized: Dict[T, float] = {}
    remaining = set(wanted) if wanted is not None else set()

    while queue:
        state, cost = queue.poll()
        finalized[state] = cost
        if Config.should_trace(len(finalized) - 1):
            log_search(f"[weighted] finalized {state!r} at cost {cost} ({len(queue)} queued)")

        if wanted is not None and state in remaining:
            remaining.discard(state)
            if not remaining:
                return {target: finalized[target] for target in wanted}

        _relax(queue, finalized, state, cost, successors)

    if wanted is None:
        return finalized

    found = {target: finalized[target] for target in wanted if target in finalized}
    if require_all:
        raise UnreachableTargetsError(initial, found, remaining)
    return found


def cheapest_path(initial: T, target: T, successors: WeightedSuccessors) -> Tuple[float, List[T]]:
    """Return ``(cost, path)`` for a cheapest route from ``initial`` to ``target``.

    Path includes both endpoints.

    Raises:
        UnreachableError: If the target cannot be reached
    """
    queue: UniquePriorityQueue = UniquePriorityQueue()
    queue.insert(initial, 0)
    finalized: Dict[T, float] = {}
    parents: Dict[T, T] = {}

    while queue:
        state, cost = queue.poll()
        finalized[state] = cost
        if state == target:
            path = [state]
            while path[-1] != initial:
                path.append(parents[path[-1]])
            path.reverse()
            return cost, path
        _relax(queue, finalized, state, cost, successors, parents)

    raise UnreachableError(f"Failed to find a path from {initial!r} to {target!r}")
