"""Breadth-first frontier searches over caller-defined state spaces.

Every function here is stateless and parameterized by a successor function
``state -> iterable of states``. States only need value equality and a stable hash.

Exploration runs in waves: wave k holds exactly the states first discovered k steps
from the initial state, and the distance counter only advances at a wave boundary.
First discovery therefore assigns the minimal distance. Within a wave, states are
processed in discovery order; this never changes a reported distance but does decide
which of several tied minimal paths is listed first.

There is no cycle or size guard beyond the visited set. A successor function that
generates an infinite reachable space makes these functions run forever.
"""

from __future__ import annotations

from typing import Callable, Collection, Dict, Hashable, Iterable, List, Set, TypeVar

from ..config import Config
from ..errors import UnreachableError, UnreachableTargetsError
from ..logging_utils import log_search

T = TypeVar("T", bound=Hashable)

Successors = Callable[[T], Iterable[T]]


def _trace(label: str, wave: int, size: int) -> None:
    if Config.should_trace(wave):
        log_search(f"[{label}] wave {wave}: {size} state(s) on the frontier")


def distances(
    initial: T,
    targets: Collection[T],
    successors: Successors,
    require_all: bool = True,
) -> Dict[T, int]:
    """Return the step distance from ``initial`` to each target.

    Exploration stops as soon as every target has a distance.

    Args:
        initial: State the search starts from
        targets: States whose distance is wanted
        successors: Function producing the states reachable in one step
        require_all: Raise if the frontier empties before every target is reached

    Returns:
        Mapping target -> distance. Partial when ``require_all`` is False and some
        targets are unreachable.

    Raises:
        UnreachableTargetsError: If ``require_all`` and a target cannot be reached.
            The partial map is available as ``error.found``.
    """
    wanted: Set[T] = set(targets)
    found: Dict[T, int] = {}
    if not wanted:
        return found

    # The initial state sits in wave 0
    if initial in wanted:
        found[initial] = 0
        if len(found) == len(wanted):
            return found

    seen: Set[T] = {initial}
    wave: List[T] = [initial]
    steps = 0

    while wave:
        _trace("distances", steps, len(wave))
        next_wave: List[T] = []
        for state in wave:
            for candidate in successors(state):
                # First visit assigns the minimal distance; later visits are longer
                if candidate in seen:
                    continue
                seen.add(candidate)
                next_wave.append(candidate)
                if candidate in wanted:
                    found[candidate] = steps + 1
                    if len(found) == len(wanted):
                        return found
        wave = next_wave
        steps += 1

    # Frontier exhausted with targets left unassigned
    if require_all:
        raise UnreachableTargetsError(
            initial, found, [target for target in wanted if target not in found]
        )
    return found


def distance(initial: T, target: T, successors: Successors) -> int:
    """Return the step distance from ``initial`` to a single ``target``.

    Raises:
        UnreachableTargetsError: If the target cannot be reached
    """
    return distances(initial, [target], successors, require_all=True)[target]


def reachable(initial: T, successors: Successors) -> Dict[T, int]:
    """Return the distance from ``initial`` to every state it can reach.

    Same wave exploration as ``distances`` but without targets or early exit, so the
    successor function must describe a finite reachable set.
    """
    visited: Dict[T, int] = {initial: 0}
    wave: List[T] = [initial]
    steps = 0

    while wave:
        _trace("reachable", steps, len(wave))
        next_wave: List[T] = []
        for state in wave:
            for candidate in successors(state):
                if candidate in visited:
                    continue
                visited[candidate] = steps + 1
                next_wave.append(candidate)
        wave = next_wave
        steps += 1

    return visited


def shortest_paths(initial: T, target: T, successors: Successors) -> List[List[T]]:
    """Return every minimal-length path from ``initial`` to ``target``.

    The search runs over whole paths. A state is finalized once per wave, and a path
    is dropped as soon as its endpoint was finalized in an earlier wave. Paths that tie
    within a wave are all kept, so every minimal path survives. All paths reaching the
    target in the first wave that reaches it are returned together; each includes
    both ``initial`` and ``target``.

    Raises:
        UnreachableError: If the frontier empties before the target is reached
    """
    if initial == target:
        return [[initial]]

    finalized: Set[T] = set()
    frontier: List[List[T]] = [[initial]]
    wave = 0

    while frontier:
        _trace("shortest_paths", wave, len(frontier))

        # Endpoints reached in this wave are finalized together at the wave boundary
        endpoints = {path[-1] for path in frontier if path[-1] not in finalized}
        closed = finalized | endpoints

        shortest: List[List[T]] = []
        extended: List[List[T]] = []
        for path in frontier:
            current = path[-1]
            if current in finalized:
                continue
            for candidate in successors(current):
                if candidate == target:
                    shortest.append(path + [candidate])
                elif candidate not in closed:
                    # Extending into a closed state could never beat its known distance
                    extended.append(path + [candidate])

        # Any later wave only produces longer paths
        if shortest:
            return shortest

        finalized = closed
        frontier = extended
        wave += 1

    raise UnreachableError(f"Failed to find a path from {initial!r} to {target!r}")


def shortest_path(initial: T, target: T, successors: Successors) -> List[T]:
    """Return one minimal path: the first of ``shortest_paths``."""
    return shortest_paths(initial, target, successors)[0]
