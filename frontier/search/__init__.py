"""Frontier searches: breadth-first, weighted, and the queue behind them."""

from .bfs import distances, distance, reachable, shortest_paths, shortest_path
from .queue import QueueEntry, UniquePriorityQueue
from .weighted import weighted_distances, cheapest_path
from .bisection import find_first

__all__ = [
    "distances",
    "distance",
    "reachable",
    "shortest_paths",
    "shortest_path",
    "QueueEntry",
    "UniquePriorityQueue",
    "weighted_distances",
    "cheapest_path",
    "find_first",
]
