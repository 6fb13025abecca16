"""
Unique-key priority queue with decrease-key.

Each key appears at most once. Re-inserting a key only takes effect when the new
value is strictly lower than the queued one (priorities improve, never regress), which
is the relaxation step of weighted frontier exploration.

Storage is an arena of slots addressed by stable integer indices. Each slot holds a
key, a value and the indices of its neighbours in an ascending doubly linked chain;
freed slots are recycled through an explicit free list. A mirror dict gives O(1)
presence and value lookups without walking the chain.
"""

from __future__ import annotations

from typing import Any, Dict, Generic, Hashable, Iterator, List, NamedTuple, Optional, TypeVar

from ..errors import EmptyQueueError

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

# Null link
_NONE = -1


class QueueEntry(NamedTuple):
    """A key and its priority value, as returned by ``poll``."""

    key: Any
    value: Any

    def __str__(self) -> str:
        return f"{self.key}={self.value}"


class UniquePriorityQueue(Generic[K, V]):
    """Ascending priority queue over unique keys.

    Invariants:
    - walking the chain from the head yields non-decreasing values
    - the mirror dict holds exactly the keys and values of the chain

    Insertion scans linearly from the head (O(n)); removal, polling and size are O(1).
    """

    def __init__(self) -> None:
        self._keys: List[Optional[K]] = []
        self._values: List[Optional[V]] = []
        self._prev: List[int] = []
        self._next: List[int] = []
        self._free: List[int] = []
        self._head = _NONE

        # Mirror of the chain: key -> value, and key -> slot index
        self._priorities: Dict[K, V] = {}
        self._slots: Dict[K, int] = {}

    # ------------------------------------------------------------------
    # Arena management
    # ------------------------------------------------------------------

    def _allocate(self, key: K, value: V) -> int:
        if self._free:
            slot = self._free.pop()
            self._keys[slot] = key
            self._values[slot] = value
            self._prev[slot] = _NONE
            self._next[slot] = _NONE
            return slot
        self._keys.append(key)
        self._values.append(value)
        self._prev.append(_NONE)
        self._next.append(_NONE)
        return len(self._keys) - 1

    def _release(self, slot: int) -> None:
        # Drop references so released keys/values can be collected
        self._keys[slot] = None
        self._values[slot] = None
        self._prev[slot] = _NONE
        self._next[slot] = _NONE
        self._free.append(slot)

    def _unlink(self, slot: int) -> None:
        prev, nxt = self._prev[slot], self._next[slot]
        if prev == _NONE:
            # Removing the head; when it is the sole element the head becomes empty
            self._head = nxt
        else:
            self._next[prev] = nxt
        if nxt != _NONE:
            self._prev[nxt] = prev

    # ------------------------------------------------------------------
    # Queue operations
    # ------------------------------------------------------------------

    def insert(self, key: K, value: V) -> bool:
        """Queue ``key`` with ``value``, or lower its value if already queued.

        Returns:
            True if the key was added or its value improved; False if the queued
            value was already lower than or equal to ``value`` (nothing changes).
        """
        if key in self._priorities:
            if self._priorities[key] <= value:
                return False
            # Decrease-key: drop the old entry and re-insert at its new position
            self.remove(key)

        slot = self._allocate(key, value)
        self._priorities[key] = value
        self._slots[key] = slot

        # Find the first entry whose value is not lower than the new one
        last = _NONE
        curr = self._head
        while curr != _NONE and value > self._values[curr]:
            last = curr
            curr = self._next[curr]

        # Splice between last and curr
        self._prev[slot] = last
        self._next[slot] = curr
        if last == _NONE:
            self._head = slot
        else:
            self._next[last] = slot
        if curr != _NONE:
            self._prev[curr] = slot
        return True

    def remove(self, key: K) -> V:
        """Remove ``key`` from the queue and return its value.

        Raises:
            KeyError: If the key is not queued
        """
        if key not in self._slots:
            raise KeyError(f"Key {key!r} is not in the queue")
        slot = self._slots.pop(key)
        value = self._priorities.pop(key)
        self._unlink(slot)
        self._release(slot)
        return value

    def poll(self) -> QueueEntry:
        """Remove and return the entry with the lowest value.

        Raises:
            EmptyQueueError: If the queue is empty
        """
        entry = self.peek()
        self.remove(entry.key)
        return entry

    def peek(self) -> QueueEntry:
        """Return the entry with the lowest value without removing it."""
        if self._head == _NONE:
            raise EmptyQueueError("Cannot take an element from an empty queue")
        return QueueEntry(self._keys[self._head], self._values[self._head])

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        """Current value of ``key``, or ``default`` if it is not queued."""
        return self._priorities.get(key, default)

    def size(self) -> int:
        return len(self._priorities)

    # ------------------------------------------------------------------
    # Python protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._priorities)

    def __bool__(self) -> bool:
        return self._head != _NONE

    def __contains__(self, key: object) -> bool:
        return key in self._priorities

    def __iter__(self) -> Iterator[QueueEntry]:
        """Iterate entries in ascending order without consuming them."""
        curr = self._head
        while curr != _NONE:
            yield QueueEntry(self._keys[curr], self._values[curr])
            curr = self._next[curr]

    def __str__(self) -> str:
        if self._head == _NONE:
            return "(empty)"
        return ",".join(str(entry) for entry in self)

    def __repr__(self) -> str:
        return f"UniquePriorityQueue([{self}])" if self else "UniquePriorityQueue([])"
