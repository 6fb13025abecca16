"""
Exception taxonomy for frontier.

Writes, bound checks and searches fail loudly with a dedicated exception type, while
plain grid reads never fail (they fall back to the grid default). Every exception
derives from FrontierError and also from the closest builtin, so callers can catch
either ``UnreachableError`` or ``LookupError`` depending on how generic they want to be.
"""

from typing import Any, Dict, Iterable, List


class FrontierError(Exception):
    """Base class for all errors raised by frontier."""


class InvalidValueError(FrontierError, ValueError):
    """Raised when the "no value" sentinel (None) is written to or counted in a grid."""


class WindowUndefinedError(FrontierError, RuntimeError):
    """Raised by bound-dependent queries on a window that has no extent yet."""


class OutOfBoundsError(FrontierError, ValueError):
    """Raised when a query requires a coordinate inside an established window."""


class UnreachableError(FrontierError, LookupError):
    """Raised when the search frontier empties before the goal is reached."""


class UnreachableTargetsError(UnreachableError):
    """Raised when a multi-target search cannot assign a distance to every target.

    Attributes:
        found: Distances for the targets that were reached before the frontier emptied
        missing: Targets that never received a distance
    """

    def __init__(self, initial: Any, found: Dict[Any, Any], missing: Iterable[Any]):
        self.initial = initial
        self.found = found
        self.missing: List[Any] = list(missing)
        super().__init__(
            f"Failed to reach targets {self.missing} from {initial!r} (found {found})"
        )


class EmptyQueueError(FrontierError, IndexError):
    """Raised when polling or peeking an empty priority queue."""
