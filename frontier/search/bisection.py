"""Binary search over a monotone integer predicate."""

from typing import Callable


def find_first(low: int, high: int, predicate: Callable[[int], bool]) -> int:
    """Return the smallest ``n`` in ``[low, high]`` for which ``predicate(n)`` holds.

    The predicate must be monotone over the range (False ... False, True ... True).
    ``high`` is never evaluated; it is returned when no lower value satisfies the
    predicate, so callers should pass a bound known to be True (or check the result).
    """
    if low > high:
        raise ValueError(f"Empty search range [{low}, {high}]")
    while low != high:
        half = (low + high) // 2
        if predicate(half):
            high = half
        else:
            low = half + 1
    return low
