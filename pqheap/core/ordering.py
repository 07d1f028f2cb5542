from typing import Any, Callable, Optional

Comparator = Callable[[Any, Any], int]


def natural_compare(a: Any, b: Any) -> int:
    """Three-way comparison using the elements' own `<` and `>`."""
    return (a > b) - (a < b)


class Ordering:
    """
    Direction-aware comparison policy.

    `is_worse(a, b)` answers whether `a` should leave the heap after `b`.
    Every repair routine is written in terms of it, so flipping
    `is_max_heap` is the only change needed to turn a min heap into a max
    heap.
    """
    __slots__ = ("comparator", "is_max_heap", "_compare")

    def __init__(
        self,
        comparator: Optional[Comparator] = None,
        is_max_heap: bool = False
    ):
        self.comparator = comparator
        self.is_max_heap = is_max_heap
        self._compare = comparator if comparator is not None else natural_compare

    def compare(self, a: Any, b: Any) -> int:
        return self._compare(a, b)

    def is_worse(self, a: Any, b: Any) -> bool:
        if self.is_max_heap:
            return self._compare(a, b) < 0
        return self._compare(a, b) > 0

    def __repr__(self) -> str:
        direction = "max" if self.is_max_heap else "min"
        return f"Ordering({direction}, comparator={self.comparator!r})"
