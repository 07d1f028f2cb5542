from typing import Any, Iterable, Optional

from pqheap.config import HeapConfig
from pqheap.core.base import ArrayHeap
from pqheap.core.ordering import Comparator


class IndexedHeap(ArrayHeap):
    """
    Binary min heap stored from slot 1.

    The children of slot `k` are `2k` and `2k + 1` and its parent is `k // 2`.
    Storage doubles when full and halves once a quarter full. Pass a
    comparator that reverses the order to get the largest element first.

    Parameters
    ----------
    elements : Iterable[Any], optional
        Elements to bulk load in linear time.
    initial_capacity : int
        Number of slots to allocate up front, by default 1.
    comparator : Callable[[Any, Any], int], optional
        Three-way comparison; the elements' own ordering when omitted.
    """

    def __init__(
        self,
        elements: Optional[Iterable[Any]] = None,
        initial_capacity: int = 1,
        comparator: Optional[Comparator] = None
    ):
        config = HeapConfig(
            branching_factor=2,
            is_max_heap=False,
            base_index=1,
            initial_capacity=initial_capacity
        )
        super().__init__(elements, config, comparator)

    def min(self) -> Any:
        """Return the smallest element without removing it."""
        return self.peek()

    def del_min(self) -> Any:
        """Remove and return the smallest element."""
        return self.take()
