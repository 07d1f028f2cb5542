from typing import Any, Callable, Iterable, Optional, Sequence

from pqheap.config import (
    DEFAULT_BRANCHING_FACTOR,
    DEFAULT_MIN_CAPACITY,
    HeapConfig,
)
from pqheap.core.base import ArrayHeap
from pqheap.core.indexing import first_leaf
from pqheap.core.ordering import Comparator


class GeneralHeap(ArrayHeap):
    """
    D-way heap with configurable direction and base index.

    Parameters
    ----------
    elements : Iterable[Any], optional
        Elements to bulk load in linear time.
    branching_factor : int
        Number of children per node, by default 4.
    is_max_heap : bool
        Extract the largest element first, by default True.
    base_index : int
        Slot of the root, 0 or 1.
    initial_capacity : int
        Number of slots to allocate up front.
    comparator : Callable[[Any, Any], int], optional
        Three-way comparison; the elements' own ordering when omitted.
    floyd : bool
        Repair with `snake` rather than `sink` in `take`.
    min_capacity : int
        Storage never shrinks below this many slots.
    """

    def __init__(
        self,
        elements: Optional[Iterable[Any]] = None,
        branching_factor: int = DEFAULT_BRANCHING_FACTOR,
        is_max_heap: bool = True,
        base_index: int = 0,
        initial_capacity: int = 1,
        comparator: Optional[Comparator] = None,
        floyd: bool = False,
        min_capacity: int = DEFAULT_MIN_CAPACITY
    ):
        config = HeapConfig(
            branching_factor=branching_factor,
            is_max_heap=is_max_heap,
            base_index=base_index,
            initial_capacity=initial_capacity,
            min_capacity=min_capacity,
            floyd=floyd
        )
        super().__init__(elements, config, comparator)

    @classmethod
    def max_heap(
        cls,
        elements: Optional[Iterable[Any]] = None,
        branching_factor: int = DEFAULT_BRANCHING_FACTOR,
        **kwargs
    ) -> "GeneralHeap":
        return cls(elements, branching_factor, is_max_heap=True, **kwargs)

    @classmethod
    def min_heap(
        cls,
        elements: Optional[Iterable[Any]] = None,
        branching_factor: int = DEFAULT_BRANCHING_FACTOR,
        **kwargs
    ) -> "GeneralHeap":
        return cls(elements, branching_factor, is_max_heap=False, **kwargs)

    @classmethod
    def from_storage(
        cls,
        storage: Sequence[Any],
        count: int,
        is_max_heap: bool = True,
        base_index: int = 0,
        comparator: Optional[Comparator] = None,
        branching_factor: int = DEFAULT_BRANCHING_FACTOR,
        floyd: bool = False
    ) -> "GeneralHeap":
        """
        Lay a heap over slots the caller has already filled.

        The live range is `storage[base_index:base_index + count]`; every
        other slot is cleared. Nothing is reordered, so the caller decides
        whether the slots already form a valid heap. A one-dimensional numpy
        array of dtype object is used in place, any other sequence is copied.
        `None` marks an empty slot.

        Parameters
        ----------
        storage : Sequence[Any]
            Pre-filled slots.
        count : int
            Number of live elements.

        Returns
        -------
        GeneralHeap
            A heap sharing `storage` until the first resize.

        Raises
        ------
        ValueError
            If `storage` is too short or the live range has empty slots.
        """
        heap = cls(
            branching_factor=branching_factor,
            is_max_heap=is_max_heap,
            base_index=base_index,
            initial_capacity=0,
            comparator=comparator,
            floyd=floyd
        )
        heap._overlay(storage, count)
        return heap

    def swim(self, k: int) -> None:
        self._swim(k)

    def sink(self, k: int) -> None:
        self._sink(k)

    def snake(self, k: int) -> None:
        """
        Bottom-up repair of the subtree rooted at `k`.

        The hole left at `k` walks down to a leaf by promoting the best child
        at every level, without comparing against the displaced element.
        That element is dropped into the leaf and swum back up, never past
        `k`. Ends in the same heap order as `sink`.
        """
        self._snake(k)

    def do_take(self, repair: Callable[[int], None]) -> Any:
        """
        Remove and return the root, restoring order with `repair`.

        Parameters
        ----------
        repair : Callable[[int], None]
            Usually `heap.sink` or `heap.snake`; called with the root index.
        """
        return self._take_with(repair)

    def min(self) -> Any:
        if self.is_max_heap:
            raise TypeError("min() is not available on a max heap, use peek()")
        return self.peek()

    def max(self) -> Any:
        if not self.is_max_heap:
            raise TypeError("max() is not available on a min heap, use peek()")
        return self.peek()

    def first_leaf_index(self) -> int:
        return first_leaf(self._base, self._arity, self._count)
