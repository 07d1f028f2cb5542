from dataclasses import replace
from typing import Any, Callable, Iterable, Iterator, Optional, Sequence

from pqheap.config import HeapConfig
from pqheap.core.indexing import child_range, last_parent, parent
from pqheap.core.ordering import Comparator, Ordering
from pqheap.core.storage import (
    EMPTY,
    allocate,
    as_storage,
    grown_capacity,
    resize,
    shrunk_capacity,
)
from pqheap.exceptions import HeapInvariantError, HeapUnderflowError
from pqheap.logger import init_logger

logger = init_logger(__name__)

Repair = Callable[[int], None]


class ArrayHeap:
    """
    Array-backed heap shared by every shape in the package.

    The live elements occupy `storage[base_index:base_index + len(heap)]`.
    Slots outside that range hold `EMPTY`. The tree shape is given by
    `config.branching_factor` and `config.base_index`; the extraction order
    by `config.is_max_heap` and the optional comparator.

    Parameters
    ----------
    elements : Iterable[Any], optional
        Elements to bulk load. `None` entries are skipped.
    config : HeapConfig, optional
        Shape and ordering, by default a 4-way min heap rooted at slot 0.
    comparator : Callable[[Any, Any], int], optional
        Three-way comparison; the elements' own ordering when omitted.
    """

    def __init__(
        self,
        elements: Optional[Iterable[Any]] = None,
        config: Optional[HeapConfig] = None,
        comparator: Optional[Comparator] = None
    ):
        self.config = config if config is not None else HeapConfig()
        self._ordering = Ordering(comparator, self.config.is_max_heap)
        self._base = self.config.base_index
        self._arity = self.config.branching_factor
        self._count = 0

        if elements is None:
            self._storage = allocate(self._base + self.config.initial_capacity)
        else:
            self._load(elements)

    @property
    def branching_factor(self) -> int:
        return self._arity

    @property
    def base_index(self) -> int:
        return self._base

    @property
    def is_max_heap(self) -> bool:
        return self._ordering.is_max_heap

    @property
    def comparator(self) -> Optional[Comparator]:
        return self._ordering.comparator

    @property
    def capacity(self) -> int:
        """Number of usable slots in the current storage."""
        return len(self._storage) - self._base

    def __len__(self) -> int:
        return self._count

    def __bool__(self) -> bool:
        return self._count > 0

    def size(self) -> int:
        return self._count

    def is_empty(self) -> bool:
        return self._count == 0

    def insert(self, element: Any) -> None:
        """
        Add an element to the heap.

        `None` is discarded without touching the heap. Otherwise the element
        goes into the first free slot, storage doubles if it is full, and
        the element swims up to its place.
        """
        if element is None:
            logger.debug("Discarding None insert")
            return

        self._ensure_capacity()
        k = self._base + self._count
        self._storage[k] = element
        self._count += 1
        self._swim(k)

    def give(self, element: Any) -> None:
        """Alias of `insert`."""
        self.insert(element)

    def peek(self) -> Any:
        """Return the root element without removing it."""
        if self._count == 0:
            raise HeapUnderflowError()
        return self._storage[self._base]

    def take(self) -> Any:
        """Remove and return the root element."""
        return self._take_with(self._default_repair())

    def top(self) -> Any:
        """Alias of `take`."""
        return self.take()

    def __iter__(self) -> Iterator[Any]:
        """
        Iterate over a snapshot of the heap in extraction order.

        The live elements are copied into a private heap of the same shape
        and drained from there, so this heap is never mutated and each call
        starts a fresh snapshot.
        """
        snapshot = ArrayHeap(
            config=replace(self.config, initial_capacity=self._count),
            comparator=self._ordering.comparator
        )
        for i in range(self._base, self._base + self._count):
            snapshot.insert(self._storage[i])
        return snapshot._drain()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(size={self._count}, "
            f"branching_factor={self._arity}, "
            f"is_max_heap={self.is_max_heap}, base_index={self._base})"
        )

    def _drain(self) -> Iterator[Any]:
        while self._count:
            yield self.take()

    def _default_repair(self) -> Repair:
        return self._snake if self.config.floyd else self._sink

    def _take_with(self, repair: Repair) -> Any:
        if self._count == 0:
            raise HeapUnderflowError()

        storage = self._storage
        root = storage[self._base]
        last = self._base + self._count - 1
        storage[self._base] = storage[last]
        storage[last] = EMPTY
        self._count -= 1

        if self._count > 0:
            repair(self._base)
        self._maybe_shrink()
        return root

    def _load(self, elements: Iterable[Any]) -> None:
        items = [element for element in elements if element is not None]
        capacity = max(self.config.initial_capacity, len(items))
        self._storage = allocate(self._base + capacity)
        for offset, item in enumerate(items):
            self._storage[self._base + offset] = item
        self._count = len(items)
        self._heapify()
        logger.debug(f"Bulk loaded {self._count} elements")

    def _overlay(self, slots: Sequence[Any], count: int) -> None:
        end = self._base + count
        if count < 0 or len(slots) < end:
            raise ValueError(
                f"storage of {len(slots)} slots cannot hold {count} "
                f"elements from index {self._base}"
            )
        for i in range(self._base, end):
            if slots[i] is None or slots[i] is EMPTY:
                raise ValueError(f"slot {i} of the live range is empty")

        storage = as_storage(slots)
        storage[:self._base] = EMPTY
        storage[end:] = EMPTY
        self._storage = storage
        self._count = count

    def _heapify(self) -> None:
        top = last_parent(self._base, self._arity, self._count)
        for k in range(top, self._base - 1, -1):
            self._sink(k)

    def _is_worse(self, i: int, j: int) -> bool:
        a = self._storage[i]
        b = self._storage[j]
        if a is EMPTY or b is EMPTY:
            raise HeapInvariantError(
                f"cannot order slot {i if a is EMPTY else j}: slot is empty"
            )
        return self._ordering.is_worse(a, b)

    def _swap(self, i: int, j: int) -> None:
        storage = self._storage
        storage[i], storage[j] = storage[j], storage[i]

    def _best_child(self, k: int) -> Optional[int]:
        # leftmost wins ties
        best = None
        end = self._base + self._count
        for child in child_range(k, self._base, self._arity, end):
            if best is None or self._is_worse(best, child):
                best = child
        return best

    def _swim(self, k: int, top: Optional[int] = None) -> None:
        top = self._base if top is None else top
        while k > top:
            p = parent(k, self._base, self._arity)
            if not self._is_worse(p, k):
                break
            self._swap(p, k)
            k = p

    def _sink(self, k: int) -> None:
        while True:
            child = self._best_child(k)
            if child is None or not self._is_worse(k, child):
                break
            self._swap(k, child)
            k = child

    def _snake(self, k: int) -> None:
        storage = self._storage
        element = storage[k]
        hole = k
        child = self._best_child(hole)
        while child is not None:
            storage[hole] = storage[child]
            hole = child
            child = self._best_child(hole)
        storage[hole] = element
        self._swim(hole, top=k)

    def _ensure_capacity(self) -> None:
        if self._base + self._count < len(self._storage):
            return
        capacity = grown_capacity(self.capacity)
        logger.debug(f"Growing heap storage from {self.capacity} to {capacity}")
        self._storage = resize(
            self._storage, self._base + capacity, self._base, self._count
        )

    def _maybe_shrink(self) -> None:
        capacity = shrunk_capacity(
            self.capacity, self._count, self.config.min_capacity
        )
        if capacity == self.capacity:
            return
        logger.debug(f"Shrinking heap storage from {self.capacity} to {capacity}")
        self._storage = resize(
            self._storage, self._base + capacity, self._base, self._count
        )

    def _slot(self, index: int) -> Any:
        """Raw slot access for tests. Empty slots read as None."""
        element = self._storage[index]
        return None if element is EMPTY else element

    def _validate(self) -> bool:
        """Check heap order, density and slot hygiene."""
        storage = self._storage
        end = self._base + self._count
        if len(storage) < end:
            return False
        for i in range(len(storage)):
            live = self._base <= i < end
            if (storage[i] is EMPTY) == live:
                return False
        last = last_parent(self._base, self._arity, self._count)
        for k in range(self._base, last + 1):
            for child in child_range(k, self._base, self._arity, end):
                if self._is_worse(k, child):
                    return False
        return True
