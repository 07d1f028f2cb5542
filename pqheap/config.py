from dataclasses import dataclass

DEFAULT_BRANCHING_FACTOR = 4
DEFAULT_MIN_CAPACITY = 1


@dataclass(frozen=True)
class HeapConfig:
    """
    Shape and ordering of an array heap.

    Parameters
    ----------
    branching_factor : int
        Number of children per node, at least 2.
    is_max_heap : bool
        Extract the largest element first when True, the smallest otherwise.
    base_index : int
        First storage slot that holds the root, either 0 or 1.
    initial_capacity : int
        Number of usable slots allocated up front.
    min_capacity : int
        Floor below which the storage never shrinks.
    floyd : bool
        Repair with `snake` instead of `sink` after each extraction.
    """
    branching_factor: int = DEFAULT_BRANCHING_FACTOR
    is_max_heap: bool = False
    base_index: int = 0
    initial_capacity: int = 1
    min_capacity: int = DEFAULT_MIN_CAPACITY
    floyd: bool = False

    def __post_init__(self):
        if self.branching_factor < 2:
            raise ValueError(
                f"branching_factor must be at least 2, got {self.branching_factor}"
            )
        if self.base_index not in (0, 1):
            raise ValueError(f"base_index must be 0 or 1, got {self.base_index}")
        if self.initial_capacity < 0:
            raise ValueError("initial_capacity cannot be negative")
        if self.min_capacity < 1:
            raise ValueError("min_capacity must be at least 1")
