"""Backing arrays for the heaps: allocation, resizing and the empty marker."""
from typing import Any, Sequence

import numpy as np


class _Empty:
    __slots__ = ()

    def __repr__(self) -> str:
        return "EMPTY"

    def __reduce__(self):
        return "EMPTY"


EMPTY = _Empty()


def allocate(length: int) -> np.ndarray:
    """Return an object array of `length` slots, all empty."""
    return np.full(length, EMPTY, dtype=object)


def resize(
    storage: np.ndarray,
    length: int,
    base: int,
    count: int
) -> np.ndarray:
    """
    Copy the live range of `storage` into a fresh array of `length` slots.

    The live range keeps its offset, so slot `i` of the old array is slot `i`
    of the new one. No element is reordered.
    """
    if length < base + count:
        raise ValueError(
            f"cannot resize to {length} slots, {base + count} are in use"
        )
    fresh = allocate(length)
    fresh[base:base + count] = storage[base:base + count]
    return fresh


def as_storage(sequence: Sequence[Any]) -> np.ndarray:
    """
    Turn caller-supplied slots into heap storage.

    A one-dimensional object ndarray is used in place; any other sequence is
    copied. `None` slots become `EMPTY`.
    """
    if isinstance(sequence, np.ndarray) and sequence.dtype == object \
            and sequence.ndim == 1:
        storage = sequence
    else:
        items = list(sequence)
        storage = allocate(len(items))
        for i, item in enumerate(items):
            storage[i] = item
    for i in range(len(storage)):
        if storage[i] is None:
            storage[i] = EMPTY
    return storage


def grown_capacity(capacity: int) -> int:
    return max(1, 2 * capacity)


def shrunk_capacity(capacity: int, count: int, floor: int) -> int:
    """
    Capacity after an extraction.

    Halves once occupancy has fallen to a quarter of the capacity, which
    leaves room for as many inserts as there are live elements before the
    next growth. Never goes below `floor`.
    """
    if capacity > floor and count * 4 <= capacity:
        return max(floor, capacity // 2)
    return capacity
