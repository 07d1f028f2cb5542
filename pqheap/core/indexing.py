"""
Array-as-tree addressing shared by every heap shape.

All functions take the slot index together with the base offset and the
arity, so a binary 1-based heap and a d-ary 0-based heap use the same
formulas.
"""


def parent(k: int, base: int, arity: int) -> int:
    """Index of the parent of slot `k`. Undefined for the root."""
    return base + (k - base - 1) // arity


def first_child(k: int, base: int, arity: int) -> int:
    """Index of the leftmost child of slot `k`, live or not."""
    return arity * (k - base) + base + 1


def child_range(k: int, base: int, arity: int, end: int) -> range:
    """
    Indices of the live children of slot `k`.

    Parameters
    ----------
    k : int
        Slot whose children are wanted.
    base : int
        Index of the root slot.
    arity : int
        Branching factor of the tree.
    end : int
        Exclusive end of the live range, i.e. `base + count`.

    Returns
    -------
    range
        An empty range when `k` is a leaf.
    """
    start = first_child(k, base, arity)
    return range(start, min(start + arity, end))


def last_parent(base: int, arity: int, count: int) -> int:
    """Highest slot with at least one live child, `base - 1` if none."""
    if count < 2:
        return base - 1
    return parent(base + count - 1, base, arity)


def first_leaf(base: int, arity: int, count: int) -> int:
    return last_parent(base, arity, count) + 1
