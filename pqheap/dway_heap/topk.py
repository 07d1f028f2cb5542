from itertools import islice
from typing import Any

from pqheap.core.base import ArrayHeap


def get_topk(heap: ArrayHeap, k: int) -> list[Any]:
    """
    Function to get the top-K elements from a heap.

    In case of a max heap, the top K largest elements will be retrieved; for a
    min heap the top K smallest elements will be retrieved. The heap itself
    is left untouched.

    Parameters
    ----------
    heap : ArrayHeap
        Any heap from this package.
    k : int
        The number of 'top-K' elements to retrieve.

    Returns
    -------
    list[Any]
        The 'top-K' elements, in extraction order.
    """
    if k <= 0:
        return []
    if heap.is_empty():
        return []

    return list(islice(heap, k))
