import numpy as np
import pytest

from pqheap import HeapUnderflowError, IndexedHeap
from pqheap.core.ordering import natural_compare


def reverse(a, b):
    return natural_compare(b, a)


class TestIndexedHeap:
    def test_empty_heap(self):
        """Test empty heap creation and basic properties"""
        heap = IndexedHeap()
        assert len(heap) == 0
        assert heap.size() == 0
        assert heap.is_empty()
        assert not heap

        with pytest.raises(HeapUnderflowError):
            heap.min()
        with pytest.raises(HeapUnderflowError):
            heap.del_min()
        with pytest.raises(RuntimeError):
            heap.peek()
        assert heap.is_empty()
        assert heap._validate()

    def test_shape(self):
        heap = IndexedHeap()
        assert heap.branching_factor == 2
        assert heap.base_index == 1
        assert not heap.is_max_heap

    def test_extraction_order(self):
        heap = IndexedHeap()
        for key in [5, 3, 8, 1, 4]:
            heap.insert(key)

        assert heap.min() == 1
        assert [heap.del_min() for _ in range(5)] == [1, 3, 4, 5, 8]
        assert heap.is_empty()

    def test_root_lives_in_slot_one(self):
        heap = IndexedHeap([5, 3, 8])
        assert heap._slot(0) is None
        assert heap._slot(1) == 3

    def test_reversed_comparator(self):
        heap = IndexedHeap(comparator=reverse)
        for key in [5, 3, 8, 1, 4]:
            heap.insert(key)
        assert [heap.del_min() for _ in range(5)] == [8, 5, 4, 3, 1]

    def test_none_insert_is_discarded(self):
        heap = IndexedHeap([2, 1])
        before = [heap._slot(i) for i in range(heap.capacity + 1)]

        heap.insert(None)
        assert len(heap) == 2
        assert [heap._slot(i) for i in range(heap.capacity + 1)] == before

    def test_growth_and_shrink(self):
        heap = IndexedHeap(initial_capacity=1)
        assert heap.capacity == 1

        for key in [5, 4, 3, 2, 1]:
            heap.insert(key)
            assert heap._validate()
        assert heap.capacity == 8

        for _ in range(3):
            heap.del_min()
            assert heap._validate()
        assert len(heap) == 2
        assert heap.capacity == 4

        heap.del_min()
        assert heap.capacity == 2
        heap.del_min()
        assert heap.capacity == 1
        assert heap.is_empty()

    def test_extraction_clears_tail_slot(self):
        heap = IndexedHeap([1, 2, 3, 4], initial_capacity=16)
        heap.del_min()
        assert heap._slot(4) is None
        assert heap._slot(3) is not None

    def test_bulk_load(self):
        """Bulk loading drains in the same order as one-by-one inserts"""
        np.random.seed(7)
        keys = np.random.randint(0, 50, 200).tolist()

        bulk = IndexedHeap(keys)
        assert bulk._validate()

        incremental = IndexedHeap()
        for key in keys:
            incremental.insert(key)

        drained_bulk = [bulk.del_min() for _ in range(len(keys))]
        drained_incremental = [incremental.del_min() for _ in range(len(keys))]
        assert drained_bulk == drained_incremental == sorted(keys)

    def test_bulk_load_skips_none(self):
        heap = IndexedHeap([3, None, 1])
        assert len(heap) == 2
        assert heap.del_min() == 1

    def test_size_accounting(self):
        np.random.seed(42)
        heap = IndexedHeap()
        expected = 0
        for step in range(500):
            if np.random.uniform() < 0.6 or heap.is_empty():
                key = None if step % 10 == 0 else float(np.random.uniform())
                heap.insert(key)
                expected += key is not None
            else:
                heap.del_min()
                expected -= 1
            assert len(heap) == expected
            assert heap._validate()

    def test_iteration(self):
        keys = [9, 2, 7, 4, 4, 1]
        heap = IndexedHeap(keys)

        first = list(heap)
        second = list(heap)
        assert first == sorted(keys)
        assert second == first
        assert len(heap) == len(keys)
        assert [heap.del_min() for _ in keys] == sorted(keys)

    def test_iteration_is_a_snapshot(self):
        heap = IndexedHeap([3, 1, 2])
        it = iter(heap)
        assert next(it) == 1

        heap.insert(0)
        heap.del_min()
        assert list(it) == [2, 3]
        assert len(heap) == 3

    def test_give_take(self):
        heap = IndexedHeap()
        heap.give("b")
        heap.give("a")
        assert heap.take() == "a"
        assert heap.take() == "b"
        with pytest.raises(HeapUnderflowError):
            heap.take()

    def test_repr(self):
        assert repr(IndexedHeap([1, 2])) == (
            "IndexedHeap(size=2, branching_factor=2, is_max_heap=False, "
            "base_index=1)"
        )
