from pqheap.indexed_heap.indexed_heap import IndexedHeap
