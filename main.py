from pqheap import GeneralHeap, IndexedHeap, get_topk


priorities = [10.5, 3.2, 15.0, 7.8, 20.1, 1.5]

# Create a 4-way max heap (branching_factor=4)
print("Creating 4-way max heap...")
heap = GeneralHeap.max_heap(priorities, branching_factor=4)

# Test basic properties
print(f"Heap size: {len(heap)}")
print(f"Is empty: {heap.is_empty()}")
print(f"First leaf index: {heap.first_leaf_index()}")
print(f"Top 3: {get_topk(heap, 3)}")

# Binary min heap, drained in ascending order
queue = IndexedHeap(priorities)
print(f"Ascending: {[queue.del_min() for _ in range(len(queue))]}")
