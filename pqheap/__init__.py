from pqheap.config import HeapConfig
from pqheap.dway_heap.dway_heap import GeneralHeap
from pqheap.dway_heap.topk import get_topk
from pqheap.exceptions import HeapUnderflowError
from pqheap.indexed_heap.indexed_heap import IndexedHeap

__version__ = "0.1.0"
