from pqheap.dway_heap.dway_heap import GeneralHeap
from pqheap.dway_heap.topk import get_topk
