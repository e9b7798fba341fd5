from dheap.dway_heap.dway_heap import DHeap, child, parent
from dheap.dway_heap.errors import (
    HeapError,
    HeapIndexError,
    HeapOverflowError,
    HeapUnderflowError,
    InvalidKeyError,
)
from dheap.dway_heap.topk import get_topk
