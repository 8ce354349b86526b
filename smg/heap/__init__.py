from .heap_error import EmptyHeapError, HeapIndexError
from .heap import Heap, min_order
