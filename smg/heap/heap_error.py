class EmptyHeapError(RuntimeError):
    """Raised when an operation that needs the top of a heap is attempted on an empty heap."""


class HeapIndexError(IndexError):
    """Raised when an element index that lies outside a heap is used."""
