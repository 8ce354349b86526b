from typing import Any, Callable, Dict, Generic, Hashable, List, Optional, TypeVar

from .heap_error import EmptyHeapError, HeapIndexError


# TYPE VARIABLE

# The element type.
T = TypeVar('T')


# HELPER FUNCTIONS

def min_order(a: Any, b: Any) -> int:
    """
    Compare two values so that the smaller of them is given the higher priority.

    .. note::
        For numbers, this has the same sign as b - a, so a heap that uses it is a min-heap.

    :param a:   The first value.
    :param b:   The second value.
    :return:    A positive number if a < b, a negative number if a > b, and 0 otherwise.
    """
    return int(a < b) - int(a > b)


# MAIN CLASS

class Heap(Generic[T]):
    """
    A binary heap whose elements can be repositioned in place after their priorities change.

    The order of the heap is determined by a comparator: comparator(a, b) should return a positive number if a
    has a higher priority than b (i.e. a belongs closer to the top of the heap), a negative number if it has a
    lower priority, and 0 if they have the same priority. For example, to make a max-heap of people ordered by
    their birth years:

        heap = Heap(comparator=lambda a, b: a.birthyear - b.birthyear)

    By default, the heap is a min-heap.
    """

    # CONSTRUCTOR

    def __init__(self, *, comparator: Optional[Callable[[T, T], float]] = None,
                 ident: Optional[Callable[[T], Hashable]] = None):
        """
        Construct a heap.

        .. note::
            If ident is specified, no two elements in the heap may share an ID, and update will look up elements
            by their IDs rather than by scanning the heap.

        :param comparator:  A function specifying how the elements should be compared. The default is min_order,
                            which specifies that smaller elements have higher priority.
        :param ident:       An optional function that maps each element to a hashable ID.
        """
        self.__comparator = comparator if comparator is not None else min_order  # type: Callable[[T, T], float]
        self.__ident = ident                                                      # type: Optional[Callable[[T], Hashable]]

        # Datatype Invariant: If the heap has an ID function, the dictionary and the heap always have the same size.
        self.__heap = []                                                          # type: List[T]
        self.__positions = {}                                                     # type: Dict[Hashable, int]

    # SPECIAL METHODS

    def __len__(self) -> int:
        """
        Get the number of elements in the heap.

        :return:    The number of elements in the heap.
        """
        return len(self.__heap)

    def __repr__(self) -> str:
        return repr(self.__heap)

    # PUBLIC METHODS

    def add(self, value: T) -> int:
        """
        Add an element to the heap.

        :param value:   The element to add.
        :return:        The index at which the element ends up in the heap.
        """
        # If the heap already contains an element with the same ID as the new one, raise an exception.
        if self.__ident is not None and self.__ident(value) in self.__positions:
            raise RuntimeError("An element with the specified ID is already in the heap")

        # Append the new element to the heap, and then walk it up the tree to the right place.
        i = len(self.__heap)  # type: int
        self.__heap.append(value)
        i = self.__percolate(i)

        self.__ensure_invariant()
        return i

    def change_key(self, index: int, value: T) -> int:
        """
        Replace the element at the specified index with a new one, and reposition it to restore the heap property.

        .. note::
            The new element is first walked up the heap (if its priority is higher than its parent's), and then
            down it (if its priority is lower than one of its children's). The index returned is the one at which
            the element comes to rest after both walks, so get_collection()[result] is always the new element.

        :pre:   0 <= index < len(self)

        :param index:   The index of the element to replace.
        :param value:   The new element.
        :return:        The index at which the new element ends up in the heap.
        :raises HeapIndexError: If the index is out of range.
        """
        if not 0 <= index < len(self.__heap):
            raise HeapIndexError("Heap index {} is out of range for a heap of size {}".format(
                index, len(self.__heap)
            ))

        # If the heap is tracking element IDs, make sure that the new element's ID is either the same as the old
        # element's ID or not yet in use, and then remove the old element's dictionary entry.
        if self.__ident is not None:
            old_id = self.__ident(self.__heap[index])  # type: Hashable
            new_id = self.__ident(value)               # type: Hashable
            if new_id != old_id and new_id in self.__positions:
                raise RuntimeError("An element with the specified ID is already in the heap")
            del self.__positions[old_id]

        self.__heap[index] = value
        index = self.__percolate(index)
        index = self.__heapify(index)

        self.__ensure_invariant()
        return index

    def clear(self) -> None:
        """
        Clear the heap.

        :post:  self.is_empty()
        """
        self.__heap = []
        self.__positions.clear()

        self.__ensure_invariant()

    def contains(self, node: T) -> bool:
        """
        Get whether or not the heap contains the specified element (in the sense used by update).

        :param node:    The element to check.
        :return:        True, if the heap contains the element, or False otherwise.
        """
        return self.__find(node) is not None

    def extract(self) -> T:
        """
        Remove the element at the top of the heap and return it.

        :return:    The element that was at the top of the heap.
        :raises EmptyHeapError: If the heap is empty (in which case it is left unchanged).
        """
        if len(self.__heap) == 0:
            raise EmptyHeapError("Cannot extract an element from an empty heap")

        # Remove the last element from the heap. If the top element was not the only one in the heap, move the
        # removed element into its place, and then walk it down the tree to restore the heap property.
        result = self.__heap[0]     # type: T
        last = self.__heap.pop()    # type: T
        if self.__ident is not None:
            del self.__positions[self.__ident(result)]

        if len(self.__heap) > 0:
            self.__place(0, last)
            self.__heapify(0)

        self.__ensure_invariant()
        return result

    def get_collection(self) -> List[T]:
        """
        Get a copy of the elements in the heap, in heap order.

        .. note::
            The list returned is a snapshot: modifying it has no effect on the heap itself.

        :return:    A list containing the elements in the heap, in the order in which the heap stores them.
        """
        return list(self.__heap)

    def is_empty(self) -> bool:
        """
        Get whether or not the heap is empty.

        :return:    True, if it is empty, or False if it isn't.
        """
        return len(self.__heap) == 0

    def top(self) -> T:
        """
        Get the element at the top of the heap, without removing it.

        :return:    The element at the top of the heap.
        :raises EmptyHeapError: If the heap is empty.
        """
        if len(self.__heap) == 0:
            raise EmptyHeapError("Cannot get the top element of an empty heap")
        return self.__heap[0]

    def update(self, node: T) -> None:
        """
        Reposition the specified element after its priority has been changed by the caller.

        .. note::
            This is the decrease-key (or increase-key) operation needed by algorithms such as Dijkstra's or A*.
            The caller is expected to have changed the element's priority in place (e.g. by modifying one of its
            fields) before calling this. If the element cannot be found in the heap, this is a no-op.
        .. note::
            Without an ID function, the element is found by a linear scan of the heap (matching by identity if
            possible, or by equality otherwise), which takes O(n) time. With one, it is found via
            the heap's ID dictionary.

        :param node:    The element whose priority has changed.
        """
        i = self.__find(node)  # type: Optional[int]
        if i is not None:
            self.change_key(i, node)

    # PRIVATE METHODS

    def __ensure_invariant(self) -> None:
        """Check that the datatype invariant is still satisfied, and raise an exception if it isn't."""
        if self.__ident is not None and len(self.__positions) != len(self.__heap):
            raise RuntimeError("The operation that just executed invalidated the heap")

    def __find(self, node: T) -> Optional[int]:
        """
        Try to find the index of the specified element in the heap.

        :param node:    The element to find.
        :return:        The index of the element in the heap, if it's there, or None otherwise.
        """
        if self.__ident is not None:
            return self.__positions.get(self.__ident(node))

        # Prefer the element itself to an equal look-alike, so that the look-alike isn't overwritten.
        for i, elt in enumerate(self.__heap):
            if elt is node:
                return i

        for i, elt in enumerate(self.__heap):
            if elt == node:
                return i

        return None

    def __heapify(self, i: int) -> int:
        """
        Walk the specified element down the heap as necessary until neither of its children outranks it.

        .. note::
            This is for use after an element's priority has decreased, or after an element has been moved into
            the top of the heap from its end.

        :param i:   The index of the element to walk down the heap.
        :return:    The index at which the element ends up.
        """
        done = False  # type: bool
        while not done:
            # Get the indices of the current element's left and right children.
            l, r = Heap.__left(i), Heap.__right(i)

            # Find the highest-priority of the current element and its left and right children (if they exist).
            best = i  # type: int
            if l < len(self.__heap) and self.__comparator(self.__heap[l], self.__heap[best]) > 0:
                best = l
            if r < len(self.__heap) and self.__comparator(self.__heap[r], self.__heap[best]) > 0:
                best = r

            # If the best is not the current element, swap it with the current element, and walk down the
            # relevant side of the tree to continue heapifying. Otherwise, we're done.
            if best != i:
                elt = self.__heap[i]  # type: T
                self.__place(i, self.__heap[best])
                self.__place(best, elt)
                i = best
            else:
                done = True

        return i

    def __percolate(self, i: int) -> int:
        """
        Walk the specified element up the heap as necessary until its parent is not outranked by it.

        .. note::
            Elements with the same priority as their parents stay where they are.

        :param i:   The index of the element to walk up the heap.
        :return:    The index at which the element ends up.
        """
        # Copy parents downwards until we find the right place for the element, and then put it there.
        elt = self.__heap[i]  # type: T
        while i > 0 and self.__comparator(elt, self.__heap[Heap.__parent(i)]) > 0:
            p = Heap.__parent(i)  # type: int
            self.__place(i, self.__heap[p])
            i = p

        self.__place(i, elt)
        return i

    def __place(self, i: int, elt: T) -> None:
        """
        Store an element at the specified index in the heap, keeping the ID dictionary (if any) in sync.

        :param i:   The index at which to store the element.
        :param elt: The element.
        """
        self.__heap[i] = elt
        if self.__ident is not None:
            self.__positions[self.__ident(elt)] = i

    # PRIVATE STATIC METHODS

    @staticmethod
    def __left(i: int) -> int:
        """
        Get the index of the left child of the specified element in the heap.

        :param i:   The element the index of whose left child we want to get.
        :return:    The index of the left child of the specified element.
        """
        return 2 * i + 1

    @staticmethod
    def __parent(i: int) -> int:
        return (i + 1) // 2 - 1

    @staticmethod
    def __right(i: int) -> int:
        """
        Get the index of the right child of the specified element in the heap.

        :param i:   The element the index of whose right child we want to get.
        :return:    The index of the right child of the specified element.
        """
        return 2 * i + 2
