# Compiled with Cython in pure Python mode (see setup.py); it also runs
# unchanged as a plain Python module.
import operator
from typing import Iterable, Iterator, Optional

import cython
import numpy as np

from dheap.dway_heap.errors import (
    HeapIndexError,
    HeapOverflowError,
    HeapUnderflowError,
    InvalidKeyError,
)
from dheap.logger import logger
from dheap.settings import DEFAULT_DEGREE, MAX_CAPACITY, ROOT

KEY_DTYPE = np.int64
KEY_MIN = int(np.iinfo(KEY_DTYPE).min)
KEY_MAX = int(np.iinfo(KEY_DTYPE).max)

# initial buffer length of a heap without a capacity bound
_MIN_BUFFER = 16


@cython.ccall
def child(
    i: cython.Py_ssize_t,
    k: cython.Py_ssize_t,
    d: cython.Py_ssize_t
) -> cython.Py_ssize_t:
    """Index of the k-th child (1 <= k <= d) of node i. No bounds check."""
    return d * i + k


@cython.ccall
def parent(i: cython.Py_ssize_t, d: cython.Py_ssize_t) -> cython.Py_ssize_t:
    """Index of the parent of node i. Undefined for the root."""
    return (i - 1) // d


def _as_key(key) -> int:
    try:
        value = operator.index(key)
    except TypeError:
        raise TypeError(
            f"heap keys must be integers, got {type(key).__name__}"
        ) from None
    if not KEY_MIN <= value <= KEY_MAX:
        raise ValueError(f"key {value} is outside the int64 range")
    return value


class DHeap:
    """
    Array-backed d-ary max-heap of signed 64-bit integer keys.

    The keys live in a numpy buffer and form an implicit complete d-ary tree:
    the children of index ``i`` are ``d*i + 1 .. d*i + d``. The heap is built
    on construction, so every public operation sees a valid heap.

    Parameters
    ----------
    elements : Iterable[int], optional
        Initial keys in any order, by default empty.
    d : int
        Branching factor, at least 1, by default 2.
    capacity : int or None
        Maximum number of keys, by default 5000. With ``None`` the buffer
        grows on demand and ``insert`` never overflows.

    Raises
    ------
    ValueError
        If ``d`` or ``capacity`` is smaller than 1, or there are more
        initial elements than ``capacity``.
    """

    def __init__(
        self,
        elements: Optional[Iterable[int]] = None,
        d: int = DEFAULT_DEGREE,
        capacity: Optional[int] = MAX_CAPACITY
    ) -> None:
        d = operator.index(d)
        if d < 1:
            raise ValueError(f"branching factor must be at least 1, got {d}")
        if capacity is not None:
            capacity = operator.index(capacity)
            if capacity < 1:
                raise ValueError(f"capacity must be at least 1, got {capacity}")

        keys = [] if elements is None else [_as_key(e) for e in elements]
        if capacity is not None and len(keys) > capacity:
            raise ValueError(
                f"{len(keys)} elements exceed the heap capacity of {capacity}"
            )

        self._d = d
        self._capacity = capacity
        buffer_len = capacity if capacity is not None else max(len(keys), _MIN_BUFFER)
        self._elements = np.empty(buffer_len, dtype=KEY_DTYPE)
        self._elements[:len(keys)] = keys
        self._size = len(keys)
        self.build_max_heap()

    @property
    def d(self) -> int:
        return self._d

    @property
    def branching_factor(self) -> int:
        return self._d

    @property
    def capacity(self) -> Optional[int]:
        return self._capacity

    @property
    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        return iter(self.to_list())

    def __repr__(self) -> str:
        return f"DHeap(d={self._d}, size={self._size}, elements={self.to_list()})"

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._capacity is not None and self._size == self._capacity

    def to_list(self) -> list:
        """Snapshot of the keys in array order."""
        return self._elements[:self._size].tolist()

    def format(self, sep: str = " ") -> str:
        """Keys in array order joined by ``sep``, for display."""
        return sep.join(str(key) for key in self.to_list())

    def copy(self) -> "DHeap":
        """Independent heap with the same degree, capacity and array order."""
        return DHeap(self.to_list(), self._d, self._capacity)

    def first_leaf_index(self) -> int:
        """Index of the first node without children."""
        if self._size < 2:
            return 0
        return parent(self._size - 1, self._d) + 1

    def peek(self) -> int:
        """
        Return the maximum key without removing it.

        Raises
        ------
        HeapUnderflowError
            If the heap is empty.
        """
        if self._size == 0:
            raise HeapUnderflowError("heap underflow: peek on an empty heap")
        return int(self._elements[ROOT])

    def heapify_down(self, i: int) -> None:
        """
        Restore the heap property for the subtree rooted at ``i``.

        Both subtrees under ``i`` must already be heaps. The key at ``i`` is
        swapped with its largest child until no child is strictly larger;
        among equal largest children the leftmost one is taken.
        """
        self._check_index(i)
        self._heapify_down(i)

    def build_max_heap(self) -> None:
        """
        Arrange the first ``size`` keys into a max-heap in place.

        Calls ``heapify_down`` on every internal node from the last one
        (the parent of the last key) down to the root. Linear time.
        """
        i: cython.Py_ssize_t
        size: cython.Py_ssize_t = self._size
        if size < 2:
            return
        for i in range(parent(size - 1, self._d), ROOT - 1, -1):
            self._heapify_down(i)
        logger.debug(f"built {self._d}-ary heap of {size} keys")

    def insert(self, key: int) -> int:
        """
        Add ``key`` to the heap.

        Parameters
        ----------
        key : int
            The key to add.

        Returns
        -------
        int
            The index where the key settled.

        Raises
        ------
        HeapOverflowError
            If the heap is at capacity.
        """
        key = _as_key(key)
        if self.is_full():
            raise HeapOverflowError(
                f"heap overflow: capacity of {self._capacity} reached"
            )
        if self._size == len(self._elements):
            self._grow()

        self._elements[self._size] = key
        self._size += 1
        return self._sift_up(self._size - 1)

    def increase_key(self, i: int, key: int) -> int:
        """
        Raise the key at index ``i`` to ``key`` and move it up as needed.

        ``key`` equal to the current key is accepted and leaves the heap
        unchanged.

        Parameters
        ----------
        i : int
            Index of the key, ``0 <= i < size``.
        key : int
            The new key, not smaller than the current one.

        Returns
        -------
        int
            The index where the key settled.

        Raises
        ------
        HeapIndexError
            If ``i`` is out of range.
        InvalidKeyError
            If ``key`` is smaller than the current key.
        """
        self._check_index(i)
        key = _as_key(key)
        current = int(self._elements[i])
        if key < current:
            raise InvalidKeyError(
                f"new key {key} is smaller than current key {current}"
            )
        self._elements[i] = key
        return self._sift_up(i)

    def extract_max(self) -> int:
        """
        Remove and return the maximum key.

        Raises
        ------
        HeapUnderflowError
            If the heap is empty.
        """
        if self._size == 0:
            raise HeapUnderflowError("heap underflow: extract from an empty heap")

        elements = self._elements
        maximum = int(elements[ROOT])
        self._size -= 1
        elements[ROOT] = elements[self._size]
        self._heapify_down(ROOT)
        return maximum

    def delete(self, index: int) -> int:
        """
        Remove the key at ``index`` and return it.

        The key is moved to the root along its ancestor path regardless of
        its value and then extracted, so no sentinel key is needed.

        Raises
        ------
        HeapIndexError
            If ``index`` is out of range.
        """
        self._check_index(index)
        self._float_to_root(index)
        key = self.extract_max()
        logger.debug(f"deleted key {key} at index {index}")
        return key

    def _check_index(self, i) -> None:
        i = operator.index(i)
        if not 0 <= i < self._size:
            raise HeapIndexError(
                f"index {i} out of bounds for heap of size {self._size}"
            )

    def _grow(self) -> None:
        grown = np.empty(2 * len(self._elements), dtype=KEY_DTYPE)
        grown[:self._size] = self._elements[:self._size]
        self._elements = grown

    def _heapify_down(self, i: cython.Py_ssize_t) -> None:
        d: cython.Py_ssize_t = self._d
        size: cython.Py_ssize_t = self._size
        largest: cython.Py_ssize_t
        c: cython.Py_ssize_t
        k: cython.Py_ssize_t
        elements = self._elements

        while True:
            largest = i
            for k in range(1, d + 1):
                c = child(i, k, d)
                # children are contiguous, the rest are out of range too
                if c >= size:
                    break
                if elements[c] > elements[largest]:
                    largest = c

            if largest == i:
                return
            elements[i], elements[largest] = elements[largest], elements[i]
            i = largest

    def _sift_up(self, i: cython.Py_ssize_t) -> int:
        d: cython.Py_ssize_t = self._d
        p: cython.Py_ssize_t
        elements = self._elements

        while i > ROOT:
            p = parent(i, d)
            if elements[p] >= elements[i]:
                break
            elements[i], elements[p] = elements[p], elements[i]
            i = p
        return i

    def _float_to_root(self, i: cython.Py_ssize_t) -> None:
        d: cython.Py_ssize_t = self._d
        p: cython.Py_ssize_t
        elements = self._elements

        while i > ROOT:
            p = parent(i, d)
            elements[i], elements[p] = elements[p], elements[i]
            i = p

    def _validate(self) -> bool:
        """Check the max-heap property over every parent/child pair."""
        i: cython.Py_ssize_t
        elements = self._elements
        for i in range(1, self._size):
            if elements[parent(i, self._d)] < elements[i]:
                return False
        return True
