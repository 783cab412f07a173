"""Array-backed binary min-heap.

Slots are 1-based so the parent of ``i`` is ``i // 2`` and its children are
``2 * i`` and ``2 * i + 1``; slot 0 is never used.

Without a comparator, elements are ordered by their own ``<`` and ``None`` is
treated as positive infinity. A comparator is a three-way function
``cmp(a, b) -> int`` (the ``functools.cmp_to_key`` convention) and is trusted
with every value, ``None`` included.
"""

import logging
from typing import Callable, Generic, List, Optional, TypeVar

T = TypeVar('T')

Comparator = Callable[[Optional[T], Optional[T]], int]

DEFAULT_CAPACITY = 11
MAX_LOAD_FACTOR = 0.64

logger = logging.getLogger(__name__)


class HeapError(Exception):
    """Base class for errors raised by the heap itself."""


class EmptyHeapError(HeapError, IndexError):
    pass


class IncomparableElementError(HeapError, TypeError):
    pass


def natural_order(a, b) -> int:
    if a is None:
        return 0 if b is None else 1
    if b is None:
        return -1
    try:
        if a < b:
            return -1
        if b < a:
            return 1
    except TypeError as exc:
        raise IncomparableElementError(
            f"cannot order {type(a).__name__!r} against {type(b).__name__!r}"
        ) from exc
    return 0


class BinaryHeap(Generic[T]):
    def __init__(self, comparator: Optional[Comparator] = None,
                 capacity: int = DEFAULT_CAPACITY) -> None:
        if not isinstance(capacity, int) or capacity < 3:
            raise ValueError("capacity must be an integer of at least 3")
        self._data: List[Optional[T]] = [None] * capacity
        self._size = 0
        self._natural = comparator is None
        self._comparator: Comparator = natural_order if comparator is None else comparator

    @property
    def comparator(self) -> Comparator:
        return self._comparator

    def add(self, item: Optional[T]) -> None:
        self._check_load_factor()
        index = self._size + 1
        target = index
        # None sits below everything under the natural order; it never rises.
        if not (item is None and self._natural):
            while target > 1 and self._less(item, self._data[target // 2]):
                target //= 2
        while index > target:
            self._data[index] = self._data[index // 2]
            index //= 2
        self._data[target] = item
        self._size += 1

    def peek(self) -> Optional[T]:
        if self._size == 0:
            raise EmptyHeapError("peek from empty heap")
        return self._data[1]

    def remove(self) -> Optional[T]:
        if self._size == 0:
            raise EmptyHeapError("remove from empty heap")
        data = self._data
        last_index = self._size
        top = data[1]
        last = data[last_index]
        path = self._sift_down_path(last, last_index - 1)

        hole = 1
        for child in path:
            data[hole] = data[child]
            hole = child
        data[hole] = last
        data[last_index] = None
        self._size -= 1
        return top

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def capacity(self) -> int:
        return len(self._data)

    def _less(self, a: Optional[T], b: Optional[T]) -> bool:
        return self._comparator(a, b) < 0

    def _smaller_child(self, index: int, size: int) -> int:
        left = 2 * index
        right = left + 1
        if right <= size and not self._less(self._data[left], self._data[right]):
            return right
        return left

    def _sift_down_path(self, item: Optional[T], size: int) -> List[int]:
        """Return the slots a hole at the root walks through before ``item`` settles.

        Only reads storage, so a failing comparator leaves the heap untouched.
        """
        path: List[int] = []
        index = 1
        while 2 * index <= size:
            child = self._smaller_child(index, size)
            if not self._less(self._data[child], item):
                break
            path.append(child)
            index = child
        return path

    def _check_load_factor(self) -> None:
        capacity = len(self._data)
        if self._size / capacity > MAX_LOAD_FACTOR:
            new_capacity = 2 * capacity + 1
            new_data: List[Optional[T]] = [None] * new_capacity
            for i in range(capacity):
                new_data[i] = self._data[i]
            self._data = new_data
            logger.debug("heap storage grown from %d to %d slots at size %d",
                         capacity, new_capacity, self._size)

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __str__(self) -> str:
        return "[" + "".join(f" {self._data[i]}" for i in range(1, self._size + 1)) + " ]"

    def __repr__(self) -> str:
        return f"BinaryHeap(size={self._size}, capacity={len(self._data)})"
