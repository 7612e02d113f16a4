from __future__ import annotations

import logging
from operator import index as as_index
from typing import Generic, Optional, TypeVar

from .buffer import FixedBuffer
from .defaults import DEFAULT_CAPACITY
from .errors import CapacityExceeded, EmptyStructure, IndexOutOfRange, ValueNotFound
from .ordering import Compare, natural_order

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _position(index: object) -> int:
    if isinstance(index, bool):
        raise TypeError("list positions must be integers, not bool")
    try:
        return as_index(index)
    except TypeError:
        raise TypeError(f"list positions must be integers, not {type(index).__name__}") from None


class BoundedList(Generic[T]):
    """Ordered list stored in a buffer whose capacity is fixed at construction.

    Elements occupy positions ``[0, size())``. Insertion past ``max_size()``
    raises :class:`CapacityExceeded` instead of growing the buffer.
    ``insert_sorted`` keeps ascending order under ``cmp`` (natural ordering
    by default) provided the list was already ascending.
    """

    __slots__ = ("_storage", "_length", "_max_size", "_cmp")

    def __init__(self, max_size: int = DEFAULT_CAPACITY, *, cmp: Optional[Compare] = None):
        if isinstance(max_size, bool) or not isinstance(max_size, int):
            raise TypeError(f"max_size must be an integer, not {type(max_size).__name__}")
        if max_size < 0:
            raise ValueError("max_size must be non-negative")
        self._storage: FixedBuffer[T] = FixedBuffer(max_size)
        self._length = 0
        self._max_size = max_size
        self._cmp: Compare = cmp if cmp is not None else natural_order
        logger.debug("bounded list created with max_size %s", max_size)

    def clear(self) -> None:
        # buffer is kept; stale slots are unreachable once length is 0
        logger.debug("clearing %s elements", self._length)
        self._length = 0

    # -- insertion

    def push_back(self, data: T) -> None:
        if self.full():
            raise CapacityExceeded(self._max_size)
        self._storage[self._length] = data
        self._length += 1

    def push_front(self, data: T) -> None:
        if self.full():
            raise CapacityExceeded(self._max_size)
        self.insert(data, 0)

    def insert(self, data: T, index: int) -> None:
        if self.full():
            raise CapacityExceeded(self._max_size)
        index = _position(index)
        if index < 0 or index > self._length:
            raise IndexOutOfRange(index, self._length)
        self._storage.shift_right(index, self._length)
        self._storage[index] = data
        self._length += 1

    def insert_sorted(self, data: T) -> None:
        if self.full():
            raise CapacityExceeded(self._max_size)
        cmp = self._cmp
        i = 0
        while i != self._length and cmp(data, self._storage[i]) > 0:
            i += 1
        logger.debug("sorted insert of %r at position %s", data, i)
        self.insert(data, i)

    # -- removal

    def pop(self, index: int) -> T:
        index = _position(index)
        if index < 0 or index >= self._length:
            raise IndexOutOfRange(index, self._length)
        data = self._storage[index]
        self._storage.shift_left(index, self._length)
        self._length -= 1
        # drop the duplicated reference left behind by the shift
        self._storage[self._length] = None  # type: ignore[assignment]
        return data

    def pop_front(self) -> T:
        if self.empty():
            raise EmptyStructure("pop_front")
        return self.pop(0)

    def pop_back(self) -> T:
        if self.empty():
            raise EmptyStructure("pop_back")
        self._length -= 1
        data = self._storage[self._length]
        self._storage[self._length] = None  # type: ignore[assignment]
        return data

    def remove(self, data: T) -> None:
        index = None if self.empty() else self.find(data)
        if index is None:
            raise ValueNotFound(data)
        self.pop(index)

    # -- queries

    def full(self) -> bool:
        return self._length == self._max_size

    def empty(self) -> bool:
        return self._length == 0

    def contains(self, data: T) -> bool:
        storage = self._storage
        for i in range(self._length):
            if storage[i] == data:
                return True
        return False

    def find(self, data: T) -> Optional[int]:
        """Return the position of the first element equal to ``data``.

        ``None`` means no element matched. Raises :class:`EmptyStructure`
        when the list holds nothing to search.
        """
        if self.empty():
            raise EmptyStructure("find")
        storage = self._storage
        for i in range(self._length):
            if storage[i] == data:
                return i
        return None

    def size(self) -> int:
        return self._length

    def max_size(self) -> int:
        return self._max_size

    # -- positional access

    def at(self, index: int) -> T:
        index = _position(index)
        if index < 0 or index >= self._length:
            raise IndexOutOfRange(index, self._length)
        return self._storage[index]

    def set_at(self, index: int, data: T) -> None:
        index = _position(index)
        if index < 0 or index >= self._length:
            raise IndexOutOfRange(index, self._length)
        self._storage[index] = data

    def to_list(self) -> list[T]:
        return self._storage.snapshot(self._length)

    def __getitem__(self, index: int) -> T:
        return self.at(index)

    def __setitem__(self, index: int, data: T) -> None:
        self.set_at(index, data)

    def __len__(self) -> int:
        return self._length

    def __bool__(self) -> bool:
        return self._length != 0

    def __contains__(self, data: object) -> bool:
        return self.contains(data)  # type: ignore[arg-type]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoundedList):
            return NotImplemented
        return self.to_list() == other.to_list()

    def __repr__(self) -> str:
        return f"BoundedList({self.to_list()!r}, max_size={self._max_size})"
