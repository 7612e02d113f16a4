from __future__ import annotations


class BoundedListError(Exception):
    """Base class for failures raised by a bounded list."""


class CapacityExceeded(BoundedListError, OverflowError):
    def __init__(self, max_size: int):
        super().__init__(f"list is full (max_size={max_size})")
        self.max_size = max_size


class IndexOutOfRange(BoundedListError, IndexError):
    def __init__(self, index: int, size: int):
        super().__init__(f"index {index} out of range for list of size {size}")
        self.index = index
        self.size = size


class EmptyStructure(BoundedListError, IndexError):
    def __init__(self, operation: str):
        super().__init__(f"{operation} on empty list")
        self.operation = operation


class ValueNotFound(BoundedListError, ValueError):
    def __init__(self, value: object):
        super().__init__(f"{value!r} not in list")
        self.value = value
