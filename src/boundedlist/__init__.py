from .array_list import BoundedList
from .buffer import FixedBuffer
from .defaults import DEFAULT_CAPACITY
from .errors import BoundedListError, CapacityExceeded, EmptyStructure, IndexOutOfRange, ValueNotFound
from .ordering import key_order, natural_order, reverse_order

__all__ = [
    "BoundedList",
    "FixedBuffer",
    "DEFAULT_CAPACITY",
    "BoundedListError",
    "CapacityExceeded",
    "EmptyStructure",
    "IndexOutOfRange",
    "ValueNotFound",
    "key_order",
    "natural_order",
    "reverse_order",
]
