from __future__ import annotations

from typing import Any, Callable, TypeVar

T = TypeVar("T")

Compare = Callable[[Any, Any], int]


def natural_order(one: Any, other: Any) -> int:
    # only ``<`` and ``>`` are required of the element type
    if one < other:
        return -1
    if one > other:
        return 1
    return 0


def reverse_order(one: Any, other: Any) -> int:
    return natural_order(other, one)


def key_order(key: Callable[[T], Any]) -> Compare:
    """Build a three-way comparison that orders elements by ``key(element)``."""

    def compare(one: T, other: T) -> int:
        return natural_order(key(one), key(other))

    return compare
