from __future__ import annotations

from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class FixedBuffer(Generic[T]):
    """Contiguous storage with a capacity fixed at creation.

    The buffer does not track how many slots are in use; callers pass the
    current logical length to the shift helpers. Unused slots hold ``None``
    until written, or whatever was stored there before a ``clear``.
    """

    __slots__ = ("_slots",)

    def __init__(self, capacity: int):
        self._slots: list[Optional[T]] = [None] * capacity

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def __getitem__(self, index: int) -> T:
        return self._slots[index]  # type: ignore[return-value]

    def __setitem__(self, index: int, value: T) -> None:
        self._slots[index] = value

    def shift_right(self, index: int, length: int) -> None:
        """Move ``[index, length)`` one slot up, opening a gap at ``index``."""
        if length >= len(self._slots):
            raise ValueError("shift right would overflow the buffer")
        slots = self._slots
        # high end first so nothing is overwritten before it is copied
        for i in range(length, index, -1):
            slots[i] = slots[i - 1]

    def shift_left(self, index: int, length: int) -> None:
        """Move ``(index, length)`` one slot down, closing the gap at ``index``."""
        if length > len(self._slots):
            raise ValueError("shift left past the end of the buffer")
        slots = self._slots
        for i in range(index, length - 1):
            slots[i] = slots[i + 1]

    def snapshot(self, length: int) -> list[T]:
        return self._slots[:length]  # type: ignore[return-value]
