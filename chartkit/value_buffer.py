"""A growable FIFO queue of float values."""

from __future__ import annotations

from collections import deque
from typing import Any, Callable, Iterator

DEFAULT_CAPACITY = 4
_MINIMUM_GROW = 4
_GROW_FACTOR = 2


def _format_value(value: float) -> str:
    text = repr(value)
    return text[:-2] if text.endswith(".0") else text


class ValueBuffer:
    """FIFO queue of floats with an explicit, growable capacity."""

    def __init__(self, *values: float) -> None:
        self._items: deque[float] = deque(float(v) for v in values)
        self._capacity = max(len(values), DEFAULT_CAPACITY)

    @classmethod
    def with_capacity(cls, capacity: int) -> ValueBuffer:
        """Create an empty buffer with the given capacity."""
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        buffer = cls()
        buffer._capacity = capacity
        return buffer

    @property
    def capacity(self) -> int:
        """Total room in the buffer, including empty slots."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[float]:
        return iter(self._items)

    def __str__(self) -> str:
        return " <= ".join(_format_value(v) for v in self._items)

    def get_value(self, index: int) -> float:
        """Return the value at ``index`` counted from the front."""
        return self._items[index]

    def set_capacity(self, capacity: int) -> None:
        """Resize the buffer; the capacity may not drop below its contents."""
        if capacity < len(self._items):
            raise ValueError("capacity is smaller than the number of stored values")
        self._capacity = capacity

    def clear(self) -> None:
        """Remove every value and reset the capacity."""
        self._items.clear()
        self._capacity = DEFAULT_CAPACITY

    def enqueue(self, value: float) -> None:
        """Add a value to the back, growing the capacity when full."""
        if len(self._items) == self._capacity:
            grown = self._capacity * _GROW_FACTOR
            self.set_capacity(max(grown, self._capacity + _MINIMUM_GROW))
        self._items.append(float(value))

    def dequeue(self) -> float:
        """Remove and return the front value; 0 when empty."""
        return self._items.popleft() if self._items else 0.0

    def peek(self) -> float:
        """Return the front value without removing it; 0 when empty."""
        return self._items[0] if self._items else 0.0

    def peek_back(self) -> float:
        """Return the back value without removing it; 0 when empty."""
        return self._items[-1] if self._items else 0.0

    def trim_excess(self) -> None:
        """Shrink the capacity to the contents when under 90% full."""
        if len(self._items) < int(self._capacity * 0.9):
            self.set_capacity(len(self._items))

    def to_list(self) -> list[float]:
        """Return the contents, front first."""
        return list(self._items)

    def each(self, fn: Callable[[int, float], Any]) -> None:
        """Call ``fn(index, value)`` for every value, front first."""
        for index, value in enumerate(self._items):
            fn(index, value)