"""Sequences of float values and statistics over them."""

from __future__ import annotations

import random
import time
from typing import Any, Callable, Iterator

_MAX_INT32 = 2**31 - 1


class Seq:
    """A view over a value provider with helpers for common statistics.

    The provider is anything with ``len()`` and either a ``get_value(index)``
    method or index access (lists, tuples, other ``Seq`` objects).
    """

    def __init__(self, provider: Any = ()) -> None:
        self._provider = provider
        getter = getattr(provider, "get_value", None)
        self._get: Callable[[int], float] = getter if callable(getter) else provider.__getitem__

    def __len__(self) -> int:
        return len(self._provider)

    def __iter__(self) -> Iterator[float]:
        return (self._get(index) for index in range(len(self)))

    def __getitem__(self, index: int) -> float:
        return self._get(index)

    def __repr__(self) -> str:
        return f"Seq({self._provider!r})"

    def get_value(self, index: int) -> float:
        """Return the value at ``index``."""
        return self._get(index)

    def values(self) -> list[float]:
        """Enumerate the sequence into a list."""
        return list(self)

    def each(self, fn: Callable[[int, float], Any]) -> None:
        """Call ``fn(index, value)`` for every value."""
        for index, value in enumerate(self):
            fn(index, value)

    def map(self, fn: Callable[[int, float], float]) -> Seq:
        """Return a new sequence of ``fn(index, value)`` results."""
        return Seq([fn(index, value) for index, value in enumerate(self)])

    def fold_left(self, fn: Callable[[int, float, float], float]) -> float:
        """Collapse the sequence from left to right."""
        values = self.values()
        if not values:
            return 0.0
        accum = values[0]
        for index, value in enumerate(values[1:], start=1):
            accum = fn(index, accum, value)
        return accum

    def fold_right(self, fn: Callable[[int, float, float], float]) -> float:
        """Collapse the sequence from right to left."""
        values = self.values()
        if not values:
            return 0.0
        accum = values[-1]
        for index, value in reversed(list(enumerate(values[:-1]))):
            accum = fn(index, accum, value)
        return accum

    def min(self) -> float:
        """Smallest value, or 0 when empty."""
        return min(self, default=0.0)

    def max(self) -> float:
        """Largest value, or 0 when empty."""
        return max(self, default=0.0)

    def min_max(self) -> tuple[float, float]:
        """Smallest and largest values in one pass; (0, 0) when empty."""
        iterator = iter(self)
        first = next(iterator, None)
        if first is None:
            return 0.0, 0.0
        low = high = first
        for value in iterator:
            if value < low:
                low = value
            if value > high:
                high = value
        return low, high

    def sort(self) -> Seq:
        """Return the values sorted ascending."""
        if len(self) == 0:
            return self
        return Seq(sorted(self))

    def reverse(self) -> Seq:
        """Return the values in reverse order."""
        if len(self) == 0:
            return self
        return Seq(self.values()[::-1])

    def median(self) -> float:
        """Middle value of the sorted sequence; 0 when empty."""
        values = sorted(self)
        count = len(values)
        if count == 0:
            return 0.0
        middle = count // 2
        if count % 2 == 0:
            return (values[middle - 1] + values[middle]) / 2
        return values[middle]

    def sum(self) -> float:
        """Sum of all values."""
        return sum(self, 0.0)

    def average(self) -> float:
        """Arithmetic mean; 0 when empty."""
        count = len(self)
        return self.sum() / count if count else 0.0

    def variance(self) -> float:
        """Population variance; 0 when empty."""
        count = len(self)
        if count == 0:
            return 0.0
        mean = self.average()
        return sum((value - mean) * (value - mean) for value in self) / count

    def std_dev(self) -> float:
        """Population standard deviation; 0 when empty."""
        if len(self) == 0:
            return 0.0
        return self.variance() ** 0.5

    def percentile(self, percent: float) -> float:
        """Relative standing for ``percent`` in the interval [0, 1]."""
        count = len(self)
        if count == 0:
            return 0.0
        if percent < 0 or percent > 1.0:
            raise ValueError("percent out of range [0.0, 1.0]")
        values = sorted(self)
        position = percent * count
        index = int(position)
        if position == index:
            lower = values[max(index - 1, 0)]
            upper = values[min(index, count - 1)]
            return (lower + upper) / 2.0
        return values[index]

    def normalize(self) -> Seq:
        """Map every value onto the interval [0, 1]."""
        low, high = self.min_max()
        delta = high - low
        if delta == 0:
            return Seq([float("nan")] * len(self))
        return Seq([(value - low) / delta for value in self])


def value_sequence(*args: float) -> Seq:
    """Build a sequence from the given values."""
    return Seq(list(args))


class RandomSequence:
    """A provider of random values, optionally bounded and of fixed length."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random(int(time.time()))
        self.minimum: float | None = None
        self.maximum: float | None = None
        self.length: int | None = None

    def __len__(self) -> int:
        return self.length if self.length is not None else _MAX_INT32

    def with_len(self, length: int) -> RandomSequence:
        """Set the number of values produced."""
        self.length = length
        return self

    def with_min(self, minimum: float) -> RandomSequence:
        """Set the lower bound."""
        self.minimum = minimum
        return self

    def with_max(self, maximum: float) -> RandomSequence:
        """Set the upper bound."""
        self.maximum = maximum
        return self

    def get_value(self, index: int) -> float:
        """Return a fresh random value; the index is ignored."""
        draw = self._rng.random()
        if self.minimum is not None and self.maximum is not None:
            delta = abs(self.maximum - self.minimum)
            return self.minimum + draw * delta
        if self.maximum is not None:
            return draw * self.maximum
        if self.minimum is not None:
            return self.minimum + draw
        return draw


def random_values(count: int) -> list[float]:
    """Return ``count`` random values in [0, 1)."""
    return Seq(RandomSequence().with_len(count)).values()


def random_values_with_max(count: int, maximum: float) -> list[float]:
    """Return ``count`` random values in [0, maximum)."""
    return Seq(RandomSequence().with_max(maximum).with_len(count)).values()