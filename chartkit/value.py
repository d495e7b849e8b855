"""Labelled chart values."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any


def _round_down(value: float, round_to: float) -> float:
    if round_to == 0:
        return value
    return math.floor(value / round_to) * round_to


def _ratio(value: float, total: float) -> float:
    if total == 0:
        if value == 0:
            return math.nan
        return math.copysign(math.inf, value)
    return value / total


def _normalize(values: list[float]) -> list[float]:
    total = sum(values, 0.0)
    return [_round_down(_ratio(v, total), 0.0001) for v in values]


@dataclass
class Value:
    """A chart value with a label and an optional style."""

    value: float = 0.0
    label: str = ""
    style: Any = None


class Values(list):
    """A list of ``Value`` objects."""

    def values(self) -> list[float]:
        """Return the raw numbers."""
        return [v.value for v in self]

    def values_normalized(self) -> list[float]:
        """Return every number as its share of the total, rounded down to 4 places."""
        return _normalize(self.values())

    def normalize(self) -> list[Value]:
        """Return the positive values as shares of the total, keeping labels and styles."""
        total = sum((v.value for v in self), 0.0)
        return [
            Value(value=_round_down(_ratio(v.value, total), 0.0001), label=v.label, style=v.style)
            for v in self
            if v.value > 0
        ]


@dataclass
class Value2:
    """A value on two axes."""

    x_value: float = 0.0
    y_value: float = 0.0
    label: str = ""
    style: Any = None