"""Axis ticks."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Tick:
    """A labelled position on an axis."""

    value: float = 0.0
    label: str = ""


class Ticks(list):
    """A list of ``Tick`` objects."""

    def sorted_by_value(self) -> Ticks:
        """Return a new list of the ticks ordered by value, ascending."""
        return Ticks(sorted(self, key=lambda tick: tick.value))

    def __str__(self) -> str:
        return ", ".join(f"[{index}: {tick.label}]" for index, tick in enumerate(self))