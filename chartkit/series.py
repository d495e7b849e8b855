"""Data series: simple moving average and time series."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Protocol

from chartkit.timeutil import time_to_float64
from chartkit.value_formatter import (
    ValueFormatter,
    float_value_formatter,
    time_value_formatter,
)

DEFAULT_SIMPLE_MOVING_AVERAGE_PERIOD = 16


class SeriesError(ValueError):
    """Raised when a series is not set up correctly."""


class ValuesProvider(Protocol):
    """Something that yields (x, y) pairs by index."""

    def __len__(self) -> int: ...

    def get_values(self, index: int) -> tuple[float, float]: ...


class BoundedValuesProvider(Protocol):
    """Something that yields (x, y1, y2) triples by index."""

    def __len__(self) -> int: ...

    def get_bounded_values(self, index: int) -> tuple[float, float, float]: ...


class FirstValuesProvider(Protocol):
    def get_first_values(self) -> tuple[float, float]: ...


class LastValuesProvider(Protocol):
    def get_last_values(self) -> tuple[float, float]: ...


@dataclass
class SMASeries:
    """A simple moving average computed over an inner series."""

    name: str = ""
    style: Any = None
    y_axis: int = 0
    period: int = 0
    inner_series: ValuesProvider | None = None

    def __len__(self) -> int:
        return len(self.inner_series)

    def get_period(self, *args: int) -> int:
        """Return the window size, the first argument, or the default."""
        if self.period == 0:
            return args[0] if args else DEFAULT_SIMPLE_MOVING_AVERAGE_PERIOD
        return self.period

    def _is_empty(self) -> bool:
        return self.inner_series is None or len(self.inner_series) == 0

    def _average(self, index: int) -> float:
        floor = max(0, index - self.get_period())
        window = [self.inner_series.get_values(x)[1] for x in range(index, floor - 1, -1)]
        return sum(window) / len(window)

    def get_values(self, index: int) -> tuple[float, float]:
        """Return the inner x and the moving average at ``index``."""
        if self._is_empty():
            return 0.0, 0.0
        x, _ = self.inner_series.get_values(index)
        return x, self._average(index)

    def get_first_values(self) -> tuple[float, float]:
        """Return the first x and moving average."""
        return self.get_values(0)

    def get_last_values(self) -> tuple[float, float]:
        """Return the last x and moving average."""
        if self._is_empty():
            return 0.0, 0.0
        return self.get_values(len(self.inner_series) - 1)

    def validate(self) -> None:
        """Raise SeriesError when there is no inner series."""
        if self.inner_series is None:
            raise SeriesError("sma series requires inner_series to be set")


@dataclass
class TimeSeries:
    """A line of values over datetimes."""

    name: str = ""
    style: Any = None
    y_axis: int = 0
    x_values: list[datetime] = field(default_factory=list)
    y_values: list[float] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.x_values)

    def get_values(self, index: int) -> tuple[float, float]:
        """Return x as float nanoseconds and y at ``index``."""
        return time_to_float64(self.x_values[index]), self.y_values[index]

    def get_first_values(self) -> tuple[float, float]:
        """Return the first pair."""
        return time_to_float64(self.x_values[0]), self.y_values[0]

    def get_last_values(self) -> tuple[float, float]:
        """Return the last pair."""
        return time_to_float64(self.x_values[-1]), self.y_values[-1]

    def get_value_formatters(self) -> tuple[ValueFormatter, ValueFormatter]:
        """Return the default x and y formatters."""
        return time_value_formatter, float_value_formatter

    def validate(self) -> None:
        """Raise SeriesError when x or y values are missing."""
        if not self.x_values:
            raise SeriesError("time series must have x_values set")
        if not self.y_values:
            raise SeriesError("time series must have y_values set")