"""Helpers for working with timestamps as chart values."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

SECONDS_PER_HOUR = 60 * 60
SECONDS_PER_DAY = 60 * 60 * 24

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MICROSECOND = timedelta(microseconds=1)
_ONE_HOUR = timedelta(hours=1)


def _aware(t: datetime) -> datetime:
    """Treat naive datetimes as local time."""
    return t.astimezone() if t.tzinfo is None else t


def _unix_nanos(t: datetime) -> int:
    return ((_aware(t) - _EPOCH) // _ONE_MICROSECOND) * 1000


def _unix_seconds(t: datetime) -> int:
    return (_aware(t) - _EPOCH) // timedelta(seconds=1)


class Times(list):
    """A list of datetimes that can serve as a value sequence."""

    def get_value(self, index: int) -> float:
        """Return the time at ``index`` as float nanoseconds since the epoch."""
        return time_to_float64(self[index])


def time_millis(duration: timedelta) -> float:
    """Return a duration as float milliseconds."""
    return duration / timedelta(milliseconds=1)


def diff_hours(t1: datetime, t2: datetime) -> int:
    """Return the whole number of hours between two times."""
    return abs(_unix_seconds(t1) - _unix_seconds(t2)) // SECONDS_PER_HOUR


def time_min(*args: datetime) -> datetime | None:
    """Return the earliest of the given times, or None when there are none."""
    return min(args, key=_aware, default=None)


def time_max(*args: datetime) -> datetime | None:
    """Return the latest of the given times, or None when there are none."""
    return max(args, key=_aware, default=None)


def time_min_max(*args: datetime) -> tuple[datetime | None, datetime | None]:
    """Return the earliest and latest of the given times."""
    return time_min(*args), time_max(*args)


def time_to_float64(t: datetime) -> float:
    """Return a time as float nanoseconds since the Unix epoch."""
    return float(_unix_nanos(t))


def time_from_float64(tf: float) -> datetime:
    """Return the local time for float nanoseconds since the Unix epoch."""
    return (_EPOCH + timedelta(microseconds=int(tf) // 1000)).astimezone()


def days(count: int) -> list[datetime]:
    """Return one timestamp per day, from ``count`` days ago up to now."""
    now = datetime.now()
    return [now - timedelta(days=day) for day in range(count, -1, -1)]


def hours(start: datetime, total_hours: int) -> list[datetime]:
    """Return ``total_hours`` hourly timestamps beginning at ``start``."""
    return [start + _ONE_HOUR * offset for offset in range(total_hours)]


def hours_filled(
    xdata: list[datetime], ydata: list[float]
) -> tuple[list[datetime], list[float]]:
    """Spread values over every hour between the first and last time, filling gaps with 0."""
    if not xdata:
        raise ValueError("hours_filled requires at least one time")
    start, end = time_min_max(*xdata)
    total = diff_hours(start, end)
    final_times = hours(start, total + 1)
    final_values = [0.0] * (total + 1)
    for x, y in zip(xdata, ydata):
        final_values[diff_hours(start, x)] = y
    return final_times, final_values