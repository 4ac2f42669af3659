"""A 24-hour clock without dates, and gigasecond arithmetic."""

from __future__ import annotations

from datetime import datetime, timedelta

_MINUTES_PER_DAY = 24 * 60
_GIGASECOND = timedelta(seconds=10**9)


class Clock:
    """A time of day with minute precision; hours and minutes wrap around."""

    __slots__ = ("_minutes",)

    def __init__(self, hour: int = 0, minute: int = 0) -> None:
        self._minutes = (hour * 60 + minute) % _MINUTES_PER_DAY

    def add(self, minutes: int) -> Clock:
        """Return a clock ``minutes`` later."""
        return Clock(0, self._minutes + minutes)

    def subtract(self, minutes: int) -> Clock:
        """Return a clock ``minutes`` earlier."""
        return Clock(0, self._minutes - minutes)

    def __str__(self) -> str:
        hours, minutes = divmod(self._minutes, 60)
        return f"{hours:02d}:{minutes:02d}"

    def __repr__(self) -> str:
        hours, minutes = divmod(self._minutes, 60)
        return f"Clock({hours}, {minutes})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Clock):
            return NotImplemented
        return self._minutes == other._minutes

    def __hash__(self) -> int:
        return hash(self._minutes)


def add_gigasecond(moment: datetime) -> datetime:
    """Return the moment one billion seconds after ``moment``."""
    return moment + _GIGASECOND