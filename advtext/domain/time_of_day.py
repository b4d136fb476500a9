"""Time-of-day value object used by the time controllers and picker callbacks."""
from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, time
from typing import Optional


@dataclass(frozen=True)
class TimeOfDay:
    """Wall-clock hour and minute without a date or timezone."""

    hour: int
    """Hour of the day on the 24h clock (0..23)."""

    minute: int
    """Minute of the hour (0..59)."""

    def __post_init__(self) -> None:
        if isinstance(self.hour, bool) or not isinstance(self.hour, int):
            raise ValueError("TimeOfDay.hour must be an integer.")
        if isinstance(self.minute, bool) or not isinstance(self.minute, int):
            raise ValueError("TimeOfDay.minute must be an integer.")
        if not 0 <= self.hour <= 23:
            raise ValueError(f"TimeOfDay.hour out of range: {self.hour}")
        if not 0 <= self.minute <= 59:
            raise ValueError(f"TimeOfDay.minute out of range: {self.minute}")

    @classmethod
    def from_time(cls, value: time) -> "TimeOfDay":
        return cls(hour=value.hour, minute=value.minute)

    @classmethod
    def from_datetime(cls, value: datetime) -> "TimeOfDay":
        return cls(hour=value.hour, minute=value.minute)

    @classmethod
    def now(cls) -> "TimeOfDay":
        return cls.from_datetime(datetime.now())

    def to_time(self) -> time:
        return time(self.hour, self.minute)

    def replacing(self, *, hour: Optional[int] = None, minute: Optional[int] = None) -> "TimeOfDay":
        """Return a copy with the given fields swapped out."""
        updates = {}
        if hour is not None:
            updates["hour"] = hour
        if minute is not None:
            updates["minute"] = minute
        return replace(self, **updates)

    @property
    def period(self) -> str:
        """``"am"`` before noon, ``"pm"`` from noon on."""
        return "am" if self.hour < 12 else "pm"

    @property
    def hour_of_period(self) -> int:
        """Hour on the 12h clock, where midnight and noon are 12."""
        return self.hour % 12 or 12

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"


def coerce_time_of_day(value: TimeOfDay | time) -> TimeOfDay:
    """Accept either a ``TimeOfDay`` or a ``datetime.time`` from callers."""
    if isinstance(value, TimeOfDay):
        return value
    if isinstance(value, time):
        return TimeOfDay.from_time(value)
    raise TypeError(f"Expected TimeOfDay or datetime.time, got {type(value).__name__}.")


__all__ = ["TimeOfDay", "coerce_time_of_day"]
