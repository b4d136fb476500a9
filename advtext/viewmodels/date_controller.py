"""Date and time-of-day controllers driven by picker callbacks.

Call context:
    Views hand the picked value to ``set_date`` / ``set_time`` /
    ``set_date_time``; the controllers only render, they never parse typed
    text back into a date.
"""
from __future__ import annotations

from datetime import date, datetime, time
from typing import Optional

from ..domain.formatting import PatternFormatter, as_datetime
from ..domain.ports import TextBufferPort
from ..domain.time_of_day import TimeOfDay, coerce_time_of_day
from ..utils.settings import load_format_settings
from .text_controller import TextEditingController

# Stand-in for the missing half of the composite value before anything was set.
EPOCH = datetime(1, 1, 1)


def _resolve_locale(locale: Optional[str]) -> str:
    return locale if locale else load_format_settings().locale


class DateEditingController(TextEditingController):
    """Composite date-time value rendered with a date pattern.

    The time pattern is only used by the ``time`` accessor. ``set_time``
    renders with the date pattern as well, same as ``set_date``.
    """

    def __init__(
        self,
        date: Optional[datetime] = None,
        *,
        date_format_pattern: Optional[str] = None,
        time_format_pattern: Optional[str] = None,
        locale: Optional[str] = None,
        buffer: Optional[TextBufferPort] = None,
    ) -> None:
        super().__init__(buffer=buffer)
        settings = load_format_settings()
        self.date_format_pattern: str = date_format_pattern or settings.date_pattern
        self.time_format_pattern: str = time_format_pattern or settings.time_pattern
        resolved_locale = _resolve_locale(locale)
        self.date_formatter = PatternFormatter(self.date_format_pattern, resolved_locale)
        self.time_formatter = PatternFormatter(self.time_format_pattern, resolved_locale)

        self._date_time: Optional[datetime] = as_datetime(date) if date is not None else None
        self._write_text(self.date_formatter.format_optional(self._date_time))

    # ---- Read-only state ----
    @property
    def date_time(self) -> Optional[datetime]:
        self._ensure_alive()
        return self._date_time

    @property
    def date(self) -> str:
        """Current value formatted with the date pattern, ``""`` when unset."""
        self._ensure_alive()
        return self.date_formatter.format_optional(self._date_time)

    @property
    def time(self) -> str:
        """Current value formatted with the time pattern, ``""`` when unset."""
        self._ensure_alive()
        return self.time_formatter.format_optional(self._date_time)

    # ---- Setters (called by pickers) ----
    def set_date(self, value: date) -> None:
        """Replace the calendar date and keep the time of day."""
        self._ensure_alive()
        base = self._date_time or EPOCH
        self._date_time = base.replace(year=value.year, month=value.month, day=value.day)
        self._write_text(self.date_formatter.format(self._date_time))

    def set_time(self, value: TimeOfDay | time) -> None:
        """Replace hour and minute and keep the date.

        Renders with the *date* pattern; read ``time`` for the time view.
        """
        self._ensure_alive()
        tod = coerce_time_of_day(value)
        base = self._date_time or EPOCH
        self._date_time = base.replace(hour=tod.hour, minute=tod.minute)
        self._write_text(self.date_formatter.format(self._date_time))

    def set_date_time(self, value: datetime) -> None:
        self._ensure_alive()
        self._date_time = as_datetime(value)
        self._write_text(self.date_formatter.format(self._date_time))


class TimeEditingController(TextEditingController):
    """Time-of-day value rendered with its own time pattern."""

    def __init__(
        self,
        time: Optional[TimeOfDay | time] = None,
        *,
        time_format_pattern: Optional[str] = None,
        locale: Optional[str] = None,
        buffer: Optional[TextBufferPort] = None,
    ) -> None:
        super().__init__(buffer=buffer)
        self.time_format_pattern: str = time_format_pattern or load_format_settings().time_pattern
        self.time_formatter = PatternFormatter(self.time_format_pattern, _resolve_locale(locale))
        self._time_of_day: Optional[TimeOfDay] = None
        if time is not None:
            self.set_time(time)

    @property
    def time_of_day(self) -> Optional[TimeOfDay]:
        self._ensure_alive()
        return self._time_of_day

    def set_time(self, value: TimeOfDay | time) -> None:
        self._ensure_alive()
        self._time_of_day = coerce_time_of_day(value)
        # Today's date only carries the time into the formatter.
        carrier = datetime.combine(date.today(), self._time_of_day.to_time())
        self._write_text(self.time_formatter.format(carrier))


__all__ = ["DateEditingController", "EPOCH", "TimeEditingController"]
