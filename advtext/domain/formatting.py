"""Pattern-based date/time formatting backed by Babel (CLDR patterns).

Call context:
    ``DateEditingController`` and ``TimeEditingController`` build one
    ``PatternFormatter`` per pattern at construction and call ``format`` on
    every value -> text render.

Dependencies:
    ``babel.dates.format_datetime`` does all token handling; patterns are not
    validated here and malformed ones fail inside Babel.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from babel.dates import format_datetime

DEFAULT_DATE_PATTERN = "dd MMM yyyy"
DEFAULT_TIME_PATTERN = "hh:mm a"
DEFAULT_LOCALE = "en_US"


@dataclass(frozen=True)
class PatternFormatter:
    """Formats datetimes with a fixed CLDR pattern and locale."""

    pattern: str
    locale: str = DEFAULT_LOCALE

    def format(self, value: datetime) -> str:
        # Naive values are treated as wall-clock time, aware ones keep their zone.
        return format_datetime(value, self.pattern, locale=self.locale)

    def format_optional(self, value: Optional[datetime]) -> str:
        """Format ``value`` or return ``""`` when it is absent."""
        if value is None:
            return ""
        return self.format(value)


def as_datetime(value: date) -> datetime:
    """Widen a plain ``date`` to midnight; datetimes pass through untouched."""
    if isinstance(value, datetime):
        return value
    return datetime(value.year, value.month, value.day)


__all__ = [
    "DEFAULT_DATE_PATTERN",
    "DEFAULT_LOCALE",
    "DEFAULT_TIME_PATTERN",
    "PatternFormatter",
    "as_datetime",
]
