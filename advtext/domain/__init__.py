"""Domain package exports for value objects, ports and pure helpers."""

from .errors import ControllerDisposedError, ControllerError
from .formatting import (
    DEFAULT_DATE_PATTERN,
    DEFAULT_LOCALE,
    DEFAULT_TIME_PATTERN,
    PatternFormatter,
)
from .number_parsing import clean_number_text, parse_float, parse_int
from .ports import Listener, TextBufferPort
from .time_of_day import TimeOfDay

__all__ = [
    "ControllerDisposedError",
    "ControllerError",
    "DEFAULT_DATE_PATTERN",
    "DEFAULT_LOCALE",
    "DEFAULT_TIME_PATTERN",
    "Listener",
    "PatternFormatter",
    "TextBufferPort",
    "TimeOfDay",
    "clean_number_text",
    "parse_float",
    "parse_int",
]
