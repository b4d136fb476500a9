"""Live-typing number parsers for the numeric controllers.

Every parser returns ``None`` for anything it does not accept so that
half-typed input such as ``"-"`` never raises.
"""

from __future__ import annotations

import math
import re
from typing import Optional

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
THOUSANDS_SEPARATOR = ","


def clean_number_text(text: Optional[str]) -> str:
    """Trim whitespace and drop thousands separators."""
    return (text or "").strip().replace(THOUSANDS_SEPARATOR, "")


def parse_int(text: str) -> Optional[int]:
    """Base-10 integer with optional sign; ASCII digits only."""
    if not _INT_RE.fullmatch(text):
        return None
    try:
        return int(text, 10)
    except ValueError:
        # Digit strings past the interpreter's int conversion limit.
        return None


def parse_float(text: str) -> Optional[float]:
    """Locale-invariant finite decimal with optional sign, fraction and exponent."""
    if not _FLOAT_RE.fullmatch(text):
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if math.isinf(value):
        # Overflowing literals such as "1e999" are not numbers for the field.
        return None
    return value


__all__ = ["THOUSANDS_SEPARATOR", "clean_number_text", "parse_float", "parse_int"]
