"""Environment-driven formatting defaults for the date/time controllers.

Call context:
    Controllers call ``load_format_settings`` when no explicit locale is
    passed. Explicit constructor arguments always win over the environment.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Dict, Mapping, Optional

from ..domain.formatting import DEFAULT_DATE_PATTERN, DEFAULT_LOCALE, DEFAULT_TIME_PATTERN

_ENV_KEYS: Dict[str, str] = {
    "locale": "ADVTEXT_LOCALE",
    "date_pattern": "ADVTEXT_DATE_PATTERN",
    "time_pattern": "ADVTEXT_TIME_PATTERN",
}


@dataclass(frozen=True)
class FormatSettings:
    """Typed formatting defaults."""

    locale: str = DEFAULT_LOCALE
    date_pattern: str = DEFAULT_DATE_PATTERN
    time_pattern: str = DEFAULT_TIME_PATTERN


def load_format_settings(environ: Optional[Mapping[str, str]] = None) -> FormatSettings:
    """Return defaults overridden by any non-blank ``ADVTEXT_*`` variables."""
    env = os.environ if environ is None else environ
    updates: Dict[str, str] = {}
    for field_name, var in _ENV_KEYS.items():
        raw = env.get(var)
        if raw is not None and raw.strip():
            updates[field_name] = raw.strip()
    settings = FormatSettings()
    if updates:
        settings = replace(settings, **updates)
    return settings


__all__ = ["FormatSettings", "load_format_settings"]
