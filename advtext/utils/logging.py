"""Logger setup for the ``advtext`` package.

Call context:
    Buffers and controllers obtain their loggers through ``get_logger`` so the
    package logger is prepared once, on first use. Host applications keep
    full control of handlers; the package only installs a ``NullHandler``.

Environment overrides (applied to the ``advtext`` logger only):
    - ADVTEXT_LOG_LEVEL: explicit level name or number
    - ADVTEXT_DEBUG: truthy -> DEBUG
"""
from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

PACKAGE_LOGGER = "advtext"
_LEVEL_ENV_VAR = "ADVTEXT_LOG_LEVEL"
_DEBUG_FLAG = "ADVTEXT_DEBUG"

_prepared = False


def env_log_level(environ: Optional[Mapping[str, str]] = None) -> Optional[int]:
    """Level requested by the environment, or ``None`` when nothing is set."""
    env = os.environ if environ is None else environ
    raw = (env.get(_LEVEL_ENV_VAR) or "").strip()
    if raw:
        if raw.isdigit():
            return int(raw)
        named = logging.getLevelName(raw.upper())
        return named if isinstance(named, int) else logging.INFO
    flag = (env.get(_DEBUG_FLAG) or "").strip().lower()
    if flag in {"1", "true", "yes", "on"}:
        return logging.DEBUG
    return None


def apply_env_level(environ: Optional[Mapping[str, str]] = None) -> logging.Logger:
    """Set the package logger level from the environment; unset means inherit."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    level = env_log_level(environ)
    logger.setLevel(level if level is not None else logging.NOTSET)
    return logger


def package_logger() -> logging.Logger:
    global _prepared
    logger = logging.getLogger(PACKAGE_LOGGER)
    if not _prepared:
        if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
            logger.addHandler(logging.NullHandler())
        apply_env_level()
        _prepared = True
    return logger


def get_logger(name: str) -> logging.Logger:
    """Module logger below ``advtext``; prepares the package logger first."""
    package_logger()
    return logging.getLogger(name)


__all__ = ["PACKAGE_LOGGER", "apply_env_level", "env_log_level", "get_logger", "package_logger"]
