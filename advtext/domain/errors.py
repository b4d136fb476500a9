"""Domain-level error types shared by buffers and controllers.

Parsing problems never surface here: unparsable text degrades to an absent
value. These errors only cover misuse of a controller's lifecycle.
"""
from __future__ import annotations


class ControllerError(Exception):
    """Base class for controller errors (code + human readable message)."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


class ControllerDisposedError(ControllerError):
    """Raised when a disposed buffer or controller is used again."""

    def __init__(self, owner: str):
        super().__init__("DISPOSED", f"{owner} was used after being disposed.")
        self.owner = owner


__all__ = ["ControllerDisposedError", "ControllerError"]
