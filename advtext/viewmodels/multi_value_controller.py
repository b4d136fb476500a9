from __future__ import annotations
from typing import Optional

from ..domain.ports import TextBufferPort
from .text_controller import TextEditingController


class MultiValueEditingController(TextEditingController):
    """Named wrapper for fields whose text *is* a selection key."""

    def __init__(self, key: Optional[str] = None, *, buffer: Optional[TextBufferPort] = None) -> None:
        super().__init__(buffer=buffer)
        self._key: Optional[str] = None
        if key is not None:
            self.set_key(key)

    @property
    def key(self) -> Optional[str]:
        self._ensure_alive()
        return self._key

    def set_key(self, value: str) -> None:
        self._ensure_alive()
        self._key = value
        self._write_text(value)


__all__ = ["MultiValueEditingController"]
