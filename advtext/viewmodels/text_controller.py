from __future__ import annotations

from typing import Callable, List, Optional

from ..adapters.memory_buffer import InMemoryTextBuffer
from ..domain.errors import ControllerDisposedError
from ..domain.ports import Listener, TextBufferPort
from ..utils.logging import get_logger


class TextEditingController:
    """Wraps a host text buffer and exposes its text/listen/dispose contract.

    Responsibilities
    - Own exactly one ``TextBufferPort`` (in-memory unless the host passes one)
    - Route buffer notifications to the subclass' change handler, synchronously
    - Let subclasses write text from their value without re-deriving that value
    - Tear everything down once via ``dispose()`` or a ``with`` block
    """

    def __init__(self, text: Optional[str] = None, *, buffer: Optional[TextBufferPort] = None) -> None:
        self._log = get_logger(__name__)
        self._buffer: TextBufferPort = buffer if buffer is not None else InMemoryTextBuffer()
        self._handlers: List[Listener] = []
        self._writing_value = False
        self._disposed = False
        if text is not None:
            self._buffer.text = text

    # ---- Text API (called by View / host) ----
    @property
    def text(self) -> str:
        self._ensure_alive()
        return self._buffer.text

    @text.setter
    def text(self, value: str) -> None:
        self._ensure_alive()
        self._buffer.text = value

    def clear(self) -> None:
        self.text = ""

    @property
    def buffer(self) -> TextBufferPort:
        return self._buffer

    # ---- External observers ----
    def add_listener(self, callback: Listener) -> None:
        self._ensure_alive()
        self._buffer.add_listener(callback)

    def remove_listener(self, callback: Listener) -> None:
        self._ensure_alive()
        self._buffer.remove_listener(callback)

    # ---- Lifecycle ----
    def dispose(self) -> None:
        self._ensure_alive()
        for handler in self._handlers:
            self._buffer.remove_listener(handler)
        self._handlers.clear()
        self._buffer.dispose()
        self._disposed = True
        self._log.debug("%s disposed", type(self).__name__)

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    def __enter__(self):
        self._ensure_alive()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if not self._disposed:
            self.dispose()

    # ---- Helpers for subclasses ----
    def _listen(self, handler: Callable[[], None]) -> None:
        """Register ``handler`` for text changes made by anyone but this controller."""

        def _on_text_changed() -> None:
            if self._writing_value:
                # Skip only our own write; nested writes by other listeners still count.
                self._writing_value = False
                return
            handler()

        self._handlers.append(_on_text_changed)
        self._buffer.add_listener(_on_text_changed)

    def _write_text(self, value: str) -> None:
        """Authoritative value -> text write; own handlers skip this notification."""
        self._ensure_alive()
        self._writing_value = True
        try:
            self._buffer.text = value
        finally:
            self._writing_value = False

    def _ensure_alive(self) -> None:
        if self._disposed:
            raise ControllerDisposedError(type(self).__name__)

    def __repr__(self) -> str:
        if self._disposed:
            return f"{type(self).__name__}(<disposed>)"
        return f"{type(self).__name__}(text={self._buffer.text!r})"
