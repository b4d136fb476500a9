from __future__ import annotations

from typing import List

from advtext.domain.errors import ControllerDisposedError
from advtext.domain.ports import Listener, TextBufferPort
from advtext.utils.logging import get_logger


class InMemoryTextBuffer(TextBufferPort):
    """Plain Python text buffer with synchronous change listeners.

    Used as the default buffer of every controller and by the unit tests.
    Listeners run in registration order on every write; one failing listener
    is logged and does not stop the others.
    """

    def __init__(self, text: str = "") -> None:
        self._log = get_logger(__name__)
        self._text = str(text)
        self._listeners: List[Listener] = []
        self._disposed = False

    # ---- Text ----
    @property
    def text(self) -> str:
        self._ensure_alive()
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        self._ensure_alive()
        self._text = "" if value is None else str(value)
        self._notify()

    # ---- Listeners ----
    def add_listener(self, callback: Listener) -> None:
        self._ensure_alive()
        self._listeners.append(callback)

    def remove_listener(self, callback: Listener) -> None:
        self._ensure_alive()
        # Drops the most recent registration only, like the toolkit notifiers do.
        for idx in range(len(self._listeners) - 1, -1, -1):
            if self._listeners[idx] == callback:
                del self._listeners[idx]
                return

    @property
    def has_listeners(self) -> bool:
        return bool(self._listeners)

    # ---- Lifecycle ----
    def dispose(self) -> None:
        self._ensure_alive()
        self._listeners.clear()
        self._disposed = True

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    # ---- Internal helpers ----
    def _notify(self) -> None:
        for callback in list(self._listeners):
            try:
                callback()
            except Exception:
                self._log.exception("Text buffer listener %r failed", callback)

    def _ensure_alive(self) -> None:
        if self._disposed:
            raise ControllerDisposedError(type(self).__name__)
