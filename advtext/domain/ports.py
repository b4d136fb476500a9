from __future__ import annotations
from typing import Callable, Protocol

Listener = Callable[[], None]


# ---- Ports (host boundaries) ----
class TextBufferPort(Protocol):
    """Mutable text with change notifications, supplied by the host toolkit.

    Listeners fire synchronously after every write to ``text``, whether the
    write came from the user or from code, and a write of an unchanged value
    still notifies.
    """

    @property
    def text(self) -> str: ...

    @text.setter
    def text(self, value: str) -> None: ...

    def add_listener(self, callback: Listener) -> None: ...
    def remove_listener(self, callback: Listener) -> None: ...  # unknown callbacks are ignored
    def dispose(self) -> None: ...  # releases listeners and host resources
