from __future__ import annotations
import tkinter as tk
from typing import Any, List, Optional

from advtext.domain.errors import ControllerDisposedError
from advtext.domain.ports import Listener, TextBufferPort
from advtext.utils.logging import get_logger


class TkTextBuffer(TextBufferPort):
    """Text buffer backed by a ``tk.StringVar`` so controllers can drive Entry widgets.

    Bind the variable to a widget via ``ttk.Entry(parent, textvariable=buffer.variable)``.
    One ``"write"`` trace fans out to the listeners in registration order, so
    user edits in the widget and programmatic writes notify the same way the
    in-memory buffer does.

    Tcl mutes traces on a variable while one of its traces runs. Writes made
    through ``text`` from inside a listener are therefore announced by the
    buffer itself; listeners should not call ``variable.set`` directly.
    """

    def __init__(
        self,
        variable: Optional[tk.StringVar] = None,
        *,
        master: Optional[Any] = None,
        text: Optional[str] = None,
    ) -> None:
        self._log = get_logger(__name__)
        self.variable = variable if variable is not None else tk.StringVar(master=master)
        self._listeners: List[Listener] = []
        self._notify_depth = 0
        self._disposed = False
        if text is not None:
            self.variable.set(text)
        self._trace_id = self.variable.trace_add("write", self._on_variable_write)

    # ---- Text ----
    @property
    def text(self) -> str:
        self._ensure_alive()
        return self.variable.get()

    @text.setter
    def text(self, value: str) -> None:
        self._ensure_alive()
        self.variable.set("" if value is None else str(value))
        if self._notify_depth:
            # Nested write: the trace stays silent, announce it ourselves.
            self._notify()

    # ---- Listeners ----
    def add_listener(self, callback: Listener) -> None:
        self._ensure_alive()
        self._listeners.append(callback)

    def remove_listener(self, callback: Listener) -> None:
        self._ensure_alive()
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
        self.variable.trace_remove("write", self._trace_id)
        self._listeners.clear()
        self._disposed = True

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    # ---- Internal helpers ----
    def _on_variable_write(self, *_args: Any) -> None:
        self._notify()

    def _notify(self) -> None:
        self._notify_depth += 1
        try:
            for callback in list(self._listeners):
                try:
                    callback()
                except Exception:
                    self._log.exception("Text buffer listener %r failed", callback)
        finally:
            self._notify_depth -= 1

    def _ensure_alive(self) -> None:
        if self._disposed:
            raise ControllerDisposedError(type(self).__name__)
