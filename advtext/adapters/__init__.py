"""Concrete text buffers implementing ``TextBufferPort``.

``tk_buffer`` is not imported here so that headless installs without Tcl/Tk
can still use the in-memory buffer.
"""

from .memory_buffer import InMemoryTextBuffer

__all__ = ["InMemoryTextBuffer"]
