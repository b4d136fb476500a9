"""Text-bound value controllers.

Call context:
    Views bind ``controller.buffer`` (or a ``TkTextBuffer`` passed in at
    construction) to an entry widget; pickers and forms talk to the typed
    setters and accessors.

Dependencies:
    Controllers depend on domain ports and pure format/parse helpers only.
    Widget code stays in the host application.

Responsibilities:
    - Render typed values into text (authoritative direction).
    - Re-derive typed values from edited text, degrading to ``None``.
    - Release buffer listeners exactly once on ``dispose()``.
"""

from .date_controller import DateEditingController, TimeEditingController
from .model_controller import ModelConverters, ModelEditingController
from .multi_value_controller import MultiValueEditingController
from .number_controller import (
    DoubleEditingController,
    IntegerEditingController,
    NumberEditingController,
)
from .text_controller import TextEditingController

__all__ = [
    "DateEditingController",
    "DoubleEditingController",
    "IntegerEditingController",
    "ModelConverters",
    "ModelEditingController",
    "MultiValueEditingController",
    "NumberEditingController",
    "TextEditingController",
    "TimeEditingController",
]
