"""Numeric controllers that live-parse text while the user is typing.

Call context:
    Forms read ``number_value`` when submitting; ``None`` means the current
    text is empty or not (yet) a number.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar, Union

from ..domain.number_parsing import clean_number_text, parse_float, parse_int
from ..domain.ports import TextBufferPort
from .text_controller import TextEditingController

N = TypeVar("N", bound=Union[int, float])


class NumberEditingController(TextEditingController, ABC, Generic[N]):
    """Keeps ``number_value`` in sync with the text; subclasses pick the parser."""

    def __init__(self, initial_value: Optional[N] = None, *, buffer: Optional[TextBufferPort] = None) -> None:
        super().__init__(buffer=buffer)
        self._number_value: Optional[N] = None
        if initial_value is not None:
            self.set_value(initial_value)
        self._listen(self._parse_input)

    @property
    def number_value(self) -> Optional[N]:
        self._ensure_alive()
        return self._number_value

    def set_value(self, value: N) -> None:
        """Store ``value`` and show its canonical ``str`` form."""
        self._ensure_alive()
        self._number_value = value
        self._write_text(str(value))

    @abstractmethod
    def parse_value(self, raw_text: str) -> Optional[N]:
        """Parse cleaned text, returning ``None`` when it is not a number."""

    def _parse_input(self) -> None:
        text = self.text
        # Cleared first so a failing parser never leaves the previous number behind.
        self._number_value = None
        if not text:
            return
        raw = clean_number_text(text)
        self._number_value = self.parse_value(raw)
        if self._number_value is None:
            self._log.debug("%s: no number in %r", type(self).__name__, text)


class IntegerEditingController(NumberEditingController[int]):
    def parse_value(self, raw_text: str) -> Optional[int]:
        return parse_int(raw_text)


class DoubleEditingController(NumberEditingController[float]):
    def parse_value(self, raw_text: str) -> Optional[float]:
        return parse_float(raw_text)


__all__ = ["DoubleEditingController", "IntegerEditingController", "NumberEditingController"]
