from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

from ..domain.ports import TextBufferPort
from .text_controller import TextEditingController

T = TypeVar("T")


@dataclass(frozen=True)
class ModelConverters(Generic[T]):
    """Optional pure conversions between a model and its text.

    ``render`` turns a model into display text; ``apply`` folds text into a
    model and returns the next model. A missing function turns the matching
    operation into a no-op.
    """

    render: Optional[Callable[[T], str]] = None
    apply: Optional[Callable[[T, str], T]] = None


class ModelEditingController(TextEditingController, Generic[T]):
    """Binds an arbitrary model to the text field through ``ModelConverters``.

    - Text edits fold into the stored model via ``apply(model, text)``
    - ``update_model`` is the model -> text direction (authoritative)
    - Without a stored model, text edits leave the model untouched
    """

    def __init__(
        self,
        initial_value: Optional[T] = None,
        text: Optional[str] = None,
        get_value: Optional[Callable[[T], str]] = None,
        set_value: Optional[Callable[[T, str], T]] = None,
        *,
        buffer: Optional[TextBufferPort] = None,
    ) -> None:
        self.converters: ModelConverters[T] = ModelConverters(render=get_value, apply=set_value)
        if text is None and initial_value is not None and get_value is not None:
            text = get_value(initial_value)
        super().__init__(text, buffer=buffer)
        self._model: Optional[T] = initial_value
        self._listen(self._on_text_changed)

    @property
    def model(self) -> Optional[T]:
        self._ensure_alive()
        return self._model

    def update_model(self, model: T) -> None:
        """Store ``model`` and re-render the text from it when a renderer exists."""
        self._ensure_alive()
        self._model = model
        render = self.converters.render
        if render is not None:
            self._write_text(render(model))

    def apply_to_model(self, model: T) -> None:
        """Store ``apply(model, text)``; the text itself is left alone."""
        self._ensure_alive()
        apply = self.converters.apply
        if apply is not None:
            self._model = apply(model, self.text)

    def _on_text_changed(self) -> None:
        apply = self.converters.apply
        if self._model is None or apply is None:
            return
        self._model = apply(self._model, self.text)


__all__ = ["ModelConverters", "ModelEditingController"]
