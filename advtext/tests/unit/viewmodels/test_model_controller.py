from dataclasses import dataclass, replace

import pytest

from advtext.domain.errors import ControllerDisposedError
from advtext.viewmodels.model_controller import ModelEditingController


@dataclass(frozen=True)
class Product:
    id: int
    name: str


def _rename(product: Product, text: str) -> Product:
    return replace(product, name=text)


def test_explicit_text_wins_over_initial_value():
    controller = ModelEditingController[str](initial_value="initial value", text="initial text")

    assert controller.model == "initial value"
    assert controller.text == "initial text"


def test_initial_text_is_rendered_from_model():
    controller = ModelEditingController(initial_value=Product(1, "Pen"), get_value=lambda p: p.name)

    assert controller.text == "Pen"


def test_without_text_or_renderer_text_is_empty():
    controller = ModelEditingController(initial_value=Product(1, "Pen"))

    assert controller.text == ""
    assert controller.model == Product(1, "Pen")


def test_text_change_updates_model():
    controller = ModelEditingController[str](initial_value="v", set_value=lambda model, text: text)

    controller.text = "new text"

    assert controller.model == "new text"


def test_text_change_without_model_is_noop():
    calls = []

    def apply(model, text):
        calls.append((model, text))
        return model

    controller = ModelEditingController(set_value=apply)
    controller.text = "typed"

    assert controller.model is None
    assert calls == []


def test_text_change_without_apply_keeps_model():
    controller = ModelEditingController(initial_value=Product(1, "Pen"))

    controller.text = "Pencil"

    assert controller.model == Product(1, "Pen")


def test_update_model_renders_text_and_keeps_model_exact():
    calls = []

    def apply(product, text):
        calls.append(text)
        return _rename(product, text)

    controller = ModelEditingController(get_value=lambda p: p.name, set_value=apply)
    model = Product(7, "Stapler")

    controller.update_model(model)

    assert controller.text == "Stapler"
    assert controller.model is model
    assert calls == []


def test_text_after_update_model_applies_exactly_once():
    calls = []

    def apply(product, text):
        calls.append((product, text))
        return _rename(product, text)

    controller = ModelEditingController(get_value=lambda p: p.name, set_value=apply)
    model = Product(7, "Stapler")
    controller.update_model(model)

    controller.text = "Red stapler"

    assert calls == [(model, "Red stapler")]
    assert controller.model == Product(7, "Red stapler")


def test_update_model_without_renderer_leaves_text():
    controller = ModelEditingController(text="keep me")

    controller.update_model(Product(1, "Pen"))

    assert controller.text == "keep me"
    assert controller.model == Product(1, "Pen")


def test_apply_to_model_folds_text_into_other_base():
    controller = ModelEditingController(
        initial_value=Product(1, "Pen"),
        get_value=lambda p: p.name,
        set_value=_rename,
    )
    controller.text = "Marker"

    controller.apply_to_model(Product(2, "Eraser"))

    assert controller.model == Product(2, "Marker")
    assert controller.text == "Marker"


def test_apply_to_model_without_apply_function_is_noop():
    controller = ModelEditingController(initial_value=Product(1, "Pen"))

    controller.apply_to_model(Product(2, "Eraser"))

    assert controller.model == Product(1, "Pen")


def test_external_listener_sees_update_model_once():
    controller = ModelEditingController(get_value=lambda p: p.name, set_value=_rename)
    seen = []
    controller.add_listener(lambda: seen.append(controller.text))

    controller.update_model(Product(3, "Clip"))

    assert seen == ["Clip"]


def test_failing_apply_is_logged_and_model_kept(caplog):
    def apply(product, text):
        raise RuntimeError("boom")

    controller = ModelEditingController(initial_value=Product(1, "Pen"), set_value=apply)

    with caplog.at_level("ERROR"):
        controller.text = "x"

    assert controller.model == Product(1, "Pen")
    assert "listener" in caplog.text


def test_dispose_stops_model_updates():
    controller = ModelEditingController[str](initial_value="v", set_value=lambda m, t: t)
    controller.dispose()

    with pytest.raises(ControllerDisposedError):
        controller.text = "late"
    with pytest.raises(ControllerDisposedError):
        _ = controller.model
