import logging

import pytest

from advtext.viewmodels.number_controller import (
    DoubleEditingController,
    IntegerEditingController,
    NumberEditingController,
)


def test_parses_integer_input():
    controller = IntegerEditingController()

    controller.text = "123"
    assert controller.number_value == 123

    controller.text = "12a3"
    assert controller.number_value is None


def test_parses_double_input():
    controller = DoubleEditingController()

    controller.text = "12.34"

    assert controller.number_value == pytest.approx(12.34)


def test_thousands_separators_and_whitespace_are_ignored():
    ints = IntegerEditingController()
    doubles = DoubleEditingController()

    ints.text = "  1,234,567 "
    doubles.text = "1,234.5"

    assert ints.number_value == 1234567
    assert doubles.number_value == pytest.approx(1234.5)


@pytest.mark.parametrize("partial", ["-", "+", "1.", "1e", " "])
def test_partial_input_never_raises(partial):
    controller = DoubleEditingController()

    controller.text = partial

    if partial == "1.":
        assert controller.number_value == pytest.approx(1.0)
    else:
        assert controller.number_value is None


def test_empty_text_clears_value():
    controller = IntegerEditingController(initial_value=5)

    controller.clear()

    assert controller.text == ""
    assert controller.number_value is None


def test_initial_value_renders_text():
    assert IntegerEditingController(initial_value=-42).text == "-42"
    assert DoubleEditingController(initial_value=12.0).text == "12.0"


def test_set_value_overwrites_text_and_keeps_value():
    controller = IntegerEditingController()
    controller.text = "garbage"

    controller.set_value(1234567)

    assert controller.text == "1234567"
    assert controller.number_value == 1234567


@pytest.mark.parametrize("value", [0.1, -3.75, 1e16, 123456.789])
def test_double_round_trips_through_text(value):
    source = DoubleEditingController(initial_value=value)

    fresh = DoubleEditingController()
    fresh.text = source.text

    assert fresh.number_value == value


def test_integer_round_trips_through_text():
    source = IntegerEditingController(initial_value=987654321)

    fresh = IntegerEditingController()
    fresh.text = source.text

    assert fresh.number_value == 987654321


def test_unparsable_text_is_logged_at_debug(caplog):
    controller = IntegerEditingController()

    with caplog.at_level(logging.DEBUG, logger="advtext.viewmodels.text_controller"):
        controller.text = "abc"

    assert controller.number_value is None
    assert "no number" in caplog.text


def test_abstract_controller_cannot_be_instantiated():
    with pytest.raises(TypeError):
        NumberEditingController()  # type: ignore[abstract]


def test_huge_integer_text_clears_previous_value():
    controller = IntegerEditingController()
    controller.text = "5"

    controller.text = "9" * 5000

    assert controller.number_value is None


def test_overflowing_double_text_is_absent():
    controller = DoubleEditingController(initial_value=1.5)

    controller.text = "1e999"

    assert controller.number_value is None


class _FlakyController(IntegerEditingController):
    def parse_value(self, raw_text):
        if raw_text == "boom":
            raise RuntimeError("parser failed")
        return super().parse_value(raw_text)


def test_failing_parser_does_not_leave_stale_value():
    controller = _FlakyController()
    controller.text = "41"

    controller.text = "boom"

    assert controller.number_value is None
