"""Tests for the Qt controller that owns the calculator state."""
import pytest

from deskcalc.controller.calculator import CalculatorController
from deskcalc.model.keys import Key
from deskcalc.model.state import initial_state


@pytest.fixture
def controller(qapp):
    return CalculatorController()


@pytest.fixture
def recorder(controller):
    """Collect emitted signal values by signal name."""
    events = {"state": [], "display": [], "clear": []}
    controller.state_changed.connect(events["state"].append)
    controller.display_changed.connect(events["display"].append)
    controller.clear_label_changed.connect(events["clear"].append)
    return events


def test_starts_empty(controller):
    assert controller.state == initial_state()
    assert controller.display_text == "0"
    assert controller.clear_label == "AC"


def test_press_updates_display(controller, recorder):
    for key in (Key.ONE, Key.TWO, Key.DECIMAL, Key.FIVE):
        controller.press(key)

    assert controller.display_text == "12.5"
    assert recorder["display"] == ["1", "12", "12.", "12.5"]
    assert recorder["clear"] == ["C"]
    assert len(recorder["state"]) == 4


def test_noop_press_emits_nothing(controller, recorder):
    controller.press(Key.ZERO)
    controller.press(Key.NEGATE)

    assert recorder == {"state": [], "display": [], "clear": []}


def test_operator_only_change_emits_state_only(controller, recorder):
    controller.press(Key.ADD)

    assert len(recorder["state"]) == 1
    assert recorder["display"] == []
    assert recorder["clear"] == []


def test_full_calculation(controller):
    for key in (Key.THREE, Key.ADD, Key.FOUR, Key.MULTIPLY, Key.TWO, Key.EXECUTE):
        controller.press(key)

    assert controller.display_text == "14"
    assert controller.clear_label == "AC"


def test_reset(controller, recorder):
    controller.press(Key.NINE)
    controller.reset()

    assert controller.state == initial_state()
    assert recorder["display"] == ["9", "0"]
    assert recorder["clear"] == ["C", "AC"]


def test_invalid_key_raises(controller):
    with pytest.raises(ValueError):
        controller.press("plus")
