"""Widget tests for the keypad and the main window (offscreen Qt platform)."""
import pytest

from deskcalc.controller.calculator import CalculatorController
from deskcalc.model.keys import KEY_ORDER, Key
from deskcalc.view.keypad import KeypadWidget, key_label, key_role
from deskcalc.view.main_window import MainWindow, load_stylesheet


@pytest.fixture
def window(qapp):
    win = MainWindow(CalculatorController())
    yield win
    win.close()


def click(win: MainWindow, *keys: Key) -> None:
    for key in keys:
        win.keypad.button(key).click()


# --- Keypad ---

def test_keypad_has_nineteen_buttons_in_order(qapp):
    keypad = KeypadWidget()
    labels = [btn.text() for btn in keypad.buttons()]

    assert len(labels) == 19
    assert labels == [key_label(key) for key in KEY_ORDER]
    assert labels[:4] == ["AC", "⁺∕₋", "%", "÷"]


def test_keypad_emits_logical_key(qapp):
    keypad = KeypadWidget()
    pressed = []
    keypad.key_pressed.connect(pressed.append)

    keypad.button(Key.MULTIPLY).click()
    keypad.button(Key.SEVEN).click()

    assert pressed == [Key.MULTIPLY, Key.SEVEN]


def test_key_roles():
    assert key_role(Key.FIVE) == "digit"
    assert key_role(Key.DECIMAL) == "digit"
    assert key_role(Key.ADD) == "operator"
    assert key_role(Key.EXECUTE) == "operator"
    assert key_role(Key.PERCENT) == "function"


# --- Main window ---

def test_window_starts_at_zero(window):
    assert window.display_text == "0"
    assert window.keypad.button(Key.CLEAR).text() == "AC"


def test_window_calculation(window):
    click(window, Key.THREE, Key.ADD, Key.FOUR, Key.MULTIPLY)
    assert window.display_text == "7"

    click(window, Key.TWO, Key.EXECUTE)
    assert window.display_text == "14"


def test_clear_button_label_follows_input(window):
    click(window, Key.FIVE)
    assert window.keypad.button(Key.CLEAR).text() == "C"

    click(window, Key.CLEAR)
    assert window.keypad.button(Key.CLEAR).text() == "AC"
    assert window.display_text == "0"


def test_window_shows_infinity(window):
    click(window, Key.EIGHT, Key.DIVIDE, Key.DECIMAL, Key.ZERO, Key.EXECUTE)
    assert window.display_text == "Infinity"


def test_missing_stylesheet_falls_back(tmp_path):
    assert load_stylesheet(str(tmp_path / "missing.qss")) == ""


def test_stylesheet_is_read(tmp_path):
    qss = tmp_path / "style.qss"
    qss.write_text("#display { color: red; }", encoding="utf-8")
    assert "color: red" in load_stylesheet(str(qss))
