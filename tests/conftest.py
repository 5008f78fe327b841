"""Shared fixtures: a headless QApplication for widget tests."""
import os

# Must be set before the first QApplication is created
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from deskcalc.model import engine
from deskcalc.model.keys import Key
from deskcalc.model.state import CalculatorState, initial_state


@pytest.fixture(scope="session")
def qapp():
    """One QApplication for the whole test session."""
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def press_keys():
    """Run a sequence of keys through the engine, starting from a fresh state."""
    def _press(*keys: Key, state: CalculatorState | None = None) -> CalculatorState:
        state = initial_state() if state is None else state
        for key in keys:
            state = engine.press(state, key)
        return state
    return _press
