"""
Calculator Controller
=====================
Owns the current `CalculatorState` of one calculator widget and notifies the
view through Qt signals.

Why is this file needed?
------------------------
1. The model is immutable; something has to hold the latest value. This
   class is the only place that swaps it.
2. Signals: Views subscribe to `display_changed` / `clear_label_changed`
   instead of polling the state after each click.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import QObject, Signal

from deskcalc.model import engine
from deskcalc.model.display import clear_label, display_text
from deskcalc.model.keys import Key
from deskcalc.model.state import CalculatorState, initial_state

logger = logging.getLogger(__name__)


class CalculatorController(QObject):
    """Central state holder with signals for display sync."""
    state_changed = Signal(object)
    display_changed = Signal(str)
    clear_label_changed = Signal(str)

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._state: CalculatorState = initial_state()

    @property
    def state(self) -> CalculatorState:
        return self._state

    @property
    def display_text(self) -> str:
        return display_text(self._state)

    @property
    def clear_label(self) -> str:
        return clear_label(self._state)

    def press(self, key: Key) -> None:
        """Slot for keypad activations."""
        new_state = engine.press(self._state, key)
        logger.debug(f"{key.name}: {self._state} -> {new_state}")
        self._set_state(new_state)

    def reset(self) -> None:
        self._set_state(initial_state())

    def _set_state(self, new_state: CalculatorState) -> None:
        old_state = self._state
        if new_state == old_state:
            return

        self._state = new_state
        self.state_changed.emit(new_state)

        if display_text(new_state) != display_text(old_state):
            self.display_changed.emit(display_text(new_state))
        if clear_label(new_state) != clear_label(old_state):
            self.clear_label_changed.emit(clear_label(new_state))
