"""
Keypad Widget
"""
from PySide6.QtWidgets import QWidget, QGridLayout, QPushButton, QSizePolicy
from PySide6.QtCore import Signal

from deskcalc.config import KEYPAD_COLUMNS
from deskcalc.model.keys import Key, KEY_ORDER

# Glyphs shown on the buttons. The engine never sees these.
KEY_LABELS: dict[Key, str] = {
    Key.DECIMAL: ".",
    Key.CLEAR: "AC",
    Key.NEGATE: "⁺∕₋",
    Key.PERCENT: "%",
    Key.DIVIDE: "÷",
    Key.MULTIPLY: "✕",
    Key.SUBTRACT: "−",
    Key.ADD: "+",
    Key.EXECUTE: "=",
}

# Keys that occupy two grid cells
WIDE_KEYS = {Key.ZERO}


def key_label(key: Key) -> str:
    if key.digit is not None:
        return str(key.digit)
    return KEY_LABELS[key]


def key_role(key: Key) -> str:
    """Stylesheet role of a button (see assets/calculator.qss)."""
    if key.digit is not None or key is Key.DECIMAL:
        return "digit"
    if key.operator is not None or key is Key.EXECUTE:
        return "operator"
    return "function"


class KeypadWidget(QWidget):
    # Emitted with the logical key of the clicked button
    key_pressed = Signal(object)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._buttons: dict[Key, QPushButton] = {}

        layout = QGridLayout(self)
        layout.setSpacing(1)
        layout.setContentsMargins(0, 0, 0, 0)

        row, col = 0, 0
        for key in KEY_ORDER:
            span = 2 if key in WIDE_KEYS else 1

            btn = QPushButton(key_label(key))
            btn.setProperty("role", key_role(key))
            btn.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
            btn.setMinimumHeight(56)
            btn.clicked.connect(lambda _checked=False, k=key: self.key_pressed.emit(k))

            layout.addWidget(btn, row, col, 1, span)
            self._buttons[key] = btn

            col += span
            if col >= KEYPAD_COLUMNS:
                row, col = row + 1, 0

    # --- ACCESSORS ---

    def button(self, key: Key) -> QPushButton:
        return self._buttons[key]

    def buttons(self) -> list[QPushButton]:
        """Buttons in keypad order."""
        return [self._buttons[key] for key in KEY_ORDER]

    # --- SLOTS ---

    def set_clear_label(self, text: str) -> None:
        self._buttons[Key.CLEAR].setText(text)
