"""
Main Application Window
=======================
The calculator window: display on top, keypad below.

Why is this file needed?
------------------------
1. Layout: It organizes the visual structure of the calculator.
2. Routing: It connects keypad clicks to the controller and controller
   signals back to the display and the Clear key.
"""
import logging
import os

from PySide6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QLabel
from PySide6.QtCore import Qt

from deskcalc.config import STYLESHEET_PATH, VISIBLE_APP_NAME, WINDOW_SIZE
from deskcalc.controller.calculator import CalculatorController
from deskcalc.view.keypad import KeypadWidget

logger = logging.getLogger(__name__)


def load_stylesheet(path: str = STYLESHEET_PATH) -> str:
    """Read a Qt stylesheet; an empty string keeps the default style."""
    if not os.path.exists(path):
        logger.warning(f"Stylesheet not found at {path}, using default style.")
        return ""
    with open(path, encoding="utf-8") as f:
        return f.read()


class MainWindow(QMainWindow):
    def __init__(self, controller: CalculatorController) -> None:
        super().__init__()
        self.controller: CalculatorController = controller

        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(*WINDOW_SIZE)

        # --- MAIN CONTAINER ---
        main_widget = QWidget()
        main_widget.setObjectName("calculator")
        self.setCentralWidget(main_widget)

        main_layout = QVBoxLayout(main_widget)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        # --- 1. DISPLAY ---
        self.display = QLabel(self.controller.display_text)
        self.display.setObjectName("display")
        self.display.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
        self.display.setMinimumHeight(80)
        main_layout.addWidget(self.display)

        # --- 2. KEYPAD ---
        self.keypad = KeypadWidget()
        self.keypad.set_clear_label(self.controller.clear_label)
        main_layout.addWidget(self.keypad, stretch=1)

        self.setStyleSheet(load_stylesheet())

        # --- SIGNAL CONNECTIONS ---
        # 1. Keypad -> Controller
        self.keypad.key_pressed.connect(self.controller.press)

        # 2. Controller -> Display + Clear key
        self.controller.display_changed.connect(self.display.setText)
        self.controller.clear_label_changed.connect(self.keypad.set_clear_label)

    @property
    def display_text(self) -> str:
        return self.display.text()
