"""
Application Initialization
==========================
This module constructs the MVC (Model-View-Controller) architecture and starts
the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Instantiates the Calculator Controller (owner of the state value).
2. Instantiates the Main Window (View).
3. Passes the Controller into the View so they can communicate.
"""
import logging
import sys

from deskcalc.app import create_app
from deskcalc.controller.calculator import CalculatorController
from deskcalc.logging_config import setup_logging
from deskcalc.view.main_window import MainWindow

logger = logging.getLogger(__name__)


def main() -> None:
    # 1. Setup Logging (Console + Optional File)
    # Use logging.DEBUG to see every key transition
    setup_logging(level=logging.INFO)

    # 2. Create the Qt Application
    app = create_app()

    # 3. Initialize the Controller
    controller = CalculatorController()

    # 4. Initialize the Main Window, passing the controller
    window = MainWindow(controller)
    window.show()
    logger.info("Calculator window shown.")

    # 5. Start Event Loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
