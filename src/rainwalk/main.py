"""
Application Initialization
==========================
This module constructs the MVC (Model-View-Controller) pieces and starts
the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Instantiates the shared data model (SimulationParameters).
2. Instantiates the SweepController.
3. Passes both into the Main Window (View).
"""
import argparse
import logging
import sys
from typing import Optional, Sequence

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication

from rainwalk.config import APP_ID, ORG_ID, TICK_INTERVAL_MS, VISIBLE_APP_NAME
from rainwalk.controller.sweep import SweepController
from rainwalk.logging_config import setup_logging
from rainwalk.model.state import SimulationParameters
from rainwalk.view.main_window import MainWindow


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="rainwalk", description=VISIBLE_APP_NAME)
    parser.add_argument("--debug", action="store_true", help="verbose logging")
    parser.add_argument("--log-file", default=None, help="also write the log to this file")
    parser.add_argument(
        "--interval", type=int, default=TICK_INTERVAL_MS,
        help="pause between two sweep steps in milliseconds (default: %(default)s)"
    )
    # Qt consumes its own arguments (e.g. -style) from sys.argv
    args, _ = parser.parse_known_args(argv)
    return args


def main() -> None:
    args = parse_args()

    # 1. Setup Logging (Console + Optional File)
    setup_logging(level=logging.DEBUG if args.debug else logging.INFO, log_file=args.log_file)

    # 2. Create the Qt Application
    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setApplicationName(APP_ID)
    app = QApplication(sys.argv)
    app.setApplicationDisplayName(VISIBLE_APP_NAME)

    # 3. Initialize the Data Model and the Controller
    parameters = SimulationParameters()
    controller = SweepController(interval_ms=args.interval)

    # 4. Initialize the Main Window, passing the model
    window = MainWindow(parameters, controller)
    controller.setParent(window)
    window.show()

    # 5. Start Event Loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
