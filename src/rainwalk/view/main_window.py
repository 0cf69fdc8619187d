"""
Main Application Window
=======================
The GUI container holding the parameter form, the latest-result card and
the chart.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It connects the panel's start request and the controller's
   signals to the widgets that display the results.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QSplitter, QMessageBox
)
from PySide6.QtCore import Qt
from PySide6.QtGui import QAction

from rainwalk.config import VISIBLE_APP_NAME
from rainwalk.controller.sweep import SweepController
from rainwalk.model.exposure import ExposureResult, best_result
from rainwalk.model.state import SimulationParameters
from rainwalk.view.panels.parameters import ParametersPanel
from rainwalk.view.widgets.exposure_chart import ExposureChart
from rainwalk.view.widgets.summary_card import SummaryCard

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(
        self,
        parameters: SimulationParameters,
        controller: Optional[SweepController] = None,
    ) -> None:
        super().__init__()
        self.parameters: SimulationParameters = parameters
        self.controller: SweepController = controller or SweepController(parent=self)

        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1100, 650)

        # --- SPLITTER (CONTENT AREA) ---
        splitter = QSplitter(Qt.Horizontal)
        self.setCentralWidget(splitter)

        # --- LEFT SIDE: Form + Latest Result ---
        left = QWidget()
        left_layout = QVBoxLayout(left)

        self.params_panel = ParametersPanel(self.parameters)
        left_layout.addWidget(self.params_panel)

        self.summary = SummaryCard()
        left_layout.addWidget(self.summary)
        left_layout.addStretch()

        splitter.addWidget(left)

        # --- RIGHT SIDE: Chart ---
        self.chart = ExposureChart()
        splitter.addWidget(self.chart)

        splitter.setSizes([350, 750])

        # --- SIGNAL CONNECTIONS ---
        self.params_panel.start_requested.connect(self.on_start_requested)

        self.controller.sweep_started.connect(self.on_sweep_started)
        self.controller.result_added.connect(self.on_result_added)
        self.controller.sweep_finished.connect(self.on_sweep_finished)
        self.controller.error_occurred.connect(self.on_error)

        # --- ACTIONS & MENUS ---
        self._create_actions()
        self._create_menus()

        self.statusBar().showMessage("Ready.")

    def _create_actions(self) -> None:
        self.act_start = QAction("Start Simulation", self)
        self.act_start.setShortcut("Ctrl+R")
        self.act_start.triggered.connect(self.on_start_requested)

        self.act_reset = QAction("Reset Parameters", self)
        self.act_reset.triggered.connect(self.on_reset_parameters)

        self.act_exit = QAction("Exit", self)
        self.act_exit.triggered.connect(self.close)

    def _create_menus(self) -> None:
        menu_bar = self.menuBar()

        sim_menu = menu_bar.addMenu("&Simulation")
        sim_menu.addAction(self.act_start)
        sim_menu.addAction(self.act_reset)
        sim_menu.addSeparator()
        sim_menu.addAction(self.act_exit)

    # --- SLOTS ---

    def on_start_requested(self) -> None:
        # Redundant clicks while running are ignored by the controller
        self.controller.start(self.parameters)

    def on_reset_parameters(self) -> None:
        self.parameters.reset()
        self.params_panel.load_from_state()

    def on_sweep_started(self) -> None:
        self.params_panel.set_running(True)
        self.act_start.setEnabled(False)
        self.summary.show_result(None)
        self.chart.clear()
        self.statusBar().showMessage("Simulation running...")

    def on_result_added(self, result: ExposureResult) -> None:
        self.summary.show_result(result)
        self.chart.append_result(result)
        done = len(self.controller.results)
        total = len(self.controller.walking_speeds)
        self.statusBar().showMessage(f"Simulation running... {done}/{total}")

    def on_sweep_finished(self, results: tuple) -> None:
        self._set_idle()
        self.chart.mark_best()
        best = best_result(results)
        if best is not None:
            self.statusBar().showMessage(
                f"Simulation finished. Least rain at {best.walking_speed:g} m/s "
                f"({best.total_rain:.1f} drops)."
            )

    def on_error(self, msg: str) -> None:
        self._set_idle()
        self.statusBar().showMessage("Simulation aborted.")
        QMessageBox.critical(self, "Simulation Error", msg)

    def _set_idle(self) -> None:
        self.params_panel.set_running(False)
        self.act_start.setEnabled(True)

    def closeEvent(self, event, /) -> None:
        """Stop any pending tick before the window goes away."""
        self.controller.cancel()
        event.accept()
