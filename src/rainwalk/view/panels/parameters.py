"""
Simulation Parameters Panel
"""
from __future__ import annotations

import logging

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QGroupBox, QFormLayout, QLineEdit, QPushButton, QLabel
)
from PySide6.QtGui import QDoubleValidator
from PySide6.QtCore import Signal, Qt

from rainwalk.config import WALKING_SPEEDS
from rainwalk.model.state import SimulationParameters
from rainwalk.utils import parse_number

logger = logging.getLogger(__name__)


class ParametersPanel(QWidget):
    # Emitted when the user asks for a new sweep
    start_requested = Signal()

    # (attribute on SimulationParameters, label, placeholder)
    FIELDS = [
        ("distance", "Distance:", "Distance (m)"),
        ("rain_fall_speed", "Rain speed V1:", "Rain Speed V1 (m/s)"),
        ("head_area", "Head area S1:", "Head Area S1 (m^2)"),
        ("body_area", "Body area S2:", "Body Area S2 (m^2)"),
    ]

    def __init__(self, parameters: SimulationParameters, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.parameters = parameters
        self.edits: dict[str, QLineEdit] = {}

        layout = QVBoxLayout(self)

        # --- Inputs ---
        grp = QGroupBox("Simulation Parameters")
        form = QFormLayout(grp)

        for attr, label, placeholder in self.FIELDS:
            edit = QLineEdit()
            edit.setPlaceholderText(placeholder)
            # Only a hint for the keyboard; parsing happens in on_field_edited
            edit.setValidator(QDoubleValidator(edit))
            edit.setText(self._format(getattr(self.parameters, attr)))
            edit.textEdited.connect(lambda text, a=attr: self.on_field_edited(a, text))
            self.edits[attr] = edit
            form.addRow(label, edit)

        layout.addWidget(grp)

        # --- Fixed configuration (read-only) ---
        speeds = ", ".join(f"{v:g}" for v in WALKING_SPEEDS)
        lbl_fixed = QLabel(
            f"Rain density: {self.parameters.rain_density:g} drops/m³<br>"
            f"Walking speeds: {speeds} m/s"
        )
        lbl_fixed.setTextFormat(Qt.RichText)
        lbl_fixed.setStyleSheet("color: gray;")
        layout.addWidget(lbl_fixed)

        # --- Actions ---
        self.btn_start = QPushButton("Start Dynamic Simulation")
        self.btn_start.setMinimumHeight(40)
        self.btn_start.clicked.connect(self.start_requested)
        layout.addWidget(self.btn_start)

        layout.addStretch()

    @staticmethod
    def _format(value: float) -> str:
        return f"{value:g}"

    def on_field_edited(self, attr: str, text: str) -> None:
        value = parse_number(text)
        setattr(self.parameters, attr, value)
        logger.debug(f"Parameter '{attr}' set to {value}")

    def set_running(self, running: bool) -> None:
        """Disable the start button while a sweep is in progress."""
        self.btn_start.setEnabled(not running)

    def load_from_state(self) -> None:
        """Syncs the fields from the SimulationParameters object."""
        for attr, edit in self.edits.items():
            edit.blockSignals(True)
            edit.setText(self._format(getattr(self.parameters, attr)))
            edit.blockSignals(False)
