"""Card showing the most recent exposure result."""
from __future__ import annotations

from typing import Optional

from PySide6.QtWidgets import QGroupBox, QVBoxLayout, QLabel, QWidget, QGraphicsOpacityEffect
from PySide6.QtCore import Qt, QPropertyAnimation

from rainwalk.model.exposure import ExposureResult
from rainwalk.utils import format_drops


class SummaryCard(QGroupBox):
    """Walking speed and drop counts of the latest evaluated speed."""

    FADE_MS = 500

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__("Latest Result", parent)
        self.setStyleSheet(
            "QGroupBox { background-color: #eff6ff; border: 1px solid #bfdbfe; "
            "border-radius: 6px; margin-top: 12px; padding: 8px; }"
        )

        layout = QVBoxLayout(self)

        self.lbl_speed = QLabel()
        self.lbl_speed.setStyleSheet("font-weight: 600;")
        self.lbl_head = QLabel()
        self.lbl_body = QLabel()
        self.lbl_total = QLabel()
        self.lbl_time = QLabel()
        self.lbl_time.setStyleSheet("color: gray;")

        for lbl in (self.lbl_speed, self.lbl_head, self.lbl_body, self.lbl_total, self.lbl_time):
            lbl.setTextInteractionFlags(Qt.TextSelectableByMouse)
            layout.addWidget(lbl)

        # Fade-in each time a new result arrives
        self._opacity = QGraphicsOpacityEffect(self)
        self.setGraphicsEffect(self._opacity)
        self._fade = QPropertyAnimation(self._opacity, b"opacity", self)
        self._fade.setDuration(self.FADE_MS)
        self._fade.setStartValue(0.0)
        self._fade.setEndValue(1.0)

        self.show_result(None)

    def show_result(self, result: Optional[ExposureResult]) -> None:
        if result is None:
            self.setVisible(False)
            return

        self.lbl_speed.setText(f"Walking Speed: {result.walking_speed:g} m/s")
        self.lbl_head.setText(f"Rain on Head: {format_drops(result.rain_on_head)} drops")
        self.lbl_body.setText(f"Rain on Body: {format_drops(result.rain_on_body)} drops")
        self.lbl_total.setText(f"Total Rain: {format_drops(result.total_rain)} drops")
        self.lbl_time.setText(f"Time walking: {result.time_walk:.1f} s")
        self.setVisible(True)

        self._fade.stop()
        self._fade.start()
