"""Line chart of rain exposure versus walking speed."""
from __future__ import annotations

import logging

import pyqtgraph as pg
from pyqtgraph.exporters import ImageExporter
from PySide6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QPushButton, QFileDialog, QMessageBox

from rainwalk.model.exposure import ExposureResult, best_result, chart_series

logger = logging.getLogger(__name__)


class ExposureChart(QWidget):
    """Total, head and body rain as three series over the walking speed."""

    # (series key, legend name, colour)
    SERIES = [
        ("total_rain", "Total Rain", "#3b82f6"),
        ("rain_on_head", "Head Rain", "#10b981"),
        ("rain_on_body", "Body Rain", "#f59e0b"),
    ]

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._results: list[ExposureResult] = []

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        # PyQtGraph plot widget
        self.plot_widget = pg.PlotWidget()
        self.plot_widget.setBackground('w')
        self.plot_widget.showGrid(x=True, y=True, alpha=0.3)
        self.plot_widget.setLabel('bottom', 'Speed (m/s)', color='black')
        self.plot_widget.setLabel('left', 'Rain (drops)', color='black')
        self.plot_widget.setTitle('Rain vs Walking Speed', color='black', size='12pt')
        self.plot_widget.getAxis('bottom').setPen('k')
        self.plot_widget.getAxis('left').setPen('k')
        self.plot_widget.getAxis('bottom').setTextPen('k')
        self.plot_widget.getAxis('left').setTextPen('k')
        self.plot_widget.addLegend(offset=(10, 10))

        self.curves: dict[str, pg.PlotDataItem] = {}
        for key, name, color in self.SERIES:
            self.curves[key] = self.plot_widget.plot(
                [], [],
                pen=pg.mkPen(color=color, width=2),
                name=name,
                symbol='o',
                symbolSize=6,
                symbolBrush=color,
                symbolPen=None,
            )

        self.best_line = pg.InfiniteLine(
            angle=90,
            pen=pg.mkPen(color='#6b7280', width=1, style=pg.QtCore.Qt.DashLine),
            label='',
            labelOpts={'position': 0.9, 'color': '#374151', 'fill': (255, 255, 255, 150)}
        )
        self.best_line.setVisible(False)
        self.plot_widget.addItem(self.best_line)

        layout.addWidget(self.plot_widget)

        hbox = QHBoxLayout()
        hbox.addStretch()
        self.btn_export = QPushButton("Export as image...")
        self.btn_export.clicked.connect(self._export_image)
        self.btn_export.setEnabled(False)
        hbox.addWidget(self.btn_export)
        layout.addLayout(hbox)

    @property
    def results(self) -> tuple[ExposureResult, ...]:
        return tuple(self._results)

    def clear(self) -> None:
        self._results = []
        self.best_line.setVisible(False)
        self._redraw()

    def append_result(self, result: ExposureResult) -> None:
        self._results.append(result)
        self._redraw()

    def mark_best(self) -> None:
        """Highlight the walking speed with the least total rain."""
        best = best_result(self._results)
        if best is None:
            self.best_line.setVisible(False)
            return
        self.best_line.setValue(best.walking_speed)
        self.best_line.label.setFormat(f"Best: {best.walking_speed:g} m/s")
        self.best_line.setVisible(True)

    def _redraw(self) -> None:
        data = chart_series(self._results)
        x = data["walking_speed"]
        for key, _, _ in self.SERIES:
            self.curves[key].setData(x, data[key])

        self.btn_export.setEnabled(bool(self._results))
        if self._results:
            self.plot_widget.autoRange()

    def _export_image(self) -> None:
        """Export the current chart as an image file."""
        file_path, _ = QFileDialog.getSaveFileName(
            self,
            "Save chart as image",
            "rain_vs_speed.png",
            "PNG image (*.png);;JPEG image (*.jpg)"
        )

        if not file_path:
            return

        try:
            self.export(file_path)
            logger.info(f"Chart exported to {file_path}")

        except Exception as e:
            logger.exception("Failed to export chart")
            QMessageBox.critical(self, "Export error", f"Could not export the chart:\n{str(e)}")

    def export(self, file_path: str, width: int = 1920) -> None:
        exporter = ImageExporter(self.plot_widget.plotItem)
        # High resolution
        exporter.parameters()["width"] = width
        exporter.export(file_path)
