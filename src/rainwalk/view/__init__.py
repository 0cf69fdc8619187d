"""
The VIEW layer: PySide6 widgets and the pyqtgraph chart.
Widgets read the model and issue commands to the SweepController.
"""
