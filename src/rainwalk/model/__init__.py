"""
The MODEL layer contains pure data structures and the rain exposure formula.
It has NO knowledge of the GUI (Qt) or the chart (pyqtgraph).
"""
