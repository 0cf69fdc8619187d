"""
The CONTROLLER layer drives the model over time and reports through Qt Signals.
"""
