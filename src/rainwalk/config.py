"""
Configuration & Defaults
========================
Central registry of the static constants used by the model and the GUI.

Why is this file needed?
------------------------
1. Single source: default form values, the rain density and the walking
   speed set are referenced by the model, the controller and the view.
2. Tuning: the sweep pacing lives here rather than inside the timer code.

Exports:
    DEFAULT_DISTANCE (float): Distance walked [m].
    DEFAULT_RAIN_FALL_SPEED (float): Vertical rain speed [m/s].
    DEFAULT_HEAD_AREA (float): Head cross-section [m²].
    DEFAULT_BODY_AREA (float): Body cross-section [m²].
    DEFAULT_RAIN_DENSITY (float): Drops per cubic metre.
    WALKING_SPEEDS (tuple[float, ...]): Speeds evaluated by one sweep [m/s].
    TICK_INTERVAL_MS (int): Pause between two evaluations of a sweep [ms].
"""

# Simulation parameter defaults (editable in the form)
DEFAULT_DISTANCE: float = 10.0
DEFAULT_RAIN_FALL_SPEED: float = 5.0
DEFAULT_HEAD_AREA: float = 0.1
DEFAULT_BODY_AREA: float = 0.5

# Fixed model configuration (not editable in the form)
DEFAULT_RAIN_DENSITY: float = 1000.0
WALKING_SPEEDS: tuple[float, ...] = (0.5, 1.0, 2.0, 3.0, 4.0)

# Sweep pacing
TICK_INTERVAL_MS: int = 1000

# Application identity
ORG_ID: str = "rainwalk"
APP_ID: str = "rainwalk"
VISIBLE_APP_NAME: str = "Rainfall Simulation"
