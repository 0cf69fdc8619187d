"""
Simulation State (Data Model)
=============================
This module defines the data structures shared by the controller and the GUI.

Why is this file needed?
------------------------
1. State Management: The form writes the current parameters into one
   SimulationParameters object; the SweepController owns one SweepState.
2. Decoupling: Views read from these objects; only the controller writes
   to the SweepState.

Classes:
    SimulationParameters: User-editable inputs (mutable).
    ParameterSnapshot: Frozen copy of the inputs taken when a sweep starts.
    SweepStatus: Lifecycle of a sweep.
    SweepState: Progress and results of the current sweep.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
import logging
from typing import Optional, TYPE_CHECKING

from rainwalk.config import (
    DEFAULT_DISTANCE, DEFAULT_RAIN_FALL_SPEED, DEFAULT_HEAD_AREA, DEFAULT_BODY_AREA, DEFAULT_RAIN_DENSITY
)

if TYPE_CHECKING:
    from rainwalk.model.exposure import ExposureResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParameterSnapshot:
    """Inputs of one sweep. Edits made in the form later do not reach it."""
    distance: float
    rain_fall_speed: float
    head_area: float
    body_area: float
    rain_density: float


@dataclass
class SimulationParameters:
    """
    Current form values.
    Unparseable text is stored as NaN; the model rejects it at evaluation time.
    """
    distance: float = DEFAULT_DISTANCE
    rain_fall_speed: float = DEFAULT_RAIN_FALL_SPEED
    head_area: float = DEFAULT_HEAD_AREA
    body_area: float = DEFAULT_BODY_AREA
    rain_density: float = DEFAULT_RAIN_DENSITY

    def snapshot(self) -> ParameterSnapshot:
        return ParameterSnapshot(
            distance=self.distance,
            rain_fall_speed=self.rain_fall_speed,
            head_area=self.head_area,
            body_area=self.body_area,
            rain_density=self.rain_density,
        )

    def reset(self) -> None:
        """Restore the default form values."""
        defaults = SimulationParameters()
        self.distance = defaults.distance
        self.rain_fall_speed = defaults.rain_fall_speed
        self.head_area = defaults.head_area
        self.body_area = defaults.body_area
        self.rain_density = defaults.rain_density
        logger.debug("Simulation parameters reset to defaults.")


class SweepStatus(Enum):
    IDLE = "idle"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass
class SweepState:
    """
    Progress of one sweep.

    'results' and 'latest' are always updated together: whenever results is
    non-empty, latest is its last element.
    """
    status: SweepStatus = SweepStatus.IDLE
    next_index: int = 0
    results: list[ExposureResult] = field(default_factory=list)
    latest: Optional[ExposureResult] = None
    parameters: Optional[ParameterSnapshot] = None
    error: Optional[str] = None

    @property
    def is_running(self) -> bool:
        return self.status is SweepStatus.RUNNING

    def record(self, result: ExposureResult) -> None:
        """Append a result and publish it as the latest one."""
        self.results.append(result)
        self.latest = result
        self.next_index += 1

    def copy(self) -> SweepState:
        """Shallow copy with its own results list."""
        return replace(self, results=list(self.results))

    def reset(self) -> None:
        """Clear all data for a new sweep."""
        self.status = SweepStatus.IDLE
        self.next_index = 0
        self.results = []
        self.latest = None
        self.parameters = None
        self.error = None
