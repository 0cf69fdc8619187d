"""
Rain Exposure Model
===================
Closed-form estimate of how many rain drops land on a walking pedestrian.

The walker is modelled as two rectangles:
    * the head, a horizontal area hit by vertically falling rain,
    * the body, a vertical area sweeping through the rain while walking.

The intercepted rain column volumes are converted to drop counts with a
constant rain density (drops per cubic metre).

Exports:
    ExposureResult: Immutable result for one walking speed.
    simulate_rain_hit: The model itself.
    evaluate: Same model, fed from a SimulationParameters object.
    chart_series: Column-oriented view of a result sequence for plotting.
    best_result: Lowest total exposure in a result sequence.
    validate_walking_speeds: Fail-fast check of a walking speed set.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Sequence, Union, TYPE_CHECKING

import numpy as np

from rainwalk.config import DEFAULT_RAIN_DENSITY

if TYPE_CHECKING:
    import numpy.typing as npt
    from rainwalk.model.state import ParameterSnapshot, SimulationParameters

logger = logging.getLogger(__name__)


class InvalidParameterError(ValueError):
    """A simulation parameter is not a finite positive number."""

    def __init__(self, name: str, value: float) -> None:
        super().__init__(f"Parameter '{name}' must be a finite positive number, got {value!r}.")
        self.name = name
        self.value = value


class InvalidWalkingSpeedError(ValueError):
    """A walking speed is zero, negative or not finite."""

    def __init__(self, value: float) -> None:
        super().__init__(f"Walking speed must be a finite positive number, got {value!r}.")
        self.value = value


class ExposureOverflowError(ValueError):
    """The inputs are valid but the drop counts exceed the float range."""

    def __init__(self, name: str, value: float) -> None:
        super().__init__(f"Result '{name}' is not finite ({value!r}); the inputs are too large.")
        self.name = name
        self.value = value


def _is_positive_finite(value: float) -> bool:
    try:
        return math.isfinite(value) and value > 0.0
    except TypeError:
        return False


@dataclass(frozen=True)
class ExposureResult:
    """Rain collected while walking the whole distance at one speed."""
    walking_speed: float
    rain_on_head: float
    rain_on_body: float
    total_rain: float
    time_walk: float


def simulate_rain_hit(
    distance: float,
    rain_fall_speed: float,
    walking_speed: float,
    head_area: float,
    body_area: float,
    rain_density: float = DEFAULT_RAIN_DENSITY,
) -> ExposureResult:
    """
    Evaluate the rain exposure for a single walking speed.

    Args:
        distance: Distance walked [m].
        rain_fall_speed: Vertical speed of the falling rain [m/s].
        walking_speed: Speed of the walker [m/s].
        head_area: Horizontal cross-section of the head [m²].
        body_area: Vertical cross-section of the body [m²].
        rain_density: Drops per cubic metre of air.

    Returns:
        ExposureResult with the head, body and total drop counts.

    Raises:
        InvalidParameterError: If any parameter is non-finite or not positive.
        InvalidWalkingSpeedError: If the walking speed is non-finite or not positive.
        ExposureOverflowError: If valid but huge inputs overflow a result to inf.
    """
    for name, value in (
        ("distance", distance),
        ("rain_fall_speed", rain_fall_speed),
        ("head_area", head_area),
        ("body_area", body_area),
        ("rain_density", rain_density),
    ):
        if not _is_positive_finite(value):
            raise InvalidParameterError(name, value)

    if not _is_positive_finite(walking_speed):
        raise InvalidWalkingSpeedError(walking_speed)

    time_walk = distance / walking_speed

    # Rain column above the head, falling for the whole walk
    volume_head = head_area * rain_fall_speed * time_walk
    rain_on_head = volume_head * rain_density

    # Rain column swept by the front of the body
    volume_body = body_area * walking_speed * time_walk
    rain_on_body = volume_body * rain_density

    total_rain = rain_on_head + rain_on_body

    for name, value in (
        ("time_walk", time_walk),
        ("rain_on_head", rain_on_head),
        ("rain_on_body", rain_on_body),
        ("total_rain", total_rain),
    ):
        if not math.isfinite(value):
            raise ExposureOverflowError(name, value)

    return ExposureResult(
        walking_speed=walking_speed,
        rain_on_head=rain_on_head,
        rain_on_body=rain_on_body,
        total_rain=total_rain,
        time_walk=time_walk,
    )


def evaluate(
    parameters: Union[SimulationParameters, ParameterSnapshot],
    walking_speed: float,
) -> ExposureResult:
    """Run the model with the given parameter set at one walking speed."""
    return simulate_rain_hit(
        distance=parameters.distance,
        rain_fall_speed=parameters.rain_fall_speed,
        walking_speed=walking_speed,
        head_area=parameters.head_area,
        body_area=parameters.body_area,
        rain_density=parameters.rain_density,
    )


def chart_series(results: Iterable[ExposureResult]) -> Dict[str, npt.NDArray[np.float64]]:
    """
    Split a result sequence into parallel arrays for plotting.

    Keys: 'walking_speed' (x axis), 'rain_on_head', 'rain_on_body', 'total_rain'.
    """
    results = list(results)
    return {
        "walking_speed": np.array([r.walking_speed for r in results], dtype=float),
        "rain_on_head": np.array([r.rain_on_head for r in results], dtype=float),
        "rain_on_body": np.array([r.rain_on_body for r in results], dtype=float),
        "total_rain": np.array([r.total_rain for r in results], dtype=float),
    }


def best_result(results: Sequence[ExposureResult]) -> Optional[ExposureResult]:
    """Return the result with the least total rain (first one on ties)."""
    if not results:
        return None
    totals = np.array([r.total_rain for r in results], dtype=float)
    # argmin returns the first occurrence
    return results[int(np.argmin(totals))]


def validate_walking_speeds(speeds: Sequence[float]) -> tuple[float, ...]:
    """
    Check a walking speed set before a sweep is allowed to use it.

    The set must be non-empty, every speed finite and positive, and no speed
    may appear twice (results are identified by their speed).

    Raises:
        InvalidWalkingSpeedError: On the first offending speed.
    """
    if not speeds:
        raise InvalidWalkingSpeedError(float("nan"))

    seen: set[float] = set()
    for speed in speeds:
        if not _is_positive_finite(speed) or speed in seen:
            raise InvalidWalkingSpeedError(speed)
        seen.add(speed)
    return tuple(float(s) for s in speeds)
