"""
Sweep Controller
================
Drives the timed evaluation of the rain exposure model over the walking
speed set.

Why is this file needed?
------------------------
1. Pacing: Results appear one per tick (QTimer) so the user can watch the
   chart build up. Everything runs in the GUI thread; the model is cheap.
2. Serialization: Only one sweep may run at a time. A start request during a
   running sweep is ignored.
3. Signals: The GUI is updated through Qt Signals and never mutates the
   SweepState itself.

Classes:
    SweepController: Owns the SweepState and the tick timer.
"""
from __future__ import annotations

import logging
from typing import Optional, Sequence, Union

from PySide6.QtCore import QObject, QTimer, Signal

from rainwalk.config import TICK_INTERVAL_MS, WALKING_SPEEDS
from rainwalk.model.exposure import ExposureResult, evaluate, validate_walking_speeds
from rainwalk.model.state import ParameterSnapshot, SimulationParameters, SweepState, SweepStatus

logger = logging.getLogger(__name__)


class SweepController(QObject):
    """
    State machine: IDLE --start--> RUNNING(0) --tick--> ... --tick--> COMPLETED.

    A failing evaluation ends the sweep in FAILED. COMPLETED and FAILED accept
    a new start, which resets the state first.
    """

    # Signals to update the UI
    sweep_started = Signal()
    result_added = Signal(object)  # ExposureResult
    sweep_finished = Signal(object)  # tuple[ExposureResult, ...]
    error_occurred = Signal(str)

    def __init__(
        self,
        walking_speeds: Sequence[float] = WALKING_SPEEDS,
        interval_ms: int = TICK_INTERVAL_MS,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        # Fail fast on a broken speed set, before any sweep can use it
        self.walking_speeds: tuple[float, ...] = validate_walking_speeds(walking_speeds)
        self._state = SweepState()

        self.timer = QTimer(self)
        self.timer.setInterval(interval_ms)
        self.timer.timeout.connect(self.advance)

    # --- READ-ONLY ACCESS ---

    @property
    def state(self) -> SweepState:
        """Copy of the current sweep state."""
        return self._state.copy()

    @property
    def status(self) -> SweepStatus:
        return self._state.status

    @property
    def is_running(self) -> bool:
        return self._state.is_running

    @property
    def latest(self) -> Optional[ExposureResult]:
        return self._state.latest

    @property
    def results(self) -> tuple[ExposureResult, ...]:
        return tuple(self._state.results)

    @property
    def error(self) -> Optional[str]:
        return self._state.error

    # --- COMMANDS ---

    def start(self, parameters: Union[SimulationParameters, ParameterSnapshot]) -> bool:
        """
        Start a new sweep with a snapshot of the given parameters.

        Returns:
            True if a sweep was started, False if one is already running.
        """
        if self._state.is_running:
            logger.info("Sweep already running; start request ignored.")
            return False

        if isinstance(parameters, SimulationParameters):
            parameters = parameters.snapshot()

        self._state.reset()
        self._state.parameters = parameters
        self._state.status = SweepStatus.RUNNING
        logger.info(f"Starting sweep over {len(self.walking_speeds)} walking speeds with {parameters}")

        self.sweep_started.emit()
        self.timer.start()
        return True

    def advance(self) -> None:
        """
        Evaluate the next walking speed. Connected to the timer's timeout.
        Does nothing unless a sweep is running.
        """
        if not self._state.is_running:
            return

        index = self._state.next_index
        speed = self.walking_speeds[index]

        try:
            result = evaluate(self._state.parameters, speed)
        except ValueError as e:
            self._fail(str(e))
            return

        self._state.record(result)
        logger.debug(
            f"Step {index + 1}/{len(self.walking_speeds)}: v={speed} m/s -> "
            f"head={result.rain_on_head:.1f}, body={result.rain_on_body:.1f}, total={result.total_rain:.1f}"
        )

        is_last = self._state.next_index >= len(self.walking_speeds)
        if is_last:
            self.timer.stop()
            self._state.status = SweepStatus.COMPLETED

        self.result_added.emit(result)

        if is_last:
            logger.info("Sweep completed.")
            self.sweep_finished.emit(self.results)

    def cancel(self) -> None:
        """
        Stop a running sweep (e.g. when the window is closed).
        Results computed so far are kept; nothing else is evaluated.
        """
        self.timer.stop()
        if self._state.is_running:
            self._state.status = SweepStatus.IDLE
            logger.info(f"Sweep cancelled after {len(self._state.results)} step(s).")

    def _fail(self, message: str) -> None:
        self.timer.stop()
        self._state.status = SweepStatus.FAILED
        self._state.error = message
        logger.error(f"Sweep aborted at step {self._state.next_index + 1}: {message}")
        self.error_occurred.emit(message)
