# MIT License (see LICENSE)
"""
Generic demo lifecycle shared by all seven demonstrations.

A Demo couples a parameter record, an immutable state snapshot and a
stepping rule. Subclasses provide only the physics:
    - _initial_state(): state built from the current parameters.
    - _advance(dt): move the state forward, return True when the run is over.

The base class owns everything else:
    - Lifecycle: IDLE → RUNNING → (PAUSED | COMPLETED), back to IDLE on reset.
    - Reset policy: with reset_on_change (the default) any parameter edit
      resets state and pauses playback, so a run never continues under
      stale coefficients. Live demos (particles, waves) turn it off.
    - Clock handling: start() and pause() clear the baseline timestamp,
      so the first frame after a (re)start steps by 0.
    - Frame requests: while running, each step asks the scheduler for the
      next frame; pause/reset/completion cancel the pending request.

Only step() mutates state, once per frame, and it swaps the snapshot as a
whole. get_state() can therefore be read at any time.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import replace
from typing import Any, Callable, ClassVar
import logging

from ..constants import MAX_FRAME_DT
from ..core.clock import SimulationClock
from ..driver import FrameScheduler
from ..params import ParameterSpec, lookup
from ..types import Status

logger = logging.getLogger(__name__)


class Demo(ABC):
    """
    Base class for an interactive simulation.

    Class attributes:
        name: Short identifier used in logs.
        PARAMETERS: Spec table of the adjustable parameters.
        params_type: Frozen dataclass holding the parameter values.
        reset_on_change: Whether set_parameter() resets the run.

    Args:
        scheduler: Optional frame source. Without one, the caller drives
            step() directly.
        on_step: Optional observer called with the new state after every
            step while running.
        max_dt: Upper bound for a single frame delta in seconds.
        **params: Initial parameter values (clamped into range).
    """
    name: ClassVar[str] = "demo"
    PARAMETERS: ClassVar[dict[str, ParameterSpec]] = {}
    params_type: ClassVar[type]
    reset_on_change: ClassVar[bool] = True

    def __init__(
        self,
        scheduler: FrameScheduler | None = None,
        on_step: Callable[[Any], None] | None = None,
        max_dt: float = MAX_FRAME_DT,
        **params: float,
    ) -> None:
        for key in params:
            lookup(self.PARAMETERS, key)
        self.params = self.params_type(**{
            n: spec.clamp(params.get(n, spec.default))
            for n, spec in self.PARAMETERS.items()
        })
        self.scheduler = scheduler
        self.on_step = on_step
        self.clock = SimulationClock(max_dt)
        self.status = Status.IDLE
        self._handle: int | None = None
        self._state = self._initial_state()

    # ------------------------------------------------------------------
    # Physics hooks
    # ------------------------------------------------------------------

    @abstractmethod
    def _initial_state(self) -> Any:
        """State for the current parameters at t = 0."""
        ...

    @abstractmethod
    def _advance(self, dt: float) -> bool:
        """
        Replace self._state with the state dt seconds later.

        Returns:
            True when the run has reached its end condition.
        """
        ...

    def derived(self) -> dict[str, float]:
        """Computed read-outs for the current parameters and state."""
        return {}

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def running(self) -> bool:
        return self.status is Status.RUNNING

    def start(self) -> None:
        """Begin or resume playback. A completed run restarts from t = 0."""
        if self.status is Status.RUNNING:
            return
        if self.status is Status.COMPLETED:
            self._state = self._initial_state()
        self.clock.reset()
        self.status = Status.RUNNING
        logger.debug("%s started", self.name)
        self._request_next_step()

    def pause(self) -> None:
        """Stop playback, keeping the current state."""
        if self.status is not Status.RUNNING:
            return
        self._cancel_next_step()
        self.clock.reset()
        self.status = Status.PAUSED
        logger.debug("%s paused at t=%.3f", self.name, self._state.time)

    def reset(self) -> None:
        """Stop playback and rebuild the state from the current parameters."""
        self._cancel_next_step()
        self.clock.reset()
        self.status = Status.IDLE
        self._state = self._initial_state()
        logger.debug("%s reset", self.name)

    def set_parameter(self, name: str, value: float) -> float:
        """
        Change one parameter.

        The value is clamped into the declared range. Demos with
        reset_on_change then reset (and pause); live demos keep running
        with the new value from the next step on.

        Returns:
            The value actually stored.

        Raises:
            UnknownParameterError: name is not a declared parameter.
        """
        value = lookup(self.PARAMETERS, name).clamp(value)
        self.params = replace(self.params, **{name: value})
        if self.reset_on_change:
            self.reset()
        else:
            self._parameter_changed(name)
        return value

    def _parameter_changed(self, name: str) -> None:
        """Hook for live demos to push a new parameter into running state."""

    def step(self, timestamp_ms: float) -> Any:
        """
        Advance one animation frame.

        Does nothing unless running. Otherwise the clock converts the
        timestamp to a bounded dt, the physics advances, and either the
        run completes or the next frame is requested.

        Returns:
            The current state snapshot.
        """
        if self.status is not Status.RUNNING:
            return self._state
        dt = self.clock.tick(timestamp_ms)
        if self._advance(dt):
            self._cancel_next_step()
            self.status = Status.COMPLETED
            self.clock.reset()
            logger.debug("%s completed at t=%.3f", self.name, self._state.time)
        else:
            self._request_next_step()
        if self.on_step is not None:
            self.on_step(self._state)
        return self._state

    def get_state(self) -> Any:
        """Read-only snapshot of the latest completed step."""
        return self._state

    # ------------------------------------------------------------------
    # Scheduling
    # ------------------------------------------------------------------

    def _request_next_step(self) -> None:
        if self.scheduler is None:
            return
        self._cancel_next_step()
        self._handle = self.scheduler.request(self.step)

    def _cancel_next_step(self) -> None:
        if self.scheduler is not None and self._handle is not None:
            self.scheduler.cancel(self._handle)
        self._handle = None
