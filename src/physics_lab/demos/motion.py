# MIT License (see LICENSE)
"""
One-dimensional kinematics: uniform (MRU) and uniformly accelerated (MRUV) motion.

Both demos run for a configured total time and stop exactly on it. The
full position/velocity curve over the run is available as a chart series
so a plot can reveal it up to the current time.
"""
from __future__ import annotations
from abc import abstractmethod
from dataclasses import dataclass

import numpy as np

from ..constants import CHART_SAMPLES
from ..core.integrators import advance_linear_motion, linear_motion_at, motion_series
from ..params import ParameterSpec, spec_table
from ..types import ChartSeries, LinearMotionState
from .base import Demo


@dataclass(frozen=True)
class UniformMotionParams:
    initial_position: float = 0.0
    velocity: float = 10.0
    total_time: float = 10.0


@dataclass(frozen=True)
class AcceleratedMotionParams:
    initial_position: float = 0.0
    initial_velocity: float = 5.0
    acceleration: float = 2.0
    total_time: float = 10.0


class _LinearMotionDemo(Demo):
    """Shared stepping for the 1-D demos; subclasses map params to (x0, v0, a)."""

    @abstractmethod
    def _coefficients(self) -> tuple[float, float, float]:
        ...

    def _initial_state(self) -> LinearMotionState:
        x0, v0, a = self._coefficients()
        return linear_motion_at(x0, v0, a, 0.0)

    def _advance(self, dt: float) -> bool:
        x0, v0, a = self._coefficients()
        self._state, completed = advance_linear_motion(
            self._state, x0, v0, a, dt, self.params.total_time)
        return completed

    def chart(self, samples: int = CHART_SAMPLES) -> ChartSeries:
        """Full curve over [0, total_time]."""
        x0, v0, a = self._coefficients()
        return motion_series(x0, v0, a, self.params.total_time, samples)

    def visible_chart(self, samples: int = CHART_SAMPLES) -> ChartSeries:
        """The chart truncated to the points at or before the elapsed time."""
        full = self.chart(samples)
        n = int(np.searchsorted(full.time, self._state.time + 1e-9, side="right"))
        return ChartSeries(
            time=full.time[:n],
            columns={k: v[:n] for k, v in full.columns.items()},
        )

    def derived(self) -> dict[str, float]:
        x0, v0, a = self._coefficients()
        final = linear_motion_at(x0, v0, a, self.params.total_time)
        return {
            "position": self._state.position,
            "velocity": self._state.velocity,
            "final_position": final.position,
            "displacement": final.position - x0,
        }


class UniformMotionDemo(_LinearMotionDemo):
    """Movimento Retilíneo Uniforme: x(t) = x0 + v·t."""
    name = "mru"
    params_type = UniformMotionParams
    PARAMETERS = spec_table(
        ParameterSpec("initial_position", 0.0, -50.0, 50.0, "m"),
        ParameterSpec("velocity", 10.0, -50.0, 50.0, "m/s"),
        ParameterSpec("total_time", 10.0, 1.0, 30.0, "s"),
    )

    def _coefficients(self) -> tuple[float, float, float]:
        return self.params.initial_position, self.params.velocity, 0.0


class AcceleratedMotionDemo(_LinearMotionDemo):
    """Movimento Retilíneo Uniformemente Variado: x(t) = x0 + v0·t + ½·a·t²."""
    name = "mruv"
    params_type = AcceleratedMotionParams
    PARAMETERS = spec_table(
        ParameterSpec("initial_position", 0.0, -50.0, 50.0, "m"),
        ParameterSpec("initial_velocity", 5.0, -50.0, 50.0, "m/s"),
        ParameterSpec("acceleration", 2.0, -10.0, 10.0, "m/s²"),
        ParameterSpec("total_time", 10.0, 1.0, 30.0, "s"),
    )

    def _coefficients(self) -> tuple[float, float, float]:
        p = self.params
        return p.initial_position, p.initial_velocity, p.acceleration
