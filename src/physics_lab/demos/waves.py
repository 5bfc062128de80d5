# MIT License (see LICENSE)
"""
Interference pattern of two coherent point sources.

The only evolving quantity is the shared source phase. The pixel field is
computed on demand for a given canvas size. Parameter edits apply live.
"""
from __future__ import annotations
from dataclasses import dataclass

import numpy as np

from ..core.waves import advance_phase, brightness, interference_field, source_positions
from ..params import ParameterSpec, spec_table
from ..types import WaveState
from .base import Demo


@dataclass(frozen=True)
class WaveParams:
    wavelength: float = 30.0
    distance: float = 80.0
    amplitude: float = 128.0
    wave_speed: float = 25.0


class WaveDemo(Demo):
    name = "waves"
    params_type = WaveParams
    reset_on_change = False
    PARAMETERS = spec_table(
        ParameterSpec("wavelength", 30.0, 5.0, 100.0, "px"),
        ParameterSpec("distance", 80.0, 10.0, 200.0, "px"),
        ParameterSpec("amplitude", 128.0, 50.0, 128.0),
        ParameterSpec("wave_speed", 25.0, 10.0, 200.0),
    )

    def _initial_state(self) -> WaveState:
        return WaveState()

    def _advance(self, dt: float) -> bool:
        if dt > 0.0:
            s = self._state
            self._state = WaveState(
                phase=advance_phase(s.phase, self.params.wave_speed, dt),
                time=s.time + dt,
            )
        return False

    def field(self, width: int, height: int) -> np.ndarray:
        """Superposed field values, shape (height, width)."""
        p = self.params
        return interference_field(width, height, p.wavelength, p.distance, self._state.phase)

    def image(self, width: int, height: int) -> np.ndarray:
        """8-bit intensity grid, shape (height, width)."""
        return brightness(self.field(width, height), self.params.amplitude)

    def sources(self, width: int, height: int) -> np.ndarray:
        return source_positions(width, height, self.params.distance)
