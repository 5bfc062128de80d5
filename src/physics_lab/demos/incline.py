# MIT License (see LICENSE)
"""
Block sliding down an inclined plane with kinetic friction.

The acceleration is constant for a given angle, mass and friction
coefficient, and is zero when friction can hold the block. The run
completes when the block reaches the end of the track.
"""
from __future__ import annotations
from dataclasses import dataclass

from ..constants import GRAVITY, INCLINE_TRACK_LENGTH
from ..core.forces import incline_acceleration, incline_forces
from ..core.integrators import incline_step
from ..params import ParameterSpec, spec_table
from ..types import InclineState
from ..util import deg2rad
from .base import Demo


@dataclass(frozen=True)
class InclineParams:
    angle: float = 30.0
    mass: float = 5.0
    friction: float = 0.2


class InclineDemo(Demo):
    name = "incline"
    params_type = InclineParams
    PARAMETERS = spec_table(
        ParameterSpec("angle", 30.0, 5.0, 60.0, "deg"),
        ParameterSpec("mass", 5.0, 1.0, 20.0, "kg"),
        ParameterSpec("friction", 0.2, 0.0, 1.0),
    )

    def __init__(self, track_length: float = INCLINE_TRACK_LENGTH,
                 gravity: float = GRAVITY, **kwargs) -> None:
        self.track_length = track_length
        self.gravity = gravity
        super().__init__(**kwargs)

    @property
    def acceleration(self) -> float:
        p = self.params
        return incline_acceleration(deg2rad(p.angle), p.mass, p.friction, self.gravity)

    def _initial_state(self) -> InclineState:
        return InclineState()

    def _advance(self, dt: float) -> bool:
        self._state, completed = incline_step(self._state, self.acceleration, dt, self.track_length)
        return completed

    def derived(self) -> dict[str, float]:
        p = self.params
        forces = incline_forces(deg2rad(p.angle), p.mass, p.friction, self.gravity)
        return {
            "parallel_force": forces["parallel"],
            "normal_force": forces["normal"],
            "friction_force": forces["friction"],
            "net_force": forces["net"],
            "acceleration": forces["net"] / p.mass,
        }
