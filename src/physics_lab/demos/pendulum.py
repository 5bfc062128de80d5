# MIT License (see LICENSE)
"""
Simple pendulum under the small-angle (SHM) approximation.

The restoring term is linear in θ even for large initial angles (up to
90°), so period and energies follow the SHM formulas. A fixed damping
multiplier removes a little energy every step; the pendulum never
completes on its own and runs until paused.
"""
from __future__ import annotations
from dataclasses import dataclass
import math

from ..constants import GRAVITY, PENDULUM_DAMPING
from ..core.integrators import pendulum_step
from ..core.invariants import pendulum_kinetic_energy, shm_potential_energy
from ..params import ParameterSpec, spec_table
from ..types import PendulumState
from ..util import deg2rad
from .base import Demo


@dataclass(frozen=True)
class PendulumParams:
    length: float = 2.0
    mass: float = 1.0
    initial_angle: float = 30.0
    gravity: float = GRAVITY


class PendulumDemo(Demo):
    """
    Pendulum demo.

    Args:
        damping: Angular velocity multiplier per step. Fixed for the
            demo's lifetime; 1.0 gives a lossless pendulum.
        **kwargs: Forwarded to Demo.
    """
    name = "pendulum"
    params_type = PendulumParams
    PARAMETERS = spec_table(
        ParameterSpec("length", 2.0, 0.5, 5.0, "m"),
        ParameterSpec("mass", 1.0, 0.1, 5.0, "kg"),
        ParameterSpec("initial_angle", 30.0, 1.0, 90.0, "deg"),
        ParameterSpec("gravity", GRAVITY, 1.0, 25.0, "m/s²"),
    )

    def __init__(self, damping: float = PENDULUM_DAMPING, **kwargs) -> None:
        self.damping = damping
        super().__init__(**kwargs)

    def _initial_state(self) -> PendulumState:
        return PendulumState(angle=deg2rad(self.params.initial_angle))

    def _advance(self, dt: float) -> bool:
        p = self.params
        self._state = pendulum_step(self._state, p.length, p.gravity, dt, self.damping)
        return False

    def derived(self) -> dict[str, float]:
        """Period, frequency and SHM energies (J) at the current state."""
        p = self.params
        s = self._state
        period = 2.0 * math.pi * math.sqrt(p.length / p.gravity)
        theta0 = deg2rad(p.initial_angle)
        return {
            "period": period,
            "frequency": 1.0 / period,
            "potential_energy": shm_potential_energy(p.mass, p.gravity, p.length, s.angle),
            "kinetic_energy": pendulum_kinetic_energy(p.mass, p.length, s.angular_velocity),
            "total_energy": shm_potential_energy(p.mass, p.gravity, p.length, theta0),
        }
