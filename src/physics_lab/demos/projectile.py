# MIT License (see LICENSE)
"""
Projectile launched from a given height over flat ground.

The path has a closed-form solution, so it is computed once per
parameter set as a finite sequence of (t, x, y) samples ending at the
impact point. Running the demo only advances a playback fraction through
that sequence over a fixed wall-clock duration; nothing is integrated.
"""
from __future__ import annotations
from dataclasses import dataclass
import math

from ..constants import GRAVITY, PROJECTILE_SAMPLES, PROJECTILE_PLAYBACK_DURATION
from ..core.integrators import advance_playback, projectile_trajectory, time_of_flight
from ..params import ParameterSpec, spec_table
from ..types import ProjectileState
from ..util import deg2rad
from .base import Demo


@dataclass(frozen=True)
class ProjectileParams:
    velocity: float = 50.0
    angle: float = 45.0
    height: float = 0.0


class ProjectileDemo(Demo):
    """
    Projectile demo.

    Args:
        duration: Wall-clock seconds to play back the whole flight.
        samples: Trajectory resolution (subdivisions of the flight time).
        gravity: g in m/s².
        **kwargs: Forwarded to Demo.
    """
    name = "projectile"
    params_type = ProjectileParams
    PARAMETERS = spec_table(
        ParameterSpec("velocity", 50.0, 1.0, 200.0, "m/s"),
        ParameterSpec("angle", 45.0, 0.0, 90.0, "deg"),
        ParameterSpec("height", 0.0, 0.0, 100.0, "m"),
    )

    def __init__(self, duration: float = PROJECTILE_PLAYBACK_DURATION,
                 samples: int = PROJECTILE_SAMPLES, gravity: float = GRAVITY,
                 **kwargs) -> None:
        if duration <= 0:
            raise ValueError(f"duration must be > 0, got {duration}")
        self.duration = duration
        self.samples = samples
        self.gravity = gravity
        super().__init__(**kwargs)

    def _initial_state(self) -> ProjectileState:
        p = self.params
        path = projectile_trajectory(p.velocity, deg2rad(p.angle), p.height,
                                     self.gravity, self.samples)
        return ProjectileState(trajectory=path)

    def _advance(self, dt: float) -> bool:
        self._state, completed = advance_playback(self._state, dt, self.duration)
        return completed

    def derived(self) -> dict[str, float]:
        """Time of flight, apex time and height, and horizontal range."""
        p = self.params
        theta = deg2rad(p.angle)
        v0y = p.velocity * math.sin(theta)
        T = time_of_flight(p.velocity, theta, p.height, self.gravity)
        return {
            "time_of_flight": T,
            "time_to_apex": v0y / self.gravity,
            "max_height": p.height + v0y * v0y / (2.0 * self.gravity),
            "range": p.velocity * math.cos(theta) * T,
        }
