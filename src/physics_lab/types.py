# MIT License (see LICENSE)
"""
Core type definitions for the physics laboratory.

Defines the data records every demo reads and writes:
- Status: lifecycle of a demo run.
- ChargeClass / Body: particle simulator population element.
- Frozen single-body state records (pendulum, incline, 1-D motion,
  projectile, waves). These are replaced wholesale on every step, so a
  snapshot handed to a renderer can never be partially updated.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum

import numpy as np

from .util import f64


class Status(Enum):
    """Lifecycle state of a demo."""
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    COMPLETED = "completed"


# =============================================================================
# Particle simulator
# =============================================================================

class ChargeClass(Enum):
    """
    Particle species drawn at population reset.

    Value is the unit charge. Mass, radius and display color follow the
    proton/electron/neutron analogy (masses in arbitrary units).
    """
    PROTON = 1
    NEUTRON = 0
    ELECTRON = -1

    @property
    def mass(self) -> float:
        return _CLASS_PROPS[self][0]

    @property
    def radius(self) -> float:
        return _CLASS_PROPS[self][1]

    @property
    def color(self) -> str:
        return _CLASS_PROPS[self][2]


_CLASS_PROPS = {
    ChargeClass.PROTON: (2.0, 3.0, "#38bdf8"),
    ChargeClass.ELECTRON: (1.0, 2.0, "#f43f5e"),
    ChargeClass.NEUTRON: (2.1, 3.0, "#a1a1aa"),
}


@dataclass
class Body:
    """
    A point particle of the N-body population.

    Attributes:
        position: [x, y] in pixels, inside [0, width] × [0, height].
        velocity: [vx, vy] in pixels per reference frame.
        radius: Display radius in pixels.
        mass: Mass (> 0).
        charge: Unit charge, one of -1, 0, +1.
        color: Display color (hex string).

    Note:
        Position and velocity are converted to float64 arrays on init.
    """
    position: np.ndarray | tuple[float, float] = (0.0, 0.0)
    velocity: np.ndarray | tuple[float, float] = (0.0, 0.0)
    radius: float = 3.0
    mass: float = 1.0
    charge: int = 0
    color: str = "#a1a1aa"

    def __post_init__(self) -> None:
        self.position = f64(self.position)
        self.velocity = f64(self.velocity)
        if self.mass <= 0:
            raise ValueError(f"Body mass must be > 0, got {self.mass}")

    @classmethod
    def of_class(cls, kind: ChargeClass, position, velocity) -> "Body":
        """Build a body with the mass, radius and color of a charge class."""
        return cls(
            position=position,
            velocity=velocity,
            radius=kind.radius,
            mass=kind.mass,
            charge=kind.value,
            color=kind.color,
        )


# =============================================================================
# Single-body state records
# =============================================================================

@dataclass(frozen=True)
class PendulumState:
    """Angle θ (rad) from vertical, angular velocity ω (rad/s), elapsed time (s)."""
    angle: float
    angular_velocity: float = 0.0
    time: float = 0.0


@dataclass(frozen=True)
class InclineState:
    """Block position (m) along the incline from the top, its velocity and elapsed time."""
    position: float = 0.0
    velocity: float = 0.0
    time: float = 0.0


@dataclass(frozen=True)
class LinearMotionState:
    """Position (m), velocity (m/s) and elapsed time (s) of 1-D motion."""
    position: float
    velocity: float
    time: float = 0.0


@dataclass(frozen=True)
class TrajectorySample:
    time: float
    x: float
    y: float


@dataclass(frozen=True)
class ProjectileState:
    """
    Playback position inside a precomputed projectile trajectory.

    Attributes:
        trajectory: Full sample sequence, ending on the ground (y == 0).
        progress: Fraction in [0, 1] of the playback completed.
        time: Wall-clock seconds of playback since the last reset.
    """
    trajectory: tuple[TrajectorySample, ...]
    progress: float = 0.0
    time: float = 0.0

    @property
    def visible_count(self) -> int:
        """Number of leading samples revealed at the current progress."""
        n = len(self.trajectory)
        return min(n, int(np.ceil(n * self.progress)))

    @property
    def visible(self) -> tuple[TrajectorySample, ...]:
        return self.trajectory[: self.visible_count]

    @property
    def current(self) -> TrajectorySample:
        """Sample at the head of the visible trajectory (launch point before playback)."""
        return self.trajectory[max(0, self.visible_count - 1)]


@dataclass(frozen=True)
class WaveState:
    """Shared source phase (rad) and elapsed time (s) of the interference pattern."""
    phase: float = 0.0
    time: float = 0.0


@dataclass(frozen=True, eq=False)
class ParticleState:
    """
    Read-only snapshot of the N-body population.

    Arrays are copies; mutating them does not affect the engine.
    """
    positions: np.ndarray
    velocities: np.ndarray
    masses: np.ndarray
    charges: np.ndarray
    radii: np.ndarray
    colors: tuple[str, ...]
    time: float = 0.0

    def __len__(self) -> int:
        return len(self.masses)


@dataclass
class ChartSeries:
    """Sampled time series (time, and one or more named columns) for plotting."""
    time: np.ndarray
    columns: dict[str, np.ndarray] = field(default_factory=dict)
