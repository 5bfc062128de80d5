# MIT License (see LICENSE)
"""
Pairwise N-body engine for the particle simulator.

The NBodyEngine owns a fixed-size population of charged, massive point
particles confined to a rectangle [0, width] × [0, height]. It manages:
- Population creation (random positions, velocities and charge classes).
- The per-tick update, body by body in index order:
    1. Accumulate gravity + electrostatic force from every other body
       (pairs closer than min_distance are skipped).
    2. a = F/m, then semi-implicit Euler: v += a·dt, x += v·dt.
    3. Wall bounce: a component that left the domain is reversed and
       scaled by the restitution factor, and the position is clamped.
  Bodies later in the order see the already-updated positions of the
  earlier ones within the same tick.

Time is measured in reference frames: dt = 1 is one 60 Hz frame.

Complexity is O(N²) per tick. The population is small (50); a spatial
grid or Barnes-Hut tree inside _net_force would be the place to scale up.
"""
from __future__ import annotations
from dataclasses import dataclass, field
import logging

import numpy as np

from .constants import (
    G_NBODY,
    K_NBODY,
    MIN_DISTANCE,
    RESTITUTION,
    POPULATION_SIZE,
    DOMAIN_WIDTH,
    DOMAIN_HEIGHT,
)
from .core.forces import pairwise_forces_on
from .core.integrators import semi_implicit_euler
from .profiler import Profiler
from .types import Body, ChargeClass, ParticleState

logger = logging.getLogger(__name__)

_CLASSES = (ChargeClass.ELECTRON, ChargeClass.NEUTRON, ChargeClass.PROTON)


@dataclass
class NBodyEngine:
    """
    Charged N-body population in a bounded box.

    Attributes:
        width: Domain width in pixels (> 0).
        height: Domain height in pixels (> 0).
        gravity_coef: User gravity coefficient (0 disables gravity).
        electro_coef: User electrostatic coefficient (0 disables it).
        G: Scaled gravitational constant.
        k: Scaled electrostatic constant.
        min_distance: Singularity guard for pair interactions.
        restitution: Fraction of velocity kept after a wall bounce.
        profiler: Optional Profiler instance for timing statistics.
    """
    width: float = DOMAIN_WIDTH
    height: float = DOMAIN_HEIGHT
    gravity_coef: float = 0.1
    electro_coef: float = 1.0
    G: float = G_NBODY
    k: float = K_NBODY
    min_distance: float = MIN_DISTANCE
    restitution: float = RESTITUTION
    profiler: Profiler | None = None

    # Population arrays, index = identity
    positions: np.ndarray = field(default_factory=lambda: np.zeros((0, 2)))
    velocities: np.ndarray = field(default_factory=lambda: np.zeros((0, 2)))
    masses: np.ndarray = field(default_factory=lambda: np.zeros(0))
    charges: np.ndarray = field(default_factory=lambda: np.zeros(0))
    radii: np.ndarray = field(default_factory=lambda: np.zeros(0))
    colors: tuple[str, ...] = ()
    time: float = 0.0

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Domain must have positive size, got {self.width}x{self.height}")

    def __len__(self) -> int:
        return len(self.masses)

    # ------------------------------------------------------------------
    # Population
    # ------------------------------------------------------------------

    def set_bodies(self, bodies: list[Body]) -> None:
        """Replace the whole population with the given bodies."""
        self.positions = np.array([b.position for b in bodies], dtype=np.float64).reshape(-1, 2)
        self.velocities = np.array([b.velocity for b in bodies], dtype=np.float64).reshape(-1, 2)
        self.masses = np.array([b.mass for b in bodies], dtype=np.float64)
        self.charges = np.array([b.charge for b in bodies], dtype=np.float64)
        self.radii = np.array([b.radius for b in bodies], dtype=np.float64)
        self.colors = tuple(b.color for b in bodies)
        self.time = 0.0

    def populate(self, n: int = POPULATION_SIZE, rng: np.random.Generator | None = None) -> None:
        """
        Replace the population with n random bodies.

        Charge class is uniform over {-1, 0, +1}; positions are uniform in
        the domain and velocity components uniform in [-1, 1).
        """
        rng = rng if rng is not None else np.random.default_rng()
        bodies = []
        for _ in range(n):
            kind = _CLASSES[int(rng.integers(0, 3))]
            pos = (rng.random() * self.width, rng.random() * self.height)
            vel = ((rng.random() - 0.5) * 2.0, (rng.random() - 0.5) * 2.0)
            bodies.append(Body.of_class(kind, pos, vel))
        self.set_bodies(bodies)
        logger.info("populated %d bodies in %gx%g domain", n, self.width, self.height)

    def bodies(self) -> list[Body]:
        """Population as Body records (copies)."""
        return [
            Body(
                position=self.positions[i].copy(),
                velocity=self.velocities[i].copy(),
                radius=float(self.radii[i]),
                mass=float(self.masses[i]),
                charge=int(self.charges[i]),
                color=self.colors[i],
            )
            for i in range(len(self))
        ]

    def snapshot(self) -> ParticleState:
        """Read-only copy of the population for renderers."""
        return ParticleState(
            positions=self.positions.copy(),
            velocities=self.velocities.copy(),
            masses=self.masses.copy(),
            charges=self.charges.copy(),
            radii=self.radii.copy(),
            colors=self.colors,
            time=self.time,
        )

    # ------------------------------------------------------------------
    # Stepping
    # ------------------------------------------------------------------

    def _net_force(self, i: int) -> np.ndarray:
        return pairwise_forces_on(
            i,
            self.positions,
            self.masses,
            self.charges,
            self.gravity_coef,
            self.electro_coef,
            G=self.G,
            k=self.k,
            min_distance=self.min_distance,
        )

    def _bounce(self, i: int) -> None:
        """Reflect and damp velocity components that left the domain, then clamp."""
        pos = self.positions[i]
        vel = self.velocities[i]
        for axis, limit in ((0, self.width), (1, self.height)):
            if pos[axis] < 0.0 or pos[axis] > limit:
                vel[axis] *= -self.restitution
                pos[axis] = min(max(pos[axis], 0.0), limit)

    def step(self, dt: float = 1.0) -> None:
        """
        Advance the population by dt reference frames.

        A non-positive dt leaves the state untouched.
        """
        if dt <= 0.0 or len(self) == 0:
            return

        for i in range(len(self)):
            if self.profiler is not None:
                with self.profiler.section("forces_integrate"):
                    self._advance_body(i, dt)
                with self.profiler.section("boundaries"):
                    self._bounce(i)
            else:
                self._advance_body(i, dt)
                self._bounce(i)
        self.time += dt

    def _advance_body(self, i: int, dt: float) -> None:
        a = self._net_force(i) / self.masses[i]
        x, v = semi_implicit_euler(self.positions[i], self.velocities[i], a, dt)
        self.positions[i] = x
        self.velocities[i] = v
