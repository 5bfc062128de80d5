# MIT License (see LICENSE)
"""
Particle simulator: 50 charged bodies under gravity and electrostatics.

Wraps NBodyEngine in the demo lifecycle. The gravity and electrostatic
coefficients apply live, so moving a slider changes the forces from the
next step without resetting. Only reset() replaces the population.

The population is drawn from a seeded generator and the seed is kept, so
reset() always reproduces the same population. reseed() draws a new one.
"""
from __future__ import annotations
from dataclasses import dataclass, replace
import logging

import numpy as np

from ..constants import DOMAIN_WIDTH, DOMAIN_HEIGHT, POPULATION_SIZE, REFERENCE_FPS
from ..core.invariants import kinetic_energy, linear_momentum
from ..nbody import NBodyEngine
from ..params import ParameterSpec, spec_table
from ..profiler import Profiler
from ..types import ParticleState
from .base import Demo

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParticleParams:
    gravity: float = 0.1
    electrostatics: float = 1.0


class ParticleDemo(Demo):
    """
    N-body particle demo.

    Args:
        width, height: Domain size in pixels.
        population: Number of bodies created on reset.
        seed: Seed for the population generator; None draws a fresh one.
        profiler: Optional Profiler handed to the engine.
        **kwargs: Forwarded to Demo.
    """
    name = "particles"
    params_type = ParticleParams
    reset_on_change = False
    PARAMETERS = spec_table(
        ParameterSpec("gravity", 0.1, 0.0, 1.0),
        ParameterSpec("electrostatics", 1.0, 0.0, 5.0),
    )

    def __init__(
        self,
        width: float = DOMAIN_WIDTH,
        height: float = DOMAIN_HEIGHT,
        population: int = POPULATION_SIZE,
        seed: int | None = None,
        profiler: Profiler | None = None,
        **kwargs,
    ) -> None:
        self.engine = NBodyEngine(width=width, height=height, profiler=profiler)
        self.population = population
        self.seed = self._draw_seed() if seed is None else seed
        super().__init__(**kwargs)

    @staticmethod
    def _draw_seed() -> int:
        return int(np.random.SeedSequence().generate_state(1)[0])

    def reseed(self, seed: int | None = None) -> None:
        """Switch to a new population seed and reset."""
        self.seed = self._draw_seed() if seed is None else seed
        logger.debug("particles reseeded with %d", self.seed)
        self.reset()

    def _sync_coefficients(self) -> None:
        self.engine.gravity_coef = self.params.gravity
        self.engine.electro_coef = self.params.electrostatics

    def _initial_state(self) -> ParticleState:
        self._sync_coefficients()
        self.engine.populate(self.population, np.random.default_rng(self.seed))
        self._elapsed = 0.0
        return self.engine.snapshot()

    def _parameter_changed(self, name: str) -> None:
        self._sync_coefficients()

    def _advance(self, dt: float) -> bool:
        if dt > 0.0:
            # At most one reference frame per engine step; a clamped 0.1 s
            # frame runs as six unit steps plus any fractional remainder.
            frames = dt * REFERENCE_FPS
            while frames > 0.0:
                h = min(1.0, frames)
                self.engine.step(h)
                frames -= h
            self._elapsed += dt
            # Engine time counts reference frames; the demo reports seconds.
            self._state = replace(self.engine.snapshot(), time=self._elapsed)
        return False

    def derived(self) -> dict[str, float]:
        s = self._state
        p = linear_momentum(s.masses, s.velocities)
        return {
            "kinetic_energy": kinetic_energy(s.masses, s.velocities),
            "momentum_x": float(p[0]),
            "momentum_y": float(p[1]),
        }
