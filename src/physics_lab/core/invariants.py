# MIT License (see LICENSE)
"""
Energy and momentum read-outs for the demos.

Used by the pendulum energy bars and for verifying integrator behaviour:
with damping disabled the SHM energy should stay constant within the
integration error, and a closed N-body population far from the walls
should keep its total momentum.
"""
from __future__ import annotations
import numpy as np


def shm_potential_energy(mass: float, gravity: float, length: float, angle: float) -> float:
    """
    Potential energy of the pendulum under the small-angle approximation.

    U = ½·m·g·L·θ²
    """
    return 0.5 * mass * gravity * length * angle * angle


def pendulum_kinetic_energy(mass: float, length: float, angular_velocity: float) -> float:
    """T = ½·m·(L·ω)²"""
    v = length * angular_velocity
    return 0.5 * mass * v * v


def pendulum_energy(mass: float, gravity: float, length: float,
                    angle: float, angular_velocity: float) -> float:
    """Total mechanical energy T + U of the SHM pendulum in joules."""
    return (pendulum_kinetic_energy(mass, length, angular_velocity)
            + shm_potential_energy(mass, gravity, length, angle))


def kinetic_energy(masses: np.ndarray, velocities: np.ndarray) -> float:
    """
    Total kinetic energy of a population.

    T = Σ ½·m·v²
    """
    v2 = np.einsum("ij,ij->i", velocities, velocities)
    return float(0.5 * np.dot(masses, v2))


def linear_momentum(masses: np.ndarray, velocities: np.ndarray) -> np.ndarray:
    """Total momentum vector [Px, Py] = Σ m·v."""
    return (masses[:, None] * velocities).sum(axis=0)
