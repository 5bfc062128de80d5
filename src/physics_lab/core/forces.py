# MIT License (see LICENSE)
"""
Force models for the laboratory demos.

Every function here is pure: it maps the current parameters and state to
a force or acceleration and has no side effects or memory.

Key concepts:
- The pendulum uses the linearized small-angle (SHM) restoring term
  α = -(g/L)·θ for every amplitude, including large initial angles.
  This is an intentional simplification; the exact equation would use
  sin(θ).
- Incline friction can only oppose motion down the slope; it never
  produces a net backward force.
- Pairwise gravity is attractive; pairwise electrostatics is subtracted
  from the attractive accumulation so like charges repel.
- Pairs closer than min_distance contribute nothing (singularity guard).
"""
from __future__ import annotations
import math

import numpy as np

from ..constants import GRAVITY, G_NBODY, K_NBODY, MIN_DISTANCE


def uniform_gravity(g: float = GRAVITY) -> np.ndarray:
    """Acceleration vector [ax, ay] of uniform gravity with y pointing up."""
    return np.array([0.0, -g], dtype=np.float64)


def pendulum_angular_acceleration(angle: float, length: float, gravity: float) -> float:
    """
    Restoring angular acceleration under the small-angle approximation.

    Implements α = -(g/L)·θ.

    Args:
        angle: Displacement θ from vertical in radians.
        length: Pendulum length L in meters (> 0).
        gravity: Gravitational acceleration g in m/s².
    """
    return -(gravity / length) * angle


def incline_forces(angle: float, mass: float, friction: float,
                   gravity: float = GRAVITY) -> dict[str, float]:
    """
    Decompose the forces on a block resting on an incline.

    Args:
        angle: Incline angle θ in radians.
        mass: Block mass m in kg.
        friction: Kinetic friction coefficient μ.
        gravity: g in m/s².

    Returns:
        Dict with 'parallel' (m·g·sinθ), 'normal' (m·g·cosθ),
        'friction' (μ·N), 'net' (max(0, parallel - friction)) in newtons.
    """
    parallel = mass * gravity * math.sin(angle)
    normal = mass * gravity * math.cos(angle)
    friction_force = friction * normal
    return {
        "parallel": parallel,
        "normal": normal,
        "friction": friction_force,
        "net": max(0.0, parallel - friction_force),
    }


def incline_acceleration(angle: float, mass: float, friction: float,
                         gravity: float = GRAVITY) -> float:
    """
    Net acceleration of the block down the incline.

    Equals g·(sinθ - μ·cosθ) when positive and 0 otherwise.
    """
    return incline_forces(angle, mass, friction, gravity)["net"] / mass


def pairwise_forces_on(
    i: int,
    positions: np.ndarray,
    masses: np.ndarray,
    charges: np.ndarray,
    gravity_coef: float,
    electro_coef: float,
    G: float = G_NBODY,
    k: float = K_NBODY,
    min_distance: float = MIN_DISTANCE,
) -> np.ndarray:
    """
    Net gravitational plus electrostatic force on body i from all others.

    For every j ≠ i with separation r > min_distance:
        F_grav = G·g·mᵢ·mⱼ / r²       (toward j)
        F_elec = k·e·qᵢ·qⱼ / r²       (subtracted: like charges repel)

    Args:
        i: Index of the body receiving the force.
        positions: [N, 2] positions.
        masses: [N] masses.
        charges: [N] charges.
        gravity_coef: User gravity coefficient g (0 disables gravity).
        electro_coef: User electrostatic coefficient e (0 disables).
        G, k: Scaled coupling constants.
        min_distance: Pairs at or below this separation are skipped.

    Returns:
        Force vector [Fx, Fy]. Zero when no pair is in range.

    Complexity: O(N) per call, O(N²) for the whole population.
    """
    d = positions - positions[i]
    dist2 = np.einsum("ij,ij->i", d, d)
    dist = np.sqrt(dist2)
    # The self-pair has dist == 0 and always fails this test.
    mask = dist > min_distance
    if not np.any(mask):
        return np.zeros(2, dtype=np.float64)

    d = d[mask]
    dist = dist[mask]
    dist2 = dist2[mask]
    f_grav = G * gravity_coef * masses[i] * masses[mask] / dist2
    f_elec = k * electro_coef * charges[i] * charges[mask] / dist2
    magnitude = (f_grav - f_elec) / dist
    return (magnitude[:, None] * d).sum(axis=0)
