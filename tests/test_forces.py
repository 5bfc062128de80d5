import math

import numpy as np
import pytest

from physics_lab.core.forces import (
    incline_acceleration,
    incline_forces,
    pairwise_forces_on,
    pendulum_angular_acceleration,
    uniform_gravity,
)


def test_uniform_gravity_points_down():
    assert np.allclose(uniform_gravity(9.81), [0.0, -9.81])


def test_pendulum_restoring_term_is_linear():
    """α = -(g/L)·θ, also at large angles (small-angle model on purpose)."""
    assert pendulum_angular_acceleration(0.1, 2.0, 9.81) == pytest.approx(-0.4905)
    big = math.radians(90)
    assert pendulum_angular_acceleration(big, 1.0, 10.0) == pytest.approx(-10.0 * big)


def test_incline_acceleration_matches_analytic():
    """
    a = g·(sinθ - μ·cosθ) for θ=30°, m=5, μ=0.2.
    """
    theta = math.radians(30)
    g = 9.81
    a_exp = g * (math.sin(theta) - 0.2 * math.cos(theta))
    a = incline_acceleration(theta, 5.0, 0.2, g)
    assert round(a, 3) == round(a_exp, 3)
    # Independent of mass
    assert incline_acceleration(theta, 17.0, 0.2, g) == pytest.approx(a)


@pytest.mark.parametrize("angle_deg, mu", [(10, 0.5), (30, 1.0), (45, 1.0)])
def test_incline_acceleration_clamped_when_friction_holds(angle_deg, mu):
    theta = math.radians(angle_deg)
    assert math.sin(theta) <= mu * math.cos(theta)
    assert incline_acceleration(theta, 5.0, mu) == 0.0


def test_incline_force_breakdown():
    theta = math.radians(30)
    f = incline_forces(theta, 2.0, 0.1, 10.0)
    assert f["parallel"] == pytest.approx(10.0)
    assert f["normal"] == pytest.approx(20.0 * math.cos(theta))
    assert f["friction"] == pytest.approx(0.1 * f["normal"])
    assert f["net"] == pytest.approx(f["parallel"] - f["friction"])


def _pair(q0, q1, sep=100.0):
    positions = np.array([[100.0, 100.0], [100.0 + sep, 100.0]])
    masses = np.array([1.0, 1.0])
    charges = np.array([q0, q1], dtype=np.float64)
    return positions, masses, charges


def test_opposite_charges_attract():
    pos, m, q = _pair(1, -1)
    f0 = pairwise_forces_on(0, pos, m, q, gravity_coef=0.0, electro_coef=1.0, k=10.0)
    f1 = pairwise_forces_on(1, pos, m, q, gravity_coef=0.0, electro_coef=1.0, k=10.0)
    # F = k·|q0·q1| / r² = 10 / 100² toward the other body
    assert f0[0] == pytest.approx(1e-3)
    assert f1[0] == pytest.approx(-1e-3)
    assert f0[1] == 0.0


def test_like_charges_repel():
    pos, m, q = _pair(-1, -1)
    f0 = pairwise_forces_on(0, pos, m, q, gravity_coef=0.0, electro_coef=2.0)
    assert f0[0] < 0.0


def test_gravity_attracts_neutral_bodies():
    pos, m, q = _pair(0, 0, sep=10.0)
    f0 = pairwise_forces_on(0, pos, m, q, gravity_coef=1.0, electro_coef=5.0, G=0.5)
    # F = G·g·m0·m1 / r² = 0.5 / 100
    assert f0[0] == pytest.approx(5e-3)


def test_pairs_within_min_distance_are_skipped():
    pos, m, q = _pair(1, -1, sep=1.5)
    f0 = pairwise_forces_on(0, pos, m, q, gravity_coef=1.0, electro_coef=5.0, min_distance=2.0)
    assert np.array_equal(f0, [0.0, 0.0])


def test_coincident_bodies_do_not_blow_up():
    positions = np.array([[50.0, 50.0], [50.0, 50.0], [80.0, 50.0]])
    masses = np.array([1.0, 2.0, 1.0])
    charges = np.array([1.0, 1.0, -1.0])
    f = pairwise_forces_on(0, positions, masses, charges, 1.0, 1.0)
    assert np.all(np.isfinite(f))
    assert f[0] > 0.0
