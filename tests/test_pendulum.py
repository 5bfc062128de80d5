import math

import numpy as np
import pytest

from physics_lab.core.integrators import pendulum_step
from physics_lab.core.invariants import pendulum_energy
from physics_lab.demos import PendulumDemo
from physics_lab.driver import ManualScheduler
from physics_lab.types import PendulumState, Status


def test_energy_conserved_without_damping():
    """
    SHM energy E = ½·m·L²·ω² + ½·m·g·L·θ² stays constant (within the
    bounded oscillation of symplectic Euler) over 1000 fixed steps.
    """
    m, g, L = 1.0, 9.81, 2.0
    dt = 1e-3
    state = PendulumState(angle=0.1)
    e0 = pendulum_energy(m, g, L, state.angle, state.angular_velocity)

    worst = 0.0
    for _ in range(1000):
        state = pendulum_step(state, L, g, dt, damping=1.0)
        e = pendulum_energy(m, g, L, state.angle, state.angular_velocity)
        worst = max(worst, abs(e - e0) / e0)

    print("max relative energy error", worst)
    assert worst <= 1e-2
    assert state.time == pytest.approx(1.0)


def test_damping_removes_energy():
    m, g, L = 1.0, 9.81, 1.0
    state = PendulumState(angle=0.2)
    e0 = pendulum_energy(m, g, L, state.angle, state.angular_velocity)
    for _ in range(2000):
        state = pendulum_step(state, L, g, 1e-3, damping=0.999)
    assert pendulum_energy(m, g, L, state.angle, state.angular_velocity) < 0.5 * e0


def test_small_angle_period():
    """θ(t) = θ0·cos(√(g/L)·t); after one period the angle returns near θ0."""
    g, L = 9.81, 1.0
    T = 2 * math.pi * math.sqrt(L / g)
    n = 10_000
    dt = T / n
    state = PendulumState(angle=0.05)
    for _ in range(n):
        state = pendulum_step(state, L, g, dt, damping=1.0)
    assert state.angle == pytest.approx(0.05, rel=1e-2)


def test_zero_dt_is_a_no_op():
    state = PendulumState(angle=0.3, angular_velocity=-0.7, time=1.25)
    assert pendulum_step(state, 2.0, 9.81, 0.0, damping=0.999) is state


def test_demo_energy_through_frames():
    """Drive the demo with 1 ms frames; the undamped demo keeps its energy."""
    scheduler = ManualScheduler()
    demo = PendulumDemo(scheduler=scheduler, damping=1.0, initial_angle=5.0, length=1.0)
    e0 = demo.derived()["total_energy"]
    demo.start()
    scheduler.run(frames=1001, frame_ms=1.0)

    d = demo.derived()
    e = d["kinetic_energy"] + d["potential_energy"]
    assert demo.status is Status.RUNNING
    assert demo.get_state().time == pytest.approx(1.0)
    assert e == pytest.approx(e0, rel=1e-2)


def test_demo_derived_values():
    demo = PendulumDemo(length=2.0, gravity=9.81, mass=1.0, initial_angle=30.0)
    d = demo.derived()
    assert d["period"] == pytest.approx(2 * math.pi * math.sqrt(2.0 / 9.81))
    assert d["frequency"] == pytest.approx(1.0 / d["period"])
    assert d["kinetic_energy"] == 0.0
    assert d["potential_energy"] == pytest.approx(d["total_energy"])


def test_demo_never_completes():
    scheduler = ManualScheduler()
    demo = PendulumDemo(scheduler=scheduler)
    demo.start()
    assert scheduler.run(frames=600) == 600
    assert demo.status is Status.RUNNING
    assert np.isfinite(demo.get_state().angle)
