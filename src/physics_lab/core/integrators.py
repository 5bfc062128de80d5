# MIT License (see LICENSE)
"""
Single-body time stepping for the laboratory demos.

All step functions take an immutable state record and return a new one,
so callers swap whole snapshots and readers never see a half-applied
update. A step with dt <= 0 returns the input state unchanged.

Available kernels:
- semi_implicit_euler: v += a·dt, then x += v·dt (symplectic Euler)
- pendulum_step: SHM pendulum with per-step velocity damping
- incline_step: block sliding down an incline until the track ends
- advance_linear_motion: closed-form uniform / uniformly accelerated motion
- projectile_trajectory + advance_playback: analytic projectile samples
  and playback through them

Reference:
    Semi-implicit Euler: https://en.wikipedia.org/wiki/Semi-implicit_Euler_method
"""
from __future__ import annotations
import math

import numpy as np

from ..constants import GRAVITY, PROJECTILE_SAMPLES, CHART_SAMPLES
from ..types import (
    PendulumState,
    InclineState,
    LinearMotionState,
    ProjectileState,
    TrajectorySample,
    ChartSeries,
)
from .forces import pendulum_angular_acceleration


def semi_implicit_euler(x, v, a, dt: float):
    """
    One semi-implicit Euler step.

    Velocity is updated first and the new velocity moves the position:
        v' = v + a·dt
        x' = x + v'·dt

    Works on scalars and numpy arrays alike.

    Returns:
        Tuple (x', v').
    """
    v = v + a * dt
    x = x + v * dt
    return x, v


def pendulum_step(
    state: PendulumState,
    length: float,
    gravity: float,
    dt: float,
    damping: float,
) -> PendulumState:
    """
    Advance the pendulum by dt.

    Order: α from the current angle, ω += α·dt, ω *= damping, θ += ω·dt.
    The damping multiplier is applied once per step regardless of dt.

    Args:
        state: Current pendulum state.
        length: L in meters.
        gravity: g in m/s².
        dt: Step in seconds.
        damping: Angular velocity multiplier per step (1.0 = lossless).
    """
    if dt <= 0.0:
        return state
    alpha = pendulum_angular_acceleration(state.angle, length, gravity)
    omega = (state.angular_velocity + alpha * dt) * damping
    return PendulumState(
        angle=state.angle + omega * dt,
        angular_velocity=omega,
        time=state.time + dt,
    )


def incline_step(
    state: InclineState,
    acceleration: float,
    dt: float,
    track_length: float,
) -> tuple[InclineState, bool]:
    """
    Slide the block down the incline by one step.

    Returns:
        Tuple (new_state, completed). On reaching the end of the track the
        position is clamped to track_length, velocity is zeroed and
        completed is True.
    """
    if dt <= 0.0:
        return state, False
    x, v = semi_implicit_euler(state.position, state.velocity, acceleration, dt)
    t = state.time + dt
    if x >= track_length:
        return InclineState(position=track_length, velocity=0.0, time=t), True
    return InclineState(position=x, velocity=v, time=t), False


def linear_motion_at(x0: float, v0: float, a: float, t: float) -> LinearMotionState:
    """
    Closed-form 1-D kinematics at time t.

        x(t) = x0 + v0·t + ½·a·t²
        v(t) = v0 + a·t
    """
    return LinearMotionState(
        position=x0 + v0 * t + 0.5 * a * t * t,
        velocity=v0 + a * t,
        time=t,
    )


def advance_linear_motion(
    state: LinearMotionState,
    x0: float,
    v0: float,
    a: float,
    dt: float,
    total_time: float,
) -> tuple[LinearMotionState, bool]:
    """
    Accumulate dt and evaluate the kinematics at the new time.

    Constant acceleration has an exact solution, so the state is
    evaluated from elapsed time rather than integrated; this keeps the
    final position exact when the run is clamped to total_time.

    Returns:
        Tuple (new_state, completed).
    """
    if dt <= 0.0:
        return state, False
    t = state.time + dt
    if t >= total_time:
        return linear_motion_at(x0, v0, a, total_time), True
    return linear_motion_at(x0, v0, a, t), False


def motion_series(
    x0: float,
    v0: float,
    a: float,
    total_time: float,
    samples: int = CHART_SAMPLES,
) -> ChartSeries:
    """Position and velocity sampled at samples + 1 evenly spaced times on [0, total_time]."""
    t = np.linspace(0.0, total_time, samples + 1)
    return ChartSeries(
        time=t,
        columns={
            "position": x0 + v0 * t + 0.5 * a * t * t,
            "velocity": v0 + a * t,
        },
    )


# =============================================================================
# Projectile
# =============================================================================

def time_of_flight(velocity: float, angle: float, height: float,
                   gravity: float = GRAVITY) -> float:
    """
    Positive root of y(t) = h + v0y·t - ½·g·t² = 0.

        T = (v0y + sqrt(v0y² + 2·g·h)) / g
    """
    v0y = velocity * math.sin(angle)
    return (v0y + math.sqrt(v0y * v0y + 2.0 * gravity * height)) / gravity


def projectile_trajectory(
    velocity: float,
    angle: float,
    height: float,
    gravity: float = GRAVITY,
    samples: int = PROJECTILE_SAMPLES,
) -> tuple[TrajectorySample, ...]:
    """
    Precompute the projectile path as ordered (time, x, y) samples.

    Samples are taken at t = i·T/samples for i < samples, keeping those
    with y >= 0, and the path always ends on the exact impact sample
    (T, v0x·T, 0.0).

    Args:
        velocity: Launch speed in m/s.
        angle: Launch angle in radians above horizontal.
        height: Launch height in meters (>= 0).
        gravity: g in m/s².
        samples: Number of subdivisions of the flight time.
    """
    v0x = velocity * math.cos(angle)
    v0y = velocity * math.sin(angle)
    T = time_of_flight(velocity, angle, height, gravity)
    if T <= 0.0:
        return (TrajectorySample(0.0, 0.0, 0.0),)

    out = []
    for i in range(samples):
        t = (i / samples) * T
        y = height + v0y * t - 0.5 * gravity * t * t
        if y >= 0.0:
            out.append(TrajectorySample(t, v0x * t, y))
    out.append(TrajectorySample(T, v0x * T, 0.0))
    return tuple(out)


def advance_playback(
    state: ProjectileState,
    dt: float,
    duration: float,
) -> tuple[ProjectileState, bool]:
    """
    Move the playback head forward by dt / duration of the full trajectory.

    Returns:
        Tuple (new_state, completed); completed once progress reaches 1.
    """
    if dt <= 0.0:
        return state, False
    progress = state.progress + dt / duration
    completed = progress >= 1.0
    return (
        ProjectileState(
            trajectory=state.trajectory,
            progress=1.0 if completed else progress,
            time=state.time + dt,
        ),
        completed,
    )
