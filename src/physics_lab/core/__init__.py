# MIT License (see LICENSE)
"""
Core simulation components.

This subpackage provides:
    - Clock: animation timestamps to bounded integration steps.
    - Force models: gravity, SHM restoring term, incline friction,
      pairwise gravity + electrostatics.
    - Integrators: semi-implicit Euler kernels and the analytic
      projectile / 1-D motion solutions.
    - Waves: two-source interference field.
    - Invariants: energy and momentum read-outs.

Typical usage:
    from physics_lab.core import SimulationClock, pendulum_step

    clock = SimulationClock()
    dt = clock.tick(timestamp_ms)
    state = pendulum_step(state, length=2.0, gravity=9.81, dt=dt, damping=0.999)
"""
from .clock import SimulationClock
from .forces import (
    uniform_gravity,
    pendulum_angular_acceleration,
    incline_forces,
    incline_acceleration,
    pairwise_forces_on,
)
from .integrators import (
    semi_implicit_euler,
    pendulum_step,
    incline_step,
    linear_motion_at,
    advance_linear_motion,
    motion_series,
    time_of_flight,
    projectile_trajectory,
    advance_playback,
)
from .waves import (
    source_positions,
    advance_phase,
    interference_field,
    brightness,
)
from .invariants import (
    shm_potential_energy,
    pendulum_kinetic_energy,
    pendulum_energy,
    kinetic_energy,
    linear_momentum,
)

__all__ = [
    # Clock
    "SimulationClock",
    # Forces
    "uniform_gravity",
    "pendulum_angular_acceleration",
    "incline_forces",
    "incline_acceleration",
    "pairwise_forces_on",
    # Integrators
    "semi_implicit_euler",
    "pendulum_step",
    "incline_step",
    "linear_motion_at",
    "advance_linear_motion",
    "motion_series",
    "time_of_flight",
    "projectile_trajectory",
    "advance_playback",
    # Waves
    "source_positions",
    "advance_phase",
    "interference_field",
    "brightness",
    # Invariants
    "shm_potential_energy",
    "pendulum_kinetic_energy",
    "pendulum_energy",
    "kinetic_energy",
    "linear_momentum",
]
