# MIT License (see LICENSE)
"""
physics_lab - Real-time simulation core for interactive physics demos.

This package advances the state of seven classroom demonstrations frame
by frame from wall-clock timestamps. Rendering, widgets and charts are
left to the embedding application, which reads state snapshots.

Main entry points:
    - Demo subclasses: PendulumDemo, InclineDemo, ProjectileDemo,
      UniformMotionDemo, AcceleratedMotionDemo, ParticleDemo, WaveDemo.
    - NBodyEngine: pairwise gravity + electrostatics in a bounded box.
    - SimulationClock: timestamps to bounded integration steps.
    - ManualScheduler: explicit frame driver for scripts and tests.

Submodules:
    - core: Clock, force models, integrators, invariants, wave field.
    - demos: Demo lifecycle and the seven demonstrations.
    - driver: Frame scheduler interface.
    - recorder: Bounded history buffer for charting.

Example:
    from physics_lab import PendulumDemo, ManualScheduler

    scheduler = ManualScheduler()
    demo = PendulumDemo(scheduler=scheduler, length=1.5)
    demo.start()
    scheduler.run(frames=60)
    print(demo.get_state().angle)
"""
from .core.clock import SimulationClock
from .demos import (
    Demo,
    DEMOS,
    create_demo,
    PendulumDemo,
    InclineDemo,
    ProjectileDemo,
    UniformMotionDemo,
    AcceleratedMotionDemo,
    ParticleDemo,
    WaveDemo,
)
from .driver import FrameScheduler, ManualScheduler
from .nbody import NBodyEngine
from .params import ParameterSpec, UnknownParameterError
from .recorder import HistoryBuffer
from .types import Body, ChargeClass, Status

__all__ = [
    # Demos
    "Demo",
    "DEMOS",
    "create_demo",
    "PendulumDemo",
    "InclineDemo",
    "ProjectileDemo",
    "UniformMotionDemo",
    "AcceleratedMotionDemo",
    "ParticleDemo",
    "WaveDemo",
    # Engine and clock
    "NBodyEngine",
    "SimulationClock",
    # Driving and recording
    "FrameScheduler",
    "ManualScheduler",
    "HistoryBuffer",
    # Types
    "Body",
    "ChargeClass",
    "Status",
    "ParameterSpec",
    "UnknownParameterError",
]
