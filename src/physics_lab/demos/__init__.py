# MIT License (see LICENSE)
"""
The seven interactive demonstrations.

Each demo exposes the same lifecycle (start, pause, reset, set_parameter,
step, get_state) from Demo and supplies its own physics.
"""
from .base import Demo
from .pendulum import PendulumDemo, PendulumParams
from .incline import InclineDemo, InclineParams
from .projectile import ProjectileDemo, ProjectileParams
from .motion import (
    UniformMotionDemo,
    UniformMotionParams,
    AcceleratedMotionDemo,
    AcceleratedMotionParams,
)
from .particles import ParticleDemo, ParticleParams
from .waves import WaveDemo, WaveParams

DEMOS: dict[str, type[Demo]] = {
    cls.name: cls
    for cls in (
        ProjectileDemo,
        ParticleDemo,
        WaveDemo,
        UniformMotionDemo,
        AcceleratedMotionDemo,
        PendulumDemo,
        InclineDemo,
    )
}


def create_demo(name: str, **kwargs) -> Demo:
    """Instantiate a demo by its short name (see DEMOS)."""
    try:
        cls = DEMOS[name]
    except KeyError:
        raise ValueError(f"Unknown demo {name!r}; expected one of {sorted(DEMOS)}") from None
    return cls(**kwargs)


__all__ = [
    "Demo",
    "DEMOS",
    "create_demo",
    "PendulumDemo",
    "PendulumParams",
    "InclineDemo",
    "InclineParams",
    "ProjectileDemo",
    "ProjectileParams",
    "UniformMotionDemo",
    "UniformMotionParams",
    "AcceleratedMotionDemo",
    "AcceleratedMotionParams",
    "ParticleDemo",
    "ParticleParams",
    "WaveDemo",
    "WaveParams",
]
