# MIT License (see LICENSE)
"""
Physical and numerical constants used throughout the laboratory.

Single-body demos use SI units. The particle simulator works in pixel
units with scaled coupling constants, so its values are not physical.
"""
from __future__ import annotations

# Standard gravity at Earth's surface in m/s².
# Reference: https://physics.nist.gov/cgi-bin/cuu/Value?gn
GRAVITY: float = 9.81

# Largest frame delta (seconds) fed to any integrator. A backgrounded tab
# can deliver a multi-second gap; it is applied as this much time instead.
MAX_FRAME_DT: float = 0.1

# Angular velocity multiplier applied once per pendulum step (energy loss).
PENDULUM_DAMPING: float = 0.999

# Distance along the incline (m) at which the block run completes.
INCLINE_TRACK_LENGTH: float = 15.0

# Projectile trajectory resolution and playback duration (seconds).
PROJECTILE_SAMPLES: int = 100
PROJECTILE_PLAYBACK_DURATION: float = 3.0

# Samples in the position/velocity chart series of the 1-D motion demos.
CHART_SAMPLES: int = 100

# --- Particle simulator (pixel units, one step per reference frame) ---

# Frame rate the particle constants were tuned for. A step of dt seconds
# advances the engine by dt * REFERENCE_FPS unit steps.
REFERENCE_FPS: float = 60.0

# Scaled gravitational and electrostatic constants.
G_NBODY: float = 0.5
K_NBODY: float = 10.0

# Pair interactions closer than this (px) are skipped to avoid r→0 blow-ups.
MIN_DISTANCE: float = 2.0

# Fraction of normal velocity kept after bouncing off a domain wall.
RESTITUTION: float = 0.8

POPULATION_SIZE: int = 50
DOMAIN_WIDTH: float = 800.0
DOMAIN_HEIGHT: float = 600.0
