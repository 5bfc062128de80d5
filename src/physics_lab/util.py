# MIT License (see LICENSE)
"""
Small numeric helpers shared by the integrators and demos.

Angles arrive from the controls in degrees and are converted here.
"""
from __future__ import annotations
import math

import numpy as np


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Lets callers pass tuples or lists for positions and velocities.
    """
    return np.array(x, dtype=np.float64)


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp value to the closed interval [lo, hi]."""
    return max(lo, min(hi, value))


def deg2rad(degrees: float) -> float:
    return degrees * math.pi / 180.0
