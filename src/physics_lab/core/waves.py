# MIT License (see LICENSE)
"""
Two-source wave interference field.

Two coherent point sources sit on a vertical line at x = width/4,
separated by `distance`. The superposed field at a point is

    u(x, y) = sin(k·d₁ + φ) + sin(k·d₂ + φ),   k = 2π/λ

where d₁, d₂ are the distances to the sources and φ is the shared phase,
which decreases by wave_speed·π per second so the fringes travel outward.
The grid is evaluated with numpy broadcasting, one value per pixel.
"""
from __future__ import annotations
import math

import numpy as np


def source_positions(width: float, height: float, distance: float) -> np.ndarray:
    """Source centres [[x1, y1], [x2, y2]] in pixels."""
    x = width / 4.0
    return np.array(
        [[x, height / 2.0 - distance / 2.0],
         [x, height / 2.0 + distance / 2.0]],
        dtype=np.float64,
    )


def advance_phase(phase: float, wave_speed: float, dt: float) -> float:
    return phase - wave_speed * math.pi * dt


def interference_field(
    width: int,
    height: int,
    wavelength: float,
    distance: float,
    phase: float,
) -> np.ndarray:
    """
    Superposed field value for every pixel.

    Returns:
        Array of shape (height, width) with values in [-2, 2]; row index is y.
    """
    k = 2.0 * math.pi / wavelength
    src = source_positions(width, height, distance)
    ys, xs = np.mgrid[0:height, 0:width].astype(np.float64)
    d1 = np.hypot(xs - src[0, 0], ys - src[0, 1])
    d2 = np.hypot(xs - src[1, 0], ys - src[1, 1])
    return np.sin(k * d1 + phase) + np.sin(k * d2 + phase)


def brightness(field: np.ndarray, amplitude: float) -> np.ndarray:
    """
    Map field values to 8-bit intensity: floor(amplitude·(1 + u)), clipped to [0, 255].
    """
    return np.clip(np.floor(amplitude * (1.0 + field)), 0, 255).astype(np.uint8)
