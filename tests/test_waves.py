import math

import numpy as np
import pytest

from physics_lab.core.waves import advance_phase, brightness, interference_field, source_positions
from physics_lab.demos import WaveDemo
from physics_lab.driver import ManualScheduler


def test_sources_are_symmetric_about_centre_line():
    src = source_positions(400, 300, 80)
    assert np.allclose(src, [[100.0, 110.0], [100.0, 190.0]])


def test_field_is_symmetric_and_bounded():
    field = interference_field(64, 48, wavelength=10.0, distance=20.0, phase=0.3)
    assert field.shape == (48, 64)
    assert np.all(np.abs(field) <= 2.0 + 1e-12)
    # Sources sit at y = 24 ∓ 10, so rows 24-k and 24+k mirror each other
    assert np.allclose(field[14], field[34])


def test_constructive_interference_on_the_centre_line():
    """Equidistant points have d1 == d2, so u = 2·sin(k·d + φ)."""
    w, h, lam = 40, 40, 8.0
    field = interference_field(w, h, lam, 10.0, 0.0)
    src = source_positions(w, h, 10.0)
    x, y = 30, 20
    d = math.hypot(x - src[0, 0], y - src[0, 1])
    assert field[y, x] == pytest.approx(2.0 * math.sin(2 * math.pi / lam * d))


def test_brightness_range():
    img = brightness(np.array([[-2.0, 0.0, 2.0]]), amplitude=128.0)
    assert img.dtype == np.uint8
    assert img.tolist() == [[0, 128, 255]]


def test_phase_advances_with_speed():
    assert advance_phase(0.0, 25.0, 0.1) == pytest.approx(-25.0 * math.pi * 0.1)


def test_demo_image():
    scheduler = ManualScheduler()
    demo = WaveDemo(scheduler=scheduler)
    demo.start()
    scheduler.run(frames=3, frame_ms=20.0)
    assert demo.get_state().phase == pytest.approx(-25.0 * math.pi * 0.04)
    img = demo.image(32, 24)
    assert img.shape == (24, 32)
    assert demo.sources(32, 24).shape == (2, 2)
