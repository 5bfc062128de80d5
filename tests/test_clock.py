import pytest
from physics_lab.core.clock import SimulationClock


def test_first_tick_is_baseline():
    clock = SimulationClock()
    assert clock.tick(123456.0) == 0.0
    assert clock.last_timestamp == 123456.0
    assert clock.tick(123456.0 + 16.0) == pytest.approx(0.016)


def test_large_gap_is_clamped():
    """A backgrounded tab resumes with a multi-second gap; only max_dt is applied."""
    clock = SimulationClock(max_dt=0.1)
    clock.tick(0.0)
    assert clock.tick(5000.0) == 0.1
    assert clock.elapsed == pytest.approx(0.1)


def test_backwards_timestamp_gives_zero():
    clock = SimulationClock()
    clock.tick(1000.0)
    assert clock.tick(900.0) == 0.0
    # The new baseline is the latest timestamp
    assert clock.tick(910.0) == pytest.approx(0.010)


def test_reset_forgets_stale_baseline():
    clock = SimulationClock()
    clock.tick(0.0)
    clock.tick(16.0)
    clock.reset()
    assert clock.last_timestamp is None
    assert clock.elapsed == 0.0
    assert clock.tick(60_000.0) == 0.0


def test_invalid_max_dt():
    with pytest.raises(ValueError):
        SimulationClock(max_dt=0.0)
