import numpy as np
import pytest

from physics_lab.demos import ParticleDemo
from physics_lab.driver import ManualScheduler
from physics_lab.nbody import NBodyEngine
from physics_lab.profiler import Profiler
from physics_lab.types import Body, ChargeClass


def _two_bodies(q0, q1, gravity_coef=0.0, electro_coef=1.0):
    engine = NBodyEngine(width=400, height=400, gravity_coef=gravity_coef, electro_coef=electro_coef)
    engine.set_bodies([
        Body(position=(150.0, 200.0), mass=1.0, charge=q0),
        Body(position=(250.0, 200.0), mass=1.0, charge=q1),
    ])
    return engine


def test_opposite_charges_accelerate_toward_each_other():
    engine = _two_bodies(+1, -1)
    gap = engine.positions[1, 0] - engine.positions[0, 0]
    for _ in range(20):
        engine.step(1.0)
        assert engine.velocities[0, 0] > 0.0
        assert engine.velocities[1, 0] < 0.0
        new_gap = engine.positions[1, 0] - engine.positions[0, 0]
        assert new_gap < gap
        gap = new_gap
    # Motion stays on the line joining the bodies
    assert np.allclose(engine.velocities[:, 1], 0.0)


def test_like_charges_accelerate_apart():
    engine = _two_bodies(-1, -1)
    engine.step(1.0)
    assert engine.velocities[0, 0] < 0.0
    assert engine.velocities[1, 0] > 0.0


def test_gravity_only_attracts_neutral_bodies():
    engine = _two_bodies(0, 0, gravity_coef=1.0, electro_coef=5.0)
    engine.step(1.0)
    assert engine.velocities[0, 0] > 0.0
    assert engine.velocities[1, 0] < 0.0


def test_first_step_matches_semi_implicit_euler():
    """
    Body 0: F = k·e / r² = 10 / 100² toward body 1, a = F/m, v = a·dt, x += v·dt.
    """
    engine = _two_bodies(+1, -1)
    engine.step(2.0)
    a = 10.0 / 100.0 ** 2
    assert engine.velocities[0, 0] == pytest.approx(a * 2.0)
    assert engine.positions[0, 0] == pytest.approx(150.0 + a * 2.0 * 2.0)


def test_wall_bounce_reverses_and_damps():
    engine = NBodyEngine(width=400, height=300, restitution=0.8)
    engine.set_bodies([Body(position=(395.0, 150.0), velocity=(10.0, 0.0))])
    engine.step(1.0)
    assert engine.velocities[0, 0] == pytest.approx(-8.0)
    assert engine.positions[0, 0] == 400.0


def test_corner_bounce_both_axes():
    engine = NBodyEngine(width=400, height=300, restitution=0.8)
    engine.set_bodies([Body(position=(5.0, 3.0), velocity=(-10.0, -10.0))])
    engine.step(1.0)
    assert np.allclose(engine.velocities[0], [8.0, 8.0])
    assert np.array_equal(engine.positions[0], [0.0, 0.0])


def test_bodies_stay_inside_domain():
    engine = NBodyEngine(width=200, height=100, gravity_coef=1.0, electro_coef=5.0)
    engine.populate(50, np.random.default_rng(3))
    for _ in range(300):
        engine.step(1.0)
        assert np.all(engine.positions >= 0.0)
        assert np.all(engine.positions[:, 0] <= 200.0)
        assert np.all(engine.positions[:, 1] <= 100.0)
        assert np.all(np.isfinite(engine.velocities))


def test_zero_dt_changes_nothing():
    engine = NBodyEngine()
    engine.populate(50, np.random.default_rng(1))
    pos, vel = engine.positions.copy(), engine.velocities.copy()
    engine.step(0.0)
    assert np.array_equal(engine.positions, pos)
    assert np.array_equal(engine.velocities, vel)
    assert engine.time == 0.0


def test_populate_uses_charge_classes():
    engine = NBodyEngine()
    engine.populate(50, np.random.default_rng(0))
    assert len(engine) == 50
    for b in engine.bodies():
        kind = ChargeClass(b.charge)
        assert b.mass == kind.mass
        assert b.radius == kind.radius
        assert b.color == kind.color
        assert 0.0 <= b.position[0] <= engine.width
        assert 0.0 <= b.position[1] <= engine.height
        assert np.all(np.abs(b.velocity) <= 1.0)


def test_snapshot_is_a_copy():
    engine = _two_bodies(1, -1)
    snap = engine.snapshot()
    snap.positions[0, 0] = -1.0
    assert engine.positions[0, 0] == 150.0


def test_invalid_inputs():
    with pytest.raises(ValueError):
        NBodyEngine(width=0.0)
    with pytest.raises(ValueError):
        Body(mass=0.0)


def test_profiler_sections():
    prof = Profiler()
    engine = NBodyEngine(profiler=prof)
    engine.populate(10, np.random.default_rng(2))
    engine.step(1.0)
    summary = prof.stats.summary()
    assert summary["forces_integrate"]["n"] == 10
    assert summary["boundaries"]["n"] == 10


def test_particle_demo_reset_is_reproducible():
    demo = ParticleDemo(seed=42)
    first = demo.get_state()
    demo.reset()
    second = demo.get_state()
    demo.reset()
    third = demo.get_state()
    for a, b in ((first, second), (second, third)):
        assert np.array_equal(a.positions, b.positions)
        assert np.array_equal(a.velocities, b.velocities)
        assert np.array_equal(a.charges, b.charges)
    assert len(third) == 50


def test_particle_demo_reseed_changes_population():
    demo = ParticleDemo(seed=1)
    before = demo.get_state().positions
    demo.reseed(2)
    assert not np.array_equal(before, demo.get_state().positions)


def test_particle_demo_coefficients_apply_live():
    scheduler = ManualScheduler()
    demo = ParticleDemo(scheduler=scheduler, seed=5)
    demo.start()
    scheduler.run(frames=10)
    t = demo.get_state().time

    assert demo.set_parameter("electrostatics", 9.0) == 5.0
    assert demo.running
    assert demo.engine.electro_coef == 5.0
    scheduler.run(frames=1)
    assert demo.get_state().time > t


def test_particle_demo_one_frame_is_one_unit_step():
    """A 60 Hz frame advances the engine by exactly one reference step."""
    scheduler = ManualScheduler()
    demo = ParticleDemo(scheduler=scheduler, seed=11)
    reference = NBodyEngine(gravity_coef=demo.params.gravity, electro_coef=demo.params.electrostatics)
    reference.set_bodies(demo.engine.bodies())

    demo.start()
    scheduler.fire(0.0)
    scheduler.fire(1000.0 / 60.0)
    reference.step(1.0)
    assert np.allclose(demo.get_state().positions, reference.positions)
    assert np.allclose(demo.get_state().velocities, reference.velocities)


def test_clamped_frame_runs_as_unit_engine_steps():
    """A 5 s gap is clamped to 0.1 s and integrates like six 60 Hz frames."""
    prof = Profiler()
    demo = ParticleDemo(population=10, seed=7, profiler=prof)
    demo.start()
    demo.step(0.0)
    demo.step(5000.0)

    ref = NBodyEngine(gravity_coef=0.1, electro_coef=1.0)
    ref.populate(10, np.random.default_rng(7))
    for _ in range(6):
        ref.step(1.0)

    state = demo.get_state()
    np.testing.assert_allclose(state.positions, ref.positions, rtol=1e-12, atol=1e-12)
    np.testing.assert_allclose(state.velocities, ref.velocities, rtol=1e-12, atol=1e-12)
    assert state.time == pytest.approx(0.1)
    assert prof.stats.summary()["boundaries"]["n"] == 6 * 10


def test_fractional_frame_is_one_partial_step():
    prof = Profiler()
    demo = ParticleDemo(population=4, seed=3, profiler=prof)
    demo.start()
    demo.step(0.0)
    demo.step(12.5)  # 0.75 reference frames

    assert prof.stats.summary()["boundaries"]["n"] == 4
    assert demo.engine.time == pytest.approx(0.75)
