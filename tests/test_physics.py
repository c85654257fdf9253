"""Tests for the gravity simulator."""

import numpy as np
import pytest
from gravity_field.physics.body import create_body
from gravity_field.physics.diagnostics import total_momentum
from gravity_field.physics.simulator import GravitySimulator


def test_position_aliases_translation():
    """Position is the transform translation, not a copy."""
    body = create_body((0.25, -0.5), velocity=(1.0, 2.0), mass=3.0)

    assert body.position is body.transform.translation
    body.position += np.array([0.25, 0.5])
    assert np.allclose(body.transform.translation, [0.5, 0.0])
    assert body.mass == 3.0
    assert np.allclose(body.velocity, [1.0, 2.0])


def test_create_body_copies_inputs():
    """Bodies never share arrays with caller data."""
    position = np.array([1.0, 2.0])
    body = create_body(position)
    body.position += 1.0

    assert np.allclose(position, [1.0, 2.0])


def test_assigning_vectors_copies():
    """Assigning one body's vectors to another never shares the array."""
    sim = GravitySimulator(1.0)
    a = create_body((0.0, 0.0), velocity=(1.0, 0.0))
    b = create_body((0.5, 0.5))

    b.position = a.position
    b.velocity = a.velocity
    assert b.position is not a.position
    assert b.velocity is not a.velocity

    # Coincident, so no force: each body drifts once by its own velocity
    sim.update([a, b], dt=0.5)
    assert np.allclose(a.position, [0.5, 0.0])
    assert np.allclose(b.position, [0.5, 0.0])


def test_force_concrete_value():
    """Force magnitude follows G * m1 * m2 / r^2 along the separation axis."""
    sim = GravitySimulator(1.0)
    a = create_body((1.0, 0.0), mass=1.0)
    b = create_body((-1.0, 0.0), mass=1.0)

    force = sim.compute_force(a, b)

    # Pulls b toward a
    assert np.allclose(force, [0.25, 0.0])


def test_force_scales_with_both_masses():
    """Force is proportional to each mass and to G."""
    sim = GravitySimulator(2.0)
    a = create_body((0.0, 0.0), mass=3.0)
    b = create_body((0.0, 2.0), mass=5.0)

    force = sim.compute_force(a, b)

    assert np.allclose(force, [0.0, -2.0 * 3.0 * 5.0 / 4.0])


def test_force_antisymmetry():
    """Swapping source and target flips the force."""
    sim = GravitySimulator(0.81)
    rng = np.random.default_rng(7)
    for _ in range(20):
        a = create_body(rng.uniform(-1, 1, 2), mass=rng.uniform(0.1, 5.0))
        b = create_body(rng.uniform(-1, 1, 2), mass=rng.uniform(0.1, 5.0))
        f_ab = sim.compute_force(a, b)
        f_ba = sim.compute_force(b, a)
        assert np.allclose(f_ab, -f_ba)
        assert np.isclose(np.linalg.norm(f_ab), np.linalg.norm(f_ba))


def test_force_near_zero_distance_clamp():
    """Coincident bodies exert no force regardless of mass."""
    sim = GravitySimulator(1.0)
    a = create_body((0.3, 0.3), mass=1e6)
    b = create_body((0.3, 0.3 + 1e-6), mass=1e6)

    assert np.array_equal(sim.compute_force(a, b), np.zeros(2))
    assert np.array_equal(sim.compute_force(a, a), np.zeros(2))


def test_force_does_not_mutate():
    """compute_force is side-effect free."""
    sim = GravitySimulator(1.0)
    a = create_body((0.0, 0.0), velocity=(1.0, 0.0))
    b = create_body((1.0, 1.0), velocity=(0.0, 1.0))

    sim.compute_force(a, b)

    assert np.allclose(a.position, [0.0, 0.0])
    assert np.allclose(b.velocity, [0.0, 1.0])


def test_strength_is_read_only():
    """The gravitational strength cannot be reassigned."""
    sim = GravitySimulator(0.81)
    assert sim.gravitational_strength == 0.81
    with pytest.raises(AttributeError):
        sim.gravitational_strength = 1.0


def test_two_body_single_step():
    """Two unit masses at (+-1, 0) accelerate toward each other."""
    sim = GravitySimulator(1.0)
    a = create_body((1.0, 0.0))
    b = create_body((-1.0, 0.0))

    sim.update([a, b], dt=1.0, substeps=1)

    assert np.allclose(a.velocity, [-0.25, 0.0])
    assert np.allclose(b.velocity, [0.25, 0.0])
    # Positions advance with the updated velocity
    assert np.allclose(a.position, [0.75, 0.0])
    assert np.allclose(b.position, [-0.75, 0.0])


def test_pairwise_step_conserves_momentum():
    """m_a * dv_a + m_b * dv_b vanishes for one step."""
    sim = GravitySimulator(0.81)
    a = create_body((0.2, 0.1), velocity=(0.3, -0.1), mass=2.0)
    b = create_body((-0.4, 0.5), velocity=(-0.2, 0.0), mass=0.7)
    v_a0 = a.velocity.copy()
    v_b0 = b.velocity.copy()

    sim.update([a, b], dt=0.1)

    dp = a.mass * (a.velocity - v_a0) + b.mass * (b.velocity - v_b0)
    assert np.allclose(dp, 0.0, atol=1e-12)


def test_substeps_conserve_momentum():
    """Total momentum is unchanged for any substep count."""
    for substeps in (1, 5, 20):
        sim = GravitySimulator(0.81)
        bodies = [
            create_body((0.5, 0.5), velocity=(-0.5, 0.0), mass=1.0),
            create_body((-0.45, -0.25), velocity=(0.5, 0.0), mass=1.5),
            create_body((0.1, -0.6), velocity=(0.0, 0.2), mass=0.4),
        ]
        p0 = total_momentum(bodies)
        for _ in range(60):
            sim.update(bodies, 1.0 / 60, substeps)
        assert np.allclose(total_momentum(bodies), p0, atol=1e-10)


def test_substeps_change_trajectory():
    """Sub-stepping integrates with a smaller internal step."""
    def run(substeps):
        sim = GravitySimulator(1.0)
        bodies = [create_body((0.1, 0.0)), create_body((-0.1, 0.0), velocity=(0.0, 1.0))]
        sim.update(bodies, 0.1, substeps)
        return bodies[0].position.copy()

    assert not np.allclose(run(1), run(10))


def test_substeps_split_dt_equally():
    """Free bodies drift by exactly v * dt whatever the substep count."""
    sim = GravitySimulator(1.0)
    body = create_body((0.0, 0.0), velocity=(1.0, -2.0))

    sim.update([body], dt=0.5, substeps=7)

    assert np.allclose(body.position, [0.5, -1.0])


def test_three_body_pairs_visited_once():
    """Velocity changes match a single pass over unordered pairs."""
    sim = GravitySimulator(1.0)
    bodies = [
        create_body((0.0, 0.0), mass=1.0),
        create_body((1.0, 0.0), mass=2.0),
        create_body((0.0, 1.0), mass=3.0),
    ]
    expected = [np.zeros(2) for _ in bodies]
    for i in range(3):
        for j in range(3):
            if i != j:
                # Force on i from j, divided by i's mass
                expected[i] += sim.compute_force(bodies[j], bodies[i]) / bodies[i].mass

    dt = 0.01
    sim.update(bodies, dt)

    for body, acc in zip(bodies, expected):
        assert np.allclose(body.velocity, dt * acc)


def test_empty_and_single_body():
    """No bodies is a no-op; a lone body just drifts."""
    sim = GravitySimulator(1.0)
    sim.update([], 1.0 / 60, 5)

    body = create_body((0.0, 0.0), velocity=(0.6, 0.0))
    sim.update([body], 1.0, 3)
    assert np.allclose(body.velocity, [0.6, 0.0])
    assert np.allclose(body.position, [0.6, 0.0])


def test_zero_mass_corrupts_without_raising():
    """Zero mass yields non-finite velocity instead of an exception."""
    sim = GravitySimulator(1.0)
    a = create_body((0.0, 0.0), mass=0.0)
    b = create_body((1.0, 0.0), mass=1.0)

    sim.update([a, b], 0.1)

    assert not np.all(np.isfinite(a.velocity))
