"""Tests for preset scenes and the field grid."""

import numpy as np
import pytest
from gravity_field.physics.body import SAMPLE_POINT_MASS
from gravity_field.physics.diagnostics import total_momentum
from gravity_field.presets import (
    BinaryPreset,
    ClusterPreset,
    OrbitPreset,
    get_preset,
    make_vector_field,
)


def test_binary_preset():
    """Binary preset reproduces the red/blue scene."""
    preset = BinaryPreset(model="circle")
    red, blue = preset.generate()

    assert preset.name == "binary"
    assert np.allclose(red.position, [0.5, 0.5])
    assert np.allclose(red.velocity, [-0.5, 0.0])
    assert np.allclose(red.color, [1.0, 0.0, 0.0])
    assert np.allclose(blue.position, [-0.45, -0.25])
    assert np.allclose(blue.velocity, [0.5, 0.0])
    assert np.allclose(red.transform.scale, [0.05, 0.05])
    assert red.model == "circle"
    assert red.id != blue.id


def test_orbit_preset_circular_velocity():
    """Satellite speed is sqrt(G M / r) and net momentum is zero."""
    preset = OrbitPreset(gravitational_strength=0.5, central_mass=8.0, radius=0.25)
    center, satellite = preset.generate()

    assert preset.name == "orbit"
    assert np.isclose(np.linalg.norm(satellite.velocity), np.sqrt(0.5 * 8.0 / 0.25))
    assert np.allclose(total_momentum([center, satellite]), 0.0)


def test_cluster_preset():
    """Cluster preset places n bodies inside the disc."""
    preset = ClusterPreset(n_bodies=6, seed=42, radius=0.5)
    bodies = preset.generate()

    assert preset.name == "cluster"
    assert len(bodies) == 6
    assert all(np.linalg.norm(b.position) <= 0.5 for b in bodies)
    assert all(0.5 <= b.mass <= 1.5 for b in bodies)
    assert all(np.allclose(b.velocity, 0.0) for b in bodies)


def test_cluster_reproducibility():
    """Same seed, same scene."""
    bodies1 = ClusterPreset(n_bodies=5, seed=3).generate()
    bodies2 = ClusterPreset(n_bodies=5, seed=3).generate()

    for b1, b2 in zip(bodies1, bodies2):
        assert np.allclose(b1.position, b2.position)
        assert b1.mass == b2.mass


def test_get_preset():
    """Lookup by name, with a helpful error for unknown names."""
    assert isinstance(get_preset("Binary"), BinaryPreset)
    assert isinstance(get_preset("cluster", n_bodies=2), ClusterPreset)
    with pytest.raises(ValueError, match="Unknown preset"):
        get_preset("spiral")


def test_vector_field_grid():
    """Grid points sit at cell centres of [-1, 1]^2 with unit mass."""
    points = make_vector_field(4)

    assert len(points) == 16
    assert np.allclose(points[0].position, [-0.75, -0.75])
    assert np.allclose(points[1].position, [-0.75, -0.25])
    assert np.allclose(points[-1].position, [0.75, 0.75])
    assert all(p.mass == SAMPLE_POINT_MASS for p in points)
    assert all(np.allclose(p.transform.scale, [0.005, 0.005]) for p in points)


def test_default_grid_size():
    """Default grid has 40 x 40 points."""
    assert len(make_vector_field()) == 1600
