"""Conserved-quantity diagnostics for a list of bodies."""

from typing import List

import numpy as np

from gravity_field.physics.body import Body
from gravity_field.physics.simulator import GravitySimulator


def total_momentum(bodies: List[Body]) -> np.ndarray:
    """Total linear momentum sum(m_i * v_i)."""
    momentum = np.zeros(2)
    for body in bodies:
        momentum += body.mass * body.velocity
    return momentum


def center_of_mass(bodies: List[Body]) -> np.ndarray:
    """Mass-weighted mean position (origin for an empty list)."""
    total_mass = sum(body.mass for body in bodies)
    if total_mass == 0:
        return np.zeros(2)
    weighted = np.zeros(2)
    for body in bodies:
        weighted += body.mass * body.position
    return weighted / total_mass


def kinetic_energy(bodies: List[Body]) -> float:
    """Total kinetic energy 0.5 * sum(m_i * |v_i|^2)."""
    return float(sum(0.5 * body.mass * np.dot(body.velocity, body.velocity) for body in bodies))


def potential_energy(bodies: List[Body], gravitational_strength: float) -> float:
    """Gravitational potential energy matching GravitySimulator's force law.

    U = -G * sum_i sum_j>i (m_i * m_j / r_ij). Pairs closer than the
    simulator's clamp contribute nothing, as they exert no force.
    """
    n = len(bodies)
    energy = 0.0
    for i in range(n):
        for j in range(i + 1, n):
            offset = bodies[j].position - bodies[i].position
            distance_squared = float(np.dot(offset, offset))
            if distance_squared < GravitySimulator.MIN_DISTANCE_SQUARED:
                continue
            energy -= gravitational_strength * bodies[i].mass * bodies[j].mass / np.sqrt(distance_squared)
    return float(energy)


def total_energy(bodies: List[Body], gravitational_strength: float) -> float:
    """Kinetic plus potential energy."""
    return kinetic_energy(bodies) + potential_energy(bodies, gravitational_strength)
