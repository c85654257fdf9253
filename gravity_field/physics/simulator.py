"""Pairwise Newtonian gravity with sub-stepped semi-implicit Euler integration."""

import logging
from typing import List

import numpy as np

from gravity_field.physics.body import Body

logger = logging.getLogger(__name__)


class GravitySimulator:
    """Advances a list of bodies under mutual gravitational attraction.

    Forces are computed for each unordered pair once per step, applied to
    both bodies with opposite sign, and only then are positions advanced.
    Semi-implicit Euler is only conditionally stable for close encounters,
    so callers trade cost for stability with the ``substeps`` count.
    """

    # Squared separations below this are treated as coincident and produce
    # no force at all instead of a near-singular one.
    MIN_DISTANCE_SQUARED = 1e-10

    def __init__(self, gravitational_strength: float):
        """Initialize simulator.

        Args:
            gravitational_strength: Gravitational constant G in scene units
        """
        self._strength = float(gravitational_strength)

    @property
    def gravitational_strength(self) -> float:
        return self._strength

    def compute_force(self, source: Body, target: Body) -> np.ndarray:
        """Force exerted by ``source`` on ``target``.

        The returned vector points from ``target`` toward ``source``. The
        reaction on ``source`` is the same vector negated.

        Args:
            source: Body producing the field
            target: Body (or sample point) feeling it

        Returns:
            Force vector of shape (2,)
        """
        offset = source.position - target.position
        distance_squared = float(np.dot(offset, offset))

        if abs(distance_squared) < self.MIN_DISTANCE_SQUARED:
            return np.zeros(2)

        force = self._strength * target.mass * source.mass / distance_squared
        return force * offset / np.sqrt(distance_squared)

    def update(self, bodies: List[Body], dt: float, substeps: int = 1):
        """Advance ``bodies`` in place by ``dt``.

        Args:
            bodies: Bodies to integrate (mutated in place)
            dt: Frame time delta
            substeps: Number of equal intervals ``dt`` is divided into
        """
        step_delta = dt / substeps
        for _ in range(substeps):
            self._step_simulation(bodies, step_delta)
        logger.debug("Advanced %d bodies by dt=%g in %d substeps", len(bodies), dt, substeps)

    def _step_simulation(self, bodies: List[Body], dt: float):
        n = len(bodies)

        # Zero masses are the caller's problem: let them turn into inf/nan.
        with np.errstate(divide="ignore", invalid="ignore"):
            for i in range(n):
                body_a = bodies[i]
                for j in range(i + 1, n):
                    body_b = bodies[j]
                    force = self.compute_force(body_a, body_b)
                    body_a.velocity -= dt * force / body_a.mass
                    body_b.velocity += dt * force / body_b.mass

        for body in bodies:
            body.position += dt * body.velocity
