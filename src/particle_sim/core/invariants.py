# MIT License (see LICENSE)
"""
Energy diagnostics for verifying integrator behaviour.

With only conservative forces acting (gravity, Coulomb, springs), the total
energy T + U of the particle should remain constant within integration error.
How fast it drifts is the main practical difference between the schemes in
particle_sim.core.integrators.
"""
from __future__ import annotations
from typing import TYPE_CHECKING

import numpy as np

from ..types import KinematicState
from .forces import Force

if TYPE_CHECKING:
    from ..particle import Particle


def kinetic_energy(mass: float, velocity: np.ndarray) -> float:
    """
    Kinetic energy of a point mass.

    T = 0.5 * m * |v|²
    """
    v = np.asarray(velocity, dtype=np.float64)
    return 0.5 * float(mass) * float(np.dot(v, v))


def potential_energy(force: Force, state: KinematicState, t: float = 0.0) -> float:
    """Potential energy U reported by `force` at the given state and time."""
    return float(force.compute_energy(state.position, state.velocity, t))


def total_energy(force: Force, state: KinematicState, mass: float, t: float = 0.0) -> float:
    """Mechanical energy T + U."""
    return kinetic_energy(mass, state.velocity) + potential_energy(force, state, t)


def particle_energy(particle: "Particle", t: float = 0.0) -> float:
    """Total energy of a particle under its own force set."""
    return total_energy(particle.forces, particle.state, particle.mass, t)


def relative_drift(e0: float, e1: float) -> float:
    """|e1 - e0| / |e0|, falling back to the absolute change when e0 == 0."""
    if e0 == 0.0:
        return abs(e1 - e0)
    return abs(e1 - e0) / abs(e0)
