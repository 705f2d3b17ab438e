# MIT License (see LICENSE)
"""
The simulated body: a point mass with the forces acting on it.
"""
from __future__ import annotations
from dataclasses import dataclass, field

import numpy as np

from .core.forces import Force, CompositeForce
from .errors import check_mass
from .types import KinematicState
from .util import vec3


@dataclass(eq=False)
class Particle:
    """
    A point mass with kinematic state and an attached force set.

    Attributes:
        mass: Mass in kg. Must be > 0 (InvalidMassError otherwise).
        position: Position [x, y, z] in meters.
        velocity: Velocity [vx, vy, vz] in m/s.
        forces: Everything acting on the particle. Forces added here are
                shared, not copied, so one force object may be attached to
                several particles.

    Note:
        Position and velocity are converted to float64 numpy arrays on init.
        They are replaced (never modified in place) by set_state() after each
        integrator step.
    """
    mass: float
    position: np.ndarray | tuple[float, float, float] = (0.0, 0.0, 0.0)
    velocity: np.ndarray | tuple[float, float, float] = (0.0, 0.0, 0.0)
    forces: CompositeForce = field(default_factory=CompositeForce)

    def __post_init__(self) -> None:
        """Validate mass and convert position/velocity to float64 arrays."""
        self.mass = check_mass(self.mass)
        self.position = vec3(self.position)
        self.velocity = vec3(self.velocity)

    @property
    def state(self) -> KinematicState:
        """Snapshot of the current (position, velocity)."""
        return KinematicState(self.position, self.velocity)

    def set_state(self, state: KinematicState) -> None:
        """Write an integrator result back into the particle."""
        self.position = vec3(state.position)
        self.velocity = vec3(state.velocity)

    def set_mass(self, mass: float) -> None:
        self.mass = check_mass(mass)

    def add_force(self, force: Force) -> None:
        """Attach a force (see CompositeForce.add_force)."""
        self.forces.add_force(force)

    def remove_force(self, force: Force) -> bool:
        """Detach a force by identity. Returns False if it was not attached."""
        return self.forces.remove_force(force)
