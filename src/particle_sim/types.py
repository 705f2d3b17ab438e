# MIT License (see LICENSE)
"""
Core value types for the point-mass simulation.

The equations of motion integrated by particle_sim.core.integrators are
Newton's second law written as a first-order system:
  dx/dt = v           (position rate of change)
  dv/dt = F(x, v, t)/m
A KinematicState holds the (x, v) pair at one instant.
"""
from __future__ import annotations
from dataclasses import dataclass

import numpy as np

from .util import frozen_vec3


@dataclass(frozen=True, eq=False)
class KinematicState:
    """
    Position and velocity of a point mass at one instant.

    Immutable: the arrays are converted to read-only float64 3-vectors on
    init, and every integrator step returns a new state.

    Attributes:
        position: Position [x, y, z] in meters.
        velocity: Velocity [vx, vy, vz] in m/s.
    """
    position: np.ndarray | tuple[float, float, float] = (0.0, 0.0, 0.0)
    velocity: np.ndarray | tuple[float, float, float] = (0.0, 0.0, 0.0)

    def __post_init__(self) -> None:
        """Store position/velocity as read-only float64 arrays."""
        object.__setattr__(self, "position", frozen_vec3(self.position))
        object.__setattr__(self, "velocity", frozen_vec3(self.velocity))

    def is_finite(self) -> bool:
        return bool(np.all(np.isfinite(self.position)) and np.all(np.isfinite(self.velocity)))

    def isclose(self, other: "KinematicState", atol: float = 1e-12, rtol: float = 0.0) -> bool:
        """True if both components match `other` within the given tolerances."""
        return bool(
            np.allclose(self.position, other.position, atol=atol, rtol=rtol)
            and np.allclose(self.velocity, other.velocity, atol=atol, rtol=rtol)
        )
