# MIT License (see LICENSE)
"""
Exception types raised by the simulation.

Two failure modes are physical rather than programming errors:

- InvalidMassError: a particle or integrator step was given mass <= 0.
  Rejected before any force is evaluated.
- SingularityError: an inverse-distance force (Coulomb, Newtonian gravity)
  was evaluated at zero separation. The caller may recover by softening the
  force, moving the particle, or skipping the step.

Both derive from SimulationError and from the matching built-in
(ValueError / ArithmeticError) so callers can catch either.
"""
from __future__ import annotations

import numpy as np


class SimulationError(Exception):
    """Base class for errors raised by particle_sim."""


class InvalidMassError(SimulationError, ValueError):
    """Mass must be a finite number strictly greater than zero."""

    def __init__(self, mass: float) -> None:
        self.mass = mass
        super().__init__(f"mass must be finite and > 0, got {mass!r}")


class SingularityError(SimulationError, ArithmeticError):
    """
    Inverse-distance force evaluated where the separation is zero.

    Attributes:
        position: Evaluation point [x, y, z].
        anchor: Position of the interacting body [x, y, z].
    """

    def __init__(self, position: np.ndarray, anchor: np.ndarray) -> None:
        self.position = np.array(position, dtype=np.float64)
        self.anchor = np.array(anchor, dtype=np.float64)
        super().__init__(
            f"zero separation between position {self.position.tolist()} "
            f"and anchor {self.anchor.tolist()}"
        )


def check_mass(mass: float) -> float:
    """Return mass as float, raising InvalidMassError unless 0 < mass < inf."""
    m = float(mass)
    if not (m > 0.0 and np.isfinite(m)):
        raise InvalidMassError(mass)
    return m
