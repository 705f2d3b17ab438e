# MIT License (see LICENSE)
"""
Force models acting on a point mass.

Every force implements the same two-method contract:

    compute_force(position, velocity, time)  -> force vector [Fx, Fy, Fz]
    compute_energy(position, velocity, time) -> potential energy (scalar)

Both are pure: they read their own configuration and the arguments, never
mutate the arrays passed in and keep no state between calls. This is what
lets an integrator evaluate a force at intermediate sub-step states.

Available forces:
- ElectricForce: Coulomb interaction with a fixed charge at `anchor`.
- GravitationalForce: Newtonian attraction to a fixed mass at `anchor`.
- EarthGravityForce: uniform field F = (0, -m·g, 0).
- HookeForce: linear spring towards `anchor`.
- AirResistanceForce: linear drag F = -c·v.
- CompositeForce: sum of any number of the above (including composites).

Inverse-distance forces raise SingularityError at zero separation instead of
returning inf/NaN. Pass softening > 0 to regularize |r|² → |r|² + ε².
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Iterator

import numpy as np

from ..constants import PhysicalConstants, SI
from ..errors import SingularityError
from ..util import vec3, zeros3, norm2


class Force(ABC):
    """
    Abstract base class for force models.

    Subclasses return the instantaneous force and the associated potential
    energy for a particle at (position, velocity, time). Forces can be shared
    between particles and registered in a CompositeForce.
    """

    @abstractmethod
    def compute_force(self, position: np.ndarray, velocity: np.ndarray, time: float) -> np.ndarray:
        """
        Force acting on a particle.

        Args:
            position: Particle position [x, y, z] in meters.
            velocity: Particle velocity [vx, vy, vz] in m/s.
            time: Simulation time in seconds.

        Returns:
            Force vector [Fx, Fy, Fz] in Newtons (a new array).
        """
        ...

    @abstractmethod
    def compute_energy(self, position: np.ndarray, velocity: np.ndarray, time: float) -> float:
        """Potential energy in Joules associated with the force at this state."""
        ...


def _inverse_square(
    position: np.ndarray,
    anchor: np.ndarray,
    softening: float,
) -> tuple[np.ndarray, float, float]:
    """
    Shared geometry of the 1/r² forces.

    Returns (r, |r|, |r|³) with r = position - anchor, where |r| includes the
    softening term. Raises SingularityError if the denominator vanishes, which
    also catches separations small enough for |r|³ to underflow to zero.
    """
    r = np.asarray(position, dtype=np.float64) - np.asarray(anchor, dtype=np.float64)
    r2 = norm2(r) + softening * softening
    dist = float(np.sqrt(r2))
    dist3 = r2 * dist
    if dist3 == 0.0:
        raise SingularityError(position, anchor)
    return r, dist, dist3


@dataclass(eq=False)
class ElectricForce(Force):
    """
    Electrostatic force between the particle's charge and a fixed charge.

    F = -k_e·q1·q2 / |r|³ · r,  U = -k_e·q1·q2 / |r|,  r = position - anchor

    Attributes:
        charge_1: Charge of the simulated particle in Coulombs.
        charge_2: Charge fixed at `anchor` in Coulombs.
        anchor: Position of the second charge (default: origin).
        softening: Distance softening ε in meters (0 disables it).
        constants: Source of k_e.
    """
    charge_1: float
    charge_2: float
    anchor: np.ndarray | tuple[float, float, float] = (0.0, 0.0, 0.0)
    softening: float = 0.0
    constants: PhysicalConstants = SI

    def __post_init__(self) -> None:
        self.anchor = vec3(self.anchor)

    def _strength(self) -> float:
        return self.constants.k_e * self.charge_1 * self.charge_2

    def compute_force(self, position, velocity, time):
        s = self._strength()
        r, _, dist3 = _inverse_square(position, self.anchor, self.softening)
        return (-s / dist3) * r

    def compute_energy(self, position, velocity, time):
        s = self._strength()
        _, dist, _ = _inverse_square(position, self.anchor, self.softening)
        return -s / dist


@dataclass(eq=False)
class GravitationalForce(Force):
    """
    Newtonian gravity between the particle and a fixed mass.

    F = -G·m1·m2 / |r|³ · r,  U = -G·m1·m2 / |r|,  r = position - anchor

    Attributes:
        mass_1: First mass in kg.
        mass_2: Second mass in kg (the particle's own mass when mass_1 is the
                attractor, or vice versa; the force is symmetric in m1·m2).
        anchor: Position of the attracting body (default: origin).
        softening: Distance softening ε in meters (0 disables it).
        constants: Source of G.
    """
    mass_1: float
    mass_2: float
    anchor: np.ndarray | tuple[float, float, float] = (0.0, 0.0, 0.0)
    softening: float = 0.0
    constants: PhysicalConstants = SI

    def __post_init__(self) -> None:
        self.anchor = vec3(self.anchor)

    def _strength(self) -> float:
        return self.constants.G * self.mass_1 * self.mass_2

    def compute_force(self, position, velocity, time):
        s = self._strength()
        r, _, dist3 = _inverse_square(position, self.anchor, self.softening)
        return (-s / dist3) * r

    def compute_energy(self, position, velocity, time):
        s = self._strength()
        _, dist, _ = _inverse_square(position, self.anchor, self.softening)
        return -s / dist


@dataclass(eq=False)
class EarthGravityForce(Force):
    """
    Uniform gravity near Earth's surface, pointing along -y.

    F = (0, -m·g, 0),  U = m·g·y
    """
    mass: float
    constants: PhysicalConstants = SI

    def compute_force(self, position, velocity, time):
        return np.array([0.0, -self.mass * self.constants.g, 0.0], dtype=np.float64)

    def compute_energy(self, position, velocity, time):
        return float(self.mass * self.constants.g * position[1])


@dataclass(eq=False)
class HookeForce(Force):
    """
    Ideal spring attached to `anchor`.

    F = -k·(position - anchor),  U = ½·k·|position - anchor|²
    """
    k: float
    anchor: np.ndarray | tuple[float, float, float] = (0.0, 0.0, 0.0)

    def __post_init__(self) -> None:
        self.anchor = vec3(self.anchor)

    def compute_force(self, position, velocity, time):
        return -self.k * (np.asarray(position, dtype=np.float64) - self.anchor)

    def compute_energy(self, position, velocity, time):
        d = np.asarray(position, dtype=np.float64) - self.anchor
        return 0.5 * self.k * norm2(d)


@dataclass(eq=False)
class AirResistanceForce(Force):
    """
    Linear drag opposing the velocity.

    F = -c·v. The reported "energy" is ½·c·|v|², kept for parity with the
    other forces; drag is dissipative and has no true potential.
    """
    c: float

    def compute_force(self, position, velocity, time):
        return -self.c * np.asarray(velocity, dtype=np.float64)

    def compute_energy(self, position, velocity, time):
        return 0.5 * self.c * norm2(np.asarray(velocity, dtype=np.float64))


@dataclass(eq=False)
class CompositeForce(Force):
    """
    Sum of several forces, itself usable wherever a Force is expected.

    The composite stores references to the registered forces, not copies:
    changing a registered force's attributes (e.g. moving a spring anchor)
    is visible on the next evaluation. Since addition commutes, the order of
    registration does not affect the result.

    Example:
        forces = CompositeForce()
        forces.add_force(EarthGravityForce(mass=1.0))
        forces.add_force(AirResistanceForce(c=0.12))
        f = forces.compute_force(x, v, t)
    """
    forces: list[Force] = field(default_factory=list)

    def add_force(self, force: Force) -> None:
        """Register a force. The same force may be registered more than once."""
        if not isinstance(force, Force):
            raise TypeError(f"expected a Force, got {type(force).__name__}")
        if force is self:
            raise ValueError("a CompositeForce cannot contain itself")
        self.forces.append(force)

    def remove_force(self, force: Force) -> bool:
        """
        Deregister the first entry that is `force` (identity, not equality).

        Returns:
            True if an entry was removed, False if `force` was not registered.
        """
        for i, f in enumerate(self.forces):
            if f is force:
                del self.forces[i]
                return True
        return False

    def __len__(self) -> int:
        return len(self.forces)

    def __iter__(self) -> Iterator[Force]:
        return iter(self.forces)

    def __contains__(self, force: object) -> bool:
        return any(f is force for f in self.forces)

    def compute_force(self, position, velocity, time):
        total = zeros3()
        for f in self.forces:
            total += f.compute_force(position, velocity, time)
        return total

    def compute_energy(self, position, velocity, time):
        total = 0.0
        for f in self.forces:
            total += float(f.compute_energy(position, velocity, time))
        return total
