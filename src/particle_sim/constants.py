# MIT License (see LICENSE)
"""
Physical constants used by the force models.

Constants are grouped in a PhysicalConstants value instead of being
hardcoded in the formulas, because scenarios scale them: a toy gravitational
constant (G = 1) gives visually fast orbits, while the SI values reproduce
real magnitudes. Every force takes a `constants` argument defaulting to SI.
"""
from __future__ import annotations
from dataclasses import dataclass, replace as _replace
import math


@dataclass(frozen=True)
class PhysicalConstants:
    """
    A consistent set of physical constants.

    Attributes:
        g: Gravitational acceleration near Earth's surface in m/s².
        G: Newtonian gravitational constant in m³/(kg·s²).
        epsilon_0: Vacuum permittivity in F/m.
        mu_0: Vacuum permeability in H/m.
    """
    g: float = 9.806
    G: float = 6.67430e-11
    epsilon_0: float = 8.854187817e-12
    mu_0: float = 1.256637061e-6

    @property
    def k_e(self) -> float:
        """Coulomb's constant k = 1/(4πε₀) in N·m²/C²."""
        return 1.0 / (4.0 * math.pi * self.epsilon_0)

    @property
    def k_m(self) -> float:
        """Magnetic constant μ₀/(4π) in N/A²."""
        return self.mu_0 / (4.0 * math.pi)

    def replace(self, **changes: float) -> "PhysicalConstants":
        """Return a copy with some constants overridden, e.g. replace(G=1.0)."""
        return _replace(self, **changes)

    def to_dict(self) -> dict[str, float]:
        return {"g": self.g, "G": self.G, "epsilon_0": self.epsilon_0, "mu_0": self.mu_0}


# Reference: https://physics.nist.gov/cuu/Constants/
SI = PhysicalConstants()
