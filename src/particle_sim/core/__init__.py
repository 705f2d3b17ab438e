# MIT License (see LICENSE)
"""
Core physics: force models, integrators and energy diagnostics.

This subpackage provides:
    - Forces: Electric, Gravitational, EarthGravity, Hooke, AirResistance,
      and CompositeForce to sum them.
    - Integrators: explicit Euler, semi-implicit Euler, RK4.
    - Invariants: kinetic, potential and total energy.

Typical usage:
    from particle_sim.core import HookeForce, rk4_step
    from particle_sim.types import KinematicState

    spring = HookeForce(k=1.0)
    state = KinematicState(position=(1, 0, 0))
    state = rk4_step(spring, state, mass=1.0, t=0.0, dt=1e-3)
"""
from .forces import (
    Force,
    CompositeForce,
    ElectricForce,
    GravitationalForce,
    EarthGravityForce,
    HookeForce,
    AirResistanceForce,
)
from .integrators import (
    INTEGRATORS,
    explicit_euler_step,
    semi_implicit_euler_step,
    rk4_step,
    get_integrator,
)
from .invariants import kinetic_energy, potential_energy, total_energy, particle_energy

__all__ = [
    # Forces
    "Force",
    "CompositeForce",
    "ElectricForce",
    "GravitationalForce",
    "EarthGravityForce",
    "HookeForce",
    "AirResistanceForce",
    # Integrators
    "INTEGRATORS",
    "explicit_euler_step",
    "semi_implicit_euler_step",
    "rk4_step",
    "get_integrator",
    # Diagnostics
    "kinetic_energy",
    "potential_energy",
    "total_energy",
    "particle_energy",
]
