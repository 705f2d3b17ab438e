# MIT License (see LICENSE)
"""
particle_sim - Point-mass dynamics under additive force fields.

This package simulates a single point mass acted on by any combination of
Coulomb, Newtonian gravity, uniform gravity, spring and drag forces, and
advances it with interchangeable fixed-step integrators.

Main entry points:
    - Particle: Mass, kinematic state and the forces acting on it.
    - Simulation: Fixed-step driver with a bounded trajectory buffer.
    - KinematicState: Immutable (position, velocity) pair.
    - PhysicalConstants: The constants used by the force models.

Submodules:
    - core: Force models, integrators and energy diagnostics.
    - io: JSON scenario files.
    - renderer: Optional visualization adapters.
    - scenarios: Ready-made experiments.

Example:
    from particle_sim import Particle, Simulation
    from particle_sim.core import EarthGravityForce, AirResistanceForce

    ball = Particle(mass=1.0, position=(0, 100, 0))
    ball.add_force(EarthGravityForce(mass=1.0))
    ball.add_force(AirResistanceForce(c=0.12))
    sim = Simulation(ball, dt=1e-3, integrator="rk4")
    sim.run(2.0)
"""
from .constants import PhysicalConstants, SI
from .errors import SimulationError, InvalidMassError, SingularityError
from .types import KinematicState
from .particle import Particle
from .simulation import Simulation

__all__ = [
    # Simulation
    "Particle",
    "Simulation",
    "KinematicState",
    # Configuration
    "PhysicalConstants",
    "SI",
    # Errors
    "SimulationError",
    "InvalidMassError",
    "SingularityError",
]
