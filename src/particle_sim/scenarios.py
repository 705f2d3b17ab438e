# MIT License (see LICENSE)
"""
Ready-made experiments.

Each function wires a particle to a set of forces and returns a Simulation
ready to run. The masses in sun_earth_orbit are the real ones divided by
1e16 so that the orbit fits in a ±200 m viewing volume with SI constants.
"""
from __future__ import annotations

import math

from .constants import PhysicalConstants, SI
from .core.forces import (
    AirResistanceForce,
    EarthGravityForce,
    ElectricForce,
    GravitationalForce,
    HookeForce,
)
from .particle import Particle
from .simulation import Simulation

EARTH_MASS_SCALED = 5.97219e8   # kg / 1e16
SUN_MASS_SCALED = 1.98847e14    # kg / 1e16


def sun_earth_orbit(integrator: str = "rk4", dt: float = 1e-3) -> Simulation:
    """Scaled Earth on an elliptical orbit around a Sun fixed at the origin."""
    earth = Particle(
        mass=EARTH_MASS_SCALED,
        position=(20.0, 20.0, 0.0),
        velocity=(0.0, -20.0, 0.0),
    )
    earth.add_force(GravitationalForce(SUN_MASS_SCALED, EARTH_MASS_SCALED))
    return Simulation(earth, dt=dt, integrator=integrator)


def spring_oscillator(
    k: float = 1.0,
    mass: float = 1.0,
    amplitude: float = 1.0,
    integrator: str = "rk4",
    dt: float = 1e-3,
) -> Simulation:
    """
    Mass on a spring anchored at the origin, released at rest from x = amplitude.

    Period T = 2π·sqrt(m/k).
    """
    body = Particle(mass=mass, position=(amplitude, 0.0, 0.0))
    body.add_force(HookeForce(k))
    return Simulation(body, dt=dt, integrator=integrator)


def oscillator_period(k: float, mass: float) -> float:
    return 2.0 * math.pi * math.sqrt(mass / k)


def falling_body(
    mass: float = 1.0,
    drag: float = 0.12,
    height: float = 100.0,
    integrator: str = "rk4",
    dt: float = 1e-3,
    constants: PhysicalConstants = SI,
) -> Simulation:
    """
    Body dropped from rest under uniform gravity and linear air resistance.

    Terminal speed is m·g/c.
    """
    body = Particle(mass=mass, position=(0.0, height, 0.0))
    body.add_force(EarthGravityForce(mass, constants=constants))
    body.add_force(AirResistanceForce(drag))
    return Simulation(body, dt=dt, integrator=integrator)


def charged_pair(
    q1: float = 1e-6,
    q2: float = 1e-6,
    mass: float = 1e-3,
    position: tuple[float, float, float] = (1.0, 0.0, 0.0),
    velocity: tuple[float, float, float] | None = None,
    integrator: str = "rk4",
    dt: float = 1e-3,
    softening: float = 0.0,
) -> Simulation:
    """
    Charged particle around a fixed charge at the origin.

    With the force's sign convention F = -k_e·q1·q2·r/|r|³, a positive
    product q1·q2 pulls the particle in. If `velocity` is omitted and the
    force is attractive, the particle starts on a circular orbit
    (|v| = sqrt(k_e·q1·q2 / (m·r)), perpendicular to r in the xy plane).
    """
    force = ElectricForce(q1, q2, softening=softening)
    if velocity is None:
        x, y, _ = position
        r = math.hypot(x, y)
        strength = force.constants.k_e * q1 * q2
        if r > 0 and strength > 0:
            speed = math.sqrt(strength / (mass * r))
            velocity = (-y / r * speed, x / r * speed, 0.0)
        else:
            velocity = (0.0, 0.0, 0.0)
    body = Particle(mass=mass, position=position, velocity=velocity)
    body.add_force(force)
    return Simulation(body, dt=dt, integrator=integrator)
