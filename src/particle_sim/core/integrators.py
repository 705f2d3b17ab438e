# MIT License (see LICENSE)
"""
Numerical integrators for point-mass dynamics.

Every integrator solves the equations of motion
    dx/dt = v,         dv/dt = F(x, v, t)/m
over one fixed step and shares the signature

    step(force, state, mass, t, dt) -> KinematicState

The functions are pure: they read `state`, evaluate `force` as often as the
scheme requires and return a new state. Nothing persists between calls, so
the same function can drive any number of independent simulations. `dt` may
be negative to integrate backwards in time.

Available integrators:
- explicit_euler_step: first order, both updates use pre-step values.
  Cheapest, but energy drifts for orbits and oscillators.
- semi_implicit_euler_step: first order and symplectic. The position update
  uses the already-updated velocity, which keeps the energy error bounded.
- rk4_step: classical 4th-order Runge-Kutta, O(dt⁵) local error.

Reference:
    Runge-Kutta methods: https://en.wikipedia.org/wiki/Runge-Kutta_methods
    Semi-implicit Euler: https://en.wikipedia.org/wiki/Semi-implicit_Euler_method
"""
from __future__ import annotations
from typing import Callable

import numpy as np

from ..errors import check_mass
from ..types import KinematicState
from .forces import Force

Integrator = Callable[[Force, KinematicState, float, float, float], KinematicState]


def _acceleration(force: Force, x: np.ndarray, v: np.ndarray, t: float, inv_m: float) -> np.ndarray:
    """Right-hand side dv/dt = F(x, v, t)/m."""
    return force.compute_force(x, v, t) * inv_m


def explicit_euler_step(force: Force, state: KinematicState, mass: float, t: float, dt: float) -> KinematicState:
    """
    Advance one step with the explicit (forward) Euler method.

        x(t+dt) = x(t) + v(t)·dt
        v(t+dt) = v(t) + F(x(t), v(t), t)/m·dt

    Args:
        force: Force acting on the particle.
        state: State at time t.
        mass: Particle mass (> 0).
        t: Current time in seconds.
        dt: Timestep in seconds.

    Raises:
        InvalidMassError: If mass <= 0.
        SingularityError: Propagated from the force evaluation.
    """
    inv_m = 1.0 / check_mass(mass)
    x0, v0 = state.position, state.velocity
    a0 = _acceleration(force, x0, v0, t, inv_m)
    return KinematicState(x0 + v0 * dt, v0 + a0 * dt)


def semi_implicit_euler_step(force: Force, state: KinematicState, mass: float, t: float, dt: float) -> KinematicState:
    """
    Advance one step with the semi-implicit (symplectic) Euler method.

        v(t+dt) = v(t) + F(x(t), v(t), t)/m·dt
        x(t+dt) = x(t) + v(t+dt)·dt

    Updating the velocity first is the whole point: with the order swapped
    this is explicit Euler again.

    Raises:
        InvalidMassError: If mass <= 0.
        SingularityError: Propagated from the force evaluation.
    """
    inv_m = 1.0 / check_mass(mass)
    x0, v0 = state.position, state.velocity
    v1 = v0 + _acceleration(force, x0, v0, t, inv_m) * dt
    return KinematicState(x0 + v1 * dt, v1)


def rk4_step(force: Force, state: KinematicState, mass: float, t: float, dt: float) -> KinematicState:
    """
    Advance one step with classical 4th-order Runge-Kutta.

    RK4 evaluates derivatives at 4 points within the timestep (t, t+dt/2,
    t+dt/2, t+dt), each built from the previous stage's slope, and combines
    them with weights (1, 2, 2, 1)/6. The force is re-evaluated at every
    stage, so position-, velocity- and time-dependent forces are all handled.

    Raises:
        InvalidMassError: If mass <= 0.
        SingularityError: Propagated from any stage's force evaluation.

    Reference:
        https://en.wikipedia.org/wiki/Runge-Kutta_methods#The_Runge-Kutta_method
    """
    inv_m = 1.0 / check_mass(mass)
    x0, v0 = state.position, state.velocity
    half = 0.5 * dt

    # RK4 stages: kx = dx/dt, kv = dv/dt
    kx1 = v0
    kv1 = _acceleration(force, x0, v0, t, inv_m)

    kx2 = v0 + half * kv1
    kv2 = _acceleration(force, x0 + half * kx1, kx2, t + half, inv_m)

    kx3 = v0 + half * kv2
    kv3 = _acceleration(force, x0 + half * kx2, kx3, t + half, inv_m)

    kx4 = v0 + dt * kv3
    kv4 = _acceleration(force, x0 + dt * kx3, kx4, t + dt, inv_m)

    # Weighted combination
    x1 = x0 + (dt / 6.0) * (kx1 + 2 * kx2 + 2 * kx3 + kx4)
    v1 = v0 + (dt / 6.0) * (kv1 + 2 * kv2 + 2 * kv3 + kv4)
    return KinematicState(x1, v1)


INTEGRATORS: dict[str, Integrator] = {
    "euler": explicit_euler_step,
    "semi_implicit_euler": semi_implicit_euler_step,
    "rk4": rk4_step,
}


def get_integrator(name: str) -> Integrator:
    """
    Look up an integrator by name ("euler", "semi_implicit_euler", "rk4").

    Raises:
        ValueError: If the name is unknown.
    """
    try:
        return INTEGRATORS[name]
    except KeyError:
        valid = ", ".join(sorted(INTEGRATORS))
        raise ValueError(f"Unknown integrator: {name!r} (expected one of: {valid})") from None
