# MIT License (see LICENSE)
import numpy as np
import pytest

from particle_sim.core.forces import (
    Force,
    CompositeForce,
    EarthGravityForce,
    GravitationalForce,
    HookeForce,
)
from particle_sim.core.integrators import (
    INTEGRATORS,
    explicit_euler_step,
    semi_implicit_euler_step,
    rk4_step,
    get_integrator,
)
from particle_sim.errors import InvalidMassError, SingularityError
from particle_sim.types import KinematicState

ALL_STEPS = [explicit_euler_step, semi_implicit_euler_step, rk4_step]


class RecordingForce(Force):
    """Constant force that remembers where and when it was evaluated."""

    def __init__(self, value=(0.0, 0.0, 0.0)):
        self.value = np.array(value, dtype=np.float64)
        self.calls = []

    def compute_force(self, position, velocity, time):
        self.calls.append((np.array(position), np.array(velocity), time))
        return self.value.copy()

    def compute_energy(self, position, velocity, time):
        return 0.0


def test_zero_force_euler_variants_agree():
    """With F = 0 both Euler schemes reduce to drift: x' = x + v·dt, v' = v."""
    state = KinematicState((1.0, 2.0, 3.0), (0.5, -1.0, 2.0))
    dt = 0.1
    a = explicit_euler_step(CompositeForce(), state, 1.0, 0.0, dt)
    b = semi_implicit_euler_step(CompositeForce(), state, 1.0, 0.0, dt)

    assert np.array_equal(a.position, b.position)
    assert np.array_equal(a.velocity, b.velocity)
    assert np.allclose(a.position, [1.05, 1.9, 3.2])
    assert np.array_equal(a.velocity, state.velocity)


def test_constant_force_euler_variants_diverge():
    """
    Under constant gravity the velocity update is the same but the position differs:
      explicit:       y' = y + vy·dt
      semi-implicit:  y' = y + (vy - g·dt)·dt
    """
    g = 9.806
    state = KinematicState((0.0, 10.0, 0.0), (1.0, 0.0, 0.0))
    dt = 0.01
    a = explicit_euler_step(EarthGravityForce(1.0), state, 1.0, 0.0, dt)
    b = semi_implicit_euler_step(EarthGravityForce(1.0), state, 1.0, 0.0, dt)

    assert np.allclose(a.velocity, b.velocity)
    assert np.allclose(a.velocity, [1.0, -g * dt, 0.0])
    assert a.position[1] == pytest.approx(10.0)
    assert b.position[1] == pytest.approx(10.0 - g * dt * dt)
    assert not np.allclose(a.position, b.position, rtol=0.0, atol=1e-8)


def test_explicit_euler_uses_pre_step_values():
    """Spring k = m = 1: x' = x + v·dt, v' = v - x·dt."""
    state = KinematicState((1.0, 0.0, 0.0), (0.0, 2.0, 0.0))
    dt = 0.1
    new = explicit_euler_step(HookeForce(1.0), state, 1.0, 0.0, dt)
    assert np.allclose(new.position, [1.0, 0.2, 0.0])
    assert np.allclose(new.velocity, [-0.1, 2.0, 0.0])


def test_rk4_exact_for_constant_acceleration():
    """RK4 reproduces x = x0 + v0·t + ½·a·t² exactly (up to rounding)."""
    m = 2.0
    F = np.array([1.0, -4.0, 0.5])
    state = KinematicState((0.0, 1.0, 2.0), (3.0, 0.0, -1.0))
    dt = 0.5
    new = rk4_step(RecordingForce(F), state, m, 0.0, dt)

    a = F / m
    assert np.allclose(new.position, state.position + state.velocity * dt + 0.5 * a * dt * dt)
    assert np.allclose(new.velocity, state.velocity + a * dt)


def test_rk4_stage_times_and_states():
    """Stages are evaluated at t, t+dt/2, t+dt/2, t+dt, each from the previous slope."""
    force = RecordingForce((2.0, 0.0, 0.0))
    state = KinematicState((0.0, 0.0, 0.0), (1.0, 0.0, 0.0))
    t, dt = 3.0, 0.2
    rk4_step(force, state, 1.0, t, dt)

    times = [c[2] for c in force.calls]
    assert times == pytest.approx([t, t + dt / 2, t + dt / 2, t + dt])

    # a = 2: k0 = (1, 2), k1 = (1.2, 2), k2 = (1.2, 2)
    positions = [c[0][0] for c in force.calls]
    velocities = [c[1][0] for c in force.calls]
    assert positions == pytest.approx([0.0, 0.1, 0.12, 0.24])
    assert velocities == pytest.approx([1.0, 1.2, 1.2, 1.4])


def test_steps_are_independent_of_history():
    """Repeating the same step gives bit-identical results (no carried-over stage values)."""
    spring = HookeForce(1.0)
    s = KinematicState((1.0, 0.0, 0.0), (0.0, 1.0, 0.0))
    for step in ALL_STEPS:
        first = step(spring, s, 1.0, 0.0, 0.01)
        step(spring, KinematicState((9.0, 9.0, 9.0), (9.0, 9.0, 9.0)), 3.0, 5.0, 0.7)
        again = step(spring, s, 1.0, 0.0, 0.01)
        assert np.array_equal(first.position, again.position)
        assert np.array_equal(first.velocity, again.velocity)


@pytest.mark.parametrize("step", ALL_STEPS)
@pytest.mark.parametrize("mass", [0.0, -1.0, float("nan")])
def test_invalid_mass_rejected_before_evaluation(step, mass):
    force = RecordingForce((1.0, 0.0, 0.0))
    with pytest.raises(InvalidMassError):
        step(force, KinematicState(), mass, 0.0, 0.01)
    assert force.calls == []


@pytest.mark.parametrize("step", ALL_STEPS)
def test_singularity_propagates(step):
    force = GravitationalForce(1.0, 1.0, anchor=(1.0, 1.0, 1.0))
    with pytest.raises(SingularityError):
        step(force, KinematicState((1.0, 1.0, 1.0)), 1.0, 0.0, 0.01)


@pytest.mark.parametrize("step", ALL_STEPS)
def test_step_returns_new_state(step):
    state = KinematicState((1.0, 0.0, 0.0), (0.0, 1.0, 0.0))
    new = step(HookeForce(1.0), state, 1.0, 0.0, 0.01)
    assert new is not state
    assert np.array_equal(state.position, [1.0, 0.0, 0.0])
    assert np.array_equal(state.velocity, [0.0, 1.0, 0.0])
    with pytest.raises(ValueError):
        new.position[0] = 5.0


def test_rk4_reverse_integration():
    """A step of +dt followed by -dt returns to the start (to RK4 accuracy)."""
    spring = HookeForce(1.0)
    start = KinematicState((1.0, 0.0, 0.0), (0.0, 0.5, 0.0))
    fwd = rk4_step(spring, start, 1.0, 0.0, 0.01)
    back = rk4_step(spring, fwd, 1.0, 0.01, -0.01)
    assert back.isclose(start, atol=1e-10)


def test_zero_dt_is_identity():
    start = KinematicState((1.0, 2.0, 3.0), (4.0, 5.0, 6.0))
    for step in ALL_STEPS:
        assert step(HookeForce(1.0), start, 1.0, 0.0, 0.0).isclose(start)


def test_integrator_registry():
    assert get_integrator("euler") is explicit_euler_step
    assert get_integrator("semi_implicit_euler") is semi_implicit_euler_step
    assert get_integrator("rk4") is rk4_step
    assert set(INTEGRATORS) == {"euler", "semi_implicit_euler", "rk4"}

    with pytest.raises(ValueError, match="Unknown integrator"):
        get_integrator("verlet")
