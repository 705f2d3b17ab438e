# MIT License (see LICENSE)
import json

import numpy as np
import pytest

from particle_sim import Particle, Simulation, InvalidMassError
from particle_sim.constants import SI
from particle_sim.core.forces import (
    CompositeForce,
    GravitationalForce,
    HookeForce,
    AirResistanceForce,
    ElectricForce,
)
from particle_sim.io.json_io import (
    force_from_json,
    force_to_json,
    load_simulation,
    save_simulation,
    simulation_from_json,
    simulation_to_json,
)
from particle_sim import scenarios


def test_save_and_load_orbit(tmp_path):
    """A loaded scenario steps exactly like the one it was saved from."""
    saved = scenarios.sun_earth_orbit()
    saved.run(0.5)
    path = tmp_path / "orbit.json"
    save_simulation(saved, str(path))

    loaded = load_simulation(str(path))
    assert loaded.time == pytest.approx(saved.time)
    assert loaded.particle.mass == saved.particle.mass
    assert np.array_equal(loaded.particle.position, saved.particle.position)
    assert len(loaded.particle.forces) == 1

    a = saved.step()
    b = loaded.step()
    assert a.isclose(b, atol=0.0)


def test_defaults_are_omitted():
    sim = scenarios.spring_oscillator()
    data = simulation_to_json(sim)

    assert "time" not in data
    assert "constants" not in data
    assert "trajectory_capacity" not in data
    assert data["forces"] == [{"type": "hooke", "k": 1.0}]
    assert data["particle"]["position"] == [1.0, 0.0, 0.0]


def test_constants_block_applies_to_forces():
    data = {
        "dt": 0.01,
        "integrator": "semi_implicit_euler",
        "constants": {"G": 1.0},
        "particle": {"mass": 1.0, "position": [1, 0, 0], "velocity": [0, 1, 0]},
        "forces": [{"type": "gravitational", "m1": 1.0, "m2": 1.0}],
    }
    sim = simulation_from_json(data)
    gravity = next(iter(sim.particle.forces))

    assert sim.integrator == "semi_implicit_euler"
    assert sim.dt == 0.01
    assert gravity.constants.G == 1.0
    assert gravity.constants.g == SI.g

    out = simulation_to_json(sim)
    assert out["constants"]["G"] == 1.0


def test_nested_composite_and_anchor(tmp_path):
    inner = CompositeForce()
    inner.add_force(HookeForce(2.0, anchor=(0.0, 1.0, 0.0)))
    inner.add_force(AirResistanceForce(0.1))

    d = force_to_json(inner)
    assert d["type"] == "composite"
    assert d["forces"][0]["anchor"] == [0.0, 1.0, 0.0]

    rebuilt = force_from_json(json.loads(json.dumps(d)))
    x, v = np.array([1.0, 2.0, 3.0]), np.array([0.5, 0.0, 0.0])
    assert np.allclose(rebuilt.compute_force(x, v, 0.0), inner.compute_force(x, v, 0.0))


def test_electric_softening_round_trip():
    f = ElectricForce(1e-6, -2e-6, anchor=(1.0, 0.0, 0.0), softening=0.01)
    g = force_from_json(force_to_json(f))
    assert isinstance(g, ElectricForce)
    assert (g.charge_1, g.charge_2, g.softening) == (1e-6, -2e-6, 0.01)
    assert np.array_equal(g.anchor, f.anchor)


def test_mixed_constants_rejected():
    p = Particle(1.0, position=(1, 0, 0))
    p.add_force(GravitationalForce(1.0, 1.0, constants=SI.replace(G=1.0)))
    p.add_force(GravitationalForce(1.0, 1.0, anchor=(5, 0, 0)))
    with pytest.raises(ValueError):
        simulation_to_json(Simulation(p))


@pytest.mark.parametrize("data, error", [
    ({}, ValueError),
    ({"particle": {}}, ValueError),
    ({"particle": {"mass": 0.0}}, InvalidMassError),
    ({"particle": {"mass": 1.0, "position": [1, 2]}}, ValueError),
    ({"particle": {"mass": 1.0}, "forces": [{"type": "magnetic"}]}, ValueError),
    ({"particle": {"mass": 1.0}, "forces": [{"type": "hooke"}]}, ValueError),
    ({"particle": {"mass": 1.0}, "constants": {"h": 6.6e-34}}, ValueError),
    ({"particle": {"mass": 1.0}, "integrator": "verlet"}, ValueError),
])
def test_malformed_scenarios(data, error):
    with pytest.raises(error):
        simulation_from_json(data)
