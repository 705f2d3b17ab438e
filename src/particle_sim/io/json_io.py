# MIT License (see LICENSE)
"""
JSON serialization and deserialization for simulation setups.

A scenario file describes one complete run: the particle, the forces acting
on it, the physical constants and the driver settings.

JSON Schema Overview:
---------------------
{
  "dt": float,                     # Timestep (sec), default: 0.001
  "integrator": string,            # "euler", "semi_implicit_euler" or "rk4"
  "time": float,                   # Start time (sec), default: 0
  "trajectory_capacity": int,      # Default: 10000
  "constants": {                   # Optional, defaults to SI values
    "g": float, "G": float, "epsilon_0": float, "mu_0": float
  },
  "particle": {                    # Required
    "mass": float,                 # Required, > 0
    "position": [x, y, z],         # Default: [0, 0, 0]
    "velocity": [vx, vy, vz]       # Default: [0, 0, 0]
  },
  "forces": [                      # Optional
    {"type": "electric", "q1": float, "q2": float,
     "anchor": [x, y, z], "softening": float},
    {"type": "gravitational", "m1": float, "m2": float,
     "anchor": [x, y, z], "softening": float},
    {"type": "earth_gravity", "mass": float},
    {"type": "hooke", "k": float, "anchor": [x, y, z]},
    {"type": "air_resistance", "c": float},
    {"type": "composite", "forces": [...]}
  ]
}

"anchor" defaults to the origin and "softening" to 0. The "constants" block
applies to every force in the file.
"""
from __future__ import annotations
import json
import logging
from typing import Any

import numpy as np

from ..constants import PhysicalConstants, SI
from ..core.forces import (
    Force,
    CompositeForce,
    ElectricForce,
    GravitationalForce,
    EarthGravityForce,
    HookeForce,
    AirResistanceForce,
)
from ..particle import Particle
from ..simulation import Simulation, DEFAULT_TRAJECTORY_CAPACITY

logger = logging.getLogger(__name__)


def load_simulation_raw(path: str) -> dict[str, Any]:
    """
    Load raw JSON data from a scenario file without object construction.

    Args:
        path: Absolute or relative path to the JSON file.

    Returns:
        Dictionary containing the raw JSON data.
    """
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_simulation(path: str) -> Simulation:
    """
    Load and construct a ready-to-run Simulation from a JSON file.

    Raises:
        FileNotFoundError: If the file cannot be found.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If required fields are missing or malformed.
        InvalidMassError: If the particle mass is not positive.
    """
    data = load_simulation_raw(path)
    sim = simulation_from_json(data)
    logger.debug("Loaded scenario %s (%d forces)", path, len(sim.particle.forces))
    return sim


def simulation_from_json(data: dict[str, Any]) -> Simulation:
    """Build a Simulation from an already-parsed scenario dictionary."""
    constants = constants_from_json(data.get("constants", {}))

    if "particle" not in data:
        raise ValueError("Scenario missing required 'particle' field.")
    particle = particle_from_json(data["particle"])

    for force_data in data.get("forces", []):
        particle.add_force(force_from_json(force_data, constants))

    return Simulation(
        particle=particle,
        dt=float(data.get("dt", 1e-3)),
        integrator=data.get("integrator", "rk4"),
        time=float(data.get("time", 0.0)),
        trajectory_capacity=int(data.get("trajectory_capacity", DEFAULT_TRAJECTORY_CAPACITY)),
    )


def constants_from_json(d: dict[str, Any]) -> PhysicalConstants:
    """Parse a constants block; omitted entries keep their SI values."""
    unknown = set(d) - set(SI.to_dict())
    if unknown:
        raise ValueError(f"Unknown physical constants: {sorted(unknown)}")
    return SI.replace(**{k: float(v) for k, v in d.items()})


def particle_from_json(d: dict[str, Any]) -> Particle:
    """Parse the particle block (mass required, position/velocity optional)."""
    if "mass" not in d:
        raise ValueError("Particle definition missing required 'mass' field.")
    return Particle(
        mass=float(d["mass"]),
        position=_vec(d.get("position", [0.0, 0.0, 0.0]), "position"),
        velocity=_vec(d.get("velocity", [0.0, 0.0, 0.0]), "velocity"),
    )


def force_from_json(d: dict[str, Any], constants: PhysicalConstants = SI) -> Force:
    """
    Parse a single force definition.

    Args:
        d: Dictionary with a "type" key and the force's parameters.
        constants: Physical constants for forces that need them.

    Returns:
        The constructed force (a CompositeForce for type "composite").
    """
    force_type = d.get("type")
    try:
        if force_type == "electric":
            return ElectricForce(
                charge_1=float(d["q1"]),
                charge_2=float(d["q2"]),
                anchor=_vec(d.get("anchor", [0.0, 0.0, 0.0]), "anchor"),
                softening=float(d.get("softening", 0.0)),
                constants=constants,
            )
        if force_type == "gravitational":
            return GravitationalForce(
                mass_1=float(d["m1"]),
                mass_2=float(d["m2"]),
                anchor=_vec(d.get("anchor", [0.0, 0.0, 0.0]), "anchor"),
                softening=float(d.get("softening", 0.0)),
                constants=constants,
            )
        if force_type == "earth_gravity":
            return EarthGravityForce(mass=float(d["mass"]), constants=constants)
        if force_type == "hooke":
            return HookeForce(
                k=float(d["k"]),
                anchor=_vec(d.get("anchor", [0.0, 0.0, 0.0]), "anchor"),
            )
        if force_type == "air_resistance":
            return AirResistanceForce(c=float(d["c"]))
        if force_type == "composite":
            composite = CompositeForce()
            for sub in d.get("forces", []):
                composite.add_force(force_from_json(sub, constants))
            return composite
    except KeyError as e:
        raise ValueError(f"Force of type '{force_type}' missing required field {e}") from None

    raise ValueError(f"Unknown force type: '{force_type}'")


def force_to_json(force: Force) -> dict[str, Any]:
    """
    Serialize a force to a dictionary (round-trip compatible).

    Anchors at the origin and zero softening are omitted. Physical constants
    are not stored per force; see simulation_to_json.
    """
    if isinstance(force, ElectricForce):
        result = {"type": "electric", "q1": force.charge_1, "q2": force.charge_2}
        _put_anchor(result, force.anchor)
        if force.softening != 0.0:
            result["softening"] = force.softening
        return result
    if isinstance(force, GravitationalForce):
        result = {"type": "gravitational", "m1": force.mass_1, "m2": force.mass_2}
        _put_anchor(result, force.anchor)
        if force.softening != 0.0:
            result["softening"] = force.softening
        return result
    if isinstance(force, EarthGravityForce):
        return {"type": "earth_gravity", "mass": force.mass}
    if isinstance(force, HookeForce):
        result = {"type": "hooke", "k": force.k}
        _put_anchor(result, force.anchor)
        return result
    if isinstance(force, AirResistanceForce):
        return {"type": "air_resistance", "c": force.c}
    if isinstance(force, CompositeForce):
        return {"type": "composite", "forces": [force_to_json(f) for f in force]}
    raise TypeError(f"Cannot serialize unknown force type: {type(force)}")


def simulation_to_json(sim: Simulation) -> dict[str, Any]:
    """
    Serialize a complete Simulation to a dictionary.

    Captured state includes the driver settings, the particle's current
    kinematic state and its top-level forces. The constants block is taken
    from the first force that carries constants; a scenario file can only
    express one set, so forces with differing constants raise ValueError.
    """
    p = sim.particle
    result: dict[str, Any] = {
        "dt": sim.dt,
        "integrator": sim.integrator,
        "particle": {
            "mass": p.mass,
            "position": _to_list(p.position),
            "velocity": _to_list(p.velocity),
        },
        "forces": [force_to_json(f) for f in p.forces],
    }

    # Optional parameters (skip if standard defaults)
    if sim.time != 0.0:
        result["time"] = sim.time
    if sim.trajectory_capacity != DEFAULT_TRAJECTORY_CAPACITY:
        result["trajectory_capacity"] = sim.trajectory_capacity

    constants = _collect_constants(p.forces)
    if constants and constants[0] != SI:
        result["constants"] = constants[0].to_dict()
    return result


def save_simulation(sim: Simulation, path: str, indent: int = 2) -> None:
    """Save a Simulation to a JSON file on disk."""
    data = simulation_to_json(sim)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent)
    logger.debug("Saved scenario to %s", path)


def _collect_constants(force: Force) -> list[PhysicalConstants]:
    """Distinct constants used by `force` and anything nested in it."""
    found: list[PhysicalConstants] = []
    stack = [force]
    while stack:
        f = stack.pop()
        if isinstance(f, CompositeForce):
            stack.extend(f)
            continue
        c = getattr(f, "constants", None)
        if c is not None and c not in found:
            found.append(c)
    if len(found) > 1:
        raise ValueError("Forces use different physical constants; a scenario file holds one set")
    return found


def _put_anchor(result: dict[str, Any], anchor: Any) -> None:
    if np.any(np.asarray(anchor) != 0.0):
        result["anchor"] = _to_list(anchor)


def _vec(value: Any, name: str) -> tuple[float, float, float]:
    """Helper: Validate a JSON 3-vector."""
    if not isinstance(value, (list, tuple)) or len(value) != 3:
        raise ValueError(f"'{name}' must be a list of 3 numbers, got {value!r}")
    return (float(value[0]), float(value[1]), float(value[2]))


def _to_list(arr: Any) -> list[float]:
    """Helper: Convert numpy array or tuple to a clean list of floats."""
    if isinstance(arr, np.ndarray):
        return arr.tolist()
    return [float(x) for x in arr]
