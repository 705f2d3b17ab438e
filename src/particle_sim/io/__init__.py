# MIT License (see LICENSE)
"""
Input/Output utilities for simulation setups.

This subpackage provides:
    - JSON scenario files: save and load a particle, its forces, the
      physical constants and the driver settings.

Typical usage:
    from particle_sim.io import load_simulation, save_simulation

    sim = load_simulation("orbit.json")
    sim.run(10.0)
    save_simulation(sim, "orbit_after_10s.json")
"""
from .json_io import (
    load_simulation,
    load_simulation_raw,
    save_simulation,
    simulation_from_json,
    simulation_to_json,
    force_from_json,
    force_to_json,
    particle_from_json,
    constants_from_json,
)

__all__ = [
    # Loading
    "load_simulation",
    "load_simulation_raw",
    # Saving
    "save_simulation",
    # Serialization
    "simulation_from_json",
    "simulation_to_json",
    "force_from_json",
    "force_to_json",
    "particle_from_json",
    "constants_from_json",
]
