"""
Microbenchmark: time per step for each integrator and force-set size.
Run:
  python benchmarks/bench_steps.py
"""
import time

import numpy as np

from particle_sim import Particle, Simulation
from particle_sim.core import HookeForce, AirResistanceForce
from particle_sim.core.integrators import INTEGRATORS


def run(integrator: str, n_forces: int, steps: int = 5000):
    rng = np.random.default_rng(12345)  # determinism (no randomness elsewhere)
    body = Particle(mass=1.0, position=(1.0, 0.0, 0.0))
    for _ in range(n_forces):
        body.add_force(HookeForce(k=1.0, anchor=rng.normal(size=3)))
    body.add_force(AirResistanceForce(c=0.01))

    sim = Simulation(body, dt=1e-3, integrator=integrator)

    # warmup
    for _ in range(100):
        sim.step()

    t0 = time.perf_counter()
    for _ in range(steps):
        sim.step()
    t1 = time.perf_counter()
    return (t1 - t0) / steps


if __name__ == "__main__":
    for name in INTEGRATORS:
        for n in [1, 5, 25]:
            per_step = run(name, n)
            print(f"{name:20s} forces={n + 1:3d}  step={1e6*per_step:8.2f} us  steps/s={1/per_step:10.1f}")
        print()
