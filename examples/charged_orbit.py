import numpy as np

from particle_sim import SingularityError, scenarios

# Opposite charges repel with this force convention (F = -k q1 q2 r/|r|^3),
# like charges attract: start on a circular orbit around the fixed charge.
sim = scenarios.charged_pair(q1=1e-6, q2=1e-6, mass=1e-3)

for _ in range(5):
    sim.run(0.5)
    print("t", round(sim.time, 3), "r", float(np.linalg.norm(sim.particle.position)))

# Started on top of the fixed charge with no softening: the step raises
head_on = scenarios.charged_pair(position=(0.0, 0.0, 0.0))
try:
    head_on.run(1.0)
except SingularityError as e:
    print("singularity:", e)
