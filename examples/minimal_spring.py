# examples/minimal_spring.py
from particle_sim import Particle, Simulation
from particle_sim.core import HookeForce

body = Particle(mass=1.0, position=(1.0, 0.0, 0.0), velocity=(0.0, 0.0, 0.0))
body.add_force(HookeForce(k=1.0))

sim = Simulation(body, dt=1e-3, integrator="rk4")

t_end = 6.283185307179586  # one period
sim.run(t_end)

print("t:", sim.time)
print("pos:", sim.particle.position)
print("vel:", sim.particle.velocity)
print("energy:", sim.energy())
