from particle_sim.core.invariants import relative_drift
from particle_sim import scenarios

# Harmonic oscillator k = m = 1, 10 s at dt = 1 ms
for name in ["euler", "semi_implicit_euler", "rk4"]:
    sim = scenarios.spring_oscillator(integrator=name, dt=1e-3)
    e0 = sim.energy()
    sim.run(10.0)
    print(f"{name:20s} x={sim.particle.position[0]: .6f}  energy drift={relative_drift(e0, sim.energy()):.3e}")
