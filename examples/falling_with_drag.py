from particle_sim import scenarios

m, c = 0.01, 0.12
sim = scenarios.falling_body(mass=m, drag=c, height=100.0, dt=1e-3)

for _ in range(10):
    sim.run(0.1)
    print(f"t={sim.time:.2f}  y={sim.particle.position[1]:8.3f}  vy={sim.particle.velocity[1]:8.4f}")

print("terminal speed m*g/c:", m * 9.806 / c)
