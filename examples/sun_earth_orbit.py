from particle_sim import scenarios
from particle_sim.renderer import DebugRenderer

# Scaled Sun/Earth system: masses / 1e16, SI gravitational constant
sim = scenarios.sun_earth_orbit(integrator="rk4", dt=1e-3)
renderer = DebugRenderer(verbose=True)

e0 = sim.energy()
frame_time = 0.02  # 50 fps
for frame in range(500):
    sim.advance(frame_time)
    if frame % 50 == 0:
        renderer.render_simulation(sim)

print("energy drift:", (sim.energy() - e0) / abs(e0))
print("trajectory samples:", len(sim.trajectory))
