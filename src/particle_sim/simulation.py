# MIT License (see LICENSE)
"""
The simulation driver and its fixed-step loop.

The Simulation class owns everything that changes while a run progresses:
- The particle (mass, state, attached forces).
- The simulation clock.
- The integrator choice and fixed timestep.
- A bounded trajectory buffer of past positions for renderers.

Structure:
    - User creates a Particle and attaches forces.
    - User wraps it in a Simulation.
    - A render loop calls sim.advance(frame_time) once per frame; the
      accumulator turns wall-clock frame time into a whole number of
      fixed-size steps, so results do not depend on the frame rate.
"""
from __future__ import annotations
from collections import deque
from dataclasses import dataclass, field
import logging

import numpy as np

from .core.integrators import get_integrator
from .core.invariants import particle_energy
from .particle import Particle
from .types import KinematicState

logger = logging.getLogger(__name__)

DEFAULT_TRAJECTORY_CAPACITY = 10_000


@dataclass(eq=False)
class Simulation:
    """
    Fixed-step simulation of one particle.

    Attributes:
        particle: The simulated body.
        dt: Fixed timestep in seconds (default: 1 ms).
        integrator: Integration scheme ("euler", "semi_implicit_euler", "rk4").
        time: Current simulation time in seconds.
        trajectory_capacity: Number of past positions kept; older samples
                             are discarded first.
        max_steps_per_frame: Upper bound on steps taken by one advance()
                             call. Leftover frame time beyond it is dropped
                             so a stalled host cannot queue unbounded work.
    """
    particle: Particle
    dt: float = 1e-3
    integrator: str = "rk4"
    time: float = 0.0
    trajectory_capacity: int = DEFAULT_TRAJECTORY_CAPACITY
    max_steps_per_frame: int = 10_000

    # Internal state
    trajectory: deque = field(init=False, repr=False)
    accumulator: float = field(init=False, default=0.0)
    steps: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        """Validate settings and seed the trajectory with the start position."""
        if not self.dt > 0:
            raise ValueError(f"dt must be > 0, got {self.dt}")
        if self.trajectory_capacity <= 0:
            raise ValueError(f"trajectory_capacity must be > 0, got {self.trajectory_capacity}")
        if self.max_steps_per_frame <= 0:
            raise ValueError(f"max_steps_per_frame must be > 0, got {self.max_steps_per_frame}")
        get_integrator(self.integrator)

        self.trajectory = deque(maxlen=self.trajectory_capacity)
        self.trajectory.append(self.particle.position.copy())
        logger.debug(
            "Simulation created: integrator=%s dt=%g forces=%d mass=%g",
            self.integrator, self.dt, len(self.particle.forces), self.particle.mass,
        )

    def step(self, dt: float | None = None) -> KinematicState:
        """
        Advance the particle by one integrator step.

        Args:
            dt: Step size override (defaults to self.dt). May be negative to
                step backwards.

        Returns:
            The new kinematic state (also written back to the particle).

        Raises:
            InvalidMassError, SingularityError: Propagated unchanged. The
                particle, clock and trajectory keep their previous values.
        """
        h = self.dt if dt is None else float(dt)
        step_fn = get_integrator(self.integrator)
        p = self.particle

        new_state = step_fn(p.forces, p.state, p.mass, self.time, h)

        p.set_state(new_state)
        self.time += h
        self.steps += 1
        self.trajectory.append(p.position.copy())
        return new_state

    def advance(self, frame_time: float) -> int:
        """
        Consume elapsed frame time in fixed dt steps.

        The leftover (< dt) stays in the accumulator for the next call.

        Args:
            frame_time: Real time elapsed since the previous frame, in seconds.

        Returns:
            Number of steps taken.
        """
        if frame_time < 0:
            raise ValueError(f"frame_time must be >= 0, got {frame_time}")
        self.accumulator += frame_time

        n = 0
        while self.accumulator >= self.dt:
            if n >= self.max_steps_per_frame:
                logger.warning(
                    "Frame needed more than %d steps; dropping %.6f s of simulated time",
                    self.max_steps_per_frame, self.accumulator,
                )
                self.accumulator = 0.0
                break
            self.step()
            self.accumulator -= self.dt
            n += 1
        return n

    def run(self, duration: float) -> int:
        """
        Step until `duration` seconds of simulated time have passed.

        The final step is shortened so the clock lands exactly on the target.

        Returns:
            Number of steps taken.
        """
        if duration < 0:
            raise ValueError(f"duration must be >= 0, got {duration}")
        t_end = self.time + duration
        n = 0
        while self.time < t_end - 1e-12:
            self.step(min(self.dt, t_end - self.time))
            n += 1
        return n

    def energy(self) -> float:
        """Total (kinetic + potential) energy of the particle right now."""
        return particle_energy(self.particle, self.time)

    def trajectory_array(self) -> np.ndarray:
        """Trajectory as an (N, 3) float64 array, oldest sample first."""
        if not self.trajectory:
            return np.zeros((0, 3), dtype=np.float64)
        return np.array(self.trajectory, dtype=np.float64)

    def clear_trajectory(self) -> None:
        """Drop the recorded positions, keeping only the current one."""
        self.trajectory.clear()
        self.trajectory.append(self.particle.position.copy())
