# MIT License (see LICENSE)
"""
Renderer adapters for simulation visualization.

This module provides an abstract base class for rendering and headless
implementations. The core has no rendering dependency: a windowed frontend
subclasses RendererAdapter and reads the particle and trajectory once per
frame.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Sequence, TextIO
import sys

import numpy as np

from ..particle import Particle

if TYPE_CHECKING:
    from ..simulation import Simulation


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    Subclasses should implement the drawing methods to integrate with
    various graphics backends (OpenGL, matplotlib, web frontend, etc.).

    Usage:
        renderer = MyRenderer()
        renderer.begin_frame(sim.time)
        renderer.draw_trajectory(sim.trajectory)
        renderer.draw_particle(sim.particle)
        renderer.end_frame()

    Or use the convenience method:
        renderer.render_simulation(sim)
    """

    @abstractmethod
    def begin_frame(self, time: float) -> None:
        """
        Begin a new frame for rendering.

        Args:
            time: Current simulation time in seconds.
        """
        ...

    @abstractmethod
    def draw_trajectory(self, points: Sequence[np.ndarray]) -> None:
        """
        Draw the recorded path as a line strip.

        Args:
            points: Past positions, oldest first.
        """
        ...

    @abstractmethod
    def draw_particle(self, particle: Particle) -> None:
        """Draw the particle at its current position."""
        ...

    @abstractmethod
    def end_frame(self) -> None:
        """Finalize the current frame."""
        ...

    def render_simulation(self, sim: "Simulation") -> None:
        """
        Convenience method to render a whole simulation frame.

        Args:
            sim: The simulation to render.
        """
        self.begin_frame(sim.time)
        self.draw_trajectory(sim.trajectory)
        self.draw_particle(sim.particle)
        self.end_frame()


class DebugRenderer(RendererAdapter):
    """
    Console/text debug renderer for development and testing.

    Outputs a human-readable description of each frame to a stream
    (stdout by default).

    Output:
        === Frame t=0.0420 ===
        trajectory: 43 points
        particle m=1.00 @ (0.99, 0.00, 0.00) v=(-0.04, 0.00, 0.00)
    """

    def __init__(self, output: TextIO | None = None, verbose: bool = True):
        """
        Initialize the debug renderer.

        Args:
            output: Output stream (defaults to sys.stdout).
            verbose: If True, include velocity info.
        """
        self.output = output or sys.stdout
        self.verbose = verbose

    def begin_frame(self, time: float) -> None:
        self.output.write(f"=== Frame t={time:.4f} ===\n")

    def draw_trajectory(self, points: Sequence[np.ndarray]) -> None:
        self.output.write(f"trajectory: {len(points)} points\n")

    def draw_particle(self, particle: Particle) -> None:
        pos = particle.position
        line = f"particle m={particle.mass:.2f} @ ({pos[0]:.2f}, {pos[1]:.2f}, {pos[2]:.2f})"
        if self.verbose:
            vel = particle.velocity
            line += f" v=({vel[0]:.2f}, {vel[1]:.2f}, {vel[2]:.2f})"
        self.output.write(line + "\n")

    def end_frame(self) -> None:
        self.output.write("\n")
        self.output.flush()


class NullRenderer(RendererAdapter):
    """
    No-op renderer that does nothing.

    Useful as a placeholder or for performance testing without rendering overhead.
    """

    def begin_frame(self, time: float) -> None:
        pass

    def draw_trajectory(self, points: Sequence[np.ndarray]) -> None:
        pass

    def draw_particle(self, particle: Particle) -> None:
        pass

    def end_frame(self) -> None:
        pass


class BufferedRenderer(RendererAdapter):
    """
    Renderer that buffers frame data for later retrieval.

    Stores the particle state (and optionally the trajectory length) for
    each frame, useful for recording runs or plotting afterwards.

    Example:
        renderer = BufferedRenderer()
        for _ in range(100):
            sim.advance(1 / 60)
            renderer.render_simulation(sim)

        xs = [frame["position"][0] for frame in renderer.frames]
    """

    def __init__(self):
        self.frames: list[dict] = []
        self._current_frame: dict | None = None

    def begin_frame(self, time: float) -> None:
        self._current_frame = {"time": time}

    def draw_trajectory(self, points: Sequence[np.ndarray]) -> None:
        if self._current_frame is None:
            return
        self._current_frame["trajectory_len"] = len(points)

    def draw_particle(self, particle: Particle) -> None:
        if self._current_frame is None:
            return
        self._current_frame["position"] = particle.position.tolist()
        self._current_frame["velocity"] = particle.velocity.tolist()

    def end_frame(self) -> None:
        """Finalize and store the buffered frame."""
        if self._current_frame is not None:
            self.frames.append(self._current_frame)
            self._current_frame = None

    def clear(self) -> None:
        """Clear all buffered frames."""
        self.frames.clear()
