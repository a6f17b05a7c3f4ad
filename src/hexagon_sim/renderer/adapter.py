# MIT License (see LICENSE)
"""
Renderer adapters for simulation visualization.

This module provides an abstract base class for rendering and a few
concrete implementations. The engine has no drawing dependency: it exposes
a RenderFrame (ball position and radius, hexagon vertices) and a renderer
turns that into pixels, text or recorded data.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO
import sys
import numpy as np

if TYPE_CHECKING:
    from ..simulation import HexagonSimulation, RenderFrame


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    Subclasses implement the drawing methods to integrate with a graphics
    backend (matplotlib, pygame, a web canvas, ...).

    Usage:
        renderer = MyRenderer()
        renderer.begin_frame(sim.tick)
        renderer.draw_polygon(sim.boundary.vertices())
        renderer.draw_ball(sim.ball.position, sim.ball.radius)
        renderer.end_frame()

    Or use the convenience method:
        renderer.render_simulation(sim)
    """

    @abstractmethod
    def begin_frame(self, tick: int) -> None:
        """
        Begin a new frame for rendering.

        Args:
            tick: Number of completed simulation ticks.
        """
        ...

    @abstractmethod
    def draw_ball(self, position: np.ndarray, radius: float) -> None:
        """Draw the ball as a filled circle."""
        ...

    @abstractmethod
    def draw_polygon(self, vertices: np.ndarray) -> None:
        """Draw a closed polygon outline through the vertices, in order."""
        ...

    @abstractmethod
    def end_frame(self) -> None:
        """Finalize the current frame."""
        ...

    def render_frame(self, frame: "RenderFrame") -> None:
        """Draw a complete frame: hexagon first, then the ball on top."""
        self.begin_frame(frame.tick)
        self.draw_polygon(frame.vertices)
        self.draw_ball(frame.ball_position, frame.ball_radius)
        self.end_frame()

    def render_simulation(self, sim: "HexagonSimulation") -> None:
        """Convenience method to render the current simulation state."""
        self.render_frame(sim.frame())


class DebugRenderer(RendererAdapter):
    """
    Console/text debug renderer for development and testing.

    Example output:
        === Tick 42 ===
        hexagon (500.00, 275.00) (400.00, 448.21) ...
        ball r=15.00 @ (300.00, 312.45)
    """

    def __init__(self, output: TextIO | None = None, verbose: bool = True):
        """
        Initialize the debug renderer.

        Args:
            output: Output stream (defaults to sys.stdout).
            verbose: If True, include the hexagon vertices.
        """
        self.output = output or sys.stdout
        self.verbose = verbose

    def begin_frame(self, tick: int) -> None:
        self.output.write(f"=== Tick {tick} ===\n")

    def draw_ball(self, position: np.ndarray, radius: float) -> None:
        self.output.write(f"ball r={radius:.2f} @ ({position[0]:.2f}, {position[1]:.2f})\n")

    def draw_polygon(self, vertices: np.ndarray) -> None:
        if not self.verbose:
            return
        pts = " ".join(f"({x:.2f}, {y:.2f})" for x, y in vertices)
        self.output.write(f"hexagon {pts}\n")

    def end_frame(self) -> None:
        self.output.write("\n")
        self.output.flush()


class NullRenderer(RendererAdapter):
    """
    No-op renderer that does nothing.

    Useful as a placeholder or for timing the physics alone.
    """

    def begin_frame(self, tick: int) -> None:
        pass

    def draw_ball(self, position: np.ndarray, radius: float) -> None:
        pass

    def draw_polygon(self, vertices: np.ndarray) -> None:
        pass

    def end_frame(self) -> None:
        pass


class BufferedRenderer(RendererAdapter):
    """
    Renderer that buffers frame data for later retrieval.

    Example:
        renderer = BufferedRenderer()
        for _ in range(100):
            sim.step(params)
            renderer.render_simulation(sim)

        for frame in renderer.frames:
            print(frame["tick"], frame["ball"]["position"])
    """

    def __init__(self):
        self.frames: list[dict] = []
        self._current_frame: dict | None = None

    def begin_frame(self, tick: int) -> None:
        self._current_frame = {"tick": tick, "ball": None, "polygons": []}

    def draw_ball(self, position: np.ndarray, radius: float) -> None:
        if self._current_frame is None:
            return
        self._current_frame["ball"] = {
            "position": np.asarray(position, dtype=np.float64).tolist(),
            "radius": float(radius),
        }

    def draw_polygon(self, vertices: np.ndarray) -> None:
        if self._current_frame is None:
            return
        self._current_frame["polygons"].append(np.asarray(vertices, dtype=np.float64).tolist())

    def end_frame(self) -> None:
        if self._current_frame is not None:
            self.frames.append(self._current_frame)
            self._current_frame = None

    def clear(self) -> None:
        """Clear all buffered frames."""
        self.frames.clear()
