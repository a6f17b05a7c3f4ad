# MIT License (see LICENSE)
"""
The rotating hexagonal enclosure.

The boundary is kinematic: its rotation is prescribed by the angular rate
passed to advance() and the ball never pushes back on it. Its only state is
the rotation angle; the six vertices are regenerated from
(center, circumradius, angle) whenever they are needed.
"""
from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Iterator

import numpy as np

from .constants import DEFAULT_CENTER, DEFAULT_CIRCUMRADIUS, HEX_SIDES
from .util import f64, cross_z_scalar_vec, is_finite_vec


def compute_vertices(center: np.ndarray, circumradius: float, angle: float) -> np.ndarray:
    """
    Vertices of a regular hexagon.

    Vertex i sits at polar angle (2π/6)·i + angle around center, at distance
    circumradius. Vertices come out in increasing-angle order so consecutive
    rows form the edges.

    Returns:
        Array of shape (6, 2).
    """
    theta = (2.0 * np.pi / HEX_SIDES) * np.arange(HEX_SIDES) + angle
    offsets = np.column_stack((np.cos(theta), np.sin(theta)))
    return f64(center) + circumradius * offsets


@dataclass
class HexagonBoundary:
    """
    A regular hexagon rotating about its center.

    Attributes:
        center: Fixed rotation center [x, y].
        circumradius: Center-to-vertex distance, must be > 0.
        angle: Current rotation angle in radians. Unbounded.
        angular_rate: Rate applied by the most recent advance(), in radians
                      per tick. Used to compute wall velocities.
    """
    center: np.ndarray | tuple[float, float] = DEFAULT_CENTER
    circumradius: float = DEFAULT_CIRCUMRADIUS
    angle: float = 0.0
    angular_rate: float = 0.0

    def __post_init__(self) -> None:
        self.center = f64(self.center)
        if self.center.shape != (2,):
            raise ValueError(f"Hexagon center must be a 2D vector, got shape {self.center.shape}")
        if not is_finite_vec(self.center):
            raise ValueError("Hexagon center must be finite")
        if not self.circumradius > 0:
            raise ValueError(f"Hexagon circumradius must be positive, got {self.circumradius}")
        if not (math.isfinite(self.circumradius) and math.isfinite(self.angle) and math.isfinite(self.angular_rate)):
            raise ValueError("Hexagon circumradius, angle and angular rate must be finite")

    def advance(self, angular_rate: float) -> None:
        """Rotate the hexagon by one tick at the given rate."""
        self.angular_rate = float(angular_rate)
        self.angle += self.angular_rate

    def vertices(self) -> np.ndarray:
        """The six world-space vertices for the current angle."""
        return compute_vertices(self.center, self.circumradius, self.angle)

    def edges(self) -> Iterator[tuple[int, np.ndarray, np.ndarray]]:
        """Yield (index, start, end) for each edge, wrapping last -> first."""
        verts = self.vertices()
        for i in range(HEX_SIDES):
            yield i, verts[i], verts[(i + 1) % HEX_SIDES]

    def edge_velocity(self, point: np.ndarray) -> np.ndarray:
        """
        Velocity of a point rigidly attached to the hexagon.

        v = ω × r with r = point - center, i.e. ω·(-ry, rx). Exact for any
        point on the rotating frame, not just the vertices.
        """
        return cross_z_scalar_vec(self.angular_rate, point - self.center)
