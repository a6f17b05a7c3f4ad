# MIT License (see LICENSE)
"""
Core type definitions for the ball simulation.

Defines the Ball: the single dynamic body of the simulation, a solid disc
with position, velocity and an acceleration accumulator. The equations of
motion are the usual Newtonian ones, integrated once per tick:
  - dv = a   (a = F/m, accumulated during force application)
  - dx = v
"""
from __future__ import annotations
from dataclasses import dataclass, field

import numpy as np

from .constants import DEFAULT_BALL_MASS, DEFAULT_BALL_RADIUS
from .util import f64, is_finite_vec


@dataclass
class Ball:
    """
    A circular rigid body with kinematic state.

    Attributes:
        position: Center position [x, y] in canvas units.
        velocity: Linear velocity [vx, vy] in units per tick.
        radius: Disc radius, must be > 0.
        mass: Mass, must be > 0. It cancels out of every force used here
              but is kept so forces are written as forces.
        acceleration: Accumulated acceleration [ax, ay] (cleared each tick).

    Raises:
        ValueError: On a non-positive radius or mass, or position/velocity
            that are not finite 2D vectors.
    """
    position: np.ndarray | tuple[float, float] = (0.0, 0.0)
    velocity: np.ndarray | tuple[float, float] = (0.0, 0.0)
    radius: float = DEFAULT_BALL_RADIUS
    mass: float = DEFAULT_BALL_MASS

    # Runtime state (not user-specified)
    acceleration: np.ndarray = field(default_factory=lambda: np.zeros(2, dtype=np.float64))

    def __post_init__(self) -> None:
        """Convert vectors to float64 arrays and validate the body."""
        self.position = f64(self.position)
        self.velocity = f64(self.velocity)
        self.acceleration = f64(self.acceleration)

        for name in ("position", "velocity", "acceleration"):
            if getattr(self, name).shape != (2,):
                raise ValueError(f"Ball {name} must be a 2D vector, got shape {getattr(self, name).shape}")
        if not self.radius > 0:
            raise ValueError(f"Ball radius must be positive, got {self.radius}")
        if not self.mass > 0:
            raise ValueError(f"Ball mass must be positive, got {self.mass}")
        if not (is_finite_vec(self.position) and is_finite_vec(self.velocity)):
            raise ValueError("Ball position and velocity must be finite")

    @property
    def inv_mass(self) -> float:
        """Inverse mass (1/m)."""
        return 1.0 / self.mass

    def clear_acceleration(self) -> None:
        """Reset accumulated acceleration to zero for the next tick."""
        self.acceleration = np.zeros(2, dtype=np.float64)
