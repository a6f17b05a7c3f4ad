# MIT License (see LICENSE)
"""
The simulation driver.

HexagonSimulation owns the ball and the rotating hexagon and advances them
one tick at a time. Each tick:
    1. Boundary: advance the rotation angle (vertices follow).
    2. Forces: gravity and linear air drag into the ball's acceleration.
    3. Integration: semi-implicit Euler.
    4. Collisions: resolve the ball against each of the six edges.

Parameters are not stored: the caller passes a SimulationParameters value
into every step() call. Ticks are synchronous; call step() from a single
scheduler (render loop, timer, test) with one tick in flight at a time.

Structure:
    - User creates a HexagonSimulation (create() gives the default scene).
    - User calls sim.step(params) in a loop.
    - A renderer draws sim.frame() after each tick.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field

import numpy as np

from .boundary import HexagonBoundary
from .collision import EdgeContact, resolve_boundary_collisions
from .config import SimulationParameters
from .constants import (
    DEFAULT_BALL_MASS,
    DEFAULT_BALL_RADIUS,
    DEFAULT_CENTER,
    DEFAULT_CIRCUMRADIUS,
)
from .core.forces import apply_gravity, apply_linear_drag
from .core.integrators import semi_implicit_euler_step
from .types import Ball
from .util import f64

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderFrame:
    """
    What a renderer needs to draw one tick.

    Attributes:
        tick: Number of ticks completed.
        ball_position: Ball center [x, y].
        ball_radius: Ball radius.
        vertices: Hexagon vertices, shape (6, 2), in drawing order.
    """
    tick: int
    ball_position: np.ndarray
    ball_radius: float
    vertices: np.ndarray


@dataclass
class HexagonSimulation:
    """
    A ball bouncing inside a rotating hexagon.

    Attributes:
        ball: The dynamic body.
        boundary: The kinematic enclosure.
        tick: Number of completed ticks.
    """
    ball: Ball
    boundary: HexagonBoundary = field(default_factory=HexagonBoundary)
    tick: int = 0

    @classmethod
    def create(
        cls,
        center: tuple[float, float] = DEFAULT_CENTER,
        circumradius: float = DEFAULT_CIRCUMRADIUS,
        ball_radius: float = DEFAULT_BALL_RADIUS,
        ball_mass: float = DEFAULT_BALL_MASS,
        start: tuple[float, float] | None = None,
    ) -> "HexagonSimulation":
        """
        Build a scene with the ball at rest.

        Args:
            center: Hexagon center.
            circumradius: Hexagon center-to-vertex distance.
            ball_radius: Ball radius.
            ball_mass: Ball mass.
            start: Initial ball position. Defaults to half a circumradius
                   above the center.

        Returns:
            A simulation at tick 0.
        """
        boundary = HexagonBoundary(center=center, circumradius=circumradius)
        if start is None:
            start = boundary.center - np.array([0.0, circumradius / 2.0])
        ball = Ball(position=start, radius=ball_radius, mass=ball_mass)
        return cls(ball=ball, boundary=boundary)

    def _apply_forces(self, params: SimulationParameters) -> None:
        apply_gravity(self.ball, params.gravity_vector)
        apply_linear_drag(self.ball, params.air_drag_coefficient)

    def step(self, params: SimulationParameters) -> list[EdgeContact]:
        """
        Advance the simulation by one tick.

        Args:
            params: The configuration snapshot for this tick.

        Returns:
            The wall contacts resolved during this tick.

        Raises:
            TypeError: If params is not a SimulationParameters.
            ValueError: If the ball state is not a pair of 2D vectors.
        """
        if not isinstance(params, SimulationParameters):
            raise TypeError(f"Expected SimulationParameters, got {type(params).__name__}")
        if self.ball.position.shape != (2,) or self.ball.velocity.shape != (2,):
            raise ValueError("Ball position and velocity must be 2D vectors")

        off = params.out_of_range()
        if off:
            logger.debug("Tick %d: parameters outside recommended range: %s", self.tick, ", ".join(off))

        self.boundary.advance(params.angular_rate)
        self._apply_forces(params)
        semi_implicit_euler_step(self.ball)
        contacts = resolve_boundary_collisions(self.ball, self.boundary, params)

        self.tick += 1
        return contacts

    def run(self, params: SimulationParameters, ticks: int) -> int:
        """
        Step `ticks` times with the same parameters.

        Returns:
            Total number of resolved wall contacts.
        """
        n_contacts = 0
        for _ in range(ticks):
            n_contacts += len(self.step(params))
        return n_contacts

    def frame(self) -> RenderFrame:
        """Snapshot of the drawable geometry after the last tick."""
        return RenderFrame(
            tick=self.tick,
            ball_position=f64(self.ball.position),
            ball_radius=self.ball.radius,
            vertices=self.boundary.vertices(),
        )
