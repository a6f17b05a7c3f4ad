# MIT License (see LICENSE)
"""
Force generators for the ball.

Each function turns a force into an acceleration (a = F/m) and adds it to
ball.acceleration. They are called during the force phase of a tick,
before integration.
"""
from __future__ import annotations

import numpy as np

from ..types import Ball
from ..util import norm2


def apply_gravity(ball: Ball, g: np.ndarray) -> None:
    """
    Apply uniform gravity.

    F = m * g, so the acceleration contribution is exactly g whatever the
    mass.

    Args:
        ball: The ball to accelerate.
        g: Gravitational acceleration [gx, gy] per tick².
    """
    force = ball.mass * g
    ball.acceleration = ball.acceleration + force * ball.inv_mass


def apply_linear_drag(ball: Ball, c: float) -> None:
    """
    Apply air drag linear in speed.

    F = -c * v: opposite to the velocity with magnitude c·|v|.

    Args:
        ball: The ball to slow down.
        c: Drag coefficient.

    Note:
        No effect when c == 0 or the ball is at rest.
    """
    if c == 0.0 or norm2(ball.velocity) == 0.0:
        return
    force = -c * ball.velocity
    ball.acceleration = ball.acceleration + force * ball.inv_mass
