# MIT License (see LICENSE)
"""
Time stepping for the ball.

Uses semi-implicit (symplectic) Euler with a fixed tick of one time unit:

    v(t+1) = v(t) + a(t)
    x(t+1) = x(t) + v(t+1)

Updating velocity first and then moving with the *new* velocity keeps
bouncing motion bounded, where explicit Euler slowly gains energy.

Reference:
    https://en.wikipedia.org/wiki/Semi-implicit_Euler_method
"""
from __future__ import annotations

from ..types import Ball


def semi_implicit_euler_step(ball: Ball) -> None:
    """
    Advance the ball by one tick and clear its accumulated acceleration.

    Args:
        ball: Ball to integrate (state replaced with new arrays).
    """
    ball.velocity = ball.velocity + ball.acceleration
    ball.position = ball.position + ball.velocity
    ball.clear_acceleration()
