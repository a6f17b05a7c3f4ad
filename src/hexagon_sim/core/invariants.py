# MIT License (see LICENSE)
"""
Diagnostic quantities for checking simulation behaviour.

Used by tests and examples to verify that contacts dissipate energy and
that the ball does not stay embedded in the walls.
"""
from __future__ import annotations
import numpy as np

from ..boundary import HexagonBoundary
from ..collision.contact import closest_point_on_segment
from ..types import Ball
from ..util import norm


def kinetic_energy(ball: Ball) -> float:
    """
    T = 0.5 * m * v²
    """
    v_sq = float(np.dot(ball.velocity, ball.velocity))
    return 0.5 * ball.mass * v_sq


def penetration_depth(ball: Ball, boundary: HexagonBoundary) -> float:
    """
    Deepest overlap between the ball and any hexagon edge.

    Returns:
        max(radius - distance to edge) over all edges, clamped at 0.
    """
    depth = 0.0
    for _, p1, p2 in boundary.edges():
        closest = closest_point_on_segment(ball.position, p1, p2)
        if closest is None:
            continue
        depth = max(depth, ball.radius - norm(ball.position - closest))
    return depth
