# MIT License (see LICENSE)
"""
Ball-versus-edge contact detection and impulse response.

The hexagon walls move, so the response is computed in the frame of the
wall at the contact point:

1. Find the closest point on the edge segment to the ball center.
2. If it is within one radius, build a contact with normal pointing from
   the wall into the ball.
3. Subtract the wall's velocity at that point to get the relative velocity.
4. If the ball approaches the wall, apply a restitution impulse along the
   normal, then a friction impulse along the tangent, and add the wall
   velocity back.
5. Push the ball out of the wall along the normal.

Key concepts:
- Restitution: v_n' = -e * v_n for the relative normal speed.
- Friction: a fraction f of the post-restitution tangential relative speed
  is removed. The impulse never reverses the tangential direction.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable

import numpy as np

from ..constants import EDGE_EPSILON, POSITION_CORRECTION
from ..types import Ball
from ..util import norm, norm2, perp


@dataclass
class EdgeContact:
    """
    Contact between the ball and one hexagon edge.

    Attributes:
        edge: Index of the edge (0-5), starting at vertex `edge`.
        point: Closest point on the edge segment to the ball center.
        normal: Unit normal from the edge toward the ball center.
        distance: Ball center to contact point distance (< radius).
        penetration: Overlap depth, radius - distance.
        wall_velocity: Velocity of the wall at `point`.
        normal_speed: Relative normal speed before response (negative when
                      approaching). Filled by resolve_edge_contact().
        normal_speed_after: Relative normal speed after response.
    """
    edge: int
    point: np.ndarray
    normal: np.ndarray
    distance: float
    penetration: float
    wall_velocity: np.ndarray
    normal_speed: float = 0.0
    normal_speed_after: float = 0.0


def closest_point_on_segment(p: np.ndarray, a: np.ndarray, b: np.ndarray) -> np.ndarray | None:
    """
    Closest point to p on the segment [a, b].

    The projection parameter of p onto the segment is clamped to [0, 1],
    so the result is an end point when p projects outside the segment.

    Returns:
        The closest point, or None for a degenerate segment
        (|b - a|² < EDGE_EPSILON).
    """
    seg = b - a
    len_sq = norm2(seg)
    if len_sq < EDGE_EPSILON:
        return None
    t = float(np.dot(p - a, seg)) / len_sq
    t = min(max(t, 0.0), 1.0)
    return a + t * seg


def detect_edge_contact(
    ball: Ball,
    a: np.ndarray,
    b: np.ndarray,
    wall_velocity_at: Callable[[np.ndarray], np.ndarray],
    edge: int = 0,
) -> EdgeContact | None:
    """
    Test the ball against one edge.

    Args:
        ball: The ball.
        a: Edge start vertex.
        b: Edge end vertex.
        wall_velocity_at: Callable giving the wall velocity at a point on
                          the edge (e.g. HexagonBoundary.edge_velocity).
        edge: Edge index stored on the contact.

    Returns:
        EdgeContact if the ball overlaps the edge, None otherwise. Also None
        for a degenerate edge, or when the ball center lies exactly on the
        edge (the normal is undefined).
    """
    closest = closest_point_on_segment(ball.position, a, b)
    if closest is None:
        return None

    d = ball.position - closest
    dist = norm(d)
    if dist >= ball.radius or dist == 0.0:
        return None

    return EdgeContact(
        edge=edge,
        point=closest,
        normal=d / dist,
        distance=dist,
        penetration=ball.radius - dist,
        wall_velocity=wall_velocity_at(closest),
    )


def resolve_edge_contact(
    ball: Ball,
    contact: EdgeContact,
    restitution: float,
    friction: float,
    correction: float = POSITION_CORRECTION,
) -> bool:
    """
    Apply the collision response for a single contact.

    Args:
        ball: The ball (velocity and position replaced on response).
        contact: Contact from detect_edge_contact().
        restitution: Coefficient of restitution e.
        friction: Fraction of tangential relative speed removed.
        correction: Overlap push-out factor, slightly above 1.

    Returns:
        True if the ball was approaching the wall and a response was
        applied, False if it was already separating.
    """
    n = contact.normal
    v_wall = contact.wall_velocity

    rv = ball.velocity - v_wall
    vn = float(np.dot(rv, n))
    contact.normal_speed = vn

    # Separating relative to the wall: leave it alone
    if vn >= 0.0:
        contact.normal_speed_after = vn
        return False

    # --- Normal impulse (restitution) ---
    jn = -(1.0 + restitution) * vn
    rv_after = rv + jn * n

    # --- Tangent impulse (friction) ---
    t = perp(n)
    vt = float(np.dot(rv_after, t))
    # Clamp the removed fraction so the impulse can stop sliding but not
    # reverse or speed it up.
    jt = -vt * min(max(friction, 0.0), 1.0)
    rv_after = rv_after + jt * t

    ball.velocity = rv_after + v_wall
    contact.normal_speed_after = float(np.dot(rv_after, n))

    # --- Position correction ---
    ball.position = ball.position + n * (contact.penetration * correction)
    return True
