# MIT License (see LICENSE)
"""
Collision pass against the whole hexagon.

Edges are handled one after another in vertex order, each against the
ball's state as left by the previous edge. Near a vertex the ball can hit
two edges in one tick and receive two corrections in sequence; this is an
approximation of a simultaneous solve that is good enough for one ball in a
convex enclosure.
"""
from __future__ import annotations
import logging

from ..boundary import HexagonBoundary
from ..config import SimulationParameters
from ..types import Ball
from .contact import EdgeContact, detect_edge_contact, resolve_edge_contact

logger = logging.getLogger(__name__)


def resolve_boundary_collisions(
    ball: Ball,
    boundary: HexagonBoundary,
    params: SimulationParameters,
) -> list[EdgeContact]:
    """
    Detect and resolve ball contacts with every hexagon edge.

    Args:
        ball: The ball (modified in-place).
        boundary: The enclosure, with vertices and angular rate for this tick.
        params: Restitution and tangential friction are read from here.

    Returns:
        Contacts that received a response this tick, in edge order.
    """
    resolved = []
    for i, p1, p2 in boundary.edges():
        c = detect_edge_contact(ball, p1, p2, boundary.edge_velocity, edge=i)
        if c is None:
            continue
        if resolve_edge_contact(ball, c, params.restitution, params.tangential_friction):
            logger.debug(
                "Edge %d contact: depth=%.4f vn=%.4f -> %.4f",
                i, c.penetration, c.normal_speed, c.normal_speed_after,
            )
            resolved.append(c)
    return resolved
