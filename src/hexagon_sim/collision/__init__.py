# MIT License (see LICENSE)
"""
Collision detection and resolution subsystem.

This subpackage provides:
    - Contact: Segment closest-point test and impulse response for one edge.
    - Resolve: The per-tick pass over all six hexagon edges.

Typical usage:
    from hexagon_sim.collision import resolve_boundary_collisions

    contacts = resolve_boundary_collisions(ball, boundary, params)
    for c in contacts:
        print(c.edge, c.penetration)
"""
from .contact import (
    EdgeContact,
    closest_point_on_segment,
    detect_edge_contact,
    resolve_edge_contact,
)
from .resolve import resolve_boundary_collisions

__all__ = [
    # Contact
    "EdgeContact",
    "closest_point_on_segment",
    "detect_edge_contact",
    "resolve_edge_contact",
    # Resolve
    "resolve_boundary_collisions",
]
