# MIT License (see LICENSE)
"""
Numerical constants and default scene geometry.

Coordinates are screen-style: +x to the right, +y downward, so a positive
gravity magnitude pulls the ball toward larger y. One tick is one implicit
time unit; every rate is already expressed per tick.
"""
from __future__ import annotations

# Number of sides of the enclosure.
HEX_SIDES: int = 6

# Edges whose squared length falls below this are skipped by the collision test.
EDGE_EPSILON: float = 1e-5

# Overlap is pushed out slightly more than 1x so the ball does not sink
# back into the wall on the next tick.
POSITION_CORRECTION: float = 1.01

# Default scene: a 600x650 canvas with the hexagon centred a little high.
DEFAULT_CENTER: tuple[float, float] = (300.0, 275.0)
DEFAULT_CIRCUMRADIUS: float = 200.0
DEFAULT_BALL_RADIUS: float = 15.0
DEFAULT_BALL_MASS: float = 1.0
