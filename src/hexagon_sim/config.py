# MIT License (see LICENSE)
"""
Simulation parameters.

A SimulationParameters value is the full set of knobs the physics reads on
each tick. It is owned by the caller (a UI, a script, a test) and passed
into every HexagonSimulation.step() call; the engine never stores it.

The recommended ranges mirror the interactive control sliders. They are
advisory only: values outside them still give a numerically defined
result, only non-finite values are rejected.
"""
from __future__ import annotations
import math
from dataclasses import dataclass, fields

import numpy as np


# (min, max) operating bounds for each field.
RECOMMENDED_RANGES: dict[str, tuple[float, float]] = {
    "gravity_magnitude": (0.0, 0.5),
    "air_drag_coefficient": (0.0, 0.1),
    "restitution": (0.0, 1.0),
    "tangential_friction": (0.0, 1.0),
    "angular_rate": (-0.05, 0.05),
}


@dataclass(frozen=True)
class SimulationParameters:
    """
    Per-tick configuration snapshot.

    Attributes:
        gravity_magnitude: Downward acceleration per tick².
        air_drag_coefficient: Linear drag c, acceleration -c*v.
        restitution: Coefficient of restitution e.
                     0 = perfectly inelastic, 1 = perfectly elastic.
        tangential_friction: Fraction of the tangential relative speed
                             removed by each wall contact.
        angular_rate: Hexagon rotation in radians per tick. The sign gives
                      the direction (positive turns +x toward +y).
    """
    gravity_magnitude: float = 0.15
    air_drag_coefficient: float = 0.005
    restitution: float = 0.7
    tangential_friction: float = 0.1
    angular_rate: float = 0.01

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if not math.isfinite(value):
                raise ValueError(f"Parameter '{f.name}' must be finite, got {value}")

    @property
    def gravity_vector(self) -> np.ndarray:
        """Gravity as a vector; +y is down on screen."""
        return np.array([0.0, self.gravity_magnitude], dtype=np.float64)

    def out_of_range(self) -> list[str]:
        """Names of fields that lie outside RECOMMENDED_RANGES."""
        names = []
        for name, (lo, hi) in RECOMMENDED_RANGES.items():
            value = getattr(self, name)
            if value < lo or value > hi:
                names.append(name)
        return names


DEFAULT_PARAMETERS = SimulationParameters()
