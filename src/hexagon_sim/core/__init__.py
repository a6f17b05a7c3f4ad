# MIT License (see LICENSE)
"""
Core physics simulation components.

This subpackage provides:
    - Force generators: Gravity and linear air drag.
    - Integrators: Semi-implicit Euler with a unit tick.
    - Invariants: Kinetic energy and penetration diagnostics.

Typical usage:
    from hexagon_sim.core import apply_gravity, semi_implicit_euler_step

    apply_gravity(ball, np.array([0, 0.15]))
    semi_implicit_euler_step(ball)
"""
from .forces import apply_gravity, apply_linear_drag
from .integrators import semi_implicit_euler_step
from .invariants import kinetic_energy, penetration_depth

__all__ = [
    # Forces
    "apply_gravity",
    "apply_linear_drag",
    # Integrators
    "semi_implicit_euler_step",
    # Invariants
    "kinetic_energy",
    "penetration_depth",
]
