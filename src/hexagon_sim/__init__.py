# MIT License (see LICENSE)
"""
hexagon_sim - A ball bouncing inside a rotating hexagon.

This package simulates one circular ball under gravity and air drag inside
a regular hexagon that spins about its center, with restitution and
friction at the (moving) walls.

Main entry points:
    - HexagonSimulation: Owns the ball and the hexagon, advances them per tick.
    - SimulationParameters: The per-tick configuration snapshot.
    - Ball: The dynamic body.
    - HexagonBoundary: The rotating enclosure.

Submodules:
    - collision: Edge contact detection and impulse response.
    - core: Force generators, integrator, diagnostics.
    - io: JSON serialization/deserialization.
    - renderer: Optional visualization adapters.

Example:
    from hexagon_sim import HexagonSimulation, SimulationParameters

    sim = HexagonSimulation.create()
    params = SimulationParameters(gravity_magnitude=0.2)
    for _ in range(600):
        sim.step(params)
    print(sim.frame().ball_position)
"""
from .simulation import HexagonSimulation, RenderFrame
from .config import SimulationParameters, DEFAULT_PARAMETERS, RECOMMENDED_RANGES
from .types import Ball
from .boundary import HexagonBoundary, compute_vertices

__all__ = [
    # Simulation
    "HexagonSimulation",
    "RenderFrame",
    # Configuration
    "SimulationParameters",
    "DEFAULT_PARAMETERS",
    "RECOMMENDED_RANGES",
    # Bodies
    "Ball",
    "HexagonBoundary",
    "compute_vertices",
]
