# MIT License (see LICENSE)
"""
JSON serialization and deserialization for simulation state.

Lets a front end keep its slider settings in a file, and lets a run be
saved mid-flight and resumed later with identical results.

JSON Schema Overview:
---------------------
{
  "parameters": {                   # Optional, defaults per field
    "gravity_magnitude": float,     # Default: 0.15
    "air_drag_coefficient": float,  # Default: 0.005
    "restitution": float,           # Default: 0.7
    "tangential_friction": float,   # Default: 0.1
    "angular_rate": float           # Default: 0.01 (rad/tick)
  },
  "ball": {                         # Required
    "position": [x, y],             # Required
    "velocity": [vx, vy],           # Default: [0, 0]
    "radius": float,                # Default: 15
    "mass": float                   # Default: 1
  },
  "boundary": {                     # Optional
    "center": [x, y],               # Default: [300, 275]
    "circumradius": float,          # Default: 200
    "angle": float,                 # Radians, default: 0
    "angular_rate": float           # Rate of the last tick, default: 0
  },
  "tick": int                       # Default: 0
}
"""
from __future__ import annotations
import json
import logging
from dataclasses import fields
from typing import Any

import numpy as np

from ..boundary import HexagonBoundary
from ..config import SimulationParameters
from ..constants import (
    DEFAULT_BALL_MASS,
    DEFAULT_BALL_RADIUS,
    DEFAULT_CENTER,
    DEFAULT_CIRCUMRADIUS,
)
from ..simulation import HexagonSimulation
from ..types import Ball

logger = logging.getLogger(__name__)


def load_raw(path: str) -> dict[str, Any]:
    """
    Load raw JSON data from a file without object construction.

    Args:
        path: Absolute or relative path to the JSON file.

    Returns:
        Dictionary containing the raw JSON data.
    """
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def parameters_from_json(d: dict[str, Any]) -> SimulationParameters:
    """
    Build SimulationParameters from a dictionary.

    Missing fields take their defaults; unknown keys are ignored so files
    written by newer front ends still load.

    Raises:
        ValueError: If a value is not a number or is not finite.
    """
    known = {f.name for f in fields(SimulationParameters)}
    kwargs = {}
    for key, value in d.items():
        if key not in known:
            logger.debug("Ignoring unknown parameter '%s'", key)
            continue
        try:
            kwargs[key] = float(value)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Parameter '{key}' must be a number, got {value!r}") from e
    return SimulationParameters(**kwargs)


def parameters_to_json(params: SimulationParameters) -> dict[str, float]:
    """Serialize SimulationParameters to a dictionary."""
    return {f.name: getattr(params, f.name) for f in fields(params)}


def load_parameters(path: str) -> SimulationParameters:
    """
    Load parameters from a JSON file.

    Accepts either a bare parameters object or a full simulation document
    with a "parameters" section.
    """
    data = load_raw(path)
    if "parameters" in data:
        data = data["parameters"]
    return parameters_from_json(data)


def save_parameters(params: SimulationParameters, path: str, indent: int = 2) -> None:
    """Save parameters to a JSON file on disk."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(parameters_to_json(params), f, indent=indent)


def ball_from_json(d: dict[str, Any]) -> Ball:
    """
    Parse the ball definition.

    Raises:
        ValueError: If position is missing or the ball is invalid.
    """
    if "position" not in d:
        raise ValueError("Ball definition missing required 'position' field.")
    return Ball(
        position=tuple(d["position"]),
        velocity=tuple(d.get("velocity", [0.0, 0.0])),
        radius=float(d.get("radius", DEFAULT_BALL_RADIUS)),
        mass=float(d.get("mass", DEFAULT_BALL_MASS)),
    )


def ball_to_json(ball: Ball) -> dict[str, Any]:
    """Serialize the ball state."""
    return {
        "position": _to_list(ball.position),
        "velocity": _to_list(ball.velocity),
        "radius": ball.radius,
        "mass": ball.mass,
    }


def boundary_from_json(d: dict[str, Any]) -> HexagonBoundary:
    """Parse the hexagon definition."""
    return HexagonBoundary(
        center=tuple(d.get("center", DEFAULT_CENTER)),
        circumradius=float(d.get("circumradius", DEFAULT_CIRCUMRADIUS)),
        angle=float(d.get("angle", 0.0)),
        angular_rate=float(d.get("angular_rate", 0.0)),
    )


def boundary_to_json(boundary: HexagonBoundary) -> dict[str, Any]:
    """Serialize the hexagon state."""
    return {
        "center": _to_list(boundary.center),
        "circumradius": boundary.circumradius,
        "angle": boundary.angle,
        "angular_rate": boundary.angular_rate,
    }


def simulation_from_json(d: dict[str, Any]) -> tuple[HexagonSimulation, SimulationParameters]:
    """
    Reconstruct a simulation and its parameters from a dictionary.

    Returns:
        (simulation, parameters). The parameters are returned separately
        because the simulation does not own them.

    Raises:
        ValueError: If the required 'ball' section is missing or invalid.
    """
    if "ball" not in d:
        raise ValueError("Simulation document missing required 'ball' section.")
    sim = HexagonSimulation(
        ball=ball_from_json(d["ball"]),
        boundary=boundary_from_json(d.get("boundary", {})),
        tick=int(d.get("tick", 0)),
    )
    params = parameters_from_json(d.get("parameters", {}))
    return sim, params


def simulation_to_json(sim: HexagonSimulation, params: SimulationParameters | None = None) -> dict[str, Any]:
    """
    Serialize a simulation (and optionally its parameters) to a dictionary.
    """
    result = {
        "ball": ball_to_json(sim.ball),
        "boundary": boundary_to_json(sim.boundary),
        "tick": sim.tick,
    }
    if params is not None:
        result["parameters"] = parameters_to_json(params)
    return result


def load_simulation(path: str) -> tuple[HexagonSimulation, SimulationParameters]:
    """
    Load a saved simulation from a JSON file.

    Raises:
        FileNotFoundError: If the file cannot be found.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If the document is incomplete or invalid.
    """
    logger.info("Loading simulation from: %s", path)
    return simulation_from_json(load_raw(path))


def save_simulation(
    sim: HexagonSimulation,
    path: str,
    params: SimulationParameters | None = None,
    indent: int = 2,
) -> None:
    """Save a simulation instance to a JSON file on disk."""
    logger.info("Saving simulation at tick %d to: %s", sim.tick, path)
    data = simulation_to_json(sim, params)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent)


def _to_list(arr: Any) -> list[float]:
    """Helper: Convert numpy array or tuple to a clean list of floats."""
    if isinstance(arr, np.ndarray):
        return arr.tolist()
    return list(arr)
