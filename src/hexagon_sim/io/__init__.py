# MIT License (see LICENSE)
"""
Input/Output utilities for the simulation.

This subpackage provides:
    - JSON serialization: Save and load parameters and simulation state.
    - Round-trip support: A saved run resumes exactly where it left off.

Typical usage:
    from hexagon_sim.io import load_simulation, save_simulation

    sim, params = load_simulation("run.json")
    sim.run(params, 600)
    save_simulation(sim, "run.json", params)
"""
from .json_io import (
    load_raw,
    load_parameters,
    save_parameters,
    parameters_from_json,
    parameters_to_json,
    load_simulation,
    save_simulation,
    simulation_from_json,
    simulation_to_json,
)

__all__ = [
    # Loading
    "load_raw",
    "load_parameters",
    "load_simulation",
    # Saving
    "save_parameters",
    "save_simulation",
    # Serialization
    "parameters_from_json",
    "parameters_to_json",
    "simulation_from_json",
    "simulation_to_json",
]
