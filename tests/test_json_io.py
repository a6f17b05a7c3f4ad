import json
import numpy as np
import pytest
from hexagon_sim import HexagonSimulation, SimulationParameters
from hexagon_sim.io.json_io import (
    load_parameters,
    load_simulation,
    parameters_from_json,
    parameters_to_json,
    save_parameters,
    save_simulation,
    simulation_from_json,
    simulation_to_json,
)

def test_parameters_file_round_trip(tmp_path):
    params = SimulationParameters(gravity_magnitude=0.3, restitution=0.9, angular_rate=-0.02)
    path = tmp_path / "params.json"
    save_parameters(params, str(path))
    assert load_parameters(str(path)) == params

def test_missing_parameters_take_defaults_and_unknown_keys_are_ignored():
    params = parameters_from_json({"restitution": 0.4, "slider_theme": "dark"})
    assert params.restitution == 0.4
    assert params.gravity_magnitude == 0.15

def test_bad_parameter_values():
    with pytest.raises(ValueError):
        parameters_from_json({"restitution": "bouncy"})
    with pytest.raises(ValueError):
        parameters_from_json({"angular_rate": float("nan")})

def test_simulation_document_requires_ball():
    with pytest.raises(ValueError):
        simulation_from_json({"boundary": {}})
    with pytest.raises(ValueError):
        simulation_from_json({"ball": {"velocity": [0, 0]}})
    with pytest.raises(ValueError):
        simulation_from_json({"ball": {"position": [0, 0], "radius": -1}})

def test_saved_run_resumes_identically(tmp_path):
    """A run saved mid-flight and reloaded continues on exactly the same trajectory."""
    params = SimulationParameters()
    sim = HexagonSimulation.create()
    sim.run(params, 150)

    path = tmp_path / "run.json"
    save_simulation(sim, str(path), params)
    resumed, loaded_params = load_simulation(str(path))

    assert loaded_params == params
    assert resumed.tick == 150

    sim.run(params, 150)
    resumed.run(loaded_params, 150)
    assert np.array_equal(resumed.ball.position, sim.ball.position)
    assert np.array_equal(resumed.ball.velocity, sim.ball.velocity)
    assert resumed.boundary.angle == sim.boundary.angle

def test_document_layout(tmp_path):
    sim = HexagonSimulation.create()
    data = simulation_to_json(sim)
    assert set(data) == {"ball", "boundary", "tick"}
    assert data["ball"]["position"] == [300.0, 175.0]
    assert data["boundary"]["circumradius"] == 200.0
    json.dumps(data)

    data = simulation_to_json(sim, SimulationParameters())
    assert data["parameters"] == parameters_to_json(SimulationParameters())

def test_non_finite_boundary_in_document_rejected():
    """Python's json accepts NaN tokens; the loader must still refuse them."""
    doc = json.loads('{"ball": {"position": [300, 200]}, "boundary": {"angle": NaN}}')
    with pytest.raises(ValueError):
        simulation_from_json(doc)
