import logging
import numpy as np
import pytest
from hexagon_sim import HexagonSimulation, SimulationParameters
from hexagon_sim.core.invariants import kinetic_energy

def test_default_scene():
    sim = HexagonSimulation.create()
    assert np.allclose(sim.boundary.center, [300.0, 275.0])
    assert sim.boundary.circumradius == 200.0
    assert np.allclose(sim.ball.position, [300.0, 175.0])
    assert np.array_equal(sim.ball.velocity, [0.0, 0.0])
    assert sim.ball.radius == 15.0
    assert sim.ball.mass == 1.0
    assert sim.tick == 0

def test_step_advances_boundary_and_tick():
    sim = HexagonSimulation.create()
    params = SimulationParameters(angular_rate=0.03)
    sim.step(params)
    sim.step(params)
    assert sim.tick == 2
    assert sim.boundary.angle == pytest.approx(0.06)
    assert sim.boundary.angular_rate == 0.03

def test_step_rejects_wrong_parameter_type_without_mutating():
    sim = HexagonSimulation.create()
    pos0 = sim.ball.position.copy()
    with pytest.raises(TypeError):
        sim.step({"gravity_magnitude": 0.15})
    assert sim.tick == 0
    assert sim.boundary.angle == 0.0
    assert np.array_equal(sim.ball.position, pos0)

def test_frame_exposes_drawable_geometry():
    sim = HexagonSimulation.create()
    sim.step(SimulationParameters())
    frame = sim.frame()
    assert frame.tick == 1
    assert frame.ball_radius == 15.0
    assert frame.vertices.shape == (6, 2)
    assert np.array_equal(frame.ball_position, sim.ball.position)
    # The frame is a snapshot, not a view of live state
    sim.step(SimulationParameters())
    assert not np.array_equal(frame.ball_position, sim.ball.position)

def test_ball_stays_inside_spinning_hexagon():
    """Long run with the default controls: finite state, ball contained."""
    sim = HexagonSimulation.create()
    params = SimulationParameters()
    contacts = 0
    for _ in range(3000):
        contacts += len(sim.step(params))
        p = sim.ball.position
        assert np.all(np.isfinite(p))
        assert np.linalg.norm(p - sim.boundary.center) < sim.boundary.circumradius
    assert contacts > 0

def test_drag_bleeds_energy_in_free_flight():
    sim = HexagonSimulation.create(start=(300.0, 275.0))
    sim.ball.velocity = np.array([2.0, 0.0])
    params = SimulationParameters(gravity_magnitude=0.0, air_drag_coefficient=0.05, angular_rate=0.0)
    ke0 = kinetic_energy(sim.ball)
    sim.run(params, 10)
    # v_n = v0 (1 - c)^n with no contacts
    assert sim.ball.velocity[0] == pytest.approx(2.0 * 0.95 ** 10)
    assert kinetic_energy(sim.ball) < ke0

def test_contacts_are_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="hexagon_sim")
    sim = HexagonSimulation.create(start=(300.0, 430.0))
    sim.ball.velocity = np.array([0.0, 5.0])
    contacts = sim.step(SimulationParameters(angular_rate=0.0))
    assert len(contacts) == 1
    assert "Edge 1 contact" in caplog.text

def test_out_of_range_parameters_are_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="hexagon_sim")
    sim = HexagonSimulation.create()
    sim.step(SimulationParameters(restitution=1.5))
    assert "restitution" in caplog.text

def test_malformed_ball_state_fails_before_any_update():
    """A tick that cannot complete leaves the boundary, ball and counter untouched."""
    sim = HexagonSimulation.create()
    sim.ball.position = np.array([300.0, 275.0, 0.0])
    with pytest.raises(ValueError):
        sim.step(SimulationParameters(angular_rate=0.03))
    assert sim.tick == 0
    assert sim.boundary.angle == 0.0
    assert np.array_equal(sim.ball.velocity, [0.0, 0.0])
