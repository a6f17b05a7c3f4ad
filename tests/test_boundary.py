import numpy as np
import pytest
from hexagon_sim.boundary import HexagonBoundary, compute_vertices

def test_vertices_are_regular_hexagon():
    """All vertices at circumradius, consecutive vertices 60 degrees apart."""
    hexagon = HexagonBoundary(center=(10.0, -5.0), circumradius=50.0, angle=0.3)
    verts = hexagon.vertices()
    assert verts.shape == (6, 2)

    r = verts - hexagon.center
    assert np.allclose(np.linalg.norm(r, axis=1), 50.0)

    angles = np.arctan2(r[:, 1], r[:, 0])
    steps = np.mod(np.diff(np.append(angles, angles[0])), 2 * np.pi)
    assert np.allclose(steps, np.pi / 3)
    assert angles[0] == pytest.approx(0.3)

def test_vertex_regeneration_is_deterministic():
    a = compute_vertices(np.array([300.0, 275.0]), 200.0, 1.234)
    b = compute_vertices(np.array([300.0, 275.0]), 200.0, 1.234)
    assert np.array_equal(a, b)

    hexagon = HexagonBoundary(angle=1.234)
    assert np.array_equal(hexagon.vertices(), hexagon.vertices())
    assert np.array_equal(hexagon.vertices(), a)

def test_advance_accumulates_angle_without_wrapping():
    hexagon = HexagonBoundary()
    for _ in range(1000):
        hexagon.advance(0.05)
    assert hexagon.angle == pytest.approx(50.0)
    assert hexagon.angular_rate == 0.05
    # Geometry is periodic even though the angle is not wrapped
    wrapped = compute_vertices(hexagon.center, hexagon.circumradius, 50.0 - 8 * (2 * np.pi / 6) * 6)
    assert np.allclose(hexagon.vertices(), wrapped)

def test_edges_wrap_last_to_first():
    hexagon = HexagonBoundary()
    verts = hexagon.vertices()
    edges = list(hexagon.edges())
    assert [i for i, _, _ in edges] == list(range(6))
    assert np.array_equal(edges[5][1], verts[5])
    assert np.array_equal(edges[5][2], verts[0])

def test_edge_velocity_is_rigid_rotation():
    """v = w * (-ry, rx): perpendicular to r with magnitude |w| |r|."""
    hexagon = HexagonBoundary(center=(0.0, 0.0), circumradius=100.0, angular_rate=0.02)
    point = np.array([30.0, 40.0])
    v = hexagon.edge_velocity(point)
    assert np.allclose(v, [-0.8, 0.6])
    assert np.dot(v, point) == pytest.approx(0.0)
    assert np.linalg.norm(v) == pytest.approx(0.02 * 50.0)

    hexagon.advance(0.0)
    assert np.allclose(hexagon.edge_velocity(point), 0.0)

def test_invalid_circumradius():
    with pytest.raises(ValueError):
        HexagonBoundary(circumradius=0.0)
    with pytest.raises(ValueError):
        HexagonBoundary(circumradius=-3.0)

def test_non_finite_or_malformed_state_rejected():
    with pytest.raises(ValueError):
        HexagonBoundary(angle=float("nan"))
    with pytest.raises(ValueError):
        HexagonBoundary(angular_rate=float("inf"))
    with pytest.raises(ValueError):
        HexagonBoundary(center=(np.nan, 0.0))
    with pytest.raises(ValueError):
        HexagonBoundary(center=(0.0, 0.0, 0.0))
