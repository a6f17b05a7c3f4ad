# MIT License (see LICENSE)
"""
Utility functions for vector math and numeric operations.

All functions operate on 2D vectors represented as numpy arrays of shape (2,)
and return new arrays rather than modifying their arguments.
"""
from __future__ import annotations

import numpy as np


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Always copies, so callers can pass tuples, lists or arrays they still own.
    """
    return np.array(x, dtype=np.float64)


def norm2(v: np.ndarray) -> float:
    """Squared magnitude of a 2D vector."""
    return float(v[0] * v[0] + v[1] * v[1])


def norm(v: np.ndarray) -> float:
    """Magnitude (length) of a 2D vector."""
    return float(np.sqrt(norm2(v)))


def perp(v: np.ndarray) -> np.ndarray:
    """Rotate a 2D vector by +90 degrees: (x, y) -> (-y, x)."""
    return np.array([-v[1], v[0]], dtype=np.float64)


def cross_z_scalar_vec(z: float, v: np.ndarray) -> np.ndarray:
    """
    Cross product of z-axis scalar with 2D vector: (0, 0, z) × (vx, vy, 0).

    Result: (-z*vy, z*vx). Converts an angular rate into the linear velocity
    of a point at offset v from the rotation center.
    """
    return np.array([-z * v[1], z * v[0]], dtype=np.float64)


def is_finite_vec(v: np.ndarray) -> bool:
    """True if every component of v is finite."""
    return bool(np.all(np.isfinite(v)))
