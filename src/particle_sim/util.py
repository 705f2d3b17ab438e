# MIT License (see LICENSE)
"""
Utility functions for 3D vector math.

Vectors are numpy arrays of shape (3,) with dtype float64. The helpers keep
conversions in one place so that tuples and lists are accepted anywhere a
position, velocity or anchor is expected.
"""
from __future__ import annotations

import numpy as np


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array (always a copy).

    Used throughout the codebase to ensure consistent numeric precision
    and allow tuple/list inputs for positions and velocities.
    """
    return np.array(x, dtype=np.float64)


def vec3(x=(0.0, 0.0, 0.0)) -> np.ndarray:
    """Convert x to a float64 3-vector, raising ValueError on any other shape."""
    v = f64(x)
    if v.shape != (3,):
        raise ValueError(f"expected a 3-vector, got shape {v.shape}")
    return v


def frozen_vec3(x) -> np.ndarray:
    """Like vec3, but the returned array is read-only."""
    v = vec3(x)
    v.flags.writeable = False
    return v


def zeros3() -> np.ndarray:
    return np.zeros(3, dtype=np.float64)


def norm2(v: np.ndarray) -> float:
    """Squared magnitude of a 3D vector. Avoids sqrt for performance."""
    return float(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])


def norm(v: np.ndarray) -> float:
    """Magnitude (length) of a 3D vector."""
    return float(np.sqrt(norm2(v)))
