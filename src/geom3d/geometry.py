"""Pure numeric helpers for batched 3D transforms.

All functions are stateless and operate on float64 numpy arrays; the value
types in :mod:`geom3d.point`, :mod:`geom3d.line` and :mod:`geom3d.cube`
wrap them.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np
from numpy.typing import NDArray


def clamp(value: float, lower: float = 0.0, upper: float = 1.0) -> float:
    """Clamp a scalar into ``[lower, upper]``."""
    return max(lower, min(upper, value))


def rotation_matrix_x(angle: float) -> NDArray[np.float64]:
    """Right-handed rotation about the x-axis (radians)."""
    c, s = np.cos(angle), np.sin(angle)
    return np.array([[1.0, 0.0, 0.0], [0.0, c, -s], [0.0, s, c]], dtype=np.float64)


def rotation_matrix_y(angle: float) -> NDArray[np.float64]:
    """Right-handed rotation about the y-axis (radians)."""
    c, s = np.cos(angle), np.sin(angle)
    return np.array([[c, 0.0, s], [0.0, 1.0, 0.0], [-s, 0.0, c]], dtype=np.float64)


def rotation_matrix_z(angle: float) -> NDArray[np.float64]:
    """Right-handed rotation about the z-axis (radians)."""
    c, s = np.cos(angle), np.sin(angle)
    return np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]], dtype=np.float64)


def euler_rotation_matrix(rx: float, ry: float, rz: float) -> NDArray[np.float64]:
    """Extrinsic X-then-Y-then-Z rotation matrix.

    Parameters
    ----------
    rx, ry, rz : float
        Rotation angles about the fixed x, y and z axes (radians).

    Returns
    -------
    NDArray[np.float64]
        3x3 matrix ``R = Rz @ Ry @ Rx``. Column vectors map as ``R @ v``;
        row-stacked points map as ``points @ R.T``.
    """
    return rotation_matrix_z(rz) @ rotation_matrix_y(ry) @ rotation_matrix_x(rx)


def rodrigues_rotate(
    points: NDArray[np.float64],
    pivot: NDArray[np.float64],
    axis: NDArray[np.float64],
    angle: float,
) -> NDArray[np.float64]:
    """Rotate row-stacked points about an axis through *pivot*.

    Applies Rodrigues' formula
    ``v' = v cos(a) + (k x v) sin(a) + k (k . v)(1 - cos(a))``
    to each ``v = point - pivot``.

    Parameters
    ----------
    points : NDArray[np.float64]
        Array of shape (N, 3).
    pivot : NDArray[np.float64]
        Point on the rotation axis, shape (3,).
    axis : NDArray[np.float64]
        Unit rotation axis, shape (3,). Not re-normalized here.
    angle : float
        Rotation angle in radians (right-hand rule about *axis*).

    Returns
    -------
    NDArray[np.float64]
        Rotated points, shape (N, 3).
    """
    v = np.asarray(points, dtype=np.float64) - pivot
    cos_a = np.cos(angle)
    sin_a = np.sin(angle)
    rotated = v * cos_a + np.cross(axis, v) * sin_a + np.outer(v @ axis, axis) * (1.0 - cos_a)
    return rotated + pivot


def bounding_box(points: NDArray[np.float64]) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Per-axis minimum and maximum of row-stacked points."""
    pts = np.asarray(points, dtype=np.float64)
    return pts.min(axis=0), pts.max(axis=0)
