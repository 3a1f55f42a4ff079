# towercraft/kernel/quaternion.py
"""
QUATERNIONS: Rotation Composition with an Explicit Order
========================================================

Quaternions are stored as numpy arrays in (w, x, y, z) order and are always
kept at unit length.

COMPOSITION ORDER:
------------------
Rotation composition is NOT commutative. Throughout this package

    quat_multiply(a, b)

means "apply b first, then a" (Hamilton product a * b acting on a vector as
a * v * conj(a * b)). So an intrinsic X-then-Y-then-Z Euler rotation is

    q = qx * qy * qz

which yields the rotation matrix Rx @ Ry @ Rz.
"""

import numpy as np
from typing import Sequence

IDENTITY = np.array([1.0, 0.0, 0.0, 0.0])

X_AXIS = np.array([1.0, 0.0, 0.0])
Y_AXIS = np.array([0.0, 1.0, 0.0])
Z_AXIS = np.array([0.0, 0.0, 1.0])


def quat_normalize(q: Sequence[float]) -> np.ndarray:
    q = np.asarray(q, dtype=float)
    n = np.linalg.norm(q)
    if n == 0.0:
        return IDENTITY.copy()
    return q / n


def quat_from_axis_angle(axis: Sequence[float], angle: float) -> np.ndarray:
    """Rotation of `angle` radians about `axis` (right-hand rule)."""
    axis = np.asarray(axis, dtype=float)
    axis = axis / np.linalg.norm(axis)
    half = 0.5 * angle
    s = np.sin(half)
    return np.array([np.cos(half), axis[0] * s, axis[1] * s, axis[2] * s])


def quat_multiply(a: Sequence[float], b: Sequence[float]) -> np.ndarray:
    """Hamilton product a * b (b is applied first)."""
    aw, ax, ay, az = a
    bw, bx, by, bz = b
    return np.array([
        aw * bw - ax * bx - ay * by - az * bz,
        aw * bx + ax * bw + ay * bz - az * by,
        aw * by - ax * bz + ay * bw + az * bx,
        aw * bz + ax * by - ay * bx + az * bw,
    ])


def quat_from_euler_xyz(ax: float, ay: float, az: float) -> np.ndarray:
    """
    Intrinsic X-then-Y-then-Z rotation from three angles in radians.

    Equivalent to the rotation matrix Rx(ax) @ Ry(ay) @ Rz(az).
    """
    qx = quat_from_axis_angle(X_AXIS, ax)
    qy = quat_from_axis_angle(Y_AXIS, ay)
    qz = quat_from_axis_angle(Z_AXIS, az)
    return quat_multiply(quat_multiply(qx, qy), qz)


def quat_from_unit_vectors(v_from: Sequence[float], v_to: Sequence[float]) -> np.ndarray:
    """
    Shortest-arc rotation mapping unit vector v_from onto unit vector v_to.

    Antiparallel inputs pick an arbitrary perpendicular axis.
    """
    v_from = np.asarray(v_from, dtype=float)
    v_to = np.asarray(v_to, dtype=float)
    r = float(np.dot(v_from, v_to)) + 1.0

    if r < 1e-8:
        # 180 degree turn: any axis perpendicular to v_from works
        if abs(v_from[0]) > abs(v_from[2]):
            q = np.array([0.0, -v_from[1], v_from[0], 0.0])
        else:
            q = np.array([0.0, 0.0, -v_from[2], v_from[1]])
    else:
        c = np.cross(v_from, v_to)
        q = np.array([r, c[0], c[1], c[2]])

    return quat_normalize(q)


def quat_rotate(q: Sequence[float], v: Sequence[float]) -> np.ndarray:
    """Rotate a 3-vector by unit quaternion q."""
    return quat_to_matrix(q) @ np.asarray(v, dtype=float)


def quat_to_matrix(q: Sequence[float]) -> np.ndarray:
    """3x3 rotation matrix of a unit quaternion."""
    w, x, y, z = q
    return np.array([
        [1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y)],
        [2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x)],
        [2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y)],
    ])
