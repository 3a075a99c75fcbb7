"""Angle and quaternion helpers.

Quaternions are handled as plain (x, y, z, w) tuples here so this module has
no dependency on the value types in ``waypoint_follower.types``.
"""

from __future__ import annotations

from math import atan2, cos, pi, sin
from typing import Tuple

import numpy as np

QuatTuple = Tuple[float, float, float, float]


def normalize_angle(a: float) -> float:
    """Wrap angle to (-pi, pi]."""
    res = float(a)
    while res > pi:
        res -= 2.0 * pi
    while res <= -pi:
        res += 2.0 * pi
    return res


def yaw_from_quaternion(q: QuatTuple) -> float:
    x, y, z, w = q
    return float(atan2(2.0 * (w * z + x * y), 1.0 - 2.0 * (y * y + z * z)))


def quaternion_from_yaw(yaw: float) -> QuatTuple:
    """Planar rotation about +z (roll = pitch = 0)."""
    half = 0.5 * float(yaw)
    return (0.0, 0.0, sin(half), cos(half))


def quaternion_conjugate(q: QuatTuple) -> QuatTuple:
    x, y, z, w = q
    return (-x, -y, -z, w)


def quaternion_multiply(a: QuatTuple, b: QuatTuple) -> QuatTuple:
    """Hamilton product a * b."""
    ax, ay, az, aw = a
    bx, by, bz, bw = b
    return (
        aw * bx + ax * bw + ay * bz - az * by,
        aw * by - ax * bz + ay * bw + az * bx,
        aw * bz + ax * by - ay * bx + az * bw,
        aw * bw - ax * bx - ay * by - az * bz,
    )


def rotate_vector(q: QuatTuple, v: np.ndarray) -> np.ndarray:
    """Rotate 3-vector v by unit quaternion q."""
    u = np.array(q[:3], dtype=float)
    w = float(q[3])
    v = np.asarray(v, dtype=float)
    t = 2.0 * np.cross(u, v)
    return v + w * t + np.cross(u, t)
