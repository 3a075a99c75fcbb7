"""Frame transforms between the world frame and a pose-relative frame.

The pose-relative frame has its origin at ``origin.position`` and its x-axis
along the origin heading. The 2D variants only use yaw and stamp the origin's
z on the result; the 3D variants use the full quaternion and are exact in z.
"""

from __future__ import annotations

from math import cos, sin

import numpy as np

from ..types import Point, Pose, Quaternion
from .angles import quaternion_conjugate, quaternion_multiply, rotate_vector


def to_relative_2d(point: Point, origin: Pose) -> Point:
    # translation, then inverse rotation
    dx = point.x - origin.position.x
    dy = point.y - origin.position.y
    yaw = origin.yaw
    c, s = cos(yaw), sin(yaw)
    return Point(c * dx + s * dy, -s * dx + c * dy, origin.position.z)


def to_absolute_2d(point: Point, origin: Pose) -> Point:
    # rotation, then translation
    yaw = origin.yaw
    c, s = cos(yaw), sin(yaw)
    x = c * point.x - s * point.y
    y = s * point.x + c * point.y
    return Point(x + origin.position.x, y + origin.position.y, origin.position.z)


def to_relative_3d(point: Point, origin: Pose) -> Point:
    q_inv = quaternion_conjugate(origin.orientation.as_tuple())
    v = point.as_array() - origin.position.as_array()
    return Point.from_array(rotate_vector(q_inv, v))


def to_absolute_3d(point: Point, origin: Pose) -> Point:
    v = rotate_vector(origin.orientation.as_tuple(), point.as_array())
    return Point.from_array(v + origin.position.as_array())


def relative_target_pose(current: Pose, target: Pose) -> Pose:
    """Express ``target`` in the frame of ``current``."""
    q = quaternion_multiply(
        quaternion_conjugate(current.orientation.as_tuple()), target.orientation.as_tuple()
    )
    q_arr = np.asarray(q, dtype=float)
    norm = float(np.linalg.norm(q_arr))
    if norm > 0.0:
        q_arr = q_arr / norm
    return Pose(to_relative_3d(target.position, current), Quaternion(*map(float, q_arr)))
