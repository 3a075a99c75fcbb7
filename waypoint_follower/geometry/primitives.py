"""Stateless planar geometry used by the tracker and by downstream controllers.

None of these raise on degenerate geometry: coincident points and
straight-ahead targets resolve to sentinels (``RADIUS_MAX``,
``CURVATURE_MAX``, ``0.0`` or ``None``) so a control cycle is never aborted.
"""

from __future__ import annotations

from math import copysign, cos, isfinite, radians, sin, sqrt
from typing import Iterable, List, Optional, Tuple

import numpy as np

from ..constants import CURVATURE_MAX, DEGENERATE_POINT_EPS, RADIUS_MAX
from ..types import Point, Pose, Waypoint
from .transforms import to_absolute_3d, to_relative_2d, to_relative_3d


def dist_squared_2d(p: Point, q: Point) -> float:
    dx = p.x - q.x
    dy = p.y - q.y
    return dx * dx + dy * dy


def plane_distance(p: Point, q: Point) -> float:
    """Euclidean distance with z ignored."""
    return sqrt(dist_squared_2d(p, q))


def lateral_error_2d(line_start: Point, line_end: Point, point: Point) -> float:
    """Signed distance from ``point`` to the infinite line start->end.

    Positive when the point lies to the left of the line direction, negative
    to the right. A zero-length segment gives 0.0.
    """
    a = np.array([line_end.x - line_start.x, line_end.y - line_start.y], dtype=float)
    b = np.array([point.x - line_start.x, point.y - line_start.y], dtype=float)
    length = float(np.hypot(a[0], a[1]))
    if length <= 0.0:
        return 0.0
    return float(a[0] * b[1] - a[1] * b[0]) / length


def calc_radius(target: Point, pose: Pose) -> float:
    """Radius of the arc tangent to the pose heading that passes through ``target``.

    Saturates at ``RADIUS_MAX`` (keeping the turn sign) when the target is
    straight ahead or behind, including offsets so small the quotient overflows.
    """
    denominator = 2.0 * to_relative_2d(target, pose).y
    numerator = dist_squared_2d(target, pose.position)
    if abs(denominator) > 0.0:
        radius = numerator / denominator
        if isfinite(radius) and abs(radius) < RADIUS_MAX:
            return radius
        return copysign(RADIUS_MAX, denominator)
    return RADIUS_MAX


def calc_curvature(target: Point, pose: Pose) -> float:
    """Inverse of :func:`calc_radius`, saturating at ``CURVATURE_MAX``."""
    radius = calc_radius(target, pose)
    if abs(radius) > 1.0 / CURVATURE_MAX:
        return 1.0 / radius
    return copysign(CURVATURE_MAX, radius)


def extract_poses(waypoints: Iterable[Waypoint], out: Optional[List[Pose]] = None) -> List[Pose]:
    """Collect the poses of a lane.

    Pass ``out`` to refill an existing list instead of allocating a new one
    every cycle.
    """
    if out is None:
        return [wp.pose for wp in waypoints]
    out.clear()
    out.extend(wp.pose for wp in waypoints)
    return out


def linear_equation(
    start: Point, end: Point, eps: float = DEGENERATE_POINT_EPS
) -> Optional[Tuple[float, float, float]]:
    """Coefficients (a, b, c) of ``a*x + b*y + c = 0`` through start and end.

    Returns None when the two points coincide within ``eps`` on both axes
    (pass ``TrackingConfig.degenerate_eps`` to tune it).
    """
    if abs(start.x - end.x) < eps and abs(start.y - end.y) < eps:
        return None
    a = end.y - start.y
    b = -(end.x - start.x)
    c = -(end.y - start.y) * start.x + (end.x - start.x) * start.y
    return a, b, c


def distance_line_to_point(point: Point, a: float, b: float, c: float) -> float:
    return abs(a * point.x + b * point.y + c) / sqrt(a * a + b * b)


def rotate_point(point: Point, degree: float) -> Point:
    """Rotate (x, y) about the origin; z is dropped."""
    th = radians(degree)
    return Point(cos(th) * point.x - sin(th) * point.y, sin(th) * point.x + cos(th) * point.y, 0.0)


def rotate_unit_vector(vec: np.ndarray, degree: float) -> np.ndarray:
    """Rotate a planar vector and renormalize it to unit length (z = 0)."""
    th = radians(degree)
    v = np.asarray(vec, dtype=float)
    w = np.array([cos(th) * v[0] - sin(th) * v[1], sin(th) * v[0] + cos(th) * v[1], 0.0])
    n = float(np.linalg.norm(w))
    return w / n if n > 0.0 else w


def relative_angle(waypoint_pose: Pose, vehicle_pose: Pose) -> float:
    """Unsigned angle (degrees, [0, 180]) between the waypoint and vehicle x-axes."""
    p1 = to_relative_3d(waypoint_pose.position, vehicle_pose).as_array()
    tip = to_absolute_3d(Point(1.0, 0.0, 0.0), waypoint_pose)
    p2 = to_relative_3d(tip, vehicle_pose).as_array()
    v = p2 - p1
    n = float(np.linalg.norm(v))
    if n <= 0.0:
        return 0.0
    cos_a = float(np.clip(v[0] / n, -1.0, 1.0))
    return float(np.degrees(np.arccos(cos_a)))
