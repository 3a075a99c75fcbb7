from __future__ import annotations

import math

import numpy as np

from waypoint_follower import Lane, Point, Pose, Quaternion, Waypoint


def straight_lane(n: int = 5, spacing: float = 1.0, velocity: float = 1.0) -> Lane:
    xs = np.arange(n, dtype=float) * spacing
    return Lane.from_xy(np.stack([xs, np.zeros(n)], axis=1), velocity)


def u_turn_lane() -> Lane:
    """Out along y=0, back along y=1; all velocities positive."""
    pts = [(0, 0), (1, 0), (2, 0), (3, 0), (4, 0), (4, 1), (3, 1), (2, 1), (1, 1), (0, 1)]
    return Lane.from_xy(pts, 1.0)


def switchback_lane() -> Lane:
    """Forward along +x to (5, 0) (indices 0-5), then reverse towards 150 deg (indices 6-8)."""
    th = math.radians(150.0)
    fwd = [(float(x), 0.0) for x in range(6)]
    rev = [(5.0 + k * math.cos(th), k * math.sin(th)) for k in (1.0, 2.0, 3.0)]
    return Lane.from_xy(fwd + rev, [1.0] * 6 + [-1.0] * 3)


def waypoint(x: float, y: float, yaw: float, velocity: float) -> Waypoint:
    return Waypoint(Pose(Point(x, y, 0.0), Quaternion.from_yaw(yaw)), velocity)
