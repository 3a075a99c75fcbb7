"""Value types shared by the geometry and planning layers.

All types are immutable. A :class:`Lane` is owned by the planner and is
never modified by the tracking code; derived quantities (direction, yaw)
are recomputed on demand instead of being cached on it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from math import atan2, pi
from typing import Iterator, Sequence, Tuple, overload

import numpy as np

from .geometry.angles import normalize_angle, quaternion_from_yaw, yaw_from_quaternion


@dataclass(frozen=True)
class Point:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=float)

    @classmethod
    def from_array(cls, v: Sequence[float]) -> "Point":
        z = float(v[2]) if len(v) > 2 else 0.0
        return cls(float(v[0]), float(v[1]), z)


@dataclass(frozen=True)
class Quaternion:
    """Unit quaternion (x, y, z, w). Defaults to identity."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.x, self.y, self.z, self.w)

    @classmethod
    def from_yaw(cls, yaw: float) -> "Quaternion":
        return cls(*quaternion_from_yaw(yaw))

    @property
    def yaw(self) -> float:
        return yaw_from_quaternion(self.as_tuple())


@dataclass(frozen=True)
class Pose:
    position: Point = field(default_factory=Point)
    orientation: Quaternion = field(default_factory=Quaternion)

    @property
    def yaw(self) -> float:
        return self.orientation.yaw

    @classmethod
    def from_xyyaw(cls, x: float, y: float, yaw: float, z: float = 0.0) -> "Pose":
        return cls(Point(float(x), float(y), float(z)), Quaternion.from_yaw(yaw))


@dataclass(frozen=True)
class Waypoint:
    """Pose plus signed longitudinal velocity (m/s); negative means reverse travel."""

    pose: Pose
    velocity: float = 0.0

    @property
    def position(self) -> Point:
        return self.pose.position


class LaneDirection(Enum):
    FORWARD = "forward"
    BACKWARD = "backward"
    UNKNOWN = "unknown"
    ERROR = "error"


@dataclass(frozen=True)
class Lane:
    """Ordered, immutable sequence of waypoints (insertion order = traversal order)."""

    waypoints: Tuple[Waypoint, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "waypoints", tuple(self.waypoints))

    def __len__(self) -> int:
        return len(self.waypoints)

    def __iter__(self) -> Iterator[Waypoint]:
        return iter(self.waypoints)

    @overload
    def __getitem__(self, i: int) -> Waypoint: ...

    @overload
    def __getitem__(self, i: slice) -> Tuple[Waypoint, ...]: ...

    def __getitem__(self, i):
        return self.waypoints[i]

    @classmethod
    def from_xy(cls, points: Sequence[Sequence[float]], velocities: Sequence[float] | float) -> "Lane":
        """Build a lane from planar points.

        Each waypoint faces along the segment to its successor (the last one
        reuses the preceding segment), flipped by pi where the velocity is
        negative so the orientation is the vehicle heading while reversing.
        """
        pts = np.asarray(points, dtype=float).reshape(-1, 2)
        n = pts.shape[0]
        if np.isscalar(velocities):
            vel = np.full(n, float(velocities))  # type: ignore[arg-type]
        else:
            vel = np.asarray(velocities, dtype=float)
            if vel.shape[0] != n:
                raise ValueError("velocities must match points length")
        wps = []
        for i in range(n):
            if n < 2:
                yaw = 0.0
            else:
                j = i if i < n - 1 else i - 1
                d = pts[j + 1] - pts[j]
                yaw = atan2(d[1], d[0])
            if vel[i] < 0.0:
                yaw = normalize_angle(yaw + pi)
            wps.append(Waypoint(Pose.from_xyyaw(pts[i, 0], pts[i, 1], yaw), float(vel[i])))
        return cls(tuple(wps))
