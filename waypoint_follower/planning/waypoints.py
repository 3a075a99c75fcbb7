from __future__ import annotations

from typing import Sequence

from ..geometry.primitives import plane_distance
from ..geometry.transforms import to_relative_3d
from ..types import Lane, LaneDirection, Point, Pose, Quaternion, Waypoint
from .direction import lane_direction


class WayPoints:
    """Bounds-checked accessors over the current lane.

    Out-of-range lookups return default values (origin, identity, 0.0)
    instead of raising, so controllers can look ahead of the tracked index.
    """

    def __init__(self, lane: Sequence[Waypoint] | None = None) -> None:
        self.lane: Sequence[Waypoint] = lane if lane is not None else Lane()

    @property
    def size(self) -> int:
        return len(self.lane)

    @property
    def is_empty(self) -> bool:
        return self.size == 0

    @property
    def interval(self) -> float:
        """Spacing between the first two waypoints."""
        if self.size < 2:
            return 0.0
        return plane_distance(self.lane[0].pose.position, self.lane[1].pose.position)

    def _valid(self, i: int) -> bool:
        return 0 <= i < self.size

    def position(self, i: int) -> Point:
        return self.lane[i].pose.position if self._valid(i) else Point()

    def orientation(self, i: int) -> Quaternion:
        return self.lane[i].pose.orientation if self._valid(i) else Quaternion()

    def pose(self, i: int) -> Pose:
        return self.lane[i].pose if self._valid(i) else Pose()

    def velocity_mps(self, i: int) -> float:
        return float(self.lane[i].velocity) if self._valid(i) else 0.0

    def in_driving_direction(self, i: int, current_pose: Pose) -> bool:
        """Whether waypoint i lies on the side of the vehicle it is travelling towards."""
        if not self._valid(i):
            return False
        direction = lane_direction(self.lane)
        x = to_relative_3d(self.lane[i].pose.position, current_pose).x
        return (x < 0.0 and direction == LaneDirection.BACKWARD) or (
            x >= 0.0 and direction == LaneDirection.FORWARD
        )
