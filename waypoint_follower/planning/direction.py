"""Lane direction classification.

A lane is traversed FORWARD when the vehicle drives nose-first along it and
BACKWARD when it reverses along it. Two independent cues are available:
positional (is each waypoint ahead of or behind its predecessor's heading?)
and the sign of the planned velocities.
"""

from __future__ import annotations

from typing import Sequence

from ..config import DEFAULT_CONFIG, TrackingConfig
from ..geometry.transforms import to_relative_2d, to_relative_3d
from ..types import LaneDirection, Pose, Waypoint

_DECISIVE = (LaneDirection.FORWARD, LaneDirection.BACKWARD)


def lane_direction_by_position(
    lane: Sequence[Waypoint], config: TrackingConfig = DEFAULT_CONFIG
) -> LaneDirection:
    if len(lane) < 2:
        return LaneDirection.UNKNOWN
    for i in range(1, len(lane)):
        rel_x = to_relative_3d(lane[i].pose.position, lane[i - 1].pose).x
        if abs(rel_x) <= config.position_eps:
            continue
        return LaneDirection.BACKWARD if rel_x < 0.0 else LaneDirection.FORWARD
    return LaneDirection.UNKNOWN


def lane_direction_by_velocity(
    lane: Sequence[Waypoint], config: TrackingConfig = DEFAULT_CONFIG
) -> LaneDirection:
    for wp in lane:
        if abs(wp.velocity) <= config.velocity_eps:
            continue
        return LaneDirection.BACKWARD if wp.velocity < 0.0 else LaneDirection.FORWARD
    return LaneDirection.UNKNOWN


def lane_direction(lane: Sequence[Waypoint], config: TrackingConfig = DEFAULT_CONFIG) -> LaneDirection:
    """Combine both cues.

    ERROR when both are decisive and disagree; callers must treat that as a
    hard failure rather than defaulting to FORWARD.
    """
    by_pos = lane_direction_by_position(lane, config)
    by_vel = lane_direction_by_velocity(lane, config)
    if by_pos in _DECISIVE and by_vel in _DECISIVE and by_pos != by_vel:
        return LaneDirection.ERROR
    if by_pos in _DECISIVE:
        return by_pos
    return by_vel


def is_direction_forward(poses: Sequence[Pose]) -> bool:
    """Quick check on the second segment of a pose list; False when it has fewer than 3 poses."""
    if len(poses) < 3:
        return False
    return to_relative_2d(poses[2].position, poses[1]).x > 0.0
