"""Waypoint localization and path-tracking geometry for lane following."""

from .types import Lane, LaneDirection, Point, Pose, Quaternion, Waypoint
from .constants import UNSET_INDEX
from .config import DEFAULT_CONFIG, PurePursuitConfig, TrackingConfig
from .geometry.angles import normalize_angle
from .geometry.transforms import (
    relative_target_pose,
    to_absolute_2d,
    to_absolute_3d,
    to_relative_2d,
    to_relative_3d,
)
from .geometry.primitives import (
    calc_curvature,
    calc_radius,
    dist_squared_2d,
    extract_poses,
    lateral_error_2d,
    plane_distance,
)
from .planning import (
    IndexTracker,
    WayPoints,
    find_closest_index,
    lane_direction,
    update_current_index,
    waypoint_yaw,
)

__all__ = [
    "Lane",
    "LaneDirection",
    "Point",
    "Pose",
    "Quaternion",
    "Waypoint",
    "UNSET_INDEX",
    "DEFAULT_CONFIG",
    "PurePursuitConfig",
    "TrackingConfig",
    "normalize_angle",
    "relative_target_pose",
    "to_absolute_2d",
    "to_absolute_3d",
    "to_relative_2d",
    "to_relative_3d",
    "calc_curvature",
    "calc_radius",
    "dist_squared_2d",
    "extract_poses",
    "lateral_error_2d",
    "plane_distance",
    "IndexTracker",
    "WayPoints",
    "find_closest_index",
    "lane_direction",
    "update_current_index",
    "waypoint_yaw",
]
