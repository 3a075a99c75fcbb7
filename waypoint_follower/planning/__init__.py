"""Waypoint localization: lane direction, waypoint yaw, closest-point search and index tracking."""

from .closest import MinIdSearch, find_closest_index, find_closest_index_with_threshold
from .direction import (
    is_direction_forward,
    lane_direction,
    lane_direction_by_position,
    lane_direction_by_velocity,
)
from .tracker import IndexTracker, update_current_index
from .waypoints import WayPoints
from .yaw import waypoint_yaw

__all__ = [
    "MinIdSearch",
    "find_closest_index",
    "find_closest_index_with_threshold",
    "is_direction_forward",
    "lane_direction",
    "lane_direction_by_position",
    "lane_direction_by_velocity",
    "IndexTracker",
    "update_current_index",
    "WayPoints",
    "waypoint_yaw",
]
