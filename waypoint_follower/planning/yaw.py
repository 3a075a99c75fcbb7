"""Heading implied by a lane at a given waypoint."""

from __future__ import annotations

from math import atan2, pi
from typing import Sequence

from ..geometry.angles import normalize_angle
from ..types import Waypoint


def _segment_yaw(lane: Sequence[Waypoint], i: int) -> float:
    """Bearing of segment i -> i+1, flipped by pi when waypoint i+1 is driven in reverse."""
    p0 = lane[i].pose.position
    p1 = lane[i + 1].pose.position
    yaw = atan2(p1.y - p0.y, p1.x - p0.x)
    if lane[i + 1].velocity < 0.0:
        yaw = normalize_angle(yaw + pi)
    return yaw


def waypoint_yaw(lane: Sequence[Waypoint], index: int) -> float:
    """Heading the lane implies at ``index``.

    Interior waypoints bisect the incoming and outgoing bearings (or take the
    outgoing one across a hairpin); end waypoints use their single segment; a
    one-waypoint lane falls back to the waypoint's own orientation.

    Raises IndexError when ``index`` is outside the lane. This is a caller bug,
    not a runtime condition: the closest-point search and the tracker only
    pass indices from ``range(len(lane))``.
    """
    n = len(lane)
    if not 0 <= index < n:
        raise IndexError(f"waypoint index {index} out of range for lane of size {n}")

    has_behind = index > 0
    has_front = index < n - 1

    if has_behind and has_front:
        behind_to_current = _segment_yaw(lane, index - 1)
        current_to_front = _segment_yaw(lane, index)
        diff = normalize_angle(current_to_front - behind_to_current)
        if abs(diff) < pi:
            return normalize_angle(behind_to_current + diff / 2.0)
        return current_to_front
    if has_behind:
        return _segment_yaw(lane, index - 1)
    if has_front:
        return _segment_yaw(lane, index)
    # single waypoint: nothing to infer from
    return lane[index].pose.yaw
