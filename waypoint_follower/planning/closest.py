"""Closest-waypoint searches used to (re)initialize the tracked index."""

from __future__ import annotations

import logging
from typing import Sequence, Tuple

from ..config import DEFAULT_CONFIG, TrackingConfig
from ..constants import UNSET_INDEX
from ..geometry.angles import normalize_angle
from ..geometry.primitives import dist_squared_2d, plane_distance
from ..types import Pose, Waypoint
from .yaw import waypoint_yaw

logger = logging.getLogger(__name__)


class MinIdSearch:
    """Running arg-min over (index, value) pairs.

    Strict ``<`` so the earliest index wins ties.
    """

    def __init__(self, upper_bound: float = float("inf")) -> None:
        self._val_min = float(upper_bound)
        self._idx_min = UNSET_INDEX

    def update(self, index: int, value: float) -> None:
        if value < self._val_min:
            self._idx_min = int(index)
            self._val_min = float(value)

    @property
    def result(self) -> int:
        return self._idx_min

    @property
    def value(self) -> float:
        return self._val_min

    @property
    def ok(self) -> bool:
        return self._idx_min != UNSET_INDEX


def find_closest_index(lane: Sequence[Waypoint], pose: Pose, config: TrackingConfig = DEFAULT_CONFIG) -> int:
    """Best initial waypoint for ``pose``.

    Phase 1 keeps waypoints closer than ``valid_distance`` whose lane yaw is
    within ``valid_angle`` of the pose yaw and takes the nearest. If none
    qualifies, phase 2 returns the globally nearest waypoint. Only a lane with
    fewer than 2 waypoints yields ``UNSET_INDEX``.
    """
    if len(lane) < 2:
        logger.warning("waypoints size is too small (size = %d)", len(lane))
        return UNSET_INDEX

    robot_yaw = pose.yaw
    search = MinIdSearch(upper_bound=config.valid_distance)
    for i, wp in enumerate(lane):
        distance = plane_distance(wp.pose.position, pose.position)
        if distance >= search.value:
            continue
        angle_diff = normalize_angle(waypoint_yaw(lane, i) - robot_yaw)
        if abs(angle_diff) < config.valid_angle:
            search.update(i, distance)
    if search.ok:
        return search.result

    logger.debug(
        "no waypoint within %.2f m heading within %.3f rad of yaw %.3f; using nearest waypoint",
        config.valid_distance,
        config.valid_angle,
        robot_yaw,
    )
    nearest = MinIdSearch()
    for i, wp in enumerate(lane):
        nearest.update(i, dist_squared_2d(wp.pose.position, pose.position))
    return nearest.result


def find_closest_index_with_threshold(
    poses: Sequence[Pose], pose: Pose, dist_thr: float, angle_thr: float
) -> Tuple[bool, int]:
    """Nearest pose within ``dist_thr`` whose own orientation is within ``angle_thr`` of ``pose``.

    Returns ``(found, index)``; index is ``UNSET_INDEX`` when nothing qualifies.
    """
    search = MinIdSearch()
    yaw_pose = pose.yaw
    dist_thr_sq = dist_thr * dist_thr
    for i, p in enumerate(poses):
        ds = dist_squared_2d(p.position, pose.position)
        if ds > dist_thr_sq:
            continue
        if abs(normalize_angle(yaw_pose - p.yaw)) > angle_thr:
            continue
        search.update(i, ds)
    return search.ok, search.result
