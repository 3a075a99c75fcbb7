"""Frame-over-frame tracked-index update.

The tracked index is the only state carried between control cycles. It
starts unset, is initialized by :func:`find_closest_index`, then advanced
locally each cycle so that it never jumps arbitrarily far on a small pose
change and does not jitter around switchbacks.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..config import DEFAULT_CONFIG, TrackingConfig
from ..constants import UNSET_INDEX
from ..geometry.primitives import plane_distance
from ..types import Pose, Waypoint
from .closest import find_closest_index

logger = logging.getLogger(__name__)


def _reanchor(lane: Sequence[Waypoint], pose: Pose, start: int) -> int:
    """Shift ``start`` towards the waypoint the vehicle has reached.

    Steps forward across a velocity sign flip (switchback) or while the next
    waypoint is nearer than the current one; steps back while the previous
    waypoint is nearer. Once the offset has gone one way it may not reverse.
    """
    n = len(lane)
    offset = 0
    for i in range(start, n - 1):
        prev_v = lane[i - 1].velocity
        cur_v = lane[i].velocity
        next_v = lane[i + 1].velocity

        prev_d = plane_distance(pose.position, lane[i - 1].pose.position)
        cur_d = plane_distance(pose.position, lane[i].pose.position)
        next_d = plane_distance(pose.position, lane[i + 1].pose.position)

        if cur_v * next_v < 0.0 and offset >= 0:
            offset += 1
        elif cur_v * next_v > 0.0 and next_d < cur_d and offset >= 0:
            offset += 1
        elif prev_v * cur_v > 0.0 and prev_d < cur_d and offset <= 0:
            offset -= 1
        else:
            break
    return start + offset


def update_current_index(
    lane: Sequence[Waypoint],
    pose: Pose,
    current_index: int,
    config: TrackingConfig = DEFAULT_CONFIG,
) -> int:
    """Return the tracked index for this cycle given last cycle's index.

    A negative ``current_index`` means unset and triggers a full closest-point
    search. A lane shorter than 2 or an index past its end is reported with a
    warning and ``UNSET_INDEX``.
    """
    n = len(lane)
    if n < 2 or current_index > n - 1:
        logger.warning("Failed to update current index. size: %d, index: %d", n, current_index)
        return UNSET_INDEX

    if current_index < 0:
        return find_closest_index(lane, pose, config)

    start = current_index
    if 0 < start < n - 1:
        start = _reanchor(lane, pose, start)
    start = min(max(0, start), n - 1)

    # first index where the distance starts to grow; lane end if it never does
    next_index = n - 1
    prev_d = float("inf")
    for i in range(start, n):
        d = plane_distance(lane[i].pose.position, pose.position)
        if d > prev_d:
            next_index = i - 1
            break
        prev_d = d
    return min(max(0, next_index), n - 1)


class IndexTracker:
    """Holds the tracked index for one control loop.

    The index is reset whenever a different lane object is supplied; a lane
    is treated as immutable for as long as it is being tracked. Instances are
    not meant to be shared between control loops.
    """

    def __init__(self, config: TrackingConfig = DEFAULT_CONFIG) -> None:
        self.config = config
        self._lane: Optional[Sequence[Waypoint]] = None
        self._index = UNSET_INDEX

    @property
    def index(self) -> int:
        return self._index

    @property
    def is_set(self) -> bool:
        return self._index != UNSET_INDEX

    def reset(self) -> None:
        self._lane = None
        self._index = UNSET_INDEX

    def update(self, lane: Sequence[Waypoint], pose: Pose) -> int:
        if lane is not self._lane:
            if self._lane is not None:
                logger.debug("new lane received (size %d); tracked index reset", len(lane))
            self._lane = lane
            self._index = UNSET_INDEX
        self._index = update_current_index(lane, pose, self._index, self.config)
        return self._index
