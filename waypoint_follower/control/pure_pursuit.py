"""Pure Pursuit command from the tracked waypoint (reference consumer).

API: compute_command(lane, pose, index, cfg) -> (v, kappa)
The target is the first waypoint at least ``lookahead_m`` away from the pose,
searching forward from the tracked index and stopping at the lane's next
switchback (or its end). Curvature uses the arc through pose and target.
"""

from __future__ import annotations

from typing import Sequence, Tuple

from ..config import PurePursuitConfig
from ..geometry.primitives import calc_curvature, plane_distance
from ..types import Pose, Waypoint


def lookahead_index(lane: Sequence[Waypoint], pose: Pose, index: int, lookahead_m: float) -> int:
    n = len(lane)
    j = index
    while j < n - 1:
        if plane_distance(lane[j].pose.position, pose.position) >= lookahead_m:
            break
        # do not look past a direction change
        if lane[j].velocity * lane[j + 1].velocity < 0.0:
            break
        j += 1
    return j


def compute_command(
    lane: Sequence[Waypoint], pose: Pose, index: int, cfg: PurePursuitConfig = PurePursuitConfig()
) -> Tuple[float, float]:
    """Compute (velocity, curvature); (0, 0) when there is no valid tracked index."""
    if index < 0 or index >= len(lane) or len(lane) < 2:
        return 0.0, 0.0
    target = lane[lookahead_index(lane, pose, index, cfg.lookahead_m)]
    kappa = calc_curvature(target.pose.position, pose)
    # Robustness: saturate when the target is nearly abeam or on top of the vehicle
    kappa = max(-cfg.max_curvature, min(cfg.max_curvature, kappa))
    v = float(lane[index].velocity)
    return v, float(kappa)
