"""Closed-loop lane tracking demo using Hydra config composition.

Drives a kinematic vehicle along a synthetic lane with a forward leg followed
by a reversing leg (one switchback), logging the tracked index, lateral error
and commands. Saves a resolved config snapshot (resolved.yaml) in the Hydra
run directory.
"""

from __future__ import annotations

import logging
import math
from math import copysign

import hydra
import numpy as np
from omegaconf import DictConfig, OmegaConf

from waypoint_follower import (
    UNSET_INDEX,
    IndexTracker,
    Lane,
    LaneDirection,
    PurePursuitConfig,
    TrackingConfig,
    WayPoints,
    lane_direction,
    lateral_error_2d,
    plane_distance,
)
from waypoint_follower.control import compute_command, decelerate_velocity
from waypoint_follower.geometry.primitives import linear_equation
from waypoint_follower.sim import KinematicVehicle, VehicleState

logger = logging.getLogger(__name__)


def build_switchback_lane(lane_cfg: dict) -> Lane:
    spacing = float(lane_cfg["spacing_m"])
    xs = np.arange(0.0, float(lane_cfg["forward_length_m"]) + 1e-9, spacing)
    fwd = np.stack([xs, np.zeros_like(xs)], axis=1)

    th = math.radians(float(lane_cfg["reverse_heading_deg"]))
    m = int(float(lane_cfg["reverse_length_m"]) / spacing)
    k = np.arange(1, m + 1, dtype=float) * spacing
    rev = fwd[-1] + np.stack([k * math.cos(th), k * math.sin(th)], axis=1)

    vel = [float(lane_cfg["speed_mps"])] * len(fwd) + [-float(lane_cfg["reverse_speed_mps"])] * len(rev)
    return Lane.from_xy(np.vstack([fwd, rev]), vel)


def distance_to_stop(lane: Lane, index: int) -> float:
    """Distance along the lane from ``index`` to the next switchback or the lane end."""
    d = 0.0
    j = index
    while j < len(lane) - 1 and lane[j].velocity * lane[j + 1].velocity >= 0.0:
        d += plane_distance(lane[j].position, lane[j + 1].position)
        j += 1
    return d


@hydra.main(config_path="../configs", config_name="config", version_base=None)
def main(cfg: DictConfig) -> None:
    tracking_cfg = TrackingConfig.from_dict(OmegaConf.to_container(cfg.tracking, resolve=True))
    pp_cfg = PurePursuitConfig.from_dict(OmegaConf.to_container(cfg.pure_pursuit, resolve=True))
    lane_cfg = OmegaConf.to_container(cfg.lane, resolve=True)
    run_cfg = OmegaConf.to_container(cfg.run, resolve=True)
    assert isinstance(lane_cfg, dict) and isinstance(run_cfg, dict)

    # Hydra sets CWD to the run directory
    with open("resolved.yaml", "w", encoding="utf-8") as f:
        f.write(OmegaConf.to_yaml(cfg, resolve=True))

    lane = build_switchback_lane(lane_cfg)
    direction = lane_direction(lane, tracking_cfg)
    logger.info("lane: %d waypoints, interval %.2f m, direction %s", len(lane), WayPoints(lane).interval, direction.value)
    if direction == LaneDirection.ERROR:
        logger.error("lane direction is ambiguous; refusing to drive")
        return

    vehicle = KinematicVehicle(v_max=float(cfg.vehicle.v_max), kappa_max=pp_cfg.max_curvature)
    vehicle.reset(VehicleState(float(cfg.vehicle.x), float(cfg.vehicle.y), float(cfg.vehicle.yaw)))
    tracker = IndexTracker(tracking_cfg)

    dt = float(run_cfg["dt"])
    last = len(lane) - 1
    for step in range(int(run_cfg["max_steps"])):
        pose = vehicle.pose()
        idx = tracker.update(lane, pose)
        if idx == UNSET_INDEX:
            logger.warning("no valid tracked index at step %d; stopping", step)
            break

        goal_d = plane_distance(lane[last].position, pose.position)
        if idx == last and goal_d < float(run_cfg["goal_tolerance_m"]):
            logger.info("goal reached at step %d (%.2f m from last waypoint)", step, goal_d)
            break

        v, kappa = compute_command(lane, pose, idx, pp_cfg)
        speed = decelerate_velocity(distance_to_stop(lane, idx), abs(v))
        v = copysign(max(speed, float(run_cfg["min_speed_mps"])), v) if v != 0.0 else 0.0

        if step % int(run_cfg["log_every"]) == 0:
            j0, j1 = (idx, idx + 1) if idx < last else (idx - 1, idx)
            if linear_equation(lane[j0].position, lane[j1].position, tracking_cfg.degenerate_eps) is None:
                # coincident waypoints: no reference line this cycle
                e_lat = 0.0
            else:
                e_lat = lateral_error_2d(lane[j0].position, lane[j1].position, pose.position)
            logger.info(
                "step %4d idx %3d  x %6.2f y %6.2f yaw %5.2f  e_lat %+.3f  v %+.2f kappa %+.3f",
                step, idx, pose.position.x, pose.position.y, pose.yaw, e_lat, v, kappa,
            )
        vehicle.step((v, kappa), dt)
    else:
        logger.warning("max_steps reached before the lane end (index %d of %d)", tracker.index, last)


if __name__ == "__main__":
    main()
