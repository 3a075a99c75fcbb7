from waypoint_follower import Lane, LaneDirection, TrackingConfig
from waypoint_follower.planning import (
    is_direction_forward,
    lane_direction,
    lane_direction_by_position,
    lane_direction_by_velocity,
)
from waypoint_follower.geometry.primitives import extract_poses

from tests.helpers import straight_lane, waypoint


def test_forward_lane_is_forward_by_both_cues() -> None:
    lane = straight_lane(5)
    assert lane_direction_by_position(lane) == LaneDirection.FORWARD
    assert lane_direction_by_velocity(lane) == LaneDirection.FORWARD
    assert lane_direction(lane) == LaneDirection.FORWARD


def test_reversing_lane_is_backward() -> None:
    # from_xy faces reversing waypoints opposite to travel
    lane = straight_lane(5, velocity=-1.0)
    assert lane_direction_by_position(lane) == LaneDirection.BACKWARD
    assert lane_direction_by_velocity(lane) == LaneDirection.BACKWARD
    assert lane_direction(lane) == LaneDirection.BACKWARD


def test_conflicting_cues_are_an_error() -> None:
    lane = Lane(tuple(waypoint(float(x), 0.0, 0.0, -1.0) for x in range(4)))
    assert lane_direction_by_position(lane) == LaneDirection.FORWARD
    assert lane_direction_by_velocity(lane) == LaneDirection.BACKWARD
    assert lane_direction(lane) == LaneDirection.ERROR


def test_short_lane_is_unknown() -> None:
    lane = Lane((waypoint(0.0, 0.0, 0.0, 0.0),))
    assert lane_direction_by_position(lane) == LaneDirection.UNKNOWN
    assert lane_direction(lane) == LaneDirection.UNKNOWN
    assert lane_direction(Lane()) == LaneDirection.UNKNOWN


def test_one_decisive_cue_wins() -> None:
    coincident = Lane(tuple(waypoint(1.0, 1.0, 0.0, 2.0) for _ in range(3)))
    assert lane_direction_by_position(coincident) == LaneDirection.UNKNOWN
    assert lane_direction(coincident) == LaneDirection.FORWARD

    stopped = Lane(tuple(waypoint(-float(x), 0.0, 0.0, 0.0) for x in range(3)))
    assert lane_direction_by_velocity(stopped) == LaneDirection.UNKNOWN
    assert lane_direction(stopped) == LaneDirection.BACKWARD


def test_sub_threshold_pairs_are_skipped() -> None:
    wps = [
        waypoint(0.0, 0.0, 0.0, 0.005),
        waypoint(0.0005, 0.0, 0.0, -0.005),
        waypoint(-1.0, 0.0, 0.0, -1.0),
    ]
    lane = Lane(tuple(wps))
    assert lane_direction_by_position(lane) == LaneDirection.BACKWARD
    assert lane_direction_by_velocity(lane) == LaneDirection.BACKWARD


def test_is_direction_forward() -> None:
    assert is_direction_forward(extract_poses(straight_lane(4)))
    assert not is_direction_forward(extract_poses(straight_lane(2)))


def test_position_threshold_is_configurable() -> None:
    lane = straight_lane(5)
    coarse = TrackingConfig(position_eps=2.0)
    assert lane_direction_by_position(lane, coarse) == LaneDirection.UNKNOWN
    assert lane_direction(lane, coarse) == LaneDirection.FORWARD
    blind = TrackingConfig(position_eps=2.0, velocity_eps=5.0)
    assert lane_direction(lane, blind) == LaneDirection.UNKNOWN


def test_conflict_needs_both_cues_above_threshold() -> None:
    lane = Lane(tuple(waypoint(float(x), 0.0, 0.0, -1.0) for x in range(4)))
    assert lane_direction(lane, TrackingConfig(position_eps=2.0)) == LaneDirection.BACKWARD
