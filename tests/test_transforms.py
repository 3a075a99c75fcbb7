import math

import numpy as np

from waypoint_follower import (
    Point,
    Pose,
    Quaternion,
    relative_target_pose,
    to_absolute_2d,
    to_absolute_3d,
    to_relative_2d,
    to_relative_3d,
)


def test_relative_2d_rotates_into_pose_frame() -> None:
    origin = Pose.from_xyyaw(1.0, 1.0, math.pi / 2)
    p = to_relative_2d(Point(1.0, 2.0), origin)
    assert np.isclose(p.x, 1.0)
    assert np.isclose(p.y, 0.0, atol=1e-12)


def test_2d_stamps_origin_z() -> None:
    origin = Pose.from_xyyaw(0.0, 0.0, 0.3, z=2.5)
    assert to_relative_2d(Point(1.0, 1.0, 7.0), origin).z == 2.5
    assert to_absolute_2d(Point(1.0, 1.0, 7.0), origin).z == 2.5


def test_round_trip_2d() -> None:
    rng = np.random.default_rng(0)
    for _ in range(200):
        x, y, ox, oy = rng.uniform(-100.0, 100.0, size=4)
        yaw = rng.uniform(-math.pi, math.pi)
        origin = Pose.from_xyyaw(ox, oy, yaw)
        back = to_absolute_2d(to_relative_2d(Point(x, y), origin), origin)
        assert abs(back.x - x) < 1e-9
        assert abs(back.y - y) < 1e-9


def test_round_trip_3d_with_tilted_orientation() -> None:
    rng = np.random.default_rng(1)
    for _ in range(200):
        q = rng.normal(size=4)
        q = q / np.linalg.norm(q)
        origin = Pose(Point(*rng.uniform(-10.0, 10.0, size=3)), Quaternion(*q))
        p = Point(*rng.uniform(-10.0, 10.0, size=3))
        back = to_absolute_3d(to_relative_3d(p, origin), origin)
        assert np.allclose(back.as_array(), p.as_array(), atol=1e-9)


def test_3d_matches_2d_for_planar_pose() -> None:
    origin = Pose.from_xyyaw(2.0, -1.0, 0.7)
    p = Point(4.0, 3.0, 0.0)
    r2 = to_relative_2d(p, origin)
    r3 = to_relative_3d(p, origin)
    assert np.isclose(r2.x, r3.x) and np.isclose(r2.y, r3.y)


def test_relative_target_pose() -> None:
    current = Pose.from_xyyaw(1.0, 0.0, math.pi / 2)
    target = Pose.from_xyyaw(1.0, 2.0, math.pi)
    rel = relative_target_pose(current, target)
    assert np.allclose(rel.position.as_array(), [2.0, 0.0, 0.0], atol=1e-12)
    assert np.isclose(rel.yaw, math.pi / 2)
