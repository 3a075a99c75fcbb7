"""Curvature-commanded kinematic vehicle.

Pure Python stand-in for the pose source in demos and tests. Implements
command clipping, Euler integration and heading normalization; the speed is
signed so the vehicle can reverse along a switchback.
"""

from __future__ import annotations

from dataclasses import dataclass
from math import cos, sin

from ..geometry.angles import normalize_angle
from ..types import Pose


@dataclass
class VehicleState:
    """Kinematic state.

    - x, y: position (meters)
    - yaw: heading (radians, wrapped to (-pi, pi])
    - v: applied signed speed (m/s)
    - kappa: applied path curvature (1/m)
    """

    x: float
    y: float
    yaw: float
    v: float = 0.0
    kappa: float = 0.0


class KinematicVehicle:
    """Interface:
    - reset(state?) -> VehicleState
    - step((v, kappa), dt) -> VehicleState
    - pose() -> Pose
    """

    def __init__(self, v_max: float, kappa_max: float) -> None:
        self.v_max = float(v_max)
        self.kappa_max = float(kappa_max)
        self._state = VehicleState(0.0, 0.0, 0.0)

    def clip_command(self, u: tuple[float, float]) -> tuple[float, float]:
        v_cmd, k_cmd = u
        v = min(max(v_cmd, -self.v_max), self.v_max)
        k = min(max(k_cmd, -self.kappa_max), self.kappa_max)
        return v, k

    def reset(self, state: VehicleState | None = None) -> VehicleState:
        s = state or VehicleState(0.0, 0.0, 0.0)
        v, k = self.clip_command((s.v, s.kappa))
        self._state = VehicleState(s.x, s.y, normalize_angle(s.yaw), v, k)
        return self._state

    def step(self, command: tuple[float, float], dt: float) -> VehicleState:
        """Apply clipped (v, kappa) for duration dt; yaw rate is v * kappa."""
        v, k = self.clip_command(command)
        s = self._state
        x = s.x + v * cos(s.yaw) * dt
        y = s.y + v * sin(s.yaw) * dt
        yaw = normalize_angle(s.yaw + v * k * dt)
        self._state = VehicleState(x, y, yaw, v, k)
        return self._state

    def pose(self) -> Pose:
        s = self._state
        return Pose.from_xyyaw(s.x, s.y, s.yaw)

    @property
    def state(self) -> VehicleState:
        return self._state
