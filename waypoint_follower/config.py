from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict
import math

from .constants import (
    VALID_DISTANCE_M,
    VALID_ANGLE_RAD,
    POSITION_DIRECTION_EPS,
    VELOCITY_DIRECTION_EPS,
    DEGENERATE_POINT_EPS,
    LOOKAHEAD_M,
    MAX_CURVATURE,
)


def _pick(cls, data: Dict[str, Any]) -> Dict[str, float]:
    names = {f.name for f in fields(cls)}
    return {k: float(v) for k, v in data.items() if k in names}


@dataclass(frozen=True)
class TrackingConfig:
    """Thresholds used by direction classification and waypoint search.

    ``degenerate_eps`` is the coincident-point tolerance handed to geometry
    helpers such as ``linear_equation``.
    """

    valid_distance: float = VALID_DISTANCE_M
    valid_angle: float = VALID_ANGLE_RAD
    position_eps: float = POSITION_DIRECTION_EPS
    velocity_eps: float = VELOCITY_DIRECTION_EPS
    degenerate_eps: float = DEGENERATE_POINT_EPS

    def __post_init__(self) -> None:
        assert self.valid_distance > 0.0, "valid_distance must be > 0"
        assert 0.0 < self.valid_angle <= math.pi, "valid_angle in (0, pi]"
        for name in ("position_eps", "velocity_eps", "degenerate_eps"):
            assert getattr(self, name) >= 0.0, f"{name} must be >= 0"

    @classmethod
    def from_dict(cls, data: Dict[str, Any] | None) -> "TrackingConfig":
        """Build from a plain mapping (e.g. a resolved OmegaConf section); unknown keys are ignored."""
        return cls(**_pick(cls, data or {}))


@dataclass(frozen=True)
class PurePursuitConfig:
    lookahead_m: float = LOOKAHEAD_M
    max_curvature: float = MAX_CURVATURE

    def __post_init__(self) -> None:
        assert self.lookahead_m > 0.0, "lookahead_m must be > 0"
        assert self.max_curvature > 0.0, "max_curvature must be > 0"

    @classmethod
    def from_dict(cls, data: Dict[str, Any] | None) -> "PurePursuitConfig":
        return cls(**_pick(cls, data or {}))


DEFAULT_CONFIG = TrackingConfig()
