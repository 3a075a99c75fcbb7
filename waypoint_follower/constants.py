from __future__ import annotations

import math

# Tracked-index sentinel
UNSET_INDEX: int = -1

# Closest-waypoint search
VALID_DISTANCE_M: float = 5.0
VALID_ANGLE_RAD: float = math.pi / 2.0

# Lane direction classification
POSITION_DIRECTION_EPS: float = 1e-3
VELOCITY_DIRECTION_EPS: float = 0.01

# Degenerate geometry
DEGENERATE_POINT_EPS: float = 1e-5
RADIUS_MAX: float = 1e9
CURVATURE_MAX: float = 1e9

# Reference consumers
DECEL_MPS2: float = 1.0
LOOKAHEAD_M: float = 1.5
MAX_CURVATURE: float = 2.0
