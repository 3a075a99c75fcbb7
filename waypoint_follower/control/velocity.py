from __future__ import annotations

import logging
from math import sqrt

from ..constants import DECEL_MPS2

logger = logging.getLogger(__name__)


def decelerate_velocity(distance: float, prev_velocity: float, decel: float = DECEL_MPS2) -> float:
    """Cap ``prev_velocity`` by the speed from which ``decel`` stops the vehicle within ``distance``."""
    decel_velocity = sqrt(2.0 * decel * max(0.0, distance))
    logger.debug("velocity/prev_velocity: %.3f/%.3f", decel_velocity, prev_velocity)
    return min(decel_velocity, prev_velocity)
