"""Reference consumers of the tracked index: pure pursuit and deceleration profile."""

from .pure_pursuit import compute_command, lookahead_index
from .velocity import decelerate_velocity

__all__ = ["compute_command", "lookahead_index", "decelerate_velocity"]
