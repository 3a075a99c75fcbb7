"""Utility helpers shared by scripts and tooling."""

from .config import load_config_dict, load_tracking_config

__all__ = ["load_config_dict", "load_tracking_config"]
