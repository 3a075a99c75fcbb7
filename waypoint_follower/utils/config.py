"""Tracking configuration loaded from YAML through OmegaConf."""

from __future__ import annotations

from typing import Any, Dict, Sequence

from omegaconf import DictConfig, OmegaConf

from ..config import PurePursuitConfig, TrackingConfig


def load_config_dict(path: str, overrides: Sequence[str] = ()) -> Dict[str, Any]:
    """Load a YAML mapping, apply ``key=value`` dotlist overrides and resolve interpolations.

    Raises TypeError when the file's root is not a mapping.
    """
    cfg = OmegaConf.load(path)
    if not isinstance(cfg, DictConfig):
        raise TypeError(f"Expected mapping at {path}, got {type(cfg).__name__}")
    if overrides:
        cfg = OmegaConf.merge(cfg, OmegaConf.from_dotlist(list(overrides)))
    data = OmegaConf.to_container(cfg, resolve=True)
    assert isinstance(data, dict)
    return data


def load_tracking_config(
    path: str, overrides: Sequence[str] = ()
) -> tuple[TrackingConfig, PurePursuitConfig]:
    """Read the ``tracking`` and ``pure_pursuit`` sections; missing sections use defaults."""
    cfg = load_config_dict(path, overrides)
    return (
        TrackingConfig.from_dict(cfg.get("tracking")),
        PurePursuitConfig.from_dict(cfg.get("pure_pursuit")),
    )
