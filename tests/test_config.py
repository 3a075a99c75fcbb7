import math
from pathlib import Path

import pytest

from waypoint_follower import DEFAULT_CONFIG, PurePursuitConfig, TrackingConfig
from waypoint_follower.utils import load_config_dict, load_tracking_config

REPO_CONFIG = Path(__file__).resolve().parents[1] / "configs" / "config.yaml"


def test_defaults_match_constants() -> None:
    assert DEFAULT_CONFIG.valid_distance == 5.0
    assert DEFAULT_CONFIG.valid_angle == math.pi / 2
    assert DEFAULT_CONFIG.position_eps == 1e-3
    assert DEFAULT_CONFIG.velocity_eps == 0.01


def test_from_dict_ignores_unknown_keys() -> None:
    cfg = TrackingConfig.from_dict({"valid_distance": 3, "unrelated": "x"})
    assert cfg.valid_distance == 3.0
    assert cfg.valid_angle == DEFAULT_CONFIG.valid_angle
    assert TrackingConfig.from_dict(None) == DEFAULT_CONFIG


def test_invalid_values_are_rejected() -> None:
    with pytest.raises(AssertionError):
        TrackingConfig(valid_distance=-1.0)
    with pytest.raises(AssertionError):
        PurePursuitConfig(lookahead_m=0.0)


def test_load_shipped_config() -> None:
    tracking, pp = load_tracking_config(str(REPO_CONFIG))
    assert tracking == DEFAULT_CONFIG
    assert pp.lookahead_m == 1.5


def test_load_tracking_config_overrides(tmp_path) -> None:
    path = tmp_path / "cfg.yaml"
    path.write_text("tracking:\n  valid_distance: 2.5\n", encoding="utf-8")
    tracking, pp = load_tracking_config(str(path))
    assert tracking.valid_distance == 2.5
    assert pp == PurePursuitConfig()


def test_non_mapping_config_raises(tmp_path) -> None:
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(TypeError):
        load_config_dict(str(path))


def test_dotlist_overrides_win_over_file() -> None:
    tracking, pp = load_tracking_config(
        str(REPO_CONFIG), ["tracking.valid_distance=2.0", "pure_pursuit.lookahead_m=3.0"]
    )
    assert tracking.valid_distance == 2.0
    assert tracking.valid_angle == DEFAULT_CONFIG.valid_angle
    assert pp.lookahead_m == 3.0
