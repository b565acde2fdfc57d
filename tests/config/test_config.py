import json
import math

import pytest

from local_planner.config import PlannerConfig, load_config, load_config_file


def _sections(**planning):
    base = {
        "time_step": 0.05,
        "collision_penalty": 500.0,
        "max_depth": 3,
        "car_circle_radius": 0.4,
    }
    base.update(planning)
    return {
        "PathPlanning": base,
        "LateralControl": {"axis_distance": 2.7},
    }


def test_defaults():
    config = PlannerConfig()
    assert config.time_step == 0.1
    assert config.max_depth == 2
    assert config.steer_step_deg == 5.0
    assert config.max_candidate_steer_deg == 30.0
    assert not config.debug_mode


@pytest.mark.parametrize("kwargs", [
    {"time_step": 0.0},
    {"collision_penalty": -1.0},
    {"max_depth": -1},
    {"max_depth": 1.5},
    {"max_depth": True},
    {"steer_step_deg": 0.0},
    {"max_candidate_steer_deg": 0.0},
])
def test_invalid_values_raise(kwargs):
    with pytest.raises(ValueError):
        PlannerConfig(**kwargs)


def test_load_config_maps_sections():
    planner_config, vehicle_config = load_config(_sections())
    assert planner_config.time_step == 0.05
    assert planner_config.collision_penalty == 500.0
    assert planner_config.max_depth == 3
    assert vehicle_config.wheelbase == 2.7
    assert vehicle_config.collision_radius == 0.4


def test_load_config_debug_and_limits():
    data = _sections(debug_mode=True, debug_log_dir="logs/custom")
    data["LateralControl"].update({"max_steer_deg": 30.0, "max_velocity": 4.0})
    planner_config, vehicle_config = load_config(data)
    assert planner_config.debug_mode
    assert planner_config.debug_log_dir == "logs/custom"
    assert vehicle_config.max_steer == pytest.approx(math.radians(30.0))
    assert vehicle_config.max_velocity == 4.0


def test_load_config_unknown_key():
    with pytest.raises(ValueError, match="PathPlanning::horizon"):
        load_config(_sections(horizon=4))


def test_load_config_missing_section():
    data = _sections()
    del data["LateralControl"]
    with pytest.raises(ValueError, match="LateralControl"):
        load_config(data)


def test_load_config_missing_axis_distance():
    data = _sections()
    data["LateralControl"] = {}
    with pytest.raises(ValueError, match="axis_distance"):
        load_config(data)


def test_load_config_file(tmp_path):
    path = tmp_path / "planner.json"
    path.write_text(json.dumps(_sections(steer_step_deg=2.5)), encoding="utf-8")
    planner_config, vehicle_config = load_config_file(str(path))
    assert planner_config.steer_step_deg == 2.5
    assert vehicle_config.wheelbase == 2.7
