# [关键] 全局配置定义

# local_planner/config.py
import json
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Tuple

from local_planner.vehicles.config import AckermannConfig


@dataclass
class PlannerConfig:
    """
    局部避障规划器参数
    配置在加载时校验一次，之后只读，搜索过程中不再检查
    """
    time_step: float = 0.1             # [s] 单步仿真时长
    collision_penalty: float = 1000.0  # [m] 碰撞惩罚，必须远大于任何合理的间隙值
    max_depth: int = 2                 # 搜索深度 (0 表示只看一步)
    steer_step_deg: float = 5.0        # [deg] 候选指令的转角步长
    max_candidate_steer_deg: float = 30.0  # [deg] 候选转角上限 (严格小于)
    debug_mode: bool = False           # 未传入 observer 时使用 DebugObserver 写日志
    debug_log_dir: str = "logs/planning_debug"

    def __post_init__(self):
        if self.time_step <= 0:
            raise ValueError(f"time_step must be > 0, got {self.time_step}")
        if self.collision_penalty <= 0:
            raise ValueError(f"collision_penalty must be > 0, got {self.collision_penalty}")
        if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int) or self.max_depth < 0:
            raise ValueError(f"max_depth must be an integer >= 0, got {self.max_depth!r}")
        if self.steer_step_deg <= 0:
            raise ValueError(f"steer_step_deg must be > 0, got {self.steer_step_deg}")
        if self.max_candidate_steer_deg <= 0:
            raise ValueError(f"max_candidate_steer_deg must be > 0, got {self.max_candidate_steer_deg}")


# 配置文件按原系统的分段方式组织: PathPlanning / LateralControl
_PLANNER_KEYS = {
    "time_step": "time_step",
    "collision_penalty": "collision_penalty",
    "max_depth": "max_depth",
    "steer_step_deg": "steer_step_deg",
    "max_candidate_steer_deg": "max_candidate_steer_deg",
    "debug_mode": "debug_mode",
    "debug_log_dir": "debug_log_dir",
}
_VEHICLE_PLANNING_KEYS = {
    "car_circle_radius": "collision_radius",
}
_LATERAL_KEYS = {
    "axis_distance": "wheelbase",
    "max_steer_deg": "max_steer_deg",
    "max_velocity": "max_velocity",
}


def _require_section(data: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    section = data.get(name)
    if not isinstance(section, Mapping):
        raise ValueError(f"Missing config section '{name}'")
    return section


def load_config(data: Mapping[str, Any]) -> Tuple[PlannerConfig, AckermannConfig]:
    """
    从分段字典构造 (PlannerConfig, AckermannConfig)
    :param data: {"PathPlanning": {...}, "LateralControl": {"axis_distance": ...}}
    :return: 规划器配置与车辆配置
    """
    planning = _require_section(data, "PathPlanning")
    lateral = _require_section(data, "LateralControl")

    planner_kwargs: Dict[str, Any] = {}
    vehicle_kwargs: Dict[str, Any] = {}

    for key, value in planning.items():
        if key in _PLANNER_KEYS:
            planner_kwargs[_PLANNER_KEYS[key]] = value
        elif key in _VEHICLE_PLANNING_KEYS:
            vehicle_kwargs[_VEHICLE_PLANNING_KEYS[key]] = value
        else:
            raise ValueError(f"Unknown key 'PathPlanning::{key}'")

    for key, value in lateral.items():
        if key not in _LATERAL_KEYS:
            raise ValueError(f"Unknown key 'LateralControl::{key}'")
        vehicle_kwargs[_LATERAL_KEYS[key]] = value

    if "wheelbase" not in vehicle_kwargs:
        raise ValueError("Missing key 'LateralControl::axis_distance'")

    return PlannerConfig(**planner_kwargs), AckermannConfig(**vehicle_kwargs)


def load_config_file(path: str) -> Tuple[PlannerConfig, AckermannConfig]:
    """读取 JSON 配置文件"""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return load_config(data)
