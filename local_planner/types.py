# local_planner/types.py
import math
from dataclasses import dataclass

import numpy as np


@dataclass
class State:
    """
    统一的车辆状态定义
    后轴中心 (x, y) 与前参考点 (front_x, front_y) 之间始终相隔一个轴距 (settled 状态)
    """
    x: float             # [m] 后轴中心
    y: float             # [m]
    theta_rad: float     # [rad] 注意：为了明确单位，保留 _rad 后缀
    front_x: float       # [m] 前参考点 (转向参考点)
    front_y: float       # [m]
    velocity: float = 0.0    # [m/s] 前进为正
    steer_rad: float = 0.0   # [rad] 左转为正

    @property
    def rear_point(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=float)

    @property
    def front_point(self) -> np.ndarray:
        return np.array([self.front_x, self.front_y], dtype=float)

    @property
    def axis_length(self) -> float:
        """前后参考点之间的实际距离 (settled 时等于轴距)"""
        return math.hypot(self.front_x - self.x, self.front_y - self.y)


@dataclass(frozen=True)
class Command:
    """下一个时间步要执行的 (速度, 转向角) 指令"""
    velocity: float      # [m/s]
    steer_rad: float     # [rad]

    @property
    def steer_deg(self) -> float:
        return math.degrees(self.steer_rad)


@dataclass(frozen=True)
class Circle:
    """
    圆: 既用于静态障碍物，也用于车辆的多圆覆盖
    """
    x: float
    y: float
    radius: float

    def __post_init__(self):
        if self.radius < 0:
            raise ValueError(f"Circle radius must be >= 0, got {self.radius}")

    @property
    def center(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=float)
