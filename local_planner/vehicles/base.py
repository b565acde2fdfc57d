# local_planner/vehicles/base.py
from abc import ABC, abstractmethod
from typing import List, Optional
from .config import VehicleConfig
import math
import numpy as np
from local_planner.types import State, Command, Circle


class VehicleBase(ABC):
    """
    车辆接口基类
    """
    def __init__(self, config: VehicleConfig):
        self.config = config

    @abstractmethod
    def kinematic_propagate(self, start: State, control: Command, dt: float) -> State:
        """核心物理推演，留给子类实现。不修改 start，返回新的状态"""
        pass

    @abstractmethod
    def get_collision_circles(self, state: State) -> List[Circle]:
        """
        [精检测接口 - 多圆]
        返回世界坐标系下覆盖车辆的圆列表，顺序固定，便于起止状态逐一配对。
        """
        pass

    def get_icm(self, state: State, steer_rad: float) -> Optional[np.ndarray]:
        """
        瞬时运动中心 (ICM)。直线运动时不存在，返回 None。
        """
        return None

    @staticmethod
    def normalize_angle(angle: float) -> float:
        """工具函数：基类提供通用数学计算"""
        return (angle + math.pi) % (2 * math.pi) - math.pi

    @staticmethod
    def transform_points(local_points: np.ndarray, state: State) -> np.ndarray:
        """
        [通用工具] 将局部坐标点变换到世界坐标系
        :param local_points: (N, 2) 数组
        :param state: 车辆状态 (x, y, theta)
        """
        c = math.cos(state.theta_rad)
        s = math.sin(state.theta_rad)

        world_points = np.empty_like(local_points, dtype=float)

        # 向量化计算: x' = x*c - y*s + tx
        world_points[:, 0] = local_points[:, 0] * c - local_points[:, 1] * s + state.x
        world_points[:, 1] = local_points[:, 0] * s + local_points[:, 1] * c + state.y

        return world_points
