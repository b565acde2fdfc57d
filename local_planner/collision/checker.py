# local_planner/collision/checker.py
from typing import Optional, Sequence

import numpy as np

from local_planner.types import Circle
from .config import CollisionConfig, MotionKind
from .geometry import swept_clearance


class CollisionChecker:
    def __init__(self, config: CollisionConfig = None):
        if config is None:
            self.config = CollisionConfig()
        else:
            self.config = config

    def min_clearance(self,
                      icm: Optional[np.ndarray],
                      obstacles: Sequence[Circle],
                      start_circles: Sequence[Circle],
                      end_circles: Sequence[Circle],
                      motion: MotionKind,
                      default: float) -> float:
        """
        统一入口：一步运动中所有 (车辆圆, 障碍物) 组合的最小间隙
        :param start_circles: 起始状态的车辆覆盖圆
        :param end_circles: 结束状态的车辆覆盖圆 (与 start_circles 按下标对应)
        :param default: 没有障碍物时返回的哨兵值
        :return: 最小带符号间隙，负值表示碰撞
        """
        if len(start_circles) != len(end_circles):
            raise ValueError("start_circles and end_circles must have the same length")

        min_dist = default
        for start, end in zip(start_circles, end_circles):
            for obstacle in obstacles:
                dist = swept_clearance(icm, obstacle, start, end, motion) - self.config.extra_inflation
                min_dist = min(min_dist, dist)
        return min_dist
