# local_planner/collision/config.py
from enum import Enum
from dataclasses import dataclass


class MotionKind(Enum):
    # 直线平移，ICM 在无穷远处
    STRAIGHT = 0

    # 绕 ICM 逆时针旋转 (前进左转)
    LEFT = 1

    # 绕 ICM 顺时针旋转 (前进右转)
    RIGHT = -1

    @classmethod
    def from_motion(cls, steer_rad: float, distance: float = 1.0) -> "MotionKind":
        """
        按转角符号分类，精确等于 0 才算直线
        倒车 (distance < 0) 时旋转方向反转
        """
        if steer_rad == 0:
            return cls.STRAIGHT
        turning_left = (steer_rad > 0) == (distance >= 0)
        return cls.LEFT if turning_left else cls.RIGHT


@dataclass
class CollisionConfig:
    # 在检测层额外增加的膨胀量，从每一对圆的间隙中扣除
    # 车辆自身的 collision_radius 已经在车辆模型中处理，默认 0 即可
    extra_inflation: float = 0.0

    def __post_init__(self):
        if self.extra_inflation < 0:
            raise ValueError(f"extra_inflation must be >= 0, got {self.extra_inflation}")
