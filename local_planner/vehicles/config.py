# [配置] 该模块独有的配置数据类
from dataclasses import dataclass, field
import numpy as np
import math


@dataclass
class VehicleConfig:
    """所有车辆通用的配置"""
    max_velocity: float = 10.0  # [m/s] 规划输出指令的速度上限


@dataclass
class AckermannConfig(VehicleConfig):
    """
    阿克曼车辆物理参数配置
    几何参数与碰撞参数分离，但在初始化时预计算
    """
    # --- 1. 基础几何参数 (核心) ---
    wheelbase: float = 2.5         # [m] 轴距 (与横向控制器共享的 axis_distance)
    collision_radius: float = 0.3  # [m] 多圆覆盖中每个小圆的半径 (car_circle_radius)

    # --- 2. 运动学限制 ---
    max_steer_deg: float = 35.0    # [deg] 物理最大转向角

    # --- 3. 派生属性 (自动计算，外部只读) ---
    max_steer: float = field(init=False)
    outline_coords: np.ndarray = field(init=False)     # 用于绘图的轮廓坐标

    def __post_init__(self):
        if self.wheelbase <= 0:
            raise ValueError(f"wheelbase must be > 0, got {self.wheelbase}")
        if self.collision_radius < 0:
            raise ValueError(f"collision_radius must be >= 0, got {self.collision_radius}")
        if not 0 < self.max_steer_deg < 90:
            raise ValueError(f"max_steer_deg must be in (0, 90), got {self.max_steer_deg}")
        if self.max_velocity <= 0:
            raise ValueError(f"max_velocity must be > 0, got {self.max_velocity}")

        # A. 角度转弧度
        self.max_steer = math.radians(self.max_steer_deg)

        # B. 预计算绘图轮廓 (覆盖三个碰撞圆: 前参考点、后轴中心、中点) (相对于后轴中心，x 轴向前，y 轴向左)
        r = self.collision_radius
        front_x = self.wheelbase + r
        rear_x = -r
        self.outline_coords = np.array([
            [front_x, -r],
            [rear_x, -r],
            [rear_x, r],
            [front_x, r],
            [front_x, -r]  # 闭合
        ])
