# local_planner/vehicles/ackermann.py
import math
from dataclasses import replace
from typing import List, Optional

import numpy as np

from .base import VehicleBase, State  # 导入接口
from .config import AckermannConfig  # 导入配置类
from local_planner.types import Command, Circle
from local_planner.collision.footprint import get_car_circles


def _rotate(vec: np.ndarray, angle: float) -> np.ndarray:
    c = math.cos(angle)
    s = math.sin(angle)
    return np.array([vec[0] * c - vec[1] * s, vec[0] * s + vec[1] * c])


def _sinc(x: float) -> float:
    # sin(x) / x, x -> 0 时取极限 1
    if x == 0:
        return 1.0
    return math.sin(x) / x


class AckermannVehicle(VehicleBase):
    """
    自行车模型下的阿克曼车辆
    单步运动要么是直线平移，要么是绕瞬时运动中心 (ICM) 的圆弧
    """
    def __init__(self, config: AckermannConfig):
        super().__init__(config)
        self.config: AckermannConfig = config

    def make_state(self, x: float, y: float, theta_rad: float,
                   velocity: float = 0.0, steer_rad: float = 0.0) -> State:
        """由后轴中心与航向构造一个 settled 状态 (前参考点位于正前方一个轴距处)"""
        wb = self.config.wheelbase
        return State(
            x=x,
            y=y,
            theta_rad=theta_rad,
            front_x=x + wb * math.cos(theta_rad),
            front_y=y + wb * math.sin(theta_rad),
            velocity=velocity,
            steer_rad=steer_rad,
        )

    def clamp_steer(self, steer_rad: float) -> float:
        limit = self.config.max_steer
        return max(min(steer_rad, limit), -limit)

    @staticmethod
    def heading_vector(state: State) -> Optional[np.ndarray]:
        """
        由两个参考点得到的单位航向向量
        两点重合时返回 None (无法归一化)
        """
        vec = state.front_point - state.rear_point
        norm = np.linalg.norm(vec)
        if norm < 1e-9:
            return None
        return vec / norm

    def get_icm(self, state: State, steer_rad: float) -> Optional[np.ndarray]:
        """
        瞬时运动中心 (世界坐标)
        局部坐标下 ICM = (0, R)，R = wheelbase / tan(steer)，带符号 (左转为正)
        """
        steering = self.clamp_steer(steer_rad)
        # 这里用精确等于 0 区分直线与圆弧，很小的非零转角仍按大半径圆弧处理
        if steering == 0:
            return None
        radius = self.turning_radius(steering)
        if not math.isfinite(radius):
            # tan 下溢为 0 (次正规数转角)，ICM 在无穷远
            return None
        icm = _rotate(np.array([0.0, radius]), state.theta_rad)
        return icm + state.rear_point

    def turning_radius(self, steer_rad: float) -> float:
        tan_steer = math.tan(steer_rad)
        if tan_steer == 0:
            return math.copysign(math.inf, steer_rad)
        return self.config.wheelbase / tan_steer

    def saturate(self, command: Command) -> Command:
        """把指令限制在车辆的物理能力之内 (速度与转角)"""
        limit_v = self.config.max_velocity
        velocity = max(min(command.velocity, limit_v), -limit_v)
        return Command(velocity, self.clamp_steer(command.steer_rad))

    def kinematic_propagate(self, start_state: State, control: Command, dt: float) -> State:
        # 提取控制信号
        v = control.velocity
        steering = self.clamp_steer(control.steer_rad)
        distance = v * dt  # 本步行驶的弧长

        rear = start_state.rear_point
        front = start_state.front_point
        theta = start_state.theta_rad

        if steering == 0:
            # 直线: 沿两参考点确定的航向平移，航向不变
            heading = self.heading_vector(start_state)
            if heading is None:
                # 退化几何: 视为原地不动
                return replace(start_state, velocity=v, steer_rad=control.steer_rad)
            movement = distance * heading
            rear = rear + movement
            front = front + movement
        else:
            # 圆弧: 等价于两参考点绕 ICM 旋转 alpha
            # 在车体坐标系下用弦长公式求后轴位移，不减去/加回 ICM (小转角时 R 可达 1e16 m)
            alpha = distance / self.turning_radius(steering)
            # dx = R*sin(a), dy = R*(1 - cos(a)) = 2R*sin^2(a/2)
            local = np.array([distance * _sinc(alpha),
                              distance * math.sin(0.5 * alpha) * _sinc(0.5 * alpha)])
            rear_new = rear + _rotate(local, theta)
            front = rear_new + _rotate(front - rear, alpha)
            rear = rear_new
            theta = theta + alpha

        new_state = State(
            x=float(rear[0]),
            y=float(rear[1]),
            theta_rad=self.normalize_angle(theta),
            front_x=float(front[0]),
            front_y=float(front[1]),
            velocity=v,
            steer_rad=control.steer_rad,
        )
        return self.settle(new_state)

    def settle(self, state: State) -> State:
        """
        重新建立不变量: 前参考点位于后轴中心沿航向一个轴距处
        消除旋转累计的浮点误差
        """
        heading = self.heading_vector(state)
        if heading is None:
            return state
        front = state.rear_point + self.config.wheelbase * heading
        return replace(state, front_x=float(front[0]), front_y=float(front[1]))

    def get_collision_circles(self, state: State) -> List[Circle]:
        return get_car_circles(state, self.config.collision_radius)

    def get_visualization_polygon(self, state: State) -> np.ndarray:
        """
        [表现层] 返回用于给人看的轮廓
        """
        return self.transform_points(self.config.outline_coords, state)
