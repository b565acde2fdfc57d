# local_planner/planning/motion_model.py
from typing import Optional, Sequence, Tuple

from local_planner.types import State, Command, Circle
from local_planner.vehicles.ackermann import AckermannVehicle
from local_planner.collision.checker import CollisionChecker
from local_planner.collision.config import MotionKind
from local_planner.planning.interfaces import IPlannerObserver


class MotionModel:
    """
    单步运动仿真: 在 dt 时间内执行 command，返回结束状态与整段扫掠过程中的最小间隙
    """

    def __init__(self,
                 vehicle: AckermannVehicle,
                 collision_checker: CollisionChecker,
                 collision_penalty: float):
        self.vehicle = vehicle
        self.collision_checker = collision_checker
        # 没有障碍物时的哨兵间隙，保证任何无碰撞运动都优于碰撞运动
        self.free_clearance = 2.0 * collision_penalty

    def simulate(self,
                 state: State,
                 command: Command,
                 dt: float,
                 obstacles: Sequence[Circle],
                 observer: Optional[IPlannerObserver] = None,
                 default: Optional[float] = None) -> Tuple[State, float]:
        """
        :param state: 起始状态 (不会被修改)
        :param command: 本步执行的指令
        :param dt: 时间步长 [s]
        :param obstacles: 障碍物快照
        :param default: 没有障碍物时返回的间隙，默认为 2 * collision_penalty
        :return: (结束状态, 最小间隙)，间隙 <= 0 表示碰撞
        """
        if observer is not None:
            observer.record_position(state)

        free = self.free_clearance if default is None else default
        distance = command.velocity * dt
        motion = MotionKind.from_motion(command.steer_rad, distance)

        if motion == MotionKind.STRAIGHT and self.vehicle.heading_vector(state) is None:
            # 两参考点重合，无法确定航向: 按原地不动处理
            return self.vehicle.kinematic_propagate(state, command, dt), free

        end_state = self.vehicle.kinematic_propagate(state, command, dt)
        icm = self.vehicle.get_icm(state, command.steer_rad)

        start_circles = self.vehicle.get_collision_circles(state)
        end_circles = self.vehicle.get_collision_circles(end_state)

        clearance = self.collision_checker.min_clearance(
            icm, obstacles, start_circles, end_circles, motion, default=free
        )
        return end_state, clearance
