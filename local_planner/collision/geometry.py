# local_planner/collision/geometry.py
import math
from typing import Optional

import numpy as np

from local_planner.types import Circle
from .config import MotionKind

# [m] 圆弧偏离弦的最大距离低于该值时，圆弧与直线段不可区分
ARC_SAGITTA_TOL = 1e-9


def _cross(a: np.ndarray, b: np.ndarray) -> float:
    return float(a[0] * b[1] - a[1] * b[0])


def circle_distance(c1: Circle, c2: Circle) -> float:
    """两圆间隙: 圆心距减去两个半径，负值表示相交"""
    return math.hypot(c1.x - c2.x, c1.y - c2.y) - c1.radius - c2.radius


def is_between(vec: np.ndarray, start: np.ndarray, end: np.ndarray) -> bool:
    """
    vec 是否位于从 start 逆时针转到 end 的扇区内 (含边界)
    顺时针扇区通过交换 start / end 表达
    """
    two_pi = 2 * math.pi
    sweep = math.atan2(_cross(start, end), float(np.dot(start, end))) % two_pi
    angle = math.atan2(_cross(start, vec), float(np.dot(start, vec))) % two_pi
    # 浮点误差可能把落在起始边上的向量算成 2*pi
    if two_pi - angle < 1e-12:
        angle = 0.0
    return angle <= sweep + 1e-12


def straight_clearance(obstacle: Circle, start: Circle, end: Circle) -> float:
    """
    直线平移时，车辆圆从 start 扫到 end 过程中与障碍物的最小间隙
    """
    seg = end.center - start.center
    seg_len = float(np.linalg.norm(seg))
    if seg_len < 1e-9:
        # 没有位移，退化为两个端点圆
        return min(circle_distance(obstacle, start), circle_distance(obstacle, end))

    # 障碍物圆心在直线上的正交投影是否落在线段内 (两次点积同号检验)
    inbetween = (np.dot(obstacle.center - start.center, end.center - start.center) >= 0 and
                 np.dot(obstacle.center - end.center, start.center - end.center) >= 0)
    if inbetween:
        unit_normal = np.array([-seg[1], seg[0]]) / seg_len
        dist_to_line = abs(float(np.dot(obstacle.center - start.center, unit_normal)))
        return dist_to_line - obstacle.radius - start.radius

    # 投影在线段外，只需检查两个端点
    return min(circle_distance(obstacle, start), circle_distance(obstacle, end))


def arc_clearance(icm: np.ndarray, obstacle: Circle, start: Circle, end: Circle,
                  motion: MotionKind) -> float:
    """
    绕 ICM 旋转时的最小间隙
    车辆点到 ICM 的距离在整段圆弧上保持不变，因此扇区内的最近圆心距就是 |R_point - d|
    """
    to_start = start.center - icm
    r_point = float(np.linalg.norm(to_start))

    # 弓高 chord^2 / (8R) 可以忽略时按直线处理
    # 转角极小时 ICM 远在 1e16 m 之外，|R_point - d| 的相减会丢掉全部有效位
    chord = float(np.linalg.norm(end.center - start.center))
    if r_point == 0 or chord * chord / (8.0 * r_point) < ARC_SAGITTA_TOL:
        return straight_clearance(obstacle, start, end)

    to_obstacle = obstacle.center - icm
    to_end = end.center - icm

    if motion == MotionKind.LEFT:
        inbetween = is_between(to_obstacle, to_start, to_end)
    else:
        inbetween = is_between(to_obstacle, to_end, to_start)

    if inbetween:
        d_obst = float(np.linalg.norm(to_obstacle))
        return abs(r_point - d_obst) - obstacle.radius - start.radius

    return min(circle_distance(obstacle, start), circle_distance(obstacle, end))


def swept_clearance(icm: Optional[np.ndarray], obstacle: Circle, start: Circle, end: Circle,
                    motion: MotionKind) -> float:
    """
    统一入口: 单个车辆圆在一步运动中与单个障碍物的带符号最小距离
    :param icm: 瞬时运动中心，直线运动时为 None
    :return: 间隙，负值表示穿透
    """
    if motion == MotionKind.STRAIGHT or icm is None:
        return straight_clearance(obstacle, start, end)
    return arc_clearance(icm, obstacle, start, end, motion)
