# 绘图逻辑 (Matplotlib)
from typing import Iterable, Sequence, Tuple

import matplotlib.pyplot as plt
from matplotlib.patches import Circle as CirclePatch, Polygon

from local_planner.types import State, Circle
from local_planner.vehicles.ackermann import AckermannVehicle


class Visualizer:
    """
    画出障碍物、车辆覆盖圆、搜索过程中的位置标记以及实际行驶轨迹
    """
    def __init__(self, title: str = "Local Obstacle Avoidance", figsize: Tuple[float, float] = (10, 10)):
        self.fig, self.ax = plt.subplots(figsize=figsize)
        self.ax.set_title(title)
        self.ax.set_xlabel("X [m]")
        self.ax.set_ylabel("Y [m]")
        self.ax.set_aspect('equal')
        self.ax.grid(True, linestyle=':', alpha=0.5)

    def draw_obstacles(self, obstacles: Iterable[Circle]):
        for obs in obstacles:
            self.ax.add_patch(CirclePatch((obs.x, obs.y), obs.radius, facecolor='gray', edgecolor='k', alpha=0.7))

    def draw_vehicle(self, vehicle: AckermannVehicle, state: State, color: str = 'orange'):
        # 轮廓只是示意，碰撞判定用的是覆盖圆
        poly = vehicle.get_visualization_polygon(state)
        self.ax.add_patch(Polygon(poly, closed=True, facecolor=color, alpha=0.3, edgecolor='k', linewidth=0.5))
        for c in vehicle.get_collision_circles(state):
            self.ax.add_patch(CirclePatch((c.x, c.y), c.radius, fill=False, edgecolor=color, linestyle='--'))

    def draw_markers(self, positions: Sequence[Tuple[float, float]]):
        """搜索过程中发出的位置标记 (蓝点)"""
        if not positions:
            return
        xs = [p[0] for p in positions]
        ys = [p[1] for p in positions]
        self.ax.scatter(xs, ys, c='blue', s=2, label='Explored')

    def draw_path(self, states: Sequence[State], label: str = 'Driven Path'):
        if not states:
            return
        xs = [s.x for s in states]
        ys = [s.y for s in states]
        self.ax.plot(xs, ys, 'g-', linewidth=2, label=label)

    def save(self, path: str):
        self.ax.autoscale_view()
        if self.ax.get_legend_handles_labels()[0]:
            self.ax.legend()
        self.fig.savefig(path)
        plt.close(self.fig)

    def show(self):
        self.ax.autoscale_view()
        plt.show()
