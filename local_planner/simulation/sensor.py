import math
from typing import List, Sequence

from local_planner.types import State, Circle


class Sensor:
    """
    Simulates a range-limited obstacle detector.
    Returns the subset of ground-truth obstacles whose boundary lies within
    sensing_radius of the rear axle.
    """
    def __init__(self, sensing_radius: float = 30.0):
        if sensing_radius <= 0:
            raise ValueError(f"sensing_radius must be > 0, got {sensing_radius}")
        self.sensing_radius = sensing_radius

    def scan(self, obstacles: Sequence[Circle], state: State) -> List[Circle]:
        visible = []
        for obs in obstacles:
            dist = math.hypot(obs.x - state.x, obs.y - state.y) - obs.radius
            if dist <= self.sensing_radius:
                visible.append(obs)
        return visible
