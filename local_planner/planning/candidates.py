# local_planner/planning/candidates.py
import math
from typing import List, Sequence

from local_planner.types import State, Command


class SteeringCandidateGenerator:
    """
    在当前转角附近离散出一小组候选指令，速度保持不变。
    顺序固定 (偏移量从小到大)，搜索中的并列最优按这个顺序取第一个。
    """

    def __init__(self,
                 step_deg: float = 5.0,
                 max_steer_deg: float = 30.0,
                 offsets: Sequence[int] = (-2, -1, 0, 1, 2)):
        if 0 not in offsets:
            raise ValueError("offsets must contain 0")
        self.step_deg = step_deg
        self.max_steer_deg = max_steer_deg
        self.offsets = tuple(sorted(offsets))

    def generate(self, state: State) -> List[Command]:
        """
        :param state: 当前状态 (读取 velocity 与 steer_rad)
        :return: 候选指令列表，至少包含零偏移 (保持当前转角) 的指令
        """
        current_deg = round(math.degrees(state.steer_rad), 9)
        beyond_bound = abs(current_deg) >= self.max_steer_deg
        candidates = []
        for i in self.offsets:
            if i == 0:
                # 零偏移始终保留，即使当前转角已经越过上限，保证候选集非空
                candidates.append(Command(state.velocity, state.steer_rad))
                continue
            # 以度为单位计算并舍入，消除弧度换算误差: 回正时得到精确的 0
            new_deg = round(current_deg + i * self.step_deg, 9)
            if abs(new_deg) < self.max_steer_deg:
                candidates.append(Command(state.velocity, math.radians(new_deg)))
            elif beyond_bound and abs(new_deg) < abs(current_deg):
                # 已经越界时保留往回打的候选，否则永远回不到上限以内
                candidates.append(Command(state.velocity, math.radians(new_deg)))
        return candidates
