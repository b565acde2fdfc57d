# local_planner/planning/planners/base.py
from abc import ABC, abstractmethod
from typing import Optional, Sequence
from local_planner.types import Command, Circle
from local_planner.planning.interfaces import IPlannerObserver


class PlannerBase(ABC):
    """
    所有局部规划器的抽象基类
    """

    @abstractmethod
    def find_path(self,
                  obstacles: Sequence[Circle],
                  observer: Optional[IPlannerObserver] = None) -> Command:
        """
        执行一次控制周期的规划
        :param obstacles: 本周期的障碍物快照
        :param observer: 观察者钩子 (用于可视化搜索过程)
        :return: 下一个时间步要执行的指令
        """
        pass
