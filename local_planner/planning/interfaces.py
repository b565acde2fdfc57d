from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Sequence

from local_planner.types import State, Command, Circle


class IPlannerObserver(ABC):
    """
    规划器观察者接口
    用于解耦规划算法与 记录/调试/可视化 逻辑。
    支持三种模式：
    1. Efficient: 空实现，无开销
    2. Experiment: 记录关键数据用于可视化
    3. Debug: 详细日志记录用于问题排查
    观察者不得影响规划结果。
    """

    @abstractmethod
    def record_position(self, state: State):
        """记录一次单步仿真的起始位置 (位置标记)"""
        pass

    @abstractmethod
    def record_branch(self, depth: int, command: Command, value: float):
        """记录搜索树中一个分支的评估结果"""
        pass

    @abstractmethod
    def set_obstacles(self, obstacles: Sequence[Circle]):
        """设置本次规划使用的障碍物快照"""
        pass

    @abstractmethod
    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        """
        结构化日志记录
        :param message: 日志消息
        :param level: 日志级别 'INFO', 'WARN', 'ERROR', 'DEBUG'
        :param payload: 额外的结构化数据 (如状态详情、配置参数等)
        """
        pass


class IStateSource(ABC):
    """
    车辆状态来源 (状态估计器)
    每次调用返回一个只读快照，调用方可以自由复制和修改
    """

    @abstractmethod
    def get_state(self) -> State:
        pass
