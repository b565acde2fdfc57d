import logging
import time
import os
from typing import List, Tuple, Dict, Optional, Sequence

from local_planner.types import State, Command, Circle
from local_planner.planning.interfaces import IPlannerObserver


class EfficientObserver(IPlannerObserver):
    """
    高效运行模式
    除了必要的流程不额外进行信息记录。
    相当于 NoOp，是规划器的默认观察者。
    """
    def record_position(self, state: State): pass
    def record_branch(self, depth: int, command: Command, value: float): pass
    def set_obstacles(self, obstacles: Sequence[Circle]): pass
    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        # 仅在 ERROR 级别打印
        if level == 'ERROR':
            print(f"[ERROR] {message}")


class ExperimentObserver(IPlannerObserver):
    """
    实验模式
    记录仿真位置标记、分支评估结果与障碍物快照。
    这些信息主要用于算法的比较和可视化 (Replay)。
    """
    def __init__(self):
        # 存储格式: List[Tuple[x, y]] (后轴中心)
        self.positions: List[Tuple[float, float]] = []
        # 存储格式: List[Tuple[depth, command, value]]
        self.branches: List[Tuple[int, Command, float]] = []
        self.obstacles: Tuple[Circle, ...] = ()

    def record_position(self, state: State):
        self.positions.append((state.x, state.y))

    def record_branch(self, depth: int, command: Command, value: float):
        self.branches.append((depth, command, value))

    def set_obstacles(self, obstacles: Sequence[Circle]):
        self.obstacles = tuple(obstacles)

    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        # 实验模式只关心结果和可视化，控制台保持安静
        pass


class DebugObserver(IPlannerObserver):
    """
    Debug 模式
    用于详细分析一次规划为什么选了某个指令。
    将详细日志写入文件，同时保留可视化数据以便对照。
    """
    def __init__(self, log_dir: str = "logs/planning_debug"):
        # 复用 ExperimentObserver 的存储，以便 Debug 时也能画图
        self.viz_observer = ExperimentObserver()

        self.log_dir = log_dir
        os.makedirs(self.log_dir, exist_ok=True)

        # 配置 Logger
        timestamp = time.strftime("%Y%m%d_%H%M%S")
        log_file = os.path.join(self.log_dir, f"plan_debug_{timestamp}.log")

        self.logger = logging.getLogger(f"PlannerDebug_{timestamp}_{id(self)}")
        self.logger.setLevel(logging.DEBUG)
        self.logger.propagate = False

        # 避免添加重复 Handler
        if not self.logger.handlers:
            fh = logging.FileHandler(log_file, encoding='utf-8')
            fh.setLevel(logging.DEBUG)
            formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')
            fh.setFormatter(formatter)
            self.logger.addHandler(fh)

        self.log_file = log_file
        self.logger.info("=== Debug Session Started ===")

    def record_position(self, state: State):
        self.viz_observer.record_position(state)

    def record_branch(self, depth: int, command: Command, value: float):
        self.viz_observer.record_branch(depth, command, value)
        self.logger.debug(f"Depth {depth} | steer={command.steer_deg:.1f} deg v={command.velocity:.2f} | value={value:.3f}")

    def set_obstacles(self, obstacles: Sequence[Circle]):
        self.viz_observer.set_obstacles(obstacles)
        self.logger.info(f"Obstacles set: {len(obstacles)}")

    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        if payload:
            message = f"{message} | Payload: {payload}"

        if level == 'DEBUG':
            self.logger.debug(message)
        elif level == 'WARN':
            self.logger.warning(message)
        elif level == 'ERROR':
            self.logger.error(message)
        else:
            self.logger.info(message)

    def close(self):
        """释放文件句柄"""
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)

    # Proxy properties for ExperimentObserver compatibility
    @property
    def positions(self): return self.viz_observer.positions
    @property
    def branches(self): return self.viz_observer.branches
    @property
    def obstacles(self): return self.viz_observer.obstacles
