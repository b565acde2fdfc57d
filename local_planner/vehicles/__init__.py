# [入口] 负责暴露类，让外部调用更简洁

# local_planner/vehicles/__init__.py

from .base import VehicleBase, State
from .ackermann import AckermannVehicle
from .config import VehicleConfig, AckermannConfig

# 定义对外暴露的列表
__all__ = ["VehicleBase", "State", "AckermannVehicle", "VehicleConfig", "AckermannConfig"]
