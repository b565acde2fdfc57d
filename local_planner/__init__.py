# local_planner/__init__.py

from .types import State, Command, Circle
from .config import PlannerConfig, load_config, load_config_file
from .vehicles import AckermannVehicle, AckermannConfig
from .planning.planners import TreeSearchPlanner

__version__ = "0.1.0"

__all__ = [
    "State",
    "Command",
    "Circle",
    "PlannerConfig",
    "load_config",
    "load_config_file",
    "AckermannVehicle",
    "AckermannConfig",
    "TreeSearchPlanner",
]
