# local_planner/planning/planners/__init__.py

from .base import PlannerBase
from .tree_search import TreeSearchPlanner


__all__ = [
    "PlannerBase",
    "TreeSearchPlanner",
]
