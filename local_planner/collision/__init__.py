# local_planner/collision/__init__.py

from .config import CollisionConfig, MotionKind
from .checker import CollisionChecker
from .footprint import get_car_circles
# geometry 作为底层库，需要时直接从 local_planner.collision.geometry 导入

__all__ = [
    "CollisionConfig",
    "MotionKind",
    "CollisionChecker",
    "get_car_circles",
]
