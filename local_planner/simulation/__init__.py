# local_planner/simulation/__init__.py

from .sensor import Sensor
from .state_source import SimulatedStateSource
from .navigator import Navigator

__all__ = ["Sensor", "SimulatedStateSource", "Navigator"]
