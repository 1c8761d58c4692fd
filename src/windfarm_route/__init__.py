"""Wind-farm waypoint planner - turbine waypoints and nearest-neighbor paths."""

from .main import WindFarmApplication, main
from .planner import PlannerSnapshot, WindFarmPlanner

__version__ = "0.1.0"

__all__ = [
    "PlannerSnapshot",
    "WindFarmApplication",
    "WindFarmPlanner",
    "main",
]
