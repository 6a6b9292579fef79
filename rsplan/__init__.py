"""
rsplan - Analytic Path Planning for Car-Like Vehicles

Closed-form Reeds-Shepp, Dubins and differential-drive path words, optimal
word selection, and exact sampling of the chosen path into world poses.
"""

from beartype.claw import beartype_package

beartype_package(__name__)

__version__ = "0.1.0"

from .path import Gear, Path, PathElement, Pose, Steering
from .config import Kinematics, PlannerConfig
from .planning import get_all_paths, get_optimal_path, plan_optimal, select_optimal
from .sampling import end_pose, sample_exact, sample_path
from .adapter import PathPlanner, PlannedPath, plan_path

__all__ = [
    "Gear",
    "Kinematics",
    "Path",
    "PathElement",
    "PathPlanner",
    "PlannedPath",
    "PlannerConfig",
    "Pose",
    "Steering",
    "__version__",
    "end_pose",
    "get_all_paths",
    "get_optimal_path",
    "plan_optimal",
    "plan_path",
    "sample_exact",
    "sample_path",
    "select_optimal",
]
