"""
Unit and Frame Adapter
======================

Maps between world poses and the normalized frame the families work in, and
wraps plan + sample into a single call.

Usage:
    >>> from rsplan import PathPlanner, PlannerConfig, Pose
    >>> planner = PathPlanner(PlannerConfig(turning_radius=2.0, step_size=0.1))
    >>> result = planner.plan(Pose(0, 0, 0), Pose(5, 3, 1.57))
    >>> result.is_empty
    False
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import numpy as np
from beartype import beartype
from beartype.typing import List, Optional, Sequence

from .angle import SCALAR_TYPE, rotate
from .config import Kinematics, PlannerConfig
from .path import Path, Pose, denormalize, normalize
from .planning import family_set_for, plan_optimal
from .sampling import poses_to_array, sample_path

__all__ = [
    "PathPlanner",
    "PlannedPath",
    "denormalize",
    "local_to_world",
    "normalize",
    "plan_path",
]

logger = logging.getLogger(__name__)

LOCAL_ORIGIN = Pose(0.0, 0.0, 0.0)


@beartype
def local_to_world(poses: Sequence[Pose], origin: Pose, turning_radius: SCALAR_TYPE) -> List[Pose]:
    """
    Map normalized poses given in the frame of origin into world poses.

    Each pose is denormalized, rotated by the origin heading and translated
    to the origin position.
    """
    out = []
    for p in poses:
        w = denormalize(p, turning_radius)
        dx, dy = rotate(w.x, w.y, origin.theta)
        out.append(Pose(origin.x + dx, origin.y + dy, origin.theta + w.theta))
    return out


@dataclass(frozen=True)
class PlannedPath:
    """
    A planned path together with its sampled waypoints.

    Attributes:
        path: normalized path, empty if no path was found
        poses: world waypoints, first is the start pose
        gears: gear sign per waypoint, +1 forward, -1 reverse
        turning_radius: radius the path was planned with
    """

    path: Path = field(default_factory=Path)
    poses: List[Pose] = field(default_factory=list)
    gears: List[int] = field(default_factory=list)
    turning_radius: float = 1.0

    @property
    def is_empty(self) -> bool:
        return not self.path

    @property
    def length(self) -> float:
        """World length of the analytic path."""
        return self.path.world_length(self.turning_radius)

    @property
    def points(self) -> np.ndarray:
        """(N, 2) array of waypoint positions."""
        return poses_to_array(self.poses)[:, :2]

    @property
    def headings(self) -> np.ndarray:
        return poses_to_array(self.poses)[:, 2]

    def __len__(self) -> int:
        return len(self.poses)


class PathPlanner:
    """
    Plans and samples paths for one vehicle configuration.

    Instances hold only the immutable config, so one planner may be shared
    between threads.
    """

    def __init__(self, config: Optional[PlannerConfig] = None):
        self.config = config if config is not None else PlannerConfig()
        self.family_set = family_set_for(self.config.kinematics)

    def plan(self, start: Pose, goal: Pose) -> PlannedPath:
        """
        Shortest path from start to goal, sampled at the configured step.

        The path is sampled in the normalized frame of start and the samples
        are mapped back to world poses with local_to_world.

        Returns:
            PlannedPath, empty when no path exists
        """
        R = self.config.turning_radius
        logger.debug(
            "planning %s -> %s, normalized %s -> %s",
            start,
            goal,
            normalize(start, R),
            normalize(goal, R),
        )

        path = plan_optimal(start, goal, R, family_set=self.family_set)
        if path is None:
            return PlannedPath(turning_radius=R)

        local, gears = sample_path(path, LOCAL_ORIGIN, 1.0, self.config.step_size / R)
        poses = local_to_world(local, start, R)
        logger.debug(
            "%s: %d poses, terminal error pos %.3e heading %.3e",
            path.word,
            len(poses),
            poses[-1].distance(goal),
            abs(poses[-1].heading_error(goal)),
        )
        return PlannedPath(path=path, poses=poses, gears=gears, turning_radius=R)

    def __repr__(self):
        return f"PathPlanner({self.config})"


@beartype
def plan_path(
    start: Pose,
    goal: Pose,
    turning_radius: SCALAR_TYPE = 1.0,
    step_size: SCALAR_TYPE = 0.25,
    kinematics: Kinematics = Kinematics.REEDS_SHEPP,
) -> PlannedPath:
    """Plan and sample in one call, see PathPlanner.plan."""
    config = PlannerConfig(turning_radius=turning_radius, step_size=step_size, kinematics=kinematics)
    return PathPlanner(config).plan(start, goal)
