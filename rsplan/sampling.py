"""
Path Sampler
============

Turns a normalized path into world poses.

The pose update over one element is the closed-form constant-curvature
identity, derived once as a CasADi function:

    straight:  p' = p + gear * param * R * (cos th, sin th)
    arc:       th' = th + param * steer * gear
               c   = p - steer * R * (sin th, -cos th)
               p'  = c + steer * R * (sin th', -cos th')

Usage:
    >>> from rsplan import Pose, plan_optimal
    >>> from rsplan.sampling import sample_path
    >>> path = plan_optimal(Pose(0, 0, 0), Pose(4, 2, 0), turning_radius=2.0)
    >>> poses, gears = sample_path(path, Pose(0, 0, 0), turning_radius=2.0, step_size=0.1)
    >>> len(poses) == len(gears)
    True
"""

from __future__ import annotations

import logging

import casadi as ca
import numpy as np
from beartype import beartype
from beartype.typing import List, Sequence, Tuple

from .angle import SCALAR_TYPE, mod2pi, wrap_angle
from .path import Gear, Path, PathElement, Pose

__all__ = [
    "POSE_STEP",
    "TERMINAL_TOLERANCE",
    "derive_step",
    "end_pose",
    "polyline_length",
    "poses_to_array",
    "resample",
    "sample_exact",
    "sample_path",
    "step_pose",
]

logger = logging.getLogger(__name__)

TERMINAL_TOLERANCE = 1e-9


# ==============================================================================
# Pose Update
# ==============================================================================


def derive_step() -> ca.Function:
    """
    Create the CasADi pose update function.

    Returns:
        pose_step: Function
            Inputs: pose[3] (x, y, theta), param, steer, gear, R
            Outputs: pose_next[3], heading not wrapped
    """
    pose = ca.SX.sym("pose", 3)
    param = ca.SX.sym("param")
    steer = ca.SX.sym("steer")
    gear = ca.SX.sym("gear")
    R = ca.SX.sym("R")

    x, y, th = pose[0], pose[1], pose[2]

    # Straight
    x_s = x + gear * param * R * ca.cos(th)
    y_s = y + gear * param * R * ca.sin(th)

    # Arc about the center on the steering side
    th_next = th + param * steer * gear
    cx = x - steer * R * ca.sin(th)
    cy = y + steer * R * ca.cos(th)
    x_a = cx + steer * R * ca.sin(th_next)
    y_a = cy - steer * R * ca.cos(th_next)

    is_straight = steer == 0
    pose_next = ca.vertcat(
        ca.if_else(is_straight, x_s, x_a),
        ca.if_else(is_straight, y_s, y_a),
        th_next,
    )

    return ca.Function(
        "pose_step",
        [pose, param, steer, gear, R],
        [pose_next],
        ["pose", "param", "steer", "gear", "R"],
        ["pose_next"],
    )


POSE_STEP = derive_step()


def _check_positive(**kwargs):
    for name, value in kwargs.items():
        if not np.isfinite(value) or value <= 0:
            raise ValueError(f"{name} must be positive and finite, got {value}")


@beartype
def step_pose(pose: Pose, element: PathElement, turning_radius: SCALAR_TYPE, fraction: SCALAR_TYPE = 1.0) -> Pose:
    """Pose after driving fraction of element from pose."""
    out = POSE_STEP(
        ca.DM(list(pose.as_tuple())),
        element.param * fraction,
        element.steering.sign(),
        element.gear.sign(),
        turning_radius,
    )
    out = np.array(out).flatten()
    return Pose(float(out[0]), float(out[1]), float(out[2]))


def _initial_gear(path):
    return path[0].gear.sign() if path else Gear.FORWARD.sign()


# ==============================================================================
# Exact Stepping
# ==============================================================================


@beartype
def sample_exact(path: Path, start: Pose, turning_radius: SCALAR_TYPE) -> Tuple[List[Pose], List[int]]:
    """
    Poses at every element boundary, computed in closed form.

    Returns:
        poses: start followed by the end pose of each element
        gears: gear sign of the motion arriving at each pose
    """
    _check_positive(turning_radius=turning_radius)
    poses = [start]
    gears = [_initial_gear(path)]
    current = start
    for element in path:
        current = step_pose(current, element, turning_radius)
        poses.append(current)
        gears.append(element.gear.sign())
    return poses, gears


@beartype
def end_pose(path: Path, start: Pose, turning_radius: SCALAR_TYPE) -> Pose:
    """Terminal pose of path driven from start."""
    poses, _ = sample_exact(path, start, turning_radius)
    return poses[-1]


# ==============================================================================
# Fixed-Step Discretization
# ==============================================================================


@beartype
def sample_path(
    path: Path,
    start: Pose,
    turning_radius: SCALAR_TYPE,
    step_size: SCALAR_TYPE,
    tolerance: SCALAR_TYPE = TERMINAL_TOLERANCE,
) -> Tuple[List[Pose], List[int]]:
    """
    Drivable waypoints along path.

    Each element is split into n = max(2, ceil(param * R / step_size)) equal
    sub-steps and one pose is emitted per sub-step.

    Args:
        path: normalized path
        start: start pose in world units
        turning_radius: turning radius in world units
        step_size: desired waypoint spacing in world units
        tolerance: allowed terminal drift before a corrective pose is appended

    Returns:
        poses: waypoints, poses[0] == start
        gears: gear sign (+1 forward, -1 reverse) of the motion arriving at
            each waypoint; gears[0] is the gear of the first element
    """
    _check_positive(turning_radius=turning_radius, step_size=step_size)

    poses = [start]
    gears = [_initial_gear(path)]
    current = start
    for element in path:
        n = max(2, int(np.ceil(element.world_length(turning_radius) / step_size)))
        for _ in range(n):
            current = step_pose(current, element, turning_radius, 1.0 / n)
            poses.append(current)
            gears.append(element.gear.sign())

    if path:
        exact = end_pose(path, start, turning_radius)
        pos_err = current.distance(exact)
        head_err = abs(current.heading_error(exact))
        if pos_err > tolerance or head_err > tolerance:
            logger.warning(
                "sampled end drifted from exact end (pos %.3e, heading %.3e), appending terminal pose",
                pos_err,
                head_err,
            )
            poses.append(exact)
            gears.append(path[-1].gear.sign())

    logger.debug("sampled %d poses over %d elements", len(poses), len(path))
    return poses, gears


# ==============================================================================
# Pose Paths
# ==============================================================================


@beartype
def poses_to_array(poses: Sequence[Pose]) -> np.ndarray:
    """Stack poses into an (N, 3) array of x, y, theta."""
    return np.array([p.as_tuple() for p in poses], dtype=float).reshape(-1, 3)


@beartype
def polyline_length(poses: Sequence[Pose]) -> float:
    """Length of the polyline through the pose positions."""
    if len(poses) < 2:
        return 0.0
    xy = poses_to_array(poses)[:, :2]
    return float(np.sum(np.linalg.norm(np.diff(xy, axis=0), axis=1)))


@beartype
def resample(poses: Sequence[Pose], step_size: SCALAR_TYPE) -> List[Pose]:
    """
    Densify a pose path by linear interpolation.

    Positions are interpolated linearly, headings along the shortest arc.
    Segments shorter than step_size are kept as they are.
    """
    _check_positive(step_size=step_size)
    if not poses:
        return []

    out = [poses[0]]
    for prev, cur in zip(poses[:-1], poses[1:]):
        n = max(1, int(np.floor(prev.distance(cur) / step_size)))
        dth = wrap_angle(cur.theta - prev.theta)
        for i in range(1, n + 1):
            s = i / n
            out.append(
                Pose(
                    prev.x + s * (cur.x - prev.x),
                    prev.y + s * (cur.y - prev.y),
                    mod2pi(prev.theta + s * dth),
                )
            )
    return out
