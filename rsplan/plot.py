"""
Plotting helpers for sampled paths.

Requires the ``plot`` extra (matplotlib).
"""

from __future__ import annotations

import numpy as np
from beartype.typing import Optional, Sequence

from .path import Pose
from .sampling import poses_to_array

__all__ = ["plot_path", "plot_planned"]

GEAR_COLORS = {1: "b", -1: "r"}


def _draw_heading(ax, pose, scale, color):
    ax.arrow(
        pose.x,
        pose.y,
        scale * np.cos(pose.theta),
        scale * np.sin(pose.theta),
        color=color,
        width=0.02 * scale,
        head_width=0.15 * scale,
        alpha=0.7,
    )


def plot_path(poses: Sequence[Pose], gears: Sequence[int], ax=None, scale: float = 0.3):
    """
    Plot waypoints, forward runs in blue and reverse runs in red.

    Args:
        poses: sampled waypoints
        gears: gear sign per waypoint
        ax: Matplotlib axis (creates new if None)
        scale: heading arrow length

    Returns:
        ax: Matplotlib axis
    """
    import matplotlib.pyplot as plt

    if ax is None:
        fig, ax = plt.subplots(figsize=(10, 10))
    if len(poses) == 0:
        return ax

    xy = poses_to_array(poses)[:, :2]

    # segment i-1 -> i is driven in gears[i]; one line per run of equal gear
    i = 1
    while i < len(poses):
        gear = gears[i]
        j = i
        while j + 1 < len(poses) and gears[j + 1] == gear:
            j += 1
        seg = xy[i - 1 : j + 1]
        ax.plot(seg[:, 0], seg[:, 1], GEAR_COLORS[gear], linewidth=2, alpha=0.8)
        i = j + 1

    _draw_heading(ax, poses[0], scale, "green")
    _draw_heading(ax, poses[-1], scale, "red")

    ax.axis("equal")
    ax.grid(True, alpha=0.3)
    return ax


def plot_planned(planned, ax=None, scale: Optional[float] = None):
    """Plot a PlannedPath, titled with its word and length."""
    if scale is None:
        scale = 0.3 * planned.turning_radius
    ax = plot_path(planned.poses, planned.gears, ax=ax, scale=scale)
    if not planned.is_empty:
        ax.set_title(f"{planned.path.word}  length={planned.length:.3f}")
    return ax
