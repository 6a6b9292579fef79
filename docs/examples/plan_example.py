"""
Reeds-Shepp Path Planning Example
=================================

Plans a parking manoeuvre for a car that may reverse, compares it with the
forward-only (Dubins) result, and samples the chosen path into waypoints.
"""

import logging

import numpy as np

from rsplan import Kinematics, PathPlanner, PlannerConfig, Pose, plan_optimal

logging.basicConfig(level=logging.INFO)

# Start and goal poses (x, y, heading)
start = Pose(0.0, 0.0, 0.0)
goal = Pose(-2.0, 4.0, np.pi)

R = 2.0  # Minimum turning radius

# Shortest word for each vehicle model
for allow_reverse in (True, False):
    path = plan_optimal(start, goal, R, allow_reverse=allow_reverse)
    label = "Reeds-Shepp" if allow_reverse else "Dubins"
    print(f"{label:12s} {path.word:12s} length={path.world_length(R):.4f}")
    for element in path:
        print(f"    {element}")

# Sample into waypoints
planner = PathPlanner(PlannerConfig(turning_radius=R, step_size=0.2, kinematics=Kinematics.REEDS_SHEPP))
result = planner.plan(start, goal)
print(f"\n{len(result)} waypoints, gear changes: {int(np.sum(np.diff(result.gears) != 0))}")
for pose, gear in list(zip(result.poses, result.gears))[:: max(1, len(result) // 5)]:
    print(f"{pose}  gear={gear:+d}")

# Visualize the path (optional - requires matplotlib)
try:
    import matplotlib.pyplot as plt

    from rsplan.plot import plot_planned

    ax = plot_planned(result)
    plt.xlabel("x (m)")
    plt.ylabel("y (m)")
    plt.savefig("plan_example.png", dpi=150, bbox_inches="tight")
    print("\nPlot saved to plan_example.png")
except ImportError:
    print("\nMatplotlib not available - skipping visualization")
