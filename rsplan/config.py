"""
Planner configuration.

Vehicle and sampling tunables are passed explicitly to the planner instead of
being read from shared module state.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import numpy as np

from .angle import SCALAR_TYPE

__all__ = ["DIFFERENTIAL_DRIVE_RADIUS", "DEFAULT_STEP_SIZE", "Kinematics", "PlannerConfig"]

DEFAULT_STEP_SIZE = 0.25
DIFFERENTIAL_DRIVE_RADIUS = 0.01


class Kinematics(Enum):
    """Kinematic model, selects the family set used for planning."""

    REEDS_SHEPP = "reeds_shepp"
    DUBINS = "dubins"
    DIFFERENTIAL_DRIVE = "differential_drive"


@dataclass(frozen=True)
class PlannerConfig:
    """
    Planner settings.

    Attributes:
        turning_radius: minimum turning radius in world units
        step_size: spacing of sampled waypoints in world units
        kinematics: which family set to plan with
    """

    turning_radius: SCALAR_TYPE = 1.0
    step_size: SCALAR_TYPE = DEFAULT_STEP_SIZE
    kinematics: Kinematics = Kinematics.REEDS_SHEPP

    def __post_init__(self):
        for name in ("turning_radius", "step_size"):
            value = getattr(self, name)
            if not np.isfinite(value) or value <= 0:
                raise ValueError(f"{name} must be positive and finite, got {value}")
            object.__setattr__(self, name, float(value))

    @classmethod
    def for_differential_drive(cls, step_size: SCALAR_TYPE = DEFAULT_STEP_SIZE) -> PlannerConfig:
        """Differential drive turns almost in place: plan with a tiny radius."""
        return cls(
            turning_radius=DIFFERENTIAL_DRIVE_RADIUS,
            step_size=step_size,
            kinematics=Kinematics.DIFFERENTIAL_DRIVE,
        )
