"""
Planning Module
===============

Closed-form path planners for car-like vehicles.

Available family sets:
- REEDS_SHEPP: forward and reverse, 12 base families, 48 words
- DUBINS: forward only, 6 words
- DIFFERENTIAL_DRIVE: forward and reverse, 2 base families
"""

from .families import DIFFERENTIAL_DRIVE_FAMILIES, DUBINS_FAMILIES, REEDS_SHEPP_FAMILIES
from .planner import (
    DIFFERENTIAL_DRIVE,
    DUBINS,
    REEDS_SHEPP,
    FamilySet,
    family_set_for,
    get_all_paths,
    get_optimal_path,
    plan_optimal,
    select_optimal,
)
from .symmetry import expand, reflect, timeflip

__all__ = [
    "DIFFERENTIAL_DRIVE",
    "DIFFERENTIAL_DRIVE_FAMILIES",
    "DUBINS",
    "DUBINS_FAMILIES",
    "REEDS_SHEPP",
    "REEDS_SHEPP_FAMILIES",
    "FamilySet",
    "expand",
    "family_set_for",
    "get_all_paths",
    "get_optimal_path",
    "plan_optimal",
    "reflect",
    "select_optimal",
    "timeflip",
]
