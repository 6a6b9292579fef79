"""
Optimal Path Selection
======================

Builds the candidate set for a query from a family set, and picks the
shortest candidate.

Usage:
    >>> from rsplan import Pose
    >>> from rsplan.planning import plan_optimal
    >>> path = plan_optimal(Pose(0, 0, 0), Pose(4, 0, 0), turning_radius=1.0)
    >>> round(path.length, 6)
    4.0
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from beartype import beartype
from beartype.typing import Callable, FrozenSet, List, Optional, Sequence, Tuple

from ..angle import SCALAR_TYPE
from ..config import Kinematics
from ..path import Gear, Path, Pose, normalize
from .families import DIFFERENTIAL_DRIVE_FAMILIES, DUBINS_FAMILIES, REEDS_SHEPP_FAMILIES
from .symmetry import expand

__all__ = [
    "DIFFERENTIAL_DRIVE",
    "DUBINS",
    "REEDS_SHEPP",
    "FamilySet",
    "family_set_for",
    "get_all_paths",
    "get_optimal_path",
    "plan_optimal",
    "select_optimal",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FamilySet:
    """
    A group of base families planned together.

    Attributes:
        name: label used in logs
        families: base family functions f(x, y, phi) -> Path
        gears: gears a candidate may use, paths with any other gear are dropped
        symmetric: apply time-flip and reflection expansion to every family
    """

    name: str
    families: Tuple[Callable[..., Path], ...]
    gears: FrozenSet[Gear]
    symmetric: bool = True

    def candidates(self, x: SCALAR_TYPE, y: SCALAR_TYPE, phi: SCALAR_TYPE) -> List[Path]:
        paths = []
        for family in self.families:
            if self.symmetric:
                paths.extend(expand(family, x, y, phi))
            else:
                paths.append(family(x, y, phi))
        return [p for p in paths if all(e.gear in self.gears for e in p)]


REEDS_SHEPP = FamilySet(
    name="reeds_shepp",
    families=REEDS_SHEPP_FAMILIES,
    gears=frozenset({Gear.FORWARD, Gear.BACKWARD}),
)

DUBINS = FamilySet(
    name="dubins",
    families=DUBINS_FAMILIES,
    gears=frozenset({Gear.FORWARD}),
    symmetric=False,
)

DIFFERENTIAL_DRIVE = FamilySet(
    name="differential_drive",
    families=DIFFERENTIAL_DRIVE_FAMILIES,
    gears=frozenset({Gear.FORWARD, Gear.BACKWARD}),
)

_FAMILY_SETS = {
    Kinematics.REEDS_SHEPP: REEDS_SHEPP,
    Kinematics.DUBINS: DUBINS,
    Kinematics.DIFFERENTIAL_DRIVE: DIFFERENTIAL_DRIVE,
}


@beartype
def family_set_for(kinematics: Kinematics) -> FamilySet:
    return _FAMILY_SETS[kinematics]


@beartype
def select_optimal(candidates: Sequence[Path]) -> Path:
    """
    Shortest non-empty candidate.

    Ties keep the candidate that comes first in the sequence. Returns an empty
    path when every candidate is empty.
    """
    best = Path()
    for path in candidates:
        if path and (not best or path.length < best.length):
            best = path
    return best


@beartype
def get_all_paths(start: Pose, goal: Pose, family_set: FamilySet = REEDS_SHEPP) -> List[Path]:
    """
    Every feasible candidate between two normalized poses.

    Args:
        start, goal: poses in normalized units (turning radius 1)
        family_set: families to evaluate

    Returns:
        non-empty candidate paths in generation order
    """
    local = goal.relative_to(start)
    candidates = family_set.candidates(local.x, local.y, local.theta)
    feasible = [p for p in candidates if p]
    logger.debug(
        "%s: local goal (%.4f, %.4f, %.4f), %d/%d candidates feasible",
        family_set.name,
        local.x,
        local.y,
        local.theta,
        len(feasible),
        len(candidates),
    )
    return feasible


@beartype
def get_optimal_path(start: Pose, goal: Pose, family_set: FamilySet = REEDS_SHEPP) -> Path:
    """Shortest path between two normalized poses, empty if none exists."""
    return select_optimal(get_all_paths(start, goal, family_set))


@beartype
def plan_optimal(
    start: Pose,
    goal: Pose,
    turning_radius: SCALAR_TYPE,
    allow_reverse: bool = True,
    family_set: Optional[FamilySet] = None,
) -> Optional[Path]:
    """
    Shortest path between two world poses.

    Args:
        start, goal: poses in world units
        turning_radius: minimum turning radius in world units
        allow_reverse: plan with Reeds-Shepp families if True, Dubins otherwise
        family_set: explicit family set, overrides allow_reverse

    Returns:
        normalized path (multiply params by turning_radius for world lengths),
        or None when no family reaches the goal
    """
    if not turning_radius > 0:
        raise ValueError(f"turning_radius must be positive, got {turning_radius}")
    if family_set is None:
        family_set = REEDS_SHEPP if allow_reverse else DUBINS

    path = get_optimal_path(normalize(start, turning_radius), normalize(goal, turning_radius), family_set)
    if not path:
        logger.warning("%s: no path from %s to %s (R=%g)", family_set.name, start, goal, turning_radius)
        return None
    logger.debug("%s: selected %s", family_set.name, path)
    return path
