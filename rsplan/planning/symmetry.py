"""
Symmetry expansion of base path families.

A base family formula is derived for one relationship between start and
goal. Time-flip (drive the same word with every gear reversed) and reflection
(swap left and right) map it onto the mirrored relationships:

    timeflip:  goal (x, y, phi) -> (-x, y, -phi)
    reflect:   goal (x, y, phi) -> (x, -y, -phi)

Evaluating the base formula on the transformed goal and applying the same
transform to the resulting path gives a path to the original goal.
"""

from __future__ import annotations

from beartype import beartype
from beartype.typing import Callable, List

from ..angle import SCALAR_TYPE
from ..path import Path

__all__ = ["expand", "reflect", "timeflip"]

FAMILY_TYPE = Callable[..., Path]


@beartype
def timeflip(path: Path) -> Path:
    """Reverse the gear of every element, keeping order and steering."""
    return path.timeflip()


@beartype
def reflect(path: Path) -> Path:
    """Negate the steering of every element."""
    return path.reflect()


@beartype
def expand(family: FAMILY_TYPE, x: SCALAR_TYPE, y: SCALAR_TYPE, phi: SCALAR_TYPE) -> List[Path]:
    """
    All four symmetric variants of one base family.

    Returns:
        [base, timeflip, reflect, timeflip of reflect], infeasible variants
        included as empty paths
    """
    return [
        family(x, y, phi),
        timeflip(family(-x, y, -phi)),
        reflect(family(x, -y, -phi)),
        timeflip(reflect(family(-x, -y, phi))),
    ]
