"""
Angle and frame utilities shared by the planners and the sampler.

Two wrapping conventions are provided:

- ``mod2pi``: canonical headings in [0, 2pi)
- ``wrap_angle``: signed angles in [-pi, pi)

A single planning call uses one of them for all of its arc parameters.
"""

from __future__ import annotations

import numpy as np
from beartype import beartype
from beartype.typing import Tuple, Union

__all__ = [
    "SCALAR_TYPE",
    "TWO_PI",
    "cartesian_to_polar",
    "change_of_basis",
    "mod2pi",
    "rotate",
    "wrap_angle",
]

SCALAR_TYPE = Union[float, int]
POSE_TUPLE = Tuple[SCALAR_TYPE, SCALAR_TYPE, SCALAR_TYPE]

TWO_PI = 2.0 * np.pi


@beartype
def mod2pi(angle: SCALAR_TYPE) -> float:
    """Wrap angle to [0, 2pi)."""
    a = float(np.fmod(angle, TWO_PI))
    if a < 0.0:
        a += TWO_PI
    # tiny negative inputs round up to exactly 2pi
    if a >= TWO_PI:
        a -= TWO_PI
    return a


@beartype
def wrap_angle(angle: SCALAR_TYPE) -> float:
    """Wrap angle to [-pi, pi)."""
    return mod2pi(angle + np.pi) - np.pi


@beartype
def cartesian_to_polar(x: SCALAR_TYPE, y: SCALAR_TYPE) -> Tuple[float, float]:
    """Polar coordinates (rho, theta) of (x, y), theta in [0, 2pi)."""
    rho = float(np.hypot(x, y))
    theta = mod2pi(float(np.arctan2(y, x)))
    return rho, theta


@beartype
def rotate(x: SCALAR_TYPE, y: SCALAR_TYPE, angle: SCALAR_TYPE) -> Tuple[float, float]:
    """Rotate the vector (x, y) counter-clockwise by angle."""
    c = np.cos(angle)
    s = np.sin(angle)
    return float(c * x - s * y), float(s * x + c * y)


@beartype
def change_of_basis(start: POSE_TUPLE, end: POSE_TUPLE) -> Tuple[float, float, float]:
    """
    Express end in the frame attached to start.

    Translates end by -start position, rotates by -start heading.

    Args:
        start: (x, y, theta) of the new origin
        end: (x, y, theta) to transform

    Returns:
        (x, y, theta) of end seen from start, theta in [0, 2pi)
    """
    dx = end[0] - start[0]
    dy = end[1] - start[1]
    x, y = rotate(dx, dy, -start[2])
    return x, y, mod2pi(end[2] - start[2])
