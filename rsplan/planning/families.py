"""
Closed-Form Path Families
=========================

Each family maps a goal pose (x, y, phi), expressed in the start-local frame
with unit turning radius, to one candidate path or to an empty path when the
family does not apply to that geometry.

Reeds-Shepp families follow the formula numbering of

    OPTIMAL PATHS FOR A CAR THAT GOES BOTH FORWARDS AND BACKWARDS
    J. A. Reeds and L. A. Shepp, Pacific J. Math. 145(2), 1990

with the corrections of http://msl.cs.uiuc.edu/~lavalle/cs326a/rs.c.
Each base family covers four words once time-flip and reflection are applied
(see ``rsplan.planning.symmetry``).

Dubins families are forward only and wrap every arc into [0, 2pi).
"""

from __future__ import annotations

import numpy as np
from beartype import beartype
from beartype.typing import Callable

from ..angle import SCALAR_TYPE, cartesian_to_polar, mod2pi, wrap_angle
from ..path import Gear, Path, PathElement, Steering

__all__ = [
    "REEDS_SHEPP_FAMILIES",
    "DUBINS_FAMILIES",
    "DIFFERENTIAL_DRIVE_FAMILIES",
    "csc_same",
    "csc_opposite",
    "c_c_c",
    "c_cc",
    "cc_c",
    "ccu_cuc",
    "c_cucu_c",
    "c_c2sca",
    "csc2_ca",
    "c_c2scb",
    "csc2_cb",
    "c_c2sc2_c",
    "dubins_lsl",
    "dubins_rsr",
    "dubins_lsr",
    "dubins_rsl",
    "dubins_lrl",
    "dubins_rlr",
]

WRAP_TYPE = Callable[[SCALAR_TYPE], float]

L, R, S = Steering.LEFT, Steering.RIGHT, Steering.STRAIGHT
FWD, BWD = Gear.FORWARD, Gear.BACKWARD

HALF_PI = np.pi / 2


def _acos(x):
    return float(np.arccos(np.clip(x, -1.0, 1.0)))


def _asin(x):
    return float(np.arcsin(np.clip(x, -1.0, 1.0)))


def _path(*elements):
    return Path(tuple(PathElement(param, steering, gear) for param, steering, gear in elements))


def _left_circles(x, y, phi):
    """Goal left-circle center relative to the start left-circle center."""
    return cartesian_to_polar(x - np.sin(phi), y - 1 + np.cos(phi))


def _opposite_circles(x, y, phi):
    """Goal right-circle center relative to the start left-circle center."""
    return cartesian_to_polar(x + np.sin(phi), y - 1 - np.cos(phi))


# ==============================================================================
# Reeds-Shepp Base Families
# ==============================================================================


@beartype
def csc_same(x: SCALAR_TYPE, y: SCALAR_TYPE, phi: SCALAR_TYPE, wrap: WRAP_TYPE = wrap_angle) -> Path:
    """Formula 8.1: CSC, same turns (L+S+L+)."""
    u, theta = _left_circles(x, y, phi)
    t = wrap(theta)
    v = wrap(phi - t)
    return _path((t, L, FWD), (u, S, FWD), (v, L, FWD))


@beartype
def csc_opposite(x: SCALAR_TYPE, y: SCALAR_TYPE, phi: SCALAR_TYPE, wrap: WRAP_TYPE = wrap_angle) -> Path:
    """Formula 8.2: CSC, opposite turns (L+S+R+)."""
    rho, theta = _opposite_circles(x, y, phi)
    if rho * rho < 4:
        return Path()
    u = float(np.sqrt(rho * rho - 4))
    t = wrap(theta + np.arctan2(2, u))
    v = wrap(t - phi)
    return _path((t, L, FWD), (u, S, FWD), (v, R, FWD))


@beartype
def c_c_c(x: SCALAR_TYPE, y: SCALAR_TYPE, phi: SCALAR_TYPE) -> Path:
    """Formula 8.3: C|C|C (L+R-L+)."""
    rho, theta = _left_circles(x, y, phi)
    if rho > 4:
        return Path()
    A = _acos(rho / 4)
    t = wrap_angle(theta + HALF_PI + A)
    u = wrap_angle(np.pi - 2 * A)
    v = wrap_angle(phi - t - u)
    return _path((t, L, FWD), (u, R, BWD), (v, L, FWD))


@beartype
def c_cc(x: SCALAR_TYPE, y: SCALAR_TYPE, phi: SCALAR_TYPE) -> Path:
    """Formula 8.4, first form: C|CC (L+R-L-)."""
    rho, theta = _left_circles(x, y, phi)
    if rho > 4:
        return Path()
    A = _acos(rho / 4)
    t = wrap_angle(theta + HALF_PI + A)
    u = wrap_angle(np.pi - 2 * A)
    v = wrap_angle(t + u - phi)
    return _path((t, L, FWD), (u, R, BWD), (v, L, BWD))


@beartype
def cc_c(x: SCALAR_TYPE, y: SCALAR_TYPE, phi: SCALAR_TYPE) -> Path:
    """Formula 8.4, second form: CC|C (L+R+L-)."""
    rho, theta = _left_circles(x, y, phi)
    if rho > 4:
        return Path()
    u = _acos(1 - rho * rho / 8)
    # asin(2 sin(u) / rho) reduces to acos(rho / 4), which stays finite at rho = 0
    A = _acos(rho / 4)
    t = wrap_angle(theta + HALF_PI - A)
    v = wrap_angle(t - u - phi)
    return _path((t, L, FWD), (u, R, FWD), (v, L, BWD))


@beartype
def ccu_cuc(x: SCALAR_TYPE, y: SCALAR_TYPE, phi: SCALAR_TYPE) -> Path:
    """Formula 8.7: CCu|CuC (L+R+L-R-), both middle arcs of equal length u."""
    rho, theta = _opposite_circles(x, y, phi)
    if rho > 4:
        return Path()
    if rho <= 2:
        A = _acos((rho + 2) / 4)
        t = wrap_angle(theta + HALF_PI + A)
        u = wrap_angle(A)
    else:
        A = _acos((rho - 2) / 4)
        t = wrap_angle(theta + HALF_PI - A)
        u = wrap_angle(np.pi - A)
    v = wrap_angle(phi - t + 2 * u)
    return _path((t, L, FWD), (u, R, FWD), (u, L, BWD), (v, R, BWD))


@beartype
def c_cucu_c(x: SCALAR_TYPE, y: SCALAR_TYPE, phi: SCALAR_TYPE) -> Path:
    """Formula 8.8: C|CuCu|C (L+R-L-R+)."""
    rho, theta = _opposite_circles(x, y, phi)
    u1 = (20 - rho * rho) / 16
    if rho > 6 or u1 < 0 or u1 > 1:
        return Path()
    # u1 <= 1 keeps rho >= 2 here
    u = _acos(u1)
    A = _asin(2 * np.sin(u) / rho)
    t = wrap_angle(theta + HALF_PI + A)
    v = wrap_angle(t - phi)
    return _path((t, L, FWD), (u, R, BWD), (u, L, BWD), (v, R, FWD))


@beartype
def c_c2sca(x: SCALAR_TYPE, y: SCALAR_TYPE, phi: SCALAR_TYPE) -> Path:
    """Formula 8.9, first form: C|C[pi/2]SC (L+R-S-L-)."""
    rho, theta = _left_circles(x, y, phi)
    if rho < 2:
        return Path()
    u = float(np.sqrt(rho * rho - 4)) - 2
    A = float(np.arctan2(2, u + 2))
    t = wrap_angle(theta + HALF_PI + A)
    v = wrap_angle(t - phi + HALF_PI)
    return _path((t, L, FWD), (HALF_PI, R, BWD), (u, S, BWD), (v, L, BWD))


@beartype
def csc2_ca(x: SCALAR_TYPE, y: SCALAR_TYPE, phi: SCALAR_TYPE) -> Path:
    """Formula 8.9, second form: CSC[pi/2]|C (L+S+R+L-)."""
    rho, theta = _left_circles(x, y, phi)
    if rho < 2:
        return Path()
    u = float(np.sqrt(rho * rho - 4)) - 2
    A = float(np.arctan2(u + 2, 2))
    t = wrap_angle(theta + HALF_PI - A)
    v = wrap_angle(t - phi - HALF_PI)
    return _path((t, L, FWD), (u, S, FWD), (HALF_PI, R, FWD), (v, L, BWD))


@beartype
def c_c2scb(x: SCALAR_TYPE, y: SCALAR_TYPE, phi: SCALAR_TYPE) -> Path:
    """Formula 8.10, first form: C|C[pi/2]SC (L+R-S-R-)."""
    rho, theta = _opposite_circles(x, y, phi)
    if rho < 2:
        return Path()
    t = wrap_angle(theta + HALF_PI)
    u = rho - 2
    v = wrap_angle(phi - t - HALF_PI)
    return _path((t, L, FWD), (HALF_PI, R, BWD), (u, S, BWD), (v, R, BWD))


@beartype
def csc2_cb(x: SCALAR_TYPE, y: SCALAR_TYPE, phi: SCALAR_TYPE) -> Path:
    """Formula 8.10, second form: CSC[pi/2]|C (L+S+L+R-)."""
    rho, theta = _opposite_circles(x, y, phi)
    if rho < 2:
        return Path()
    t = wrap_angle(theta)
    u = rho - 2
    v = wrap_angle(phi - t - HALF_PI)
    return _path((t, L, FWD), (u, S, FWD), (HALF_PI, L, FWD), (v, R, BWD))


@beartype
def c_c2sc2_c(x: SCALAR_TYPE, y: SCALAR_TYPE, phi: SCALAR_TYPE) -> Path:
    """Formula 8.11: C|C[pi/2]SC[pi/2]|C (L+R-S-L-R+)."""
    rho, theta = _opposite_circles(x, y, phi)
    if rho < 4:
        return Path()
    u = float(np.sqrt(rho * rho - 4)) - 4
    A = float(np.arctan2(2, u + 4))
    t = wrap_angle(theta + HALF_PI + A)
    v = wrap_angle(t - phi)
    return _path((t, L, FWD), (HALF_PI, R, BWD), (u, S, BWD), (HALF_PI, L, BWD), (v, R, FWD))


# ==============================================================================
# Dubins Families (forward only)
# ==============================================================================


@beartype
def dubins_lsl(x: SCALAR_TYPE, y: SCALAR_TYPE, phi: SCALAR_TYPE) -> Path:
    """Left-Straight-Left."""
    return csc_same(x, y, phi, wrap=mod2pi)


@beartype
def dubins_rsr(x: SCALAR_TYPE, y: SCALAR_TYPE, phi: SCALAR_TYPE) -> Path:
    """Right-Straight-Right, LSL on the mirrored goal."""
    return csc_same(x, -y, -phi, wrap=mod2pi).reflect()


@beartype
def dubins_lsr(x: SCALAR_TYPE, y: SCALAR_TYPE, phi: SCALAR_TYPE) -> Path:
    """Left-Straight-Right, needs the two circles at least 2 apart."""
    return csc_opposite(x, y, phi, wrap=mod2pi)


@beartype
def dubins_rsl(x: SCALAR_TYPE, y: SCALAR_TYPE, phi: SCALAR_TYPE) -> Path:
    """Right-Straight-Left, LSR on the mirrored goal."""
    return csc_opposite(x, -y, -phi, wrap=mod2pi).reflect()


@beartype
def dubins_lrl(x: SCALAR_TYPE, y: SCALAR_TYPE, phi: SCALAR_TYPE) -> Path:
    """
    Left-Right-Left with the long (> pi) middle arc.

    The middle circle touches both left circles, whose centers must be at
    most 4 apart.
    """
    rho, theta = _left_circles(x, y, phi)
    if rho > 4:
        return Path()
    u = 2 * np.pi - _acos(1 - rho * rho / 8)
    t = mod2pi(theta + u / 2)
    v = mod2pi(phi - t + u)
    return _path((t, L, FWD), (u, R, FWD), (v, L, FWD))


@beartype
def dubins_rlr(x: SCALAR_TYPE, y: SCALAR_TYPE, phi: SCALAR_TYPE) -> Path:
    """Right-Left-Right, LRL on the mirrored goal."""
    return dubins_lrl(x, -y, -phi).reflect()


REEDS_SHEPP_FAMILIES = (
    csc_same,
    csc_opposite,
    c_c_c,
    c_cc,
    cc_c,
    ccu_cuc,
    c_cucu_c,
    c_c2sca,
    csc2_ca,
    c_c2scb,
    csc2_cb,
    c_c2sc2_c,
)

DUBINS_FAMILIES = (
    dubins_lsl,
    dubins_rsr,
    dubins_lsr,
    dubins_rsl,
    dubins_lrl,
    dubins_rlr,
)

DIFFERENTIAL_DRIVE_FAMILIES = (
    csc_same,
    csc_opposite,
)
