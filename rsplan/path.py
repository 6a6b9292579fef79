"""
Path element model: poses, steering and gear signs, path elements and paths.

All path parameters live in the normalized frame where the turning radius is
one: straight elements store length / R, arc elements store the subtended
angle in radians.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

import numpy as np
from beartype.typing import Iterator, List, Tuple

from .angle import SCALAR_TYPE, change_of_basis, mod2pi, wrap_angle

__all__ = ["Gear", "Path", "PathElement", "Pose", "Steering", "denormalize", "normalize"]


class Steering(Enum):
    """Arc direction, LEFT is counter-clockwise about a center on the vehicle's left."""

    LEFT = 1
    RIGHT = -1
    STRAIGHT = 0

    def sign(self) -> int:
        return self.value

    def reversed(self) -> Steering:
        return _STEERING_REVERSED[self]

    @property
    def symbol(self) -> str:
        return self.name[0]


class Gear(Enum):
    """Travel direction along an element."""

    FORWARD = 1
    BACKWARD = -1

    def sign(self) -> int:
        return self.value

    def reversed(self) -> Gear:
        return _GEAR_REVERSED[self]

    @property
    def symbol(self) -> str:
        return "+" if self is Gear.FORWARD else "-"


_STEERING_REVERSED = {
    Steering.LEFT: Steering.RIGHT,
    Steering.RIGHT: Steering.LEFT,
    Steering.STRAIGHT: Steering.STRAIGHT,
}

_GEAR_REVERSED = {
    Gear.FORWARD: Gear.BACKWARD,
    Gear.BACKWARD: Gear.FORWARD,
}


@dataclass(frozen=True)
class Pose:
    """Planar pose, heading in radians wrapped to [0, 2pi)."""

    x: SCALAR_TYPE
    y: SCALAR_TYPE
    theta: SCALAR_TYPE = 0.0

    def __post_init__(self):
        if not np.all(np.isfinite([self.x, self.y, self.theta])):
            raise ValueError(f"Pose components must be finite, got ({self.x}, {self.y}, {self.theta})")
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "theta", mod2pi(float(self.theta)))

    def as_tuple(self) -> Tuple[float, float, float]:
        return self.x, self.y, self.theta

    def relative_to(self, origin: Pose) -> Pose:
        """This pose expressed in the frame attached to origin."""
        return Pose(*change_of_basis(origin.as_tuple(), self.as_tuple()))

    def distance(self, other: Pose) -> float:
        return float(np.hypot(self.x - other.x, self.y - other.y))

    def heading_error(self, other: Pose) -> float:
        """Signed heading difference self - other in [-pi, pi)."""
        return wrap_angle(self.theta - other.theta)

    def __repr__(self):
        return f"Pose(x={self.x:.3f}, y={self.y:.3f}, theta={self.theta:.3f})"


def normalize(pose: Pose, turning_radius: SCALAR_TYPE) -> Pose:
    """Scale a world pose to unit turning radius, heading unchanged."""
    return Pose(pose.x / turning_radius, pose.y / turning_radius, pose.theta)


def denormalize(pose: Pose, turning_radius: SCALAR_TYPE) -> Pose:
    """Inverse of normalize."""
    return Pose(pose.x * turning_radius, pose.y * turning_radius, pose.theta)


@dataclass(frozen=True)
class PathElement:
    """
    One segment of a path.

    A negative param is stored as its magnitude with the gear flipped, so
    param is never negative once constructed.
    """

    param: SCALAR_TYPE
    steering: Steering
    gear: Gear = Gear.FORWARD

    def __post_init__(self):
        if not np.isfinite(self.param):
            raise ValueError(f"PathElement param must be finite, got {self.param}")
        param = float(self.param)
        if param < 0.0:
            object.__setattr__(self, "gear", self.gear.reversed())
            param = -param
        object.__setattr__(self, "param", param)

    def reverse_gear(self) -> PathElement:
        return PathElement(self.param, self.steering, self.gear.reversed())

    def reverse_steering(self) -> PathElement:
        return PathElement(self.param, self.steering.reversed(), self.gear)

    def heading_change(self) -> float:
        """Signed heading change, zero for straight elements."""
        return self.param * self.steering.sign() * self.gear.sign()

    def world_length(self, turning_radius: SCALAR_TYPE) -> float:
        return self.param * turning_radius

    @property
    def word(self) -> str:
        return self.steering.symbol + self.gear.symbol

    def __repr__(self):
        return f"{{ Steering: {self.steering.name}\tGear: {self.gear.name}\tdistance: {round(self.param, 3)} }}"


@dataclass(frozen=True)
class Path:
    """
    Ordered, immutable sequence of path elements.

    An empty path means the family that produced it does not apply to the
    query geometry, or that no path was found at all.
    """

    elements: Tuple[PathElement, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "elements", tuple(self.elements))

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self) -> Iterator[PathElement]:
        return iter(self.elements)

    def __getitem__(self, index: int) -> PathElement:
        return self.elements[index]

    def __bool__(self) -> bool:
        return len(self.elements) > 0

    @property
    def length(self) -> float:
        """Total normalized length, the sum of element params."""
        return float(sum(e.param for e in self.elements))

    def world_length(self, turning_radius: SCALAR_TYPE) -> float:
        return self.length * turning_radius

    @property
    def word(self) -> str:
        return "".join(e.word for e in self.elements)

    def gears(self) -> List[int]:
        return [e.gear.sign() for e in self.elements]

    def timeflip(self) -> Path:
        """Same path with every gear reversed."""
        return Path(tuple(e.reverse_gear() for e in self.elements))

    def reflect(self) -> Path:
        """Mirror image: every LEFT becomes RIGHT and vice versa."""
        return Path(tuple(e.reverse_steering() for e in self.elements))

    def __repr__(self):
        if not self.elements:
            return "Path(<empty>)"
        return f"Path({self.word}, length={self.length:.4f})"
