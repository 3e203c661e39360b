"""Kinematic state vectors and reference frame kinds."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from numbers import Real

Vec3 = tuple[float, float, float]

_ZERO: Vec3 = (0.0, 0.0, 0.0)


class FrameType(Enum):
    """Kinds of physical reference frame."""

    INERTIAL = 0
    BARYCENTRIC = 1
    ROTATING = 2
    PLANET_FIXED = 3


def _add(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def _sub(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def _scale(a: Vec3, k: float) -> Vec3:
    return (a[0] * k, a[1] * k, a[2] * k)


@dataclass(frozen=True)
class State:
    """Position and velocity of a body, usable as a vector in integrators."""

    position: Vec3 = _ZERO
    velocity: Vec3 = _ZERO

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", tuple(float(v) for v in self.position))
        object.__setattr__(self, "velocity", tuple(float(v) for v in self.velocity))
        if len(self.position) != 3 or len(self.velocity) != 3:
            raise ValueError("State position and velocity must have three components")

    def __add__(self, other: object) -> "State":
        if not isinstance(other, State):
            return NotImplemented
        return State(_add(self.position, other.position), _add(self.velocity, other.velocity))

    def __sub__(self, other: object) -> "State":
        if not isinstance(other, State):
            return NotImplemented
        return State(_sub(self.position, other.position), _sub(self.velocity, other.velocity))

    def __mul__(self, scalar: object) -> "State":
        if not isinstance(scalar, Real):
            return NotImplemented
        k = float(scalar)
        return State(_scale(self.position, k), _scale(self.velocity, k))

    def __rmul__(self, scalar: object) -> "State":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: object) -> "State":
        if not isinstance(scalar, Real):
            return NotImplemented
        k = float(scalar)
        return State(
            (self.position[0] / k, self.position[1] / k, self.position[2] / k),
            (self.velocity[0] / k, self.velocity[1] / k, self.velocity[2] / k),
        )