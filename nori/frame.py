"""Orthonormal coordinate frames and local spherical helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass

from nori.vector import Vector


def _clamp(value: float, low: float, high: float) -> float:
    if value < low:
        return low
    if value > high:
        return high
    return value


def _divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE semantics instead of raising on zero."""
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


@dataclass(frozen=True)
class Frame:
    """A three-dimensional orthonormal frame with tangents ``s``, ``t`` and normal ``n``."""

    s: Vector
    t: Vector
    n: Vector

    def to_local(self, v: Vector) -> Vector:
        """Convert from world to local coordinates."""
        return Vector(v.dot(self.s), v.dot(self.t), v.dot(self.n))

    def to_world(self, v: Vector) -> Vector:
        """Convert from local to world coordinates."""
        return Vector(
            *(
                a * v.x + b * v.y + c * v.z
                for a, b, c in zip(self.s, self.t, self.n)
            )
        )

    def __str__(self) -> str:
        return (
            "Frame[\n"
            f"  s = {self.s},\n"
            f"  t = {self.t},\n"
            f"  n = {self.n}\n"
            "]"
        )


def cos_theta(v: Vector) -> float:
    """Cosine of the angle between the local normal and ``v``."""
    return v.z


def sin_theta2(v: Vector) -> float:
    """Squared sine of the angle between the local normal and ``v``."""
    return 1.0 - v.z * v.z


def sin_theta(v: Vector) -> float:
    """Sine of the angle between the local normal and ``v``."""
    temp = sin_theta2(v)
    if temp <= 0.0:
        return 0.0
    return math.sqrt(temp)


def tan_theta(v: Vector) -> float:
    """Tangent of the angle between the local normal and ``v``."""
    temp = 1.0 - v.z * v.z
    if temp <= 0.0:
        return 0.0
    return _divide(math.sqrt(temp), v.z)


def sin_phi(v: Vector) -> float:
    """Sine of the azimuth of ``v`` in local coordinates."""
    st = sin_theta(v)
    if st == 0.0:
        return 1.0
    return _clamp(v.y / st, -1.0, 1.0)


def cos_phi(v: Vector) -> float:
    """Cosine of the azimuth of ``v`` in local coordinates."""
    st = sin_theta(v)
    if st == 0.0:
        return 1.0
    return _clamp(v.x / st, -1.0, 1.0)


def sin_phi2(v: Vector) -> float:
    """Squared sine of the azimuth of ``v`` in local coordinates."""
    return _clamp(_divide(v.y * v.y, sin_theta2(v)), 0.0, 1.0)


def cos_phi2(v: Vector) -> float:
    """Squared cosine of the azimuth of ``v`` in local coordinates."""
    return _clamp(_divide(v.x * v.x, sin_theta2(v)), 0.0, 1.0)