"""Quaternions and an arcball rotation controller driven by mouse input."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

from nori.vector import Vector

Matrix4 = tuple[tuple[float, float, float, float], ...]


@dataclass(frozen=True)
class Quaternion:
    """A quaternion ``w + xi + yj + zk`` used to represent rotations."""

    w: float
    x: float
    y: float
    z: float

    @classmethod
    def identity(cls) -> Quaternion:
        """Return the rotation that leaves every vector unchanged."""
        return cls(1.0, 0.0, 0.0, 0.0)

    @classmethod
    def from_axis_angle(cls, axis: Iterable[float], angle: float) -> Quaternion:
        """Return the rotation by ``angle`` radians about the unit ``axis``."""
        ax, ay, az = axis
        half = 0.5 * angle
        s = math.sin(half)
        return cls(math.cos(half), ax * s, ay * s, az * s)

    def __mul__(self, other: object) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        w1, x1, y1, z1 = self.w, self.x, self.y, self.z
        w2, x2, y2, z2 = other.w, other.x, other.y, other.z
        return Quaternion(
            w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2,
            w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2,
            w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2,
            w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2,
        )

    def norm(self) -> float:
        """Return the Euclidean length of the four components."""
        return math.sqrt(self.w ** 2 + self.x ** 2 + self.y ** 2 + self.z ** 2)

    def normalized(self) -> Quaternion:
        """Return a unit-length copy; a zero quaternion is returned unchanged."""
        length = self.norm()
        if length == 0:
            return self
        return Quaternion(
            self.w / length, self.x / length, self.y / length, self.z / length
        )

    def rotation_matrix(self) -> tuple[tuple[float, float, float], ...]:
        """Return the 3x3 rotation matrix (rows) of this unit quaternion."""
        w, x, y, z = self.w, self.x, self.y, self.z
        return (
            (1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y)),
            (2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x)),
            (2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y)),
        )


class Arcball:
    """Turn mouse drags over a viewport of a given size into rotations."""

    def __init__(self, speed_factor: float = 2.0) -> None:
        self.speed_factor = speed_factor
        self.size: tuple[int, int] = (0, 0)
        self._active = False
        self._last_pos: tuple[int, int] = (0, 0)
        self._quat = Quaternion.identity()
        self._incr = Quaternion.identity()

    @property
    def active(self) -> bool:
        """Whether a drag is in progress."""
        return self._active

    def button(self, pos: tuple[int, int], pressed: bool) -> None:
        """Start a drag at ``pos`` or, on release, commit the drag's rotation."""
        self._active = pressed
        self._last_pos = (pos[0], pos[1])
        if not self._active:
            self._quat = (self._incr * self._quat).normalized()
        self._incr = Quaternion.identity()

    def motion(self, pos: tuple[int, int]) -> bool:
        """Update the rotation for the cursor at ``pos``; False if not dragging."""
        if not self._active:
            return False

        w, h = float(self.size[0]), float(self.size[1])
        min_dim = min(self.size)
        inv_min_dim = 1.0 / min_dim if min_dim != 0 else math.inf
        speed = self.speed_factor
        last_x, last_y = self._last_pos
        px, py = pos[0], pos[1]

        ox = ((speed * (2 * last_x - w) + w) - w - 1.0) * inv_min_dim
        tx = ((speed * (2 * px - w) + w) - w - 1.0) * inv_min_dim
        oy = ((speed * (h - 2 * last_y) + h) - h - 1.0) * inv_min_dim
        ty = ((speed * (h - 2 * py) + h) - h - 1.0) * inv_min_dim

        v0 = Vector(ox, oy, 1.0)
        v1 = Vector(tx, ty, 1.0)
        if v0.squared_norm() > 1e-4 and v1.squared_norm() > 1e-4:
            v0 = v0.normalized()
            v1 = v1.normalized()
            axis = v0.cross(v1)
            sa = math.sqrt(axis.dot(axis))
            ca = v0.dot(v1)
            angle = math.atan2(sa, ca)
            radius2 = tx * tx + ty * ty
            if radius2 > 1.0:
                angle *= 1.0 + 0.2 * (math.sqrt(radius2) - 1.0)
            self._incr = Quaternion.from_axis_angle(axis.normalized(), angle)
            if not math.isfinite(self._incr.norm()):
                self._incr = Quaternion.identity()
        return True

    def matrix(self) -> Matrix4:
        """Return the current rotation as a 4x4 homogeneous matrix (rows)."""
        rotation = (self._incr * self._quat).rotation_matrix()
        rows = [(*row, 0.0) for row in rotation]
        rows.append((0.0, 0.0, 0.0, 1.0))
        return tuple(rows)