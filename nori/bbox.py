"""Axis-aligned bounding boxes of any dimension."""

from __future__ import annotations

import math
from dataclasses import dataclass

from nori.vector import Point, Vector


@dataclass
class BoundingBox:
    """An axis-aligned box given by its component-wise minimum and maximum."""

    min: Point
    max: Point

    def __post_init__(self) -> None:
        if len(self.min) != len(self.max):
            raise ValueError(
                f"dimension mismatch: {len(self.min)} and {len(self.max)}"
            )
        self.min = Point(*self.min)
        self.max = Point(*self.max)

    @classmethod
    def empty(cls, dimension: int) -> BoundingBox:
        """Return an invalid box (min = +inf, max = -inf) that covers nothing."""
        return cls(
            Point.constant(math.inf, dimension),
            Point.constant(-math.inf, dimension),
        )

    @classmethod
    def from_point(cls, point: Vector) -> BoundingBox:
        """Return a box collapsed to a single point."""
        return cls(Point(*point), Point(*point))

    @property
    def dimension(self) -> int:
        return len(self.min)

    def extents(self) -> Vector:
        """Return ``max - min``."""
        return Vector(*(hi - lo for lo, hi in zip(self.min, self.max)))

    def volume(self) -> float:
        """Return the n-dimensional volume."""
        return math.prod(self.extents())

    def surface_area(self) -> float:
        """Return the (n-1)-dimensional volume of the boundary."""
        d = list(self.extents())
        total = sum(
            math.prod(value for j, value in enumerate(d) if j != i)
            for i in range(len(d))
        )
        return 2.0 * total

    def center(self) -> Point:
        return (self.max + self.min) * 0.5

    def contains(self, other: Vector | BoundingBox, strict: bool = False) -> bool:
        """Check whether a point or another box lies on or inside this box.

        An invalid box covers no space, so it is always contained.
        """
        if isinstance(other, BoundingBox):
            low, high = other.min, other.max
        else:
            low = high = other
        if strict:
            return all(a > m for a, m in zip(low, self.min)) and all(
                b < m for b, m in zip(high, self.max)
            )
        return all(a >= m for a, m in zip(low, self.min)) and all(
            b <= m for b, m in zip(high, self.max)
        )

    def overlaps(self, other: BoundingBox, strict: bool = False) -> bool:
        """Check two boxes for possible overlap."""
        if strict:
            return all(a < m for a, m in zip(other.min, self.max)) and all(
                b > m for b, m in zip(other.max, self.min)
            )
        return all(a <= m for a, m in zip(other.min, self.max)) and all(
            b >= m for b, m in zip(other.max, self.min)
        )

    def squared_distance_to(self, other: Vector | BoundingBox) -> float:
        """Return the smallest squared distance to a point or another box."""
        if isinstance(other, BoundingBox):
            low, high = other.min, other.max
        else:
            low = high = other
        result = 0.0
        for o_low, o_high, lo, hi in zip(low, high, self.min, self.max):
            if o_high < lo:
                value = lo - o_high
            elif o_low > hi:
                value = o_low - hi
            else:
                value = 0.0
            result += value * value
        return result

    def distance_to(self, other: Vector | BoundingBox) -> float:
        """Return the smallest distance to a point or another box."""
        return math.sqrt(self.squared_distance_to(other))

    def is_valid(self) -> bool:
        """Return whether ``min <= max`` holds along every dimension."""
        return all(hi >= lo for lo, hi in zip(self.min, self.max))

    def is_point(self) -> bool:
        return all(hi == lo for lo, hi in zip(self.min, self.max))

    def has_volume(self) -> bool:
        return all(hi > lo for lo, hi in zip(self.min, self.max))

    def major_axis(self) -> int:
        """Return the index of the longest side (first one on ties)."""
        d = self.extents()
        largest = 0
        for i in range(1, len(d)):
            if d[i] > d[largest]:
                largest = i
        return largest

    def minor_axis(self) -> int:
        """Return the index of the shortest side (first one on ties)."""
        d = self.extents()
        shortest = 0
        for i in range(1, len(d)):
            if d[i] < d[shortest]:
                shortest = i
        return shortest

    def largest_axis(self) -> int:
        """Return the first axis whose extent is at least every other extent."""
        d = list(self.extents())
        for i, value in enumerate(d):
            if all(value >= other for other in d):
                return i
        return len(d) - 1

    def clip(self, other: BoundingBox) -> None:
        """Shrink this box to its intersection with ``other``."""
        self.min = self.min.cwise_max(other.min)
        self.max = self.max.cwise_min(other.max)

    def reset(self) -> None:
        """Mark the box invalid (min = +inf, max = -inf)."""
        self.min = Point.constant(math.inf, self.dimension)
        self.max = Point.constant(-math.inf, self.dimension)

    def expand_by(self, other: Vector | BoundingBox) -> None:
        """Grow the box to contain a point or another box."""
        if isinstance(other, BoundingBox):
            low, high = Point(*other.min), Point(*other.max)
        else:
            low = high = Point(*other)
        self.min = self.min.cwise_min(low)
        self.max = self.max.cwise_max(high)

    @staticmethod
    def merge(first: BoundingBox, second: BoundingBox) -> BoundingBox:
        """Return the smallest box containing both boxes."""
        return BoundingBox(
            first.min.cwise_min(second.min), first.max.cwise_max(second.max)
        )

    def corner(self, index: int) -> Point:
        """Return the corner whose bit ``i`` selects max along axis ``i``."""
        return Point(
            *(
                hi if index & (1 << i) else lo
                for i, (lo, hi) in enumerate(zip(self.min, self.max))
            )
        )

    def __str__(self) -> str:
        if not self.is_valid():
            return "BoundingBox[invalid]"
        return f"BoundingBox[min={self.min}, max={self.max}]"