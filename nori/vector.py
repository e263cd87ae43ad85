"""Points, vectors and normals of any dimension."""

from __future__ import annotations

import math
import operator
from collections.abc import Callable, Iterator
from numbers import Real


class Vector:
    """An immutable N-dimensional vector of floats."""

    __slots__ = ("_components",)

    def __init__(self, *components: float) -> None:
        if not components:
            raise ValueError("a vector needs at least one component")
        self._components = tuple(float(c) for c in components)

    @classmethod
    def constant(cls, value: float, dimension: int):
        """Return a vector whose components all equal ``value``."""
        if dimension < 1:
            raise ValueError("dimension must be at least 1")
        return cls(*([value] * dimension))

    @property
    def dimension(self) -> int:
        return len(self._components)

    @property
    def x(self) -> float:
        return self._components[0]

    @property
    def y(self) -> float:
        return self._components[1]

    @property
    def z(self) -> float:
        return self._components[2]

    @property
    def w(self) -> float:
        return self._components[3]

    def __len__(self) -> int:
        return len(self._components)

    def __iter__(self) -> Iterator[float]:
        return iter(self._components)

    def __getitem__(self, index: int) -> float:
        return self._components[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._components == other._components

    def __hash__(self) -> int:
        return hash(self._components)

    def _require_same_dimension(self, other: Vector) -> None:
        if len(other) != len(self):
            raise ValueError(
                f"dimension mismatch: {len(self)} and {len(other)}"
            )

    def _zip_with(self, other: Vector, op: Callable[[float, float], float]):
        self._require_same_dimension(other)
        return type(self)(*(op(a, b) for a, b in zip(self, other)))

    def __add__(self, other: object):
        if not isinstance(other, Vector):
            return NotImplemented
        return self._zip_with(other, operator.add)

    def __sub__(self, other: object):
        if not isinstance(other, Vector):
            return NotImplemented
        return self._zip_with(other, operator.sub)

    def __mul__(self, scalar: object):
        if not isinstance(scalar, Real):
            return NotImplemented
        return type(self)(*(c * scalar for c in self))

    __rmul__ = __mul__

    def __truediv__(self, scalar: object):
        if not isinstance(scalar, Real):
            return NotImplemented
        return type(self)(*(c / scalar for c in self))

    def __neg__(self):
        return type(self)(*(-c for c in self))

    def dot(self, other: Vector) -> float:
        """Return the inner product with ``other``."""
        self._require_same_dimension(other)
        return sum(a * b for a, b in zip(self, other))

    def cross(self, other: Vector):
        """Return the cross product with ``other`` (3D only)."""
        if len(self) != 3 or len(other) != 3:
            raise ValueError("the cross product needs two 3D vectors")
        ax, ay, az = self
        bx, by, bz = other
        return type(self)(ay * bz - az * by, az * bx - ax * bz, ax * by - ay * bx)

    def squared_norm(self) -> float:
        return self.dot(self)

    def norm(self) -> float:
        return math.sqrt(self.squared_norm())

    def normalized(self):
        """Return a unit-length copy; a zero vector is returned unchanged."""
        length = self.norm()
        if length == 0:
            return type(self)(*self)
        return self / length

    def cwise_min(self, other: Vector):
        return self._zip_with(other, min)

    def cwise_max(self, other: Vector):
        return self._zip_with(other, max)

    def __str__(self) -> str:
        return "[" + ", ".join(f"{c:f}" for c in self) + "]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(c) for c in self)})"


class Point(Vector):
    """A position in space."""

    __slots__ = ()


class Normal(Vector):
    """A surface normal."""

    __slots__ = ()