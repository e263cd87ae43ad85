"""Linear RGB colors and weighted colors."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterator
from numbers import Real


class _ColorArray:
    """Fixed-size array of floats with element-wise arithmetic."""

    __slots__ = ("_channels",)

    def __len__(self) -> int:
        return len(self._channels)

    def __iter__(self) -> Iterator[float]:
        return iter(self._channels)

    def __getitem__(self, index: int) -> float:
        return self._channels[index]

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._channels == other._channels

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._channels))

    def _apply(self, other: object, op: Callable[[float, float], float]):
        if isinstance(other, Real):
            return type(self)(*(op(c, other) for c in self))
        if type(other) is type(self):
            return type(self)(*(op(a, b) for a, b in zip(self, other)))
        return NotImplemented

    def __add__(self, other: object):
        return self._apply(other, operator.add)

    def __sub__(self, other: object):
        return self._apply(other, operator.sub)

    def __mul__(self, other: object):
        return self._apply(other, operator.mul)

    def __truediv__(self, other: object):
        return self._apply(other, operator.truediv)

    def __radd__(self, other: object):
        return self._apply(other, operator.add)

    def __rmul__(self, other: object):
        return self._apply(other, operator.mul)

    def __str__(self) -> str:
        return "[" + ", ".join(f"{c:f}" for c in self) + "]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(c) for c in self)})"


class Color3f(_ColorArray):
    """A linear RGB color."""

    __slots__ = ()

    def __init__(self, r: float = 0.0, g: float | None = None, b: float | None = None) -> None:
        if g is None and b is None:
            g = b = r
        elif g is None or b is None:
            raise TypeError("give either one value or all three channels")
        self._channels = (float(r), float(g), float(b))

    @property
    def r(self) -> float:
        return self._channels[0]

    @property
    def g(self) -> float:
        return self._channels[1]

    @property
    def b(self) -> float:
        return self._channels[2]

    def clamp(self) -> Color3f:
        """Clamp every channel to the non-negative range."""
        return Color3f(*(max(c, 0.0) for c in self))


class Color4f(_ColorArray):
    """A linear RGB color together with a filter weight."""

    __slots__ = ()

    def __init__(self, r: float = 0.0, g: float = 0.0, b: float = 0.0, w: float = 0.0) -> None:
        self._channels = (float(r), float(g), float(b), float(w))

    @classmethod
    def from_color3(cls, color: Color3f) -> Color4f:
        """Wrap a three-channel color with unit weight."""
        return cls(color.r, color.g, color.b, 1.0)

    @property
    def r(self) -> float:
        return self._channels[0]

    @property
    def g(self) -> float:
        return self._channels[1]

    @property
    def b(self) -> float:
        return self._channels[2]

    @property
    def w(self) -> float:
        return self._channels[3]

    def divide_by_filter_weight(self) -> Color3f:
        """Divide by the weight, giving black when the weight is zero."""
        if self.w != 0:
            return Color3f(self.r / self.w, self.g / self.w, self.b / self.w)
        return Color3f(0.0)