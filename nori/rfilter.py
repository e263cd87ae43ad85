"""Image reconstruction filters."""

from __future__ import annotations

import math
from abc import abstractmethod

from nori.object import ClassType, NoriObject, register_class
from nori.proplist import PropertyList, PropertyType


class ReconstructionFilter(NoriObject):
    """A separable filter weighting samples by their distance to a pixel."""

    radius: float = 0.0

    @property
    def class_type(self) -> ClassType:
        return ClassType.RECONSTRUCTION_FILTER

    @abstractmethod
    def eval(self, x: float) -> float:
        """Evaluate the one-dimensional filter at offset ``x``."""


@register_class("gaussian")
class GaussianFilter(ReconstructionFilter):
    """Windowed Gaussian filter with configurable extent and deviation."""

    def __init__(self, properties: PropertyList | None = None) -> None:
        properties = properties if properties is not None else PropertyList()
        self.radius = properties.get("radius", PropertyType.FLOAT, 2.0)
        self.stddev = properties.get("stddev", PropertyType.FLOAT, 0.5)

    def eval(self, x: float) -> float:
        alpha = -1.0 / (2.0 * self.stddev * self.stddev)
        return max(
            0.0,
            math.exp(alpha * x * x) - math.exp(alpha * self.radius * self.radius),
        )

    def __str__(self) -> str:
        return f"GaussianFilter[radius={self.radius:f}, stddev={self.stddev:f}]"


@register_class("mitchell")
class MitchellNetravaliFilter(ReconstructionFilter):
    """Separable cubic filter of Mitchell and Netravali."""

    def __init__(self, properties: PropertyList | None = None) -> None:
        properties = properties if properties is not None else PropertyList()
        self.radius = properties.get("radius", PropertyType.FLOAT, 2.0)
        self.b = properties.get("B", PropertyType.FLOAT, 1.0 / 3.0)
        self.c = properties.get("C", PropertyType.FLOAT, 1.0 / 3.0)

    def eval(self, x: float) -> float:
        b, c = self.b, self.c
        x = abs(2.0 * x / self.radius)
        x2 = x * x
        x3 = x2 * x
        if x < 1:
            return (
                (12 - 9 * b - 6 * c) * x3
                + (-18 + 12 * b + 6 * c) * x2
                + (6 - 2 * b)
            ) / 6.0
        if x < 2:
            return (
                (-b - 6 * c) * x3
                + (6 * b + 30 * c) * x2
                + (-12 * b - 48 * c) * x
                + (8 * b + 24 * c)
            ) / 6.0
        return 0.0

    def __str__(self) -> str:
        return (
            f"MitchellNetravaliFilter[radius={self.radius:f}, "
            f"B={self.b:f}, C={self.c:f}]"
        )


@register_class("tent")
class TentFilter(ReconstructionFilter):
    """Tent filter of unit radius."""

    def __init__(self, properties: PropertyList | None = None) -> None:
        self.radius = 1.0

    def eval(self, x: float) -> float:
        return max(0.0, 1.0 - abs(x))

    def __str__(self) -> str:
        return "TentFilter[]"


@register_class("box")
class BoxFilter(ReconstructionFilter):
    """Box filter: fastest, but prone to aliasing."""

    def __init__(self, properties: PropertyList | None = None) -> None:
        self.radius = 0.5

    def eval(self, x: float) -> float:
        return 1.0

    def __str__(self) -> str:
        return "BoxFilter[]"