"""Typed, named parameters handed to object constructors."""

from __future__ import annotations

import operator
import sys
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any

from nori.color import Color3f
from nori.vector import Point, Vector


class NoriError(Exception):
    """Raised for invalid scene descriptions and object configurations."""


class PropertyType(Enum):
    """The kinds of value a property may hold, named as in scene files."""

    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    COLOR = "color"
    POINT = "point"
    VECTOR = "vector"
    TRANSFORM = "transform"


def _as_boolean(value: Any) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"expected a bool, got {type(value).__name__}")
    return value


def _as_integer(value: Any) -> int:
    if isinstance(value, bool):
        raise TypeError("expected an int, got bool")
    return operator.index(value)


def _as_float(value: Any) -> float:
    return float(value)


def _as_string(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected a str, got {type(value).__name__}")
    return value


def _as_color(value: Any) -> Color3f:
    if isinstance(value, Color3f):
        return value
    return Color3f(*value)


def _as_point(value: Any) -> Point:
    return Point(*value)


def _as_vector(value: Any) -> Vector:
    return Vector(*value)


def _as_transform(value: Any) -> Any:
    if value is None:
        raise TypeError("expected a transform, got None")
    return value


_CONVERTERS: dict[PropertyType, Callable[[Any], Any]] = {
    PropertyType.BOOLEAN: _as_boolean,
    PropertyType.INTEGER: _as_integer,
    PropertyType.FLOAT: _as_float,
    PropertyType.STRING: _as_string,
    PropertyType.COLOR: _as_color,
    PropertyType.POINT: _as_point,
    PropertyType.VECTOR: _as_vector,
    PropertyType.TRANSFORM: _as_transform,
}


@dataclass(frozen=True)
class _Property:
    kind: PropertyType
    value: Any


class PropertyList:
    """An associative container of typed properties."""

    def __init__(self) -> None:
        self._properties: dict[str, _Property] = {}

    def set(self, name: str, kind: PropertyType | str, value: Any) -> None:
        """Store ``value`` under ``name`` as a property of the given kind.

        Setting a name twice replaces the old value and prints a warning.
        """
        kind = PropertyType(kind)
        converted = _CONVERTERS[kind](value)
        if name in self._properties:
            print(
                f'Property "{name}" was specified multiple times!',
                file=sys.stderr,
            )
        self._properties[name] = _Property(kind, converted)

    def get(self, name: str, kind: PropertyType | str, *args: Any) -> Any:
        """Return the property ``name``, which must be of the given kind.

        An optional extra argument is returned when the property is missing;
        without it a missing property raises :class:`NoriError`.
        """
        if len(args) > 1:
            raise TypeError(
                f"get() takes at most one default value ({len(args)} given)"
            )
        kind = PropertyType(kind)
        prop = self._properties.get(name)
        if prop is None:
            if args:
                return args[0]
            raise NoriError(f"Property '{name}' is missing!")
        if prop.kind is not kind:
            raise NoriError(
                f"Property '{name}' has the wrong type! "
                f"(expected <{kind.value}>)!"
            )
        return prop.value

    def __contains__(self, name: object) -> bool:
        return name in self._properties

    def __len__(self) -> int:
        return len(self._properties)

    def __iter__(self) -> Iterator[str]:
        return iter(self._properties)