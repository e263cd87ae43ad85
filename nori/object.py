"""Base class of scene objects and the factory that builds them by name."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from enum import IntEnum
from typing import ClassVar, TypeVar

from nori.proplist import NoriError, PropertyList


class ClassType(IntEnum):
    """The kind of a scene object."""

    SCENE = 0
    MESH = 1
    BSDF = 2
    PHASE_FUNCTION = 3
    EMITTER = 4
    MEDIUM = 5
    CAMERA = 6
    INTEGRATOR = 7
    SAMPLER = 8
    TEST = 9
    RECONSTRUCTION_FILTER = 10


_CLASS_TYPE_NAMES = {
    ClassType.SCENE: "scene",
    ClassType.MESH: "mesh",
    ClassType.BSDF: "bsdf",
    ClassType.EMITTER: "emitter",
    ClassType.CAMERA: "camera",
    ClassType.INTEGRATOR: "integrator",
    ClassType.SAMPLER: "sampler",
    ClassType.TEST: "test",
}


def class_type_name(class_type: ClassType) -> str:
    """Return the human-readable name of a class type."""
    return _CLASS_TYPE_NAMES.get(class_type, "<unknown>")


class NoriObject(ABC):
    """An instance that is part of a scene description."""

    @property
    @abstractmethod
    def class_type(self) -> ClassType:
        """The kind of object this instance provides."""

    @abstractmethod
    def __str__(self) -> str:
        """A brief summary of the instance."""

    def add_child(self, child: NoriObject) -> None:
        """Attach a child object; unsupported unless a subclass allows it."""
        raise NoriError(
            f"{type(self).__name__}.add_child(<{class_type_name(child.class_type)}>)"
            " is not supported!"
        )

    def set_parent(self, parent: NoriObject) -> None:
        """Be told of the parent object; ignored unless a subclass cares."""

    def activate(self) -> None:
        """Perform the action associated with the object once it is built."""
        raise NoriError(
            f"{type(self).__name__}.activate() is not supported!"
        )


Constructor = Callable[[PropertyList], NoriObject]
_T = TypeVar("_T")


class ObjectFactory:
    """Builds scene objects from the names they are registered under."""

    _constructors: ClassVar[dict[str, Constructor]] = {}

    @classmethod
    def register(cls, name: str, constructor: Constructor) -> None:
        """Associate ``name`` with a callable taking a :class:`PropertyList`."""
        cls._constructors[name] = constructor

    @classmethod
    def create(cls, name: str, properties: PropertyList) -> NoriObject:
        """Build an instance of the class registered under ``name``."""
        try:
            constructor = cls._constructors[name]
        except KeyError:
            raise NoriError(
                f'A constructor for class "{name}" could not be found!'
            ) from None
        return constructor(properties)


def register_class(name: str) -> Callable[[_T], _T]:
    """Class decorator registering the class with :class:`ObjectFactory`."""

    def decorator(cls: _T) -> _T:
        ObjectFactory.register(name, cls)
        return cls

    return decorator