"""
Target type descriptors.

A descriptor names the type a call site expects back from a dynamic value.
It is a small tagged variant:

- ``Scalar(kind)`` for booleans, integers, floats, generic numbers and strings
- ``SequenceOf(element)`` for homogeneous sequences
- ``MapOf(key, value)`` for mappings, optionally string-keyed and value-typed
- ``Dynamic()`` for "any present value"
- ``InstanceOf(cls)`` for any other class, usually paired with a builder

Callers rarely build descriptors by hand; :func:`describe` derives one from an
ordinary annotation such as ``int`` or ``List[Dict[str, Any]]``.
"""

from __future__ import annotations

import numbers
import types
from collections import abc
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union, get_args, get_origin

from object_finder.core.exceptions import UnsupportedTypeError
from object_finder.core.types.dynamic import DynamicKind, classify


class ScalarKind(str, Enum):
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    NUMBER = "number"
    STRING = "str"


@dataclass(frozen=True)
class Scalar:
    """A primitive JSON scalar type."""

    kind: ScalarKind

    def accepts(self, value: Any) -> bool:
        tag = classify(value)
        if self.kind is ScalarKind.BOOL:
            return tag is DynamicKind.BOOL
        if self.kind is ScalarKind.STRING:
            return tag is DynamicKind.STRING
        if tag is not DynamicKind.NUMBER:
            return False
        if self.kind is ScalarKind.INT:
            return isinstance(value, int)
        if self.kind is ScalarKind.FLOAT:
            return isinstance(value, float)
        return True

    def __str__(self) -> str:
        return self.kind.value


@dataclass(frozen=True)
class Dynamic:
    """Any present value; nothing is converted."""

    def accepts(self, value: Any) -> bool:
        return value is not None

    def __str__(self) -> str:
        return "Any"


@dataclass(frozen=True)
class InstanceOf:
    """An arbitrary class, matched with ``isinstance``."""

    cls: type

    def accepts(self, value: Any) -> bool:
        return isinstance(value, self.cls)

    def __str__(self) -> str:
        return self.cls.__name__


@dataclass(frozen=True)
class SequenceOf:
    """A homogeneous sequence of ``element``.

    Only an untyped sequence is accepted as-is. Typed sequences are always
    rebuilt element by element so that unconvertible elements get dropped.
    """

    element: "TypeDescriptor"

    def accepts(self, value: Any) -> bool:
        return isinstance(self.element, Dynamic) and classify(value) is DynamicKind.SEQUENCE

    def __str__(self) -> str:
        return f"List[{self.element}]"


@dataclass(frozen=True)
class MapOf:
    """A mapping, optionally with string keys and typed values.

    Attributes:
        key: ``None`` for opaque keys or ``ScalarKind.STRING`` for string keys.
        value: ``None`` for untyped values, otherwise the descriptor each value
            is coerced to.
    """

    key: Optional[ScalarKind] = None
    value: Optional["TypeDescriptor"] = None

    def __post_init__(self) -> None:
        if self.key is not None:
            if ScalarKind(self.key) is not ScalarKind.STRING:
                raise UnsupportedTypeError(f"Mapping keys must be untyped or str, got {self.key}")
            object.__setattr__(self, "key", ScalarKind.STRING)
        if isinstance(self.value, Dynamic):
            object.__setattr__(self, "value", None)

    @property
    def string_keyed(self) -> bool:
        return self.key is ScalarKind.STRING

    def accepts(self, value: Any) -> bool:
        if classify(value) is not DynamicKind.MAPPING or self.value is not None:
            return False
        if self.string_keyed:
            return all(isinstance(k, str) for k in value)
        return True

    def __str__(self) -> str:
        key = "str" if self.string_keyed else "Any"
        value = "Any" if self.value is None else str(self.value)
        return f"Dict[{key}, {value}]"


TypeDescriptor = Union[Scalar, SequenceOf, MapOf, Dynamic, InstanceOf]

BOOL = Scalar(ScalarKind.BOOL)
INT = Scalar(ScalarKind.INT)
FLOAT = Scalar(ScalarKind.FLOAT)
NUMBER = Scalar(ScalarKind.NUMBER)
STRING = Scalar(ScalarKind.STRING)
ANY = Dynamic()

_DESCRIPTOR_TYPES = (Scalar, SequenceOf, MapOf, Dynamic, InstanceOf)

_SCALARS = {
    bool: BOOL,
    int: INT,
    float: FLOAT,
    str: STRING,
    numbers.Number: NUMBER,
    numbers.Real: NUMBER,
}

_SEQUENCE_ORIGINS = (list, tuple, abc.Sequence, abc.MutableSequence, abc.Iterable, abc.Collection)
_MAPPING_ORIGINS = (dict, abc.Mapping, abc.MutableMapping)
_UNTYPED = (Any, object)


def _is_union(origin: Any) -> bool:
    return origin is Union or origin is types.UnionType


def _describe_union(target: Any, args: tuple) -> TypeDescriptor:
    members = [arg for arg in args if arg is not type(None)]
    if len(members) == 1:
        return describe(members[0])
    if set(members) == {int, float}:
        return NUMBER
    raise UnsupportedTypeError(f"Cannot describe union type {target!r}")


def _describe_mapping(target: Any, args: tuple) -> MapOf:
    key, value = args if args else (Any, Any)
    if key in _UNTYPED:
        key_kind = None
    elif key is str:
        key_kind = ScalarKind.STRING
    else:
        raise UnsupportedTypeError(f"Mapping keys must be str or Any in {target!r}")
    return MapOf(key_kind, None if value in _UNTYPED else describe(value))


def describe(target: Any) -> TypeDescriptor:
    """Build a descriptor from a Python annotation.

    Descriptors are returned unchanged, so every public function accepts either.

    Args:
        target: A type, a ``typing`` annotation, or a descriptor.

    Returns:
        The matching descriptor.

    Raises:
        UnsupportedTypeError: If the annotation has no descriptor, such as a
            union of unrelated types or a mapping keyed by ``int``.

    Examples:
        >>> describe(int)
        Scalar(kind=<ScalarKind.INT: 'int'>)
        >>> str(describe(List[Dict[str, Any]]))
        'List[Dict[str, Any]]'
    """
    if isinstance(target, _DESCRIPTOR_TYPES):
        return target
    if target in _UNTYPED:
        return ANY
    if isinstance(target, type) and target in _SCALARS:
        return _SCALARS[target]

    origin = get_origin(target)
    args = get_args(target)

    if origin is None:
        if target in _SEQUENCE_ORIGINS:
            return SequenceOf(ANY)
        if target in _MAPPING_ORIGINS:
            return MapOf()
        if isinstance(target, type):
            return InstanceOf(target)
        raise UnsupportedTypeError(f"Cannot describe {target!r}")

    if _is_union(origin):
        return _describe_union(target, args)
    if origin in _SEQUENCE_ORIGINS:
        if origin is tuple and args and (len(args) != 2 or args[1] is not Ellipsis):
            raise UnsupportedTypeError(f"Only variadic tuples are supported, got {target!r}")
        return SequenceOf(describe(args[0]) if args else ANY)
    if origin in _MAPPING_ORIGINS:
        return _describe_mapping(target, args)
    raise UnsupportedTypeError(f"Cannot describe {target!r}")


__all__ = [
    "ScalarKind",
    "Scalar",
    "Dynamic",
    "InstanceOf",
    "SequenceOf",
    "MapOf",
    "TypeDescriptor",
    "BOOL",
    "INT",
    "FLOAT",
    "NUMBER",
    "STRING",
    "ANY",
    "describe",
]
