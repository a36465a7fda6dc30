"""
Runtime tagging of dynamic values.

Decoded JSON arrives as plain Python objects whose shape is only known at
runtime. This module gives every such value an explicit tag so the coercion
rules can dispatch on the tag instead of on ad-hoc ``isinstance`` chains.
"""

from __future__ import annotations

import numbers
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any


class DynamicKind(str, Enum):
    """Runtime shape of a dynamic value."""

    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    OTHER = "other"


# Text and binary types are Sequences in Python but scalars in JSON.
_NON_SEQUENCE_TYPES = (str, bytes, bytearray)


def classify(value: Any) -> DynamicKind:
    """Return the runtime tag of ``value``.

    ``bool`` is checked before numbers because it subclasses ``int``.

    Examples:
        >>> classify(None)
        <DynamicKind.NULL: 'null'>
        >>> classify(True)
        <DynamicKind.BOOL: 'bool'>
        >>> classify(["a", 1])
        <DynamicKind.SEQUENCE: 'sequence'>
    """
    if value is None:
        return DynamicKind.NULL
    if isinstance(value, bool):
        return DynamicKind.BOOL
    if isinstance(value, numbers.Real):
        return DynamicKind.NUMBER
    if isinstance(value, str):
        return DynamicKind.STRING
    if isinstance(value, Mapping):
        return DynamicKind.MAPPING
    if isinstance(value, Sequence) and not isinstance(value, _NON_SEQUENCE_TYPES):
        return DynamicKind.SEQUENCE
    return DynamicKind.OTHER


__all__ = ["DynamicKind", "classify"]
