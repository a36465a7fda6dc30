"""
object_finder type system.

This module provides the runtime tags for dynamic values, the target type
descriptors the coercers dispatch on, and the builder protocol.
"""

from object_finder.core.types.descriptors import (
    ANY,
    BOOL,
    FLOAT,
    INT,
    NUMBER,
    STRING,
    Dynamic,
    InstanceOf,
    MapOf,
    Scalar,
    ScalarKind,
    SequenceOf,
    TypeDescriptor,
    describe,
)
from object_finder.core.types.dynamic import DynamicKind, classify
from object_finder.core.types.protocols import Builder, T

__all__ = [
    # Dynamic values
    "DynamicKind",
    "classify",
    # Descriptors
    "ScalarKind",
    "Scalar",
    "Dynamic",
    "InstanceOf",
    "SequenceOf",
    "MapOf",
    "TypeDescriptor",
    "describe",
    "BOOL",
    "INT",
    "FLOAT",
    "NUMBER",
    "STRING",
    "ANY",
    # Protocols
    "Builder",
    "T",
]
