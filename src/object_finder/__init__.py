"""
object_finder: typed access to loosely-typed nested data
========================================================

object_finder reads values out of decoded JSON (maps and lists of unknown
shape) as the types a call site expects, without hand-written ``isinstance``
checks at every access.

Core Features:
- Ordered, non-throwing coercion of single values
- Element-wise sequence coercion that drops what does not convert
- Keyed accessors with default-or-raise policies
- Explicit type descriptors derived from ordinary annotations

Examples:
    import json
    from typing import Any, Dict

    from object_finder import find, find_or_null, finds

    data = json.loads(payload)

    user_id = find(data, int, "id")                   # "101" -> 101
    active = find(data, bool, "active")               # "true" -> True
    tags = finds(data, str, "tags")                   # ["vip", "loyal"]
    purchases = finds(data, Dict[str, Any], "purchases")
    price = find(purchases[0], float, "price")        # "12.99" -> 12.99
    nickname = find_or_null(data, str, "nickname", default="Guest")

    # Tune parsing with settings loaded from YAML and the environment
    from object_finder import Finder, load_settings

    finder = Finder(load_settings())
    finder.find(data, int, "id")
"""

from __future__ import annotations

import logging

from object_finder.core import (
    CoercedSequence,
    ConfigError,
    ElementResult,
    ElementResults,
    Finder,
    FinderError,
    InvalidKeyError,
    UnsupportedTypeError,
    ValueNotFoundError,
    coerce,
    coerce_each,
    coerce_each_strict,
    equals,
    find,
    find_by_key,
    find_or_null,
    finds,
    finds_by_key,
    finds_or_null,
    get,
    get_or_null,
    is_list,
    is_list_of_map,
    is_map,
    is_not_valid,
    is_valid,
    resolve,
    verified,
)
from object_finder.core.config import FinderSettings, load_settings
from object_finder.core.types import (
    DynamicKind,
    ScalarKind,
    TypeDescriptor,
    classify,
    describe,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Accessors
    "find",
    "find_or_null",
    "find_by_key",
    "finds",
    "finds_or_null",
    "finds_by_key",
    "get",
    "get_or_null",
    "resolve",
    "Finder",
    # Coercion
    "coerce",
    "coerce_each",
    "coerce_each_strict",
    "CoercedSequence",
    "ElementResult",
    "ElementResults",
    # Predicates
    "is_valid",
    "is_not_valid",
    "verified",
    "is_map",
    "is_list",
    "is_list_of_map",
    "equals",
    # Types
    "DynamicKind",
    "ScalarKind",
    "TypeDescriptor",
    "classify",
    "describe",
    # Settings
    "FinderSettings",
    "load_settings",
    # Exceptions
    "FinderError",
    "ValueNotFoundError",
    "UnsupportedTypeError",
    "InvalidKeyError",
    "ConfigError",
]
