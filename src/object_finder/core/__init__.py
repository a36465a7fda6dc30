"""
Core of object_finder: dynamic value tags, type descriptors, the coercion
engine and the accessors built on it.
"""

from object_finder.core.coercion import (
    CoercedSequence,
    ElementResult,
    ElementResults,
    coerce,
    coerce_each,
    coerce_each_strict,
)
from object_finder.core.exceptions import (
    ConfigError,
    FinderError,
    InvalidKeyError,
    UnsupportedTypeError,
    ValueNotFoundError,
)
from object_finder.core.finder import (
    Finder,
    find,
    find_by_key,
    find_or_null,
    finds,
    finds_by_key,
    finds_or_null,
    get,
    get_or_null,
    resolve,
)
from object_finder.core.predicates import (
    equals,
    is_list,
    is_list_of_map,
    is_map,
    is_not_valid,
    is_valid,
    verified,
)

__all__ = [
    # Coercion
    "coerce",
    "coerce_each",
    "coerce_each_strict",
    "CoercedSequence",
    "ElementResult",
    "ElementResults",
    # Accessors
    "Finder",
    "resolve",
    "find",
    "find_or_null",
    "find_by_key",
    "finds",
    "finds_or_null",
    "finds_by_key",
    "get",
    "get_or_null",
    # Predicates
    "is_valid",
    "is_not_valid",
    "verified",
    "is_map",
    "is_list",
    "is_list_of_map",
    "equals",
    # Exceptions
    "FinderError",
    "ValueNotFoundError",
    "UnsupportedTypeError",
    "InvalidKeyError",
    "ConfigError",
]
