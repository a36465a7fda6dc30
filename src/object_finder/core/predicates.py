"""Shape predicates over dynamic values."""

from typing import Any, Optional

from object_finder.core.types.dynamic import DynamicKind, classify


def is_valid(value: Any) -> bool:
    return value is not None


def is_not_valid(value: Any) -> bool:
    return not is_valid(value)


def verified(value: Any) -> Optional[Any]:
    """Return ``value`` when it is present, otherwise None."""
    return value if is_valid(value) else None


def is_map(value: Any) -> bool:
    return classify(value) is DynamicKind.MAPPING


def is_list(value: Any) -> bool:
    return classify(value) is DynamicKind.SEQUENCE


def is_list_of_map(value: Any) -> bool:
    """Whether ``value`` is a sequence whose elements are all mappings.

    An empty sequence qualifies.
    """
    return is_list(value) and all(is_map(element) for element in value)


def equals(value: Any, other: Any) -> bool:
    """Value equality that also requires the exact same runtime type.

    ``equals(5, 5)`` is True while ``equals(5, 5.0)`` and ``equals(1, True)``
    are False.
    """
    return value is not None and value == other and type(value) is type(other)


__all__ = [
    "is_valid",
    "is_not_valid",
    "verified",
    "is_map",
    "is_list",
    "is_list_of_map",
    "equals",
]
