"""
Typed accessors over decoded JSON-like containers.

Every accessor resolves an optional key against a container, coerces what it
finds, and then applies a default-or-raise policy:

- ``find_or_null`` / ``finds_or_null`` fall back to ``default`` (None unless
  given).
- ``find`` / ``finds`` raise :class:`ValueNotFoundError` when that fallback is
  itself None.
- ``find_by_key`` / ``finds_by_key`` insist on a string key.
- ``get`` / ``get_or_null`` are ``find`` / ``find_or_null`` with positional
  arguments.

Without a key the container itself is the value, which lets the result of one
lookup feed straight into a typed conversion:

    >>> data = {"user": {"id": "123", "roles": ["admin", "editor"]}}
    >>> user = get(data, dict, "user")
    >>> find(user, int, "id")
    123
    >>> finds(user, str, "roles")
    ['admin', 'editor']
"""

from typing import Any, List, Optional, Sequence

from object_finder.core.coercion import (
    CoercedSequence,
    ElementResults,
    coerce,
    coerce_each,
    coerce_each_strict,
)
from object_finder.core.config.schema import DEFAULT_SETTINGS, FinderSettings
from object_finder.core.exceptions import InvalidKeyError, ValueNotFoundError
from object_finder.core.types.descriptors import SequenceOf, describe
from object_finder.core.types.dynamic import DynamicKind, classify
from object_finder.core.types.protocols import Builder, T
from object_finder.core.utils.logging import get_logger

logger = get_logger(__name__)


def resolve(container: Any, key: Optional[Any] = None) -> Any:
    """Return the value a lookup operates on.

    Args:
        container: A mapping, a sequence, or any dynamic value.
        key: Mapping key, or None to use ``container`` itself.

    Returns:
        ``container`` when ``key`` is None, ``container[key]`` when
        ``container`` is a mapping holding ``key``, otherwise None.
    """
    if key is None:
        return container
    if classify(container) is not DynamicKind.MAPPING:
        return None
    try:
        return container.get(key)
    except TypeError:
        # Unhashable keys cannot be present.
        return None


def _require_string_key(key: Any) -> str:
    if not isinstance(key, str):
        raise InvalidKeyError(f"Key must be a str, got {type(key).__name__}")
    return key


class Finder:
    """Coercers and accessors bound to one set of parsing settings.

    A Finder holds nothing but its frozen settings, so a single instance can
    be shared across threads.

    Args:
        settings: Parsing options; the defaults when omitted.
    """

    def __init__(self, settings: Optional[FinderSettings] = None) -> None:
        self._settings = settings if settings is not None else DEFAULT_SETTINGS

    @property
    def settings(self) -> FinderSettings:
        return self._settings

    def __repr__(self) -> str:
        return f"Finder({self._settings!r})"

    # Coercers

    def coerce(self, source: Any, target: Any, builder: Optional[Builder[T]] = None) -> Optional[T]:
        return coerce(source, target, builder, settings=self._settings)

    def coerce_each(
        self, source: Any, target: Any, builder: Optional[Builder[T]] = None
    ) -> Optional[CoercedSequence[T]]:
        return coerce_each(source, target, builder, settings=self._settings)

    def coerce_each_strict(
        self, source: Any, target: Any, builder: Optional[Builder[T]] = None
    ) -> Optional[ElementResults[T]]:
        return coerce_each_strict(source, target, builder, settings=self._settings)

    # Single values

    def find_or_null(
        self,
        container: Any,
        target: Any,
        key: Optional[Any] = None,
        *,
        default: Optional[T] = None,
        builder: Optional[Builder[T]] = None,
    ) -> Optional[T]:
        """Coerce the value at ``key`` (or ``container`` itself) to ``target``.

        Returns:
            The coerced value, or ``default`` when there is nothing to coerce
            or it does not convert.
        """
        value = coerce(resolve(container, key), target, builder, settings=self._settings)
        return default if value is None else value

    def find(
        self,
        container: Any,
        target: Any,
        key: Optional[Any] = None,
        *,
        default: Optional[T] = None,
        builder: Optional[Builder[T]] = None,
    ) -> T:
        """Like :meth:`find_or_null`, but a missing result is an error.

        Raises:
            ValueNotFoundError: If nothing converted and ``default`` is None.
        """
        value = self.find_or_null(container, target, key, default=default, builder=builder)
        if value is None:
            logger.debug("No %s value for key %r", describe(target), key)
            raise ValueNotFoundError(target, key)
        return value

    def find_by_key(
        self,
        container: Any,
        target: Any,
        key: str,
        *,
        default: Optional[T] = None,
        builder: Optional[Builder[T]] = None,
    ) -> T:
        return self.find(
            container, target, _require_string_key(key), default=default, builder=builder
        )

    def get_or_null(
        self,
        container: Any,
        target: Any,
        key: Optional[Any] = None,
        default: Optional[T] = None,
        builder: Optional[Builder[T]] = None,
    ) -> Optional[T]:
        return self.find_or_null(container, target, key, default=default, builder=builder)

    def get(
        self,
        container: Any,
        target: Any,
        key: Optional[Any] = None,
        default: Optional[T] = None,
        builder: Optional[Builder[T]] = None,
    ) -> T:
        return self.find(container, target, key, default=default, builder=builder)

    # Lists

    def finds_or_null(
        self,
        container: Any,
        target: Any,
        key: Optional[Any] = None,
        *,
        default: Optional[Sequence[T]] = None,
        builder: Optional[Builder[T]] = None,
    ) -> Optional[List[T]]:
        """Coerce each element of the sequence at ``key`` to ``target``.

        ``target`` names the element type. Elements that do not convert are
        dropped.

        Returns:
            A new list of the converted elements, or ``default`` (copied into a
            list) when the value is missing, is not a sequence, or nothing in it
            converted.
        """
        sequence = coerce_each(resolve(container, key), target, builder, settings=self._settings)
        values = sequence.to_list() if sequence is not None else []
        if values:
            return values
        return None if default is None else list(default)

    def finds(
        self,
        container: Any,
        target: Any,
        key: Optional[Any] = None,
        *,
        default: Optional[Sequence[T]] = (),
        builder: Optional[Builder[T]] = None,
    ) -> List[T]:
        """Like :meth:`finds_or_null` with an empty list as the default.

        Raises:
            ValueNotFoundError: Only if the caller passed ``default=None`` and
                nothing converted.
        """
        values = self.finds_or_null(container, target, key, default=default, builder=builder)
        if values is None:
            expected = SequenceOf(describe(target))
            logger.debug("No %s value for key %r", expected, key)
            raise ValueNotFoundError(expected, key)
        return values

    def finds_by_key(
        self,
        container: Any,
        target: Any,
        key: str,
        *,
        default: Optional[Sequence[T]] = (),
        builder: Optional[Builder[T]] = None,
    ) -> List[T]:
        return self.finds(
            container, target, _require_string_key(key), default=default, builder=builder
        )


_default_finder = Finder()

find = _default_finder.find
find_or_null = _default_finder.find_or_null
find_by_key = _default_finder.find_by_key
finds = _default_finder.finds
finds_or_null = _default_finder.finds_or_null
finds_by_key = _default_finder.finds_by_key
get = _default_finder.get
get_or_null = _default_finder.get_or_null

__all__ = [
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
]
