"""
Coercion engine.

``coerce`` converts one dynamic value to a target type and ``coerce_each``
converts a dynamic sequence element by element. Neither ever raises for a
value it cannot convert: a miss is reported as None, and in sequences the
element is simply left out. Exceptions raised by a caller-supplied builder
propagate unchanged.

Rules for a single value, first match wins:

1. None stays None.
2. A builder, when given, decides alone.
3. A value that already has the target shape is returned unchanged.
4. Numbers become ints (truncated), floats, or strings.
5. Strings are parsed as numbers for int, float and number targets.
6. Strings ``"true"`` / ``"false"`` become booleans.
7. Sequences are rebuilt element-wise for typed sequence targets, and
   mappings are re-keyed or have their values coerced for typed mapping
   targets. An empty rebuilt sequence counts as a miss.
8. Anything else is a miss.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Generic, Iterable, Iterator, List, Optional

from object_finder.core.config.schema import DEFAULT_SETTINGS, FinderSettings
from object_finder.core.parsing import parse_bool, parse_number
from object_finder.core.types.descriptors import (
    MapOf,
    Scalar,
    ScalarKind,
    SequenceOf,
    TypeDescriptor,
    describe,
)
from object_finder.core.types.dynamic import DynamicKind, classify
from object_finder.core.types.protocols import Builder, T
from object_finder.core.utils.logging import get_logger

logger = get_logger(__name__)


def _truncate(number: Any) -> Optional[int]:
    if isinstance(number, float) and not math.isfinite(number):
        return None
    return int(number)


def _to_float(number: Any) -> float:
    try:
        return float(number)
    except OverflowError:
        return math.inf if number > 0 else -math.inf


def _format_number(number: Any) -> Optional[str]:
    if isinstance(number, float) and not math.isfinite(number):
        if math.isnan(number):
            return "NaN"
        return "Infinity" if number > 0 else "-Infinity"
    try:
        return str(number)
    except ValueError:
        return None


def _from_number(number: Any, kind: ScalarKind) -> Optional[Any]:
    if kind is ScalarKind.INT:
        return _truncate(number)
    if kind is ScalarKind.FLOAT:
        return _to_float(number)
    if kind is ScalarKind.STRING:
        return _format_number(number)
    return None


def _from_string(text: str, kind: ScalarKind, settings: FinderSettings) -> Optional[Any]:
    if kind is ScalarKind.BOOL:
        return parse_bool(text, settings)
    if kind is ScalarKind.STRING:
        return None
    number = parse_number(text, settings)
    if number is None:
        return None
    if kind is ScalarKind.INT:
        return _truncate(number)
    if kind is ScalarKind.FLOAT:
        return _to_float(number)
    return number


def stringify_key(key: Any) -> Optional[str]:
    """Render a mapping key the way a JSON producer would.

    Returns None for a number too large to print.
    """
    if isinstance(key, bool):
        return "true" if key else "false"
    if key is None:
        return "null"
    if isinstance(key, (int, float)):
        return _format_number(key)
    return str(key)


def _from_mapping(source: Any, descriptor: MapOf, settings: FinderSettings) -> Dict[Any, Any]:
    entries: Dict[Any, Any] = {}
    for key, value in source.items():
        if descriptor.string_keyed:
            key = stringify_key(key)
            if key is None:
                continue
        if descriptor.value is not None:
            value = _coerce(value, descriptor.value, None, settings)
            if value is None:
                continue
        entries[key] = value
    return entries


def _iter_coerced(
    source: Iterable[Any],
    descriptor: TypeDescriptor,
    builder: Optional[Builder[Any]],
    settings: FinderSettings,
) -> Iterator[Any]:
    for element in source:
        value = _coerce(element, descriptor, builder, settings)
        if value is not None:
            yield value


def _coerce(
    source: Any,
    descriptor: TypeDescriptor,
    builder: Optional[Builder[Any]],
    settings: FinderSettings,
) -> Optional[Any]:
    if source is None:
        return None
    if builder is not None:
        return builder(source)
    if descriptor.accepts(source):
        return source

    tag = classify(source)
    value: Optional[Any] = None
    if isinstance(descriptor, Scalar):
        if tag is DynamicKind.NUMBER:
            value = _from_number(source, descriptor.kind)
        elif tag is DynamicKind.STRING:
            value = _from_string(source, descriptor.kind, settings)
    elif isinstance(descriptor, SequenceOf) and tag is DynamicKind.SEQUENCE:
        value = list(_iter_coerced(source, descriptor.element, None, settings)) or None
    elif isinstance(descriptor, MapOf) and tag is DynamicKind.MAPPING:
        value = _from_mapping(source, descriptor, settings)

    if value is None and settings.log_misses:
        logger.debug("Could not coerce %s value %r to %s", tag.value, source, descriptor)
    return value


@dataclass(frozen=True)
class ElementResult(Generic[T]):
    """Outcome of coercing one element of a sequence.

    Attributes:
        index: Position of the element in the source sequence.
        source: The element as it appeared in the source.
        value: The coerced value, or None when the element did not convert.
    """

    index: int
    source: Any
    value: Optional[T]

    @property
    def ok(self) -> bool:
        return self.value is not None


class CoercedSequence(Iterable[T]):
    """Lazy, restartable view of a sequence coerced element by element.

    Nothing is converted until the view is iterated, and every iteration
    starts again from the first source element. Elements that do not convert
    are skipped; use :meth:`results` to see every element's outcome.
    """

    def __init__(
        self,
        source: Iterable[Any],
        descriptor: TypeDescriptor,
        builder: Optional[Builder[T]] = None,
        settings: FinderSettings = DEFAULT_SETTINGS,
    ) -> None:
        self._source = source
        self._descriptor = descriptor
        self._builder = builder
        self._settings = settings

    @property
    def descriptor(self) -> TypeDescriptor:
        return self._descriptor

    def __iter__(self) -> Iterator[T]:
        return _iter_coerced(self._source, self._descriptor, self._builder, self._settings)

    def iter_results(self) -> Iterator[ElementResult[T]]:
        for index, element in enumerate(self._source):
            value = _coerce(element, self._descriptor, self._builder, self._settings)
            yield ElementResult(index=index, source=element, value=value)

    def results(self) -> "ElementResults[T]":
        """Per-element outcomes, including the elements that did not convert."""
        return ElementResults(self)

    def to_list(self) -> List[T]:
        return list(self)

    def __repr__(self) -> str:
        return f"CoercedSequence({self._descriptor})"


class ElementResults(Iterable[ElementResult[T]]):
    """Restartable view of :class:`ElementResult` records for a coerced sequence."""

    def __init__(self, sequence: CoercedSequence[T]) -> None:
        self._sequence = sequence

    def __iter__(self) -> Iterator[ElementResult[T]]:
        return self._sequence.iter_results()

    def to_list(self) -> List[ElementResult[T]]:
        return list(self)

    def __repr__(self) -> str:
        return f"ElementResults({self._sequence.descriptor})"


def coerce(
    source: Any,
    target: Any,
    builder: Optional[Builder[T]] = None,
    *,
    settings: FinderSettings = DEFAULT_SETTINGS,
) -> Optional[T]:
    """Convert ``source`` to ``target`` or return None.

    Args:
        source: Any dynamic value.
        target: A type, ``typing`` annotation, or descriptor.
        builder: Optional conversion that replaces the default rules.
        settings: Parsing options.

    Returns:
        The converted value, or None when no rule converts ``source``.

    Raises:
        UnsupportedTypeError: If ``target`` cannot be described.

    Examples:
        >>> coerce("42", int)
        42
        >>> coerce(["1", "x", 2.9], List[int])
        [1, 2]
        >>> coerce("maybe", bool) is None
        True
    """
    return _coerce(source, describe(target), builder, settings)


def coerce_each(
    source: Any,
    target: Any,
    builder: Optional[Builder[T]] = None,
    *,
    settings: FinderSettings = DEFAULT_SETTINGS,
) -> Optional[CoercedSequence[T]]:
    """Coerce every element of a sequence to ``target``, lazily.

    Args:
        source: A dynamic sequence.
        target: The element type.
        builder: Optional per-element conversion that replaces the default rules.
        settings: Parsing options.

    Returns:
        A :class:`CoercedSequence`, or None if ``source`` is not a sequence.
    """
    descriptor = describe(target)
    if classify(source) is not DynamicKind.SEQUENCE:
        return None
    return CoercedSequence(source, descriptor, builder, settings)


def coerce_each_strict(
    source: Any,
    target: Any,
    builder: Optional[Builder[T]] = None,
    *,
    settings: FinderSettings = DEFAULT_SETTINGS,
) -> Optional[ElementResults[T]]:
    """Like :func:`coerce_each` but report every element's outcome.

    Callers that must tell an empty sequence from one where nothing converted
    use this instead of :func:`coerce_each`.
    """
    sequence = coerce_each(source, target, builder, settings=settings)
    if sequence is None:
        return None
    return sequence.results()


__all__ = [
    "coerce",
    "coerce_each",
    "coerce_each_strict",
    "stringify_key",
    "CoercedSequence",
    "ElementResult",
    "ElementResults",
]
