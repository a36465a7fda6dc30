"""
Callable protocols shared by the coercers and accessors.
"""

from typing import Any, Optional, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class Builder(Protocol[T_co]):
    """
    Caller-supplied conversion that replaces the default coercion rules.

    A builder receives the resolved, non-None dynamic value and returns the
    converted value, or None when it cannot convert it. Whatever it returns is
    used as-is; no further rule runs after it.
    """

    def __call__(self, value: Any) -> Optional[T_co]:
        ...


__all__ = ["Builder", "T"]
