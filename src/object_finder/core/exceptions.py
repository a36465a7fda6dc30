from typing import Any, Optional


class FinderError(Exception):
    """Base class for all custom exceptions in the object_finder library."""

    pass


class ValueNotFoundError(FinderError, LookupError):
    """Raised when a lookup produced no value of the requested type and no default.

    Coercion itself never raises; this is the only point where a miss becomes
    observable. The requested type and key are kept as attributes so callers can
    branch on them instead of parsing the message.

    Attributes:
        expected_type: The target type (annotation or descriptor) that was requested.
        key: The key that was resolved, or None for identity access.
    """

    def __init__(
        self, expected_type: Any, key: Optional[Any] = None, message: Optional[str] = None
    ) -> None:
        self.expected_type = expected_type
        self.key = key
        if message is None:
            type_name = (
                expected_type.__name__ if isinstance(expected_type, type) else str(expected_type)
            )
            if key is None:
                message = f"{type_name} was not found in this object"
            else:
                message = f"{type_name} was not found for key {key!r}"
        super().__init__(message)


class UnsupportedTypeError(FinderError, TypeError):
    """Raised when a target annotation cannot be turned into a type descriptor."""

    pass


class InvalidKeyError(FinderError, TypeError):
    """Raised when a string-keyed accessor receives a key that is not a string."""

    pass


class ConfigError(FinderError):
    """Raised for settings errors.

    This includes errors such as:
    - Unreadable settings file
    - Invalid YAML
    - Settings validation failures
    """

    pass


__all__ = [
    "FinderError",
    "ValueNotFoundError",
    "UnsupportedTypeError",
    "InvalidKeyError",
    "ConfigError",
]
