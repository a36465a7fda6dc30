"""Settings schema module.

This module defines the settings that tune how strings are parsed during
coercion. The model is frozen so a configured finder can be shared freely.
"""

from pydantic import BaseModel, ConfigDict


class FinderSettings(BaseModel):
    """Parsing options for the coercion engine.

    Attributes:
        trim_whitespace: Strip surrounding whitespace before parsing a number.
        allow_hex_integers: Accept ``0x``-prefixed hexadecimal integers.
        allow_special_floats: Accept the ``NaN``, ``Infinity`` and
            ``-Infinity`` literals.
        case_sensitive_booleans: Only accept lower-case ``true`` and ``false``.
        log_misses: Emit a DEBUG record for every value that fails to coerce.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    trim_whitespace: bool = True
    allow_hex_integers: bool = True
    allow_special_floats: bool = True
    case_sensitive_booleans: bool = True
    log_misses: bool = False


DEFAULT_SETTINGS = FinderSettings()

__all__ = ["FinderSettings", "DEFAULT_SETTINGS"]
