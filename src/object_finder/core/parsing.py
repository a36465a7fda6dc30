"""Literal parsing for string-to-number and string-to-bool coercion.

The accepted grammar is the JSON-ish one most producers emit, not Python's:
``1_000``, ``inf`` and ``0o17`` are rejected even though ``int()`` and
``float()`` would take them.
"""

import re
from typing import Optional, Union

from object_finder.core.config.schema import DEFAULT_SETTINGS, FinderSettings

_DECIMAL_INT = re.compile(r"[+-]?\d+", re.ASCII)
_HEX_INT = re.compile(r"[+-]?0[xX][0-9a-fA-F]+")
_DECIMAL_FLOAT = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_SPECIAL_FLOATS = {
    "NaN": float("nan"),
    "Infinity": float("inf"),
    "+Infinity": float("inf"),
    "-Infinity": float("-inf"),
}


def parse_number(text: str, settings: FinderSettings = DEFAULT_SETTINGS) -> Optional[Union[int, float]]:
    """Parse ``text`` as an integer, falling back to a float.

    Returns:
        An ``int`` for integer literals, a ``float`` for anything with a
        fraction, exponent or special value, or None if ``text`` is not a
        number.
    """
    if settings.trim_whitespace:
        text = text.strip()
    if _DECIMAL_INT.fullmatch(text):
        try:
            return int(text)
        except ValueError:
            # Past the interpreter's digit limit; read it as a float instead.
            return float(text)
    if settings.allow_hex_integers and _HEX_INT.fullmatch(text):
        return int(text, 16)
    if _DECIMAL_FLOAT.fullmatch(text):
        return float(text)
    if settings.allow_special_floats:
        return _SPECIAL_FLOATS.get(text)
    return None


def parse_bool(text: str, settings: FinderSettings = DEFAULT_SETTINGS) -> Optional[bool]:
    """Parse the literals ``true`` and ``false``; anything else is None."""
    if not settings.case_sensitive_booleans:
        text = text.lower()
    if text == "true":
        return True
    if text == "false":
        return False
    return None


__all__ = ["parse_number", "parse_bool"]
