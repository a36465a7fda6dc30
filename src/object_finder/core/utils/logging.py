"""Logging utilities for object_finder (thin wrappers).

The library only emits DEBUG records and attaches a NullHandler to its root
logger; applications decide where records go. These helpers give scripts and
tests a one-line way to turn the output on.
"""

from __future__ import annotations

import logging
from typing import Union

ROOT_LOGGER_NAME = "object_finder"

_COMPONENTS = {
    "coercion": "object_finder.core.coercion",
    "finder": "object_finder.core.finder",
    "config": "object_finder.core.config",
}


def get_logger(name: str) -> logging.Logger:
    """Get a module logger by name (no prefixing).

    Args:
        name: Logger name (typically ``__name__``).

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)


def configure_logging(verbose: bool = False) -> None:
    """Attach a stream handler to the package logger.

    Args:
        verbose: Log at DEBUG when True, otherwise WARNING.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def set_component_level(component: str, level: Union[str, int]) -> None:
    """Set log level for a specific component.

    Accepts either string levels (e.g., "DEBUG") or numeric constants, and
    either a short component name ("coercion") or a full logger name.
    """
    if isinstance(level, str):
        level_value = getattr(logging, level.upper(), logging.INFO)
    else:
        level_value = level
    logging.getLogger(_COMPONENTS.get(component, component)).setLevel(level_value)


__all__ = ["get_logger", "configure_logging", "set_component_level", "ROOT_LOGGER_NAME"]
