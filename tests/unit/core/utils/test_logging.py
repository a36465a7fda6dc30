"""
Unit tests for object_finder.core.utils.logging.
"""

import logging

import pytest

from object_finder.core.utils.logging import (
    ROOT_LOGGER_NAME,
    configure_logging,
    get_logger,
    set_component_level,
)


@pytest.fixture
def restore_loggers():
    """Put the package loggers back the way the test found them."""
    names = [ROOT_LOGGER_NAME, "object_finder.core.coercion", "object_finder.custom"]
    saved = {name: (logging.getLogger(name).level, list(logging.getLogger(name).handlers)) for name in names}
    yield
    for name, (level, handlers) in saved.items():
        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.handlers[:] = handlers


def test_package_has_null_handler():
    """Importing the package never configures output on its own."""
    import object_finder  # noqa: F401

    handlers = logging.getLogger(ROOT_LOGGER_NAME).handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)


def test_get_logger_uses_name_verbatim():
    assert get_logger("object_finder.core.finder").name == "object_finder.core.finder"


def test_configure_logging(restore_loggers):
    configure_logging(verbose=True)
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    assert logger.level == logging.DEBUG
    stream_handlers = [
        h for h in logger.handlers if type(h) is logging.StreamHandler
    ]
    assert len(stream_handlers) == 1

    configure_logging()
    assert logger.level == logging.WARNING
    assert len([h for h in logger.handlers if type(h) is logging.StreamHandler]) == 1


def test_set_component_level_by_alias(restore_loggers):
    set_component_level("coercion", "debug")
    assert logging.getLogger("object_finder.core.coercion").level == logging.DEBUG


def test_set_component_level_by_name(restore_loggers):
    set_component_level("object_finder.custom", logging.ERROR)
    assert logging.getLogger("object_finder.custom").level == logging.ERROR


def test_library_modules_use_get_logger():
    """Module loggers live under the package root so the helpers reach them."""
    from object_finder.core import coercion, finder
    from object_finder.core.config import loader

    for module in (coercion, finder, loader):
        assert module.logger is get_logger(module.__name__)
        assert module.logger.name.startswith(ROOT_LOGGER_NAME + ".")
