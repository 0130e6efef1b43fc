"""Unit tests for errorpoints logging helpers."""

from __future__ import annotations

import logging
import sys

import pytest

import errorpoints
from errorpoints.utils.logging import LOGGER_NAME, configure_logging, get_logger


@pytest.fixture
def clean_logger():
    logger = logging.getLogger(LOGGER_NAME)
    saved_handlers = logger.handlers[:]
    saved_level = logger.level
    yield logger
    for h in logger.handlers[:]:
        if h not in saved_handlers:
            logger.removeHandler(h)
    for h in saved_handlers:
        if h not in logger.handlers:
            logger.addHandler(h)
    logger.setLevel(saved_level)


def _stderr_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [
        h for h in logger.handlers
        if isinstance(h, logging.StreamHandler) and h.stream is sys.stderr
    ]


def test_package_logger_has_null_handler() -> None:
    logger = logging.getLogger(LOGGER_NAME)
    assert errorpoints.__version__
    assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)


def test_get_logger_default_and_named() -> None:
    assert get_logger().name == LOGGER_NAME
    assert get_logger("errorpoints.algorithms").name == "errorpoints.algorithms"


def test_configure_logging_adds_single_stderr_handler(clean_logger) -> None:
    configure_logging(level="DEBUG", force=True)
    configure_logging(level="DEBUG")
    assert len(_stderr_handlers(clean_logger)) == 1
    assert clean_logger.level == logging.DEBUG


def test_configure_logging_reads_env_level(clean_logger, monkeypatch) -> None:
    monkeypatch.setenv("ERRORPOINTS_LOG_LEVEL", "warning")
    configure_logging(force=True)
    assert clean_logger.level == logging.WARNING


def test_configure_logging_never_touches_root(clean_logger) -> None:
    root_handlers = logging.getLogger().handlers[:]
    configure_logging(level="INFO", force=True)
    assert logging.getLogger().handlers == root_handlers
