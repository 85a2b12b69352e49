"""Tests for logging configuration."""

import logging

from memory_cache.app_logging import configure_logging
from memory_cache.config import Settings
from memory_cache.containers import build_container


def test_configure_logging_idempotent(cache_logger: logging.Logger) -> None:
    cache_logger.handlers.clear()

    configure_logging()
    first_count = len(cache_logger.handlers)

    configure_logging()
    second_count = len(cache_logger.handlers)

    assert first_count == 1
    assert second_count == 1
    assert not cache_logger.propagate


def test_configure_logging_uses_settings_level(cache_logger: logging.Logger) -> None:
    cache_logger.handlers.clear()

    logger = configure_logging(Settings(log_level="DEBUG"))

    assert logger is cache_logger
    assert cache_logger.level == logging.DEBUG


def test_build_container_applies_log_level(cache_logger: logging.Logger) -> None:
    cache_logger.handlers.clear()

    build_container(Settings(log_level="WARNING"))

    assert cache_logger.level == logging.WARNING
    assert len(cache_logger.handlers) == 1
