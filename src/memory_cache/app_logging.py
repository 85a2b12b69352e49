"""Logging configuration helpers."""

import logging

from memory_cache.config import Settings


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """Attach one stream handler to the cache logger at the configured level.

    Repeated calls update the level but never add a second handler.
    """
    resolved_settings = settings or Settings()
    logger = logging.getLogger("memory_cache")
    logger.setLevel(resolved_settings.log_level)
    if logger.handlers:
        return logger
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
