# src/graphtree/log.py
from __future__ import annotations

import logging

from .config import AppSettings, LoggingSettings, get_settings

ROOT_LOGGER = "graphtree"


def configure_logging(settings: AppSettings | LoggingSettings | None = None) -> logging.Logger:
    """
    Apply level and format from the logging settings to the `graphtree`
    logger hierarchy and return its root logger.

    A single StreamHandler is installed; calling this again replaces it
    instead of stacking handlers.
    """
    if settings is None:
        settings = get_settings()
    cfg = settings.logging if isinstance(settings, AppSettings) else settings

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(cfg.level)

    for handler in list(logger.handlers):
        if getattr(handler, "_graphtree_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(cfg.format))
    handler._graphtree_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger
