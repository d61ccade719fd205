"""Logging configuration for the service."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_handler: logging.Handler | None = None


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a single stream handler to the package logger.

    Safe to call more than once (tests build several apps per session).
    """
    global _handler

    resolved = getattr(logging, level.upper(), logging.INFO)
    package_logger = logging.getLogger("ecoroute")
    package_logger.setLevel(resolved)

    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    if _handler not in package_logger.handlers:
        package_logger.addHandler(_handler)
    return package_logger
