"""structlog setup shared by library callers and tests."""

from __future__ import annotations

import logging

import structlog


def configure_logging(log_level: str = "INFO") -> None:
    """Filter structlog output below ``log_level`` (e.g. "DEBUG", "INFO")."""
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")

    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )
