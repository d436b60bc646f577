"""Logging setup for hosts embedding the parser."""

from __future__ import annotations

import logging

import structlog


def configure_logging(log_level: str) -> None:
    """Route stdlib and structlog output through JSON records at ``log_level``.

    The parser never configures logging itself. Hosts call this once at
    startup, typically as ``configure_logging(get_settings().log_level)``.
    Unknown level names fall back to INFO.
    """
    numeric_level = logging.getLevelName(log_level.upper())
    if isinstance(numeric_level, str):
        numeric_level = logging.INFO
    logging.basicConfig(level=numeric_level, format="%(message)s")
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=True,
    )
