"""Shared configuration helpers for wxnws."""

from __future__ import annotations

import logging
import os

LOGGER = logging.getLogger("wxnws.config")

DEFAULT_API_ROOT = "https://api.weather.gov"
DEFAULT_RADAR_ROOT = "https://mrms.ncep.noaa.gov/data/RIDGEII/L2"
DEFAULT_USER_AGENT = "wxnws"
DEFAULT_LOG_LEVEL = "INFO"

# Paging bounds accepted by the observation and station endpoints.
MIN_LIMIT = 1
MAX_LIMIT = 500


def _env_text(name: str, default: str) -> str:
    value = os.environ.get(name, "").strip()
    return value or default


def _env_float(name: str) -> float | None:
    value = os.environ.get(name, "").strip()
    if not value:
        return None
    try:
        parsed = float(value)
    except ValueError:
        LOGGER.warning("Invalid float for %s=%s; using transport default", name, value)
        return None
    if parsed <= 0:
        LOGGER.warning("Non-positive %s=%s; using transport default", name, value)
        return None
    return parsed


def get_api_root() -> str:
    """Return the NWS API root without a trailing slash."""

    return _env_text("WXNWS_API_ROOT", DEFAULT_API_ROOT).rstrip("/")


def get_radar_root() -> str:
    """Return the root of the RIDGE II level-2 directory tree."""

    return _env_text("WXNWS_RADAR_ROOT", DEFAULT_RADAR_ROOT).rstrip("/")


def get_user_agent() -> str:
    """Return the User-Agent sent with every request.

    api.weather.gov rejects anonymous clients, so this should identify the
    application and a contact address in production use.
    """

    return _env_text("WXNWS_USER_AGENT", DEFAULT_USER_AGENT)


def get_timeout() -> float | None:
    """Return the request timeout in seconds, or ``None`` for the transport default."""

    return _env_float("WXNWS_TIMEOUT")


def get_log_level() -> int:
    """Return the logging level named by WXNWS_LOG_LEVEL."""

    name = _env_text("WXNWS_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        LOGGER.warning("Unknown log level %s; using %s", name, DEFAULT_LOG_LEVEL)
        return logging.INFO
    return level


def clamp_limit(limit: int) -> int:
    """Clamp a page limit into the range the API accepts."""

    return max(MIN_LIMIT, min(MAX_LIMIT, limit))
