"""Helper utilities for constructing RIDGE II listing URLs."""

from __future__ import annotations

from wxnws.config import get_radar_root
from wxnws.radar.types import RadarType


def build_radar_url(site: str, radar_type: RadarType | str, root: str | None = None) -> str:
    """Return the directory URL for a radar site and product, with a trailing slash."""

    if not isinstance(radar_type, RadarType):
        radar_type = RadarType.from_code(radar_type)
    base = (root or get_radar_root()).rstrip("/")
    return f"{base}/{site}/{radar_type}/"
