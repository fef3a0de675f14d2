"""Client for the NWS weather API and the RIDGE II radar archive."""

from __future__ import annotations

from .client import NwsClient
from .errors import (
    ApiError,
    BadSizeError,
    BadTimestampError,
    DecodeError,
    FetchError,
    MalformedDocumentError,
    NwsError,
    ParseError,
    SchemaError,
    TransportError,
    UnknownRadarTypeError,
)
from .radar import FileSize, RadarType, RemoteFile, SizeUnit, crawl, parse_listing

__all__ = [
    "ApiError",
    "BadSizeError",
    "BadTimestampError",
    "DecodeError",
    "FetchError",
    "FileSize",
    "MalformedDocumentError",
    "NwsClient",
    "NwsError",
    "ParseError",
    "RadarType",
    "RemoteFile",
    "SchemaError",
    "SizeUnit",
    "TransportError",
    "UnknownRadarTypeError",
    "crawl",
    "parse_listing",
]
