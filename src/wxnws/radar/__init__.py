"""Crawler for the RIDGE II radar directory listings."""

from __future__ import annotations

from .base import PageFetcher
from .crawler import crawl, files_to_dataframe, newest_file
from .http_fetcher import RequestsPageFetcher
from .listing import decode_size, decode_timestamp, iter_remote_files, parse_listing
from .types import FileSize, RadarType, RemoteFile, SizeUnit
from .urls import build_radar_url

__all__ = [
    "FileSize",
    "PageFetcher",
    "RadarType",
    "RemoteFile",
    "RequestsPageFetcher",
    "SizeUnit",
    "build_radar_url",
    "crawl",
    "decode_size",
    "decode_timestamp",
    "files_to_dataframe",
    "iter_remote_files",
    "newest_file",
    "parse_listing",
]
