"""Fetch a directory listing and turn it into remote-file records."""

from __future__ import annotations

import logging
from typing import Iterable

import pandas as pd

from wxnws.radar.base import PageFetcher
from wxnws.radar.http_fetcher import RequestsPageFetcher
from wxnws.radar.listing import parse_listing
from wxnws.radar.types import RemoteFile

LOGGER = logging.getLogger("wxnws.radar")

FRAME_COLUMNS = ["url", "name", "last_modified", "size_unit", "size_value"]


def crawl(url: str, fetcher: PageFetcher | None = None) -> list[RemoteFile]:
    """
    Fetch ``url`` and parse it as an autoindex page.

    ``url`` is used verbatim as the prefix of every file URL, so it should end
    with ``/``.
    """

    fetcher = fetcher or RequestsPageFetcher()
    html = fetcher.fetch(url)
    files = parse_listing(url, html)
    LOGGER.debug("Parsed %d entries from %s", len(files), url)
    return files


def newest_file(files: Iterable[RemoteFile]) -> RemoteFile | None:
    """Return the entry with the latest modification time, ignoring undated rows."""

    dated = [item for item in files if item.last_modified is not None]
    if not dated:
        return None
    return max(dated, key=lambda item: item.last_modified)


def files_to_dataframe(files: Iterable[RemoteFile]) -> pd.DataFrame:
    """Tabulate remote files, one row per entry in listing order."""

    records = [
        {
            "url": item.url,
            "name": item.name,
            "last_modified": item.last_modified,
            "size_unit": item.size.unit.value if item.size else None,
            "size_value": item.size.value if item.size else None,
        }
        for item in files
    ]
    df = pd.DataFrame(records, columns=FRAME_COLUMNS)
    df["last_modified"] = pd.to_datetime(df["last_modified"], utc=True)
    return df
