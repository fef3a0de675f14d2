"""Parse autoindex HTML pages into :class:`RemoteFile` records.

The RIDGE II archive is served as a plain ``<table>`` where every row holds
three cells: a name with an anchor, a modified time and a size.  Apache and
nginx both print times as ``12-Jan-2024 08:30`` and sizes as ``512``, ``1.5K``,
``14M`` or ``-`` for directories.
"""

from __future__ import annotations

import string
from datetime import datetime, timezone
from typing import Iterator, NamedTuple
from urllib.parse import urlsplit

from bs4 import BeautifulSoup
from bs4.element import Tag

from wxnws.errors import BadSizeError, BadTimestampError, MalformedDocumentError
from wxnws.radar.types import FileSize, RemoteFile, SizeUnit

TIMESTAMP_FORMAT = "%d-%b-%Y %H:%M"
PARENT_DIRECTORY = "Parent Directory"
UNKNOWN_SIZE = "-"
CELLS_PER_ROW = 3

_SUFFIX_UNITS = {
    "K": SizeUnit.KILOBYTES,
    "M": SizeUnit.MEGABYTES,
    "G": SizeUnit.GIGABYTES,
}


class ListingRow(NamedTuple):
    name: str
    modified: str
    size: str
    name_cell: Tag


def select_cells(html: str) -> list[Tag]:
    """Return every ``td`` that is a direct child of a ``tr``, in document order."""

    soup = BeautifulSoup(html, "html.parser")
    return soup.select("tr > td")


def iter_rows(cells: list[Tag]) -> Iterator[ListingRow]:
    # A trailing group shorter than three cells is dropped.
    usable = len(cells) - len(cells) % CELLS_PER_ROW
    for i in range(0, usable, CELLS_PER_ROW):
        name_cell, modified_cell, size_cell = cells[i : i + CELLS_PER_ROW]
        yield ListingRow(
            name=name_cell.get_text().strip(),
            modified=modified_cell.get_text().strip(),
            size=size_cell.get_text().strip(),
            name_cell=name_cell,
        )


def resolve_url(base_url: str, row: ListingRow) -> str:
    """
    Build the absolute URL for a listing row.

    The parent-directory link is rendered with an absolute-path ``href``, so it
    is joined to the scheme and host of ``base_url``.  Every other row is the
    base URL followed by the displayed name.
    """

    if row.name == PARENT_DIRECTORY and row.size == UNKNOWN_SIZE:
        anchor = row.name_cell.find("a", recursive=False)
        href = anchor.get("href") if anchor is not None else None
        if not href:
            raise MalformedDocumentError("Parent Directory row has no anchor href")
        parts = urlsplit(base_url)
        if not parts.scheme or not parts.hostname:
            raise MalformedDocumentError(f"Base URL {base_url!r} has no scheme or host")
        host = parts.hostname
        # IPv6 literals keep their brackets; the port is not carried over.
        if ":" in host:
            host = f"[{host}]"
        return f"{parts.scheme}://{host}{href}"
    return f"{base_url}{row.name}"


def decode_timestamp(text: str) -> datetime | None:
    """Decode ``DD-Mon-YYYY HH:MM`` as a UTC datetime; empty text means unknown."""

    if not text:
        return None
    try:
        parsed = datetime.strptime(text, TIMESTAMP_FORMAT)
    except ValueError:
        raise BadTimestampError(text) from None
    return parsed.replace(tzinfo=timezone.utc)


def decode_size(text: str) -> FileSize | None:
    """Decode a size cell such as ``200``, ``1.5K`` or ``14M``."""

    if not text or text == UNKNOWN_SIZE:
        return None
    last = text[-1]
    if last in _SUFFIX_UNITS:
        unit = _SUFFIX_UNITS[last]
        number = text[:-1]
    elif last in string.digits:
        unit = SizeUnit.BYTES
        number = text
    else:
        raise BadSizeError(text)
    # float() also accepts "1_000", surrounding whitespace and non-ASCII digits; the index prints none of them.
    if "_" in number or number != number.strip() or not number.isascii():
        raise BadSizeError(text)
    try:
        value = float(number)
    except ValueError:
        raise BadSizeError(text) from None
    return FileSize(unit, value)


def iter_remote_files(base_url: str, html: str) -> Iterator[RemoteFile]:
    """Lazily yield one :class:`RemoteFile` per listing row."""

    cells = select_cells(html)
    if not cells:
        raise MalformedDocumentError("No table rows found in directory listing")
    for row in iter_rows(cells):
        yield RemoteFile(
            url=resolve_url(base_url, row),
            last_modified=decode_timestamp(row.modified),
            size=decode_size(row.size),
        )


def parse_listing(base_url: str, html: str) -> list[RemoteFile]:
    """Parse a whole listing; any bad row fails the call with no partial result."""

    return list(iter_remote_files(base_url, html))
