"""Exception hierarchy shared by the API client and the radar crawler."""

from __future__ import annotations


class NwsError(Exception):
    """Base class for every error raised by wxnws."""


class FetchError(NwsError):
    """Raised when a remote resource cannot be retrieved."""


class TransportError(FetchError):
    """Network, DNS, TLS or HTTP status failure while reaching a URL."""

    def __init__(self, url: str, reason: object) -> None:
        super().__init__(f"GET {url} failed: {reason}")
        self.url = url


class DecodeError(FetchError):
    """The response body could not be decoded."""

    def __init__(self, url: str, reason: object) -> None:
        super().__init__(f"Could not decode body from {url}: {reason}")
        self.url = url


class ParseError(NwsError):
    """Raised when a directory listing does not match the expected layout."""


class MalformedDocumentError(ParseError):
    """The listing has no table cells or a required anchor is missing."""


class BadTimestampError(ParseError):
    """A modified-time cell does not match ``DD-Mon-YYYY HH:MM``."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Invalid listing timestamp: {text!r}")
        self.text = text


class BadSizeError(ParseError):
    """A size cell is neither a plain number nor a K/M/G suffixed number."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Invalid listing size: {text!r}")
        self.text = text


class UnknownRadarTypeError(NwsError, ValueError):
    """Raised when a string is not a known radar product code."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Unknown radar type: {text!r}")
        self.text = text


class ApiError(NwsError):
    """The NWS API answered with a non-success status."""

    def __init__(self, url: str, status_code: int, detail: str | None = None) -> None:
        message = f"{url} returned HTTP {status_code}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.url = url
        self.status_code = status_code
        self.detail = detail


class SchemaError(NwsError):
    """An API payload is missing a field the schema requires."""
