"""Core interface for fetching directory-index pages."""

from __future__ import annotations

from abc import ABC, abstractmethod


class PageFetcher(ABC):
    """Abstract base class for anything that can GET a page as text."""

    @abstractmethod
    def fetch(self, url: str) -> str:
        """
        Return the body of ``url`` decoded as text.

        Implementations raise :class:`~wxnws.errors.TransportError` when the
        server cannot be reached and :class:`~wxnws.errors.DecodeError` when
        the body is not text. Nothing is retried.
        """
