"""requests-backed implementation of :class:`PageFetcher`."""

from __future__ import annotations

import logging

import requests

from wxnws.config import get_timeout, get_user_agent
from wxnws.errors import DecodeError, TransportError
from wxnws.radar.base import PageFetcher

LOGGER = logging.getLogger("wxnws.radar")


class RequestsPageFetcher(PageFetcher):
    """Fetch listing pages with a shared :class:`requests.Session`."""

    def __init__(
        self,
        session: requests.Session | None = None,
        *,
        user_agent: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self.session = session or requests.Session()
        self.user_agent = user_agent or get_user_agent()
        self.timeout = timeout if timeout is not None else get_timeout()

    def fetch(self, url: str) -> str:
        LOGGER.debug("GET %s", url)
        try:
            response = self.session.get(
                url,
                headers={"User-Agent": self.user_agent, "Accept": "text/html,*/*"},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            raise TransportError(url, exc) from exc
        try:
            return response.content.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DecodeError(url, exc) from exc
