"""Blocking client for the api.weather.gov endpoints and the radar archive."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Sequence, TypeVar

import requests

from wxnws.config import clamp_limit, get_api_root, get_radar_root, get_timeout, get_user_agent
from wxnws.errors import ApiError, DecodeError, TransportError
from wxnws.radar.crawler import crawl
from wxnws.radar.http_fetcher import RequestsPageFetcher
from wxnws.radar.types import RadarType, RemoteFile
from wxnws.radar.urls import build_radar_url
from wxnws.schemas import (
    Gridpoint,
    GridpointStations,
    Observation,
    ObservationCollection,
    ObservationStation,
    ObservationStationCollection,
    Point,
)

LOGGER = logging.getLogger("wxnws.client")
LD_JSON = "application/ld+json"

T = TypeVar("T")


def format_time(value: datetime) -> str:
    """Format a time the way the API expects: milliseconds plus a ``+HH:MM`` offset."""

    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat(timespec="milliseconds")


class NwsClient:
    """Client used to access the NWS API endpoints. All calls block."""

    def __init__(
        self,
        user_agent: str | None = None,
        *,
        session: requests.Session | None = None,
        api_root: str | None = None,
        radar_root: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self.session = session or requests.Session()
        self.user_agent = user_agent or get_user_agent()
        self.api_root = (api_root or get_api_root()).rstrip("/")
        self.radar_root = (radar_root or get_radar_root()).rstrip("/")
        self.timeout = timeout if timeout is not None else get_timeout()
        self.headers = {
            "User-Agent": self.user_agent,
            "Accept": LD_JSON,
            "Content-Type": LD_JSON,
        }
        self.fetcher = RequestsPageFetcher(self.session, user_agent=self.user_agent, timeout=self.timeout)

    def gridpoints(self, wfo: str, x: int, y: int) -> Gridpoint:
        return self._get(f"/gridpoints/{wfo}/{x},{y}", Gridpoint.from_json)

    def gridpoints_stations(self, wfo: str, x: int, y: int) -> GridpointStations:
        return self._get(f"/gridpoints/{wfo}/{x},{y}/stations", GridpointStations.from_json)

    def stations_observations(
        self,
        station_id: str,
        start: datetime | None = None,
        end: datetime | None = None,
        limit: int | None = None,
    ) -> ObservationCollection:
        params: list[tuple[str, str]] = []
        if start is not None:
            params.append(("start", format_time(start)))
        if end is not None:
            params.append(("end", format_time(end)))
        if limit is not None:
            params.append(("limit", str(clamp_limit(limit))))
        return self._get(f"/stations/{station_id}/observations", ObservationCollection.from_json, params)

    def stations_observations_latest(self, station_id: str, require_qc: bool | None = None) -> Observation:
        params = None
        if require_qc is not None:
            params = [("require_qc", "true" if require_qc else "false")]
        return self._get(f"/stations/{station_id}/observations/latest", Observation.from_json, params)

    def stations_observations_time(self, station_id: str, time: datetime) -> Observation:
        return self._get(f"/stations/{station_id}/observations/{format_time(time)}", Observation.from_json)

    def stations(
        self,
        ids: Sequence[str] | None = None,
        states: Sequence[str] | None = None,
        limit: int | None = None,
    ) -> ObservationStationCollection:
        params: list[tuple[str, str]] = []
        if ids:
            params.append(("id", ",".join(ids)))
        if states:
            params.append(("state", ",".join(states)))
        if limit is not None:
            params.append(("limit", str(clamp_limit(limit))))
        return self._get("/stations", ObservationStationCollection.from_json, params)

    def stations_id(self, station_id: str) -> ObservationStation:
        return self._get(f"/stations/{station_id}", ObservationStation.from_json)

    def points(self, lat: float, lon: float) -> Point:
        return self._get(f"/points/{lat:.4f},{lon:.4f}", Point.from_json)

    def radar(self, site: str, radar_type: RadarType | str) -> list[RemoteFile]:
        """List the files published for one radar site and product."""

        return crawl(build_radar_url(site, radar_type, self.radar_root), self.fetcher)

    def _get(
        self,
        endpoint: str,
        parse: Callable[[Any], T],
        params: list[tuple[str, str]] | None = None,
    ) -> T:
        url = f"{self.api_root}{endpoint}"
        LOGGER.debug("GET %s params=%s", url, params)
        try:
            response = self.session.get(url, params=params or None, headers=self.headers, timeout=self.timeout)
        except requests.RequestException as exc:
            raise TransportError(url, exc) from exc
        if not response.ok:
            raise ApiError(url, response.status_code, _problem_detail(response))
        try:
            payload = response.json()
        except ValueError as exc:
            raise DecodeError(url, exc) from exc
        return parse(payload)


def _problem_detail(response: requests.Response) -> str | None:
    """Pull ``detail`` out of an ``application/problem+json`` body when present."""

    try:
        body = response.json()
    except ValueError:
        return response.text.strip() or None
    if isinstance(body, dict):
        return body.get("detail") or body.get("title")
    return None
