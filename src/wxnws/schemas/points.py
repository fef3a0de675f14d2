"""Payload of ``/points/{lat},{lon}``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from wxnws.schemas.common import QuantitativeValue, force_int, geometry_text, require


@dataclass(frozen=True)
class RelativeLocation:
    city: str
    state: str
    geometry: str
    distance: QuantitativeValue
    bearing: QuantitativeValue

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> RelativeLocation:
        return cls(
            city=require(data, "city"),
            state=require(data, "state"),
            geometry=geometry_text(data),
            distance=QuantitativeValue.from_json(data.get("distance")),
            bearing=QuantitativeValue.from_json(data.get("bearing")),
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "city": self.city,
            "state": self.state,
            "geometry": self.geometry,
            "distance": self.distance.to_json(),
            "bearing": self.bearing.to_json(),
        }


@dataclass(frozen=True)
class Point:
    """Forecast office, grid cell and related links for a lat/lon."""

    geometry: str
    id: str
    kind: str
    cwa: str
    forecast_office: str
    grid_id: str
    grid_x: int
    grid_y: int
    forecast: str
    forecast_hourly: str
    forecast_grid_data: str
    observation_stations: str
    relative_location: RelativeLocation
    forecast_zone: str
    county: str
    fire_weather_zone: str
    time_zone: str
    radar_station: str

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Point:
        return cls(
            geometry=geometry_text(data),
            id=require(data, "@id"),
            kind=require(data, "@type"),
            cwa=require(data, "cwa"),
            forecast_office=require(data, "forecastOffice"),
            grid_id=require(data, "gridId"),
            grid_x=force_int(require(data, "gridX"), "gridX"),
            grid_y=force_int(require(data, "gridY"), "gridY"),
            forecast=require(data, "forecast"),
            forecast_hourly=require(data, "forecastHourly"),
            forecast_grid_data=require(data, "forecastGridData"),
            observation_stations=require(data, "observationStations"),
            relative_location=RelativeLocation.from_json(require(data, "relativeLocation")),
            forecast_zone=require(data, "forecastZone"),
            county=require(data, "county"),
            fire_weather_zone=require(data, "fireWeatherZone"),
            time_zone=require(data, "timeZone"),
            radar_station=require(data, "radarStation"),
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "geometry": self.geometry,
            "@id": self.id,
            "@type": self.kind,
            "cwa": self.cwa,
            "forecastOffice": self.forecast_office,
            "gridId": self.grid_id,
            "gridX": self.grid_x,
            "gridY": self.grid_y,
            "forecast": self.forecast,
            "forecastHourly": self.forecast_hourly,
            "forecastGridData": self.forecast_grid_data,
            "observationStations": self.observation_stations,
            "relativeLocation": self.relative_location.to_json(),
            "forecastZone": self.forecast_zone,
            "county": self.county,
            "fireWeatherZone": self.fire_weather_zone,
            "timeZone": self.time_zone,
            "radarStation": self.radar_station,
        }
