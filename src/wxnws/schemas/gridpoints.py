"""Payloads of ``/gridpoints/{wfo}/{x},{y}`` and its ``/stations`` listing."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

import pandas as pd

from wxnws.schemas.common import (
    QuantitativeValue,
    QuantitativeValueLayer,
    force_int,
    geometry_text,
    require,
)
from wxnws.schemas.stations import ObservationStation

GRIDPOINT_LAYERS = (
    "temperature",
    "dewpoint",
    "maxTemperature",
    "minTemperature",
    "relativeHumidity",
    "apparentTemperature",
    "heatIndex",
    "windChill",
    "skyCover",
    "windDirection",
    "windSpeed",
    "windGust",
    "probabilityOfPrecipitation",
    "quantitativePrecipitation",
    "iceAccumulation",
    "snowfallAmount",
    "snowLevel",
    "ceilingHeight",
    "visibility",
    "transportWindSpeed",
    "transportWindDirection",
    "mixingHeight",
    "hainesIndex",
    "lightningActivityLevel",
    "twentyFootWindSpeed",
    "twentyFootWindDirection",
    "waveHeight",
    "wavePeriod",
    "waveDirection",
    "primarySwellHeight",
    "primarySwellDirection",
    "secondarySwellHeight",
    "secondarySwellDirection",
    "wavePeriod2",
    "windWaveHeight",
    "dispersionIndex",
    "pressure",
    "probabilityOfTropicalStormWinds",
    "probabilityOfHurricaneWinds",
    "potentialOf15mphWinds",
    "potentialOf25mphWinds",
    "potentialOf35mphWinds",
    "potentialOf45mphWinds",
    "potentialOf20mphWindGusts",
    "potentialOf30mphWindGusts",
    "potentialOf40mphWindGusts",
    "potentialOf50mphWindGusts",
    "potentialOf60mphWindGusts",
    "grasslandFireDangerIndex",
    "probabilityOfThunder",
    "davisStabilityIndex",
    "atmosphericDispersionIndex",
    "lowVisibilityOccurrenceRiskIndex",
    "stability",
    "redFlagThreatIndex",
)


@dataclass(frozen=True)
class WeatherValueInner:
    visibility: QuantitativeValue
    coverage: str | None = None
    weather: str | None = None
    intensity: str | None = None
    attributes: tuple[str, ...] = ()

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> WeatherValueInner:
        return cls(
            visibility=QuantitativeValue.from_json(data.get("visibility")),
            coverage=data.get("coverage"),
            weather=data.get("weather"),
            intensity=data.get("intensity"),
            attributes=tuple(data.get("attributes") or []),
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "coverage": self.coverage,
            "weather": self.weather,
            "intensity": self.intensity,
            "visibility": self.visibility.to_json(),
            "attributes": list(self.attributes),
        }


@dataclass(frozen=True)
class WeatherValue:
    valid_time: str
    value: tuple[WeatherValueInner, ...]

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> WeatherValue:
        return cls(
            valid_time=require(data, "validTime"),
            value=tuple(WeatherValueInner.from_json(item) for item in require(data, "value")),
        )

    def to_json(self) -> dict[str, Any]:
        return {"validTime": self.valid_time, "value": [item.to_json() for item in self.value]}


@dataclass(frozen=True)
class Weather:
    values: tuple[WeatherValue, ...]

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Weather:
        return cls(values=tuple(WeatherValue.from_json(item) for item in require(data, "values")))

    def to_json(self) -> dict[str, Any]:
        return {"values": [item.to_json() for item in self.values]}


@dataclass(frozen=True)
class HazardsValueInner:
    phenomenon: str
    significance: str
    # The API spells this one in snake_case.
    event_number: float | None = None

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> HazardsValueInner:
        return cls(
            phenomenon=require(data, "phenomenon"),
            significance=require(data, "significance"),
            event_number=data.get("event_number"),
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "phenomenon": self.phenomenon,
            "significance": self.significance,
            "event_number": self.event_number,
        }


@dataclass(frozen=True)
class HazardsValue:
    valid_time: str
    value: tuple[HazardsValueInner, ...]

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> HazardsValue:
        return cls(
            valid_time=require(data, "validTime"),
            value=tuple(HazardsValueInner.from_json(item) for item in require(data, "value")),
        )

    def to_json(self) -> dict[str, Any]:
        return {"validTime": self.valid_time, "value": [item.to_json() for item in self.value]}


@dataclass(frozen=True)
class Hazards:
    values: tuple[HazardsValue, ...]

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Hazards:
        return cls(values=tuple(HazardsValue.from_json(item) for item in require(data, "values")))

    def to_json(self) -> dict[str, Any]:
        return {"values": [item.to_json() for item in self.values]}


@dataclass(frozen=True)
class Gridpoint:
    """Raw forecast grid data for one 2.5 km cell."""

    geometry: str
    id: str
    kind: str
    update_time: str
    valid_times: str
    elevation: QuantitativeValue
    forecast_office: str
    grid_id: str
    grid_x: int
    grid_y: int
    weather: Weather | None = None
    hazards: Hazards | None = None
    layers: dict[str, QuantitativeValueLayer] = field(default_factory=dict)

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Gridpoint:
        weather = data.get("weather")
        hazards = data.get("hazards")
        layers = {
            name: QuantitativeValueLayer.from_json(data[name])
            for name in GRIDPOINT_LAYERS
            if data.get(name) is not None
        }
        return cls(
            geometry=geometry_text(data),
            id=require(data, "@id"),
            kind=require(data, "@type"),
            update_time=require(data, "updateTime"),
            valid_times=require(data, "validTimes"),
            elevation=QuantitativeValue.from_json(data.get("elevation")),
            forecast_office=require(data, "forecastOffice"),
            grid_id=require(data, "gridId"),
            grid_x=force_int(require(data, "gridX"), "gridX"),
            grid_y=force_int(require(data, "gridY"), "gridY"),
            weather=Weather.from_json(weather) if weather is not None else None,
            hazards=Hazards.from_json(hazards) if hazards is not None else None,
            layers=layers,
        )

    def layer(self, name: str) -> QuantitativeValueLayer | None:
        """Return a layer by its API name, e.g. ``"skyCover"``."""

        return self.layers.get(name)

    def to_dataframe(self, names: list[str] | None = None) -> pd.DataFrame:
        """
        Align the requested layers (default: all present) on their start times.

        Layers use intervals of differing length, so gaps are left as NaN rather
        than forward-filled.
        """

        selected = names or list(self.layers)
        series = [self.layers[name].to_series(name) for name in selected if name in self.layers]
        if not series:
            return pd.DataFrame()
        return pd.concat(series, axis=1).sort_index()

    def to_json(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "geometry": self.geometry,
            "@id": self.id,
            "@type": self.kind,
            "updateTime": self.update_time,
            "validTimes": self.valid_times,
            "elevation": self.elevation.to_json(),
            "forecastOffice": self.forecast_office,
            "gridId": self.grid_id,
            "gridX": self.grid_x,
            "gridY": self.grid_y,
            "weather": self.weather.to_json() if self.weather else None,
            "hazards": self.hazards.to_json() if self.hazards else None,
        }
        for name, layer in self.layers.items():
            payload[name] = layer.to_json()
        return payload


@dataclass(frozen=True)
class GridpointStations:
    graph: tuple[ObservationStation, ...]
    observation_stations: tuple[str, ...]

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> GridpointStations:
        return cls(
            graph=tuple(ObservationStation.from_json(item) for item in require(data, "@graph")),
            observation_stations=tuple(data.get("observationStations") or []),
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "@graph": [item.to_json() for item in self.graph],
            "observationStations": list(self.observation_stations),
        }
