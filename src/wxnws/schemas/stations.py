"""Observation station and observation payloads."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from wxnws.schemas.common import QuantitativeValue, geometry_text, require

# snake_case attribute -> camelCase API key for every measured field.
OBSERVATION_QUANTITIES = {
    "elevation": "elevation",
    "temperature": "temperature",
    "dewpoint": "dewpoint",
    "wind_direction": "windDirection",
    "wind_speed": "windSpeed",
    "wind_gust": "windGust",
    "barometric_pressure": "barometricPressure",
    "sea_level_pressure": "seaLevelPressure",
    "visibility": "visibility",
    "max_temperature_last_24_hours": "maxTemperatureLast24Hours",
    "min_temperature_last_24_hours": "minTemperatureLast24Hours",
    "precipitation_last_hour": "precipitationLastHour",
    "precipitation_last_3_hours": "precipitationLast3Hours",
    "precipitation_last_6_hours": "precipitationLast6Hours",
    "relative_humidity": "relativeHumidity",
    "wind_chill": "windChill",
    "heat_index": "heatIndex",
}


@dataclass(frozen=True)
class MetarPhenomenon:
    weather: str
    raw_string: str
    intensity: str | None = None
    modifier: str | None = None
    in_vicinity: bool | None = None

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> MetarPhenomenon:
        return cls(
            weather=require(data, "weather"),
            raw_string=require(data, "rawString"),
            intensity=data.get("intensity"),
            modifier=data.get("modifier"),
            in_vicinity=data.get("inVicinity"),
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "intensity": self.intensity,
            "modifier": self.modifier,
            "weather": self.weather,
            "rawString": self.raw_string,
            "inVicinity": self.in_vicinity,
        }


@dataclass(frozen=True)
class ObservationCloudLayer:
    base: QuantitativeValue
    amount: str

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> ObservationCloudLayer:
        return cls(
            base=QuantitativeValue.from_json(data.get("base")),
            amount=require(data, "amount"),
        )

    def to_json(self) -> dict[str, Any]:
        return {"base": self.base.to_json(), "amount": self.amount}


@dataclass(frozen=True)
class Observation:
    """A single station observation (one decoded METAR)."""

    geometry: str
    id: str
    kind: str
    station: str
    timestamp: str
    raw_message: str
    text_description: str
    icon: str | None
    present_weather: tuple[MetarPhenomenon, ...]
    cloud_layers: tuple[ObservationCloudLayer, ...]
    elevation: QuantitativeValue
    temperature: QuantitativeValue
    dewpoint: QuantitativeValue
    wind_direction: QuantitativeValue
    wind_speed: QuantitativeValue
    wind_gust: QuantitativeValue
    barometric_pressure: QuantitativeValue
    sea_level_pressure: QuantitativeValue
    visibility: QuantitativeValue
    max_temperature_last_24_hours: QuantitativeValue
    min_temperature_last_24_hours: QuantitativeValue
    precipitation_last_hour: QuantitativeValue
    precipitation_last_3_hours: QuantitativeValue
    precipitation_last_6_hours: QuantitativeValue
    relative_humidity: QuantitativeValue
    wind_chill: QuantitativeValue
    heat_index: QuantitativeValue

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Observation:
        quantities = {
            attr: QuantitativeValue.from_json(data.get(key))
            for attr, key in OBSERVATION_QUANTITIES.items()
        }
        return cls(
            geometry=geometry_text(data),
            id=require(data, "@id"),
            kind=require(data, "@type"),
            station=require(data, "station"),
            timestamp=require(data, "timestamp"),
            raw_message=data.get("rawMessage") or "",
            text_description=data.get("textDescription") or "",
            icon=data.get("icon"),
            present_weather=tuple(MetarPhenomenon.from_json(item) for item in data.get("presentWeather") or []),
            cloud_layers=tuple(ObservationCloudLayer.from_json(item) for item in data.get("cloudLayers") or []),
            **quantities,
        )

    def to_json(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "geometry": self.geometry,
            "@id": self.id,
            "@type": self.kind,
            "station": self.station,
            "timestamp": self.timestamp,
            "rawMessage": self.raw_message,
            "textDescription": self.text_description,
            "icon": self.icon,
            "presentWeather": [item.to_json() for item in self.present_weather],
            "cloudLayers": [item.to_json() for item in self.cloud_layers],
        }
        for attr, key in OBSERVATION_QUANTITIES.items():
            payload[key] = getattr(self, attr).to_json()
        return payload


@dataclass(frozen=True)
class ObservationCollection:
    graph: tuple[Observation, ...]

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> ObservationCollection:
        return cls(graph=tuple(Observation.from_json(item) for item in require(data, "@graph")))

    def to_json(self) -> dict[str, Any]:
        return {"@graph": [item.to_json() for item in self.graph]}


@dataclass(frozen=True)
class ObservationStation:
    geometry: str
    id: str
    kind: str
    elevation: QuantitativeValue
    station_identifier: str
    name: str
    time_zone: str
    forecast: str | None = None
    county: str | None = None
    fire_weather_zone: str | None = None

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> ObservationStation:
        return cls(
            geometry=geometry_text(data),
            id=require(data, "@id"),
            kind=require(data, "@type"),
            elevation=QuantitativeValue.from_json(data.get("elevation")),
            station_identifier=require(data, "stationIdentifier"),
            name=require(data, "name"),
            time_zone=require(data, "timeZone"),
            forecast=data.get("forecast"),
            county=data.get("county"),
            fire_weather_zone=data.get("fireWeatherZone"),
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "geometry": self.geometry,
            "@id": self.id,
            "@type": self.kind,
            "elevation": self.elevation.to_json(),
            "stationIdentifier": self.station_identifier,
            "name": self.name,
            "timeZone": self.time_zone,
            "forecast": self.forecast,
            "county": self.county,
            "fireWeatherZone": self.fire_weather_zone,
        }


@dataclass(frozen=True)
class ObservationStationCollection:
    graph: tuple[ObservationStation, ...]
    observation_stations: tuple[str, ...]

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> ObservationStationCollection:
        return cls(
            graph=tuple(ObservationStation.from_json(item) for item in require(data, "@graph")),
            observation_stations=tuple(data.get("observationStations") or []),
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "@graph": [item.to_json() for item in self.graph],
            "observationStations": list(self.observation_stations),
        }
