"""Typed views of the api.weather.gov JSON-LD payloads."""

from __future__ import annotations

from .common import LayerValue, QuantitativeValue, QuantitativeValueLayer
from .gridpoints import (
    Gridpoint,
    GridpointStations,
    Hazards,
    HazardsValue,
    HazardsValueInner,
    Weather,
    WeatherValue,
    WeatherValueInner,
)
from .points import Point, RelativeLocation
from .stations import (
    MetarPhenomenon,
    Observation,
    ObservationCloudLayer,
    ObservationCollection,
    ObservationStation,
    ObservationStationCollection,
)

__all__ = [
    "Gridpoint",
    "GridpointStations",
    "Hazards",
    "HazardsValue",
    "HazardsValueInner",
    "LayerValue",
    "MetarPhenomenon",
    "Observation",
    "ObservationCloudLayer",
    "ObservationCollection",
    "ObservationStation",
    "ObservationStationCollection",
    "Point",
    "QuantitativeValue",
    "QuantitativeValueLayer",
    "RelativeLocation",
    "Weather",
    "WeatherValue",
    "WeatherValueInner",
]
