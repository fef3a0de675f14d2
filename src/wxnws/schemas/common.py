"""Building blocks shared by the JSON-LD schema classes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

import pandas as pd

from wxnws.errors import SchemaError


def require(data: Mapping[str, Any], key: str) -> Any:
    """Return ``data[key]`` or raise :class:`SchemaError` naming the field."""

    if not isinstance(data, Mapping):
        raise SchemaError(f"Expected an object holding {key!r}, got {type(data).__name__}")
    try:
        return data[key]
    except KeyError:
        raise SchemaError(f"Missing required field {key!r}") from None


def force_int(value: Any, key: str) -> int:
    """Grid coordinates arrive either as numbers or as numeric strings."""

    if isinstance(value, bool):
        raise SchemaError(f"Field {key!r} is not an integer: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise SchemaError(f"Field {key!r} is not an integer: {value!r}")


def geometry_text(data: Mapping[str, Any]) -> str:
    """Return the WKT geometry string of an ``application/ld+json`` object."""

    value = require(data, "geometry")
    if not isinstance(value, str):
        raise SchemaError(f"Field 'geometry' is not WKT text: {value!r}")
    return value


@dataclass(frozen=True)
class QuantitativeValue:
    """A measured value with its WMO unit code, e.g. ``wmoUnit:degC``."""

    unit_code: str | None = None
    value: float | None = None
    max_value: float | None = None
    min_value: float | None = None
    quality_control: str | None = None

    @classmethod
    def from_json(cls, data: Mapping[str, Any] | None) -> QuantitativeValue:
        data = data or {}
        return cls(
            unit_code=data.get("unitCode"),
            value=data.get("value"),
            max_value=data.get("maxValue"),
            min_value=data.get("minValue"),
            quality_control=data.get("qualityControl"),
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "unitCode": self.unit_code,
            "value": self.value,
            "maxValue": self.max_value,
            "minValue": self.min_value,
            "qualityControl": self.quality_control,
        }


@dataclass(frozen=True)
class LayerValue:
    valid_time: str
    value: float | None

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> LayerValue:
        return cls(valid_time=require(data, "validTime"), value=data.get("value"))

    def to_json(self) -> dict[str, Any]:
        return {"validTime": self.valid_time, "value": self.value}


def valid_time_start(valid_time: str) -> pd.Timestamp:
    """Return the start of an ISO-8601 interval such as ``2024-01-01T00:00:00+00:00/PT1H``."""

    return pd.Timestamp(valid_time.split("/", 1)[0])


@dataclass(frozen=True)
class QuantitativeValueLayer:
    """A gridpoint forecast layer: a unit and a list of timed values."""

    uom: str | None
    values: tuple[LayerValue, ...]

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> QuantitativeValueLayer:
        return cls(
            uom=data.get("uom"),
            values=tuple(LayerValue.from_json(item) for item in require(data, "values")),
        )

    def to_json(self) -> dict[str, Any]:
        return {"uom": self.uom, "values": [item.to_json() for item in self.values]}

    def to_series(self, name: str | None = None) -> pd.Series:
        """Return the layer as a float Series indexed by interval start time."""

        index = pd.DatetimeIndex([valid_time_start(item.valid_time) for item in self.values], name="valid_time")
        values = [float("nan") if item.value is None else item.value for item in self.values]
        series = pd.Series(values, index=index, name=name, dtype="float64")
        series.attrs["uom"] = self.uom
        return series
