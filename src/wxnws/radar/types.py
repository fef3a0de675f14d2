"""Value types produced by the radar directory crawler."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from urllib.parse import urlsplit

from wxnws.errors import UnknownRadarTypeError


class RadarType(str, Enum):
    """RIDGE II level-2 radar products, keyed by their directory name."""

    BREF_RAW = "BREF_RAW"
    BVEL_RAW = "BVEL_RAW"
    BDHC = "BDHC"
    BDSA = "BDSA"
    BDZD = "BDZD"
    BEET = "BEET"
    BOHP = "BOHP"
    BREF = "BREF"
    BSRM = "BSRM"
    BSTA = "BSTA"
    BSTP = "BSTP"
    BVEL = "BVEL"
    CREF = "CREF"
    HVIL = "HVIL"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_code(cls, text: str) -> RadarType:
        """Decode a canonical product code such as ``"BREF"``."""

        try:
            return cls(text)
        except ValueError:
            raise UnknownRadarTypeError(text) from None

    @classmethod
    def values(cls) -> list[RadarType]:
        return list(cls)


class SizeUnit(str, Enum):
    """Unit suffix printed by the directory index."""

    BYTES = "B"
    KILOBYTES = "K"
    MEGABYTES = "M"
    GIGABYTES = "G"


_UNIT_FACTORS = {
    SizeUnit.BYTES: 1,
    SizeUnit.KILOBYTES: 1024,
    SizeUnit.MEGABYTES: 1024**2,
    SizeUnit.GIGABYTES: 1024**3,
}


@dataclass(frozen=True)
class FileSize:
    """A size exactly as the listing printed it, e.g. ``14M`` or ``1.5K``."""

    unit: SizeUnit
    value: float

    @classmethod
    def bytes(cls, value: float) -> FileSize:
        return cls(SizeUnit.BYTES, value)

    @classmethod
    def kilobytes(cls, value: float) -> FileSize:
        return cls(SizeUnit.KILOBYTES, value)

    @classmethod
    def megabytes(cls, value: float) -> FileSize:
        return cls(SizeUnit.MEGABYTES, value)

    @classmethod
    def gigabytes(cls, value: float) -> FileSize:
        return cls(SizeUnit.GIGABYTES, value)

    def to_bytes(self) -> float:
        """Approximate byte count; the listing has already rounded the value."""

        return self.value * _UNIT_FACTORS[self.unit]

    def to_dict(self) -> dict[str, object]:
        return {"unit": self.unit.value, "value": self.value}

    def __str__(self) -> str:
        suffix = "" if self.unit is SizeUnit.BYTES else self.unit.value
        return f"{self.value:g}{suffix}"


@dataclass(frozen=True)
class RemoteFile:
    """One row of a directory listing."""

    url: str
    last_modified: datetime | None = None
    size: FileSize | None = None

    @property
    def name(self) -> str:
        """Final path segment of the URL; directories keep their trailing slash."""

        path = urlsplit(self.url).path
        trimmed = path.rstrip("/")
        if not trimmed:
            return "/"
        name = trimmed.rsplit("/", 1)[-1]
        return f"{name}/" if path.endswith("/") else name

    def to_dict(self) -> dict[str, object]:
        return {
            "url": self.url,
            "last_modified": self.last_modified.isoformat() if self.last_modified else None,
            "size": self.size.to_dict() if self.size else None,
        }
