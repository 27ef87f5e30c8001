"""Shared dataclasses for TLE records and the observations derived from them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

UNKNOWN_NAME = "Unknown"

FieldValue = Union[float, str]


@dataclass(frozen=True)
class TLERecord:
    """Canonical two-line element set.

    ``lines`` holds the trimmed element lines with any name line removed.  A
    well formed record has exactly two of them, but the parser leaves that
    check to validation so malformed input can still be inspected.
    """

    name: str = UNKNOWN_NAME
    lines: Tuple[str, ...] = ()

    @property
    def line1(self) -> str:
        return self.lines[0] if self.lines else ""

    @property
    def line2(self) -> str:
        return self.lines[1] if len(self.lines) > 1 else ""

    def as_text(self, three_line: bool = True) -> str:
        if three_line and self.name != UNKNOWN_NAME:
            return "\n".join((self.name,) + self.lines) + "\n"
        return "\n".join(self.lines) + "\n"


@dataclass(frozen=True)
class ObserverPosition:
    """Ground observer location (degrees, kilometres)."""

    lat_deg: float = 36.9613422
    lng_deg: float = -122.0308
    height_km: float = 0.370


DEFAULT_OBSERVER = ObserverPosition()


@dataclass(frozen=True)
class SatelliteObservation:
    """Snapshot of a satellite as seen at one instant from one observer."""

    lng: float
    lat: float
    elevation_deg: float
    azimuth_deg: float
    range_km: float
    height_km: float
    velocity_km_s: float

    def as_dict(self) -> dict:
        return {
            "lng": self.lng,
            "lat": self.lat,
            "elevation": self.elevation_deg,
            "azimuth": self.azimuth_deg,
            "range": self.range_km,
            "height": self.height_km,
            "velocity": self.velocity_km_s,
        }


__all__ = [
    "DEFAULT_OBSERVER",
    "FieldValue",
    "ObserverPosition",
    "SatelliteObservation",
    "TLERecord",
    "UNKNOWN_NAME",
]
