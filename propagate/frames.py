"""Reference frame transformations for SGP4 outputs.

SGP4 yields TEME (true equator, mean equinox) vectors.  The helpers here
rotate them into the Earth-fixed frame, convert to WGS-84 geodetic
coordinates and compute topocentric look angles for a ground observer.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Tuple

from sgp4.api import jday

EARTH_ROT_RATE_RAD_PER_SEC = 7.2921150e-5

# WGS-84 ellipsoid (km)
EARTH_EQUATORIAL_RADIUS_KM = 6378.137
EARTH_POLAR_RADIUS_KM = 6356.7523142
_FLATTENING = (EARTH_EQUATORIAL_RADIUS_KM - EARTH_POLAR_RADIUS_KM) / EARTH_EQUATORIAL_RADIUS_KM
_E2 = 2 * _FLATTENING - _FLATTENING * _FLATTENING

Position = Tuple[float, float, float]
Velocity = Tuple[float, float, float]


@dataclass(frozen=True)
class StateVector:
    """Position and velocity state vector (kilometres / kilometres per second)."""

    position_km: Position
    velocity_km_s: Velocity

    @property
    def speed_km_s(self) -> float:
        return math.sqrt(sum(component * component for component in self.velocity_km_s))


@dataclass(frozen=True)
class Geodetic:
    """Geodetic coordinates; angles in radians, height in kilometres."""

    latitude: float
    longitude: float
    height_km: float

    @classmethod
    def from_degrees(cls, lat_deg: float, lng_deg: float, height_km: float) -> "Geodetic":
        return cls(math.radians(lat_deg), math.radians(lng_deg), height_km)


@dataclass(frozen=True)
class LookAngles:
    """Observer-relative angles in radians and slant range in kilometres."""

    azimuth: float
    elevation: float
    range_km: float


def julian_date(dt: datetime) -> Tuple[float, float]:
    if dt.tzinfo is None:
        raise ValueError("datetime must be timezone-aware")
    return jday(dt.year, dt.month, dt.day, dt.hour, dt.minute,
                dt.second + dt.microsecond / 1_000_000)


def gmst(dt: datetime) -> float:
    """Greenwich mean sidereal time in radians for *dt*."""

    jd, fr = julian_date(dt)
    jd_ut1 = jd + fr
    t = (jd_ut1 - 2451545.0) / 36525.0
    gmst_sec = (
        67310.54841
        + (876600.0 * 3600 + 8640184.812866) * t
        + 0.093104 * t * t
        - 6.2e-6 * t * t * t
    )
    gmst_sec = gmst_sec % 86400.0
    if gmst_sec < 0:
        gmst_sec += 86400.0
    return math.radians(gmst_sec / 240.0)


def teme_to_ecef(state: StateVector, theta: float) -> StateVector:
    cos_t = math.cos(theta)
    sin_t = math.sin(theta)

    x, y, z = state.position_km
    vx, vy, vz = state.velocity_km_s

    x_ecef = cos_t * x + sin_t * y
    y_ecef = -sin_t * x + cos_t * y
    z_ecef = z

    vx_rot = cos_t * vx + sin_t * vy
    vy_rot = -sin_t * vx + cos_t * vy
    vz_rot = vz

    omega = EARTH_ROT_RATE_RAD_PER_SEC
    vx_ecef = vx_rot + omega * y_ecef
    vy_ecef = vy_rot - omega * x_ecef
    vz_ecef = vz_rot

    return StateVector((x_ecef, y_ecef, z_ecef), (vx_ecef, vy_ecef, vz_ecef))


def _wrap_longitude(longitude: float) -> float:
    while longitude < -math.pi:
        longitude += 2 * math.pi
    while longitude > math.pi:
        longitude -= 2 * math.pi
    return longitude


def teme_to_geodetic(position_km: Position, theta: float) -> Geodetic:
    """Convert a TEME position to geodetic coordinates by fixed-point iteration."""

    x, y, z = position_km
    a = EARTH_EQUATORIAL_RADIUS_KM
    r = math.sqrt(x * x + y * y)
    longitude = _wrap_longitude(math.atan2(y, x) - theta)

    latitude = math.atan2(z, r)
    c = 1.0
    for _ in range(20):
        sin_lat = math.sin(latitude)
        c = 1 / math.sqrt(1 - _E2 * sin_lat * sin_lat)
        latitude = math.atan2(z + a * c * _E2 * sin_lat, r)

    height = r / math.cos(latitude) - a * c
    return Geodetic(latitude, longitude, height)


def geodetic_to_ecef(point: Geodetic) -> Position:
    a = EARTH_EQUATORIAL_RADIUS_KM
    sin_lat = math.sin(point.latitude)
    cos_lat = math.cos(point.latitude)
    normal = a / math.sqrt(1 - _E2 * sin_lat * sin_lat)

    x = (normal + point.height_km) * cos_lat * math.cos(point.longitude)
    y = (normal + point.height_km) * cos_lat * math.sin(point.longitude)
    z = (normal * (1 - _E2) + point.height_km) * sin_lat
    return (x, y, z)


def ecef_to_look_angles(observer: Geodetic, satellite_ecef: Position) -> LookAngles:
    """Azimuth, elevation and range of an Earth-fixed point seen by *observer*."""

    ox, oy, oz = geodetic_to_ecef(observer)
    sx, sy, sz = satellite_ecef
    rx, ry, rz = sx - ox, sy - oy, sz - oz

    sin_lat = math.sin(observer.latitude)
    cos_lat = math.cos(observer.latitude)
    sin_lon = math.sin(observer.longitude)
    cos_lon = math.cos(observer.longitude)

    # South-east-zenith topocentric frame.
    top_s = sin_lat * cos_lon * rx + sin_lat * sin_lon * ry - cos_lat * rz
    top_e = -sin_lon * rx + cos_lon * ry
    top_z = cos_lat * cos_lon * rx + cos_lat * sin_lon * ry + sin_lat * rz

    range_km = math.sqrt(top_s * top_s + top_e * top_e + top_z * top_z)
    elevation = math.asin(top_z / range_km)
    azimuth = math.atan2(-top_e, top_s) + math.pi
    return LookAngles(azimuth=azimuth, elevation=elevation, range_km=range_km)


__all__ = [
    "Geodetic",
    "LookAngles",
    "Position",
    "StateVector",
    "Velocity",
    "ecef_to_look_angles",
    "geodetic_to_ecef",
    "gmst",
    "julian_date",
    "teme_to_ecef",
    "teme_to_geodetic",
]
