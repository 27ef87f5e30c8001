"""Satellite observations built on top of SGP4."""

from .cache import CacheKey, ObservationCache
from .frames import Geodetic, LookAngles, StateVector
from .metrics import (
    average_orbit_period_minutes,
    great_circle_distance_km,
    ground_speed_km_s,
    ground_track,
)
from .service import Propagator, TrackingService, sgp4_propagate

__all__ = [
    "CacheKey",
    "Geodetic",
    "LookAngles",
    "ObservationCache",
    "Propagator",
    "StateVector",
    "TrackingService",
    "average_orbit_period_minutes",
    "great_circle_distance_km",
    "ground_speed_km_s",
    "ground_track",
    "sgp4_propagate",
]
