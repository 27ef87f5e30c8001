"""Quantities derived from TLE fields and propagated positions."""
from __future__ import annotations

import datetime as dt
import math
from typing import Any, List, Optional, Union

from propagate.service import TimeLike, TrackingService
from tle_track.core.fields import get_mean_motion

EARTH_MEAN_RADIUS_KM = 6371.0
MINUTES_PER_DAY = 24 * 60
GROUND_SPEED_SAMPLE = dt.timedelta(seconds=10)


def great_circle_distance_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Haversine distance between two points given in degrees."""

    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)
    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(dlon / 2) ** 2
    )
    return 2 * EARTH_MEAN_RADIUS_KM * math.asin(math.sqrt(min(1.0, a)))


def ground_speed_km_s(service: TrackingService, tle: Any, when: TimeLike = None) -> float:
    """Ground-track speed from two fixes ten seconds apart.

    This is a finite difference over the surface, not the orbital velocity.
    """

    start, _ = service.resolve_time(when)
    first = service.get_satellite_info(tle, start)
    second = service.get_satellite_info(tle, start + GROUND_SPEED_SAMPLE)
    distance = great_circle_distance_km(first.lat, first.lng, second.lat, second.lng)
    return distance / GROUND_SPEED_SAMPLE.total_seconds()


def average_orbit_period_minutes(tle: Any) -> float:
    mean_motion = get_mean_motion(tle)
    if isinstance(mean_motion, str) or mean_motion == 0:
        raise ValueError(f"mean motion is not usable: {mean_motion!r}")
    return MINUTES_PER_DAY / mean_motion


def ground_track(
    service: TrackingService,
    tle: Any,
    step: Union[dt.timedelta, int, float, None] = None,
    now: TimeLike = None,
    half_window: Optional[dt.timedelta] = None,
) -> List[List[float]]:
    """Sample ``[lat, lng]`` pairs from three hours before *now* to three after.

    The window end is exclusive, so there are ``ceil(window / step)`` points.
    Numeric steps are milliseconds; *step* and *half_window* default to the
    service's track settings.
    """

    if step is None:
        step = service.track_settings.step
    elif not isinstance(step, dt.timedelta):
        step = dt.timedelta(milliseconds=step)
    if half_window is None:
        half_window = service.track_settings.half_window
    if step <= dt.timedelta(0):
        raise ValueError("step must be positive")

    centre, _ = service.resolve_time(now)
    current = centre - half_window
    end = centre + half_window

    points: List[List[float]] = []
    while current < end:
        points.append(service.get_lat_lon_arr(tle, current))
        current += step
    return points


__all__ = [
    "EARTH_MEAN_RADIUS_KM",
    "average_orbit_period_minutes",
    "great_circle_distance_km",
    "ground_speed_km_s",
    "ground_track",
]
