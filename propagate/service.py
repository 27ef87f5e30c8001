"""Satellite position lookups built on top of SGP4."""
from __future__ import annotations

import datetime as dt
import math
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from sgp4.api import SGP4_ERRORS, Satrec

from propagate.cache import CacheKey, ObservationCache
from propagate.frames import (
    Geodetic,
    StateVector,
    ecef_to_look_angles,
    gmst,
    julian_date,
    teme_to_ecef,
    teme_to_geodetic,
)
from tle_track.config import AppConfig, GroundTrackSettings
from tle_track.core.checksum import validate_tle
from tle_track.core.epoch import from_timestamp_ms, get_epoch_timestamp, to_timestamp_ms
from tle_track.core.parser import parse_tle
from tle_track.core.types import (
    DEFAULT_OBSERVER,
    ObserverPosition,
    SatelliteObservation,
)
from tle_track.errors import InvalidTLEError, PropagationError
from tle_track.logging import configure_logging, get_logger, log_context

LOGGER = get_logger("propagate")

Propagator = Callable[[str, str, dt.datetime], StateVector]
TimeLike = Union[dt.datetime, int, float, None]


def _utcnow() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


def propagate_satrec(sat: Any, jd: float, fr: float) -> StateVector:
    error, position, velocity = sat.sgp4(jd, fr)
    if error != 0:
        message = SGP4_ERRORS.get(error, f"SGP4 error code {error}")
        raise PropagationError(message)
    return StateVector(tuple(position), tuple(velocity))


def sgp4_propagate(line1: str, line2: str, when: dt.datetime) -> StateVector:
    """Propagate a TLE pair to *when*, returning a TEME state vector."""

    sat = Satrec.twoline2rv(line1, line2)
    jd, fr = julian_date(when)
    return propagate_satrec(sat, jd, fr)


class TrackingService:
    """Memoized satellite observations for TLE records.

    The service owns its :class:`ObservationCache`; pass one in to share it
    between services or to inspect it in tests.
    """

    def __init__(
        self,
        propagator: Optional[Propagator] = None,
        cache: Optional[ObservationCache] = None,
        observer: Optional[ObserverPosition] = None,
        clock: Optional[Callable[[], dt.datetime]] = None,
        track_settings: Optional[GroundTrackSettings] = None,
    ) -> None:
        self.propagator = propagator or sgp4_propagate
        self.cache = cache if cache is not None else ObservationCache()
        self.observer = observer or DEFAULT_OBSERVER
        self._clock = clock or _utcnow
        self.track_settings = track_settings or GroundTrackSettings()

    @classmethod
    def from_config(cls, config: AppConfig, **kwargs: Any) -> "TrackingService":
        configure_logging(config.log_level)
        kwargs.setdefault("observer", config.observer)
        kwargs.setdefault("track_settings", config.ground_track)
        return cls(**kwargs)

    def now(self) -> dt.datetime:
        return self._clock()

    def resolve_time(self, when: TimeLike) -> Tuple[dt.datetime, int]:
        """Return *when* as an aware UTC datetime and epoch milliseconds.

        ``None`` means the service clock; numbers are epoch milliseconds.
        """

        if when is None:
            when = self._clock()
        if isinstance(when, dt.datetime):
            timestamp_ms = to_timestamp_ms(when)
        else:
            timestamp_ms = math.floor(when)
        return from_timestamp_ms(timestamp_ms), timestamp_ms

    def get_satellite_info(
        self,
        tle: Any,
        when: TimeLike = None,
        observer: Optional[ObserverPosition] = None,
    ) -> SatelliteObservation:
        record = parse_tle(tle)
        if len(record.lines) != 2:
            raise InvalidTLEError(f"expected two element lines, got {len(record.lines)}")
        observer = observer or self.observer
        instant, timestamp_ms = self.resolve_time(when)
        key = CacheKey.build(record, timestamp_ms, observer)

        with log_context(satellite=record.line1[2:7].strip(), timestamp_ms=timestamp_ms):
            cached = self.cache.get(key)
            if cached is not None:
                LOGGER.debug("observation_cache_hit")
                return cached

            LOGGER.debug("observation_cache_miss")
            try:
                state = self.propagator(record.line1, record.line2, instant)
            except PropagationError as exc:
                LOGGER.warning("propagation_failed", extra={"reason": str(exc)})
                raise
            observation = self._observe(state, instant, observer)
            return self.cache.set(key, observation)

    def _observe(
        self, state: StateVector, instant: dt.datetime, observer: ObserverPosition
    ) -> SatelliteObservation:
        theta = gmst(instant)
        ecef = teme_to_ecef(state, theta)
        position = teme_to_geodetic(state.position_km, theta)
        observer_gd = Geodetic.from_degrees(observer.lat_deg, observer.lng_deg, observer.height_km)
        angles = ecef_to_look_angles(observer_gd, ecef.position_km)

        return SatelliteObservation(
            lng=math.degrees(position.longitude),
            lat=math.degrees(position.latitude),
            elevation_deg=math.degrees(angles.elevation),  # 90 is directly overhead
            azimuth_deg=math.degrees(angles.azimuth),  # compass heading
            range_km=angles.range_km,
            height_km=position.height_km,
            velocity_km_s=state.speed_km_s,
        )

    def get_lat_lon(self, tle: Any, when: TimeLike = None) -> Dict[str, float]:
        record = validate_tle(tle)
        info = self.get_satellite_info(record, when)
        return {"lat": info.lat, "lng": info.lng}

    def get_lat_lon_arr(self, tle: Any, when: TimeLike = None) -> List[float]:
        lat_lon = self.get_lat_lon(tle, when)
        return [lat_lon["lat"], lat_lon["lng"]]

    def get_lat_lon_at_epoch(self, tle: Any) -> Dict[str, float]:
        record = validate_tle(tle)
        return self.get_lat_lon(record, get_epoch_timestamp(record))

    def get_look_angles(
        self,
        tle: Any,
        when: TimeLike = None,
        observer: Optional[ObserverPosition] = None,
    ) -> Dict[str, float]:
        info = self.get_satellite_info(tle, when, observer)
        return {
            "elevation": info.elevation_deg,
            "azimuth": info.azimuth_deg,
            "range": info.range_km,
        }


__all__ = [
    "Propagator",
    "TrackingService",
    "propagate_satrec",
    "sgp4_propagate",
]
