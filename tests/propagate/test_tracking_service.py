from __future__ import annotations

import datetime as dt

import pytest

from propagate.cache import CacheKey, ObservationCache
from propagate.frames import StateVector
from propagate.service import TrackingService, propagate_satrec, sgp4_propagate
from tle_track.config import AppConfig
from tle_track.core import ObserverPosition, SatelliteObservation, get_epoch_timestamp, parse_tle
from tle_track.errors import InvalidTLEError, PropagationError

ISS_LINE1 = "1 25544U 98067A   21275.52719505  .00002182  00000-0  49422-4 0  9999"
ISS_LINE2 = "2 25544  51.6442  40.7625 0003438 154.0455 306.1756 15.48783287303096"
ISS = ["ISS (ZARYA)", ISS_LINE1, ISS_LINE2]
EPOCH_MS = get_epoch_timestamp(ISS)
EPOCH = dt.datetime(1970, 1, 1, tzinfo=dt.timezone.utc) + dt.timedelta(milliseconds=EPOCH_MS)


class CountingPropagator:
    def __init__(self, inner=sgp4_propagate):
        self.inner = inner
        self.calls = 0

    def __call__(self, line1: str, line2: str, when: dt.datetime) -> StateVector:
        self.calls += 1
        return self.inner(line1, line2, when)


class FailingSatrec:
    def sgp4(self, jd: float, fr: float):
        return 1, (0.0, 0.0, 0.0), (0.0, 0.0, 0.0)


def _failing_propagator(line1: str, line2: str, when: dt.datetime) -> StateVector:
    return propagate_satrec(FailingSatrec(), 0.0, 0.0)


@pytest.fixture
def propagator() -> CountingPropagator:
    return CountingPropagator()


@pytest.fixture
def service(propagator) -> TrackingService:
    return TrackingService(propagator=propagator, clock=lambda: EPOCH)


def test_iss_observation_is_plausible(service) -> None:
    info = service.get_satellite_info(ISS, EPOCH_MS)
    assert isinstance(info, SatelliteObservation)
    assert abs(info.lat) <= 52.5
    assert -180.0 <= info.lng <= 180.0
    assert 350.0 < info.height_km < 470.0
    assert 7.4 < info.velocity_km_s < 7.9
    assert -90.0 <= info.elevation_deg <= 90.0
    assert 0.0 <= info.azimuth_deg <= 360.0
    assert 350.0 < info.range_km < 13_500.0


def test_repeated_lookup_hits_cache(service, propagator) -> None:
    first = service.get_satellite_info(ISS, EPOCH_MS)
    second = service.get_satellite_info(ISS, EPOCH_MS)
    assert second is first
    assert propagator.calls == 1
    assert len(service.cache) == 1


def test_cache_key_includes_time_and_observer(service, propagator) -> None:
    service.get_satellite_info(ISS, EPOCH_MS)
    service.get_satellite_info(ISS, EPOCH_MS + 1000)
    service.get_satellite_info(ISS, EPOCH_MS, ObserverPosition(51.5, -0.1, 0.02))
    assert propagator.calls == 3

    record = parse_tle(ISS)
    key = CacheKey.build(record, EPOCH_MS, service.observer)
    assert key in service.cache


def test_datetime_and_milliseconds_share_cache_entry(service, propagator) -> None:
    by_ms = service.get_satellite_info(ISS, EPOCH_MS)
    by_dt = service.get_satellite_info(ISS, EPOCH)
    by_default = service.get_satellite_info(ISS)
    assert by_ms is by_dt is by_default
    assert propagator.calls == 1


def test_naive_datetime_is_rejected(service) -> None:
    with pytest.raises(ValueError):
        service.get_satellite_info(ISS, dt.datetime(2021, 10, 2, 12))


def test_shared_cache_between_services(propagator) -> None:
    cache = ObservationCache()
    first = TrackingService(propagator=propagator, cache=cache)
    second = TrackingService(propagator=propagator, cache=cache)
    observation = first.get_satellite_info(ISS, EPOCH_MS)
    assert second.get_satellite_info(ISS, EPOCH_MS) is observation
    assert propagator.calls == 1
    cache.clear()
    assert len(cache) == 0


def test_get_lat_lon_validates_first(service, propagator) -> None:
    broken = [ISS_LINE1, ISS_LINE2[:-1] + "5"]
    with pytest.raises(InvalidTLEError):
        service.get_lat_lon(broken, EPOCH_MS)
    assert propagator.calls == 0
    assert len(service.cache) == 0


def test_lat_lon_helpers_agree(service) -> None:
    info = service.get_satellite_info(ISS, EPOCH_MS)
    assert service.get_lat_lon(ISS, EPOCH_MS) == {"lat": info.lat, "lng": info.lng}
    assert service.get_lat_lon_arr(ISS, EPOCH_MS) == [info.lat, info.lng]
    assert service.get_lat_lon_at_epoch(ISS) == {"lat": info.lat, "lng": info.lng}


def test_look_angles_subset(service) -> None:
    observer = ObserverPosition(28.5, -80.6, 0.0)
    info = service.get_satellite_info(ISS, EPOCH_MS, observer)
    angles = service.get_look_angles(ISS, EPOCH_MS, observer)
    assert angles == {
        "elevation": info.elevation_deg,
        "azimuth": info.azimuth_deg,
        "range": info.range_km,
    }


def test_propagation_error_is_surfaced_and_not_cached() -> None:
    service = TrackingService(propagator=_failing_propagator)
    with pytest.raises(PropagationError, match="eccentricity"):
        service.get_satellite_info(ISS, EPOCH_MS)
    assert len(service.cache) == 0


def test_unknown_sgp4_error_code() -> None:
    class OddSatrec:
        def sgp4(self, jd, fr):
            return 42, (0.0, 0.0, 0.0), (0.0, 0.0, 0.0)

    with pytest.raises(PropagationError, match="42"):
        propagate_satrec(OddSatrec(), 0.0, 0.0)


def test_from_config_uses_configured_observer() -> None:
    observer = ObserverPosition(10.0, 20.0, 0.5)
    config = AppConfig(observer=observer)
    service = TrackingService.from_config(config)
    assert service.observer == observer
    assert service.track_settings == config.ground_track


def test_record_without_two_lines_is_rejected(service, propagator) -> None:
    with pytest.raises(InvalidTLEError):
        service.get_satellite_info([ISS_LINE1], EPOCH_MS)
    with pytest.raises(InvalidTLEError):
        service.get_look_angles(["name", ISS_LINE1, ISS_LINE2, ISS_LINE2], EPOCH_MS)
    assert propagator.calls == 0
    assert len(service.cache) == 0
