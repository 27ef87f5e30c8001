"""Memoization cache for satellite observations."""
from __future__ import annotations

import threading
from typing import Dict, NamedTuple, Optional

from tle_track.core.types import ObserverPosition, SatelliteObservation, TLERecord


class CacheKey(NamedTuple):
    line1: str
    line2: str
    timestamp_ms: int
    observer_lat: float
    observer_lng: float
    observer_height: float

    @classmethod
    def build(cls, record: TLERecord, timestamp_ms: int, observer: ObserverPosition) -> "CacheKey":
        return cls(
            record.line1,
            record.line2,
            timestamp_ms,
            observer.lat_deg,
            observer.lng_deg,
            observer.height_km,
        )


class ObservationCache:
    """Unbounded in-memory cache of computed observations.

    Entries live as long as the cache object.  Lookups and stores take a
    lock; computing a missing value happens outside it, so two threads may
    both compute the same key and store equal observations.
    """

    def __init__(self) -> None:
        self._entries: Dict[CacheKey, SatelliteObservation] = {}
        self._lock = threading.Lock()

    def get(self, key: CacheKey) -> Optional[SatelliteObservation]:
        with self._lock:
            return self._entries.get(key)

    def set(self, key: CacheKey, observation: SatelliteObservation) -> SatelliteObservation:
        """Store *observation* unless *key* is present; return the stored value."""

        with self._lock:
            return self._entries.setdefault(key, observation)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries


__all__ = ["CacheKey", "ObservationCache"]
