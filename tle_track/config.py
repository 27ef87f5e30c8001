"""Application configuration loader for tle_track."""

from __future__ import annotations

import datetime as dt
import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from tle_track.core.types import DEFAULT_OBSERVER, ObserverPosition

__all__ = [
    "AppConfig",
    "GroundTrackSettings",
    "load_config",
]

DEFAULT_GROUND_TRACK_STEP_MS = 60_000
GROUND_TRACK_HALF_WINDOW = dt.timedelta(hours=3)


@dataclass(frozen=True)
class GroundTrackSettings:
    """Sampling options for ground-track generation."""

    step: dt.timedelta = dt.timedelta(milliseconds=DEFAULT_GROUND_TRACK_STEP_MS)
    half_window: dt.timedelta = GROUND_TRACK_HALF_WINDOW


@dataclass(frozen=True)
class AppConfig:
    """Container for derived application configuration."""

    observer: ObserverPosition = DEFAULT_OBSERVER
    ground_track: GroundTrackSettings = field(default_factory=GroundTrackSettings)
    log_level: str = "INFO"


def _to_float(env: Mapping[str, str], key: str, default: float) -> float:
    raw = env.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{key} must be numeric, got {raw!r}") from exc


def load_config(env: Optional[Mapping[str, str]] = None) -> AppConfig:
    """Load configuration from environment variables."""

    env_map: Mapping[str, str]
    if env is None:
        env_map = os.environ
    else:
        env_map = env

    observer = ObserverPosition(
        lat_deg=_to_float(env_map, "TLE_TRACK_OBSERVER_LAT", DEFAULT_OBSERVER.lat_deg),
        lng_deg=_to_float(env_map, "TLE_TRACK_OBSERVER_LNG", DEFAULT_OBSERVER.lng_deg),
        height_km=_to_float(env_map, "TLE_TRACK_OBSERVER_HEIGHT_KM", DEFAULT_OBSERVER.height_km),
    )

    step_ms = _to_float(env_map, "TLE_TRACK_GROUND_TRACK_STEP_MS", DEFAULT_GROUND_TRACK_STEP_MS)
    if step_ms <= 0:
        raise ValueError("TLE_TRACK_GROUND_TRACK_STEP_MS must be positive")

    return AppConfig(
        observer=observer,
        ground_track=GroundTrackSettings(step=dt.timedelta(milliseconds=step_ms)),
        log_level=env_map.get("TLE_TRACK_LOG_LEVEL", "INFO").upper(),
    )
