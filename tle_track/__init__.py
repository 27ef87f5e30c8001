"""Decode, validate and observe Two-Line Element sets."""

from __future__ import annotations

from .core import (
    FIELD_SPECS,
    FieldSpec,
    ObserverPosition,
    SatelliteObservation,
    TLEField,
    TLERecord,
    day_of_year_to_datetime,
    day_of_year_to_timestamp,
    get_epoch_datetime,
    get_epoch_timestamp,
    get_field,
    get_fields,
    is_valid_tle,
    line_checksum,
    parse_tle,
    resolve_epoch_year,
    validate_tle,
)
from .core.fields import (
    get_classification,
    get_eccentricity,
    get_epoch_day,
    get_epoch_year,
    get_inclination,
    get_mean_motion,
    get_satellite_number,
)
from .errors import (
    EmptyLineError,
    InvalidInputType,
    InvalidTLEError,
    PropagationError,
    TLETrackError,
)

__version__ = "0.1.0"

__all__ = [
    "EmptyLineError",
    "FIELD_SPECS",
    "FieldSpec",
    "InvalidInputType",
    "InvalidTLEError",
    "ObserverPosition",
    "PropagationError",
    "SatelliteObservation",
    "TLEField",
    "TLERecord",
    "TLETrackError",
    "day_of_year_to_datetime",
    "day_of_year_to_timestamp",
    "get_classification",
    "get_eccentricity",
    "get_epoch_datetime",
    "get_epoch_day",
    "get_epoch_timestamp",
    "get_epoch_year",
    "get_field",
    "get_fields",
    "get_inclination",
    "get_mean_motion",
    "get_satellite_number",
    "is_valid_tle",
    "line_checksum",
    "parse_tle",
    "resolve_epoch_year",
    "validate_tle",
]
