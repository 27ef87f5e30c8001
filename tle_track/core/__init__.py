"""Public API for tle_track core primitives."""

from .checksum import is_valid_tle, line_checksum, validate_tle
from .epoch import (
    day_of_year_to_datetime,
    day_of_year_to_timestamp,
    get_epoch_datetime,
    get_epoch_timestamp,
    resolve_epoch_year,
)
from .fields import FIELD_SPECS, FieldAccessor, FieldSpec, TLEField, get_field, get_fields
from .parser import parse_tle
from .types import DEFAULT_OBSERVER, ObserverPosition, SatelliteObservation, TLERecord

__all__ = [
    "DEFAULT_OBSERVER",
    "FIELD_SPECS",
    "FieldAccessor",
    "FieldSpec",
    "ObserverPosition",
    "SatelliteObservation",
    "TLEField",
    "TLERecord",
    "day_of_year_to_datetime",
    "day_of_year_to_timestamp",
    "get_epoch_datetime",
    "get_epoch_timestamp",
    "get_field",
    "get_fields",
    "is_valid_tle",
    "line_checksum",
    "parse_tle",
    "resolve_epoch_year",
    "validate_tle",
]
