"""Fixed-column field table for TLE lines and the accessors built on it.

See https://en.wikipedia.org/wiki/Two-line_element_set for the layout.  Column
offsets are zero based; a span never runs past column 69.
"""

from __future__ import annotations

import enum
import math
import re
from dataclasses import dataclass
from typing import Any, Dict, Mapping

from .parser import parse_tle
from .types import FieldValue

LINE_LENGTH = 69

# Leading decimal number; anything after it is ignored, so " 49422-4" reads
# as 49422 and "00000-0" as 0.
_LEADING_NUMBER = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


class TLEField(str, enum.Enum):
    """Named fields of both TLE lines."""

    # Line 1
    LINE_NUMBER1 = "line_number1"
    SATELLITE_NUMBER = "satellite_number"
    CLASSIFICATION = "classification"  # U is unclassified
    INT_DESIGNATOR_YEAR = "int_designator_year"
    INT_DESIGNATOR_LAUNCH_NUMBER = "int_designator_launch_number"
    INT_DESIGNATOR_PIECE_OF_LAUNCH = "int_designator_piece_of_launch"
    EPOCH_YEAR = "epoch_year"
    EPOCH_DAY = "epoch_day"
    FIRST_TIME_DERIVATIVE = "first_time_derivative"  # mean motion dot / 2
    SECOND_TIME_DERIVATIVE = "second_time_derivative"  # decimal point assumed
    BSTAR_DRAG = "bstar_drag"  # decimal point assumed
    NUM_ZERO = "num_zero"  # ephemeris type, always 0
    TLE_SET_NUMBER = "tle_set_number"
    CHECKSUM1 = "checksum1"

    # Line 2
    LINE_NUMBER2 = "line_number2"
    SATELLITE_NUMBER2 = "satellite_number2"
    INCLINATION = "inclination"
    RIGHT_ASCENSION = "right_ascension"
    ECCENTRICITY = "eccentricity"  # decimal point assumed
    PERIGEE = "perigee"
    MEAN_ANOMALY = "mean_anomaly"
    MEAN_MOTION = "mean_motion"  # revolutions per day
    REV_NUMBER_AT_EPOCH = "rev_number_at_epoch"
    CHECKSUM2 = "checksum2"

    @classmethod
    def from_string(cls, value: str) -> "TLEField":
        try:
            return cls(value.lower())
        except ValueError as exc:
            raise ValueError(f"Unknown TLE field '{value}'") from exc


@dataclass(frozen=True)
class FieldSpec:
    line: str
    start: int
    length: int

    @property
    def end(self) -> int:
        return self.start + self.length

    def extract(self, text: str) -> str:
        return text[self.start:self.end]


FIELD_SPECS: Mapping[TLEField, FieldSpec] = {
    TLEField.LINE_NUMBER1: FieldSpec("line1", 0, 1),
    TLEField.SATELLITE_NUMBER: FieldSpec("line1", 2, 5),
    TLEField.CLASSIFICATION: FieldSpec("line1", 7, 1),
    TLEField.INT_DESIGNATOR_YEAR: FieldSpec("line1", 9, 2),
    TLEField.INT_DESIGNATOR_LAUNCH_NUMBER: FieldSpec("line1", 11, 3),
    TLEField.INT_DESIGNATOR_PIECE_OF_LAUNCH: FieldSpec("line1", 14, 3),
    TLEField.EPOCH_YEAR: FieldSpec("line1", 18, 2),
    TLEField.EPOCH_DAY: FieldSpec("line1", 20, 12),
    TLEField.FIRST_TIME_DERIVATIVE: FieldSpec("line1", 33, 11),
    TLEField.SECOND_TIME_DERIVATIVE: FieldSpec("line1", 44, 8),
    TLEField.BSTAR_DRAG: FieldSpec("line1", 53, 8),
    TLEField.NUM_ZERO: FieldSpec("line1", 62, 1),
    TLEField.TLE_SET_NUMBER: FieldSpec("line1", 64, 4),
    TLEField.CHECKSUM1: FieldSpec("line1", 68, 1),
    TLEField.LINE_NUMBER2: FieldSpec("line2", 0, 1),
    TLEField.SATELLITE_NUMBER2: FieldSpec("line2", 2, 5),
    TLEField.INCLINATION: FieldSpec("line2", 8, 8),
    TLEField.RIGHT_ASCENSION: FieldSpec("line2", 17, 8),
    TLEField.ECCENTRICITY: FieldSpec("line2", 26, 7),
    TLEField.PERIGEE: FieldSpec("line2", 34, 8),
    TLEField.MEAN_ANOMALY: FieldSpec("line2", 43, 8),
    TLEField.MEAN_MOTION: FieldSpec("line2", 52, 11),
    TLEField.REV_NUMBER_AT_EPOCH: FieldSpec("line2", 63, 5),
    TLEField.CHECKSUM2: FieldSpec("line2", 68, 1),
}


def coerce_value(raw: str) -> FieldValue:
    """Return the finite number leading *raw*, or *raw* unchanged."""

    match = _LEADING_NUMBER.match(raw)
    if match is None:
        return raw
    value = float(match.group(1))
    if not math.isfinite(value):
        return raw
    return value


def get_raw_field(tle: Any, field: TLEField | str) -> str:
    """Return the untrimmed fixed-width substring for *field*."""

    if not isinstance(field, TLEField):
        field = TLEField.from_string(field)
    spec = FIELD_SPECS[field]
    record = parse_tle(tle)
    line = record.line1 if spec.line == "line1" else record.line2
    return spec.extract(line)


def get_field(tle: Any, field: TLEField | str) -> FieldValue:
    """Extract *field* from *tle* and coerce it to a number when possible."""

    return coerce_value(get_raw_field(tle, field))


class FieldAccessor:
    """Callable getter bound to a single :class:`TLEField`."""

    def __init__(self, field: TLEField) -> None:
        self.field = field
        self.spec = FIELD_SPECS[field]

    def __call__(self, tle: Any) -> FieldValue:
        return get_field(tle, self.field)

    def __repr__(self) -> str:
        return f"FieldAccessor({self.field.value!r})"


get_line_number1 = FieldAccessor(TLEField.LINE_NUMBER1)
get_satellite_number = FieldAccessor(TLEField.SATELLITE_NUMBER)
get_classification = FieldAccessor(TLEField.CLASSIFICATION)
get_int_designator_year = FieldAccessor(TLEField.INT_DESIGNATOR_YEAR)
get_int_designator_launch_number = FieldAccessor(TLEField.INT_DESIGNATOR_LAUNCH_NUMBER)
get_int_designator_piece_of_launch = FieldAccessor(TLEField.INT_DESIGNATOR_PIECE_OF_LAUNCH)
get_epoch_year = FieldAccessor(TLEField.EPOCH_YEAR)
get_epoch_day = FieldAccessor(TLEField.EPOCH_DAY)
get_first_time_derivative = FieldAccessor(TLEField.FIRST_TIME_DERIVATIVE)
get_second_time_derivative = FieldAccessor(TLEField.SECOND_TIME_DERIVATIVE)
get_bstar_drag = FieldAccessor(TLEField.BSTAR_DRAG)
get_num_zero = FieldAccessor(TLEField.NUM_ZERO)
get_tle_set_number = FieldAccessor(TLEField.TLE_SET_NUMBER)
get_checksum1 = FieldAccessor(TLEField.CHECKSUM1)
get_line_number2 = FieldAccessor(TLEField.LINE_NUMBER2)
get_satellite_number2 = FieldAccessor(TLEField.SATELLITE_NUMBER2)
get_inclination = FieldAccessor(TLEField.INCLINATION)
get_right_ascension = FieldAccessor(TLEField.RIGHT_ASCENSION)
get_eccentricity = FieldAccessor(TLEField.ECCENTRICITY)
get_perigee = FieldAccessor(TLEField.PERIGEE)
get_mean_anomaly = FieldAccessor(TLEField.MEAN_ANOMALY)
get_mean_motion = FieldAccessor(TLEField.MEAN_MOTION)
get_rev_number_at_epoch = FieldAccessor(TLEField.REV_NUMBER_AT_EPOCH)
get_checksum2 = FieldAccessor(TLEField.CHECKSUM2)


def get_fields(tle: Any) -> Dict[str, FieldValue]:
    """Return every field of *tle* keyed by field name."""

    record = parse_tle(tle)
    return {field.value: get_field(record, field) for field in FIELD_SPECS}


__all__ = [
    "FIELD_SPECS",
    "LINE_LENGTH",
    "FieldAccessor",
    "FieldSpec",
    "TLEField",
    "coerce_value",
    "get_field",
    "get_fields",
    "get_raw_field",
    "get_bstar_drag",
    "get_checksum1",
    "get_checksum2",
    "get_classification",
    "get_eccentricity",
    "get_epoch_day",
    "get_epoch_year",
    "get_first_time_derivative",
    "get_inclination",
    "get_int_designator_launch_number",
    "get_int_designator_piece_of_launch",
    "get_int_designator_year",
    "get_line_number1",
    "get_line_number2",
    "get_mean_anomaly",
    "get_mean_motion",
    "get_num_zero",
    "get_perigee",
    "get_rev_number_at_epoch",
    "get_right_ascension",
    "get_satellite_number",
    "get_satellite_number2",
    "get_second_time_derivative",
    "get_tle_set_number",
]
