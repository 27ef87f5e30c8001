from __future__ import annotations

import pytest
from hypothesis import given, strategies as st

from tle_track.core import FIELD_SPECS, TLEField, get_field, get_fields, parse_tle
from tle_track.core.fields import (
    LINE_LENGTH,
    coerce_value,
    get_bstar_drag,
    get_classification,
    get_eccentricity,
    get_epoch_day,
    get_epoch_year,
    get_first_time_derivative,
    get_inclination,
    get_int_designator_piece_of_launch,
    get_mean_motion,
    get_raw_field,
    get_rev_number_at_epoch,
    get_satellite_number,
    get_second_time_derivative,
)

ISS_LINE1 = "1 25544U 98067A   21275.52719505  .00002182  00000-0  49422-4 0  9999"
ISS_LINE2 = "2 25544  51.6442  40.7625 0003438 154.0455 306.1756 15.48783287303096"
ISS = [ISS_LINE1, ISS_LINE2]


def test_iss_scenario_values() -> None:
    assert get_mean_motion(ISS) == 15.48783287
    assert get_epoch_year(ISS) == 21
    assert get_epoch_day(ISS) == 275.52719505


def test_numeric_and_text_fields() -> None:
    assert get_satellite_number(ISS) == 25544
    assert get_classification(ISS) == "U"
    assert get_int_designator_piece_of_launch(ISS) == "A  "
    assert get_inclination(ISS) == 51.6442
    assert get_eccentricity(ISS) == 3438
    assert get_first_time_derivative(ISS) == pytest.approx(0.00002182)
    assert get_bstar_drag(ISS) == 49422
    assert get_second_time_derivative(ISS) == 0
    assert get_rev_number_at_epoch(ISS) == 30309


def test_field_lookup_by_name() -> None:
    assert get_field(ISS, "mean_motion") == get_mean_motion(ISS)
    assert get_field(ISS, TLEField.CHECKSUM2) == 6
    with pytest.raises(ValueError):
        get_field(ISS, "apogee")


def test_get_fields_covers_the_table() -> None:
    fields = get_fields(ISS)
    assert set(fields) == {field.value for field in TLEField}
    assert fields["line_number1"] == 1
    assert fields["line_number2"] == 2


def test_field_table_layout() -> None:
    assert len(FIELD_SPECS) == len(TLEField)
    for line in ("line1", "line2"):
        spans = sorted(
            (spec.start, spec.end) for spec in FIELD_SPECS.values() if spec.line == line
        )
        for (_, end), (start, _) in zip(spans, spans[1:]):
            assert end <= start
        assert spans[-1][1] == LINE_LENGTH


@pytest.mark.parametrize("raw, expected", [
    (" 51.6442", 51.6442),
    ("0003438", 3438.0),
    ("U", "U"),
    ("00000-0", 0.0),
    (" 49422-4", 49422.0),
    ("-11606-4", -11606.0),
    (" .00002182 ", 0.00002182),
    ("+.5e2x", 50.0),
    ("1e999", "1e999"),
    ("-", "-"),
    ("    ", "    "),
    ("nan", "nan"),
    ("inf", "inf"),
])
def test_coerce_value(raw, expected) -> None:
    assert coerce_value(raw) == expected


@given(st.sampled_from(list(TLEField)))
def test_raw_field_re_embeds_exactly(field: TLEField) -> None:
    record = parse_tle(ISS)
    spec = FIELD_SPECS[field]
    line = record.line1 if spec.line == "line1" else record.line2
    raw = get_raw_field(record, field)
    assert len(raw) == spec.length
    rebuilt = line[:spec.start] + raw + line[spec.end:]
    assert rebuilt == line


def test_short_lines_yield_empty_fields() -> None:
    assert get_field(["1 25544U", "2"], TLEField.CHECKSUM1) == ""
