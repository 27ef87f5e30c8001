"""Line checksum and structural validation of TLE records."""

from __future__ import annotations

from typing import Any

from tle_track.errors import EmptyLineError, InvalidTLEError

from .fields import get_checksum1, get_checksum2, get_line_number1, get_line_number2
from .parser import parse_tle
from .types import TLERecord

_LINE_CHECKS = (
    (1, get_line_number1, get_checksum1),
    (2, get_line_number2, get_checksum2),
)


def line_checksum(line: str) -> int:
    """Return the modulo-10 checksum of *line*, ignoring its final character.

    Digits count for their value and each ``-`` counts as one; everything
    else is ignored.
    """

    body = line[:-1]
    if not body:
        raise EmptyLineError(f"no characters to checksum in {line!r}")

    total = 0
    for ch in body:
        if "0" <= ch <= "9":
            total += ord(ch) - ord("0")
        elif ch == "-":
            total += 1
    return total % 10


def is_valid_tle(tle: Any) -> bool:
    """Return ``True`` when line numbers and both checksums are correct."""

    record = parse_tle(tle)
    if len(record.lines) != 2:
        return False

    for (number, line_number, stored_checksum), line in zip(_LINE_CHECKS, record.lines):
        if line_number(record) != number:
            return False
        if stored_checksum(record) != line_checksum(line):
            return False
    return True


def validate_tle(tle: Any) -> TLERecord:
    """Parse *tle* and raise :class:`InvalidTLEError` unless it is valid."""

    record = parse_tle(tle)
    if not is_valid_tle(record):
        raise InvalidTLEError(f"TLE could not be parsed: {record.lines!r}")
    return record


__all__ = ["is_valid_tle", "line_checksum", "validate_tle"]
