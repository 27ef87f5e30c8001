"""Normalize raw TLE payloads into :class:`TLERecord` values."""

from __future__ import annotations

from typing import Any, List, Mapping, Sequence

from tle_track.errors import InvalidInputType

from .types import UNKNOWN_NAME, TLERecord


def _split_text(text: str) -> List[str]:
    lines = text.splitlines()
    # Blank lines around the payload are transport noise, not content.
    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()
    return lines


def _from_lines(raw: Sequence[Any]) -> TLERecord:
    lines = list(raw)
    for line in lines:
        if not isinstance(line, str):
            raise InvalidInputType(f"TLE line has invalid type {type(line).__name__}")

    name = UNKNOWN_NAME
    if len(lines) > 2:
        name = lines.pop(0)

    return TLERecord(name=name, lines=tuple(line.strip() for line in lines))


def parse_tle(value: Any) -> TLERecord:
    """Return the canonical record for *value*.

    *value* may be a record (returned unchanged), a mapping shaped like one, a
    newline separated string or a sequence of line strings.  Three or more
    lines mean the first is the satellite name.
    """

    if isinstance(value, TLERecord):
        return value
    if isinstance(value, Mapping) and "lines" in value:
        lines = value["lines"]
        if isinstance(lines, (str, bytes)) or not isinstance(lines, Sequence):
            raise InvalidInputType(f"TLE lines have invalid type {type(lines).__name__}")
        if not all(isinstance(line, str) for line in lines):
            raise InvalidInputType("TLE lines must be strings")
        return TLERecord(
            name=str(value.get("name", UNKNOWN_NAME)),
            lines=tuple(line.strip() for line in lines),
        )
    if isinstance(value, str):
        return _from_lines(_split_text(value))
    if isinstance(value, (list, tuple)):
        return _from_lines(value)
    raise InvalidInputType(f"TLE passed is invalid type {type(value).__name__}")


__all__ = ["parse_tle"]
