"""Exception hierarchy raised by tle_track and the propagate package."""

from __future__ import annotations


class TLETrackError(Exception):
    """Base class for every error surfaced by this library."""


class InvalidInputType(TLETrackError, TypeError):
    """Input to the TLE parser is neither a string, a sequence nor a record."""


class EmptyLineError(TLETrackError, ValueError):
    """A checksum was requested for a line holding only its checksum digit."""


class InvalidTLEError(TLETrackError, ValueError):
    """Structural or checksum validation failed."""


class PropagationError(TLETrackError, RuntimeError):
    """SGP4 reported a numerically degenerate orbit."""


__all__ = [
    "TLETrackError",
    "InvalidInputType",
    "EmptyLineError",
    "InvalidTLEError",
    "PropagationError",
]
