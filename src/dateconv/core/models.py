"""Domain models for dateconv.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access and trivial derived values.  They carry zero
I/O and must remain pure across the entire lifecycle.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Union

OffsetTable = Mapping[str, int]
"""Timezone abbreviation → UTC offset in seconds (e.g. ``{"PST": -28800}``)."""

EPOCH: datetime = datetime(1970, 1, 1, tzinfo=timezone.utc)

_ONE_SECOND = timedelta(seconds=1)
_ONE_MICROSECOND = timedelta(microseconds=1)


# ---------------------------------------------------------------------------
# Moment
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Moment:
    """A single instant together with the zone it was read in.

    ``datetime`` stops at microseconds, so the remaining nanoseconds of
    the instant are kept alongside it.
    """

    instant: datetime
    """Timezone-aware datetime.  Never naive."""

    extra_nanos: int = 0
    """Nanoseconds below ``instant.microsecond`` (``0..999``)."""

    notes: tuple[str, ...] = ()
    """Diagnostics gathered while the moment was produced."""

    def __post_init__(self) -> None:
        if self.instant.tzinfo is None:
            raise ValueError("Moment requires a timezone-aware datetime.")
        if not 0 <= self.extra_nanos < 1000:
            raise ValueError(f"extra_nanos out of range: {self.extra_nanos}")

    @property
    def unix_seconds(self) -> int:
        """Whole seconds since the Unix epoch, rounded toward -inf."""
        return (self.instant - EPOCH) // _ONE_SECOND

    @property
    def unix_nanos(self) -> int:
        """Nanoseconds since the Unix epoch."""
        return (self.instant - EPOCH) // _ONE_MICROSECOND * 1000 + self.extra_nanos

    @property
    def nanosecond(self) -> int:
        """Nanoseconds within the current second (``0..999_999_999``)."""
        return self.instant.microsecond * 1000 + self.extra_nanos


# ---------------------------------------------------------------------------
# Parse options
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ParseOptions:
    """Knobs forwarded to the natural-language date parser."""

    day_first: bool = False
    """Read ambiguous ``01/02`` style dates as day-month."""

    year_first: bool = False
    """Read an ambiguous leading two-digit group as the year."""

    fuzzy: bool = False
    """Ignore unknown tokens instead of failing."""

    offsets: OffsetTable | None = None
    """Extra abbreviations the parser may resolve, or ``None``."""


# ---------------------------------------------------------------------------
# Output modes (tagged variant)
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ToUTC:
    """Render the formatted moment in UTC."""


@dataclass(frozen=True, slots=True)
class ToUnixSeconds:
    """Render whole seconds since the epoch."""


@dataclass(frozen=True, slots=True)
class ToUnixNanos:
    """Render nanoseconds since the epoch."""


@dataclass(frozen=True, slots=True)
class ToTimezone:
    """Render the formatted moment in a named zone."""

    name: str
    """IANA zone name, or ``local`` (any case) for the process zone."""

    @property
    def is_local(self) -> bool:
        return self.name.lower() == "local"


OutputMode = Union[ToUTC, ToUnixSeconds, ToUnixNanos, ToTimezone]
