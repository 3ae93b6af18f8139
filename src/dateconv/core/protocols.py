"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, tzinfo
from typing import Protocol

from dateconv.core.models import Moment, ParseOptions


@dataclass(frozen=True, slots=True)
class ParsedDate:
    """Raw parser output before the core localises it."""

    value: datetime
    """May be naive when the text carried no zone information."""

    notes: tuple[str, ...] = ()


class DateParser(Protocol):
    """Contract for natural-language date parsing backends."""

    def parse(self, text: str, options: ParseOptions) -> ParsedDate:
        """Interpret *text* as a date.

        Implementations must map all backend-specific exceptions to
        :class:`~dateconv.exceptions.DateconvError` subclasses.

        Raises
        ------
        DateParseError
            When *text* cannot be understood.
        """
        ...  # pragma: no cover


class Clock(Protocol):
    """Source of the current instant."""

    def now(self) -> Moment:
        """Return the current instant with full available precision."""
        ...  # pragma: no cover


class ZoneResolver(Protocol):
    """Contract for timezone lookup backends."""

    def local(self) -> tzinfo:
        """Return the process's local timezone."""
        ...  # pragma: no cover

    def resolve(self, name: str) -> tzinfo:
        """Return the zone called *name*.

        Raises
        ------
        TimezoneResolutionError
            When *name* is not a known zone.
        """
        ...  # pragma: no cover
