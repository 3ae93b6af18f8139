"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from dateconv.core.conversion_service import ConversionService
from dateconv.core.models import (
    Moment,
    OffsetTable,
    OutputMode,
    ParseOptions,
    ToTimezone,
    ToUnixNanos,
    ToUnixSeconds,
    ToUTC,
)
from dateconv.core.output_mode import resolve_output_mode
from dateconv.core.protocols import Clock, DateParser, ParsedDate, ZoneResolver

__all__: list[str] = [
    "Clock",
    "ConversionService",
    "DateParser",
    "Moment",
    "OffsetTable",
    "OutputMode",
    "ParseOptions",
    "ParsedDate",
    "ToTimezone",
    "ToUTC",
    "ToUnixNanos",
    "ToUnixSeconds",
    "ZoneResolver",
    "resolve_output_mode",
]
