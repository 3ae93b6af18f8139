"""Infrastructure layer — external system integration.

This layer wraps all interaction with python-dateutil, the timezone
database, the system clock and the filesystem.  Every raw third-party
exception must be caught here and re-raised as a
:class:`~dateconv.exceptions.DateconvError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from dateconv.infra.clock import SystemClock
from dateconv.infra.dateutil_parser import DateutilParser
from dateconv.infra.offset_config import (
    OffsetTableStatus,
    probe_offset_table,
    resolve_config_path,
)
from dateconv.infra.timezones import SystemZoneResolver

__all__: list[str] = [
    "DateutilParser",
    "OffsetTableStatus",
    "SystemClock",
    "SystemZoneResolver",
    "probe_offset_table",
    "resolve_config_path",
]
