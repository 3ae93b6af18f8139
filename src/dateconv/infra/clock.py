"""Infrastructure: the system clock.

Reads :func:`time.time_ns` so that the nanosecond output mode is not
limited to ``datetime``'s microsecond resolution.
"""

from __future__ import annotations

import time
from datetime import timedelta

from dateconv.core.models import EPOCH, Moment
from dateconv.core.protocols import ZoneResolver
from dateconv.infra.timezones import SystemZoneResolver


class SystemClock:
    """Concrete :class:`~dateconv.core.protocols.Clock`.

    The returned moment is expressed in the local zone.
    """

    def __init__(self, zones: ZoneResolver | None = None) -> None:
        self._zones: ZoneResolver = zones or SystemZoneResolver()

    def now(self) -> Moment:
        nanos = time.time_ns()
        micros, extra_nanos = divmod(nanos, 1000)
        instant = (EPOCH + timedelta(microseconds=micros)).astimezone(
            self._zones.local(),
        )
        return Moment(instant=instant, extra_nanos=extra_nanos)
