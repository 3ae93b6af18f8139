"""Infrastructure: timezone lookup.

Named zones come from the IANA database through :mod:`zoneinfo` (the
``tzdata`` package supplies the data where the OS does not).  The local
zone is :func:`dateutil.tz.tzlocal`, which follows the ``TZ``
environment variable and the OS configuration.
"""

from __future__ import annotations

from datetime import timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dateconv.exceptions import EnvironmentError, TimezoneResolutionError


class SystemZoneResolver:
    """Concrete :class:`~dateconv.core.protocols.ZoneResolver`."""

    def local(self) -> tzinfo:
        """Return the process's local timezone."""
        try:
            from dateutil import tz
        except ModuleNotFoundError as exc:
            raise EnvironmentError(
                "python-dateutil is not installed. "
                "Install with: pip install python-dateutil",
            ) from exc
        return tz.tzlocal()

    def resolve(self, name: str) -> tzinfo:
        """Return the IANA zone called *name*; an empty name means UTC.

        Raises
        ------
        TimezoneResolutionError
            When *name* is not in the timezone database.
        """
        if not name:
            return timezone.utc
        try:
            return ZoneInfo(name)
        # Directory keys such as "America" surface as IsADirectoryError.
        except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
            raise TimezoneResolutionError(
                f"Unknown timezone: {name}",
                hint="Use an IANA name such as 'Europe/Paris', or 'local'.",
            ) from exc
