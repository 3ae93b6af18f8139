"""Resolve the four output flags into a single :data:`OutputMode`.

The flags are independent booleans on the command line; precedence is
applied exactly once here so nothing downstream has to re-check them:

1. ``utc``
2. ``ts``
3. ``ts_nano``
4. ``tz`` (always present, defaults to ``local``)
"""

from __future__ import annotations

from dateconv.core.models import OutputMode, ToTimezone, ToUnixNanos, ToUnixSeconds, ToUTC

DEFAULT_TIMEZONE: str = "local"


def resolve_output_mode(
    *,
    utc: bool = False,
    ts: bool = False,
    ts_nano: bool = False,
    tz: str = DEFAULT_TIMEZONE,
) -> OutputMode:
    """Pick the output mode that wins under the documented precedence."""
    if utc:
        return ToUTC()
    if ts:
        return ToUnixSeconds()
    if ts_nano:
        return ToUnixNanos()
    return ToTimezone(name=tz)
