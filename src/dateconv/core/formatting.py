"""Format templates: named presets and ``strftime`` extensions.

Every function in this module is a **pure** transformation — no I/O,
no side effects, fully deterministic.

A template is either the name of a preset (see :data:`PRESETS`) or a
plain ``strftime`` template.  Before handing the template to
``strftime`` a few extension directives are expanded, because the
stdlib either lacks them or only has them on some platforms:

``%:z``
    UTC offset as ``+hh:mm`` (``+hh:mm:ss`` when seconds are non-zero).
``%N``, ``%3N``, ``%6N``, ``%9N``
    Fraction of the second with 9 (default), 3, 6 or 9 digits.
``%e``
    Day of the month, space padded.
``%Y``
    Year, always zero padded to four digits (glibc leaves ``99`` unpadded).

``%%`` stays a literal percent sign.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, tzinfo

from dateconv.core.models import Moment
from dateconv.exceptions import DateParseError

DEFAULT_FORMAT: str = "RFC850"

PRESETS: dict[str, str] = {
    "ANSIC": "%a %b %e %H:%M:%S %Y",
    "UnixDate": "%a %b %e %H:%M:%S %Z %Y",
    "RubyDate": "%a %b %d %H:%M:%S %z %Y",
    "RFC822": "%d %b %y %H:%M %Z",
    "RFC822Z": "%d %b %y %H:%M %z",
    "RFC850": "%A, %d-%b-%y %H:%M:%S %Z",
    "RFC1123": "%a, %d %b %Y %H:%M:%S %Z",
    "RFC1123Z": "%a, %d %b %Y %H:%M:%S %z",
    "RFC3339": "%Y-%m-%dT%H:%M:%S%:z",
    "RFC3339Nano": "%Y-%m-%dT%H:%M:%S.%N%:z",
    "Kitchen": "%I:%M%p",
    "Stamp": "%b %e %H:%M:%S",
    "StampMilli": "%b %e %H:%M:%S.%3N",
    "StampMicro": "%b %e %H:%M:%S.%6N",
    "StampNano": "%b %e %H:%M:%S.%N",
    "DateTime": "%Y-%m-%d %H:%M:%S",
    "DateOnly": "%Y-%m-%d",
    "TimeOnly": "%H:%M:%S",
}
"""Well-known layouts, addressable by name from ``--format``."""

_EXTENSION_RE = re.compile(r"%(%|:z|[369]?N|e|Y)")


# ---------------------------------------------------------------------------
# Template handling
# ---------------------------------------------------------------------------

def resolve_template(template: str) -> str:
    """Return the ``strftime`` template for a preset name or *template* itself."""
    return PRESETS.get(template, template)


def _colon_offset(offset: timedelta | None) -> str:
    if offset is None:
        return ""
    sign = "-" if offset < timedelta(0) else "+"
    total = abs(int(offset.total_seconds()))
    hours, remainder = divmod(total, 3600)
    minutes, seconds = divmod(remainder, 60)
    text = f"{sign}{hours:02d}:{minutes:02d}"
    if seconds:
        text += f":{seconds:02d}"
    return text


def _expand_extensions(template: str, value: datetime, nanosecond: int) -> str:
    """Replace the extension directives, leaving stdlib ones untouched."""

    def _replace(match: re.Match[str]) -> str:
        directive = match.group(1)
        if directive == "%":
            return "%%"
        if directive == ":z":
            return _colon_offset(value.utcoffset())
        if directive == "e":
            return f"{value.day:2d}"
        if directive == "Y":
            return f"{value.year:04d}"
        width = int(directive[0]) if directive[0].isdigit() else 9
        return f"{nanosecond:09d}"[:width]

    return _EXTENSION_RE.sub(_replace, template)


def format_moment(moment: Moment, zone: tzinfo, template: str) -> str:
    """Render *moment* converted to *zone* using *template*.

    *template* may be a preset name; see :func:`resolve_template`.

    Raises
    ------
    DateParseError
        If the moment falls outside year 1..9999 once shifted into *zone*.
    """
    try:
        value = moment.instant.astimezone(zone)
    except OverflowError as exc:
        raise DateParseError(
            "Date out of range for the requested timezone.",
        ) from exc
    expanded = _expand_extensions(resolve_template(template), value, moment.nanosecond)
    return value.strftime(expanded)
