"""Core conversion service — turns input text into a rendered line.

This is the central service class consumed by the CLI layer.  It
depends on a :class:`~dateconv.core.protocols.DateParser`, a
:class:`~dateconv.core.protocols.Clock` and a
:class:`~dateconv.core.protocols.ZoneResolver` injected at construction
time (dependency inversion), keeping the core free of any
external-system imports.

Guarantees
----------
* Pure orchestration — no I/O, no ``print()``, no filesystem access.
* Only :class:`~dateconv.exceptions.DateconvError` subclasses escape.
* Every returned :class:`Moment` is timezone-aware.
"""

from __future__ import annotations

from datetime import timezone

from dateconv.core.formatting import DEFAULT_FORMAT, format_moment
from dateconv.core.models import (
    Moment,
    OutputMode,
    ParseOptions,
    ToTimezone,
    ToUnixNanos,
    ToUnixSeconds,
    ToUTC,
)
from dateconv.core.protocols import Clock, DateParser, ParsedDate, ZoneResolver
from dateconv.exceptions import DateconvError, DateParseError


class ConversionService:
    """Stateless service that produces and renders moments.

    Parameters
    ----------
    parser:
        Any object satisfying the :class:`DateParser` protocol.
    clock:
        Any object satisfying the :class:`Clock` protocol.
    zones:
        Any object satisfying the :class:`ZoneResolver` protocol.
    """

    def __init__(
        self,
        parser: DateParser,
        clock: Clock,
        zones: ZoneResolver,
    ) -> None:
        self._parser: DateParser = parser
        self._clock: Clock = clock
        self._zones: ZoneResolver = zones

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def now(self) -> Moment:
        """Return the current instant."""
        return self._clock.now()

    def parse(self, text: str, options: ParseOptions | None = None) -> Moment:
        """Parse *text* into a :class:`Moment`.

        Text without zone information is read as local time.

        Raises
        ------
        DateParseError
            If the parser cannot make sense of *text*.
        """
        parsed = self._parse(text, options or ParseOptions())
        value = parsed.value
        if value.tzinfo is None:
            value = value.replace(tzinfo=self._zones.local())
        return Moment(instant=value, notes=parsed.notes)

    def render(
        self,
        moment: Moment,
        mode: OutputMode,
        template: str = DEFAULT_FORMAT,
    ) -> str:
        """Render *moment* as the single output line for *mode*.

        Raises
        ------
        TimezoneResolutionError
            If *mode* names a zone the resolver does not know.
        DateParseError
            If the moment cannot be expressed in the target zone.
        """
        if isinstance(mode, ToUTC):
            return format_moment(moment, timezone.utc, template)
        if isinstance(mode, ToUnixSeconds):
            return str(moment.unix_seconds)
        if isinstance(mode, ToUnixNanos):
            return str(moment.unix_nanos)
        if isinstance(mode, ToTimezone):
            zone = self._zones.local() if mode.is_local else self._zones.resolve(mode.name)
            return format_moment(moment, zone, template)
        raise TypeError(f"Unsupported output mode: {mode!r}")

    # ------------------------------------------------------------------
    # Parser delegation (safe boundary)
    # ------------------------------------------------------------------

    def _parse(self, text: str, options: ParseOptions) -> ParsedDate:
        """Call the parser and ensure only our exceptions escape."""
        try:
            return self._parser.parse(text, options)
        except DateconvError:
            raise
        except Exception as exc:
            raise DateParseError(f"Unexpected parser error: {exc}") from exc
