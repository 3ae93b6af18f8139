"""python-dateutil backed implementation of :class:`~dateconv.core.protocols.DateParser`.

This module is the **only** place in the codebase that imports
``dateutil.parser``.  All dateutil exceptions are caught here and
re-raised as typed :class:`~dateconv.exceptions.DateconvError`
subclasses — nothing raw escapes the infrastructure boundary.
"""

from __future__ import annotations

import warnings
from typing import Any

from dateconv.core.models import ParseOptions
from dateconv.core.protocols import ParsedDate
from dateconv.exceptions import DateParseError, EnvironmentError


class DateutilParser:
    """Concrete :class:`DateParser` backed by ``dateutil.parser.parse``.

    Usage::

        parser = DateutilParser()
        parsed = parser.parse("June 15 2023 2:30pm PST", ParseOptions(
            offsets={"PST": -28800},
        ))

    Abbreviations dateutil recognises as a zone but cannot resolve are
    not printed as warnings; they are returned as notes on the result
    and the value stays naive.
    """

    @staticmethod
    def _build_kwargs(options: ParseOptions) -> dict[str, Any]:
        """Translate :class:`ParseOptions` into ``dateutil`` keyword args."""
        kwargs: dict[str, Any] = {
            "dayfirst": options.day_first,
            "yearfirst": options.year_first,
            "fuzzy": options.fuzzy,
        }
        if options.offsets:
            kwargs["tzinfos"] = dict(options.offsets)
        return kwargs

    # ------------------------------------------------------------------
    # Protocol method
    # ------------------------------------------------------------------

    def parse(self, text: str, options: ParseOptions) -> ParsedDate:
        """Parse *text* with dateutil.

        Raises
        ------
        DateParseError
            When dateutil rejects *text* or the result is out of range.
        EnvironmentError
            When python-dateutil is not installed.
        """
        try:
            from dateutil import parser as du_parser
        except ModuleNotFoundError as exc:
            raise EnvironmentError(
                "python-dateutil is not installed. "
                "Install with: pip install python-dateutil",
            ) from exc

        kwargs = self._build_kwargs(options)

        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always", du_parser.UnknownTimezoneWarning)
            try:
                value = du_parser.parse(text, **kwargs)
            except (ValueError, OverflowError) as exc:
                raise DateParseError(
                    str(exc),
                    hint=self._hint_for(options),
                ) from exc

        notes: list[str] = []
        for warning in caught:
            if issubclass(warning.category, du_parser.UnknownTimezoneWarning):
                notes.append(str(warning.message))
            else:
                warnings.warn_explicit(
                    warning.message,
                    warning.category,
                    warning.filename,
                    warning.lineno,
                )

        return ParsedDate(value=value, notes=tuple(notes))

    @staticmethod
    def _hint_for(options: ParseOptions) -> str | None:
        if options.fuzzy:
            return None
        return "Use -fuzzy to skip words that are not part of the date."
