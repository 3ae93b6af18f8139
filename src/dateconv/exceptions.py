"""Custom exception hierarchy for dateconv.

All exceptions that cross layer boundaries must inherit from
:class:`DateconvError`.  Raw third-party exceptions (e.g. from dateutil
or zoneinfo) must NEVER propagate beyond the infrastructure layer — they
must be caught and re-raised as a typed subclass defined here.

Hierarchy
---------
DateconvError
├── DateParseError
├── TimezoneResolutionError
├── ConfigLoadError
└── EnvironmentError
"""

from __future__ import annotations


class DateconvError(Exception):
    """Base exception for all dateconv errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Parsing ---------------------------------------------------------------

class DateParseError(DateconvError):
    """Raised when the input text cannot be interpreted as a date."""


# --- Timezones -------------------------------------------------------------

class TimezoneResolutionError(DateconvError):
    """Raised when a ``--tz`` value does not name a known timezone."""


# --- Configuration ---------------------------------------------------------

class ConfigLoadError(DateconvError):
    """Raised when the offset-table file cannot be read or understood.

    Never reaches the CLI: the loader recovers from it and carries on
    without a table.
    """


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(DateconvError):
    """Raised when an optional runtime dependency is not available."""
