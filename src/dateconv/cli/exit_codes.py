"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit — one line was written to stdout."""

GENERAL_ERROR: int = 1
"""A known DateconvError without a more specific code was caught."""

USAGE_ERROR: int = 2
"""Bad command line.  Matches the code argparse exits with."""

PARSE_ERROR: int = 3
"""The input text could not be parsed as a date."""

TIMEZONE_ERROR: int = 4
"""The ``--tz`` value is not a known timezone."""

UNEXPECTED_ERROR: int = 70
"""An unhandled exception escaped all known error boundaries (EX_SOFTWARE)."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
