"""CLI application entry point for dateconv.

This module is the **sole error boundary** for the entire application.
It catches :class:`~dateconv.exceptions.DateconvError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages on stderr and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core/service
  and infrastructure layers.
* stdout carries exactly one line: the converted date.  Everything else
  goes through the stderr console.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys

from dateconv.cli import exit_codes
from dateconv.cli.console import console, escape
from dateconv.core.formatting import DEFAULT_FORMAT, PRESETS
from dateconv.core.output_mode import DEFAULT_TIMEZONE
from dateconv.exceptions import DateconvError, DateParseError, TimezoneResolutionError
from dateconv.version import __version__

_ERROR_EXIT_CODES: dict[type[DateconvError], int] = {
    DateParseError: exit_codes.PARSE_ERROR,
    TimezoneResolutionError: exit_codes.TIMEZONE_ERROR,
}


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Single-dash spellings (``-df``, ``-tsNano``) are the primary flags;
    each also has a GNU-style long alias.  Output flags are listed in
    order of precedence.
    """
    parser = argparse.ArgumentParser(
        prog="dateconv",
        description=(
            "Parse a free-form date (default: now) and print it as UTC, "
            "a Unix timestamp, or in a timezone."
        ),
        epilog="Format presets: " + ", ".join(PRESETS),
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parsing = parser.add_argument_group("parsing")
    parsing.add_argument(
        "-df",
        "--day-first",
        dest="day_first",
        action="store_true",
        help="Read ambiguous dates as day-month (01/02 is 1 February).",
    )
    parsing.add_argument(
        "-yf",
        "--year-first",
        dest="year_first",
        action="store_true",
        help="Read an ambiguous leading 2-digit group as the year (yy-mm-dd).",
    )
    parsing.add_argument(
        "-fuzzy",
        "--fuzzy",
        action="store_true",
        help="Skip words that are not part of the date.",
    )
    parsing.add_argument(
        "-conf",
        "--conf",
        default="",
        metavar="PATH",
        help=(
            "JSON file mapping timezone abbreviations to UTC offsets in "
            "seconds (default: $DATECONV_CONF, then ~/.dateconv)."
        ),
    )

    output = parser.add_argument_group("output (in order of precedence)")
    output.add_argument(
        "-utc",
        "--utc",
        action="store_true",
        help="Print the date converted to UTC.",
    )
    output.add_argument(
        "-ts",
        "--ts",
        action="store_true",
        help="Print the Unix timestamp in seconds.",
    )
    output.add_argument(
        "-tsNano",
        "--ts-nano",
        dest="ts_nano",
        action="store_true",
        help="Print the Unix timestamp in nanoseconds.",
    )
    output.add_argument(
        "-tz",
        "--tz",
        default=DEFAULT_TIMEZONE,
        metavar="NAME",
        help="Print the date in this IANA timezone (default: %(default)s).",
    )
    output.add_argument(
        "-format",
        "--format",
        default=DEFAULT_FORMAT,
        metavar="TEMPLATE",
        help="strftime template or preset name (default: %(default)s).",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print diagnostics about config loading and parsing to stderr.",
    )
    parser.add_argument(
        "date",
        nargs="?",
        default=None,
        help="Date to convert.  Omit (or pass an empty string) for now.",
    )
    return parser


# ---------------------------------------------------------------------------
# Conversion
# ---------------------------------------------------------------------------

def _convert(args: argparse.Namespace) -> str:
    """Produce the output line for parsed *args*.

    Flow:
    1. With input text: load the offset table (best-effort), then parse.
    2. Without input text: take the current instant.
    3. Render according to the output-mode precedence.
    """
    from dateconv.core.conversion_service import ConversionService
    from dateconv.core.models import ParseOptions
    from dateconv.core.output_mode import resolve_output_mode
    from dateconv.infra.clock import SystemClock
    from dateconv.infra.dateutil_parser import DateutilParser
    from dateconv.infra.offset_config import probe_offset_table
    from dateconv.infra.timezones import SystemZoneResolver

    zones = SystemZoneResolver()
    service = ConversionService(DateutilParser(), SystemClock(zones), zones)

    text: str | None = args.date
    if text:
        status = probe_offset_table(args.conf)
        if args.verbose:
            console.print(
                f"[dim]config:[/dim] {escape(str(status.path))} ({escape(status.reason)})"
            )
        options = ParseOptions(
            day_first=args.day_first,
            year_first=args.year_first,
            fuzzy=args.fuzzy,
            offsets=status.table,
        )
        moment = service.parse(text, options)
    else:
        moment = service.now()

    if args.verbose:
        for note in moment.notes:
            console.print(f"[yellow]Note:[/yellow] {escape(note)}")

    mode = resolve_output_mode(
        utc=args.utc,
        ts=args.ts,
        ts_nano=args.ts_nano,
        tz=args.tz,
    )
    return service.render(moment, mode, args.format)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the dateconv CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    print(_convert(args))
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def _exit_code_for(exc: DateconvError) -> int:
    for exc_type, code in _ERROR_EXIT_CODES.items():
        if isinstance(exc, exc_type):
            return code
    return exit_codes.GENERAL_ERROR


def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except DateconvError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(_exit_code_for(exc))
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
