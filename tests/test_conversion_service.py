"""Tests for ConversionService (core/conversion_service.py).

The parser, clock and zone resolver are **mocked** — no dateutil, no
system clock, no timezone database.  These tests verify:

* Naive parser output is localised with the resolver's local zone
* Exception mapping (unexpected parser errors → DateParseError)
* The four-way render branch
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest

from dateconv.core.conversion_service import ConversionService
from dateconv.core.models import (
    Moment,
    ParseOptions,
    ToTimezone,
    ToUnixNanos,
    ToUnixSeconds,
    ToUTC,
)
from dateconv.core.protocols import ParsedDate
from dateconv.exceptions import DateParseError, TimezoneResolutionError

_PLUS_TWO = timezone(timedelta(hours=2))
_TOKYO_LIKE = timezone(timedelta(hours=9), "JST")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _fake_parser(result: ParsedDate | Exception) -> MagicMock:
    """Return a mock DateParser.

    If *result* is a ParsedDate, ``parse`` returns it.
    If *result* is an exception, ``parse`` raises it.
    """
    parser = MagicMock()
    if isinstance(result, Exception):
        parser.parse.side_effect = result
    else:
        parser.parse.return_value = result
    return parser


def _fake_zones() -> MagicMock:
    zones = MagicMock()
    zones.local.return_value = _PLUS_TWO
    zones.resolve.return_value = _TOKYO_LIKE
    return zones


def _service(
    parsed: ParsedDate | Exception | None = None,
    now: Moment | None = None,
) -> tuple[ConversionService, MagicMock, MagicMock, MagicMock]:
    parser = _fake_parser(
        parsed if parsed is not None else ParsedDate(datetime(2023, 6, 15, 14, 30)),
    )
    clock = MagicMock()
    clock.now.return_value = now or _utc_moment()
    zones = _fake_zones()
    return ConversionService(parser, clock, zones), parser, clock, zones


def _utc_moment() -> Moment:
    return Moment(
        instant=datetime(2023, 6, 15, 14, 30, 0, tzinfo=timezone.utc),
        extra_nanos=5,
    )


# ---------------------------------------------------------------------------
# parse
# ---------------------------------------------------------------------------

class TestParse:
    def test_naive_result_is_local(self) -> None:
        svc, _, _, zones = _service()
        moment = svc.parse("2023-06-15 14:30")
        assert moment.instant.tzinfo is _PLUS_TWO
        assert moment.instant.hour == 14
        zones.local.assert_called_once()

    def test_aware_result_keeps_its_zone(self) -> None:
        aware = datetime(2023, 6, 15, 14, 30, tzinfo=timezone.utc)
        svc, _, _, zones = _service(parsed=ParsedDate(aware))
        moment = svc.parse("2023-06-15 14:30 UTC")
        assert moment.instant == aware
        assert moment.instant.utcoffset() == timedelta(0)
        zones.local.assert_not_called()

    def test_options_forwarded(self) -> None:
        svc, parser, _, _ = _service()
        opts = ParseOptions(day_first=True, offsets={"ZZZ": 3600})
        svc.parse("01/02/2023", opts)
        parser.parse.assert_called_once_with("01/02/2023", opts)

    def test_default_options(self) -> None:
        svc, parser, _, _ = _service()
        svc.parse("2023-06-15")
        assert parser.parse.call_args.args[1] == ParseOptions()

    def test_notes_carried(self) -> None:
        parsed = ParsedDate(datetime(2023, 6, 15), notes=("tzname ZZZ",))
        svc, _, _, _ = _service(parsed=parsed)
        assert svc.parse("x").notes == ("tzname ZZZ",)

    def test_parse_error_propagates(self) -> None:
        svc, _, _, _ = _service(parsed=DateParseError("Unknown string format"))
        with pytest.raises(DateParseError, match="Unknown string format"):
            svc.parse("xyzzy")

    def test_unexpected_error_wrapped(self) -> None:
        svc, _, _, _ = _service(parsed=RuntimeError("kaboom"))
        with pytest.raises(DateParseError, match="kaboom"):
            svc.parse("xyzzy")


# ---------------------------------------------------------------------------
# render
# ---------------------------------------------------------------------------

class TestRender:
    def test_utc(self) -> None:
        svc, _, _, _ = _service()
        moment = Moment(instant=datetime(2023, 6, 15, 16, 30, tzinfo=_PLUS_TWO))
        assert svc.render(moment, ToUTC(), "%H:%M %Z") == "14:30 UTC"

    def test_unix_seconds(self) -> None:
        svc, _, _, _ = _service()
        assert svc.render(_utc_moment(), ToUnixSeconds()) == "1686839400"

    def test_unix_nanos(self) -> None:
        svc, _, _, _ = _service()
        assert svc.render(_utc_moment(), ToUnixNanos()) == "1686839400000000005"

    def test_local(self) -> None:
        svc, _, _, zones = _service()
        assert svc.render(_utc_moment(), ToTimezone("LOCAL"), "%H:%M") == "16:30"
        zones.resolve.assert_not_called()

    def test_named_zone(self) -> None:
        svc, _, _, zones = _service()
        result = svc.render(_utc_moment(), ToTimezone("Asia/Tokyo"), "%H:%M %Z")
        assert result == "23:30 JST"
        zones.resolve.assert_called_once_with("Asia/Tokyo")

    def test_unknown_zone_propagates(self) -> None:
        svc, _, _, zones = _service()
        zones.resolve.side_effect = TimezoneResolutionError("Unknown timezone: X")
        with pytest.raises(TimezoneResolutionError):
            svc.render(_utc_moment(), ToTimezone("X"))

    def test_default_template_is_rfc850(self) -> None:
        svc, _, _, _ = _service()
        assert svc.render(_utc_moment(), ToUTC()) == "Thursday, 15-Jun-23 14:30:00 UTC"

    def test_unsupported_mode(self) -> None:
        svc, _, _, _ = _service()
        with pytest.raises(TypeError):
            svc.render(_utc_moment(), object())  # type: ignore[arg-type]

    def test_out_of_range_for_zone(self) -> None:
        svc, _, _, _ = _service()
        late = Moment(instant=datetime(9999, 12, 31, 23, 0, tzinfo=timezone(timedelta(hours=-5))))
        with pytest.raises(DateParseError, match="out of range"):
            svc.render(late, ToUTC())
        assert svc.render(late, ToUnixSeconds()) == str(late.unix_seconds)
