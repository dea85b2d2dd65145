from datetime import UTC
from datetime import datetime
from datetime import timedelta
from typing import Final
from zoneinfo import ZoneInfo

import pytest
from babel.dates import format_date

from assistantbot.utils.dates import InvalidTimeExpressionError
from assistantbot.utils.dates import format_datetime_to_text
from assistantbot.utils.dates import parse_time_expression

_BERLIN: Final = ZoneInfo("Europe/Berlin")
_NOW: Final = datetime(2026, 3, 10, 9, 0, tzinfo=_BERLIN)


@pytest.mark.parametrize(
    ("text", "expected_offset"),
    [
        ("10m", timedelta(minutes=10)),
        ("2h", timedelta(hours=2)),
        ("1d12h", timedelta(days=1, hours=12)),
        ("1w", timedelta(weeks=1)),
        ("1w2d3h4m", timedelta(weeks=1, days=2, hours=3, minutes=4)),
    ],
)
def test_parse_time_expression_supports_relative_offsets(text: str, expected_offset: timedelta) -> None:
    assert parse_time_expression(text, now=_NOW, timezone=_BERLIN) == _NOW + expected_offset


def test_parse_time_expression_uses_clock_time_later_today() -> None:
    assert parse_time_expression("18:30", now=_NOW, timezone=_BERLIN) == datetime(2026, 3, 10, 18, 30, tzinfo=_BERLIN)


def test_parse_time_expression_rolls_past_clock_time_over_to_tomorrow() -> None:
    assert parse_time_expression("8:15", now=_NOW, timezone=_BERLIN) == datetime(2026, 3, 11, 8, 15, tzinfo=_BERLIN)


def test_parse_time_expression_interprets_clock_time_in_the_given_timezone() -> None:
    now_in_utc: Final = datetime(2026, 3, 10, 22, 30, tzinfo=UTC)  # Already 23:30 in Berlin.

    assert parse_time_expression("23:45", now=now_in_utc, timezone=_BERLIN) == datetime(
        2026, 3, 10, 23, 45, tzinfo=_BERLIN
    )


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("2026-04-01", datetime(2026, 4, 1, tzinfo=_BERLIN)),
        ("2026-04-01T08:15", datetime(2026, 4, 1, 8, 15, tzinfo=_BERLIN)),
        ("2026-04-01T08:15+00:00", datetime(2026, 4, 1, 8, 15, tzinfo=UTC)),
    ],
)
def test_parse_time_expression_supports_iso_dates(text: str, expected: datetime) -> None:
    assert parse_time_expression(text, now=_NOW, timezone=_BERLIN) == expected


@pytest.mark.parametrize("text", ["", "soon", "25:00", "12:61", "m", "tomorrow"])
def test_parse_time_expression_rejects_unknown_formats(text: str) -> None:
    with pytest.raises(InvalidTimeExpressionError):
        parse_time_expression(text, now=_NOW, timezone=_BERLIN)


@pytest.mark.parametrize("text", ["99999999w", "999999999999999999999m", "9999999999d"])
def test_parse_time_expression_rejects_offsets_out_of_range(text: str) -> None:
    with pytest.raises(InvalidTimeExpressionError, match="out of range"):
        parse_time_expression(text, now=_NOW, timezone=_BERLIN)


def test_parse_time_expression_rejects_clock_time_rolling_past_the_last_day() -> None:
    last_evening: Final = datetime(9999, 12, 31, 23, 0, tzinfo=UTC)

    with pytest.raises(InvalidTimeExpressionError, match="out of range"):
        parse_time_expression("8:00", now=last_evening, timezone=ZoneInfo("UTC"))


def test_format_datetime_to_text_uses_the_given_timezone() -> None:
    value: Final = datetime(2026, 3, 10, 23, 30, tzinfo=UTC)  # Already March 11th in Berlin.
    text: Final = format_datetime_to_text(value, locale="en_US", timezone=_BERLIN)

    assert text.startswith(format_date(datetime(2026, 3, 11).date(), locale="en_US"))
    assert "12:30" in text
