import re
from datetime import datetime
from datetime import time
from datetime import timedelta
from typing import Final
from typing import final
from zoneinfo import ZoneInfo

from babel.dates import format_date
from babel.dates import format_time


@final
class InvalidTimeExpressionError(ValueError):
    pass


# E.g. `1w`, `2d3h`, `90m`. Every part is optional, but at least one must be present.
_RELATIVE_TIME_RE: Final = re.compile(r"^(?:(?P<weeks>\d+)w)?(?:(?P<days>\d+)d)?(?:(?P<hours>\d+)h)?(?:(?P<minutes>\d+)m)?$")
_CLOCK_TIME_RE: Final = re.compile(r"^(?P<hour>\d{1,2}):(?P<minute>\d{2})$")


def parse_time_expression(text: str, *, now: datetime, timezone: ZoneInfo) -> datetime:
    """
    Converts the time part of an alert directive into an aware datetime.

    Supported forms:
    - relative offsets like `10m`, `2h`, `1d12h` or `1w`,
    - clock times like `9:30` or `18:00` (the next occurrence after `now`),
    - ISO dates and datetimes like `2026-03-01` or `2026-03-01T08:15`.
    """
    text = text.strip()
    if not text:
        raise InvalidTimeExpressionError("Missing time.")

    relative: Final = _RELATIVE_TIME_RE.match(text)
    if relative is not None and any(relative.groupdict().values()):
        parts: Final = {name: int(amount) for name, amount in relative.groupdict().items() if amount is not None}
        try:
            return now + timedelta(**parts)
        except OverflowError as e:
            raise InvalidTimeExpressionError(f"Time is out of range: '{text}'.") from e

    clock: Final = _CLOCK_TIME_RE.match(text)
    if clock is not None:
        hour: Final = int(clock.group("hour"))
        minute: Final = int(clock.group("minute"))
        if hour > 23 or minute > 59:
            raise InvalidTimeExpressionError(f"Invalid time of day: '{text}'.")
        local_now: Final = now.astimezone(timezone)
        candidate: Final = datetime.combine(local_now.date(), time(hour, minute), tzinfo=timezone)
        if candidate > local_now:
            return candidate
        try:
            return candidate + timedelta(days=1)
        except OverflowError as e:
            raise InvalidTimeExpressionError(f"Time is out of range: '{text}'.") from e

    try:
        parsed: Final = datetime.fromisoformat(text)
    except ValueError as e:
        raise InvalidTimeExpressionError(f"Unrecognized time: '{text}'.") from e
    return parsed if parsed.tzinfo is not None else parsed.replace(tzinfo=timezone)


def format_datetime_to_text(value: datetime, *, locale: str, timezone: ZoneInfo) -> str:
    local: Final = value.astimezone(timezone)
    return f"{format_date(local.date(), locale=locale)} {format_time(local, tzinfo=timezone, locale=locale)}"
