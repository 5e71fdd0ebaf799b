from dataclasses import dataclass
from datetime import date as GDate, datetime, time
from typing import Any, Tuple, Union

from jalali_convert.utils.date_math import (
    CalendarDate,
    gregorian_to_jalali_date,
    jalali_month_length,
    jalali_to_gregorian_date,
)

'''
Text <-> datetime bridge for Jalali date strings.

Input format (strict on shape, lenient on values):

  YYYY-MM-DD
  YYYY-MM-DD HH:MM
  YYYY-MM-DD HH:MM:SS

 * The date part must have exactly three "-" separated integers.
 * Empty ":" fields are skipped ("10:30:" is 10:30).
 * A time part with fewer than two ":" fields is ignored (00:00:00).
 * Day/month magnitudes are not checked unless `strict=True`.

Output format:

  "YYYY-MM-DD"            when the instant is exactly midnight
  "YYYY-MM-DD HH:MM:SS"   otherwise
'''


class FormatError(ValueError):
    """Jalali date/time text does not have the expected shape or values."""


@dataclass(frozen=True)
class ClockTime:
    hour: int = 0
    minute: int = 0
    second: int = 0


MIDNIGHT = ClockTime()
END_OF_DAY = ClockTime(23, 59, 59)

# -----------------------------
# Parsing
# -----------------------------

def _parse_int(token: str, field: str, text: str) -> int:
    try:
        return int(token)
    except ValueError as exc:
        raise FormatError(f"invalid numeric literal for {field} in {text!r}: {token!r}") from exc


def split_jalali_datetime(text: str) -> Tuple[CalendarDate, ClockTime]:
    """Split `text` into its Jalali date and clock time, without converting."""
    date_part, _, time_part = text.partition(" ")

    date_fields = date_part.split("-")
    if len(date_fields) != 3:
        raise FormatError(f"invalid Jalali date format: {text!r} (expected YYYY-MM-DD)")
    year, month, day = (
        _parse_int(token, field, text)
        for token, field in zip(date_fields, ("year", "month", "day"))
    )

    clock = MIDNIGHT
    # Empty tokens are dropped: "10:30:" reads as 10:30.
    time_fields = [token for token in time_part.split(":") if token]
    if len(time_fields) >= 2:
        hour = _parse_int(time_fields[0], "hour", text)
        minute = _parse_int(time_fields[1], "minute", text)
        second = _parse_int(time_fields[2], "second", text) if len(time_fields) > 2 else 0
        clock = ClockTime(hour, minute, second)

    return CalendarDate(year, month, day), clock


def _check_strict(jalali: CalendarDate, clock: ClockTime, text: str) -> None:
    if not 1 <= jalali.month <= 12:
        raise FormatError(f"month out of range in {text!r}: {jalali.month}")
    last_day = jalali_month_length(jalali.year, jalali.month)
    if not 1 <= jalali.day <= last_day:
        raise FormatError(f"day out of range in {text!r}: {jalali.day} (month has {last_day} days)")
    if not (0 <= clock.hour <= 23 and 0 <= clock.minute <= 59 and 0 <= clock.second <= 59):
        raise FormatError(
            f"time out of range in {text!r}: {clock.hour:02d}:{clock.minute:02d}:{clock.second:02d}"
        )


def parse_jalali_datetime(text: str, end_of_day: bool = False, *, strict: bool = False) -> datetime:
    """
    Convert Jalali `text` to a naive Gregorian datetime.

    `end_of_day` forces the time to 23:59:59 whatever the text says.
    `strict` rejects out-of-range month/day/time values instead of letting
    the arithmetic absorb them.
    """
    jalali, clock = split_jalali_datetime(text)
    if strict:
        _check_strict(jalali, clock, text)
    if end_of_day:
        clock = END_OF_DAY

    g = jalali_to_gregorian_date(jalali)
    try:
        return datetime(g.year, g.month, g.day, clock.hour, clock.minute, clock.second)
    except ValueError as exc:
        raise FormatError(f"cannot represent {text!r} as a timestamp: {exc}") from exc


# -----------------------------
# Formatting
# -----------------------------

def format_gregorian_as_jalali(instant: Union[datetime, GDate]) -> str:
    """Render a Gregorian date/datetime as Jalali text; midnight drops the time."""
    if not isinstance(instant, datetime):
        instant = datetime.combine(instant, time())

    j = gregorian_to_jalali_date(CalendarDate(instant.year, instant.month, instant.day))
    # pandas Timestamps carry nanoseconds beyond .time()
    if instant.time() == time() and getattr(instant, "nanosecond", 0) == 0:
        return j.isoformat()
    return f"{j.isoformat()} {instant.hour:02d}:{instant.minute:02d}:{instant.second:02d}"


def parse_gregorian_timestamp(value: Any) -> datetime:
    """Accept a datetime, a date or ISO text ('YYYY-MM-DD[ HH:MM[:SS[.ffffff]]]')."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, GDate):
        return datetime.combine(value, time())
    text = str(value).strip()
    try:
        return datetime.fromisoformat(text)
    except ValueError as exc:
        raise FormatError(f"invalid Gregorian timestamp: {value!r}") from exc


# Host-facing names
jalali_to_gregorian = parse_jalali_datetime
gregorian_to_jalali = format_gregorian_as_jalali
