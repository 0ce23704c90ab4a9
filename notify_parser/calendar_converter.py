"""
Calendar helpers shared by every extractor.

Thai notifications mix three conventions: Gregorian dates with English month
abbreviations, plain numeric dates, and Buddhist-era dates with Thai month
names. Month lookups return 0 when the name is unknown; callers must treat
that as a parse failure, never as January.
"""
from datetime import datetime, tzinfo
from typing import Optional, Tuple, Union

from .compiled_patterns import CompiledPatterns
from .constants import Constants
from .extraction_error import UnparseableTime

THAI_MONTH_ABBREVIATIONS = (
    "ม.ค.", "ก.พ.", "มี.ค.", "เม.ย.", "พ.ค.", "มิ.ย.",
    "ก.ค.", "ส.ค.", "ก.ย.", "ต.ค.", "พ.ย.", "ธ.ค.",
)

THAI_MONTH_NAMES = (
    "มกราคม", "กุมภาพันธ์", "มีนาคม", "เมษายน", "พฤษภาคม", "มิถุนายน",
    "กรกฎาคม", "สิงหาคม", "กันยายน", "ตุลาคม", "พฤศจิกายน", "ธันวาคม",
)

ENGLISH_MONTH_NAMES = (
    "january", "february", "march", "april", "may", "june",
    "july", "august", "september", "october", "november", "december",
)

# Keys have the dots removed so "พ.ค." and "พ.ค" both resolve.
_THAI_MONTHS = {
    **{name.replace(".", ""): i + 1 for i, name in enumerate(THAI_MONTH_ABBREVIATIONS)},
    **{name: i + 1 for i, name in enumerate(THAI_MONTH_NAMES)},
}

ReceivedAt = Union[datetime, str, int, float, None]


def thai_month_to_number(name: str) -> int:
    if not name:
        return 0
    return _THAI_MONTHS.get(name.strip().replace(".", ""), 0)


def english_abbrev_month_to_number(name: str) -> int:
    """Accepts any prefix of at least three letters: "Sep", "Sept" and "September" are all 9."""
    if not name:
        return 0
    key = name.strip().rstrip(".").lower()
    if len(key) < 3:
        return 0
    for i, full in enumerate(ENGLISH_MONTH_NAMES):
        if full.startswith(key):
            return i + 1
    return 0


def buddhist_to_gregorian(year: int) -> int:
    """2568 -> 2025; a two-digit year is taken relative to 2500 first, so 68 -> 2025."""
    if year < 100:
        year += Constants.Calendar.TWO_DIGIT_BUDDHIST_CENTURY
    return year - Constants.Calendar.BUDDHIST_ERA_OFFSET


def two_digit_gregorian(year: int) -> int:
    if year < 100:
        return year + Constants.Calendar.TWO_DIGIT_GREGORIAN_CENTURY
    return year


def parse_int(value: str, what: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise UnparseableTime(f"invalid {what}: {value!r}")


def parse_clock(token: str) -> Tuple[int, int, int]:
    """Parses "HH:MM" or "HH:MM:SS"."""
    m = CompiledPatterns.Time.CLOCK.match(token.strip()) if token else None
    if not m:
        raise UnparseableTime(f"invalid time of day: {token!r}")
    return int(m.group(1)), int(m.group(2)), int(m.group(3) or 0)


def combine(year: int, month: int, day: int, hour: int = 0, minute: int = 0,
            second: int = 0, tz: Optional[tzinfo] = None) -> datetime:
    if month < 1 or month > 12:
        raise UnparseableTime(f"invalid month: {month}")
    try:
        return datetime(year, month, day, hour, minute, second,
                        tzinfo=tz or Constants.Time.DEFAULT_TZ)
    except ValueError as e:
        raise UnparseableTime(f"invalid date {year}-{month}-{day} {hour}:{minute}:{second}: {e}")


def infer_year(month: int, day: int, received_at: datetime) -> int:
    """
    Year for a notification that only states day and month: the received year,
    unless that puts the transaction after the message arrived (a December
    transaction delivered in January).
    """
    year = received_at.year
    try:
        candidate = received_at.replace(year=year, month=month, day=day)
    except ValueError:
        return year
    if candidate - received_at > Constants.Time.YEAR_ROLLOVER_TOLERANCE:
        return year - 1
    return year


def normalize_received_at(value: ReceivedAt, tz: Optional[tzinfo] = None) -> datetime:
    """
    Turns the caller's received time into an aware datetime.
    Naive datetimes and strings are taken as wall-clock time in `tz`.
    Integers are epoch seconds, or milliseconds when they are that large.
    """
    tz = tz or Constants.Time.DEFAULT_TZ
    if value is None:
        raise UnparseableTime("no embedded time and no received time supplied")
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=tz)
        return value.astimezone(tz)
    if isinstance(value, bool):
        raise UnparseableTime(f"invalid received time: {value!r}")
    if isinstance(value, (int, float)):
        seconds = value
        if seconds > Constants.Time.EPOCH_MILLIS_THRESHOLD:
            seconds = seconds / 1000
        try:
            return datetime.fromtimestamp(seconds, tz)
        except (OverflowError, OSError, ValueError):
            raise UnparseableTime(f"invalid received time: {value!r}")
    if isinstance(value, str):
        return parse_local_datetime(value, tz)
    raise UnparseableTime(f"invalid received time: {value!r}")


def parse_local_datetime(text: str, tz: Optional[tzinfo] = None) -> datetime:
    """Parses "YYYY-MM-DD HH:MM[:SS]" as wall-clock time in `tz`."""
    tz = tz or Constants.Time.DEFAULT_TZ
    stripped = text.strip()
    for fmt in Constants.Time.RECEIVED_AT_FORMATS:
        try:
            return datetime.strptime(stripped, fmt).replace(tzinfo=tz)
        except ValueError:
            continue
    raise UnparseableTime(f"invalid date time: {text!r}")
