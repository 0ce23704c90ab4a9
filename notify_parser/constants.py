import logging
import os
from datetime import timedelta, timezone, tzinfo
from typing import Optional

logger = logging.getLogger(__name__)


def offset_timezone(value: Optional[str], default_hours: float) -> tzinfo:
    """Fixed-offset zone from an hours value such as "7" or "5.5"; a bad value keeps the default."""
    if value is None or not value.strip():
        return timezone(timedelta(hours=default_hours))
    try:
        return timezone(timedelta(hours=float(value)))
    except (ValueError, OverflowError):
        logger.warning("ignoring invalid timezone offset %r, using UTC%+g", value, default_hours)
        return timezone(timedelta(hours=default_hours))


class Constants:
    class Time:
        TZ_OFFSET_ENV = "NOTIFY_PARSER_TZ_OFFSET_HOURS"
        # Thai banks report wall-clock time in Asia/Bangkok, which has no DST.
        DEFAULT_TZ_OFFSET_HOURS = 7
        DEFAULT_TZ = offset_timezone(os.environ.get(TZ_OFFSET_ENV), DEFAULT_TZ_OFFSET_HOURS)

        RECEIVED_AT_FORMATS = (
            "%Y-%m-%d %H:%M:%S",
            "%Y-%m-%d %H:%M",
            "%Y-%m-%dT%H:%M:%S",
        )
        TEMPLATE_PAY_TIME_FORMAT = "%d/%m/%Y %H:%M:%S"

        # Epoch values above this are milliseconds (Android SMS inbox dumps).
        EPOCH_MILLIS_THRESHOLD = 10 ** 11

        # A year-less date further than this past the received time belongs to last year.
        YEAR_ROLLOVER_TOLERANCE = timedelta(days=1)

    class Calendar:
        BUDDHIST_ERA_OFFSET = 543
        TWO_DIGIT_BUDDHIST_CENTURY = 2500
        TWO_DIGIT_GREGORIAN_CENTURY = 2000
