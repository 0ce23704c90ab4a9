import re
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from ..calendar_converter import (
    ReceivedAt, buddhist_to_gregorian, combine, parse_clock, parse_int, thai_month_to_number,
    two_digit_gregorian,
)
from ..compiled_patterns import CompiledPatterns
from ..error_accumulator import ErrorAccumulator
from ..extraction_error import NonDepositMessage, UnparseableTime
from .bank_extractor import BankExtractor


class BaseThailandBankExtractor(BankExtractor):
    """
    Base class for Thai bank extractors to share common logic.
    Handles Thai and English notification wording, THB amounts and the
    Buddhist-era calendar.
    """

    OTP_MARKERS = ("OTP",)

    def reject_otp(self, message: str) -> None:
        if any(marker in message for marker in self.OTP_MARKERS):
            raise NonDepositMessage(f"{self.get_bank_name()}: OTP message")

    # -------------------------------------------------------------------------
    # dates
    # -------------------------------------------------------------------------
    def day_month_at_clock(self, token: str, received_at: ReceivedAt) -> datetime:
        """Parses the "DD/MM@HH:MM" or "DD-MM@HH:MM" segment; the year comes from the received time."""
        m = CompiledPatterns.Time.DAY_MONTH_AT_CLOCK.match(token)
        if not m:
            raise UnparseableTime(f"{self.get_bank_name()}: invalid date segment {token!r}")
        day, month, hour, minute = (int(g) for g in m.groups())
        return self.day_month_time(day, month, hour, minute, received_at)

    def numeric_date(self, date_token: str, clock_token: str, received_at: ReceivedAt,
                     buddhist_year: bool = False) -> datetime:
        """
        Parses "DD/MM" or "DD/MM/YY[YY]" plus "HH:MM[:SS]".
        A stated year is Buddhist-era when `buddhist_year` is set, Gregorian otherwise;
        a missing year is inferred from the received time.
        """
        m = CompiledPatterns.Time.DAY_MONTH_YEAR.match(date_token)
        if not m:
            raise UnparseableTime(f"{self.get_bank_name()}: invalid date {date_token!r}")
        day, month = int(m.group(1)), int(m.group(2))
        hour, minute, second = parse_clock(clock_token)
        if m.group(3) is None:
            return self.day_month_time(day, month, hour, minute, received_at, second)
        year = int(m.group(3))
        if buddhist_year:
            year = buddhist_to_gregorian(year)
        else:
            year = two_digit_gregorian(year)
        return combine(year, month, day, hour, minute, second, self.tz)

    def thai_date(self, day_token: str, month_name: str, year_token: Optional[str],
                  clock_token: str, received_at: ReceivedAt) -> datetime:
        """Parses a Thai-month date such as "24 พ.ค. 2568 15:04" or "5 ม.ค. 68 09:30"."""
        month = thai_month_to_number(month_name)
        if month == 0:
            raise UnparseableTime(f"{self.get_bank_name()}: unknown Thai month {month_name!r}")
        day = parse_int(day_token, "day")
        hour, minute, second = parse_clock(clock_token)
        if year_token is None:
            return self.day_month_time(day, month, hour, minute, received_at, second)
        year = buddhist_to_gregorian(parse_int(year_token, "year"))
        return combine(year, month, day, hour, minute, second, self.tz)

    # -------------------------------------------------------------------------
    # balance
    # -------------------------------------------------------------------------
    def balance_from_pattern(self, pattern: re.Pattern, message: str,
                             errors: ErrorAccumulator) -> Optional[Decimal]:
        m = pattern.search(message)
        if not m:
            return None
        return self.parse_balance(m.group(1), errors)

    def balance_at(self, tokens: List[str], index: int, errors: ErrorAccumulator) -> Optional[Decimal]:
        """Balance at a fixed token index; negative indexes count from the end."""
        if -len(tokens) <= index < len(tokens):
            return self.parse_balance(tokens[index], errors)
        return None

    def decimal_in_token(self, token: str, errors: ErrorAccumulator) -> Optional[Decimal]:
        """Balance glued to a label, e.g. "ใช้ได้36,447.43บ"."""
        m = CompiledPatterns.Amount.DECIMAL_IN_TOKEN.search(token.replace(",", ""))
        if not m:
            return None
        return self.parse_balance(m.group(1), errors)
