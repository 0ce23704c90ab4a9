"""
Generic extraction for banks whose notification has one fixed shape.

A bank is described by two regular expressions whose first capture groups
hold the payment time and the amount. Adding such a bank is a config entry
in `template_banks.TEMPLATE_BANKS`, not a new extractor class.
"""
import re
from dataclasses import dataclass, field
from datetime import datetime, tzinfo
from typing import Optional

from .calendar_converter import ReceivedAt, normalize_received_at
from .constants import Constants
from .error_accumulator import ErrorAccumulator
from .extraction_error import MalformedMessage, UnparseableAmount, UnparseableTime
from .numeric_normalizer import parse_amount
from .transaction_record import Extracted, TransactionRecord


@dataclass(frozen=True)
class ExtractorConfig:
    bank_type: str
    pay_time_pattern: str
    pay_coin_pattern: str
    pay_time_format: str = Constants.Time.TEMPLATE_PAY_TIME_FORMAT
    require_time: bool = False
    time_regex: re.Pattern = field(init=False, repr=False, compare=False)
    coin_regex: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        # Patterns are compiled once here and shared by every call.
        object.__setattr__(self, "time_regex", re.compile(self.pay_time_pattern))
        object.__setattr__(self, "coin_regex", re.compile(self.pay_coin_pattern))
        for name, regex in (("pay_time_pattern", self.time_regex), ("pay_coin_pattern", self.coin_regex)):
            if regex.groups < 1:
                raise ValueError(f"{self.bank_type}: {name} {regex.pattern!r} has no capture group")

    @classmethod
    def from_dict(cls, bank_type: str, entry: dict) -> "ExtractorConfig":
        return cls(
            bank_type=bank_type,
            pay_time_pattern=entry["pay_time_pattern"],
            pay_coin_pattern=entry["pay_coin_pattern"],
            pay_time_format=entry.get("pay_time_format", Constants.Time.TEMPLATE_PAY_TIME_FORMAT),
            require_time=entry.get("require_time", False),
        )


class TemplateEngine:
    """Applies an ExtractorConfig to a message; holds only the timezone."""

    def __init__(self, tz: Optional[tzinfo] = None):
        self.tz = tz or Constants.Time.DEFAULT_TZ

    def extract(self, config: ExtractorConfig, raw_message: str, received_at: ReceivedAt = None,
                errors: Optional[ErrorAccumulator] = None) -> TransactionRecord:
        if errors is None:
            errors = ErrorAccumulator()
        extracted = self.extract_fields(config, raw_message, received_at, errors)
        return TransactionRecord.from_extracted(extracted, config.bank_type, raw_message)

    def extract_fields(self, config: ExtractorConfig, raw_message: str, received_at: ReceivedAt,
                       errors: ErrorAccumulator) -> Extracted:
        if not raw_message or not raw_message.strip():
            raise MalformedMessage("empty message")

        # Both fields are attempted so the accumulator reports every miss.
        time_error = None
        occurred_at = None
        try:
            occurred_at = self._pay_time(config, raw_message)
        except UnparseableTime as e:
            time_error = e
            errors.add_error(e)

        amount = None
        amount_error = None
        m = config.coin_regex.search(raw_message.replace(",", ""))
        if m is None:
            amount_error = MalformedMessage(f"{config.bank_type}: amount pattern did not match")
            errors.add_error(amount_error)
        else:
            try:
                amount = parse_amount(m.group(1))
            except UnparseableAmount as e:
                amount_error = e
                errors.add_error(e)

        if amount_error is not None:
            raise amount_error
        if time_error is not None:
            if config.require_time or received_at is None:
                raise time_error
            occurred_at = normalize_received_at(received_at, self.tz)
        return Extracted(amount, occurred_at)

    def _pay_time(self, config: ExtractorConfig, raw_message: str) -> datetime:
        m = config.time_regex.search(raw_message)
        if m is None:
            raise UnparseableTime(f"{config.bank_type}: pay time pattern did not match")
        text = m.group(1)
        try:
            naive = datetime.strptime(text, config.pay_time_format)
        except ValueError:
            raise UnparseableTime(f"{config.bank_type}: invalid pay time {text!r}")
        return naive.replace(tzinfo=self.tz)
