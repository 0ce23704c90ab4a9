from functools import partial
from typing import Any

from ..bank_type import BankType
from ..calendar_converter import ReceivedAt
from ..error_accumulator import ErrorAccumulator
from ..extraction_error import UnparseableTime
from ..transaction_record import Extracted
from .base_thailand_bank_extractor import BaseThailandBankExtractor
from .json_payload import JsonPayloadExtractor


class KTBBankExtractor(BaseThailandBankExtractor):
    """
    Krungthai Bank SMS.

    Layouts:
      contains "Deposit"          amount at 4 (English, "THB" prefix)
      "DD-MM@HH:MM" at 0          amount at 2
      anything else               amount at 5
    The "DD-MM@HH:MM" segment is read from token 0 or 3; the balance is the
    last token. OTP and "Withdraw" messages are not deposits.
    """

    WITHDRAWAL_MARKERS = ("Withdraw",)

    def get_bank_name(self) -> str:
        return "KTB"

    def handled_types(self):
        return (BankType.KTB,)

    def extract(self, message: str, received_at: ReceivedAt, errors: ErrorAccumulator) -> Extracted:
        self.reject_otp(message)
        self.reject_markers(message, self.WITHDRAWAL_MARKERS)
        tokens = self.tokenize(message)

        if "Deposit" in message and len(tokens) >= 5:
            amount_index = 4
        elif tokens and "@" in tokens[0] and len(tokens) >= 3:
            amount_index = 2
        elif len(tokens) >= 6:
            amount_index = 5
        else:
            raise self.malformed(tokens, "'Deposit' >= 5, dated >= 3 or >= 6 tokens")
        amount = self.parse_amount(tokens[amount_index])

        parse_embedded = None
        if "@" in tokens[0]:
            parse_embedded = partial(self.day_month_at_clock, tokens[0], received_at)
        elif len(tokens) > 3 and "@" in tokens[3]:
            parse_embedded = partial(self.day_month_at_clock, tokens[3], received_at)
        occurred_at = self.resolve_time(parse_embedded, received_at, errors)

        balance = None
        if len(tokens) - 1 > amount_index:
            balance = self.parse_balance(tokens[-1], errors)
        return Extracted(amount, occurred_at, balance)


class KTBLineExtractor(BaseThailandBankExtractor):
    """
    Krungthai LINE Connect notice. Amount at 1; with at least 10 tokens the
    "DD/MM" date sits at 6 (or 7) followed by "HH:MM", and the balance at 9.
    Only messages containing "เงินเข้า" are deposits.
    """

    def get_bank_name(self) -> str:
        return "KTB"

    def handled_types(self):
        return (BankType.KTB_LINE,)

    def extract(self, message: str, received_at: ReceivedAt, errors: ErrorAccumulator) -> Extracted:
        self.reject_otp(message)
        self.require_marker(message, ("เงินเข้า",))
        tokens = self.tokenize(message)
        if len(tokens) < 2:
            raise self.malformed(tokens, ">= 2")
        amount = self.parse_amount(tokens[1])

        parse_embedded = None
        balance = None
        if len(tokens) > 9:
            date_index = 7 if "/" in tokens[7] else 6
            parse_embedded = partial(self.numeric_date, tokens[date_index], tokens[date_index + 1], received_at)
            balance = self.parse_balance(tokens[9], errors)
        occurred_at = self.resolve_time(parse_embedded, received_at, errors)
        return Extracted(amount, occurred_at, balance)


class KTBNoticeExtractor(BaseThailandBankExtractor):
    """Krungthai app notice: "ได้รับ <amount> ..."; carries no time of its own."""

    def get_bank_name(self) -> str:
        return "KTB"

    def handled_types(self):
        return (BankType.KTB_NOTICE,)

    def extract(self, message: str, received_at: ReceivedAt, errors: ErrorAccumulator) -> Extracted:
        self.reject_otp(message)
        self.require_marker(message, ("ได้รับ",))
        tokens = self.tokenize(message)
        if len(tokens) < 2:
            raise self.malformed(tokens, ">= 2")
        amount = self.parse_amount(tokens[1])
        return Extracted(amount, self.received(received_at))


class KTBWaterExtractor(JsonPayloadExtractor):
    """KTB statement line: {"msg_time": "DD-MM-YYYY HH:MM[:SS]", "coin" | "amount": ...}."""

    def get_bank_name(self) -> str:
        return "KTB"

    def handled_types(self):
        return (BankType.KTB_WATER,)

    def parse_time(self, value: Any, received_at: ReceivedAt):
        parts = self.time_text(value).split()
        if len(parts) != 2:
            raise UnparseableTime(f"KTB: invalid statement time {value!r}")
        return self.numeric_date(parts[0], parts[1], received_at)
