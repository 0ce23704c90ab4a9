from typing import Any

from ..bank_type import BankType
from ..calendar_converter import ReceivedAt, combine, english_abbrev_month_to_number, parse_clock, parse_int
from ..compiled_patterns import CompiledPatterns
from ..error_accumulator import ErrorAccumulator
from ..extraction_error import UnparseableAmount, UnparseableTime
from ..transaction_record import Extracted
from .base_thailand_bank_extractor import BaseThailandBankExtractor
from .json_payload import JsonPayloadExtractor


class BangkokBankExtractor(BaseThailandBankExtractor):
    """
    Bangkok Bank (BBL) SMS.

    "ถอน/โอน" and "Money Withdrawal" mark outgoing money; a deposit must say
    "PromptPay" (amount at 8) or "Deposit" (amount at 2, or the number after
    "MB" when token 2 is not usable). The SMS states no time, so the received
    time is used. The balance is the number glued into the last token.
    """

    WITHDRAWAL_MARKERS = ("ถอน/โอน", "Money Withdrawal")
    DEPOSIT_MARKERS = ("PromptPay", "Deposit")

    def get_bank_name(self) -> str:
        return "Bangkok Bank"

    def handled_types(self):
        return (BankType.BBL,)

    def extract(self, message: str, received_at: ReceivedAt, errors: ErrorAccumulator) -> Extracted:
        self.reject_markers(message, self.WITHDRAWAL_MARKERS)
        self.require_marker(message, self.DEPOSIT_MARKERS)
        tokens = self.tokenize(message)

        if "PromptPay" in message:
            if len(tokens) <= 8:
                raise self.malformed(tokens, "> 8 for PromptPay")
            amount_index = 8
            amount = self.parse_amount(tokens[8])
        else:
            if len(tokens) <= 2:
                raise self.malformed(tokens, "> 2")
            amount_index = 2
            amount = self._deposit_amount(tokens[2], message)

        occurred_at = self.received(received_at)
        balance = None
        if len(tokens) - 1 > amount_index:
            balance = self.decimal_in_token(tokens[-1], errors)
        return Extracted(amount, occurred_at, balance)

    def _deposit_amount(self, token: str, message: str):
        try:
            amount = self.parse_amount(token)
        except UnparseableAmount:
            amount = None
        if amount:
            return amount
        m = CompiledPatterns.BBL.MB_AMOUNT.search(message)
        if m:
            return self.parse_amount(m.group(1))
        if amount is None:
            raise UnparseableAmount(f"Bangkok Bank: cannot parse amount from {token!r}")
        return amount


class BangkokBankWaterExtractor(JsonPayloadExtractor):
    """
    BBL statement line. "msg_time" is either "DD Mon YYYY HH:MM" or
    "Day Mon DD YYYY HH:MM:SS", with English month abbreviations.
    """

    def get_bank_name(self) -> str:
        return "Bangkok Bank"

    def handled_types(self):
        return (BankType.BBL_WATER,)

    def parse_time(self, value: Any, received_at: ReceivedAt):
        parts = self.time_text(value).split()
        if len(parts) == 4:
            day, month_name, year, clock = parts
        elif len(parts) == 5:
            _, month_name, day, year, clock = parts
        else:
            raise UnparseableTime(f"Bangkok Bank: invalid statement time {value!r}")
        month = english_abbrev_month_to_number(month_name)
        if month == 0:
            raise UnparseableTime(f"Bangkok Bank: unknown month {month_name!r}")
        hour, minute, second = parse_clock(clock)
        return combine(parse_int(year, "year"), month, parse_int(day, "day"), hour, minute, second, self.tz)
