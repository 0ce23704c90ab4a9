from functools import partial
from typing import Any, Optional

from ..bank_type import BankType
from ..calendar_converter import ReceivedAt
from ..error_accumulator import ErrorAccumulator
from ..extraction_error import UnparseableTime
from ..transaction_record import Extracted
from .base_thailand_bank_extractor import BaseThailandBankExtractor
from .json_payload import JsonPayloadExtractor


class SCBBankExtractor(BaseThailandBankExtractor):
    """
    Siam Commercial Bank SMS, as received or read from the inbox.

    Layouts, chosen by the first token:
      "เงิน"           amount at 1, "DD/MM@HH:MM" at 3
      "Transfer"       amount at 5, "DD/MM@HH:MM" at 11
      "Cash/transfer"  amount at 4
      anything else    amount at 1
    The balance is the last token. Messages containing "ถอน", "โอนเงิน" or
    "True" (wallet top-ups going out) are not deposits.
    """

    WITHDRAWAL_MARKERS = ("ถอน", "โอนเงิน", "True")

    def get_bank_name(self) -> str:
        return "SCB"

    def handled_types(self):
        return (BankType.SCB, BankType.SCB_READ)

    def extract(self, message: str, received_at: ReceivedAt, errors: ErrorAccumulator) -> Extracted:
        self.reject_markers(message, self.WITHDRAWAL_MARKERS)
        tokens = self.tokenize(message)
        head = tokens[0] if tokens else ""

        time_index: Optional[int] = None
        if head == "เงิน" and len(tokens) >= 2:
            amount_index = 1
            time_index = 3
        elif head == "Transfer" and len(tokens) >= 6:
            amount_index = 5
            time_index = 11
        elif head == "Cash/transfer" and len(tokens) >= 5:
            amount_index = 4
        elif head not in ("เงิน", "Transfer", "Cash/transfer") and len(tokens) >= 2:
            amount_index = 1
        else:
            raise self.malformed(tokens, "'เงิน' >= 2, 'Transfer' >= 6, 'Cash/transfer' >= 5 or >= 2 tokens")

        amount = self.parse_amount(tokens[amount_index])

        parse_embedded = None
        if time_index is not None and time_index < len(tokens):
            parse_embedded = partial(self.day_month_at_clock, tokens[time_index], received_at)
        occurred_at = self.resolve_time(parse_embedded, received_at, errors)

        balance = None
        if len(tokens) - 1 > amount_index:
            balance = self.decimal_in_token(tokens[-1], errors)
        return Extracted(amount, occurred_at, balance)


class SCBNotifyExtractor(BaseThailandBankExtractor):
    """
    SCB push notification: exactly 15 tokens with the amount at 1, day at 10,
    Thai month at 11 and "HH:MM" at 14. The year is not stated.
    """

    STRICT_TIME = True

    def get_bank_name(self) -> str:
        return "SCB"

    def handled_types(self):
        return (BankType.SCB_NOTIFY,)

    def extract(self, message: str, received_at: ReceivedAt, errors: ErrorAccumulator) -> Extracted:
        tokens = self.tokenize(message)
        if len(tokens) != 15:
            raise self.malformed(tokens, "15")
        amount = self.parse_amount(tokens[1])
        occurred_at = self.resolve_time(
            lambda: self.thai_date(tokens[10], tokens[11], None, tokens[14], received_at),
            received_at, errors,
        )
        return Extracted(amount, occurred_at)


class SCBWaterExtractor(JsonPayloadExtractor):
    """SCB statement line: {"msg_time": "DD/MM/YYYY HH:MM[:SS]", "coin" | "amount": ...}."""

    def get_bank_name(self) -> str:
        return "SCB"

    def handled_types(self):
        return (BankType.SCB_WATER,)

    def parse_time(self, value: Any, received_at: ReceivedAt):
        parts = self.time_text(value).split()
        if len(parts) != 2:
            raise UnparseableTime(f"SCB: invalid statement time {value!r}")
        return self.numeric_date(parts[0], parts[1], received_at)
