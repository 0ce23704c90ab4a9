from typing import Any

from ..bank_type import BankType
from ..calendar_converter import ReceivedAt
from ..compiled_patterns import CompiledPatterns
from ..error_accumulator import ErrorAccumulator
from ..extraction_error import UnparseableTime
from ..numeric_normalizer import parse_amount
from ..transaction_record import Extracted
from .base_thailand_bank_extractor import BaseThailandBankExtractor
from .json_payload import JsonPayloadExtractor


class KasikornNotifyExtractor(BaseThailandBankExtractor):
    """
    K PLUS push notification, 14 or 15 tokens: amount at 4, day at 8, Thai
    month at 9, two-digit Buddhist year at 10, "HH:MM" at 12 (14 tokens) or
    14 (15 tokens).
    """

    STRICT_TIME = True

    def get_bank_name(self) -> str:
        return "Kasikorn Bank"

    def handled_types(self):
        return (BankType.KBANK_NOTIFY,)

    def extract(self, message: str, received_at: ReceivedAt, errors: ErrorAccumulator) -> Extracted:
        tokens = self.tokenize(message)
        if len(tokens) == 14:
            clock_index = 12
        elif len(tokens) == 15:
            clock_index = 14
        else:
            raise self.malformed(tokens, "14 or 15")
        amount = self.parse_amount(tokens[4])
        occurred_at = self.resolve_time(
            lambda: self.thai_date(tokens[8], tokens[9], tokens[10], tokens[clock_index], received_at),
            received_at, errors,
        )
        return Extracted(amount, occurred_at)


class KasikornReadExtractor(BaseThailandBankExtractor):
    """
    KBank SMS read from the inbox, "KBank:" prefix removed.

    Layouts by token count:
      9, 14   amount at 5
      10      amount at 6, or 5 when 6 is not numeric
      4, 5    amount at 3
      6       amount at 4
    Long layouts start with "DD/MM" and "HH:MM"; short ones with "DD/MM/YY"
    (Buddhist era). The balance is the second-to-last token. Outgoing money
    ("เงินออก", "หักบช" or a "-" sign) is reported as a negative amount rather
    than rejected.
    """

    WITHDRAWAL_MARKERS = ("เงินออก", "หักบช")
    DIRECTION_WORDS = ("เงินออก", "เงินเข้า")

    def get_bank_name(self) -> str:
        return "Kasikorn Bank"

    def handled_types(self):
        return (BankType.KBANK_READ,)

    def extract(self, message: str, received_at: ReceivedAt, errors: ErrorAccumulator) -> Extracted:
        tokens = self.tokenize(message.replace("KBank:", ""))
        count = len(tokens)

        if count in (9, 14):
            amount_token = tokens[5]
        elif count == 10:
            amount_token = tokens[6]
            if not self._is_numeric(amount_token):
                amount_token = tokens[5]
        elif count in (4, 5):
            amount_token = tokens[3]
        elif count == 6:
            amount_token = tokens[4]
        else:
            raise self.malformed(tokens, "4, 5, 6, 9, 10 or 14")

        signed = parse_amount(self._strip_direction(amount_token))
        amount = abs(signed)
        if signed < 0 or any(marker in message for marker in self.WITHDRAWAL_MARKERS):
            amount = -amount

        occurred_at = self.resolve_time(
            lambda: self.numeric_date(tokens[0], tokens[1], received_at, buddhist_year=True),
            received_at, errors,
        )
        balance = self.balance_at(tokens, -2, errors)
        return Extracted(amount, occurred_at, balance)

    def _strip_direction(self, token: str) -> str:
        for word in self.DIRECTION_WORDS:
            token = token.replace(word, "")
        return token

    def _is_numeric(self, token: str) -> bool:
        return bool(CompiledPatterns.Amount.PLAIN_DECIMAL.match(token.replace(",", "")))


class KasikornWaterExtractor(JsonPayloadExtractor):
    """KBank statement line: {"msg_time": "D <Thai month> YY HH:MM", "coin": "1,000.00" | 1000.0}."""

    def get_bank_name(self) -> str:
        return "Kasikorn Bank"

    def handled_types(self):
        return (BankType.KBANK_WATER,)

    def parse_time(self, value: Any, received_at: ReceivedAt):
        parts = self.time_text(value).split()
        if len(parts) != 4:
            raise UnparseableTime(f"Kasikorn Bank: invalid statement time {value!r}")
        return self.thai_date(parts[0], parts[1], parts[2], parts[3], received_at)
