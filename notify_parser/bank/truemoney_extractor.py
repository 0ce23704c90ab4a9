from typing import Any

from ..bank_type import BankType
from ..calendar_converter import ReceivedAt
from ..error_accumulator import ErrorAccumulator
from ..extraction_error import UnparseableTime
from ..transaction_record import Extracted
from .base_thailand_bank_extractor import BaseThailandBankExtractor
from .json_payload import JsonPayloadExtractor


class TrueMoneyWaterExtractor(JsonPayloadExtractor):
    """
    TrueMoney wallet history line (Android and iOS relays):
    {"time": "24 พ.ค. 2568 15:04", "money": "1,234.50"} with a four-digit Buddhist year.
    """

    TIME_KEYS = ("time",)
    AMOUNT_KEYS = ("money",)

    def get_bank_name(self) -> str:
        return "TrueMoney"

    def handled_types(self):
        return (BankType.TM_WATER, BankType.TM_IOS_WATER)

    def parse_time(self, value: Any, received_at: ReceivedAt):
        parts = self.time_text(value).split()
        if len(parts) != 4:
            raise UnparseableTime(f"TrueMoney: invalid history time {value!r}")
        return self.thai_date(parts[0], parts[1], parts[2], parts[3], received_at)


class SwooleTrueMoneyExtractor(BaseThailandBankExtractor):
    """The socket relay forwards only the amount text, e.g. "฿ 1,234.00"; time is the received time."""

    def get_bank_name(self) -> str:
        return "TrueMoney"

    def handled_types(self):
        return (BankType.SWOOLE_TM,)

    def extract(self, message: str, received_at: ReceivedAt, errors: ErrorAccumulator) -> Extracted:
        amount = self.parse_amount(message)
        return Extracted(amount, self.received(received_at))
