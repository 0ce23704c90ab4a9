from typing import Any

from ..bank_type import BankType
from ..calendar_converter import ReceivedAt, normalize_received_at, parse_local_datetime
from ..extraction_error import UnparseableTime
from .json_payload import JsonPayloadExtractor


class GHRelayExtractor(JsonPayloadExtractor):
    """Python relay scripts for several banks post {"money": "1,000.00", "time": "YYYY-MM-DD HH:MM"}."""

    TIME_KEYS = ("time",)
    AMOUNT_KEYS = ("money",)

    def get_bank_name(self) -> str:
        return "GH relay"

    def handled_types(self):
        return (BankType.SCB_GH, BankType.KTB_GH, BankType.KBANK_GH, BankType.TTB_GH, BankType.BAY_GH)

    def parse_time(self, value: Any, received_at: ReceivedAt):
        return parse_local_datetime(self.time_text(value), self.tz)


class ProtocolWaterExtractor(JsonPayloadExtractor):
    """Protocol statement relays post {"amount": "1,000.00", "date_time": "YYYY-MM-DD HH:MM"}."""

    TIME_KEYS = ("date_time",)
    AMOUNT_KEYS = ("amount",)

    def get_bank_name(self) -> str:
        return "Protocol relay"

    def handled_types(self):
        return (BankType.TM_PROTOCOL_WATER, BankType.SCB_PROTOCOL_WATER, BankType.TTB_PROTOCOL_WATER)

    def parse_time(self, value: Any, received_at: ReceivedAt):
        return parse_local_datetime(self.time_text(value), self.tz)


class KKRLSCLIExtractor(JsonPayloadExtractor):
    """Command-line relay posting {"coin": 1000.0, "time": <unix seconds>}."""

    TIME_KEYS = ("time",)
    AMOUNT_KEYS = ("coin",)

    def get_bank_name(self) -> str:
        return "KKRLSCLI"

    def handled_types(self):
        return (BankType.KKRLSCLI,)

    def parse_time(self, value: Any, received_at: ReceivedAt):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise UnparseableTime(f"KKRLSCLI: time is not a unix timestamp: {value!r}")
        return normalize_received_at(value, self.tz)
