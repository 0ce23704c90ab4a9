from ..bank_type import BankType
from ..calendar_converter import ReceivedAt, parse_clock
from ..compiled_patterns import CompiledPatterns
from ..error_accumulator import ErrorAccumulator
from ..extraction_error import UnparseableTime
from ..transaction_record import Extracted
from .base_thailand_bank_extractor import BaseThailandBankExtractor


class BAACBankExtractor(BaseThailandBankExtractor):
    """
    Bank for Agriculture and Agricultural Cooperatives SMS.
    Only PromptPay receipts ("รับโอนพร้อมเพย์") are deposits. The date at 0
    is read as day and month only, the clock at 1, the amount at 6 and the
    balance at 9.
    """

    def get_bank_name(self) -> str:
        return "BAAC"

    def handled_types(self):
        return (BankType.BAAC,)

    def extract(self, message: str, received_at: ReceivedAt, errors: ErrorAccumulator) -> Extracted:
        self.reject_otp(message)
        self.require_marker(message, ("รับโอนพร้อมเพย์",))
        tokens = self.tokenize(message)
        if len(tokens) <= 6:
            raise self.malformed(tokens, "> 6")
        amount = self.parse_amount(tokens[6])
        occurred_at = self.resolve_time(lambda: self._date(tokens[0], tokens[1], received_at), received_at, errors)
        balance = self.balance_at(tokens, 9, errors)
        return Extracted(amount, occurred_at, balance)

    def _date(self, date_token: str, clock_token: str, received_at: ReceivedAt):
        m = CompiledPatterns.Time.DAY_MONTH_YEAR.match(date_token)
        if not m:
            raise UnparseableTime(f"BAAC: invalid date {date_token!r}")
        hour, minute, _ = parse_clock(clock_token)
        return self.day_month_time(int(m.group(1)), int(m.group(2)), hour, minute, received_at)
