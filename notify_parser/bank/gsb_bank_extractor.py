from functools import partial

from ..bank_type import BankType
from ..calendar_converter import ReceivedAt
from ..compiled_patterns import CompiledPatterns
from ..error_accumulator import ErrorAccumulator
from ..transaction_record import Extracted
from .base_thailand_bank_extractor import BaseThailandBankExtractor


class GSBBankExtractor(BaseThailandBankExtractor):
    """
    Government Savings Bank (GSB) SMS, app notification and LINE notice.

    Layouts:
      "คุณได้รับเงิน <amount> ..."                   amount at 1
      "เงินเข้า: มีการฝาก/โอนเงิน <amount> บาท ..."   amount at 2
    The date reads "วันที่ 24 พ.ค. 2568 เวลา 15:04 น." (Buddhist era) and the
    balance follows "คงเหลือ". "เงินออก", "ถอนเงิน" and OTP messages are not
    deposits; "โอนเงิน" alone is not a marker because deposits say "ฝาก/โอนเงิน".
    """

    WITHDRAWAL_MARKERS = ("เงินออก", "ถอนเงิน")

    def get_bank_name(self) -> str:
        return "Government Savings Bank"

    def handled_types(self):
        return (BankType.GSB, BankType.GSB_READ, BankType.GSB_NOTIFY, BankType.GSB_LINE)

    def extract(self, message: str, received_at: ReceivedAt, errors: ErrorAccumulator) -> Extracted:
        self.reject_otp(message)
        self.reject_markers(message, self.WITHDRAWAL_MARKERS)
        tokens = self.tokenize(message)
        head = tokens[0] if tokens else ""

        if head == "คุณได้รับเงิน" and len(tokens) >= 2:
            amount_token = tokens[1]
        elif head.startswith("เงินเข้า") and len(tokens) >= 3:
            amount_token = tokens[2]
        else:
            raise self.malformed(tokens, "'คุณได้รับเงิน' >= 2 or 'เงินเข้า' >= 3 tokens")
        amount = self.parse_amount(amount_token)

        parse_embedded = None
        m = CompiledPatterns.GSB.DATE_TIME.search(message)
        if m:
            day, month_name, year, hour, minute = m.groups()
            parse_embedded = partial(self.thai_date, day, month_name, year, f"{hour}:{minute}", received_at)
        occurred_at = self.resolve_time(parse_embedded, received_at, errors)

        balance = self.balance_from_pattern(CompiledPatterns.GSB.BALANCE, message, errors)
        return Extracted(amount, occurred_at, balance)
