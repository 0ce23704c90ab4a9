from ..bank_type import BankType
from ..calendar_converter import ReceivedAt, combine, two_digit_gregorian
from ..compiled_patterns import CompiledPatterns
from ..error_accumulator import ErrorAccumulator
from ..extraction_error import NonDepositMessage
from ..transaction_record import Extracted
from .base_thailand_bank_extractor import BaseThailandBankExtractor


class TTBBankExtractor(BaseThailandBankExtractor):
    """
    TTB (TMBThanachart Bank) SMS; the plain, read and notify tags share one grammar.

    Short layout, starting with "DD-MM@HH:MM":
        27-05@16:25 บชX46746X:เงินเข้า 499.95บ ใช้ได้ 11,871.96บ
    Legacy layout, amount suffixed "บ." and a "DD/MM/YY@HH:MM" segment anywhere:
        เงินเข้า 1,000.00บ. เข้าบชX1234 27/05/25@16:25 เหลือ12,000.00บ
    English legacy messages carry the amount at token 2.

    "โอนเงิน", "transferred" and "เงินออก" are outgoing; in the short layout
    only "เงินเข้า" counts as a deposit.
    """

    WITHDRAWAL_MARKERS = ("โอนเงิน", "transferred", "เงินออก")

    def get_bank_name(self) -> str:
        return "TTB"

    def handled_types(self):
        return (BankType.TTB, BankType.TTB_READ, BankType.TTB_NOTIFY)

    def extract(self, message: str, received_at: ReceivedAt, errors: ErrorAccumulator) -> Extracted:
        self.reject_markers(message, self.WITHDRAWAL_MARKERS)
        text = message.strip()

        short = CompiledPatterns.TTB.SHORT_DATE_TIME.match(text)
        if short:
            return self._extract_short(text, short, received_at, errors)
        legacy = CompiledPatterns.TTB.LEGACY_DATE_TIME.search(text)
        if legacy:
            return self._extract_legacy(text, legacy, received_at, errors)
        raise self.malformed(self.tokenize(text), "a 'DD-MM@HH:MM' or 'DD/MM/YY@HH:MM' segment")

    def _extract_short(self, text, date_match, received_at, errors) -> Extracted:
        m = CompiledPatterns.TTB.SHORT_AMOUNT.search(text)
        if not m:
            raise NonDepositMessage("TTB: no 'เงินเข้า' amount in message")
        amount = self.parse_amount(m.group(1))
        day, month, hour, minute = (int(g) for g in date_match.groups())
        occurred_at = self.resolve_time(
            lambda: self.day_month_time(day, month, hour, minute, received_at), received_at, errors,
        )
        balance = self.balance_from_pattern(CompiledPatterns.TTB.BALANCE, text, errors)
        return Extracted(amount, occurred_at, balance)

    def _extract_legacy(self, text, date_match, received_at, errors) -> Extracted:
        m = CompiledPatterns.TTB.LEGACY_AMOUNT.search(text)
        if m:
            amount = self.parse_amount(m.group(1))
        else:
            tokens = self.tokenize(text)
            if len(tokens) < 3:
                raise self.malformed(tokens, ">= 3")
            amount = self.parse_amount(tokens[2])
        day, month, year, hour, minute = (int(g) for g in date_match.groups())
        occurred_at = self.resolve_time(
            lambda: combine(two_digit_gregorian(year), month, day, hour, minute, tz=self.tz),
            received_at, errors,
        )
        balance = self.balance_from_pattern(CompiledPatterns.TTB.BALANCE, text, errors)
        return Extracted(amount, occurred_at, balance)

