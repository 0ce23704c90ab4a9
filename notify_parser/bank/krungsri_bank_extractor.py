from functools import partial

from ..bank_type import BankType
from ..calendar_converter import ReceivedAt, combine, two_digit_gregorian
from ..compiled_patterns import CompiledPatterns
from ..error_accumulator import ErrorAccumulator
from ..extraction_error import NonDepositMessage
from ..transaction_record import Extracted
from .base_thailand_bank_extractor import BaseThailandBankExtractor


class KrungsriBankExtractor(BaseThailandBankExtractor):
    """
    Krungsri (Bank of Ayudhya, BAY) SMS. Only messages starting with
    "โอนเข้า" are deposits. Amount at 3, "(DD/MM/YY,HH:MM)" anywhere in the
    text (Gregorian two-digit year), balance at 13.
    """

    def get_bank_name(self) -> str:
        return "Krungsri"

    def handled_types(self):
        return (BankType.BAY,)

    def extract(self, message: str, received_at: ReceivedAt, errors: ErrorAccumulator) -> Extracted:
        tokens = self.tokenize(message)
        if not tokens or tokens[0] != "โอนเข้า":
            raise NonDepositMessage("Krungsri: message does not start with 'โอนเข้า'")
        if len(tokens) <= 6:
            raise self.malformed(tokens, "> 6")
        amount = self.parse_amount(tokens[3])

        parse_embedded = None
        m = CompiledPatterns.BAY.DATE_TIME.search(message)
        if m:
            day, month, year, hour, minute = (int(g) for g in m.groups())
            parse_embedded = partial(combine, two_digit_gregorian(year), month, day, hour, minute, tz=self.tz)
        occurred_at = self.resolve_time(parse_embedded, received_at, errors)

        balance = self.balance_at(tokens, 13, errors)
        return Extracted(amount, occurred_at, balance)
