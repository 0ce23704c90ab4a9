from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    UNSUPPORTED_BANK_TYPE = "UNSUPPORTED_BANK_TYPE"
    NON_DEPOSIT_MESSAGE = "NON_DEPOSIT_MESSAGE"
    MALFORMED_MESSAGE = "MALFORMED_MESSAGE"
    UNPARSEABLE_AMOUNT = "UNPARSEABLE_AMOUNT"
    UNPARSEABLE_TIME = "UNPARSEABLE_TIME"


class ExtractionError(Exception):
    """
    Base class for every blocking extraction failure.
    Extractors raise these; the router hands them back to the caller as data.
    """

    kind: ErrorKind = ErrorKind.MALFORMED_MESSAGE

    def __init__(self, message: str, bank_type: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.bank_type = bank_type

    def __str__(self) -> str:
        if self.bank_type:
            return f"[{self.bank_type}] {self.message}"
        return self.message


class UnsupportedBankType(ExtractionError):
    kind = ErrorKind.UNSUPPORTED_BANK_TYPE

    def __init__(self, bank_type: str):
        super().__init__(f"unsupported bank type: {bank_type}", bank_type)


class NonDepositMessage(ExtractionError):
    """Withdrawal, outgoing transfer, OTP or other non-financial notice."""

    kind = ErrorKind.NON_DEPOSIT_MESSAGE


class MalformedMessage(ExtractionError):
    kind = ErrorKind.MALFORMED_MESSAGE


class UnparseableAmount(ExtractionError):
    kind = ErrorKind.UNPARSEABLE_AMOUNT


class UnparseableTime(ExtractionError):
    kind = ErrorKind.UNPARSEABLE_TIME
