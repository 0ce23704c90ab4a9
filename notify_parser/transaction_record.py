from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import NamedTuple, Optional

from .error_accumulator import ErrorAccumulator
from .extraction_error import ExtractionError


class Extracted(NamedTuple):
    """Fields a bank extractor recovers before the router stamps tag and raw text."""
    amount: Decimal
    occurred_at: datetime
    balance: Optional[Decimal] = None


@dataclass(frozen=True)
class TransactionRecord:
    amount: Decimal
    occurred_at: datetime
    bank_type: str
    raw_message: str
    balance: Optional[Decimal] = None

    @classmethod
    def from_extracted(cls, extracted: Extracted, bank_type: str, raw_message: str) -> "TransactionRecord":
        return cls(
            amount=extracted.amount,
            occurred_at=extracted.occurred_at,
            bank_type=bank_type,
            raw_message=raw_message,
            balance=extracted.balance,
        )

    @property
    def is_deposit(self) -> bool:
        return self.amount > 0

    def to_dict(self) -> dict:
        return {
            "amount": str(self.amount),
            "occurred_at": self.occurred_at.isoformat(),
            "balance": str(self.balance) if self.balance is not None else None,
            "bank_type": self.bank_type,
            "raw_message": self.raw_message,
        }


@dataclass(frozen=True)
class ExtractionResult:
    record: Optional[TransactionRecord]
    error: Optional[ExtractionError] = None
    errors: ErrorAccumulator = field(default_factory=ErrorAccumulator, compare=False)

    @property
    def ok(self) -> bool:
        return self.record is not None and self.error is None

    def unwrap(self) -> TransactionRecord:
        if self.error is not None:
            raise self.error
        return self.record
