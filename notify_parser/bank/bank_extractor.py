from abc import ABC, abstractmethod
from datetime import datetime, tzinfo
from decimal import Decimal
from typing import Callable, Iterable, List, Optional, Tuple

from ..bank_type import BankType
from ..calendar_converter import ReceivedAt, combine, infer_year, normalize_received_at
from ..constants import Constants
from ..error_accumulator import ErrorAccumulator
from ..extraction_error import MalformedMessage, NonDepositMessage, UnparseableTime
from ..numeric_normalizer import parse_amount, try_parse_amount
from ..transaction_record import Extracted


class BankExtractor(ABC):
    """
    Base class for bank/message-type specific extractors.
    Each subclass handles one message grammar, which may be shared by several
    type tags, and implements `extract`. Instances hold no per-call state and
    can be shared between threads.
    """

    # When True an embedded time that fails to parse is a hard error instead
    # of falling back to the received time.
    STRICT_TIME = False

    def __init__(self, tz: Optional[tzinfo] = None):
        self.tz = tz or Constants.Time.DEFAULT_TZ

    @abstractmethod
    def get_bank_name(self) -> str:
        """Returns the name of the bank this extractor handles."""
        ...

    @abstractmethod
    def handled_types(self) -> Tuple[BankType, ...]:
        """Returns every type tag routed to this extractor."""
        ...

    @abstractmethod
    def extract(self, message: str, received_at: ReceivedAt, errors: ErrorAccumulator) -> Extracted:
        """
        Extracts amount, time and balance from one message.
        Raises an ExtractionError for blocking failures; records tolerated ones in `errors`.
        """
        ...

    def can_handle(self, bank_type: BankType) -> bool:
        return bank_type in self.handled_types()

    # -------------------------------------------------------------------------
    # tokens and layouts
    # -------------------------------------------------------------------------
    def tokenize(self, message: str) -> List[str]:
        return message.split()

    def malformed(self, tokens: List[str], expected: str) -> MalformedMessage:
        return MalformedMessage(
            f"{self.get_bank_name()}: {len(tokens)} tokens match no known layout (expected {expected})"
        )

    # -------------------------------------------------------------------------
    # direction filtering
    # -------------------------------------------------------------------------
    def reject_markers(self, message: str, markers: Iterable[str]) -> None:
        for marker in markers:
            if marker in message:
                raise NonDepositMessage(f"{self.get_bank_name()}: message contains {marker!r}")

    def require_marker(self, message: str, markers: Iterable[str]) -> None:
        markers = tuple(markers)
        if not any(marker in message for marker in markers):
            raise NonDepositMessage(
                f"{self.get_bank_name()}: no deposit marker ({' / '.join(markers)}) in message"
            )

    # -------------------------------------------------------------------------
    # amounts
    # -------------------------------------------------------------------------
    def parse_amount(self, token: Optional[str]) -> Decimal:
        """Parses a deposit amount; a signed negative value is outgoing money."""
        return self.reject_negative(parse_amount(token))

    def reject_negative(self, amount: Decimal) -> Decimal:
        if amount < 0:
            raise NonDepositMessage(f"{self.get_bank_name()}: negative amount {amount}")
        return amount

    def parse_balance(self, token: Optional[str], errors: ErrorAccumulator) -> Optional[Decimal]:
        if token is None:
            return None
        balance = try_parse_amount(token)
        if balance is None:
            errors.add_error(f"{self.get_bank_name()}: ignored unparseable balance {token!r}")
        return balance

    # -------------------------------------------------------------------------
    # time
    # -------------------------------------------------------------------------
    def received(self, received_at: ReceivedAt) -> datetime:
        return normalize_received_at(received_at, self.tz)

    def resolve_time(self, parse_embedded: Optional[Callable[[], datetime]],
                     received_at: ReceivedAt, errors: ErrorAccumulator) -> datetime:
        """Embedded time when it parses, otherwise the received time."""
        if parse_embedded is None:
            return self.received(received_at)
        try:
            return parse_embedded()
        except UnparseableTime as e:
            if self.STRICT_TIME:
                raise
            errors.add_error(e)
            return self.received(received_at)

    def day_month_time(self, day: int, month: int, hour: int, minute: int,
                       received_at: ReceivedAt, second: int = 0) -> datetime:
        """Builds a timestamp for a notification that omits the year."""
        if month < 1 or month > 12:
            raise UnparseableTime(f"{self.get_bank_name()}: invalid month {month}")
        year = infer_year(month, day, self.received(received_at))
        return combine(year, month, day, hour, minute, second, self.tz)
