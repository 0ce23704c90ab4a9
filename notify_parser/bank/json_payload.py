"""
Relay channels forward statement lines as a JSON object inside the text
envelope. The detector pulls that object out; field mapping turns it into a
PayloadFields value so the numeric and calendar rules stay shared with the
free-text extractors.
"""
import json
from abc import abstractmethod
from datetime import datetime
from typing import Any, NamedTuple, Sequence

from ..calendar_converter import ReceivedAt
from ..compiled_patterns import CompiledPatterns
from ..error_accumulator import ErrorAccumulator
from ..extraction_error import MalformedMessage, UnparseableTime
from ..numeric_normalizer import amount_from_json
from ..transaction_record import Extracted
from .base_thailand_bank_extractor import BaseThailandBankExtractor


class PayloadFields(NamedTuple):
    time: Any
    amount: Any
    balance: Any = None


def decode_payload(message: str) -> dict:
    """Returns the JSON object carried by the message, which may be wrapped in other text."""
    text = message.strip()
    if not text.startswith("{"):
        m = CompiledPatterns.Payload.JSON_OBJECT.search(text)
        if not m:
            raise MalformedMessage("no JSON object in payload")
        text = m.group(0)
    try:
        obj = json.loads(text)
    except ValueError as e:
        raise MalformedMessage(f"invalid JSON payload: {e}")
    if not isinstance(obj, dict):
        raise MalformedMessage("JSON payload is not an object")
    return obj


def first_present(obj: dict, keys: Sequence[str]) -> Any:
    for key in keys:
        value = obj.get(key)
        if value is not None and value != "":
            return value
    return None


def map_fields(obj: dict, time_keys: Sequence[str], amount_keys: Sequence[str],
               balance_keys: Sequence[str] = ()) -> PayloadFields:
    amount = first_present(obj, amount_keys)
    if amount is None:
        raise MalformedMessage(f"JSON payload has none of the amount fields {list(amount_keys)}")
    return PayloadFields(
        time=first_present(obj, time_keys),
        amount=amount,
        balance=first_present(obj, balance_keys),
    )


class JsonPayloadExtractor(BaseThailandBankExtractor):
    """
    Extractor for JSON statement payloads. Subclasses name the fields and
    parse the time value; the statement time is mandatory.
    """

    STRICT_TIME = True
    TIME_KEYS: Sequence[str] = ("msg_time",)
    AMOUNT_KEYS: Sequence[str] = ("coin", "amount")
    BALANCE_KEYS: Sequence[str] = ("balance",)

    @abstractmethod
    def parse_time(self, value: Any, received_at: ReceivedAt) -> datetime:
        ...

    def extract(self, message: str, received_at: ReceivedAt, errors: ErrorAccumulator) -> Extracted:
        fields = map_fields(decode_payload(message), self.TIME_KEYS, self.AMOUNT_KEYS, self.BALANCE_KEYS)
        amount = self.reject_negative(amount_from_json(fields.amount))
        if fields.time is None:
            raise UnparseableTime(f"{self.get_bank_name()}: JSON payload has no time field")
        occurred_at = self.resolve_time(lambda: self.parse_time(fields.time, received_at), received_at, errors)
        balance = None
        if fields.balance is not None:
            balance = self.parse_balance(str(fields.balance), errors)
        return Extracted(amount, occurred_at, balance)

    def time_text(self, value: Any) -> str:
        if not isinstance(value, str):
            raise UnparseableTime(f"{self.get_bank_name()}: time field is not text: {value!r}")
        return value.strip()
