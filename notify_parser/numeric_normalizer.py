from decimal import Decimal, InvalidOperation
from typing import Optional

from .compiled_patterns import CompiledPatterns
from .extraction_error import UnparseableAmount


def strip_currency(token: str) -> str:
    """Removes thousands separators, whitespace and currency glyphs from an amount token."""
    cleaned = token.replace(",", "")
    cleaned = CompiledPatterns.Amount.CURRENCY_GLYPHS.sub("", cleaned)
    return CompiledPatterns.Amount.WHITESPACE.sub("", cleaned)


def parse_amount(token: Optional[str]) -> Decimal:
    """
    Parses an amount token such as "1,042.00", "499.95บ" or "฿ 1,234.50".
    The value is kept exactly as written; nothing is rounded or truncated.
    """
    if token is None:
        raise UnparseableAmount("amount is missing")
    cleaned = strip_currency(token)
    if not CompiledPatterns.Amount.PLAIN_DECIMAL.match(cleaned):
        raise UnparseableAmount(f"cannot parse amount from {token!r}")
    try:
        return Decimal(cleaned)
    except InvalidOperation:
        raise UnparseableAmount(f"cannot parse amount from {token!r}")


def try_parse_amount(token: Optional[str]) -> Optional[Decimal]:
    try:
        return parse_amount(token)
    except UnparseableAmount:
        return None


def amount_from_json(value) -> Decimal:
    """JSON payloads carry amounts as strings or numbers; floats go through repr() to avoid binary noise."""
    if isinstance(value, bool):
        raise UnparseableAmount(f"cannot parse amount from {value!r}")
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        amount = Decimal(repr(value))
        if not amount.is_finite():
            raise UnparseableAmount(f"cannot parse amount from {value!r}")
        return amount
    if isinstance(value, str):
        return parse_amount(value)
    raise UnparseableAmount(f"cannot parse amount from {value!r}")
