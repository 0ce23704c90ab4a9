from .bank.bank_extractor_registry import BankExtractorRegistry
from .bank.type_router import TypeRouter
from .bank_type import BankType
from .compiled_patterns import CompiledPatterns
from .constants import Constants
from .error_accumulator import ErrorAccumulator
from .extraction_error import (
    ErrorKind,
    ExtractionError,
    MalformedMessage,
    NonDepositMessage,
    UnparseableAmount,
    UnparseableTime,
    UnsupportedBankType,
)
from .template_engine import ExtractorConfig, TemplateEngine
from .transaction_record import ExtractionResult, TransactionRecord

__all__ = [
    "BankExtractorRegistry",
    "BankType",
    "CompiledPatterns",
    "Constants",
    "ErrorAccumulator",
    "ErrorKind",
    "ExtractionError",
    "ExtractionResult",
    "ExtractorConfig",
    "MalformedMessage",
    "NonDepositMessage",
    "TemplateEngine",
    "TransactionRecord",
    "TypeRouter",
    "UnparseableAmount",
    "UnparseableTime",
    "UnsupportedBankType",
]
