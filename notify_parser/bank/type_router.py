import logging
from typing import List, Optional

from ..bank_type import BankType
from ..calendar_converter import ReceivedAt
from ..error_accumulator import ErrorAccumulator
from ..extraction_error import ExtractionError, MalformedMessage, UnsupportedBankType
from ..template_engine import TemplateEngine
from ..transaction_record import ExtractionResult, TransactionRecord
from .bank_extractor_registry import BankExtractorRegistry

logger = logging.getLogger(__name__)


class TypeRouter:
    """
    Entry point of the engine: picks the extractor (or template config) for a
    type tag and turns its outcome into an ExtractionResult.
    """

    def __init__(self, registry: Optional[BankExtractorRegistry] = None):
        self.registry = registry or BankExtractorRegistry.default()
        self.template_engine = TemplateEngine(self.registry.tz)

    @classmethod
    def default(cls) -> "TypeRouter":
        return cls(BankExtractorRegistry.default())

    def supported_types(self) -> List[str]:
        return self.registry.supported_types()

    def dispatch(self, bank_type: str, raw_message: str, received_at: ReceivedAt = None) -> ExtractionResult:
        """
        Extracts one message. Expected failures come back as `result.error`;
        anything that is not an ExtractionError propagates.
        """
        errors = ErrorAccumulator()
        try:
            record = self._route(bank_type, raw_message, received_at, errors)
        except ExtractionError as e:
            if e.bank_type is None:
                e.bank_type = bank_type
            if e not in errors:
                errors.add_error(e)
            logger.debug("extraction failed for %s: %s", bank_type, e)
            return ExtractionResult(record=None, error=e, errors=errors)
        if errors.has_error():
            logger.debug("extracted %s with tolerated errors: %s", bank_type, errors.get_error_msg())
        return ExtractionResult(record=record, errors=errors)

    def extract(self, bank_type: str, raw_message: str, received_at: ReceivedAt = None) -> TransactionRecord:
        return self.dispatch(bank_type, raw_message, received_at).unwrap()

    def _route(self, bank_type: str, raw_message: str, received_at: ReceivedAt,
               errors: ErrorAccumulator) -> TransactionRecord:
        if not isinstance(raw_message, str):
            raise MalformedMessage(f"message must be text, got {type(raw_message).__name__}")
        known = BankType.from_tag(bank_type)
        extractor = self.registry.extractor_for(known) if known else None
        if extractor is not None:
            extracted = extractor.extract(raw_message, received_at, errors)
            return TransactionRecord.from_extracted(extracted, bank_type, raw_message)

        config = self.registry.template_for(bank_type)
        if config is not None:
            return self.template_engine.extract(config, raw_message, received_at, errors)

        logger.debug("no extractor or template for bank type %r", bank_type)
        raise UnsupportedBankType(bank_type)
