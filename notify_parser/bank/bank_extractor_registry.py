from datetime import tzinfo
from typing import Dict, Iterable, List, Mapping, Optional

from ..bank_type import BankType
from ..template_banks import TEMPLATE_BANKS
from ..template_engine import ExtractorConfig
from .bangkok_bank_extractor import BangkokBankExtractor, BangkokBankWaterExtractor
from .baac_bank_extractor import BAACBankExtractor
from .bank_extractor import BankExtractor
from .gsb_bank_extractor import GSBBankExtractor
from .kasikorn_bank_extractor import KasikornNotifyExtractor, KasikornReadExtractor, KasikornWaterExtractor
from .krungsri_bank_extractor import KrungsriBankExtractor
from .ktb_bank_extractor import KTBBankExtractor, KTBLineExtractor, KTBNoticeExtractor, KTBWaterExtractor
from .relay_extractor import GHRelayExtractor, KKRLSCLIExtractor, ProtocolWaterExtractor
from .scb_bank_extractor import SCBBankExtractor, SCBNotifyExtractor, SCBWaterExtractor
from .truemoney_extractor import SwooleTrueMoneyExtractor, TrueMoneyWaterExtractor
from .ttb_bank_extractor import TTBBankExtractor

EXTRACTOR_CLASSES = (
    SCBBankExtractor,
    SCBNotifyExtractor,
    SCBWaterExtractor,
    KTBBankExtractor,
    KTBLineExtractor,
    KTBNoticeExtractor,
    KTBWaterExtractor,
    KasikornNotifyExtractor,
    KasikornReadExtractor,
    KasikornWaterExtractor,
    BangkokBankExtractor,
    BangkokBankWaterExtractor,
    BAACBankExtractor,
    TTBBankExtractor,
    GSBBankExtractor,
    KrungsriBankExtractor,
    TrueMoneyWaterExtractor,
    SwooleTrueMoneyExtractor,
    KKRLSCLIExtractor,
    GHRelayExtractor,
    ProtocolWaterExtractor,
)


class BankExtractorRegistry:
    """
    Dispatch table from type tag to extractor, plus the template-bank configs.
    Built once and never mutated afterwards.
    """

    def __init__(self, extractors: Iterable[BankExtractor],
                 templates: Optional[Iterable[ExtractorConfig]] = None, tz: Optional[tzinfo] = None):
        self.tz = tz
        table: Dict[BankType, BankExtractor] = {}
        for extractor in extractors:
            for bank_type in extractor.handled_types():
                if bank_type in table:
                    raise ValueError(
                        f"{bank_type.value} is handled by both {table[bank_type].get_bank_name()} "
                        f"and {extractor.get_bank_name()}"
                    )
                table[bank_type] = extractor
        self._extractors = table
        self._templates: Dict[str, ExtractorConfig] = {c.bank_type: c for c in templates or ()}

    @classmethod
    def default(cls, tz: Optional[tzinfo] = None) -> "BankExtractorRegistry":
        return cls.from_mapping(TEMPLATE_BANKS, tz)

    @classmethod
    def from_mapping(cls, templates: Mapping[str, dict], tz: Optional[tzinfo] = None) -> "BankExtractorRegistry":
        """Registry with every built-in extractor and the given template-bank table."""
        return cls(
            [extractor_class(tz) for extractor_class in EXTRACTOR_CLASSES],
            [ExtractorConfig.from_dict(tag, entry) for tag, entry in templates.items()],
            tz,
        )

    def extractor_for(self, bank_type: BankType) -> Optional[BankExtractor]:
        return self._extractors.get(bank_type)

    def template_for(self, tag: str) -> Optional[ExtractorConfig]:
        return self._templates.get(tag)

    def supported_types(self) -> List[str]:
        return [bank_type.value for bank_type in self._extractors] + list(self._templates)

    def all(self) -> List[BankExtractor]:
        """Distinct extractors, in registration order."""
        seen = []
        for extractor in self._extractors.values():
            if extractor not in seen:
                seen.append(extractor)
        return seen
