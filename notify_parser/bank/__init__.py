# Core / base
from .bank_extractor import BankExtractor
from .base_thailand_bank_extractor import BaseThailandBankExtractor
from .json_payload import JsonPayloadExtractor
from .bank_extractor_registry import BankExtractorRegistry
from .type_router import TypeRouter

# Individual bank extractors, alphabetical order
from .baac_bank_extractor import BAACBankExtractor
from .bangkok_bank_extractor import BangkokBankExtractor, BangkokBankWaterExtractor
from .gsb_bank_extractor import GSBBankExtractor
from .kasikorn_bank_extractor import KasikornNotifyExtractor, KasikornReadExtractor, KasikornWaterExtractor
from .krungsri_bank_extractor import KrungsriBankExtractor
from .ktb_bank_extractor import KTBBankExtractor, KTBLineExtractor, KTBNoticeExtractor, KTBWaterExtractor
from .relay_extractor import GHRelayExtractor, KKRLSCLIExtractor, ProtocolWaterExtractor
from .scb_bank_extractor import SCBBankExtractor, SCBNotifyExtractor, SCBWaterExtractor
from .truemoney_extractor import SwooleTrueMoneyExtractor, TrueMoneyWaterExtractor
from .ttb_bank_extractor import TTBBankExtractor

__all__ = [
    "BankExtractor",
    "BaseThailandBankExtractor",
    "JsonPayloadExtractor",
    "BankExtractorRegistry",
    "TypeRouter",
    "BAACBankExtractor",
    "BangkokBankExtractor",
    "BangkokBankWaterExtractor",
    "GSBBankExtractor",
    "KasikornNotifyExtractor",
    "KasikornReadExtractor",
    "KasikornWaterExtractor",
    "KrungsriBankExtractor",
    "KTBBankExtractor",
    "KTBLineExtractor",
    "KTBNoticeExtractor",
    "KTBWaterExtractor",
    "GHRelayExtractor",
    "KKRLSCLIExtractor",
    "ProtocolWaterExtractor",
    "SCBBankExtractor",
    "SCBNotifyExtractor",
    "SCBWaterExtractor",
    "SwooleTrueMoneyExtractor",
    "TrueMoneyWaterExtractor",
    "TTBBankExtractor",
]
