from enum import Enum
from typing import Optional


class BankType(Enum):
    """
    Message type tags as they arrive on the wire.
    Read (读取) and notify (通知) variants are separate tags even when they
    share a grammar; water (流水) tags carry JSON statement lines.
    """
    SCB = "SCB"
    SCB_READ = "SCB读取"
    SCB_NOTIFY = "SCB通知"
    SCB_WATER = "SCB流水"

    KTB = "KTB"
    KTB_LINE = "KTBLine"
    KTB_NOTICE = "KTB通知"
    KTB_WATER = "KTB流水"

    KBANK_NOTIFY = "KBANK通知"
    KBANK_READ = "KBANK读取"
    KBANK_WATER = "KBANK流水"

    BBL = "BBL"
    BBL_WATER = "BBL流水"

    BAAC = "BAAC"

    TTB = "TTB"
    TTB_READ = "TTB读取"
    TTB_NOTIFY = "TTB通知"

    GSB = "GSB"
    GSB_READ = "GSB读取"
    GSB_NOTIFY = "GSB通知"
    GSB_LINE = "GSBLine"

    BAY = "BAY"

    TM_WATER = "TM流水"
    TM_IOS_WATER = "TM流水ios"
    SWOOLE_TM = "SwooleTM"

    KKRLSCLI = "KKRLSCLI"

    SCB_GH = "python-SCBGH"
    KTB_GH = "python-KTBGH"
    KBANK_GH = "python-Kbankgh"
    TTB_GH = "python-Ttbgh"
    BAY_GH = "python-BAYGH"

    TM_PROTOCOL_WATER = "tm_protocol_water"
    SCB_PROTOCOL_WATER = "scb_protocol_water"
    TTB_PROTOCOL_WATER = "ttb_protocol_water"

    @classmethod
    def from_tag(cls, tag: str) -> Optional["BankType"]:
        try:
            return cls(tag.strip())
        except (ValueError, AttributeError):
            return None
