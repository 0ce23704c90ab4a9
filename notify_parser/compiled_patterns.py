import re


class CompiledPatterns:
    class Amount:
        # Longest glyphs first so "บาท" is not left as "าท" after removing "บ".
        CURRENCY_GLYPHS = re.compile(r"บาท|บ\.|บ|฿|THB|Rp", re.IGNORECASE)
        WHITESPACE = re.compile(r"\s+")
        PLAIN_DECIMAL = re.compile(r"^[+-]?\d+(?:\.\d+)?$")
        DECIMAL_IN_TOKEN = re.compile(r"(\d+\.\d+)")

    class Time:
        DAY_MONTH_AT_CLOCK = re.compile(r"^(\d{1,2})[-/](\d{1,2})@(\d{1,2}):(\d{2})$")
        DAY_MONTH_YEAR = re.compile(r"^(\d{1,2})[-/](\d{1,2})(?:[-/](\d{2}|\d{4}))?$")
        CLOCK = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?$")

    class Payload:
        JSON_OBJECT = re.compile(r"\{.*\}", re.DOTALL)

    class TTB:
        LEGACY_AMOUNT = re.compile(r"(\d{1,3}(?:,\d{3})*\.\d{2})(?=บ\.)")
        LEGACY_DATE_TIME = re.compile(r"(\d{2})/(\d{2})/(\d{2})@(\d{2}):(\d{2})")
        SHORT_DATE_TIME = re.compile(r"^(\d{2})-(\d{2})@(\d{2}):(\d{2})")
        SHORT_AMOUNT = re.compile(r"เงินเข้า\s*([\d,]+\.\d{2})\s*บ")
        BALANCE = re.compile(r"(?:เหลือ|ใช้ได้)\s*([\d,]+\.\d{2})\s*บ")

    class BBL:
        MB_AMOUNT = re.compile(r"MB\s+([\d,]+(?:\.\d{2})?)\s*บ")

    class GSB:
        DATE_TIME = re.compile(r"วันที่\s+(\d{1,2})\s+(\S+)\s+(\d{2,4})\s+เวลา\s+(\d{1,2}):(\d{2})\s*น")
        BALANCE = re.compile(r"คงเหลือ\s*([\d,]+\.\d{2})")

    class BAY:
        DATE_TIME = re.compile(r"\((\d{2})/(\d{2})/(\d{2}),(\d{2}):(\d{2})\)")
