"""
Layout and direction-filtering tests for the individual bank extractors.
"""

import json
import unittest
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from notify_parser.bank import (
    BAACBankExtractor,
    BangkokBankExtractor,
    BangkokBankWaterExtractor,
    GHRelayExtractor,
    GSBBankExtractor,
    KasikornNotifyExtractor,
    KasikornReadExtractor,
    KKRLSCLIExtractor,
    KrungsriBankExtractor,
    KTBBankExtractor,
    KTBLineExtractor,
    SCBBankExtractor,
    SCBNotifyExtractor,
    SwooleTrueMoneyExtractor,
    TTBBankExtractor,
)
from notify_parser.bank.json_payload import decode_payload, map_fields
from notify_parser.error_accumulator import ErrorAccumulator
from notify_parser.extraction_error import (
    MalformedMessage,
    NonDepositMessage,
    UnparseableAmount,
    UnparseableTime,
)

TZ = timezone(timedelta(hours=7))
RECEIVED_AT = datetime(2025, 5, 28, 9, 0, tzinfo=TZ)


class ExtractorTestCase(unittest.TestCase):
    extractor_class = None

    def setUp(self):
        self.extractor = self.extractor_class(TZ)
        self.errors = ErrorAccumulator()

    def extract(self, message, received_at=RECEIVED_AT):
        return self.extractor.extract(message, received_at, self.errors)


class TestSCBBankExtractor(ExtractorTestCase):
    extractor_class = SCBBankExtractor

    def test_cash_transfer_layout(self):
        extracted = self.extract("Cash/transfer deposit to x1234 3,000.00 avail 12,000.00")
        self.assertEqual(extracted.amount, Decimal("3000.00"))
        self.assertEqual(extracted.occurred_at, RECEIVED_AT)
        self.assertEqual(extracted.balance, Decimal("12000.00"))

    def test_other_head_uses_second_token(self):
        extracted = self.extract("รับ 450.00 จาก x5678")
        self.assertEqual(extracted.amount, Decimal("450.00"))

    def test_withdrawal_markers(self):
        for message in ("ถอน 1,000.00บ จากx1234", "โอนเงิน 200.00 ไป x5678", "เติมเงิน True Money 100.00"):
            with self.subTest(message=message):
                with self.assertRaises(NonDepositMessage):
                    self.extract(message)

    def test_single_token_is_malformed(self):
        with self.assertRaises(MalformedMessage):
            self.extract("เงิน")

    def test_amount_without_trailing_tokens_has_no_balance(self):
        extracted = self.extract("เงิน 1,500.00บ")
        self.assertIsNone(extracted.balance)
        self.assertEqual(extracted.occurred_at, RECEIVED_AT)

    def test_transfer_without_time_token(self):
        extracted = self.extract("Transfer from x5678 to x1234 2,500.00 THB")
        self.assertEqual(extracted.amount, Decimal("2500.00"))
        self.assertEqual(extracted.occurred_at, RECEIVED_AT)
        self.assertIsNone(extracted.balance)


class TestKasikornNotifyExtractor(ExtractorTestCase):
    extractor_class = KasikornNotifyExtractor

    def test_fifteen_token_layout_reads_clock_at_fourteen(self):
        message = "เงินเข้า บัญชี x1234 จำนวน 1,000.00 บาท จาก PromptPay 19 พ.ค. 68 วันจันทร์ เวลา ประมาณ 14:30"
        extracted = self.extract(message)
        self.assertEqual(extracted.amount, Decimal("1000.00"))
        self.assertEqual(extracted.occurred_at, datetime(2025, 5, 19, 14, 30, tzinfo=TZ))


class TestSCBNotifyExtractor(ExtractorTestCase):
    extractor_class = SCBNotifyExtractor

    def test_wrong_token_count(self):
        with self.assertRaises(MalformedMessage):
            self.extract("มีเงิน 2,000.00 บาท โอนเข้าบัญชี")

    def test_year_rolls_back_in_january(self):
        message = "มีเงิน 2,000.00 บาท โอนเข้าบัญชี x123456 จาก นาย ทดสอบ ระบบ วันที่ 31 ธ.ค. เวลา ประมาณ 23:50"
        extracted = self.extract(message, datetime(2026, 1, 1, 0, 5, tzinfo=TZ))
        self.assertEqual(extracted.occurred_at, datetime(2025, 12, 31, 23, 50, tzinfo=TZ))


class TestKTBExtractors(unittest.TestCase):

    def setUp(self):
        self.errors = ErrorAccumulator()

    def test_dated_first_layout(self):
        extracted = KTBBankExtractor(TZ).extract(
            "19-05@14:30 บช.x1234 +1,000.00 ใช้ได้ 9,000.00", RECEIVED_AT, self.errors
        )
        self.assertEqual(extracted.amount, Decimal("1000.00"))
        self.assertEqual(extracted.occurred_at, datetime(2025, 5, 19, 14, 30, tzinfo=TZ))
        self.assertEqual(extracted.balance, Decimal("9000.00"))

    def test_default_layout_with_embedded_date(self):
        extracted = KTBBankExtractor(TZ).extract(
            "บช x1234 รับโอน 19-05@14:30 จำนวน 1,500.00บ คงเหลือ 9,500.00บ", RECEIVED_AT, self.errors
        )
        self.assertEqual(extracted.amount, Decimal("1500.00"))
        self.assertEqual(extracted.occurred_at, datetime(2025, 5, 19, 14, 30, tzinfo=TZ))
        self.assertEqual(extracted.balance, Decimal("9500.00"))

    def test_negative_amount_is_not_a_deposit(self):
        with self.assertRaises(NonDepositMessage):
            KTBBankExtractor(TZ).extract("19-05@14:30 บช.x1234 -1,000.00 ใช้ได้ 9,000.00", RECEIVED_AT, self.errors)

    def test_otp_and_withdraw_are_rejected(self):
        extractor = KTBBankExtractor(TZ)
        for message in ("รหัส OTP 123456 สำหรับทำรายการ", "Withdraw A/C x1234 19-05@14:30 THB500.00 Bal THB1.00"):
            with self.subTest(message=message):
                with self.assertRaises(NonDepositMessage):
                    extractor.extract(message, RECEIVED_AT, self.errors)

    def test_short_message_is_malformed(self):
        with self.assertRaises(MalformedMessage):
            KTBBankExtractor(TZ).extract("บช x1234 500.00", RECEIVED_AT, self.errors)

    def test_line_notice_requires_deposit_marker(self):
        with self.assertRaises(NonDepositMessage):
            KTBLineExtractor(TZ).extract("เงินออก 3,000.00 บาท", RECEIVED_AT, self.errors)

    def test_short_line_notice_uses_received_time(self):
        extracted = KTBLineExtractor(TZ).extract("เงินเข้า 3,000.00 บาท", RECEIVED_AT, self.errors)
        self.assertEqual(extracted.amount, Decimal("3000.00"))
        self.assertEqual(extracted.occurred_at, RECEIVED_AT)
        self.assertIsNone(extracted.balance)


class TestKasikornReadExtractor(ExtractorTestCase):
    extractor_class = KasikornReadExtractor

    def test_prefix_is_removed(self):
        extracted = self.extract("KBank: 19/05 14:30 บช X-1234 เงินเข้า 1,200.00 คงเหลือ 8,800.00 บ")
        self.assertEqual(extracted.amount, Decimal("1200.00"))

    def test_ten_token_layout(self):
        extracted = self.extract("19/05 14:30 บช X-1234 รับโอนจาก X-5678 1,000.00 คงเหลือ 9,000.00 บ")
        self.assertEqual(extracted.amount, Decimal("1000.00"))
        self.assertEqual(extracted.balance, Decimal("9000.00"))

    def test_short_layout_with_buddhist_year(self):
        extracted = self.extract("19/05/68 14:30 X-1234 เงินเข้า500.00บ")
        self.assertEqual(extracted.occurred_at, datetime(2025, 5, 19, 14, 30, tzinfo=TZ))

    def test_six_token_layout(self):
        extracted = self.extract("19/05/68 14:30 X-1234 รับโอน 500.00 บ")
        self.assertEqual(extracted.amount, Decimal("500.00"))
        self.assertEqual(extracted.occurred_at, datetime(2025, 5, 19, 14, 30, tzinfo=TZ))

    def test_fourteen_token_layout(self):
        message = "19/05 14:30 บช X-1234 เงินเข้า 2,000.00 จาก บช X-5678 ธนาคาร กสิกรไทย คงเหลือ 10,000.00 บ"
        extracted = self.extract(message)
        self.assertEqual(extracted.amount, Decimal("2000.00"))
        self.assertEqual(extracted.balance, Decimal("10000.00"))

    def test_signed_amount_is_reported_negative(self):
        extracted = self.extract("19/05/68 14:30 X-1234 -500.00")
        self.assertEqual(extracted.amount, Decimal("-500.00"))

    def test_unknown_shape(self):
        with self.assertRaises(MalformedMessage):
            self.extract("19/05 14:30 บช X-1234 เงินเข้า 1,200.00 บ")


class TestBangkokBankExtractors(unittest.TestCase):

    def setUp(self):
        self.errors = ErrorAccumulator()

    def test_deposit_amount_after_mb(self):
        extracted = BangkokBankExtractor(TZ).extract(
            "Deposit to A/C X0280 via MB 1,200.00บ ใช้ได้37,647.43บ", RECEIVED_AT, self.errors
        )
        self.assertEqual(extracted.amount, Decimal("1200.00"))
        self.assertEqual(extracted.balance, Decimal("37647.43"))

    def test_promptpay_amount_at_eighth_token(self):
        extracted = BangkokBankExtractor(TZ).extract(
            "PromptPay รับเงิน เข้าบ/ชX0280 จาก X1234 ผ่าน MB จำนวน 2,000.00บ ใช้ได้38,447.43บ",
            RECEIVED_AT, self.errors,
        )
        self.assertEqual(extracted.amount, Decimal("2000.00"))
        self.assertEqual(extracted.occurred_at, RECEIVED_AT)
        self.assertEqual(extracted.balance, Decimal("38447.43"))

    def test_deposit_marker_required(self):
        with self.assertRaises(NonDepositMessage):
            BangkokBankExtractor(TZ).extract("ชำระค่าบริการ 100.00บ", RECEIVED_AT, self.errors)

    def test_deposit_without_amount(self):
        with self.assertRaises(UnparseableAmount):
            BangkokBankExtractor(TZ).extract("Deposit to account", RECEIVED_AT, self.errors)

    def test_water_five_part_time(self):
        message = json.dumps({"msg_time": "Mon Sep 08 2025 10:15:30", "coin": "1,000.00"})
        extracted = BangkokBankWaterExtractor(TZ).extract(message, RECEIVED_AT, self.errors)
        self.assertEqual(extracted.occurred_at, datetime(2025, 9, 8, 10, 15, 30, tzinfo=TZ))

    def test_water_unknown_month_fails(self):
        message = json.dumps({"msg_time": "19 Foo 2025 14:30", "coin": "1,000.00"})
        with self.assertRaises(UnparseableTime):
            BangkokBankWaterExtractor(TZ).extract(message, RECEIVED_AT, self.errors)


class TestBAACBankExtractor(ExtractorTestCase):
    extractor_class = BAACBankExtractor

    def test_marker_required(self):
        with self.assertRaises(NonDepositMessage):
            self.extract("19/05/68 14:30 บช X1234 โอนออก จำนวน 700.00 บ")

    def test_too_short(self):
        with self.assertRaises(MalformedMessage):
            self.extract("19/05/68 14:30 รับโอนพร้อมเพย์")


class TestTTBBankExtractor(ExtractorTestCase):
    extractor_class = TTBBankExtractor

    def test_outgoing_markers(self):
        for message in ("27-05@16:25 บชX46746X:เงินออก 100.00บ", "You transferred 100.00 THB"):
            with self.subTest(message=message):
                with self.assertRaises(NonDepositMessage):
                    self.extract(message)

    def test_short_layout_without_incoming_amount(self):
        with self.assertRaises(NonDepositMessage):
            self.extract("27-05@16:25 บชX46746X:ชำระ 100.00บ")

    def test_no_date_segment(self):
        with self.assertRaises(MalformedMessage):
            self.extract("hello there")

    def test_english_legacy_amount_at_third_token(self):
        extracted = self.extract("Deposit of 1,500.00 to X1234 27/05/25@16:25")
        self.assertEqual(extracted.amount, Decimal("1500.00"))
        self.assertEqual(extracted.occurred_at, datetime(2025, 5, 27, 16, 25, tzinfo=TZ))
        self.assertIsNone(extracted.balance)


class TestGSBBankExtractor(ExtractorTestCase):
    extractor_class = GSBBankExtractor

    def test_received_money_layout(self):
        extracted = self.extract("คุณได้รับเงิน 10.00 บาท จาก PromptPay")
        self.assertEqual(extracted.amount, Decimal("10.00"))
        self.assertEqual(extracted.occurred_at, RECEIVED_AT)

    def test_outgoing_is_rejected(self):
        with self.assertRaises(NonDepositMessage):
            self.extract("เงินออก: ถอนเงิน 500.00 บาท")

    def test_otp_is_rejected(self):
        with self.assertRaises(NonDepositMessage):
            self.extract("รหัส OTP ของคุณคือ 123456")

    def test_unknown_layout(self):
        with self.assertRaises(MalformedMessage):
            self.extract("แจ้งเตือน 500.00 บาท")


class TestKrungsriBankExtractor(ExtractorTestCase):
    extractor_class = KrungsriBankExtractor

    def test_only_incoming_transfers(self):
        with self.assertRaises(NonDepositMessage):
            self.extract("โอนออก บ/ช XXX1234 5,000.00 บ.")

    def test_too_short(self):
        with self.assertRaises(MalformedMessage):
            self.extract("โอนเข้า บ/ช XXX1234 5,000.00")

    def test_without_date_uses_received_time(self):
        extracted = self.extract("โอนเข้า บ/ช XXX1234 5,000.00 บ. จาก KBANK")
        self.assertEqual(extracted.occurred_at, RECEIVED_AT)
        self.assertIsNone(extracted.balance)


class TestRelayExtractors(unittest.TestCase):

    def setUp(self):
        self.errors = ErrorAccumulator()

    def test_kkrlscli_time_must_be_a_timestamp(self):
        message = json.dumps({"coin": 300, "time": "2025-05-19 14:30"})
        with self.assertRaises(UnparseableTime):
            KKRLSCLIExtractor(TZ).extract(message, RECEIVED_AT, self.errors)

    def test_json_payload_without_time(self):
        with self.assertRaises(UnparseableTime):
            KKRLSCLIExtractor(TZ).extract(json.dumps({"coin": 300}), RECEIVED_AT, self.errors)

    def test_relay_negative_money_is_not_a_deposit(self):
        message = json.dumps({"money": "-50", "time": "2025-05-19 14:30"})
        with self.assertRaises(NonDepositMessage):
            GHRelayExtractor(TZ).extract(message, RECEIVED_AT, self.errors)

    def test_swoole_amount_only(self):
        extracted = SwooleTrueMoneyExtractor(TZ).extract("฿ 1,234.00", RECEIVED_AT, self.errors)
        self.assertEqual(extracted.amount, Decimal("1234.00"))
        self.assertEqual(extracted.occurred_at, RECEIVED_AT)


class TestJsonPayload(unittest.TestCase):

    def test_wrapped_payload(self):
        self.assertEqual(decode_payload('notify: {"coin": "1.00"} end'), {"coin": "1.00"})

    def test_invalid_payloads(self):
        for message in ("no json here", "{not json}", "[1, 2]"):
            with self.subTest(message=message):
                with self.assertRaises(MalformedMessage):
                    decode_payload(message)

    def test_missing_amount(self):
        with self.assertRaises(MalformedMessage):
            map_fields({"msg_time": "19/05/2025 14:30"}, ("msg_time",), ("coin", "amount"))

    def test_first_present_amount_key_wins(self):
        fields = map_fields({"coin": "", "amount": "5.00", "msg_time": "x"}, ("msg_time",), ("coin", "amount"))
        self.assertEqual(fields.amount, "5.00")
        self.assertIsNone(fields.balance)


if __name__ == "__main__":
    unittest.main()
