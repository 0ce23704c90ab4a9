"""
Tests for the configurable default timezone.
"""

import unittest
from datetime import timedelta

from notify_parser.constants import offset_timezone


class TestOffsetTimezone(unittest.TestCase):

    def test_valid_offsets(self):
        self.assertEqual(offset_timezone("7", 0).utcoffset(None), timedelta(hours=7))
        self.assertEqual(offset_timezone("5.5", 7).utcoffset(None), timedelta(hours=5, minutes=30))
        self.assertEqual(offset_timezone("-3", 7).utcoffset(None), timedelta(hours=-3))

    def test_unset_uses_default(self):
        self.assertEqual(offset_timezone(None, 7).utcoffset(None), timedelta(hours=7))
        self.assertEqual(offset_timezone("  ", 7).utcoffset(None), timedelta(hours=7))

    def test_invalid_value_falls_back_with_warning(self):
        for value in ("abc", "30", "inf"):
            with self.subTest(value=value):
                with self.assertLogs("notify_parser.constants", level="WARNING"):
                    tz = offset_timezone(value, 7)
                self.assertEqual(tz.utcoffset(None), timedelta(hours=7))


if __name__ == "__main__":
    unittest.main()
