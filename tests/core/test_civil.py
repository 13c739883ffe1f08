#!/usr/bin/env python3
"""Test suite for proleptic Gregorian calendar arithmetic"""

import unittest
from datetime import date, datetime, timedelta, timezone

from pygpst.core.civil import (
    GPS_EPOCH_DAY, civil_from_days, days_from_civil, ensure_utc_timezone, is_leap_year,
)

UNIX_ORDINAL = date(1970, 1, 1).toordinal()


class TestDayNumbers(unittest.TestCase):
    """Test day number formula and its inverse"""

    def test_reference_days(self):
        """Test well-known day numbers"""
        self.assertEqual(days_from_civil(1970, 1, 1), 0)
        self.assertEqual(days_from_civil(1969, 12, 31), -1)
        self.assertEqual(days_from_civil(1980, 1, 6), 3657)
        self.assertEqual(GPS_EPOCH_DAY, 3657)
        self.assertEqual(days_from_civil(2000, 3, 1), 11017)

    def test_matches_ordinal(self):
        """Test formula agrees with date.toordinal over the whole datetime range"""
        for ordinal in list(range(1, date.max.toordinal(), 1013)) + [date.max.toordinal()]:
            d = date.fromordinal(ordinal)
            self.assertEqual(days_from_civil(d.year, d.month, d.day),
                             ordinal - UNIX_ORDINAL, msg=str(d))

    def test_month_boundaries(self):
        """Test every month boundary of a leap and a common year"""
        for year in (1980, 1981, 2000, 2100):
            for month in range(1, 13):
                first = date(year, month, 1)
                last = first - timedelta(days=1)
                self.assertEqual(days_from_civil(first.year, first.month, first.day)
                                 - days_from_civil(last.year, last.month, last.day), 1)

    def test_century_leap_years(self):
        """Test leap day handling in century years"""
        # 2000 is divisible by 400: leap year
        self.assertEqual(days_from_civil(2000, 3, 1) - days_from_civil(2000, 2, 28), 2)
        self.assertEqual(civil_from_days(days_from_civil(2000, 2, 28) + 1), (2000, 2, 29))
        # 2100 is divisible by 100 only: common year
        self.assertEqual(days_from_civil(2100, 3, 1) - days_from_civil(2100, 2, 28), 1)
        self.assertEqual(civil_from_days(days_from_civil(2100, 2, 28) + 1), (2100, 3, 1))

    def test_inverse(self):
        """Test civil_from_days inverts the formula"""
        for days in range(-719162, 2932897, 997):
            expected = date.fromordinal(days + UNIX_ORDINAL)
            self.assertEqual(civil_from_days(days), (expected.year, expected.month, expected.day))

    def test_invalid_month(self):
        """Test months outside 1-12 are rejected"""
        with self.assertRaises(ValueError):
            days_from_civil(2005, 13, 1)
        with self.assertRaises(ValueError):
            days_from_civil(2005, 0, 1)

    def test_is_leap_year(self):
        self.assertTrue(is_leap_year(1980))
        self.assertTrue(is_leap_year(2000))
        self.assertFalse(is_leap_year(1900))
        self.assertFalse(is_leap_year(2100))
        self.assertFalse(is_leap_year(2005))


class TestEnsureUtc(unittest.TestCase):
    """Test UTC normalization"""

    def test_naive_is_utc(self):
        dt = ensure_utc_timezone(datetime(2005, 1, 28, 13, 30))
        self.assertIs(dt.tzinfo, timezone.utc)
        self.assertEqual(dt.hour, 13)

    def test_aware_converted(self):
        cest = timezone(timedelta(hours=2))
        dt = ensure_utc_timezone(datetime(2005, 1, 28, 15, 30, tzinfo=cest))
        self.assertEqual(dt, datetime(2005, 1, 28, 13, 30, tzinfo=timezone.utc))
        self.assertEqual(dt.hour, 13)

    def test_utc_unchanged(self):
        dt = datetime(2005, 1, 28, 13, 30, tzinfo=timezone.utc)
        self.assertIs(ensure_utc_timezone(dt), dt)

    def test_rejects_non_datetime(self):
        with self.assertRaises(TypeError):
            ensure_utc_timezone("2005-01-28T13:30:00Z")
        with self.assertRaises(TypeError):
            ensure_utc_timezone(date(2005, 1, 28))


if __name__ == '__main__':
    unittest.main()
