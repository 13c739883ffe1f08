#!/usr/bin/env python3
"""Test suite for batch and Unix time conversions"""

import unittest
from datetime import datetime, timezone

import numpy as np
import pandas as pd

from pygpst.core.errors import InvalidWeekSecondsError, OutOfRangeError
from pygpst.core.gpst import Gpst
from pygpst.core.time_conversions import (
    civil_to_gpst_array, current_gpst, gpst_frame, gpst_seconds_to_civil_array,
    gpst_seconds_to_week_tow, gpst_to_civil_array, gpst_to_unix, unix_to_gpst,
    week_tow_to_gpst_seconds,
)


def d(*args):
    return datetime(*args, tzinfo=timezone.utc)


class TestCivilToGpstArray(unittest.TestCase):
    """Test array conversion from UTC"""

    def test_list_of_datetimes(self):
        seconds, week, week_seconds = civil_to_gpst_array(
            [d(2005, 1, 28, 13, 30), d(2017, 1, 1)], apply_leap_seconds=True)
        np.testing.assert_array_equal(seconds, [790954213.0, 1167264018.0])
        np.testing.assert_array_equal(week, [1307, 1930])
        np.testing.assert_array_equal(week_seconds, [480613.0, 18.0])

    def test_datetime_index(self):
        index = pd.date_range('2016-12-31', periods=3, freq='D')
        seconds, week, _ = civil_to_gpst_array(index, apply_leap_seconds=True)
        np.testing.assert_array_equal(seconds, [1167177600.0 + 17, 1167264000.0 + 18, 1167350400.0 + 18])
        np.testing.assert_array_equal(week, [1929, 1930, 1930])

    def test_aware_series(self):
        series = pd.Series(pd.to_datetime(['2005-01-28 15:30:00']).tz_localize('Europe/Paris'))
        seconds, _, _ = civil_to_gpst_array(series, apply_leap_seconds=True)
        # 15:30 CET is 14:30 UTC
        np.testing.assert_array_equal(seconds, [790954213.0 + 3600])

    def test_datetime64(self):
        values = np.array(['2005-01-28T13:30:00', '2005-01-28T13:30:00.5'], dtype='datetime64[ms]')
        seconds, week, week_seconds = civil_to_gpst_array(values, apply_leap_seconds=True)
        np.testing.assert_allclose(seconds, [790954213.0, 790954213.5])
        np.testing.assert_array_equal(week, [1307, 1307])
        np.testing.assert_allclose(week_seconds, [480613.0, 480613.5])

    def test_single_datetime(self):
        seconds, week, week_seconds = civil_to_gpst_array(d(2005, 1, 28, 13, 30))
        self.assertEqual(seconds.shape, (1,))
        self.assertEqual(seconds[0], 790954200.0)

    def test_before_epoch(self):
        with self.assertRaises(OutOfRangeError):
            civil_to_gpst_array([d(2005, 1, 28), d(1979, 12, 31)])


class TestGpstToCivilArray(unittest.TestCase):
    """Test array conversion to UTC"""

    def test_broadcast_week(self):
        result = gpst_to_civil_array(1307, [480613.0, 480614.5], apply_leap_seconds=True)
        self.assertEqual(result.shape, (2,))
        self.assertEqual(result[0], d(2005, 1, 28, 13, 30))
        self.assertEqual(result[1], d(2005, 1, 28, 13, 30, 1, 500000))

    def test_arrays(self):
        result = gpst_to_civil_array(np.array([0, 1930]), np.array([0.0, 18.0]), apply_leap_seconds=True)
        self.assertEqual(list(result), [d(1980, 1, 6), d(2017, 1, 1)])

    def test_invalid(self):
        with self.assertRaises(InvalidWeekSecondsError):
            gpst_to_civil_array([1307, 1307], [0.0, 604800.0])

    def test_seconds_array(self):
        result = gpst_seconds_to_civil_array([[790954213.0], [0.0]], apply_leap_seconds=True)
        self.assertEqual(result.shape, (2, 1))
        self.assertEqual(result[0, 0], d(2005, 1, 28, 13, 30))
        self.assertEqual(result[1, 0], d(1980, 1, 6))


class TestWeekTow(unittest.TestCase):
    """Test week / time of week helpers"""

    def test_scalar(self):
        week, tow = gpst_seconds_to_week_tow(790954213.0)
        self.assertEqual((week, tow), (1307, 480613.0))
        self.assertIsInstance(week, int)
        self.assertEqual(week_tow_to_gpst_seconds(1307, 480613.0), 790954213.0)

    def test_array(self):
        week, tow = gpst_seconds_to_week_tow(np.array([0.0, 604800.0, 1209599.5]))
        np.testing.assert_array_equal(week, [0, 1, 1])
        np.testing.assert_array_equal(tow, [0.0, 0.0, 604799.5])
        np.testing.assert_array_equal(week_tow_to_gpst_seconds(week, tow), [0.0, 604800.0, 1209599.5])

    def test_invalid(self):
        with self.assertRaises(InvalidWeekSecondsError):
            gpst_seconds_to_week_tow(-1.0)
        with self.assertRaises(InvalidWeekSecondsError):
            week_tow_to_gpst_seconds(1307, 604800.0)
        with self.assertRaises(InvalidWeekSecondsError):
            week_tow_to_gpst_seconds(-1, 0.0)
        with self.assertRaises(InvalidWeekSecondsError):
            week_tow_to_gpst_seconds(np.array([1, 2]), np.array([0.0, -1.0]))


class TestGpstFrame(unittest.TestCase):
    """Test DataFrame tabulation"""

    def test_frame(self):
        frame = gpst_frame([d(2005, 1, 28, 13, 30), d(2017, 1, 1)], apply_leap_seconds=True)
        self.assertEqual(list(frame.columns), ['seconds', 'week', 'week_seconds'])
        self.assertEqual(frame.index.name, 'utc')
        self.assertEqual(str(frame.index.tz), 'UTC')
        self.assertEqual(len(frame), 2)
        self.assertEqual(frame['seconds'].iloc[0], 790954213.0)
        self.assertEqual(frame['week'].iloc[1], 1930)
        self.assertEqual(frame['week_seconds'].iloc[1], 18.0)

    def test_naive_index_localized(self):
        frame = gpst_frame(pd.DatetimeIndex(['2005-01-28 13:30', '2005-01-28 14:30']))
        self.assertEqual(str(frame.index.tz), 'UTC')
        np.testing.assert_array_equal(frame['seconds'].to_numpy(), [790954200.0, 790957800.0])


class TestUnixTime(unittest.TestCase):
    """Test Unix time helpers"""

    def test_unix_to_gpst(self):
        gpst = unix_to_gpst(1603722481, apply_leap_seconds=True)
        self.assertEqual((gpst.week, gpst.week_seconds), (2129, 138499.0))
        self.assertEqual(unix_to_gpst(1106919000, apply_leap_seconds=True), Gpst(790954213.0))
        self.assertEqual(unix_to_gpst(315964800), Gpst(0.0))

    def test_gpst_to_unix(self):
        self.assertEqual(gpst_to_unix(790954213.0, apply_leap_seconds=True), 1106919000.0)
        self.assertEqual(gpst_to_unix(0.0), 315964800.0)

    def test_before_epoch(self):
        with self.assertRaises(OutOfRangeError):
            unix_to_gpst(0)

    def test_current_gpst(self):
        # smoke testing only
        gpst = current_gpst()
        self.assertIsInstance(gpst, Gpst)
        self.assertGreaterEqual(gpst.week, 2129)


if __name__ == '__main__':
    unittest.main()
