# Copyright 2024 inuex35
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Batch time conversions between UTC, Unix time, GPS seconds and week/TOW.

Array versions of the scalar conversions in :mod:`pygpst.core.gpst` for
numpy arrays and pandas indexes, plus Unix-time helpers.

Time reference frames:
- Unix time: Seconds since 1970-01-01 00:00:00 UTC (no leap seconds)
- GPS time: Seconds since 1980-01-06 00:00:00 UTC, leap-adjusted on request
- TOW: Time of Week - GPS week number and seconds within the week
- datetime: Python datetime objects (naive ones are assumed to be UTC)
"""

from datetime import datetime, timedelta, timezone
from typing import List, Optional, Tuple

import numpy as np
import pandas as pd

from .civil import ensure_utc_timezone
from .constants import SECONDS_PER_WEEK, UNIX_EPOCH
from .errors import InvalidWeekSecondsError
from .gpst import Gpst, civil_to_gpst, gpst_seconds_to_civil, gpst_to_civil
from .leap_seconds import LeapSecondTable

__all__ = [
    'civil_to_gpst_array', 'gpst_to_civil_array', 'gpst_seconds_to_civil_array',
    'gpst_seconds_to_week_tow', 'week_tow_to_gpst_seconds', 'gpst_frame',
    'unix_to_gpst', 'gpst_to_unix', 'current_gpst',
]


def _to_datetimes(timestamps) -> List[datetime]:
    """Flatten datetimes, numpy datetime64 or pandas values to UTC datetimes"""
    if isinstance(timestamps, datetime):
        return [ensure_utc_timezone(timestamps)]
    if isinstance(timestamps, np.ndarray):
        timestamps = np.ravel(timestamps)
    if isinstance(timestamps, (pd.Series, pd.DatetimeIndex, np.ndarray)):
        index = pd.DatetimeIndex(timestamps)
        if index.tz is None:
            index = index.tz_localize('UTC')
        else:
            index = index.tz_convert('UTC')
        return list(index.to_pydatetime())
    return [ensure_utc_timezone(dt) for dt in timestamps]


def civil_to_gpst_array(timestamps, apply_leap_seconds: bool = False,
                        table: Optional[LeapSecondTable] = None
                        ) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Convert UTC datetimes to GPS time.

    Parameters
    ----------
    timestamps : iterable of datetime, np.ndarray of datetime64, pd.DatetimeIndex or pd.Series
        UTC times
    apply_leap_seconds : bool
        Add the leap seconds in effect at each time
    table : LeapSecondTable, optional
        Leap second table (default: the embedded table)

    Returns
    -------
    seconds : np.ndarray
        GPS seconds since the GPS epoch
    week : np.ndarray
        GPS week numbers
    week_seconds : np.ndarray
        Seconds of week
    """
    gpst = [civil_to_gpst(dt, apply_leap_seconds, table=table) for dt in _to_datetimes(timestamps)]
    seconds = np.array([g.seconds for g in gpst], dtype=float)
    week = np.array([g.week for g in gpst], dtype=int)
    week_seconds = np.array([g.week_seconds for g in gpst], dtype=float)
    return seconds, week, week_seconds


def gpst_to_civil_array(weeks, week_seconds, apply_leap_seconds: bool = False,
                        table: Optional[LeapSecondTable] = None) -> np.ndarray:
    """Convert GPS week and time of week to UTC datetimes.

    Scalars broadcast against arrays.

    Parameters
    ----------
    weeks : int or array-like
        GPS week numbers
    week_seconds : float or array-like
        Seconds of week
    apply_leap_seconds : bool
        Remove the leap seconds in effect at each time
    table : LeapSecondTable, optional
        Leap second table (default: the embedded table)

    Returns
    -------
    np.ndarray
        Object array of timezone-aware UTC datetimes
    """
    weeks, week_seconds = np.broadcast_arrays(np.asarray(weeks), np.asarray(week_seconds))
    result = np.empty(weeks.shape, dtype=object)
    for idx in np.ndindex(weeks.shape):
        result[idx] = gpst_to_civil(weeks[idx].item(), week_seconds[idx].item(),
                                    apply_leap_seconds, table=table)
    return result


def gpst_seconds_to_civil_array(seconds, apply_leap_seconds: bool = False,
                                table: Optional[LeapSecondTable] = None) -> np.ndarray:
    """Convert GPS seconds to an object array of UTC datetimes"""
    seconds = np.asarray(seconds, dtype=float)
    result = np.empty(seconds.shape, dtype=object)
    for idx in np.ndindex(seconds.shape):
        result[idx] = gpst_seconds_to_civil(seconds[idx].item(), apply_leap_seconds, table=table)
    return result


def gpst_seconds_to_week_tow(gps_seconds):
    """Convert GPS seconds to GPS week and time of week.

    Parameters
    ----------
    gps_seconds : float or np.ndarray
        Seconds since GPS epoch

    Returns
    -------
    gps_week : int or np.ndarray
        GPS week number
    tow : float or np.ndarray
        Time of week in seconds
    """
    seconds = np.asarray(gps_seconds, dtype=float)
    if not np.all(np.isfinite(seconds)) or np.any(seconds < 0):
        raise InvalidWeekSecondsError(f"GPS seconds must be finite and non-negative: {gps_seconds}")

    gps_week = np.floor_divide(seconds, SECONDS_PER_WEEK).astype(int)
    tow = np.mod(seconds, SECONDS_PER_WEEK)
    if seconds.ndim == 0:
        return int(gps_week), float(tow)
    return gps_week, tow


def week_tow_to_gpst_seconds(gps_week, tow):
    """Convert GPS week and time of week to GPS seconds.

    Parameters
    ----------
    gps_week : int or np.ndarray
        GPS week number
    tow : float or np.ndarray
        Time of week in seconds, in [0, 604800)

    Returns
    -------
    float or np.ndarray
        Seconds since GPS epoch
    """
    week = np.asarray(gps_week)
    tow_arr = np.asarray(tow, dtype=float)
    if np.any(week < 0) or np.any(week != np.floor(week)):
        raise InvalidWeekSecondsError(f"GPS week must be a non-negative whole number: {gps_week}")
    if not np.all(np.isfinite(tow_arr)) or np.any(tow_arr < 0) or np.any(tow_arr >= SECONDS_PER_WEEK):
        raise InvalidWeekSecondsError(f"Time of week must be in range [0, {SECONDS_PER_WEEK}): {tow}")

    seconds = week * SECONDS_PER_WEEK + tow_arr
    if seconds.ndim == 0:
        return float(seconds)
    return seconds


def gpst_frame(timestamps, apply_leap_seconds: bool = False,
               table: Optional[LeapSecondTable] = None) -> pd.DataFrame:
    """Tabulate GPS time for a series of UTC times.

    Parameters
    ----------
    timestamps : iterable of datetime, np.ndarray of datetime64, pd.DatetimeIndex or pd.Series
        UTC times
    apply_leap_seconds : bool
        Add the leap seconds in effect at each time
    table : LeapSecondTable, optional
        Leap second table (default: the embedded table)

    Returns
    -------
    pd.DataFrame
        Columns ``seconds``, ``week``, ``week_seconds`` indexed by the UTC
        times (index name ``utc``)
    """
    datetimes = _to_datetimes(timestamps)
    seconds, week, week_seconds = civil_to_gpst_array(datetimes, apply_leap_seconds, table=table)
    index = pd.DatetimeIndex(datetimes, name='utc')
    return pd.DataFrame({'seconds': seconds, 'week': week, 'week_seconds': week_seconds},
                        index=index)


def unix_to_gpst(unix_seconds: float, apply_leap_seconds: bool = False,
                 table: Optional[LeapSecondTable] = None) -> Gpst:
    """Convert Unix seconds to GPS time.

    Parameters
    ----------
    unix_seconds : float
        Seconds since Unix epoch (1970-01-01 00:00:00 UTC)
    apply_leap_seconds : bool
        Add the leap seconds in effect at that time

    Returns
    -------
    Gpst
        GPS time
    """
    return civil_to_gpst(UNIX_EPOCH + timedelta(seconds=unix_seconds), apply_leap_seconds, table=table)


def gpst_to_unix(gps_seconds: float, apply_leap_seconds: bool = False,
                 table: Optional[LeapSecondTable] = None) -> float:
    """Convert GPS seconds to Unix seconds.

    Parameters
    ----------
    gps_seconds : float
        Seconds since GPS epoch
    apply_leap_seconds : bool
        Remove the leap seconds in effect at that time

    Returns
    -------
    float
        Seconds since Unix epoch (1970-01-01 00:00:00 UTC)
    """
    dt = gpst_seconds_to_civil(gps_seconds, apply_leap_seconds, table=table)
    return (dt - UNIX_EPOCH).total_seconds()


def current_gpst(apply_leap_seconds: bool = True,
                 table: Optional[LeapSecondTable] = None) -> Gpst:
    """GPS time now, from the system clock"""
    return civil_to_gpst(datetime.now(timezone.utc), apply_leap_seconds, table=table)
