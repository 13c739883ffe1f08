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

"""Proleptic Gregorian calendar arithmetic.

Day numbers count days since 1970-01-01 (day 0) on the proleptic Gregorian
calendar, i.e. the Gregorian leap-year rules extended indefinitely in both
directions. The formulas work on whole 400-year eras (146097 days), shifted so
that each computational year starts on March 1st and the leap day falls at the
end of the year.
"""

from datetime import datetime, timezone
from typing import Tuple

from .constants import GPST0

__all__ = [
    'days_from_civil', 'civil_from_days', 'is_leap_year',
    'ensure_utc_timezone', 'GPS_EPOCH_DAY',
]

DAYS_PER_ERA = 146097  # days in 400 Gregorian years
EPOCH_SHIFT = 719468   # days from 0000-03-01 to 1970-01-01


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule"""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_from_civil(year: int, month: int, day: int) -> int:
    """
    Convert a Gregorian calendar date to a day number

    Parameters:
    -----------
    year : int
        Year (proleptic Gregorian)
    month : int
        Month (1-12)
    day : int
        Day of month (1-31)

    Returns:
    --------
    int
        Days since 1970-01-01
    """
    if not 1 <= month <= 12:
        raise ValueError(f"Month must be in range [1, 12]: {month}")

    # Years start on March 1st, so January and February belong to the previous one
    if month <= 2:
        year -= 1
    era = year // 400
    yoe = year - era * 400                                    # [0, 399]
    mp = month - 3 if month > 2 else month + 9                # [0, 11], March = 0
    doy = (153 * mp + 2) // 5 + day - 1                       # [0, 365]
    doe = yoe * 365 + yoe // 4 - yoe // 100 + doy             # [0, 146096]
    return era * DAYS_PER_ERA + doe - EPOCH_SHIFT


def civil_from_days(days: int) -> Tuple[int, int, int]:
    """
    Convert a day number back to a Gregorian calendar date

    Inverse of :func:`days_from_civil`.

    Parameters:
    -----------
    days : int
        Days since 1970-01-01

    Returns:
    --------
    tuple : (year, month, day)
    """
    days += EPOCH_SHIFT
    era = days // DAYS_PER_ERA
    doe = days - era * DAYS_PER_ERA
    yoe = (doe - doe // 1460 + doe // 36524 - doe // 146096) // 365
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
    mp = (5 * doy + 2) // 153
    day = doy - (153 * mp + 2) // 5 + 1
    month = mp + 3 if mp < 10 else mp - 9
    year = yoe + era * 400
    if month <= 2:
        year += 1
    return year, month, day


# Day number of the GPS epoch (1980-01-06)
GPS_EPOCH_DAY = days_from_civil(*GPST0[:3])


def ensure_utc_timezone(dt: datetime) -> datetime:
    """Ensure datetime is expressed in UTC.

    Naive datetimes are taken to be UTC already; aware ones are converted.

    Parameters
    ----------
    dt : datetime.datetime
        Datetime object

    Returns
    -------
    datetime.datetime
        Datetime with UTC timezone
    """
    if not isinstance(dt, datetime):
        raise TypeError(f"Expected datetime, got {type(dt).__name__}")
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    elif dt.tzinfo is not timezone.utc:
        return dt.astimezone(timezone.utc)
    return dt
