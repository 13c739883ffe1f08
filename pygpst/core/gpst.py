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

"""GPS Time (GPST) and conversions to and from UTC calendar time.

GPST counts seconds continuously from the GPS epoch (1980-01-06 00:00:00 UTC)
and is conventionally given as a week number plus seconds into the week.
UTC inserts leap seconds, GPST does not, so converting between the two needs
the leap-second table whenever ``apply_leap_seconds`` is set. Without it the
conversions are plain elapsed-time arithmetic from the epoch.

Example
-------
>>> from datetime import datetime, timezone
>>> gpst = civil_to_gpst(datetime(2005, 1, 28, 13, 30, tzinfo=timezone.utc), True)
>>> gpst
Gpst(seconds=790954213.0, week=1307, week_seconds=480613.0)
>>> gpst_to_civil(1307, 480613.0, True)
datetime.datetime(2005, 1, 28, 13, 30, tzinfo=datetime.timezone.utc)
"""

import logging
import math
import numbers
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, Tuple, Union

from ..logger import LogLevel
from .civil import GPS_EPOCH_DAY, civil_from_days, days_from_civil, ensure_utc_timezone
from .constants import (
    GPS_EPOCH, MICROSECONDS_PER_SECOND, SECONDS_PER_DAY, SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE, SECONDS_PER_WEEK, WEEKS_PER_ROLLOVER,
)
from .errors import InvalidWeekSecondsError, OutOfRangeError
from .leap_seconds import LeapSecondTable, cumulative_leap_seconds, cumulative_leap_seconds_for_gpst

logger = logging.getLogger(__name__)

TRACE = LogLevel.TRACE.value

__all__ = [
    'Gpst', 'civil_to_gpst', 'gpst_to_civil', 'gpst_seconds_to_civil',
    'validate_week', 'validate_week_seconds', 'validate_gpst_seconds',
    'validate_civil',
]


def _check_real(value, what: str):
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"{what} must be a real number, got {type(value).__name__}")


def _to_float(value, what: str) -> float:
    _check_real(value, what)
    try:
        return float(value)
    except OverflowError:
        raise InvalidWeekSecondsError(f"{what} too large to represent as a float") from None


def validate_week(week) -> int:
    """
    Check a GPS week number

    Parameters:
    -----------
    week : int
        GPS week number; integer-valued floats are accepted

    Returns:
    --------
    int
        The week as int
    """
    week_float = _to_float(week, "GPS week")
    if not math.isfinite(week_float) or week != int(week):
        raise InvalidWeekSecondsError(f"GPS week must be a whole number: {week_float}")
    if week < 0:
        raise InvalidWeekSecondsError(f"GPS week cannot be negative: {week}")
    if not math.isfinite(week_float * SECONDS_PER_WEEK):
        raise InvalidWeekSecondsError(f"GPS week too large to express in seconds: {week_float}")
    return int(week)


def validate_week_seconds(week_seconds) -> float:
    """
    Check seconds into a GPS week

    Parameters:
    -----------
    week_seconds : float
        Seconds of week, must be in [0, 604800)

    Returns:
    --------
    float
        The seconds of week as float
    """
    week_seconds = _to_float(week_seconds, "Week seconds")
    if not 0 <= week_seconds < SECONDS_PER_WEEK:
        raise InvalidWeekSecondsError(
            f"Week seconds must be in range [0, {SECONDS_PER_WEEK}): {week_seconds}")
    return week_seconds


def validate_gpst_seconds(seconds) -> float:
    """Check GPS seconds since the GPS epoch are finite and non-negative"""
    seconds = _to_float(seconds, "GPS seconds")
    if not math.isfinite(seconds):
        raise InvalidWeekSecondsError(f"GPS seconds must be finite: {seconds}")
    if seconds < 0:
        raise InvalidWeekSecondsError(f"GPS seconds cannot be negative: {seconds}")
    return seconds


def validate_civil(timestamp: datetime) -> datetime:
    """Normalize a calendar time to UTC and check it is not before the GPS epoch"""
    timestamp = ensure_utc_timezone(timestamp)
    if timestamp < GPS_EPOCH:
        raise OutOfRangeError(
            f"Invalid date-time for GPST, is earlier than GPS epoch: {timestamp.isoformat()}")
    return timestamp


@dataclass(frozen=True, order=True)
class Gpst:
    """GPS Time as seconds since the GPS epoch.

    Only ``seconds`` is stored. ``week`` and ``week_seconds`` are derived
    from it, so the three always describe the same instant:
    ``week * 604800 + week_seconds == seconds`` with
    ``0 <= week_seconds < 604800``.

    Parameters
    ----------
    seconds : float
        Seconds since 1980-01-06 00:00:00, leap-adjusted or not depending on
        how the value was produced

    Examples
    --------
    >>> Gpst.from_week(1307, 480613.0).seconds
    790954213.0
    """
    seconds: float = field(default=0.0)

    def __post_init__(self):
        object.__setattr__(self, 'seconds', validate_gpst_seconds(self.seconds))

    @classmethod
    def from_seconds(cls, seconds: float) -> 'Gpst':
        """Create from seconds since the GPS epoch"""
        return cls(seconds)

    @classmethod
    def from_week(cls, week: int, week_seconds: float) -> 'Gpst':
        """Create from GPS week and seconds of week"""
        week = validate_week(week)
        week_seconds = validate_week_seconds(week_seconds)
        return cls(week * SECONDS_PER_WEEK + week_seconds)

    @classmethod
    def from_datetime(cls, dt: datetime, apply_leap_seconds: bool = False,
                      table: Optional[LeapSecondTable] = None) -> 'Gpst':
        """Create from a UTC datetime, see :func:`civil_to_gpst`"""
        return civil_to_gpst(dt, apply_leap_seconds, table=table)

    @property
    def week(self) -> int:
        """Full weeks since the GPS epoch"""
        return int(self.seconds // SECONDS_PER_WEEK)

    @property
    def week_seconds(self) -> float:
        """Seconds since the start of the current week"""
        return self.seconds % SECONDS_PER_WEEK

    @property
    def rollover_week(self) -> int:
        """10-bit week number as broadcast by GPS satellites"""
        return self.week % WEEKS_PER_ROLLOVER

    @property
    def rollover_count(self) -> int:
        """Number of 1024-week rollovers since the GPS epoch"""
        return self.week // WEEKS_PER_ROLLOVER

    def to_tuple(self) -> Tuple[float, int, float]:
        """(seconds, week, week_seconds)"""
        return self.seconds, self.week, self.week_seconds

    def to_datetime(self, apply_leap_seconds: bool = False,
                    table: Optional[LeapSecondTable] = None) -> datetime:
        """Convert to a UTC datetime, see :func:`gpst_seconds_to_civil`"""
        return gpst_seconds_to_civil(self.seconds, apply_leap_seconds, table=table)

    def __add__(self, seconds: float) -> 'Gpst':
        """Add seconds using + operator"""
        if isinstance(seconds, bool) or not isinstance(seconds, numbers.Real):
            return NotImplemented
        return Gpst(self.seconds + seconds)

    def __sub__(self, other: Union['Gpst', float]) -> Union[float, 'Gpst']:
        """Difference in seconds between two times, or time shifted back by seconds"""
        if isinstance(other, Gpst):
            return self.seconds - other.seconds
        if isinstance(other, bool) or not isinstance(other, numbers.Real):
            return NotImplemented
        return Gpst(self.seconds - other)

    def __str__(self):
        return f"GPS Week: {self.week}, Week seconds: {self.week_seconds:.3f}"

    def __repr__(self):
        return f"Gpst(seconds={self.seconds!r}, week={self.week!r}, week_seconds={self.week_seconds!r})"


def civil_to_gpst(timestamp: datetime, apply_leap_seconds: bool = False,
                  table: Optional[LeapSecondTable] = None) -> Gpst:
    """
    Convert a UTC calendar time to GPS time

    Parameters:
    -----------
    timestamp : datetime
        Calendar time; aware datetimes are converted to UTC, naive ones are
        taken as UTC
    apply_leap_seconds : bool
        Add the leap seconds inserted into UTC since the GPS epoch
    table : LeapSecondTable, optional
        Leap second table (default: the embedded table)

    Returns:
    --------
    Gpst
        GPS time

    Raises:
    -------
    OutOfRangeError
        If the timestamp is before the GPS epoch
    """
    timestamp = validate_civil(timestamp)

    days = days_from_civil(timestamp.year, timestamp.month, timestamp.day) - GPS_EPOCH_DAY
    whole_seconds = (days * SECONDS_PER_DAY
                     + timestamp.hour * SECONDS_PER_HOUR
                     + timestamp.minute * SECONDS_PER_MINUTE
                     + timestamp.second)
    raw_seconds = whole_seconds + timestamp.microsecond / MICROSECONDS_PER_SECOND

    leaps = cumulative_leap_seconds(timestamp, table) if apply_leap_seconds else 0
    if logger.isEnabledFor(TRACE):
        logger.log(TRACE, f"civil_to_gpst {timestamp.isoformat()}: days={days} raw={raw_seconds:.6f} leaps={leaps}")

    return Gpst(raw_seconds + leaps)


def gpst_seconds_to_civil(seconds_since_epoch: float, apply_leap_seconds: bool = False,
                          table: Optional[LeapSecondTable] = None) -> datetime:
    """
    Convert GPS seconds since the GPS epoch to UTC calendar time

    Parameters:
    -----------
    seconds_since_epoch : float
        GPS seconds since 1980-01-06 00:00:00
    apply_leap_seconds : bool
        Remove the leap seconds in effect at that GPS time
    table : LeapSecondTable, optional
        Leap second table (default: the embedded table)

    Returns:
    --------
    datetime
        Timezone-aware UTC datetime, rounded to the microsecond

    Raises:
    -------
    InvalidWeekSecondsError
        If the seconds are negative or not finite
    OutOfRangeError
        If the date is past datetime.max
    """
    raw_seconds = validate_gpst_seconds(seconds_since_epoch)
    leaps = cumulative_leap_seconds_for_gpst(raw_seconds, table) if apply_leap_seconds else 0
    utc_seconds = raw_seconds - leaps

    whole = math.floor(utc_seconds)
    microseconds = round((utc_seconds - whole) * MICROSECONDS_PER_SECOND)
    if microseconds == MICROSECONDS_PER_SECOND:
        whole += 1
        microseconds = 0

    days, seconds_of_day = divmod(whole, SECONDS_PER_DAY)
    hour, remainder = divmod(seconds_of_day, SECONDS_PER_HOUR)
    minute, second = divmod(remainder, SECONDS_PER_MINUTE)
    year, month, day = civil_from_days(days + GPS_EPOCH_DAY)

    if logger.isEnabledFor(TRACE):
        logger.log(TRACE, f"gpst_seconds_to_civil {raw_seconds:.6f}: leaps={leaps} days={days}")

    if year > datetime.max.year:
        raise OutOfRangeError(f"GPS seconds {raw_seconds} are past the latest representable date")

    return datetime(year, month, day, hour, minute, second, microseconds, tzinfo=timezone.utc)


def gpst_to_civil(week: int, week_seconds: float, apply_leap_seconds: bool = False,
                  table: Optional[LeapSecondTable] = None) -> datetime:
    """
    Convert GPS week and seconds of week to UTC calendar time

    Parameters:
    -----------
    week : int
        GPS week number (full weeks since the GPS epoch, not the 10-bit
        broadcast value)
    week_seconds : float
        Seconds into the week, in [0, 604800)
    apply_leap_seconds : bool
        Remove the leap seconds in effect at that GPS time
    table : LeapSecondTable, optional
        Leap second table (default: the embedded table)

    Returns:
    --------
    datetime
        Timezone-aware UTC datetime

    Raises:
    -------
    InvalidWeekSecondsError
        If the week is negative or the seconds of week are out of range
    """
    week = validate_week(week)
    week_seconds = validate_week_seconds(week_seconds)
    return gpst_seconds_to_civil(week * SECONDS_PER_WEEK + week_seconds,
                                 apply_leap_seconds, table=table)
