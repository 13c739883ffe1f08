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

"""Leap seconds inserted into UTC since the GPS epoch.

GPS time and UTC were aligned at the GPS epoch (1980-01-06 00:00:00 UTC).
Every leap second inserted into UTC since then puts GPS time one more second
ahead of UTC, so GPST - UTC equals the number of leap seconds counted here
(18 s since 2017-01-01).

The table ships with the package. When the IERS announces a
new leap second, append it to ``LEAP_SECOND_DATES``, bump
``LEAP_SECOND_TABLE_VERSION`` and release a new version.

Times after the last entry use the last known count. This is a policy (no
further leap seconds are assumed), not a prediction.
"""

import logging
from bisect import bisect_right
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable, Iterator, Optional, Sequence, Tuple

from .civil import ensure_utc_timezone
from .constants import GPS_EPOCH

logger = logging.getLogger(__name__)

__all__ = [
    'LeapSecondEntry', 'LeapSecondTable', 'LEAP_SECOND_DATES',
    'LEAP_SECOND_TABLE_VERSION', 'LEAP_SECOND_TABLE',
    'cumulative_leap_seconds', 'cumulative_leap_seconds_for_gpst',
]

#: First UTC day after each inserted leap second (the leap second itself is
#: 23:59:60 on the preceding day)
LEAP_SECOND_DATES: Tuple[Tuple[int, int, int], ...] = (
    (1981, 7, 1),   # 1 second
    (1982, 7, 1),   # 2 seconds
    (1983, 7, 1),   # 3 seconds
    (1985, 7, 1),   # 4 seconds
    (1988, 1, 1),   # 5 seconds
    (1990, 1, 1),   # 6 seconds
    (1991, 1, 1),   # 7 seconds
    (1992, 7, 1),   # 8 seconds
    (1993, 7, 1),   # 9 seconds
    (1994, 7, 1),   # 10 seconds
    (1996, 1, 1),   # 11 seconds
    (1997, 7, 1),   # 12 seconds
    (1999, 1, 1),   # 13 seconds
    (2006, 1, 1),   # 14 seconds
    (2009, 1, 1),   # 15 seconds
    (2012, 7, 1),   # 16 seconds
    (2015, 7, 1),   # 17 seconds
    (2017, 1, 1),   # 18 seconds
)

#: Date of the most recent leap second included above
LEAP_SECOND_TABLE_VERSION = "2017-01-01"


@dataclass(frozen=True)
class LeapSecondEntry:
    """A single leap-second insertion.

    Attributes
    ----------
    instant : datetime
        UTC instant from which ``count`` applies (00:00:00 of the day after
        the inserted second)
    count : int
        Cumulative leap seconds since the GPS epoch at and after ``instant``
    """
    instant: datetime
    count: int

    @property
    def gpst_seconds(self) -> float:
        """GPS seconds (leap-adjusted) at which ``count`` takes effect"""
        return (self.instant - GPS_EPOCH).total_seconds() + self.count


class LeapSecondTable:
    """Ordered, read-only table of leap seconds since the GPS epoch.

    Lookups are binary searches over the effective instants, keyed either by
    UTC datetime or by leap-adjusted GPS seconds. The second key is what the
    GPST to UTC direction needs: the calendar date is not known until the
    leap offset has been removed, but GPS seconds are monotonic and never
    repeat, so they can be searched directly.

    Parameters
    ----------
    entries : iterable of LeapSecondEntry
        Entries in ascending order with counts 1, 2, ..., n
    version : str, optional
        Label of the last bulletin the table reflects

    Examples
    --------
    >>> LEAP_SECOND_TABLE.cumulative_leap_seconds(datetime(2005, 1, 28, tzinfo=timezone.utc))
    13
    >>> LEAP_SECOND_TABLE.cumulative_leap_seconds_for_gpst(790954213.0)
    13
    """

    def __init__(self, entries: Iterable[LeapSecondEntry], version: Optional[str] = None):
        self._entries = tuple(entries)
        self.version = version

        previous = GPS_EPOCH
        for i, entry in enumerate(self._entries, start=1):
            if entry.instant.tzinfo is None:
                raise ValueError(f"Leap second instant must be timezone-aware: {entry.instant}")
            if entry.instant <= previous:
                raise ValueError(
                    f"Leap second instants must be ascending and after the GPS epoch: {entry.instant}")
            if entry.count != i:
                raise ValueError(f"Leap second count at {entry.instant} must be {i}, got {entry.count}")
            previous = entry.instant

        self._instants = [entry.instant for entry in self._entries]
        self._gpst_keys = [entry.gpst_seconds for entry in self._entries]

        logger.debug(f"Leap second table loaded: {len(self._entries)} entries (version {version})")

    @classmethod
    def from_dates(cls, dates: Sequence[Tuple[int, int, int]],
                   version: Optional[str] = None) -> 'LeapSecondTable':
        """Build a table from the (year, month, day) each leap second takes effect"""
        entries = [
            LeapSecondEntry(datetime(year, month, day, tzinfo=timezone.utc), count)
            for count, (year, month, day) in enumerate(dates, start=1)
        ]
        return cls(entries, version)

    @property
    def entries(self) -> Tuple[LeapSecondEntry, ...]:
        return self._entries

    @property
    def latest(self) -> Optional[LeapSecondEntry]:
        """Most recent entry, or None for an empty table"""
        return self._entries[-1] if self._entries else None

    def cumulative_leap_seconds(self, instant: datetime) -> int:
        """
        Leap seconds inserted at or before a UTC instant

        Parameters:
        -----------
        instant : datetime
            UTC time (naive datetimes are taken as UTC)

        Returns:
        --------
        int
            GPST - UTC in seconds; 0 at or before the GPS epoch
        """
        return bisect_right(self._instants, ensure_utc_timezone(instant))

    def cumulative_leap_seconds_for_gpst(self, seconds_since_epoch: float) -> int:
        """
        Leap seconds in effect at a (leap-adjusted) GPS time

        Parameters:
        -----------
        seconds_since_epoch : float
            GPS seconds since the GPS epoch

        Returns:
        --------
        int
            GPST - UTC in seconds; 0 at or before the GPS epoch
        """
        return bisect_right(self._gpst_keys, seconds_since_epoch)

    def gps_utc_offset(self, instant: datetime) -> int:
        """GPST - UTC at a UTC instant (alias of cumulative_leap_seconds)"""
        return self.cumulative_leap_seconds(instant)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[LeapSecondEntry]:
        return iter(self._entries)

    def __repr__(self):
        return f"LeapSecondTable({len(self._entries)} entries, version={self.version!r})"


# Process-wide default table
LEAP_SECOND_TABLE = LeapSecondTable.from_dates(LEAP_SECOND_DATES, LEAP_SECOND_TABLE_VERSION)


def cumulative_leap_seconds(instant: datetime,
                            table: Optional[LeapSecondTable] = None) -> int:
    """Leap seconds inserted at or before a UTC instant"""
    if table is None:
        table = LEAP_SECOND_TABLE
    return table.cumulative_leap_seconds(instant)


def cumulative_leap_seconds_for_gpst(seconds_since_epoch: float,
                                     table: Optional[LeapSecondTable] = None) -> int:
    """Leap seconds in effect at a leap-adjusted GPS time"""
    if table is None:
        table = LEAP_SECOND_TABLE
    return table.cumulative_leap_seconds_for_gpst(seconds_since_epoch)
