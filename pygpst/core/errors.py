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

"""Exceptions raised by GPS time conversions"""

__all__ = ['GpstError', 'OutOfRangeError', 'InvalidWeekSecondsError']


class GpstError(ValueError):
    """Base class for invalid GPS time input"""


class OutOfRangeError(GpstError):
    """Calendar time outside the range GPS time can express.

    Raised for timestamps earlier than the GPS epoch (1980-01-06 00:00:00 UTC)
    and for GPS times whose calendar date cannot be represented by ``datetime``.
    GPS seconds near year 9999 keep only about 30 microsecond resolution, so a
    timestamp within a few tens of microseconds of ``datetime.max`` converts
    to GPS time but rounds past the end of year 9999 on the way back and
    raises this error.
    """


class InvalidWeekSecondsError(GpstError):
    """GPS week / seconds-of-week outside their valid range.

    Week must be a non-negative integer and seconds of week must lie in
    [0, 604800). Negative or non-finite GPS seconds are rejected too, since
    they would imply a negative week.
    """
