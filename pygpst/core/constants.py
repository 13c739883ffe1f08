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

"""GPS Time Constants"""

from datetime import datetime, timezone

__all__ = [
    'GPST0', 'GPS_EPOCH', 'UNIX_EPOCH', 'GPS_EPOCH_UNIX',
    'SECONDS_PER_MINUTE', 'SECONDS_PER_HOUR', 'SECONDS_PER_DAY',
    'DAYS_PER_WEEK', 'SECONDS_PER_WEEK', 'MICROSECONDS_PER_SECOND',
    'WEEKS_PER_ROLLOVER',
]

# Time System Parameters
GPST0 = [1980, 1, 6, 0, 0, 0]  # GPS time reference epoch
GPS_EPOCH = datetime(*GPST0, tzinfo=timezone.utc)
UNIX_EPOCH = datetime(1970, 1, 1, 0, 0, 0, tzinfo=timezone.utc)
GPS_EPOCH_UNIX = 315964800  # GPS epoch as Unix timestamp (s)

# Calendar units
SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 86400
DAYS_PER_WEEK = 7
SECONDS_PER_WEEK = SECONDS_PER_DAY * DAYS_PER_WEEK  # 604800
MICROSECONDS_PER_SECOND = 1000000

# Broadcast week number is 10 bits wide
WEEKS_PER_ROLLOVER = 1024
