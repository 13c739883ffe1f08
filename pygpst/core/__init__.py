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

"""Core GPS Time Module.

This module provides the conversions between UTC calendar time and GPS Time:

- **Constants**: GPS epoch, week and day lengths, week rollover length
- **Calendar Arithmetic**: Proleptic Gregorian day numbers and their inverse
- **Leap Seconds**: The embedded, versioned table of leap seconds inserted
  into UTC since the GPS epoch
- **GPS Time**: The ``Gpst`` value (seconds, week, seconds of week) and the
  conversions ``civil_to_gpst``, ``gpst_to_civil`` and ``gpst_seconds_to_civil``
- **Batch Conversions**: numpy/pandas versions and Unix-time helpers

Example Usage:
    >>> from datetime import datetime, timezone
    >>> from pygpst.core import *
    >>>
    >>> gpst = civil_to_gpst(datetime(2005, 1, 28, 13, 30, tzinfo=timezone.utc), True)
    >>> gpst.week, gpst.week_seconds
    (1307, 480613.0)
    >>> gpst_to_civil(1307, 480613.0, True).isoformat()
    '2005-01-28T13:30:00+00:00'
"""

from .constants import *
from .errors import *
from .civil import *
from .leap_seconds import *
from .gpst import *
from .time_conversions import *
