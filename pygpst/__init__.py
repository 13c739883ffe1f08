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

"""
pygpst - GPS Time <-> UTC conversions

Convert UTC calendar times to GPS Time (seconds since the GPS epoch, or
week and seconds of week) and back, optionally correcting for the leap
seconds inserted into UTC since 1980-01-06.
"""

__version__ = "1.0.0"
__author__ = "pygpst Development Team"
__title__ = "pygpst"
__description__ = "GPS Time to and from UTC conversions with leap second handling"

from .core import *
from .logger import setup_logger, setup_logger_from_config, get_logger, LogContext, LogLevel
