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
pyrnx - RINEX record model and processing

A Python library for GNSS receiver data in the RINEX family: observation,
navigation, meteo, clock, ionosphere map and antenna records, their
merge/split/decimation algebra, filters, and derived observables (satellite
clock offsets, ionosphere-free combinations, clock corrected distances).
"""

__version__ = "1.0.0"
__author__ = "pyrnx Development Team"
__title__ = "pyrnx"
__description__ = "RINEX record model, epoch algebra and derived observables"

from .logger import setup_logger, setup_logger_from_config
from .core import *
from .record import *
from .rinex import Rinex
