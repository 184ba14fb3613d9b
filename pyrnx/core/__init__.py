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

"""Core RINEX Processing Module.

This module provides the fundamental components shared by every RINEX record
kind:

- **Constants**: carrier frequencies, speed of light, merge marker layout
- **Identifiers**: constellations and space vehicles
- **Time keys**: epochs and their recording quality flags
- **Header**: the decoded header fields record operations rely on
- **Errors**: split/merge failures and record contract violations
- **Configuration**: producer identification and clock used by merges

Example Usage:
    >>> from datetime import datetime
    >>> from pyrnx.core import Epoch, EpochFlag, Sv
    >>>
    >>> e = Epoch(datetime(2023, 1, 1), EpochFlag.OK)
    >>> sv = Sv.from_str("G07")
    >>> str(sv)
    'G07'
"""

from .config import ProcessingConfig, default_config
from .constants import *
from .constellation import Constellation
from .epoch import Epoch, EpochFlag
from .errors import (
    EpochTooEarlyError,
    EpochTooLateError,
    HeaderMismatchError,
    MergeError,
    RecordTypeError,
    RinexError,
    SplitError,
)
from .header import CrinexInfo, Header
from .sv import Sv
from .types import RinexType
