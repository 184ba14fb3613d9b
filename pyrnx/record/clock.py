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

"""Clock record payload.

    Epoch -> {ClockDataType -> {system -> ClockData}}

``system`` is either a space vehicle descriptor (``G07``) or a 4 character
station/receiver name, kept as text.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from ..core.epoch import Epoch


class ClockDataType(Enum):
    """Clock data types"""
    AR = "AR"  # receiver clocks derived from a network
    AS = "AS"  # satellite clocks derived from a network
    CR = "CR"  # calibration measurements for a single GNSS receiver
    DR = "DR"  # discontinuity measurements for a single GNSS receiver
    MS = "MS"  # monitor measurements for broadcast satellite clocks

    @classmethod
    def from_str(cls, code: str) -> "ClockDataType":
        try:
            return cls(code.strip().upper())
        except ValueError:
            raise ValueError(f"Unknown clock data type: {code!r}") from None

    def __lt__(self, other):
        if not isinstance(other, ClockDataType):
            return NotImplemented
        return self.value < other.value

    def __str__(self):
        return self.value


@dataclass
class ClockData:
    """Clock value set, only the bias is mandatory

    Attributes
    ----------
    bias : float
        Clock bias (s)
    bias_sigma : float or None
    rate : float or None
        Clock rate (s/s)
    rate_sigma : float or None
    accel : float or None
        Clock acceleration (1/s)
    accel_sigma : float or None
    """
    bias: float
    bias_sigma: Optional[float] = None
    rate: Optional[float] = None
    rate_sigma: Optional[float] = None
    accel: Optional[float] = None
    accel_sigma: Optional[float] = None


ClockEntry = Dict[ClockDataType, Dict[str, ClockData]]
ClockRecord = Dict[Epoch, ClockEntry]
