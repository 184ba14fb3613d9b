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

"""Antenna calibration (ANTEX) record payload.

Antenna records have no time axis: entries are keyed by antenna identifier
and kept in file order.

    antenna_id -> AntennaCalibration
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

import numpy as np


@dataclass
class FrequencyCalibration:
    """Phase center calibration on one carrier

    Attributes
    ----------
    channel : str
        Carrier identifier, e.g. ``G01``, ``E05``
    pco : tuple of float
        Phase center offset north/east/up (mm)
    pcv : np.ndarray
        Non azimuth dependent phase center variations (mm)
    """
    channel: str
    pco: Tuple[float, float, float] = (0.0, 0.0, 0.0)
    pcv: np.ndarray = field(default_factory=lambda: np.zeros(0))

    def __eq__(self, other):
        if not isinstance(other, FrequencyCalibration):
            return NotImplemented
        return (self.channel == other.channel and self.pco == other.pco
                and np.array_equal(self.pcv, other.pcv))


@dataclass
class AntennaCalibration:
    """Calibration of one antenna (or one satellite antenna)"""
    antenna_type: str
    serial_number: str = ""
    method: str = ""
    agency: str = ""
    dazi: float = 0.0
    zenith: Tuple[float, float, float] = (0.0, 90.0, 5.0)  # zen1, zen2, dzen (deg)
    valid_from: Optional[str] = None
    valid_until: Optional[str] = None
    frequencies: List[FrequencyCalibration] = field(default_factory=list)


AntexRecord = Dict[str, AntennaCalibration]
