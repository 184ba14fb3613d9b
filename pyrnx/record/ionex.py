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

"""Ionosphere map (IONEX) record payload"""

from dataclasses import dataclass, field
from typing import Dict, Optional

import numpy as np

from ..core.epoch import Epoch


@dataclass
class TecMap:
    """Total electron content grid for one epoch

    Attributes
    ----------
    tec : np.ndarray
        TEC values (TECu), shape (n_lat, n_lon)
    latitudes : np.ndarray
        Grid latitudes (deg), shape (n_lat,)
    longitudes : np.ndarray
        Grid longitudes (deg), shape (n_lon,)
    height : float
        Shell height (km)
    rms : np.ndarray or None
        RMS map, same shape as ``tec``
    """
    tec: np.ndarray
    latitudes: np.ndarray = field(default_factory=lambda: np.zeros(0))
    longitudes: np.ndarray = field(default_factory=lambda: np.zeros(0))
    height: float = 450.0
    rms: Optional[np.ndarray] = None

    def __post_init__(self):
        self.tec = np.asarray(self.tec, dtype=np.float64)
        self.latitudes = np.asarray(self.latitudes, dtype=np.float64)
        self.longitudes = np.asarray(self.longitudes, dtype=np.float64)
        if self.rms is not None:
            self.rms = np.asarray(self.rms, dtype=np.float64)
            if self.rms.shape != self.tec.shape:
                raise ValueError(f"RMS map shape {self.rms.shape} does not match TEC map {self.tec.shape}")

    def __eq__(self, other):
        if not isinstance(other, TecMap):
            return NotImplemented
        return (self.height == other.height
                and np.array_equal(self.tec, other.tec)
                and np.array_equal(self.latitudes, other.latitudes)
                and np.array_equal(self.longitudes, other.longitudes)
                and ((self.rms is None and other.rms is None)
                     or (self.rms is not None and other.rms is not None
                         and np.array_equal(self.rms, other.rms))))


IonexRecord = Dict[Epoch, TecMap]
