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

"""Meteorological record payload and sensor description.

    Epoch -> {MeteoObservable -> value}
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from ..core.epoch import Epoch


class MeteoObservable(Enum):
    """Meteo sensor physics"""
    PRESSURE = "PR"              # mbar
    TEMPERATURE = "TD"           # dry temperature, Celsius
    HUMIDITY_RATE = "HR"         # relative humidity, %
    ZENITH_WET_DELAY = "ZW"      # mm
    ZENITH_DRY_DELAY = "ZD"      # mm
    ZENITH_TOTAL_DELAY = "ZT"    # mm
    WIND_AZIMUTH = "WD"          # deg
    WIND_SPEED = "WS"            # m/s
    RAIN_INCREMENT = "RI"        # 1/10 mm
    HAIL_INDICATOR = "HI"

    @classmethod
    def from_str(cls, code: str) -> "MeteoObservable":
        try:
            return cls(code.strip().upper())
        except ValueError:
            raise ValueError(f"Unknown meteo observable: {code!r}") from None

    def __lt__(self, other):
        if not isinstance(other, MeteoObservable):
            return NotImplemented
        return self.value < other.value

    def __str__(self):
        return self.value


@dataclass
class Sensor:
    """Meteo sensor

    Attributes
    ----------
    model : str
        Sensor model
    sensor_type : str
        Sensor type
    observable : MeteoObservable
        Physics measured by this sensor
    accuracy : float or None
        Sensor accuracy, in the observable's unit
    position : tuple or None
        ECEF position (m) and height eccentricity (m), passed through unchanged
    """
    model: str = "Unknown"
    sensor_type: str = "Unknown"
    observable: MeteoObservable = MeteoObservable.PRESSURE
    accuracy: Optional[float] = None
    position: Optional[Tuple[float, float, float, float]] = None


MeteoEntry = Dict[MeteoObservable, float]
MeteoRecord = Dict[Epoch, MeteoEntry]
