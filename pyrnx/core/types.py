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

"""RINEX file types"""

from enum import Enum


class RinexType(Enum):
    """Known RINEX record kinds"""
    OBSERVATION_DATA = "OBSERVATION DATA"
    NAVIGATION_DATA = "NAVIGATION DATA"
    METEO_DATA = "METEOROLOGICAL DATA"
    CLOCK_DATA = "CLOCK DATA"
    IONOSPHERE_MAPS = "IONOSPHERE MAPS"
    ANTENNA_DATA = "ANTEX"

    def is_epoch_indexed(self) -> bool:
        """Antenna records are the only ones without a time axis"""
        return self is not RinexType.ANTENNA_DATA

    @classmethod
    def from_str(cls, text: str) -> "RinexType":
        """Decode the type field of the ``RINEX VERSION / TYPE`` line"""
        key = text.strip().upper()
        for member in cls:
            if key == member.value:
                return member
        if "NAV DATA" in key or key.startswith("N"):
            return cls.NAVIGATION_DATA
        if key.startswith("O"):
            return cls.OBSERVATION_DATA
        if key.startswith("M"):
            return cls.METEO_DATA
        if key.startswith("C"):
            return cls.CLOCK_DATA
        if key.startswith("I"):
            return cls.IONOSPHERE_MAPS
        raise ValueError(f"Unknown RINEX type identifier: {text!r}")
