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

"""RINEX header fields consumed by record operations.

Decoding the fixed-column header text happens upstream; this module only
holds the decoded fields that record operations read (type, constellation,
sampling interval, comments, CRINEX marker, time bounds) plus a few
descriptive fields passed through unchanged, and implements the header side
of a merge.
"""

from __future__ import annotations

import logging
from copy import deepcopy
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Dict, List, Optional, Tuple

from .constellation import Constellation
from .errors import HeaderMismatchError
from .types import RinexType

logger = logging.getLogger(__name__)


@dataclass
class CrinexInfo:
    """Compact RINEX (Hatanaka) compression description"""
    version: str = "3.0"
    prog: str = ""
    date: Optional[datetime] = None


@dataclass
class Header:
    """Decoded RINEX header

    Attributes
    ----------
    rinex_type : RinexType
        Record kind described by this header
    version : str
        RINEX revision, "x.yy"
    constellation : Constellation or None
        Constellation of the file, ``Constellation.MIXED`` for mixed files
    program : str
        Program that produced the file
    station : str
        Marker name
    sampling_interval : timedelta or None
        INTERVAL field
    comments : list of str
        Comments found in the header section
    crinex : CrinexInfo or None
        Compression description when the file was Hatanaka compressed
    first_epoch, last_epoch : datetime or None
        TIME OF FIRST / LAST OBS
    observables : dict or list
        Observable codes per constellation (observation), sensor observables
        (meteo) or clock data types (clock)
    position : tuple of float or None
        APPROX POSITION XYZ (ECEF, m), passed through unchanged
    sensors : list
        Meteo sensors description
    """
    rinex_type: RinexType = RinexType.OBSERVATION_DATA
    version: str = "3.04"
    constellation: Optional[Constellation] = None
    program: str = ""
    station: str = ""
    sampling_interval: Optional[timedelta] = None
    comments: List[str] = field(default_factory=list)
    crinex: Optional[CrinexInfo] = None
    first_epoch: Optional[datetime] = None
    last_epoch: Optional[datetime] = None
    observables: Dict = field(default_factory=dict)
    position: Optional[Tuple[float, float, float]] = None
    sensors: List = field(default_factory=list)

    def is_crinex(self) -> bool:
        return self.crinex is not None

    def with_crinex(self, crinex: CrinexInfo) -> Header:
        header = deepcopy(self)
        header.crinex = crinex
        return header

    def crx2rnx(self) -> None:
        """Drop the compression marker, data is emitted as plain RINEX"""
        self.crinex = None

    def merge_mut(self, other: Header) -> None:
        """Combine ``other`` header into self.

        Rules:
        - RINEX types must match
        - constellations must match, unless one of them is mixed (result
          is mixed) or undefined (result is the defined one)
        - the smallest sampling interval is retained
        - time bounds are widened
        - observable codes and comments are united, order preserved

        Raises
        ------
        HeaderMismatchError
            If headers describe incompatible files
        """
        if self.rinex_type != other.rinex_type:
            raise HeaderMismatchError(
                f"cannot merge {other.rinex_type.name} into {self.rinex_type.name}")

        if self.constellation is None:
            self.constellation = other.constellation
        elif other.constellation is not None and other.constellation != self.constellation:
            if Constellation.MIXED in (self.constellation, other.constellation):
                self.constellation = Constellation.MIXED
                logger.debug("Merged header constellation set to MIXED")
            else:
                raise HeaderMismatchError(
                    f"cannot merge {other.constellation.name} data into "
                    f"{self.constellation.name} data")

        if other.sampling_interval is not None:
            if self.sampling_interval is None or other.sampling_interval < self.sampling_interval:
                self.sampling_interval = other.sampling_interval

        if other.first_epoch is not None:
            if self.first_epoch is None or other.first_epoch < self.first_epoch:
                self.first_epoch = other.first_epoch
        if other.last_epoch is not None:
            if self.last_epoch is None or other.last_epoch > self.last_epoch:
                self.last_epoch = other.last_epoch

        self._merge_observables(other.observables)

        for comment in other.comments:
            if comment not in self.comments:
                self.comments.append(comment)

        for sensor in other.sensors:
            if sensor not in self.sensors:
                self.sensors.append(sensor)

    def _merge_observables(self, observables) -> None:
        if not observables:
            return
        if isinstance(observables, dict):
            if not isinstance(self.observables, dict):
                raise HeaderMismatchError("observable descriptions are not compatible")
            for key, codes in observables.items():
                merged = self.observables.setdefault(key, [])
                for code in codes:
                    if code not in merged:
                        merged.append(code)
        else:
            if isinstance(self.observables, dict):
                if self.observables:
                    raise HeaderMismatchError("observable descriptions are not compatible")
                self.observables = []
            for code in observables:
                if code not in self.observables:
                    self.observables.append(code)

    def merge(self, other: Header) -> Header:
        """See :meth:`merge_mut`"""
        header = deepcopy(self)
        header.merge_mut(other)
        return header
