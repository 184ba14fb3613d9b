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

"""Observation record payload.

An observation record maps each epoch to the receiver clock offset (when
the receiver reported one) and, per space vehicle, the observables measured
at that epoch keyed by their RINEX code (``C1C``, ``L2W``, ``S5Q``...).

    Epoch -> (clock_offset, {Sv -> {code -> ObservationData}})
"""

from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import Dict, Optional, Tuple

from ..core.constants import (
    CLIGHT,
    DOPPLER_PREFIXES,
    PHASE_PREFIXES,
    PSEUDO_RANGE_PREFIXES,
    SIG_STRENGTH_PREFIXES,
)
from ..core.epoch import Epoch
from ..core.sv import Sv


class LliFlags(IntFlag):
    """Loss of lock indicator bit flags"""
    OK_OR_UNKNOWN = 0x00
    LOCK_LOSS = 0x01           # lost lock between previous and current observation
    HALF_CYCLE_SLIP = 0x02     # half cycle ambiguity / slip possible
    UNDER_ANTI_SPOOFING = 0x04  # observation under anti-spoofing (V2 only)


class Ssi(IntEnum):
    """Signal strength indicator, RINEX 1-9 scale

    Attributes
    ----------
    DBHZ_0 : int
        Not known, or signal not tracked
    DBHZ_12 : int
        < 12 dB-Hz
    DBHZ_12_17 ... DBHZ_48_53 : int
        6 dB-Hz wide ranges
    DBHZ_54 : int
        >= 54 dB-Hz
    """
    DBHZ_0 = 0
    DBHZ_12 = 1
    DBHZ_12_17 = 2
    DBHZ_18_23 = 3
    DBHZ_24_29 = 4
    DBHZ_30_35 = 5
    DBHZ_36_41 = 6
    DBHZ_42_47 = 7
    DBHZ_48_53 = 8
    DBHZ_54 = 9

    def is_bad(self) -> bool:
        return self <= Ssi.DBHZ_24_29

    def is_ok(self) -> bool:
        return self >= Ssi.DBHZ_30_35

    def is_excellent(self) -> bool:
        return self > Ssi.DBHZ_42_47

    @classmethod
    def from_dbhz(cls, snr: float) -> "Ssi":
        """Map a carrier-to-noise density (dB-Hz) onto the RINEX scale"""
        if snr <= 0.0:
            return cls.DBHZ_0
        if snr < 12.0:
            return cls.DBHZ_12
        if snr >= 54.0:
            return cls.DBHZ_54
        return cls(min(int((snr - 12.0) // 6.0) + 2, 8))


@dataclass
class ObservationData:
    """Single observable value

    Attributes
    ----------
    obs : float
        Raw value (m for pseudo range, cycles for phase, Hz for doppler,
        dB-Hz for signal strength)
    lli : LliFlags or None
        Loss of lock indicator, if the receiver reported one
    ssi : Ssi or None
        Signal strength indicator, if the receiver reported one
    """
    obs: float
    lli: Optional[LliFlags] = None
    ssi: Optional[Ssi] = None

    def pr_real_distance(self, rcvr_offset: float, sv_offset: float,
                         biases: float = 0.0) -> float:
        """Convert this pseudo range to a distance

        distance = pr - c * (rcvr_offset - sv_offset) + biases

        Parameters
        ----------
        rcvr_offset : float
            Receiver (local) clock offset (s)
        sv_offset : float
            Space vehicle (distant) clock offset (s)
        biases : float
            Additional modeled contributions (m), none are modeled today

        Returns
        -------
        float
            Distance in meters
        """
        return self.obs - CLIGHT * (rcvr_offset - sv_offset) + biases


ObservationEntry = Tuple[Optional[float], Dict[Sv, Dict[str, ObservationData]]]
ObservationRecord = Dict[Epoch, ObservationEntry]


def is_pseudo_range_code(code: str) -> bool:
    """True if the 3 letter code is a pseudo range (``C1C``, legacy ``P1``)"""
    return code.startswith(PSEUDO_RANGE_PREFIXES)


def is_phase_carrier_code(code: str) -> bool:
    return code.startswith(PHASE_PREFIXES)


def is_doppler_code(code: str) -> bool:
    return code.startswith(DOPPLER_PREFIXES)


def is_sig_strength_code(code: str) -> bool:
    return code.startswith(SIG_STRENGTH_PREFIXES)
