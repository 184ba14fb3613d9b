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

"""Navigation record payload.

A navigation record maps each epoch to the frames broadcast at that epoch,
sorted by frame class:

    Epoch -> {FrameClass -> [Frame]}

Legacy (V2/V3) files only carry ephemeris frames. Modern (V4) files also
carry system time offsets, Earth orientation parameters and ionospheric
model messages (Klobuchar, NeQuick-G or BDGIM).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union

from ..core.epoch import Epoch
from ..core.sv import Sv


class FrameClass(Enum):
    """Navigation frame classes"""
    EPHEMERIS = "EPH"
    SYSTEM_TIME_OFFSET = "STO"
    IONOSPHERIC_MODEL = "ION"
    EARTH_ORIENTATION = "EOP"

    def __lt__(self, other):
        if not isinstance(other, FrameClass):
            return NotImplemented
        return self.value < other.value


class MsgType(Enum):
    """Navigation message types (RINEX V4 ``> EPH`` record tags)"""
    LNAV = "LNAV"   # legacy GPS/QZSS/IRNSS (the only type of V2/V3 files)
    CNAV = "CNAV"
    CNV2 = "CNV2"
    CNVX = "CNVX"
    INAV = "INAV"
    FNAV = "FNAV"
    FDMA = "FDMA"
    D1 = "D1"
    D2 = "D2"
    D1D2 = "D1D2"
    SBAS = "SBAS"

    def is_legacy(self) -> bool:
        return self is MsgType.LNAV

    @classmethod
    def from_str(cls, text: str) -> "MsgType":
        try:
            return cls(text.strip().upper())
        except ValueError:
            raise ValueError(f"Unknown navigation message type: {text!r}") from None

    def __str__(self):
        return self.value


@dataclass
class Ephemeris:
    """Broadcast ephemeris frame

    Attributes
    ----------
    msg_type : MsgType
        Message the ephemeris was decoded from
    sv : Sv
        Emitting space vehicle
    clock_bias : float
        SV clock bias af0 (s)
    clock_drift : float
        SV clock drift af1 (s/s)
    clock_drift_rate : float
        SV clock drift rate af2 (s/s^2)
    orbits : dict
        Remaining broadcast orbit fields, by name (``iode``, ``crs``, ...)
    """
    msg_type: MsgType
    sv: Sv
    clock_bias: float
    clock_drift: float
    clock_drift_rate: float
    orbits: Dict[str, Union[float, int, str]] = field(default_factory=dict)


@dataclass
class StoMessage:
    """System time offset message

    Attributes
    ----------
    system : str
        Time system pair, e.g. ``GPUT``, ``GAGP``
    utc : str
        UTC identifier, e.g. ``UTC(USNO)``
    t_tm : int
        Transmission time (s of week)
    a : tuple of float
        (a0, a1, a2) polynomial coefficients (s, s/s, s/s^2)
    """
    system: str
    utc: str = ""
    t_tm: int = 0
    a: Tuple[float, float, float] = (0.0, 0.0, 0.0)


@dataclass
class EopMessage:
    """Earth orientation parameters message"""
    x: Tuple[float, float, float] = (0.0, 0.0, 0.0)   # xp, dxp/dt, d2xp/dt2
    y: Tuple[float, float, float] = (0.0, 0.0, 0.0)   # yp, dyp/dt, d2yp/dt2
    t_tm: int = 0
    delta_ut1: Tuple[float, float, float] = (0.0, 0.0, 0.0)


@dataclass
class KbModel:
    """Klobuchar ionospheric model (GPS, QZSS, BDS legacy)"""
    alpha: Tuple[float, float, float, float]
    beta: Tuple[float, float, float, float]
    region: str = "WIDE_AREA"


@dataclass
class NgModel:
    """NeQuick-G ionospheric model (Galileo)"""
    a: Tuple[float, float, float]
    region: int = 0


@dataclass
class BdModel:
    """BDGIM ionospheric model (BeiDou-3), alpha in TECu"""
    alpha: Tuple[float, ...]


@dataclass
class IonMessage:
    """Ionospheric model message, wraps exactly one model kind"""
    model: Union[KbModel, NgModel, BdModel]

    def as_klobuchar(self) -> Optional[KbModel]:
        return self.model if isinstance(self.model, KbModel) else None

    def as_nequick_g(self) -> Optional[NgModel]:
        return self.model if isinstance(self.model, NgModel) else None

    def as_bdgim(self) -> Optional[BdModel]:
        return self.model if isinstance(self.model, BdModel) else None


Frame = Union[Ephemeris, StoMessage, EopMessage, IonMessage]

_FRAME_CLASSES = {
    Ephemeris: FrameClass.EPHEMERIS,
    StoMessage: FrameClass.SYSTEM_TIME_OFFSET,
    EopMessage: FrameClass.EARTH_ORIENTATION,
    IonMessage: FrameClass.IONOSPHERIC_MODEL,
}


def frame_class(frame: Frame) -> FrameClass:
    """Class a frame is stored under"""
    try:
        return _FRAME_CLASSES[type(frame)]
    except KeyError:
        raise TypeError(f"not a navigation frame: {type(frame).__name__}") from None


def group_frames(frames: List[Frame]) -> Dict[FrameClass, List[Frame]]:
    """Sort a flat list of frames into the per-class layout of a record entry"""
    classes: Dict[FrameClass, List[Frame]] = {}
    for frame in frames:
        classes.setdefault(frame_class(frame), []).append(frame)
    return classes


NavigationEntry = Dict[FrameClass, List[Frame]]
NavigationRecord = Dict[Epoch, NavigationEntry]
