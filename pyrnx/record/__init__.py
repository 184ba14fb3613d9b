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

"""RINEX record payloads and the Record sum type"""

from .antex import AntennaCalibration, AntexRecord, FrequencyCalibration
from .clock import ClockData, ClockDataType, ClockRecord
from .ionex import IonexRecord, TecMap
from .meteo import MeteoObservable, MeteoRecord, Sensor
from .navigation import (
    BdModel,
    EopMessage,
    Ephemeris,
    Frame,
    FrameClass,
    IonMessage,
    KbModel,
    MsgType,
    NavigationRecord,
    NgModel,
    StoMessage,
    frame_class,
    group_frames,
)
from .observation import (
    LliFlags,
    ObservationData,
    ObservationRecord,
    Ssi,
    is_doppler_code,
    is_phase_carrier_code,
    is_pseudo_range_code,
    is_sig_strength_code,
)
from .record import Comments, Record, sort_by_key

__all__ = [
    'AntennaCalibration', 'AntexRecord', 'FrequencyCalibration',
    'ClockData', 'ClockDataType', 'ClockRecord',
    'IonexRecord', 'TecMap',
    'MeteoObservable', 'MeteoRecord', 'Sensor',
    'BdModel', 'EopMessage', 'Ephemeris', 'Frame', 'FrameClass', 'IonMessage',
    'KbModel', 'MsgType', 'NavigationRecord', 'NgModel', 'StoMessage',
    'frame_class', 'group_frames',
    'LliFlags', 'ObservationData', 'ObservationRecord', 'Ssi',
    'is_doppler_code', 'is_phase_carrier_code', 'is_pseudo_range_code',
    'is_sig_strength_code',
    'Comments', 'Record', 'sort_by_key',
]
