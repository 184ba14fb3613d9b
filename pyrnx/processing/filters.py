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

"""In place record filters.

Each filter applies to the record kinds listed in its docstring and leaves
any other kind untouched. Filters prune entries inside nested maps but never
remove the containers themselves: a satellite whose observables were all
filtered out stays in its epoch with an empty observable map.
"""

from datetime import datetime
from typing import Callable, Iterable

from ..core.constellation import Constellation
from ..core.epoch import EpochFlag
from ..core.sv import Sv
from ..record.navigation import Ephemeris, FrameClass, MsgType
from ..record.observation import LliFlags, ObservationData, Ssi
from ..record.record import Record


def _retain_observations(record: Record, predicate: Callable[[str, ObservationData], bool]) -> None:
    obs = record.as_obs()
    if obs is None:
        return
    for _clock_offset, vehicles in obs.values():
        for observations in vehicles.values():
            for code in [c for c, data in observations.items() if not predicate(c, data)]:
                del observations[code]


def _retain_frames(record: Record, frame_class: FrameClass, predicate: Callable) -> None:
    nav = record.as_nav()
    if nav is None:
        return
    for classes in nav.values():
        frames = classes.get(frame_class)
        if frames is not None:
            frames[:] = [frame for frame in frames if predicate(frame)]


def _retain_ephemeris(record: Record, predicate: Callable[[Ephemeris], bool]) -> None:
    _retain_frames(record, FrameClass.EPHEMERIS, predicate)


def constellation_filter(record: Record, constellations: Iterable[Constellation]) -> None:
    """Keep satellites of the given constellations.

    Observation records, and ephemeris frames of navigation records.
    """
    allowed = set(constellations)
    obs = record.as_obs()
    if obs is not None:
        for _clock_offset, vehicles in obs.values():
            for sv in [sv for sv in vehicles if sv.constellation not in allowed]:
                del vehicles[sv]
    _retain_ephemeris(record, lambda eph: eph.sv.constellation in allowed)


def space_vehicule_filter(record: Record, vehicles: Iterable[Sv]) -> None:
    """Keep the given space vehicles.

    Observation records, and ephemeris frames of navigation records.
    """
    allowed = set(vehicles)
    obs = record.as_obs()
    if obs is not None:
        for _clock_offset, entry in obs.values():
            for sv in [sv for sv in entry if sv not in allowed]:
                del entry[sv]
    _retain_ephemeris(record, lambda eph: eph.sv in allowed)


def observable_filter(record: Record, codes: Iterable[str]) -> None:
    """Keep observables whose code exactly matches one of ``codes``.

    The code is the observable code for observation records, the sensor
    code (``PR``, ``TD``...) for meteo records, the clock data type
    (``AS``, ``AR``...) for clock records, and for navigation records the
    message type of ephemeris frames and the time system of system time
    offset frames.
    """
    allowed = set(codes)
    _retain_observations(record, lambda code, _: code in allowed)

    meteo = record.as_meteo()
    if meteo is not None:
        for entry in meteo.values():
            for observable in [o for o in entry if str(o) not in allowed]:
                del entry[observable]

    clock = record.as_clock()
    if clock is not None:
        for entry in clock.values():
            for data_type in [t for t in entry if str(t) not in allowed]:
                del entry[data_type]

    _retain_ephemeris(record, lambda eph: str(eph.msg_type) in allowed)
    _retain_frames(record, FrameClass.SYSTEM_TIME_OFFSET, lambda sto: sto.system in allowed)


def epoch_ok_filter(record: Record) -> None:
    """Keep observation epochs flagged OK"""
    if record.as_obs() is not None:
        record.retain(lambda epoch, _: epoch.flag.is_ok())


def epoch_nok_filter(record: Record) -> None:
    """Keep observation epochs carrying an anomaly flag"""
    if record.as_obs() is not None:
        record.retain(lambda epoch, _: not epoch.flag.is_ok())


def event_filter(record: Record, flag: EpochFlag) -> None:
    """Keep observation epochs carrying exactly ``flag``"""
    if record.as_obs() is not None:
        record.retain(lambda epoch, _: epoch.flag is flag)


def time_window_filter(record: Record, start: datetime, end: datetime) -> None:
    """Keep entries of the half open time window ``[start, end)``.

    Any epoch indexed record. Antenna records are left untouched.

    Raises
    ------
    ValueError
        If ``end`` precedes ``start``
    """
    if end < start:
        raise ValueError(f"Time window ends before it starts: {start} > {end}")
    if record.kind.is_epoch_indexed():
        record.retain(lambda epoch, _: start <= epoch.date < end)


def lli_filter(record: Record, mask: LliFlags) -> None:
    """Keep observations whose LLI intersects ``mask``.

    Observations reported without an LLI are dropped.
    """
    _retain_observations(record, lambda _, data: data.lli is not None and bool(data.lli & mask))


def minimum_sig_strength_filter(record: Record, minimum: Ssi) -> None:
    """Keep observations whose SSI is strictly above ``minimum``.

    Observations reported without an SSI are dropped.
    """
    _retain_observations(record, lambda _, data: data.ssi is not None and data.ssi > minimum)


def legacy_nav_filter(record: Record) -> None:
    """Drop legacy (LNAV) ephemeris frames, keeping modern ones"""
    _retain_ephemeris(record, lambda eph: eph.msg_type is not MsgType.LNAV)


def modern_nav_filter(record: Record) -> None:
    """Drop modern ephemeris frames, keeping legacy (LNAV) ones"""
    _retain_ephemeris(record, lambda eph: eph.msg_type is MsgType.LNAV)
