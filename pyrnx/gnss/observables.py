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

"""Derived observables computed from observation and navigation records.

Every extractor returns a new mapping ``{Epoch: {Sv: ...}}`` in ascending
epoch and space vehicle order, and returns an empty mapping when the record
is of another kind. Incomplete inputs are omitted, never defaulted: a
satellite without a usable value does not appear in its epoch, and an epoch
that produced nothing does not appear at all.
"""

import logging
from typing import Callable, Dict, List, Tuple

from .. import logger as _logger  # noqa: F401 (Logger.trace)
from ..core.epoch import Epoch
from ..core.sv import Sv
from ..record.navigation import (
    BdModel,
    Ephemeris,
    FrameClass,
    IonMessage,
    KbModel,
    NgModel,
    StoMessage,
)
from ..record.observation import (
    is_doppler_code,
    is_phase_carrier_code,
    is_pseudo_range_code,
    is_sig_strength_code,
)
from ..record.record import Record
from .ionosphere_free import combine_first_two

logger = logging.getLogger(__name__)

SvMap = Dict[Epoch, Dict[Sv, float]]
CodeMap = Dict[Epoch, Dict[Sv, List[Tuple[str, float]]]]


# ----------------------------------------------------------------------
# Navigation
# ----------------------------------------------------------------------
def _ephemeris_map(record: Record, value: Callable[[Ephemeris], object]) -> Dict:
    nav = record.as_nav()
    if nav is None:
        return {}
    results = {}
    for epoch, classes in nav.items():
        inner = {}
        for frame in classes.get(FrameClass.EPHEMERIS, []):
            inner[frame.sv] = value(frame)
        if inner:
            results[epoch] = dict(sorted(inner.items()))
    return results


def space_vehicule_clocks_offset(record: Record) -> SvMap:
    """SV clock offsets (s), from the ephemeris frames of a navigation record"""
    return _ephemeris_map(record, lambda eph: eph.clock_bias)


def space_vehicule_clocks_drift(record: Record) -> Dict[Epoch, Dict[Sv, Tuple[float, float, float]]]:
    """SV clock (offset, drift, drift rate) from ephemeris frames"""
    return _ephemeris_map(record, lambda eph: (eph.clock_bias, eph.clock_drift, eph.clock_drift_rate))


def ephemeris(record: Record) -> Dict[Epoch, Dict[Sv, Tuple[float, float, float, Dict]]]:
    """Ephemeris frames as ``(bias, drift, drift_rate, orbits)``, other frames dropped"""
    return _ephemeris_map(
        record,
        lambda eph: (eph.clock_bias, eph.clock_drift, eph.clock_drift_rate, dict(eph.orbits)))


def _frames_by_epoch(record: Record, frame_class: FrameClass,
                     select: Callable = lambda frame: frame) -> Dict[Epoch, List]:
    nav = record.as_nav()
    if nav is None:
        return {}
    results = {}
    for epoch, classes in nav.items():
        inner = [select(frame) for frame in classes.get(frame_class, [])]
        inner = [item for item in inner if item is not None]
        if inner:
            results[epoch] = inner
    return results


def system_time_offsets(record: Record) -> Dict[Epoch, List[StoMessage]]:
    """System time offset messages, by epoch (modern navigation records)"""
    return _frames_by_epoch(record, FrameClass.SYSTEM_TIME_OFFSET)


def ionospheric_models(record: Record) -> Dict[Epoch, List[IonMessage]]:
    """Ionospheric model messages of any kind, by epoch"""
    return _frames_by_epoch(record, FrameClass.IONOSPHERIC_MODEL)


def klobuchar_ionospheric_models(record: Record) -> Dict[Epoch, List[KbModel]]:
    return _frames_by_epoch(record, FrameClass.IONOSPHERIC_MODEL, lambda ion: ion.as_klobuchar())


def nequick_g_ionospheric_models(record: Record) -> Dict[Epoch, List[NgModel]]:
    return _frames_by_epoch(record, FrameClass.IONOSPHERIC_MODEL, lambda ion: ion.as_nequick_g())


def bdgim_ionospheric_models(record: Record) -> Dict[Epoch, List[BdModel]]:
    return _frames_by_epoch(record, FrameClass.IONOSPHERIC_MODEL, lambda ion: ion.as_bdgim())


# ----------------------------------------------------------------------
# Observation
# ----------------------------------------------------------------------
def _observables(record: Record, is_code: Callable[[str], bool]) -> CodeMap:
    obs = record.as_obs()
    if obs is None:
        return {}
    results = {}
    for epoch, (_clock_offset, vehicles) in obs.items():
        inner = {}
        for sv, observations in sorted(vehicles.items()):
            values = [(code, data.obs) for code, data in observations.items() if is_code(code)]
            if values:
                inner[sv] = values
        if inner:
            results[epoch] = inner
    return results


def pseudo_ranges(record: Record) -> CodeMap:
    """Raw pseudo ranges (m) as ``[(code, value)]`` per epoch and SV"""
    return _observables(record, is_pseudo_range_code)


def carrier_phases(record: Record) -> CodeMap:
    """Raw carrier phases (cycles) as ``[(code, value)]`` per epoch and SV"""
    return _observables(record, is_phase_carrier_code)


def dopplers(record: Record) -> CodeMap:
    return _observables(record, is_doppler_code)


def signal_strengths(record: Record) -> CodeMap:
    return _observables(record, is_sig_strength_code)


def _iono_free(observables: CodeMap) -> SvMap:
    results = {}
    for epoch, vehicles in observables.items():
        inner = {}
        for sv, values in vehicles.items():
            combination = combine_first_two(sv.constellation, values)
            if combination is None:
                logger.trace(f"{epoch} {sv}: no dual frequency combination from {[c for c, _ in values[:2]]}")
                continue
            inner[sv] = combination
        if inner:
            results[epoch] = inner
    return results


def iono_free_pseudo_ranges(record: Record) -> SvMap:
    """Ionosphere-free pseudo range (m) per epoch and SV.

    The first two pseudo range codes of each satellite are combined. A
    satellite with fewer than two codes, a code on an unknown carrier, or
    two codes on the same carrier is omitted.
    """
    return _iono_free(pseudo_ranges(record))


def iono_free_carrier_phases(record: Record) -> SvMap:
    """Ionosphere-free carrier phase per epoch and SV, same rules as
    :func:`iono_free_pseudo_ranges`"""
    return _iono_free(carrier_phases(record))


def receiver_clock_offsets(record: Record) -> Dict[Epoch, float]:
    """Receiver clock offsets (s), epochs that reported one"""
    obs = record.as_obs()
    if obs is None:
        return {}
    return {epoch: offset for epoch, (offset, _) in obs.items() if offset is not None}


def pseudo_range_to_distance(record: Record, sv_clock_offsets: SvMap) -> CodeMap:
    """Convert pseudo ranges to distances (m), correcting both clock offsets.

    distance = pr - c * (receiver_offset - sv_offset)

    Parameters
    ----------
    record : Record
        Observation record
    sv_clock_offsets : dict
        ``{Epoch: {Sv: offset}}`` distant clock offsets (s), typically from
        :func:`space_vehicule_clocks_offset` of the matching navigation data

    Returns
    -------
    dict
        ``{Epoch: {Sv: [(code, distance)]}}``. Epochs without a receiver
        clock offset or without distant offsets, and satellites without a
        distant offset, are omitted.
    """
    obs = record.as_obs()
    if obs is None:
        return {}
    results = {}
    for epoch, (rcvr_offset, vehicles) in obs.items():
        distant = sv_clock_offsets.get(epoch)
        if distant is None or rcvr_offset is None:
            continue
        inner = {}
        for sv, observations in sorted(vehicles.items()):
            sv_offset = distant.get(sv)
            if sv_offset is None:
                continue
            values = [(code, data.pr_real_distance(rcvr_offset, sv_offset))
                      for code, data in observations.items() if is_pseudo_range_code(code)]
            if values:
                inner[sv] = values
        if inner:
            results[epoch] = inner
    return results

