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

"""RINEX container: a decoded header, its record and the record comments.

Every transformation exists in two forms. ``*_mut`` methods modify the
container in place; the plain form returns a modified deep copy and leaves
the container untouched.

Example:
    >>> from datetime import datetime, timedelta
    >>> from pyrnx import Epoch, Header, Record, Rinex, RinexType
    >>> record = Record.meteo({
    ...     Epoch(datetime(2023, 1, 1, 0, 0, s)): {} for s in range(0, 60, 10)})
    >>> rinex = Rinex(Header(rinex_type=RinexType.METEO_DATA), record)
    >>> len(rinex.decimate_by_interval(timedelta(seconds=30)).record)
    2
"""

import logging
from copy import deepcopy
from datetime import datetime, timedelta
from typing import Callable, Dict, List, Optional, Tuple

import pandas as pd

from .core.config import ProcessingConfig, default_config
from .core.constellation import Constellation
from .core.epoch import Epoch, EpochFlag
from .core.header import Header
from .core.sv import Sv
from .core.types import RinexType
from .gnss import observables as derived
from .io.export import to_dataframe
from .processing import algebra, filters
from .record.navigation import FrameClass, IonMessage, StoMessage
from .record.observation import LliFlags, Ssi
from .record.record import Comments, Record, sort_by_key

logger = logging.getLogger(__name__)


class Rinex:
    """RINEX file content

    Parameters
    ----------
    header : Header
        Decoded header, ``header.rinex_type`` matches the record kind
    record : Record
        Decoded record
    comments : dict, optional
        Comments found in the record section, by epoch
    config : ProcessingConfig, optional
        Producer identification and clock used by merges
    """

    def __init__(self, header: Header, record: Record,
                 comments: Optional[Comments] = None,
                 config: Optional[ProcessingConfig] = None):
        self.header = header
        self.record = record
        self.comments = {} if comments is None else comments
        sort_by_key(self.comments)
        self.config = default_config if config is None else config

    # ------------------------------------------------------------------
    # Container
    # ------------------------------------------------------------------
    def copy(self) -> "Rinex":
        """Deep copy, the configuration is shared"""
        return Rinex(deepcopy(self.header), self.record.copy(),
                     deepcopy(self.comments), self.config)

    def __deepcopy__(self, memo):
        return self.copy()

    def __eq__(self, other):
        if not isinstance(other, Rinex):
            return NotImplemented
        return (self.header == other.header and self.record == other.record
                and self.comments == other.comments)

    def __repr__(self):
        return f"Rinex({self.header.rinex_type.name}, {len(self.record)} entries)"

    def _apply(self, method: Callable, *args) -> "Rinex":
        rinex = self.copy()
        method(rinex, *args)
        return rinex

    def _with_record(self, record: Record, lower: Optional[datetime] = None,
                     upper: Optional[datetime] = None) -> "Rinex":
        """New container around ``record``, keeping the comments of the
        ``[lower, upper)`` time span"""
        header = deepcopy(self.header)
        epochs = record.epochs()
        header.first_epoch = epochs[0].date if epochs else None
        header.last_epoch = epochs[-1].date if epochs else None
        comments = {
            epoch: list(texts) for epoch, texts in self.comments.items()
            if (lower is None or epoch.date >= lower) and (upper is None or epoch.date < upper)
        }
        return Rinex(header, record, comments, self.config)

    def is_observation_rinex(self) -> bool:
        return self.header.rinex_type is RinexType.OBSERVATION_DATA

    def is_navigation_rinex(self) -> bool:
        return self.header.rinex_type is RinexType.NAVIGATION_DATA

    def is_meteo_rinex(self) -> bool:
        return self.header.rinex_type is RinexType.METEO_DATA

    def is_clocks_rinex(self) -> bool:
        return self.header.rinex_type is RinexType.CLOCK_DATA

    def is_ionex(self) -> bool:
        return self.header.rinex_type is RinexType.IONOSPHERE_MAPS

    def is_antex(self) -> bool:
        return self.header.rinex_type is RinexType.ANTENNA_DATA

    def crx2rnx(self) -> None:
        """Mark the content as plain (decompressed) RINEX"""
        self.header.crx2rnx()

    # ------------------------------------------------------------------
    # Listings and statistics
    # ------------------------------------------------------------------
    def epochs(self) -> List[Epoch]:
        """Record epochs, ascending. Antenna records have none."""
        if not self.record.kind.is_epoch_indexed():
            return []
        return self.record.epochs()

    def first_epoch(self) -> Optional[Epoch]:
        epochs = self.epochs()
        return epochs[0] if epochs else None

    def last_epoch(self) -> Optional[Epoch]:
        epochs = self.epochs()
        return epochs[-1] if epochs else None

    def sampling_interval(self) -> Optional[timedelta]:
        return self.header.sampling_interval

    def average_epoch_duration(self) -> Optional[timedelta]:
        """Mean spacing between consecutive epochs, None below two epochs"""
        epochs = self.epochs()
        if len(epochs) < 2:
            return None
        return (epochs[-1].date - epochs[0].date) / (len(epochs) - 1)

    def data_gap(self) -> List[Tuple[Epoch, timedelta]]:
        """Gaps in the record, as ``(last epoch before the gap, gap duration)``.

        A gap is any spacing between consecutive epochs larger than the
        header sampling interval. Nothing is reported when the interval is
        unknown.
        """
        interval = self.header.sampling_interval
        if interval is None:
            return []
        epochs = self.epochs()
        gaps = []
        for previous, epoch in zip(epochs, epochs[1:]):
            duration = epoch - previous
            if duration > interval:
                gaps.append((previous, duration))
        return gaps

    def epoch_anomalies(self, mask: Optional[EpochFlag] = None) -> List[Epoch]:
        """Epochs flagged with an anomaly, or with exactly ``mask`` if given"""
        return [
            epoch for epoch in self.epochs()
            if not epoch.flag.is_ok() and (mask is None or epoch.flag is mask)
        ]

    def event_description(self, epoch: Epoch) -> Optional[str]:
        """Record comments attached to ``epoch``, one per line"""
        texts = self.comments.get(epoch)
        if not texts:
            return None
        return "\n".join(texts)

    def observables(self) -> List[str]:
        """Observables found in this file.

        - observation: ``"GPS:C1C"`` per constellation and code, from the
          header or, when the header lists none, from the record
        - meteo, clock: sensor codes and clock data types
        - navigation: ephemeris message types and time offset systems
        - antenna, maps: nothing
        """
        result: List[str] = []

        def push(text):
            if text not in result:
                result.append(text)

        if self.is_observation_rinex():
            codes = self.header.observables
            if not codes:
                codes = {}
                for _, vehicles in self.record.expect_obs().values():
                    for sv, observations in vehicles.items():
                        known = codes.setdefault(sv.constellation, [])
                        known.extend(c for c in observations if c not in known)
            for constellation, constellation_codes in codes.items():
                for code in constellation_codes:
                    push(f"{constellation.to_3_letter_code()}:{code}")
        elif self.is_meteo_rinex() or self.is_clocks_rinex():
            for code in self.header.observables:
                push(str(code))
        elif self.is_navigation_rinex():
            for classes in self.record.expect_nav().values():
                for frame in classes.get(FrameClass.EPHEMERIS, []):
                    push(str(frame.msg_type))
                for frame in classes.get(FrameClass.SYSTEM_TIME_OFFSET, []):
                    push(frame.system)
        return result

    def sv(self) -> List[Sv]:
        """Space vehicles found in observation or ephemeris data, sorted"""
        vehicles = set()
        obs = self.record.as_obs()
        if obs is not None:
            for _, entry in obs.values():
                vehicles.update(entry)
        nav = self.record.as_nav()
        if nav is not None:
            for classes in nav.values():
                vehicles.update(frame.sv for frame in classes.get(FrameClass.EPHEMERIS, []))
        return sorted(vehicles)

    def constellations(self) -> List[Constellation]:
        return sorted({sv.constellation for sv in self.sv()})

    def to_dataframe(self) -> pd.DataFrame:
        return to_dataframe(self.record)

    # ------------------------------------------------------------------
    # Merge
    # ------------------------------------------------------------------
    def merge_mut(self, other: "Rinex") -> None:
        """Merge ``other`` into self.

        Headers are checked first. If self is empty its record becomes a
        copy of other's record; if other is empty nothing changes. Otherwise
        every entry of other is inserted (last writer wins) and a merge
        marker comment is stamped in the header, and in the record comments
        at the later of the two first epochs.

        Raises
        ------
        HeaderMismatchError
            If the headers are not compatible
        """
        header = self.header.merge(other.header)
        if other.record.is_empty():
            logger.debug("Merging an empty record, nothing to do")
            return
        if self.record.is_empty():
            self.record = other.record.copy()
            self.header = header
            self._merge_comments(other.comments)
            logger.info(f"Merged into empty record: {len(self.record)} entries")
            return

        boundary = None
        if other.record.kind.is_epoch_indexed():
            # later of the two starts, whichever side was merged in
            boundary = max(self.record.epochs()[0], other.record.epochs()[0])
        algebra.merge_records(self.record, other.record)
        marker = self.config.merge_marker(self.config.clock())
        header.comments.append(marker)
        self.header = header
        self._merge_comments(other.comments)
        if boundary is not None:
            self.comments.setdefault(boundary, []).append(marker)
            sort_by_key(self.comments)
        logger.info(f"Merged {len(other.record)} entries, now {len(self.record)} entries")

    def merge(self, other: "Rinex") -> "Rinex":
        """See :meth:`merge_mut`"""
        return self._apply(Rinex.merge_mut, other)

    def _merge_comments(self, comments: Comments) -> None:
        for epoch, texts in comments.items():
            known = self.comments.setdefault(epoch, [])
            known.extend(text for text in texts if text not in known)
        sort_by_key(self.comments)

    def is_merged(self) -> bool:
        """True if a merge marker is found in the header or record comments"""
        label = self.config.merge_marker_label
        if any(label in comment for comment in self.header.comments):
            return True
        return any(label in text for texts in self.comments.values() for text in texts)

    def merge_boundaries(self) -> List[datetime]:
        """Timestamps of the merge markers found in the header comments"""
        label = self.config.merge_marker_label
        boundaries = []
        for comment in self.header.comments:
            boundary = algebra.parse_merge_marker(comment, label)
            if boundary is not None:
                boundaries.append(boundary)
        return boundaries

    def _data_boundaries(self) -> List[datetime]:
        label = self.config.merge_marker_label
        boundaries = [epoch.date for epoch, texts in self.comments.items()
                      if any(label in text for text in texts)]
        if boundaries:
            return boundaries
        return self.merge_boundaries()

    # ------------------------------------------------------------------
    # Split
    # ------------------------------------------------------------------
    def split_merged_records(self) -> List[Record]:
        """Cut a merged record back into the records it was merged from.

        Cut points are the record comment epochs of the merge markers, or the
        header marker timestamps when the record comments carry none. One
        merge yields two records. A record that was never merged yields none.
        """
        if not self.is_merged():
            return []
        return algebra.split_record_at_boundaries(self.record, self._data_boundaries())

    def split(self) -> List["Rinex"]:
        """See :meth:`split_merged_records`, with headers and comments"""
        if not self.is_merged():
            return []
        boundaries = sorted(self._data_boundaries())
        records = algebra.split_record_at_boundaries(self.record, boundaries)
        lowers = [None] + boundaries
        uppers = boundaries + [None]
        parts = [self._with_record(record, lo, hi)
                 for record, lo, hi in zip(records, lowers, uppers)]
        logger.info(f"Split merged record into {len(parts)} parts")
        return parts

    def split_record_at_epoch(self, epoch: Epoch) -> Tuple[Record, Record]:
        """Record entries before ``epoch``, and at or after ``epoch``

        Raises
        ------
        EpochTooEarlyError, EpochTooLateError
            If ``epoch`` lies outside the recorded span
        RecordTypeError
            On antenna records
        """
        return algebra.split_record_at_epoch(self.record, epoch)

    def split_at_epoch(self, epoch: Epoch) -> Tuple["Rinex", "Rinex"]:
        """See :meth:`split_record_at_epoch`, with headers and comments"""
        before, after = self.split_record_at_epoch(epoch)
        return (self._with_record(before, upper=epoch.date),
                self._with_record(after, lower=epoch.date))

    # ------------------------------------------------------------------
    # Decimation
    # ------------------------------------------------------------------
    def decimate_by_interval_mut(self, interval: timedelta) -> None:
        """Keep epochs at least ``interval`` apart, starting from the first one.

        The header sampling interval is raised to ``interval``.

        Raises
        ------
        RecordTypeError
            On antenna records
        """
        algebra.decimate_by_interval(self.record, interval)
        current = self.header.sampling_interval
        if current is None or interval > current:
            self.header.sampling_interval = interval

    def decimate_by_interval(self, interval: timedelta) -> "Rinex":
        return self._apply(Rinex.decimate_by_interval_mut, interval)

    def decimate_by_ratio_mut(self, ratio: int) -> None:
        """Keep one entry out of ``ratio``, any record kind"""
        algebra.decimate_by_ratio(self.record, ratio)
        if self.header.sampling_interval is not None:
            self.header.sampling_interval *= ratio

    def decimate_by_ratio(self, ratio: int) -> "Rinex":
        return self._apply(Rinex.decimate_by_ratio_mut, ratio)

    # ------------------------------------------------------------------
    # Filters
    # ------------------------------------------------------------------
    def constellation_filter_mut(self, constellations: List[Constellation]) -> None:
        filters.constellation_filter(self.record, constellations)

    def constellation_filter(self, constellations: List[Constellation]) -> "Rinex":
        return self._apply(Rinex.constellation_filter_mut, constellations)

    def space_vehicule_filter_mut(self, vehicles: List[Sv]) -> None:
        filters.space_vehicule_filter(self.record, vehicles)

    def space_vehicule_filter(self, vehicles: List[Sv]) -> "Rinex":
        return self._apply(Rinex.space_vehicule_filter_mut, vehicles)

    def observable_filter_mut(self, codes: List[str]) -> None:
        filters.observable_filter(self.record, codes)

    def observable_filter(self, codes: List[str]) -> "Rinex":
        return self._apply(Rinex.observable_filter_mut, codes)

    def epoch_ok_filter_mut(self) -> None:
        filters.epoch_ok_filter(self.record)

    def epoch_ok_filter(self) -> "Rinex":
        return self._apply(Rinex.epoch_ok_filter_mut)

    def epoch_nok_filter_mut(self) -> None:
        filters.epoch_nok_filter(self.record)

    def epoch_nok_filter(self) -> "Rinex":
        return self._apply(Rinex.epoch_nok_filter_mut)

    def event_filter_mut(self, flag: EpochFlag) -> None:
        filters.event_filter(self.record, flag)

    def event_filter(self, flag: EpochFlag) -> "Rinex":
        return self._apply(Rinex.event_filter_mut, flag)

    def time_window_filter_mut(self, start: datetime, end: datetime) -> None:
        """Keep the ``[start, end)`` time window, header time bounds follow"""
        filters.time_window_filter(self.record, start, end)
        if self.record.kind.is_epoch_indexed():
            epochs = self.record.epochs()
            self.header.first_epoch = epochs[0].date if epochs else None
            self.header.last_epoch = epochs[-1].date if epochs else None
        self.comments = {epoch: texts for epoch, texts in self.comments.items()
                         if start <= epoch.date < end}

    def time_window_filter(self, start: datetime, end: datetime) -> "Rinex":
        return self._apply(Rinex.time_window_filter_mut, start, end)

    def lli_filter_mut(self, mask: LliFlags) -> None:
        filters.lli_filter(self.record, mask)

    def lli_filter(self, mask: LliFlags) -> "Rinex":
        return self._apply(Rinex.lli_filter_mut, mask)

    def lock_loss_filter_mut(self) -> None:
        """Keep observations declared with a loss of lock"""
        self.lli_filter_mut(LliFlags.LOCK_LOSS)

    def lock_loss_filter(self) -> "Rinex":
        return self.lli_filter(LliFlags.LOCK_LOSS)

    def lock_loss_events(self) -> List[Epoch]:
        """Epochs where at least one observation declared a loss of lock"""
        obs = self.lock_loss_filter().record.as_obs()
        if obs is None:
            return []
        return [epoch for epoch, (_, vehicles) in obs.items()
                if any(vehicles.values())]

    def minimum_sig_strength_filter_mut(self, minimum: Ssi) -> None:
        filters.minimum_sig_strength_filter(self.record, minimum)

    def minimum_sig_strength_filter(self, minimum: Ssi) -> "Rinex":
        return self._apply(Rinex.minimum_sig_strength_filter_mut, minimum)

    def legacy_nav_filter_mut(self) -> None:
        filters.legacy_nav_filter(self.record)

    def legacy_nav_filter(self) -> "Rinex":
        return self._apply(Rinex.legacy_nav_filter_mut)

    def modern_nav_filter_mut(self) -> None:
        filters.modern_nav_filter(self.record)

    def modern_nav_filter(self) -> "Rinex":
        return self._apply(Rinex.modern_nav_filter_mut)

    # ------------------------------------------------------------------
    # Derived observables
    # ------------------------------------------------------------------
    def space_vehicule_clocks_offset(self) -> Dict[Epoch, Dict[Sv, float]]:
        return derived.space_vehicule_clocks_offset(self.record)

    def space_vehicule_clocks_drift(self) -> Dict[Epoch, Dict[Sv, Tuple[float, float, float]]]:
        return derived.space_vehicule_clocks_drift(self.record)

    def ephemeris(self) -> Dict[Epoch, Dict[Sv, Tuple[float, float, float, Dict]]]:
        return derived.ephemeris(self.record)

    def system_time_offsets(self) -> Dict[Epoch, List[StoMessage]]:
        return derived.system_time_offsets(self.record)

    def ionospheric_models(self) -> Dict[Epoch, List[IonMessage]]:
        return derived.ionospheric_models(self.record)

    def klobuchar_ionospheric_models(self):
        return derived.klobuchar_ionospheric_models(self.record)

    def nequick_g_ionospheric_models(self):
        return derived.nequick_g_ionospheric_models(self.record)

    def bdgim_ionospheric_models(self):
        return derived.bdgim_ionospheric_models(self.record)

    def receiver_clock_offsets(self) -> Dict[Epoch, float]:
        return derived.receiver_clock_offsets(self.record)

    def pseudo_ranges(self):
        return derived.pseudo_ranges(self.record)

    def carrier_phases(self):
        return derived.carrier_phases(self.record)

    def dopplers(self):
        return derived.dopplers(self.record)

    def signal_strengths(self):
        return derived.signal_strengths(self.record)

    def iono_free_pseudo_ranges(self) -> Dict[Epoch, Dict[Sv, float]]:
        return derived.iono_free_pseudo_ranges(self.record)

    def iono_free_carrier_phases(self) -> Dict[Epoch, Dict[Sv, float]]:
        return derived.iono_free_carrier_phases(self.record)

    def pseudo_range_to_distance(self, sv_clock_offsets: Dict[Epoch, Dict[Sv, float]]):
        """See :func:`pyrnx.gnss.observables.pseudo_range_to_distance`"""
        return derived.pseudo_range_to_distance(self.record, sv_clock_offsets)
