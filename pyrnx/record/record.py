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

"""Record: the body of a RINEX file.

A record holds exactly one payload kind, identified by a :class:`RinexType`.
Five kinds are maps keyed by :class:`Epoch` and always iterate in ascending
epoch order; antenna records are keyed by antenna identifier and keep file
order.

The ``as_*`` accessors return the payload map, or ``None`` when the record
holds another kind. The ``expect_*`` accessors are for call sites that have
already checked the header type: a mismatch there is a programming error
and raises :class:`RecordTypeError`.

Example:
    >>> record = Record.observation()
    >>> record.as_nav() is None
    True
    >>> record.expect_obs()
    {}
"""

from __future__ import annotations

from copy import deepcopy
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from ..core.epoch import Epoch
from ..core.errors import RecordTypeError
from ..core.types import RinexType
from .antex import AntexRecord
from .clock import ClockRecord
from .ionex import IonexRecord
from .meteo import MeteoRecord
from .navigation import NavigationRecord
from .observation import ObservationRecord

# Epoch -> free text found in the record section
Comments = Dict[Epoch, List[str]]


def sort_by_key(mapping: Dict) -> None:
    """Reorder a dict in place so iteration follows ascending keys"""
    items = sorted(mapping.items(), key=lambda item: item[0])
    mapping.clear()
    mapping.update(items)


class Record:
    """RINEX record, one payload kind at a time

    Parameters
    ----------
    kind : RinexType
        Payload kind
    data : dict, optional
        Payload map, reordered by ascending key for epoch indexed kinds
    """

    __slots__ = ("kind", "data")

    def __init__(self, kind: RinexType, data: Optional[Dict] = None):
        self.kind = kind
        self.data = {} if data is None else data
        if kind.is_epoch_indexed():
            sort_by_key(self.data)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def observation(cls, data: Optional[ObservationRecord] = None) -> Record:
        return cls(RinexType.OBSERVATION_DATA, data)

    @classmethod
    def navigation(cls, data: Optional[NavigationRecord] = None) -> Record:
        return cls(RinexType.NAVIGATION_DATA, data)

    @classmethod
    def meteo(cls, data: Optional[MeteoRecord] = None) -> Record:
        return cls(RinexType.METEO_DATA, data)

    @classmethod
    def clock(cls, data: Optional[ClockRecord] = None) -> Record:
        return cls(RinexType.CLOCK_DATA, data)

    @classmethod
    def ionex(cls, data: Optional[IonexRecord] = None) -> Record:
        return cls(RinexType.IONOSPHERE_MAPS, data)

    @classmethod
    def antex(cls, data: Optional[AntexRecord] = None) -> Record:
        return cls(RinexType.ANTENNA_DATA, data)

    # ------------------------------------------------------------------
    # Variant access
    # ------------------------------------------------------------------
    def _as(self, kind: RinexType) -> Optional[Dict]:
        return self.data if self.kind is kind else None

    def as_obs(self) -> Optional[ObservationRecord]:
        return self._as(RinexType.OBSERVATION_DATA)

    def as_nav(self) -> Optional[NavigationRecord]:
        return self._as(RinexType.NAVIGATION_DATA)

    def as_meteo(self) -> Optional[MeteoRecord]:
        return self._as(RinexType.METEO_DATA)

    def as_clock(self) -> Optional[ClockRecord]:
        return self._as(RinexType.CLOCK_DATA)

    def as_ionex(self) -> Optional[IonexRecord]:
        return self._as(RinexType.IONOSPHERE_MAPS)

    def as_antex(self) -> Optional[AntexRecord]:
        return self._as(RinexType.ANTENNA_DATA)

    def expect(self, kind: RinexType) -> Dict:
        """Payload map of the given kind

        Raises
        ------
        RecordTypeError
            If this record holds another kind
        """
        if self.kind is not kind:
            raise RecordTypeError(kind, self.kind)
        return self.data

    def expect_obs(self) -> ObservationRecord:
        return self.expect(RinexType.OBSERVATION_DATA)

    def expect_nav(self) -> NavigationRecord:
        return self.expect(RinexType.NAVIGATION_DATA)

    def expect_meteo(self) -> MeteoRecord:
        return self.expect(RinexType.METEO_DATA)

    def expect_clock(self) -> ClockRecord:
        return self.expect(RinexType.CLOCK_DATA)

    def expect_ionex(self) -> IonexRecord:
        return self.expect(RinexType.IONOSPHERE_MAPS)

    def expect_antex(self) -> AntexRecord:
        return self.expect(RinexType.ANTENNA_DATA)

    def expect_epoch_indexed(self) -> Dict[Epoch, Any]:
        """Payload map of any epoch indexed kind

        Raises
        ------
        RecordTypeError
            If this is an antenna record
        """
        if not self.kind.is_epoch_indexed():
            raise RecordTypeError("an epoch indexed", self.kind)
        return self.data

    # ------------------------------------------------------------------
    # Generic map operations
    # ------------------------------------------------------------------
    def is_empty(self) -> bool:
        return not self.data

    def __len__(self):
        return len(self.data)

    def keys(self) -> List:
        return list(self.data.keys())

    def epochs(self) -> List[Epoch]:
        return list(self.expect_epoch_indexed().keys())

    def items(self) -> Iterable[Tuple[Any, Any]]:
        return self.data.items()

    def retain(self, predicate: Callable[[Any, Any], bool]) -> None:
        """Keep entries for which ``predicate(key, value)`` is true.

        The predicate is evaluated once per entry, in iteration order, so
        stateful predicates (decimation) see keys in ascending order.
        """
        dropped = [key for key, value in self.data.items() if not predicate(key, value)]
        for key in dropped:
            del self.data[key]

    def insert(self, key, value) -> None:
        """Insert or replace one entry, keeping key order.

        On an epoch collision both the stored key (and its flag) and the
        value are replaced.
        """
        if not self.kind.is_epoch_indexed():
            self.data[key] = value
            return
        last = next(reversed(self.data), None) if self.data else None
        replaced = self.data.pop(key, None) is not None
        self.data[key] = value
        if replaced or (last is not None and key < last):
            sort_by_key(self.data)

    def update(self, items: Iterable[Tuple[Any, Any]]) -> None:
        """Insert every ``(key, value)`` pair, last writer wins"""
        if not self.kind.is_epoch_indexed():
            for key, value in items:
                self.data[key] = value
            return
        for key, value in items:
            self.data.pop(key, None)
            self.data[key] = value
        sort_by_key(self.data)

    def copy(self) -> Record:
        """Deep copy, sharing no mutable storage with self"""
        return Record(self.kind, deepcopy(self.data))

    def __deepcopy__(self, memo):
        return Record(self.kind, deepcopy(self.data, memo))

    def __eq__(self, other):
        if not isinstance(other, Record):
            return NotImplemented
        if self.kind is not other.kind or list(self.data.keys()) != list(other.data.keys()):
            return False
        return all(self.data[key] == other.data[key] for key in self.data)

    def __repr__(self):
        return f"Record({self.kind.name}, {len(self.data)} entries)"
