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

"""Temporal algebra on records: merge, split and decimation.

Every function works on any epoch indexed record kind through the generic
:class:`Record` map interface, so ordering is handled in one place: entries
are only ever removed, or inserted through :meth:`Record.update`, which
restores ascending epoch order.
"""

import logging
import math
from datetime import datetime, timedelta
from typing import List, Optional, Sequence, Tuple

import numpy as np
from numba import njit

from ..core.constants import (
    MERGE_MARKER_DATE_OFFSET,
    MERGE_MARKER_LABEL,
    MERGE_MARKER_PARSE_FORMAT,
)
from ..core.epoch import Epoch
from ..core.errors import EpochTooEarlyError, EpochTooLateError, RecordTypeError
from ..core.types import RinexType
from ..record.record import Record

logger = logging.getLogger(__name__)

# Kinds a record can be split at an epoch
SPLITTABLE_TYPES = (
    RinexType.OBSERVATION_DATA,
    RinexType.NAVIGATION_DATA,
    RinexType.METEO_DATA,
    RinexType.CLOCK_DATA,
    RinexType.IONOSPHERE_MAPS,
)


# ----------------------------------------------------------------------
# Merge
# ----------------------------------------------------------------------
def merge_records(record: Record, other: Record) -> None:
    """Insert every entry of ``other`` into ``record``, in place.

    On key collision the entry of ``other`` replaces the existing one as a
    whole (no field level union).

    Raises
    ------
    RecordTypeError
        If the records hold different kinds
    """
    if record.kind is not other.kind:
        raise RecordTypeError(record.kind, other.kind)
    collisions = sum(1 for key in other.data if key in record.data)
    if collisions:
        logger.debug(f"Merge replaces {collisions} existing entries")
    record.update((key, value) for key, value in other.copy().items())


def parse_merge_marker(comment: str, label: str = MERGE_MARKER_LABEL) -> Optional[datetime]:
    """Decode the timestamp of a merge marker comment.

    Returns None for comments that are not merge markers or whose
    timestamp cannot be decoded.
    """
    if label not in comment:
        return None
    content = comment[MERGE_MARKER_DATE_OFFSET:].strip()
    try:
        return datetime.strptime(content, MERGE_MARKER_PARSE_FORMAT)
    except ValueError:
        logger.debug(f"Ignoring merge marker with unreadable date: {comment!r}")
        return None


# ----------------------------------------------------------------------
# Split
# ----------------------------------------------------------------------
def split_record_at_epoch(record: Record, epoch: Epoch) -> Tuple[Record, Record]:
    """Split a record into entries strictly before ``epoch`` and entries at
    or after ``epoch`` (dates only, flags are ignored).

    Returns
    -------
    tuple of Record
        Deep copies (before, at_or_after)

    Raises
    ------
    EpochTooEarlyError
        If ``epoch`` precedes the first recorded epoch
    EpochTooLateError
        If ``epoch`` follows the last recorded epoch, or the record is empty
    RecordTypeError
        If the record kind has no time axis
    """
    if record.kind not in SPLITTABLE_TYPES:
        raise RecordTypeError("a splittable", record.kind)
    epochs = record.epochs()
    if not epochs:
        raise EpochTooLateError(epoch, None)
    if epoch.date < epochs[0].date:
        raise EpochTooEarlyError(epoch, epochs[0])
    if epoch.date > epochs[-1].date:
        raise EpochTooLateError(epoch, epochs[-1])

    before = record.copy()
    before.retain(lambda e, _: e.date < epoch.date)
    after = record.copy()
    after.retain(lambda e, _: e.date >= epoch.date)
    logger.debug(f"Split at {epoch}: {len(before)} + {len(after)} entries")
    return before, after


def split_record_at_boundaries(record: Record, boundaries: Sequence[datetime]) -> List[Record]:
    """Cut a record into contiguous half open intervals.

    The first interval starts at the first recorded epoch, each boundary
    closes the current interval ``[previous, boundary)`` and opens the next
    one; the last interval ``[last boundary, end]`` holds the remaining
    entries. An empty boundary list yields no record.
    """
    epochs = record.epochs()
    if not boundaries or not epochs:
        return []
    lower = epochs[0].date
    result: List[Record] = []
    for boundary in sorted(boundaries):
        part = record.copy()
        part.retain(lambda e, _, lo=lower, hi=boundary: lo <= e.date < hi)
        result.append(part)
        lower = boundary
    tail = record.copy()
    tail.retain(lambda e, _, lo=lower: e.date >= lo)
    result.append(tail)
    return result


# ----------------------------------------------------------------------
# Decimation
# ----------------------------------------------------------------------
@njit(cache=True)
def _interval_mask(seconds, min_seconds):
    """Greedy sweep: keep first sample, then any sample at least
    ``min_seconds`` after the last kept one."""
    n = seconds.shape[0]
    keep = np.zeros(n, dtype=np.bool_)
    if n == 0:
        return keep
    keep[0] = True
    last = seconds[0]
    for i in range(1, n):
        if seconds[i] - last >= min_seconds:
            keep[i] = True
            last = seconds[i]
    return keep


def interval_mask(epochs: Sequence[Epoch], min_duration: timedelta) -> np.ndarray:
    """Retention mask of a decimation to ``min_duration``.

    Epochs are second resolution, so a fractional duration is rounded up
    to the next second.
    """
    if min_duration < timedelta(0):
        raise ValueError(f"Decimation interval must be positive, got {min_duration}")
    if not epochs:
        return np.zeros(0, dtype=np.bool_)
    t0 = epochs[0].date
    seconds = np.array([int((e.date - t0).total_seconds()) for e in epochs], dtype=np.int64)
    return _interval_mask(seconds, np.int64(math.ceil(min_duration.total_seconds())))


def decimate_by_interval(record: Record, min_duration: timedelta) -> None:
    """Decimate a record in place to a minimum epoch spacing.

    Raises
    ------
    RecordTypeError
        If the record kind has no time axis
    """
    epochs = record.epochs()
    mask = interval_mask(epochs, min_duration)
    kept = {e for e, keep in zip(epochs, mask) if keep}
    size = len(record)
    record.retain(lambda e, _: e in kept)
    logger.debug(f"Decimation to {min_duration}: {size} -> {len(record)} entries")


def decimate_by_ratio(record: Record, ratio: int) -> None:
    """Keep one entry out of ``ratio``, by position, in place.

    Works on every record kind, antenna records included.
    """
    if ratio < 1:
        raise ValueError(f"Decimation ratio must be >= 1, got {ratio}")
    counter = 0

    def retain(_key, _value):
        nonlocal counter
        keep = counter % ratio == 0
        counter += 1
        return keep

    size = len(record)
    record.retain(retain)
    logger.debug(f"Decimation by {ratio}: {size} -> {len(record)} entries")
