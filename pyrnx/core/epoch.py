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

"""Epoch: sampling timestamp and recording quality flag"""

from datetime import datetime, timedelta
from enum import Enum

from .constants import EPOCH_TEXT_FORMAT


class EpochFlag(Enum):
    """RINEX epoch flag

    Attributes
    ----------
    OK : int
        Nominal epoch
    POWER_FAILURE : int
        Power failure between previous and current epoch
    ANTENNA_BEING_MOVED : int
        Start of moving antenna
    NEW_SITE_OCCUPATION : int
        New site occupation (end of kinematic data)
    HEADER_INFORMATION_FOLLOWS : int
        Header information follows
    EXTERNAL_EVENT : int
        External event, epoch is significant
    CYCLE_SLIP : int
        Cycle slip records follow
    """
    OK = 0
    POWER_FAILURE = 1
    ANTENNA_BEING_MOVED = 2
    NEW_SITE_OCCUPATION = 3
    HEADER_INFORMATION_FOLLOWS = 4
    EXTERNAL_EVENT = 5
    CYCLE_SLIP = 6

    def is_ok(self) -> bool:
        return self is EpochFlag.OK

    @classmethod
    def from_str(cls, text: str) -> "EpochFlag":
        """Decode a flag from its RINEX digit or its name"""
        key = text.strip()
        if key.isdigit():
            return cls(int(key))
        normalized = key.upper().replace(" ", "_").replace("-", "_")
        try:
            return cls[normalized]
        except KeyError:
            raise ValueError(f"Unknown epoch flag: {text!r}") from None


class Epoch:
    """Sampling instant of a record entry.

    Epochs are ordered, compared and hashed on ``date`` alone: the flag
    describes the quality of the sample and never takes part in keying,
    so one timestamp identifies at most one entry of a record.

    Parameters
    ----------
    date : datetime
        Sampling timestamp, truncated to the second
    flag : EpochFlag
        Recording quality flag, default ``EpochFlag.OK``
    """

    __slots__ = ("date", "flag")

    def __init__(self, date: datetime, flag: EpochFlag = EpochFlag.OK):
        self.date = date.replace(microsecond=0)
        self.flag = flag

    @classmethod
    def from_str(cls, text: str) -> "Epoch":
        """Parse ``"YYYY-mm-dd HH:MM:SS [flag]"``"""
        items = text.split()
        if len(items) < 2:
            raise ValueError(f"Invalid epoch description: {text!r}")
        date = datetime.strptime(f"{items[0]} {items[1]}", EPOCH_TEXT_FORMAT)
        flag = EpochFlag.OK
        if len(items) > 2:
            flag = EpochFlag.from_str(" ".join(items[2:]))
        return cls(date, flag)

    def with_flag(self, flag: EpochFlag) -> "Epoch":
        return Epoch(self.date, flag)

    def __eq__(self, other):
        if not isinstance(other, Epoch):
            return NotImplemented
        return self.date == other.date

    def __lt__(self, other):
        if not isinstance(other, Epoch):
            return NotImplemented
        return self.date < other.date

    def __le__(self, other):
        if not isinstance(other, Epoch):
            return NotImplemented
        return self.date <= other.date

    def __gt__(self, other):
        if not isinstance(other, Epoch):
            return NotImplemented
        return self.date > other.date

    def __ge__(self, other):
        if not isinstance(other, Epoch):
            return NotImplemented
        return self.date >= other.date

    def __hash__(self):
        return hash(self.date)

    def __sub__(self, other: "Epoch") -> timedelta:
        if isinstance(other, Epoch):
            return self.date - other.date
        return NotImplemented

    def __repr__(self):
        return f"Epoch({self.date.strftime(EPOCH_TEXT_FORMAT)}, {self.flag.name})"

    def __str__(self):
        return f"{self.date.strftime(EPOCH_TEXT_FORMAT)} {self.flag.name}"

    def __deepcopy__(self, memo):
        return Epoch(self.date, self.flag)

    def __copy__(self):
        return Epoch(self.date, self.flag)

