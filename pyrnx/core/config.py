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

"""Processing configuration shared by RINEX operations"""

from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Callable

from .constants import (
    MERGE_MARKER_DATE_FORMAT,
    MERGE_MARKER_LABEL,
    MERGE_MARKER_LABEL_WIDTH,
    MERGE_MARKER_PRODUCER_WIDTH,
)


def _default_producer_id() -> str:
    from .. import __version__
    return f"pyrnx-{__version__}"


def utc_now() -> datetime:
    """Current UTC time, naive, truncated to the second"""
    return datetime.now(timezone.utc).replace(tzinfo=None, microsecond=0)


@dataclass
class ProcessingConfig:
    """Configuration of record operations

    Attributes
    ----------
    producer_id : str
        Program identifier stamped in merge marker comments
    merge_marker_label : str
        Label identifying merge marker comments
    clock : Callable[[], datetime]
        Source of the (naive UTC) wall-clock time used for merge markers
    """
    producer_id: str = field(default_factory=_default_producer_id)
    merge_marker_label: str = MERGE_MARKER_LABEL
    clock: Callable[[], datetime] = utc_now

    def __post_init__(self):
        if len(self.producer_id) > MERGE_MARKER_PRODUCER_WIDTH:
            raise ValueError(f"producer_id exceeds {MERGE_MARKER_PRODUCER_WIDTH} characters: "
                             f"{self.producer_id!r}")
        if len(self.merge_marker_label) > MERGE_MARKER_LABEL_WIDTH:
            raise ValueError(f"merge_marker_label exceeds {MERGE_MARKER_LABEL_WIDTH} characters: "
                             f"{self.merge_marker_label!r}")

    def merge_marker(self, when: datetime) -> str:
        """Format the header comment stamped by a merge operation"""
        return (f"{self.producer_id:<{MERGE_MARKER_PRODUCER_WIDTH}}"
                f"{self.merge_marker_label:<{MERGE_MARKER_LABEL_WIDTH}}"
                f"{when.strftime(MERGE_MARKER_DATE_FORMAT)} UTC")

    @classmethod
    def from_dict(cls, config: dict) -> "ProcessingConfig":
        """Build configuration from dictionary, unknown keys are rejected

        Example config:
        {
            'producer_id': 'my-tool-1.2',
        }
        """
        known = {'producer_id', 'merge_marker_label', 'clock'}
        unknown = set(config) - known
        if unknown:
            raise ValueError(f"Unknown configuration keys: {sorted(unknown)}")
        return cls(**config)

    def to_dict(self) -> dict:
        result = asdict(self)
        result.pop('clock')
        return result


# Module default, used when no configuration is given explicitly
default_config = ProcessingConfig()
