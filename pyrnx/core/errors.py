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

"""Exceptions raised by RINEX record operations.

Split and merge failures are ordinary outcomes of user input (a split
point outside the recorded span, two files that cannot be combined) and
are raised as subclasses of :class:`RinexError` for callers to handle.
Accessing a record through the wrong variant is a programming error and
raises :class:`RecordTypeError`, which is also a ``TypeError``.
"""


class RinexError(Exception):
    """Base class for RINEX processing errors"""


class SplitError(RinexError):
    """Record cannot be split at the requested epoch"""


class EpochTooEarlyError(SplitError):
    """Requested split epoch precedes every recorded epoch"""

    def __init__(self, epoch=None, first=None):
        self.epoch = epoch
        self.first = first
        super().__init__(f"desired epoch {epoch} is too early (first epoch: {first})")


class EpochTooLateError(SplitError):
    """Requested split epoch follows every recorded epoch"""

    def __init__(self, epoch=None, last=None):
        self.epoch = epoch
        self.last = last
        super().__init__(f"desired epoch {epoch} is too late (last epoch: {last})")


class MergeError(RinexError):
    """Two RINEX cannot be merged"""


class HeaderMismatchError(MergeError):
    """Headers are not merge compatible"""


class RecordTypeError(RinexError, TypeError):
    """Record accessed through a variant it does not hold"""

    def __init__(self, expected, actual):
        self.expected = expected
        self.actual = actual
        super().__init__(f"expected {getattr(expected, 'name', expected)} record, "
                         f"got {getattr(actual, 'name', actual)}")
