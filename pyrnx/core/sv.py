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

"""Space vehicle (satellite) identifier.

A space vehicle is identified by its constellation and PRN, written in
RINEX as the system character followed by a two digit PRN, e.g. ``G07``.
Sv values are hashable and totally ordered (constellation, then PRN) so
they can key the per-epoch maps of every record type.
"""

from dataclasses import dataclass

from .constellation import Constellation


@dataclass(frozen=True, order=True)
class Sv:
    """Space vehicle identifier

    Attributes
    ----------
    constellation : Constellation
        Constellation this vehicle belongs to
    prn : int
        PRN number within the constellation
    """
    constellation: Constellation
    prn: int

    @classmethod
    def from_str(cls, text: str) -> "Sv":
        """Parse a RINEX space vehicle descriptor such as ``G07`` or ``E 5``.

        Raises
        ------
        ValueError
            If the descriptor cannot be decoded
        """
        text = text.strip()
        if len(text) < 2:
            raise ValueError(f"Invalid space vehicle descriptor: {text!r}")
        constellation = Constellation.from_1_letter_code(text[0])
        try:
            prn = int(text[1:].strip())
        except ValueError:
            raise ValueError(f"Invalid space vehicle PRN: {text!r}") from None
        return cls(constellation, prn)

    def __str__(self):
        return f"{self.constellation.to_1_letter_code()}{self.prn:02d}"
