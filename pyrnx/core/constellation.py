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

"""GNSS constellation identifiers.

Each constellation carries the bit-mask system ID used throughout pyrnx
together with its RINEX one-letter and three-letter codes:

- GPS (G / GPS)
- GLONASS (R / GLO)
- Galileo (E / GAL)
- BeiDou (C / BDS)
- QZSS (J / QZS)
- SBAS (S / SBS)
- IRNSS (I / IRN)
- Mixed (M / MIX), only meaningful in headers
"""

from enum import Enum


class Constellation(Enum):
    """GNSS constellation, valued by system ID bit mask"""
    GPS = 0x01
    GLONASS = 0x02
    GALILEO = 0x04
    BEIDOU = 0x08
    QZSS = 0x10
    SBAS = 0x20
    IRNSS = 0x40
    MIXED = 0xFF

    def __lt__(self, other):
        if not isinstance(other, Constellation):
            return NotImplemented
        return self.value < other.value

    def to_1_letter_code(self) -> str:
        return _TO_CHAR[self]

    def to_3_letter_code(self) -> str:
        return _TO_3CHAR[self]

    @classmethod
    def from_1_letter_code(cls, code: str) -> "Constellation":
        """Convert RINEX system character to constellation

        Raises
        ------
        ValueError
            If the character does not name a known system
        """
        key = code.strip().upper()
        if key not in _FROM_CHAR:
            raise ValueError(f"Unknown constellation code: {code!r}")
        return _FROM_CHAR[key]

    @classmethod
    def from_3_letter_code(cls, code: str) -> "Constellation":
        key = code.strip().upper()
        if key not in _FROM_3CHAR:
            raise ValueError(f"Unknown constellation code: {code!r}")
        return _FROM_3CHAR[key]

    @classmethod
    def from_str(cls, text: str) -> "Constellation":
        """Accept one-letter, three-letter or full constellation names"""
        key = text.strip().upper()
        if len(key) == 1:
            return cls.from_1_letter_code(key)
        if key in _FROM_3CHAR:
            return _FROM_3CHAR[key]
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown constellation: {text!r}") from None

    def __str__(self):
        return self.to_3_letter_code()


_TO_CHAR = {
    Constellation.GPS: 'G',
    Constellation.GLONASS: 'R',
    Constellation.GALILEO: 'E',
    Constellation.BEIDOU: 'C',
    Constellation.QZSS: 'J',
    Constellation.SBAS: 'S',
    Constellation.IRNSS: 'I',
    Constellation.MIXED: 'M',
}

_TO_3CHAR = {
    Constellation.GPS: 'GPS',
    Constellation.GLONASS: 'GLO',
    Constellation.GALILEO: 'GAL',
    Constellation.BEIDOU: 'BDS',
    Constellation.QZSS: 'QZS',
    Constellation.SBAS: 'SBS',
    Constellation.IRNSS: 'IRN',
    Constellation.MIXED: 'MIX',
}

_FROM_CHAR = {v: k for k, v in _TO_CHAR.items()}
_FROM_3CHAR = {v: k for k, v in _TO_3CHAR.items()}
