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

"""GNSS carrier frequency lookup from RINEX observable codes.

The second character of an observable code is its frequency band
(``C1C`` -> band 1, ``L5Q`` -> band 5, legacy ``P2`` -> band 2). The band is
resolved to a carrier frequency with a per constellation channel table.

Functions:
    code2band: Frequency band digit of an observable code
    code2freq: Carrier frequency of an observable code
    code2wavelength: Carrier wavelength of an observable code

Notes:
    - GLONASS FDMA bands (1, 2) resolve to the channel 0 frequency unless a
      frequency channel number is given
    - Unknown constellations or bands resolve to None
    - All frequencies are in Hz, wavelengths in meters
"""

from typing import Optional

from ..core.constants import *
from ..core.constellation import Constellation

# constellation -> band digit -> carrier frequency (Hz)
CHANNELS = {
    Constellation.GPS: {1: FREQ_L1, 2: FREQ_L2, 5: FREQ_L5},
    Constellation.GLONASS: {1: FREQ_G1, 2: FREQ_G2, 3: FREQ_G3, 4: FREQ_G1a, 6: FREQ_G2a},
    Constellation.GALILEO: {1: FREQ_E1, 5: FREQ_E5a, 7: FREQ_E5b, 8: FREQ_E5, 6: FREQ_E6},
    Constellation.BEIDOU: {2: FREQ_B1I, 1: FREQ_B1C, 5: FREQ_B2a, 7: FREQ_B2b,
                           8: FREQ_B2, 6: FREQ_B3},
    Constellation.QZSS: {1: FREQ_J1, 2: FREQ_J2, 5: FREQ_J5, 6: FREQ_J6},
    Constellation.SBAS: {1: FREQ_S1, 5: FREQ_S5},
    Constellation.IRNSS: {5: FREQ_I5, 9: FREQ_IS},
}

# GLONASS FDMA bands and their channel spacing
_GLO_FDMA_SPACING = {1: DFREQ_G1, 2: DFREQ_G2}


def code2band(code: str) -> Optional[int]:
    """Frequency band digit of an observable code, None if it has none"""
    if len(code) < 2 or not code[1].isdigit():
        return None
    return int(code[1])


def code2freq(constellation: Constellation, code: str, glo_fcn: int = 0) -> Optional[float]:
    """Get the carrier frequency an observable was measured on.

    Parameters
    ----------
    constellation : Constellation
        Constellation of the observed satellite
    code : str
        RINEX observable code, e.g. ``C1C``, ``L2W``, ``P1``
    glo_fcn : int, optional
        GLONASS frequency channel number (-7 to +6), only used on the
        GLONASS FDMA bands. Default is 0.

    Returns
    -------
    float or None
        Carrier frequency in Hz, None if the band is unknown for this
        constellation

    Examples
    --------
    >>> code2freq(Constellation.GPS, "C1C") / 1e6
    1575.42
    >>> code2freq(Constellation.GALILEO, "L2X") is None
    True
    """
    band = code2band(code)
    if band is None:
        return None
    freq = CHANNELS.get(constellation, {}).get(band)
    if freq is None:
        return None
    if constellation is Constellation.GLONASS and band in _GLO_FDMA_SPACING:
        freq += glo_fcn * _GLO_FDMA_SPACING[band]
    return freq


def code2wavelength(constellation: Constellation, code: str, glo_fcn: int = 0) -> Optional[float]:
    """Carrier wavelength (m) of an observable code, None if unknown"""
    freq = code2freq(constellation, code, glo_fcn)
    if freq is None:
        return None
    return CLIGHT / freq
