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

"""
Ionosphere-free combination for dual-frequency GNSS processing.

This module forms the ionosphere-free combination of two same-class
observables (two pseudo ranges, or two carrier phases) measured on two
distinct carrier frequencies.
"""

from typing import Optional, Sequence, Tuple

import numpy as np

from ..core.constants import FREQ_L1, FREQ_L2
from ..core.constellation import Constellation
from .frequency import code2freq


def ionosphere_free_combination(obs1, obs2, freq1=FREQ_L1, freq2=FREQ_L2):
    """
    Form ionosphere-free linear combination of observations.

    The ionosphere-free combination eliminates first-order ionospheric delay:
    IF = (f1²*obs1 - f2²*obs2) / (f1² - f2²)

    Parameters
    ----------
    obs1 : float or np.ndarray
        Observation on the first carrier (pseudorange in meters or carrier
        phase in cycles)
    obs2 : float or np.ndarray
        Observation on the second carrier (same units as obs1)
    freq1 : float
        First carrier frequency in Hz (default: 1575.42 MHz)
    freq2 : float
        Second carrier frequency in Hz (default: 1227.60 MHz)

    Returns
    -------
    float or np.ndarray
        Ionosphere-free combination in same units as input

    Raises
    ------
    ValueError
        If both frequencies are equal, the combination is undefined

    Notes
    -----
    Two identical values combine to that same value, whatever the two
    distinct frequencies.
    """
    f1_sq = freq1 * freq1
    f2_sq = freq2 * freq2
    denominator = f1_sq - f2_sq

    if denominator == 0.0:
        raise ValueError(f"Ionosphere-free combination needs two distinct frequencies, got {freq1} Hz twice")

    # v1 + f2²(v1 - v2) / (f1² - f2²), exact when both values are equal
    return obs1 + f2_sq * (obs1 - obs2) / denominator


def ionosphere_free_variance(sigma1, sigma2, freq1=FREQ_L1, freq2=FREQ_L2):
    """
    Calculate standard deviation of ionosphere-free combination.

    Parameters
    ----------
    sigma1 : float
        Standard deviation of the first observation
    sigma2 : float
        Standard deviation of the second observation
    freq1 : float
        First carrier frequency in Hz
    freq2 : float
        Second carrier frequency in Hz

    Returns
    -------
    float
        Standard deviation of ionosphere-free combination

    Notes
    -----
    The noise is amplified by approximately 3x compared to single frequency.
    """
    f1_sq = freq1 * freq1
    f2_sq = freq2 * freq2
    denominator = f1_sq - f2_sq

    if denominator == 0.0:
        raise ValueError(f"Ionosphere-free combination needs two distinct frequencies, got {freq1} Hz twice")

    coeff1 = f1_sq / denominator
    coeff2 = f2_sq / denominator

    # Error propagation
    return np.sqrt((coeff1 * sigma1) ** 2 + (coeff2 * sigma2) ** 2)


def combine_first_two(constellation: Constellation,
                      observations: Sequence[Tuple[str, float]]) -> Optional[float]:
    """Ionosphere-free combination of the first two observables of a list.

    Parameters
    ----------
    constellation : Constellation
        Constellation of the observed satellite, selects the channel table
    observations : sequence of (code, value)
        Same class observables, in record order

    Returns
    -------
    float or None
        Combination of the first two observables, None when there are fewer
        than two observables, when a code has no known carrier, or when both
        carriers are the same (``C1C`` and ``C1W``)
    """
    if len(observations) < 2:
        return None
    (code1, value1), (code2, value2) = observations[0], observations[1]
    freq1 = code2freq(constellation, code1)
    freq2 = code2freq(constellation, code2)
    if freq1 is None or freq2 is None or freq1 == freq2:
        return None
    return ionosphere_free_combination(value1, value2, freq1, freq2)
