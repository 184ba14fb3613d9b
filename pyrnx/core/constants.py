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

"""GNSS Constants and RINEX Processing Parameters"""

# Physical Constants
CLIGHT = 299792458.0  # speed of light (m/s)

# GPS frequencies
FREQ_L1 = 1.57542E9   # L1 frequency (Hz)
FREQ_L2 = 1.22760E9   # L2 frequency (Hz)
FREQ_L5 = 1.17645E9   # L5 frequency (Hz)

# GLONASS frequencies (nominal, FDMA channel 0)
FREQ_G1 = 1.60200E9   # GLONASS G1 base frequency (Hz)
FREQ_G2 = 1.24600E9   # GLONASS G2 base frequency (Hz)
FREQ_G3 = 1.202025E9  # GLONASS G3 CDMA frequency (Hz)
FREQ_G1a = 1.600995E9  # GLONASS G1a CDMA frequency (Hz)
FREQ_G2a = 1.248060E9  # GLONASS G2a CDMA frequency (Hz)
DFREQ_G1 = 0.56250E6  # GLONASS G1 channel spacing (Hz)
DFREQ_G2 = 0.43750E6  # GLONASS G2 channel spacing (Hz)

# Galileo frequencies
FREQ_E1 = 1.57542E9   # E1 frequency (Hz) - same as GPS L1
FREQ_E5a = 1.17645E9  # E5a frequency (Hz) - same as GPS L5
FREQ_E5b = 1.20714E9  # E5b frequency (Hz)
FREQ_E5 = 1.191795E9  # E5 (E5a+E5b) frequency (Hz)
FREQ_E6 = 1.27875E9   # E6 frequency (Hz)

# BeiDou frequencies
FREQ_B1I = 1.561098E9  # BeiDou B1I frequency (Hz)
FREQ_B1C = 1.57542E9   # BeiDou B1C frequency (Hz) - same as GPS L1
FREQ_B2a = 1.17645E9   # BeiDou B2a frequency (Hz) - same as GPS L5
FREQ_B2b = 1.20714E9   # BeiDou B2b/B2I frequency (Hz) - same as Galileo E5b
FREQ_B2 = 1.191795E9   # BeiDou B2 (B2a+B2b) frequency (Hz)
FREQ_B3 = 1.26852E9    # BeiDou B3 frequency (Hz)

# QZSS frequencies (same as GPS)
FREQ_J1 = FREQ_L1      # QZSS L1 frequency (Hz)
FREQ_J2 = FREQ_L2      # QZSS L2 frequency (Hz)
FREQ_J5 = FREQ_L5      # QZSS L5 frequency (Hz)
FREQ_J6 = FREQ_E6      # QZSS L6/LEX frequency (Hz)

# SBAS frequencies (same as GPS L1/L5)
FREQ_S1 = FREQ_L1      # SBAS L1 frequency (Hz)
FREQ_S5 = FREQ_L5      # SBAS L5 frequency (Hz)

# IRNSS frequencies
FREQ_I5 = FREQ_L5      # IRNSS L5 frequency (Hz)
FREQ_IS = 2.492028E9   # IRNSS S frequency (Hz)

# Observable code classes, keyed on the first letter of the RINEX code
PSEUDO_RANGE_PREFIXES = ("C", "P")  # "P" is the legacy (V2) GPS/GLO P-code
PHASE_PREFIXES = ("L",)
DOPPLER_PREFIXES = ("D",)
SIG_STRENGTH_PREFIXES = ("S",)

# Header comments
COMMENT_LABEL = "COMMENT"
CRINEX_MARKER_COMMENT = "COMPACT RINEX FORMAT"

# File merge marker
# "<producer id, 20 columns>FILE MERGE          <YYYYmmdd HHMMSS> UTC"
MERGE_MARKER_LABEL = "FILE MERGE"
MERGE_MARKER_PRODUCER_WIDTH = 20
MERGE_MARKER_LABEL_WIDTH = 20
MERGE_MARKER_DATE_OFFSET = 40
MERGE_MARKER_DATE_FORMAT = "%Y%m%d %H%M%S"
MERGE_MARKER_PARSE_FORMAT = "%Y%m%d %H%M%S UTC"

# Epoch text format accepted by Epoch.from_str
EPOCH_TEXT_FORMAT = "%Y-%m-%d %H:%M:%S"
