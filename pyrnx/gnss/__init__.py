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

"""GNSS signal helpers: carrier frequencies, combinations, derived observables"""

from . import observables
from .frequency import CHANNELS, code2band, code2freq, code2wavelength
from .ionosphere_free import combine_first_two, ionosphere_free_combination, ionosphere_free_variance

__all__ = [
    'observables',
    'CHANNELS', 'code2band', 'code2freq', 'code2wavelength',
    'combine_first_two', 'ionosphere_free_combination', 'ionosphere_free_variance',
]
