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

"""Tabular export of records and derived observables"""

import logging
from typing import Dict

import numpy as np
import pandas as pd

from ..core.types import RinexType
from ..record.record import Record

logger = logging.getLogger(__name__)

OBSERVATION_COLUMNS = ['time', 'flag', 'clock_offset', 'sv', 'code', 'value', 'lli', 'ssi']
METEO_COLUMNS = ['time', 'flag', 'observable', 'value']
CLOCK_COLUMNS = ['time', 'data_type', 'system', 'bias', 'bias_sigma',
                 'rate', 'rate_sigma', 'accel', 'accel_sigma']
DERIVED_COLUMNS = ['time', 'sv', 'code', 'value']


def observation_to_dataframe(record: Record) -> pd.DataFrame:
    """
    Flatten an observation record, one row per observable

    Parameters:
    -----------
    record : Record
        Observation record

    Returns:
    --------
    pd.DataFrame
        Columns: time, flag, clock_offset, sv, code, value, lli, ssi.
        Missing clock offsets and indicators are NaN.
    """
    rows = []
    for epoch, (clock_offset, vehicles) in record.expect_obs().items():
        for sv, observations in vehicles.items():
            for code, data in observations.items():
                rows.append((
                    epoch.date, epoch.flag.name,
                    np.nan if clock_offset is None else clock_offset,
                    str(sv), code, data.obs,
                    np.nan if data.lli is None else int(data.lli),
                    np.nan if data.ssi is None else int(data.ssi),
                ))
    return pd.DataFrame(rows, columns=OBSERVATION_COLUMNS)


def meteo_to_dataframe(record: Record) -> pd.DataFrame:
    """Flatten a meteo record, one row per sensor value"""
    rows = [
        (epoch.date, epoch.flag.name, str(observable), value)
        for epoch, entry in record.expect_meteo().items()
        for observable, value in entry.items()
    ]
    return pd.DataFrame(rows, columns=METEO_COLUMNS)


def clock_to_dataframe(record: Record) -> pd.DataFrame:
    """Flatten a clock record, one row per (data type, system)"""
    rows = []
    for epoch, entry in record.expect_clock().items():
        for data_type, systems in entry.items():
            for system, data in systems.items():
                rows.append((epoch.date, str(data_type), system, data.bias, data.bias_sigma,
                             data.rate, data.rate_sigma, data.accel, data.accel_sigma))
    df = pd.DataFrame(rows, columns=CLOCK_COLUMNS)
    # None -> NaN for the optional fields
    return df.astype({column: float for column in CLOCK_COLUMNS[3:]})


def derived_to_dataframe(derived: Dict) -> pd.DataFrame:
    """
    Flatten a derived observable mapping

    Parameters:
    -----------
    derived : dict
        ``{Epoch: {Sv: float}}`` (clock offsets, ionosphere-free
        combinations) or ``{Epoch: {Sv: [(code, value)]}}`` (pseudo ranges,
        distances...)

    Returns:
    --------
    pd.DataFrame
        Columns: time, sv, code, value. ``code`` is None for single valued
        mappings.
    """
    rows = []
    for epoch, vehicles in derived.items():
        for sv, values in vehicles.items():
            if isinstance(values, list):
                rows.extend((epoch.date, str(sv), code, value) for code, value in values)
            else:
                rows.append((epoch.date, str(sv), None, values))
    return pd.DataFrame(rows, columns=DERIVED_COLUMNS)


def to_dataframe(record: Record) -> pd.DataFrame:
    """Flatten a record of any tabular kind

    Raises
    ------
    ValueError
        If the record kind has no tabular form (navigation, maps, antenna)
    """
    exporters = {
        RinexType.OBSERVATION_DATA: observation_to_dataframe,
        RinexType.METEO_DATA: meteo_to_dataframe,
        RinexType.CLOCK_DATA: clock_to_dataframe,
    }
    exporter = exporters.get(record.kind)
    if exporter is None:
        raise ValueError(f"No tabular export for {record.kind.name} records")
    df = exporter(record)
    logger.debug(f"Exported {len(df)} rows from {record!r}")
    return df
