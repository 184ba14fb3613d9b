#!/usr/bin/env python3
"""Test suite for the Record sum type and record payloads"""

import unittest
from datetime import datetime, timedelta

import numpy as np
import pytest

from pyrnx.core.epoch import Epoch, EpochFlag
from pyrnx.core.errors import RecordTypeError
from pyrnx.core.header import Header
from pyrnx.core.sv import Sv
from pyrnx.core.types import RinexType
from pyrnx.record import (
    AntennaCalibration,
    FrequencyCalibration,
    IonMessage,
    KbModel,
    MeteoObservable,
    ObservationData,
    Record,
    Sensor,
    Ssi,
    TecMap,
    group_frames,
    is_doppler_code,
    is_phase_carrier_code,
    is_pseudo_range_code,
    is_sig_strength_code,
)
from pyrnx.record.navigation import Ephemeris, FrameClass, MsgType, StoMessage, frame_class

T0 = datetime(2023, 1, 1)


def epoch(seconds, flag=EpochFlag.OK):
    return Epoch(T0 + timedelta(seconds=seconds), flag)


class TestRecordAccess(unittest.TestCase):
    """Test variant accessors"""

    def test_as_accessors(self):
        record = Record.meteo({epoch(0): {MeteoObservable.PRESSURE: 1013.2}})
        self.assertIs(record.kind, RinexType.METEO_DATA)
        self.assertIsNotNone(record.as_meteo())
        self.assertIsNone(record.as_obs())
        self.assertIsNone(record.as_nav())
        self.assertIsNone(record.as_clock())
        self.assertIsNone(record.as_ionex())
        self.assertIsNone(record.as_antex())

    def test_expect_mismatch_raises(self):
        record = Record.observation()
        self.assertEqual(record.expect_obs(), {})
        with self.assertRaises(RecordTypeError):
            record.expect_nav()
        # also a TypeError for generic handlers
        with self.assertRaises(TypeError):
            record.expect_meteo()

    def test_antex_has_no_epochs(self):
        record = Record.antex({"TRM59800.00 NONE": AntennaCalibration("TRM59800.00")})
        with self.assertRaises(RecordTypeError):
            record.epochs()
        self.assertEqual(record.keys(), ["TRM59800.00 NONE"])


class TestRecordOrdering(unittest.TestCase):
    """Test that epoch keyed records iterate in ascending order"""

    def test_constructor_sorts(self):
        data = {epoch(60): {}, epoch(0): {}, epoch(30): {}}
        record = Record.meteo(data)
        self.assertEqual(record.epochs(), [epoch(0), epoch(30), epoch(60)])

    def test_insert_keeps_order(self):
        record = Record.meteo({epoch(0): {}, epoch(60): {}})
        record.insert(epoch(30), {MeteoObservable.TEMPERATURE: 12.0})
        self.assertEqual(record.epochs(), [epoch(0), epoch(30), epoch(60)])

    def test_insert_replaces_key_and_flag(self):
        record = Record.meteo({epoch(0): {MeteoObservable.PRESSURE: 1.0}})
        record.insert(epoch(0, EpochFlag.POWER_FAILURE), {MeteoObservable.PRESSURE: 2.0})
        self.assertEqual(len(record), 1)
        key = record.epochs()[0]
        self.assertIs(key.flag, EpochFlag.POWER_FAILURE)
        self.assertEqual(record.data[key], {MeteoObservable.PRESSURE: 2.0})

    def test_update_last_writer_wins(self):
        record = Record.meteo({epoch(0): {MeteoObservable.PRESSURE: 1.0}, epoch(60): {}})
        record.update([(epoch(30), {}), (epoch(0), {MeteoObservable.TEMPERATURE: 3.0})])
        self.assertEqual(record.epochs(), [epoch(0), epoch(30), epoch(60)])
        # whole value replaced, no field level union
        self.assertEqual(record.data[epoch(0)], {MeteoObservable.TEMPERATURE: 3.0})

    def test_retain_in_order(self):
        record = Record.meteo({epoch(s): {} for s in (30, 0, 60, 90)})
        seen = []

        def predicate(key, _):
            seen.append(key)
            return key.date.second == 0

        record.retain(predicate)
        self.assertEqual(seen, [epoch(0), epoch(30), epoch(60), epoch(90)])
        self.assertEqual(record.epochs(), [epoch(0), epoch(60)])

    def test_copy_is_disjoint(self):
        record = Record.meteo({epoch(0): {MeteoObservable.PRESSURE: 1.0}})
        clone = record.copy()
        self.assertEqual(clone, record)
        clone.data[epoch(0)][MeteoObservable.PRESSURE] = 2.0
        self.assertEqual(record.data[epoch(0)][MeteoObservable.PRESSURE], 1.0)


def test_observable_code_classes():
    assert is_pseudo_range_code("C1C")
    assert is_pseudo_range_code("P2")
    assert not is_pseudo_range_code("L1C")
    assert is_phase_carrier_code("L5Q")
    assert is_doppler_code("D1C")
    assert is_sig_strength_code("S2W")
    assert not is_sig_strength_code("C1C")


def test_pr_real_distance():
    data = ObservationData(20_000_000.0)
    distance = data.pr_real_distance(rcvr_offset=1.0e-6, sv_offset=1.0e-4)
    assert distance == pytest.approx(20_000_000.0 - 299792458.0 * (1.0e-6 - 1.0e-4))


@pytest.mark.parametrize("snr, expected", [
    (0.0, Ssi.DBHZ_0),
    (10.0, Ssi.DBHZ_12),
    (33.0, Ssi.DBHZ_30_35),
    (45.0, Ssi.DBHZ_42_47),
    (60.0, Ssi.DBHZ_54),
])
def test_ssi_from_dbhz(snr, expected):
    assert Ssi.from_dbhz(snr) is expected


def test_ssi_quality():
    assert Ssi.DBHZ_18_23.is_bad()
    assert Ssi.DBHZ_36_41.is_ok()
    assert Ssi.DBHZ_54.is_excellent()
    assert not Ssi.DBHZ_42_47.is_excellent()


def test_navigation_frames():
    g07 = Sv.from_str("G07")
    eph = Ephemeris(MsgType.LNAV, g07, 1e-4, 1e-12, 0.0, {"iode": 12.0})
    sto = StoMessage("GPUT", "UTC(USNO)", 0, (1e-9, 0.0, 0.0))
    ion = IonMessage(KbModel((1e-8, 0.0, 0.0, 0.0), (9e4, 0.0, 0.0, 0.0)))
    assert frame_class(eph) is FrameClass.EPHEMERIS
    assert ion.as_klobuchar() is not None
    assert ion.as_nequick_g() is None
    grouped = group_frames([eph, sto, ion])
    assert grouped[FrameClass.SYSTEM_TIME_OFFSET] == [sto]
    assert grouped[FrameClass.IONOSPHERIC_MODEL] == [ion]
    assert MsgType.from_str("lnav").is_legacy()
    assert not MsgType.CNAV.is_legacy()


def test_sensors_united_on_header_merge():
    barometer = Sensor("PAROSCIENTIFIC", "740-16B", MeteoObservable.PRESSURE, 0.2)
    thermometer = Sensor("VAISALA", "HMP155", MeteoObservable.from_str("td"), 0.1)
    a = Header(rinex_type=RinexType.METEO_DATA, sensors=[barometer])
    b = Header(rinex_type=RinexType.METEO_DATA, sensors=[thermometer, barometer])
    assert a.merge(b).sensors == [barometer, thermometer]
    with pytest.raises(ValueError):
        MeteoObservable.from_str("XX")


def test_tec_map():
    grid = np.arange(6.0).reshape(2, 3)
    tec = TecMap(grid, [87.5, 85.0], [-180.0, -175.0, -170.0])
    assert tec == TecMap(grid.copy(), [87.5, 85.0], [-180.0, -175.0, -170.0])
    with pytest.raises(ValueError):
        TecMap(grid, rms=np.zeros((3, 3)))


def test_frequency_calibration_equality():
    a = FrequencyCalibration("G01", (0.1, 0.2, 66.0), np.array([0.0, -0.5]))
    b = FrequencyCalibration("G01", (0.1, 0.2, 66.0), np.array([0.0, -0.5]))
    assert a == b
