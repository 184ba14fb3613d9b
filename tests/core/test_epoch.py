#!/usr/bin/env python3
"""Test suite for epochs, space vehicles and constellations"""

import unittest
from datetime import datetime, timedelta

import pytest

from pyrnx.core.constellation import Constellation
from pyrnx.core.epoch import Epoch, EpochFlag
from pyrnx.core.sv import Sv
from pyrnx.core.types import RinexType


class TestEpoch(unittest.TestCase):
    """Test epoch ordering and keying"""

    def setUp(self):
        self.t0 = datetime(2023, 1, 1, 0, 0, 0)

    def test_ordering_ignores_flag(self):
        """Flag never takes part in ordering"""
        early = Epoch(self.t0, EpochFlag.POWER_FAILURE)
        late = Epoch(self.t0 + timedelta(seconds=30), EpochFlag.OK)
        self.assertLess(early, late)
        self.assertGreater(late, early)
        self.assertEqual(sorted([late, early]), [early, late])

    def test_equality_and_hash_on_date(self):
        """Same timestamp, different flags: one key"""
        a = Epoch(self.t0, EpochFlag.OK)
        b = Epoch(self.t0, EpochFlag.CYCLE_SLIP)
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))
        self.assertEqual(len({a: 1, b: 2}), 1)

    def test_second_resolution(self):
        epoch = Epoch(self.t0.replace(microsecond=750000))
        self.assertEqual(epoch.date, self.t0)

    def test_difference(self):
        a = Epoch(self.t0)
        b = Epoch(self.t0 + timedelta(minutes=5))
        self.assertEqual(b - a, timedelta(minutes=5))

    def test_from_str(self):
        epoch = Epoch.from_str("2023-01-01 00:00:30")
        self.assertEqual(epoch.date, self.t0 + timedelta(seconds=30))
        self.assertIs(epoch.flag, EpochFlag.OK)

        epoch = Epoch.from_str("2023-01-01 00:00:30 5")
        self.assertIs(epoch.flag, EpochFlag.EXTERNAL_EVENT)

        epoch = Epoch.from_str("2023-01-01 00:00:30 power_failure")
        self.assertIs(epoch.flag, EpochFlag.POWER_FAILURE)

    def test_from_str_invalid(self):
        with self.assertRaises(ValueError):
            Epoch.from_str("2023-01-01")
        with self.assertRaises(ValueError):
            Epoch.from_str("2023-01-01 00:00:00 not-a-flag")

    def test_with_flag(self):
        epoch = Epoch(self.t0).with_flag(EpochFlag.NEW_SITE_OCCUPATION)
        self.assertIs(epoch.flag, EpochFlag.NEW_SITE_OCCUPATION)
        self.assertEqual(epoch.date, self.t0)


class TestEpochFlag(unittest.TestCase):
    """Test epoch flag helpers"""

    def test_only_ok_is_ok(self):
        for flag in EpochFlag:
            self.assertEqual(flag.is_ok(), flag is EpochFlag.OK)

    def test_rinex_digits(self):
        self.assertEqual(EpochFlag.OK.value, 0)
        self.assertEqual(EpochFlag.POWER_FAILURE.value, 1)
        self.assertEqual(EpochFlag.CYCLE_SLIP.value, 6)


def test_sv_from_str():
    sv = Sv.from_str("G07")
    assert sv.constellation is Constellation.GPS
    assert sv.prn == 7
    assert str(sv) == "G07"
    assert Sv.from_str("E 5") == Sv(Constellation.GALILEO, 5)


@pytest.mark.parametrize("text", ["", "G", "X01", "Gxx"])
def test_sv_from_str_invalid(text):
    with pytest.raises(ValueError):
        Sv.from_str(text)


def test_sv_ordering():
    vehicles = [Sv.from_str(s) for s in ("E01", "G12", "G03", "R05")]
    assert [str(sv) for sv in sorted(vehicles)] == ["G03", "G12", "R05", "E01"]


def test_constellation_codes():
    for constellation in Constellation:
        assert Constellation.from_1_letter_code(constellation.to_1_letter_code()) is constellation
        assert Constellation.from_3_letter_code(constellation.to_3_letter_code()) is constellation
    assert Constellation.from_str("gal") is Constellation.GALILEO
    assert str(Constellation.BEIDOU) == "BDS"
    with pytest.raises(ValueError):
        Constellation.from_1_letter_code("X")


def test_rinex_type():
    assert RinexType.from_str("OBSERVATION DATA") is RinexType.OBSERVATION_DATA
    assert RinexType.from_str("N: GPS NAV DATA") is RinexType.NAVIGATION_DATA
    assert not RinexType.ANTENNA_DATA.is_epoch_indexed()
    assert RinexType.CLOCK_DATA.is_epoch_indexed()
