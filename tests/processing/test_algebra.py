#!/usr/bin/env python3
"""Test suite for merge, split and decimation of records"""

import math
import unittest
from datetime import datetime, timedelta

import numpy as np
import pytest

from pyrnx.core.epoch import Epoch
from pyrnx.core.errors import EpochTooEarlyError, EpochTooLateError, RecordTypeError, SplitError
from pyrnx.core.sv import Sv
from pyrnx.processing.algebra import (
    decimate_by_interval,
    decimate_by_ratio,
    interval_mask,
    merge_records,
    parse_merge_marker,
    split_record_at_boundaries,
    split_record_at_epoch,
)
from pyrnx.record import (
    AntennaCalibration,
    ClockData,
    ClockDataType,
    MeteoObservable,
    ObservationData,
    Record,
    TecMap,
)
from pyrnx.record.navigation import Ephemeris, FrameClass, MsgType

T0 = datetime(2023, 1, 1)
G07 = Sv.from_str("G07")


def epoch(seconds):
    return Epoch(T0 + timedelta(seconds=seconds))


def observation_record(seconds):
    return Record.observation({
        epoch(s): (None, {G07: {"C1C": ObservationData(2.0e7 + s)}}) for s in seconds
    })


def navigation_record(seconds):
    return Record.navigation({
        epoch(s): {FrameClass.EPHEMERIS: [Ephemeris(MsgType.LNAV, G07, 1e-4, 0.0, 0.0)]}
        for s in seconds
    })


def meteo_record(seconds):
    return Record.meteo({epoch(s): {MeteoObservable.PRESSURE: 1000.0 + s} for s in seconds})


def clock_record(seconds):
    return Record.clock({
        epoch(s): {ClockDataType.AS: {"G07": ClockData(1e-4)}} for s in seconds
    })


def ionex_record(seconds):
    return Record.ionex({epoch(s): TecMap(np.full((2, 2), float(s))) for s in seconds})


BUILDERS = [observation_record, navigation_record, meteo_record, clock_record, ionex_record]


def assert_strictly_ascending(record):
    epochs = record.epochs()
    assert all(a.date < b.date for a, b in zip(epochs, epochs[1:]))


class TestMerge(unittest.TestCase):
    """Test record level merge"""

    def test_disjoint_union(self):
        record = meteo_record([0, 60])
        merge_records(record, meteo_record([30, 90]))
        self.assertEqual(record.epochs(), [epoch(0), epoch(30), epoch(60), epoch(90)])

    def test_collision_last_writer_wins(self):
        record = meteo_record([0, 30])
        other = Record.meteo({epoch(30): {MeteoObservable.TEMPERATURE: 5.0}})
        merge_records(record, other)
        self.assertEqual(record.data[epoch(30)], {MeteoObservable.TEMPERATURE: 5.0})

    def test_merged_values_are_copies(self):
        record = meteo_record([0])
        other = meteo_record([30])
        merge_records(record, other)
        other.data[epoch(30)][MeteoObservable.PRESSURE] = -1.0
        self.assertEqual(record.data[epoch(30)][MeteoObservable.PRESSURE], 1030.0)

    def test_kind_mismatch(self):
        with self.assertRaises(RecordTypeError):
            merge_records(meteo_record([0]), clock_record([0]))

    def test_antex_by_identifier(self):
        record = Record.antex({"A": AntennaCalibration("A"), "B": AntennaCalibration("B")})
        merge_records(record, Record.antex({"C": AntennaCalibration("C"),
                                            "A": AntennaCalibration("A", serial_number="1")}))
        self.assertEqual(record.keys(), ["A", "B", "C"])
        self.assertEqual(record.data["A"].serial_number, "1")


class TestSplitAtEpoch(unittest.TestCase):
    """Test split completeness"""

    def test_every_kind(self):
        seconds = [0, 30, 60, 90, 120]
        for build in BUILDERS:
            record = build(seconds)
            for cut in seconds:
                before, after = split_record_at_epoch(record, epoch(cut))
                left = set(before.epochs())
                right = set(after.epochs())
                self.assertFalse(left & right)
                self.assertEqual(left | right, set(record.epochs()))
                self.assertTrue(all(e.date < epoch(cut).date for e in left))
                self.assertTrue(all(e.date >= epoch(cut).date for e in right))

    def test_between_epochs(self):
        before, after = split_record_at_epoch(meteo_record([0, 30, 60]), epoch(45))
        self.assertEqual(before.epochs(), [epoch(0), epoch(30)])
        self.assertEqual(after.epochs(), [epoch(60)])

    def test_source_untouched(self):
        record = meteo_record([0, 30, 60])
        split_record_at_epoch(record, epoch(30))
        self.assertEqual(len(record), 3)

    def test_out_of_range(self):
        record = meteo_record([30, 60])
        with self.assertRaises(EpochTooEarlyError):
            split_record_at_epoch(record, epoch(0))
        with self.assertRaises(EpochTooLateError) as ctx:
            split_record_at_epoch(record, epoch(90))
        self.assertIsInstance(ctx.exception, SplitError)

    def test_antex(self):
        with self.assertRaises(RecordTypeError):
            split_record_at_epoch(Record.antex(), epoch(0))


def test_split_at_boundaries():
    record = meteo_record([0, 30, 60, 90, 120])
    parts = split_record_at_boundaries(record, [epoch(60).date])
    assert [p.epochs() for p in parts] == [[epoch(0), epoch(30)], [epoch(60), epoch(90), epoch(120)]]
    assert split_record_at_boundaries(record, []) == []


def test_split_at_boundaries_after_data():
    record = meteo_record([0, 30])
    parts = split_record_at_boundaries(record, [epoch(3600).date])
    assert len(parts) == 2
    assert parts[0].epochs() == [epoch(0), epoch(30)]
    assert parts[1].is_empty()


def test_parse_merge_marker():
    marker = f"{'pyrnx-1.0.0':<20}{'FILE MERGE':<20}20230102 030405 UTC"
    assert parse_merge_marker(marker) == datetime(2023, 1, 2, 3, 4, 5)
    assert parse_merge_marker("some other comment") is None
    assert parse_merge_marker(f"{'x':<20}{'FILE MERGE':<20}garbage") is None


class TestDecimateByRatio(unittest.TestCase):
    """Test ordinal decimation"""

    def test_length(self):
        for length in range(0, 12):
            for ratio in range(1, 5):
                record = meteo_record(list(range(0, 30 * length, 30)))
                decimate_by_ratio(record, ratio)
                self.assertEqual(len(record), math.ceil(length / ratio))

    def test_positions(self):
        record = meteo_record([0, 30, 60, 90, 120, 150, 180])
        decimate_by_ratio(record, 3)
        self.assertEqual(record.epochs(), [epoch(0), epoch(90), epoch(180)])

    def test_antex(self):
        record = Record.antex({name: AntennaCalibration(name) for name in "ABCDE"})
        decimate_by_ratio(record, 2)
        self.assertEqual(record.keys(), ["A", "C", "E"])

    def test_invalid_ratio(self):
        with self.assertRaises(ValueError):
            decimate_by_ratio(meteo_record([0]), 0)


class TestDecimateByInterval(unittest.TestCase):
    """Test greedy interval decimation"""

    def test_spacing_from_last_kept(self):
        record = meteo_record([0, 10, 25, 30, 50, 61, 70])
        decimate_by_interval(record, timedelta(seconds=30))
        self.assertEqual(record.epochs(), [epoch(0), epoch(30), epoch(61)])

    def test_minimum_spacing_every_kind(self):
        seconds = [0, 7, 15, 31, 33, 62, 64, 95, 120, 121]
        for build in BUILDERS:
            record = build(seconds)
            decimate_by_interval(record, timedelta(seconds=30))
            epochs = record.epochs()
            self.assertEqual(epochs[0], epoch(0))
            for a, b in zip(epochs, epochs[1:]):
                self.assertGreaterEqual(b - a, timedelta(seconds=30))
            assert_strictly_ascending(record)

    def test_zero_interval_keeps_all(self):
        record = meteo_record([0, 1, 2])
        decimate_by_interval(record, timedelta(0))
        self.assertEqual(len(record), 3)

    def test_fractional_interval(self):
        mask = interval_mask([epoch(0), epoch(1), epoch(2)], timedelta(seconds=1.5))
        np.testing.assert_array_equal(mask, [True, False, True])

    def test_negative_interval(self):
        with self.assertRaises(ValueError):
            decimate_by_interval(meteo_record([0]), timedelta(seconds=-1))

    def test_antex(self):
        with self.assertRaises(RecordTypeError):
            decimate_by_interval(Record.antex(), timedelta(seconds=30))


def test_empty_record_mask():
    assert interval_mask([], timedelta(seconds=30)).shape == (0,)
    record = meteo_record([])
    decimate_by_interval(record, timedelta(seconds=30))
    assert record.is_empty()


@pytest.mark.parametrize("build", BUILDERS)
def test_ordering_after_operations(build):
    record = build([90, 0, 60, 30])
    merge_records(record, build([45, 15]))
    assert_strictly_ascending(record)
    decimate_by_ratio(record, 2)
    assert_strictly_ascending(record)
    before, after = split_record_at_epoch(record, record.epochs()[-1])
    assert_strictly_ascending(before)
    assert_strictly_ascending(after)
