#!/usr/bin/env python3
"""Test suite for header merging and processing configuration"""

import unittest
from datetime import datetime, timedelta

import pytest

from pyrnx.core.config import ProcessingConfig
from pyrnx.core.constants import MERGE_MARKER_DATE_OFFSET, MERGE_MARKER_LABEL
from pyrnx.core.constellation import Constellation
from pyrnx.core.errors import HeaderMismatchError, MergeError, RinexError
from pyrnx.core.header import CrinexInfo, Header
from pyrnx.core.types import RinexType
from pyrnx.processing.algebra import parse_merge_marker


class TestHeaderMerge(unittest.TestCase):
    """Test header side of a merge"""

    def setUp(self):
        self.a = Header(
            rinex_type=RinexType.OBSERVATION_DATA,
            constellation=Constellation.GPS,
            sampling_interval=timedelta(seconds=30),
            comments=["first file"],
            first_epoch=datetime(2023, 1, 1),
            last_epoch=datetime(2023, 1, 1, 23, 59, 30),
            observables={Constellation.GPS: ["C1C", "L1C"]},
        )
        self.b = Header(
            rinex_type=RinexType.OBSERVATION_DATA,
            constellation=Constellation.GPS,
            sampling_interval=timedelta(seconds=15),
            comments=["first file", "second file"],
            first_epoch=datetime(2023, 1, 2),
            last_epoch=datetime(2023, 1, 2, 23, 59, 45),
            observables={Constellation.GPS: ["C1C", "C2W"]},
        )

    def test_merge_rules(self):
        merged = self.a.merge(self.b)
        self.assertEqual(merged.sampling_interval, timedelta(seconds=15))
        self.assertEqual(merged.first_epoch, datetime(2023, 1, 1))
        self.assertEqual(merged.last_epoch, datetime(2023, 1, 2, 23, 59, 45))
        self.assertEqual(merged.observables[Constellation.GPS], ["C1C", "L1C", "C2W"])
        self.assertEqual(merged.comments, ["first file", "second file"])

    def test_merge_copy_leaves_self(self):
        self.a.merge(self.b)
        self.assertEqual(self.a.sampling_interval, timedelta(seconds=30))
        self.assertEqual(self.a.comments, ["first file"])

    def test_type_mismatch(self):
        self.b.rinex_type = RinexType.METEO_DATA
        with self.assertRaises(HeaderMismatchError):
            self.a.merge_mut(self.b)

    def test_constellation_mismatch(self):
        self.b.constellation = Constellation.GALILEO
        with self.assertRaises(HeaderMismatchError) as ctx:
            self.a.merge_mut(self.b)
        self.assertIsInstance(ctx.exception, MergeError)
        self.assertIsInstance(ctx.exception, RinexError)

    def test_mixed_constellation(self):
        self.b.constellation = Constellation.MIXED
        self.a.merge_mut(self.b)
        self.assertIs(self.a.constellation, Constellation.MIXED)

    def test_undefined_constellation(self):
        self.a.constellation = None
        self.a.merge_mut(self.b)
        self.assertIs(self.a.constellation, Constellation.GPS)

    def test_crinex(self):
        self.assertFalse(self.a.is_crinex())
        compressed = self.a.with_crinex(CrinexInfo(version="3.0", prog="RNX2CRX ver.4.0.7"))
        self.assertTrue(compressed.is_crinex())
        self.assertFalse(self.a.is_crinex())
        compressed.crx2rnx()
        self.assertFalse(compressed.is_crinex())


class TestProcessingConfig(unittest.TestCase):
    """Test merge marker formatting"""

    def test_default_producer(self):
        config = ProcessingConfig()
        self.assertTrue(config.producer_id.startswith("pyrnx-"))

    def test_merge_marker_layout(self):
        config = ProcessingConfig(producer_id="pyrnx-test")
        marker = config.merge_marker(datetime(2023, 1, 2, 3, 4, 5))
        self.assertEqual(marker[:20].rstrip(), "pyrnx-test")
        self.assertEqual(marker[20:40].rstrip(), MERGE_MARKER_LABEL)
        self.assertEqual(marker[MERGE_MARKER_DATE_OFFSET:], "20230102 030405 UTC")

    def test_from_dict(self):
        config = ProcessingConfig.from_dict({'producer_id': 'tool-2.0'})
        self.assertEqual(config.producer_id, 'tool-2.0')
        self.assertEqual(config.to_dict(), {
            'producer_id': 'tool-2.0',
            'merge_marker_label': MERGE_MARKER_LABEL,
        })


def test_config_rejects_unknown_keys():
    with pytest.raises(ValueError):
        ProcessingConfig.from_dict({'producer': 'typo'})


def test_producer_id_fills_its_column():
    config = ProcessingConfig(producer_id="x" * 20)
    marker = config.merge_marker(datetime(2023, 1, 2, 3, 4, 5))
    assert parse_merge_marker(marker) == datetime(2023, 1, 2, 3, 4, 5)


@pytest.mark.parametrize("settings", [
    {'producer_id': "a-very-long-producer-identifier-2.0"},
    {'producer_id': "x" * 21},
    {'merge_marker_label': "FILE MERGE WITH A LONG LABEL"},
])
def test_config_rejects_overlong_marker_fields(settings):
    with pytest.raises(ValueError):
        ProcessingConfig.from_dict(settings)
