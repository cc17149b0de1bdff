'''
Tests for segyfile
'''
import datetime
import math
import unittest

import numpy as np

from seisread.core import codes, segyfile
from seisread.core.tests.test_base import LogTestCase


def binary_header(**kwargs):
    fields = dict.fromkeys(segyfile.BinaryFileHeader._fields, 0)
    fields.update(kwargs)

    return segyfile.BinaryFileHeader(**fields)


class TestTextHeader(unittest.TestCase):
    def test_padded(self):
        th = segyfile.TextHeader("C 1 CLIENT")
        self.assertEqual(len(th.text), 3200)
        self.assertTrue(th.text.startswith("C 1 CLIENT "))
        self.assertEqual(th.text.strip(), "C 1 CLIENT")

    def test_truncated(self):
        th = segyfile.TextHeader("X" * 4000)
        self.assertEqual(th.text, "X" * 3200)

    def test_none(self):
        with self.assertRaises(ValueError):
            segyfile.TextHeader(None)

    def test_lines(self):
        th = segyfile.TextHeader("A" * 80 + "B" * 80)
        lines = th.lines()
        self.assertEqual(len(lines), 40)
        self.assertEqual(lines[0], "A" * 80)
        self.assertEqual(lines[1], "B" * 80)
        self.assertEqual(lines[39], " " * 80)

    def test_str(self):
        s = str(segyfile.TextHeader("A" * 80 + "B" * 80))
        self.assertEqual(len(s), 3200 + 39)
        self.assertEqual(s.split('\n')[1], "B" * 80)

    def test_encodings(self):
        th = segyfile.TextHeader("C 1")
        e = th.as_ebcdic()
        a = th.as_ascii()
        self.assertEqual(len(e), 3200)
        self.assertEqual(len(a), 3200)
        # 'C' is 0xC3 in EBCDIC, 0x43 in ASCII
        self.assertEqual(e[0], 0xC3)
        self.assertEqual(a[0], 0x43)
        self.assertEqual(segyfile.TextHeader.from_bytes(e), th)
        self.assertEqual(segyfile.TextHeader.from_bytes(a), th)


class TestValueRange(unittest.TestCase):
    def test_seeded_empty(self):
        vr = segyfile.ValueRange()
        self.assertEqual(vr.min, math.inf)
        self.assertEqual(vr.max, -math.inf)
        self.assertTrue(vr.is_empty())

    def test_update(self):
        vr = segyfile.ValueRange().update(np.array([3, -1, 2], dtype='int16'))
        self.assertEqual(vr, (-1.0, 3.0))
        vr2 = vr.update(np.array([10.5], dtype='float32'))
        self.assertEqual(vr2, (-1.0, 10.5))
        # Values, not shared state
        self.assertEqual(vr, (-1.0, 3.0))

    def test_update_empty(self):
        vr = segyfile.ValueRange(1.0, 2.0)
        self.assertEqual(vr.update(np.array([])), vr)


class TestTrace(unittest.TestCase):
    def test_read_only_native_kind(self):
        t = segyfile.Trace(None, codes.DataFormat.INT2, [1, 2, 3])
        self.assertEqual(t.samples.dtype, np.int16)
        self.assertEqual(len(t), 3)
        with self.assertRaises(ValueError):
            t.samples[0] = 5
        self.assertEqual(t.value_range(), (1.0, 3.0))


class TestSeismicFile(unittest.TestCase):
    def setUp(self):
        self.th = segyfile.TextHeader("C 1")
        self.bh = binary_header(samples_per_trace=2,
                                data_format=codes.DataFormat.FLOAT4_IEEE)
        self.traces = [
            segyfile.Trace(None, codes.DataFormat.FLOAT4_IEEE, [1.0, -4.0]),
            segyfile.Trace(None, codes.DataFormat.FLOAT4_IEEE, [7.5, 0.0])]

    def test_accessors(self):
        sf = segyfile.SeismicFile("x.sgy", None, [self.th], self.bh,
                                  self.traces)
        self.assertEqual(sf.name, "x.sgy")
        self.assertIsNone(sf.tape_label)
        self.assertIs(sf.text_header, self.th)
        self.assertEqual(sf.number_of_traces(), 2)
        self.assertEqual(sf.samples_per_trace(), 2)
        self.assertIs(sf.trace(1), self.traces[1])
        self.assertEqual(sf.min_value, -4.0)
        self.assertEqual(sf.max_value, 7.5)
        self.assertIsInstance(sf.traces, tuple)

    def test_no_traces(self):
        sf = segyfile.SeismicFile("x.sgy", None, [self.th], self.bh, [])
        self.assertEqual(sf.number_of_traces(), 0)
        self.assertEqual(sf.samples_per_trace(), 0)
        self.assertTrue(sf.value_range.is_empty())

    def test_trace_index(self):
        sf = segyfile.SeismicFile("x.sgy", None, [self.th], self.bh,
                                  self.traces)
        with self.assertRaises(IndexError):
            sf.trace(2)
        with self.assertRaises(IndexError):
            sf.trace(-1)

    def test_text_headers_required(self):
        with self.assertRaises(ValueError):
            segyfile.SeismicFile("x.sgy", None, [], self.bh, [])


class TestCreationDate(LogTestCase):
    def test_parse(self):
        self.assertEqual(segyfile.parse_creation_date("15-Mar-2024"),
                         datetime.date(2024, 3, 15))

    def test_unparsable(self):
        self.assertIsNone(segyfile.parse_creation_date("yesterday"))


if __name__ == "__main__":
    unittest.main()
