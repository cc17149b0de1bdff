'''
Tests for segywriter
'''
import os
import unittest

from seisread.core import codes, segyfile, segyreader, segywriter
from seisread.core.tests.test_base import LogTestCase, TempDirTestCase, \
    write_segy


class TestTextHeaderOffset(unittest.TestCase):
    def test_offsets(self):
        self.assertEqual(segywriter.text_header_offset(0), 0)
        self.assertEqual(segywriter.text_header_offset(1), 3600)
        self.assertEqual(segywriter.text_header_offset(3), 3600 + 2 * 3200)


class TestWrite(TempDirTestCase, LogTestCase):
    def test_rewrite_reads_back(self):
        trace_headers = [{"elevationScale": -100, "recElevation": 12345,
                          "coordScale": -10, "sourceLongOrX": 123456,
                          "Xcoor": 5, "Tscaler": -10, "delay": 45,
                          "Spn": 77, "Scal": 10, "Tucmant": 25,
                          "Tucexp": -2, "Sed": [10, 20, 30], "correlated": 2,
                          "traceID": 1, "Tvmu": 6, "year": 2024, "day": 45}]
        write_segy("in.sgy", [[1.0, -2.0, 3.5]], text="C 1 CLIENT",
                   extended=["EXT"], trace_headers=trace_headers)
        sf = segyreader.Reader("in.sgy").read()

        segywriter.Writer("out.sgy").write(sf)
        self.assertEqual(os.path.getsize("out.sgy"),
                         os.path.getsize("in.sgy"))
        again = segyreader.Reader("out.sgy").read()

        self.assertEqual(again.text_headers, sf.text_headers)
        self.assertEqual(again.binary_header, sf.binary_header)
        self.assertEqual(again.trace(0).header, sf.trace(0).header)
        self.assertEqual(list(again.trace(0).samples), [1.0, -2.0, 3.5])

    def test_blank_text_header(self):
        # EBCDIC blanks are 0x40, below 0x80, so the header reads as ASCII @
        write_segy("in.sgy", [[1.0]])
        sf = segyreader.Reader("in.sgy").read()
        self.assertEqual(sf.text_header.text, "@" * 3200)

        segywriter.Writer("out.sgy").write(sf)
        again = segyreader.Reader("out.sgy").read()
        self.assertEqual(again.text_header.text, "|" * 3200)

    def test_ibm_samples(self):
        write_segy("ibm.sgy", [b'\x40\x80\x00\x00\xc2\x76\xa0\x00'], fmt=1,
                   reel={"hns": 2})
        sf = segyreader.Reader("ibm.sgy").read()
        segywriter.Writer("out.sgy").write(sf)
        with open("out.sgy", 'rb') as fh:
            self.assertEqual(fh.read()[-8:],
                             b'\x40\x80\x00\x00\xc2\x76\xa0\x00')

    def test_integer_samples(self):
        write_segy("i2.sgy", [[1, -2, 300]], fmt=3)
        sf = segyreader.Reader("i2.sgy").read()
        segywriter.Writer("out.sgy").write(sf)
        again = segyreader.Reader("out.sgy").read()
        self.assertIs(again.binary_header.data_format, codes.DataFormat.INT2)
        self.assertEqual(list(again.trace(0).samples), [1, -2, 300])

    def test_unwritable_format(self):
        write_segy("gain.sgy", [[1, 2]], fmt=2, reel={"format": 4})
        sf = segyreader.Reader("gain.sgy").read(read_traces=False)
        with self.assertRaises(segywriter.SegyWriteError):
            segywriter.Writer("out.sgy").write(sf)

    def test_sample_count_mismatch(self):
        write_segy("in.sgy", [[1.0, 2.0]])
        sf = segyreader.Reader("in.sgy").read()
        bh = sf.binary_header._replace(samples_per_trace=3)
        bad = segyfile.SeismicFile("bad", None, sf.text_headers, bh,
                                   sf.traces)
        with self.assertRaises(segywriter.SegyWriteError):
            segywriter.Writer("out.sgy").write(bad)

    def test_write_error_is_segy_error(self):
        self.assertTrue(issubclass(segywriter.SegyWriteError,
                                   segyreader.SegyError))


class TestWriteTextHeader(TempDirTestCase, LogTestCase):
    def test_replace_first(self):
        write_segy("a.sgy", [[1.0, 2.0]], text="C 1 OLD")
        size = os.path.getsize("a.sgy")
        segywriter.Writer("a.sgy").write_text_header(
            segyfile.TextHeader("C 1 NEW"))
        self.assertEqual(os.path.getsize("a.sgy"), size)
        sf = segyreader.Reader("a.sgy").read()
        self.assertTrue(sf.text_header.text.startswith("C 1 NEW"))
        self.assertEqual(list(sf.trace(0).samples), [1.0, 2.0])

    def test_replace_extended(self):
        write_segy("a.sgy", [[1.0]], extended=["ONE", "TWO"])
        segywriter.Writer("a.sgy").write_text_header(
            segyfile.TextHeader("NEW TWO"), index=2)
        sf = segyreader.Reader("a.sgy").read()
        self.assertTrue(sf.text_headers[1].text.startswith("ONE"))
        self.assertTrue(sf.text_headers[2].text.startswith("NEW TWO"))

    def test_index_out_of_range(self):
        write_segy("a.sgy", [[1.0]], extended=["ONE"])
        w = segywriter.Writer("a.sgy")
        with self.assertRaises(segywriter.SegyWriteError):
            w.write_text_header(segyfile.TextHeader("X"), index=2)
        with self.assertRaises(segywriter.SegyWriteError):
            w.write_text_header(segyfile.TextHeader("X"), index=-1)

    def test_missing_file(self):
        with self.assertRaises(segywriter.SegyWriteError):
            segywriter.Writer("nothere.sgy").write_text_header(
                segyfile.TextHeader("X"))


if __name__ == "__main__":
    unittest.main()
