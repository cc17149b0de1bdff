'''
Tests for dumpsgy
'''
import logging
import sys
import unittest
from unittest.mock import patch

from testfixtures import LogCapture, OutputCapture

from seisread.utilities import dumpsgy
from seisread.core.tests.test_base import LogTestCase, TempDirTestCase, \
    write_segy


class TestDumpSGY(TempDirTestCase, LogTestCase):
    def setUp(self):
        super(TestDumpSGY, self).setUp()
        write_segy("a.sgy", [[1.0, -2.0], [0.5, 4.0]], text="C 1 CLIENT",
                   extended=["C 1 EXTENDED"])

    def run_main(self, testargs):
        with patch.object(sys, 'argv', testargs):
            with OutputCapture() as out:
                dumpsgy.main()
                return out.captured

    def test_main(self):
        output = self.run_main(['dumpsgy', '-f', 'a.sgy'])
        lines = output.split('\n')
        self.assertIn("_01_\t-\tC 1 CLIENT", lines)
        self.assertIn("_01_\t-\tC 1 EXTENDED", lines)
        self.assertEqual(
            output.count("---------- Trace Header ----------"), 2)
        self.assertIn("Traces: 2", lines)
        self.assertIn("Min value: -2.0", lines)
        self.assertIn("Max value: 4.0", lines)
        # No samples without -p
        self.assertNotIn("-2.0", lines)

    def test_samples(self):
        output = self.run_main(['dumpsgy', '-f', 'a.sgy', '-p', '-t', '1'])
        lines = output.split('\n')
        self.assertEqual(
            output.count("---------- Trace Header ----------"), 1)
        self.assertIn("1.0", lines)
        self.assertIn("-2.0", lines)
        self.assertNotIn("0.5", lines)

    def test_headers_only(self):
        output = self.run_main(['dumpsgy', '-f', 'a.sgy', '-n', '-b', '512'])
        self.assertNotIn("Trace Header", output)
        self.assertIn("Traces: 0", output.split('\n'))
        self.assertNotIn("Min value", output)

    def test_bad_buffer_size(self):
        with patch.object(sys, 'argv', ['dumpsgy', '-f', 'a.sgy', '-b', '0']):
            with OutputCapture():
                with self.assertRaises(SystemExit) as cm:
                    dumpsgy.main()
        self.assertEqual(cm.exception.code, 2)

    def test_missing_file(self):
        name = 'seisread.utilities.dumpsgy'
        with LogCapture(name, level=logging.ERROR) as log:
            with self.assertRaises(SystemExit) as cm:
                self.run_main(['dumpsgy', '-f', 'nothere.sgy'])
            log.check((name, 'ERROR',
                       "Failed to read nothere.sgy: [Errno 2] No such file "
                       "or directory: 'nothere.sgy'"))
        self.assertEqual(cm.exception.code, 1)


if __name__ == "__main__":
    unittest.main()
