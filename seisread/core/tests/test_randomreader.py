'''
Tests for randomreader
'''
import io
import unittest

from seisread.core import randomreader
from seisread.core.tests.test_base import LogTestCase


def make_reader(data, buffer_size=randomreader.DEFAULT_BUFFER_SIZE):
    return randomreader.Reader(io.BytesIO(data), buffer_size)


class TestIntegers(LogTestCase):
    def test_big_endian(self):
        rr = make_reader(b'\x01\x02\x03\x04\x05\x06\x07\x08')
        self.assertEqual(rr.read_u16(), 0x0102)
        self.assertEqual(rr.read_u16(), 0x0304)
        self.assertEqual(rr.read_u32(), 0x05060708)

    def test_signed(self):
        rr = make_reader(b'\xff\xfe\xff\xff\xff\xfd\x80\x7f')
        self.assertEqual(rr.read_i16(), -2)
        self.assertEqual(rr.read_i32(), -3)
        self.assertEqual(rr.read_i8(), -128)
        self.assertEqual(rr.read_i8(), 127)

    def test_unsigned(self):
        rr = make_reader(b'\xff\xff\xff\xff\xff\xff\xff')
        self.assertEqual(rr.read_u8(), 255)
        self.assertEqual(rr.read_u16(), 65535)
        self.assertEqual(rr.read_u32(), 4294967295)


class TestBuffering(LogTestCase):
    def setUp(self):
        self.data = bytes(bytearray(range(256)))

    def test_reads_across_refills(self):
        rr = make_reader(self.data, buffer_size=3)
        got = [rr.read_u8() for i in range(10)]
        self.assertEqual(got, list(range(10)))
        # Wider than the buffer
        self.assertEqual(rr.read_u32(), 0x0a0b0c0d)

    def test_bulk_read_larger_than_buffer(self):
        rr = make_reader(self.data, buffer_size=4)
        rr.read_u16()
        self.assertEqual(rr.read_bytes(100), self.data[2:102])
        self.assertEqual(rr.position(), 102)
        self.assertEqual(rr.read_u8(), 102)

    def test_position_and_skip(self):
        rr = make_reader(self.data, buffer_size=8)
        self.assertEqual(rr.position(), 0)
        rr.read_bytes(5)
        self.assertEqual(rr.position(), 5)
        # Within the buffer
        rr.skip(2)
        self.assertEqual(rr.read_u8(), 7)
        # Past the buffer
        rr.skip(100)
        self.assertEqual(rr.position(), 108)
        self.assertEqual(rr.read_u8(), 108)
        # Backwards
        rr.skip(-9)
        self.assertEqual(rr.read_u8(), 100)

    def test_seek(self):
        rr = make_reader(self.data, buffer_size=16)
        rr.seek(200)
        self.assertEqual(rr.read_u8(), 200)
        rr.seek(3)
        self.assertEqual(rr.read_u8(), 3)
        self.assertEqual(rr.position(), 4)

    def test_remaining(self):
        rr = make_reader(self.data, buffer_size=16)
        self.assertEqual(rr.remaining(), 256)
        rr.read_bytes(250)
        self.assertEqual(rr.remaining(), 6)
        self.assertTrue(rr.has_remaining())
        rr.read_bytes(6)
        self.assertEqual(rr.remaining(), 0)
        self.assertFalse(rr.has_remaining())


class TestErrors(LogTestCase):
    def test_end_of_stream(self):
        rr = make_reader(b'\x01\x02\x03')
        with self.assertRaises(randomreader.EndOfStreamError):
            rr.read_u32()

    def test_end_of_stream_bulk(self):
        rr = make_reader(b'\x00' * 10, buffer_size=2)
        with self.assertRaises(randomreader.EndOfStreamError):
            rr.read_bytes(11)

    def test_end_of_stream_is_ioerror(self):
        self.assertTrue(issubclass(randomreader.EndOfStreamError, IOError))

    def test_bad_buffer_size(self):
        with self.assertRaises(ValueError):
            make_reader(b'', buffer_size=0)
        with self.assertRaises(ValueError):
            make_reader(b'', buffer_size=-1)

    def test_no_source(self):
        with self.assertRaises(ValueError):
            randomreader.Reader(None)

    def test_negative_seek(self):
        rr = make_reader(b'\x00' * 10)
        with self.assertRaises(ValueError):
            rr.seek(-1)


if __name__ == "__main__":
    unittest.main()
