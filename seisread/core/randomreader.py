#!/usr/bin/env python
#
# Buffered big-endian reader over a seekable binary file object.
#
# Reads go through an internal buffer that is compacted and refilled
# on demand, so very large files never have to be held in memory.
# Seeking in either direction drops the buffer and refills from the
# new position.
#

import os
import logging
import construct

PROG_VERSION = '2024.114'
LOGGER = logging.getLogger(__name__)

DEFAULT_BUFFER_SIZE = 64 * 1024


class EndOfStreamError(IOError):
    """
    Raised when the source runs dry before a read could be satisfied.
    """


class Reader(object):
    def __init__(self, fh, buffer_size=DEFAULT_BUFFER_SIZE):
        if fh is None:
            raise ValueError("fh cannot be None")
        if buffer_size <= 0:
            raise ValueError("Invalid buffer_size: {0}".format(buffer_size))

        self.FH = fh
        self.buffer_size = buffer_size
        self.buf = b''
        self.offset = 0

    def _available(self):
        return len(self.buf) - self.offset

    def _source_size(self):
        try:
            return os.fstat(self.FH.fileno()).st_size
        except (AttributeError, OSError, ValueError):
            here = self.FH.tell()
            size = self.FH.seek(0, os.SEEK_END)
            self.FH.seek(here)
            return size

    def _ensure(self, size):
        '''   Make sure at least size unread bytes are buffered   '''
        while self._available() < size:
            # Compact, keep unread tail
            tail = self.buf[self.offset:]
            want = max(self.buffer_size, size) - len(tail)
            chunk = self.FH.read(want)
            if not chunk:
                raise EndOfStreamError(
                    "Unexpected end of stream at {0}: needed {1} bytes, "
                    "{2} available".format(self.position(), size, len(tail)))

            self.buf = tail + chunk
            self.offset = 0

    def _take(self, size):
        self._ensure(size)
        ret = self.buf[self.offset:self.offset + size]
        self.offset += size

        return ret

    def position(self):
        '''   Absolute position of the next byte to be read   '''
        return self.FH.tell() - self._available()

    def seek(self, position):
        '''   Move to absolute position, forward or backward   '''
        if position < 0:
            raise ValueError("Invalid position: {0}".format(position))

        self.FH.seek(position)
        self.buf = b''
        self.offset = 0

    def skip(self, n):
        if 0 <= n <= self._available():
            self.offset += n
        else:
            self.seek(self.position() + n)

    def remaining(self):
        return self._available() + self._source_size() - self.FH.tell()

    def has_remaining(self):
        return self.remaining() > 0

    def read_bytes(self, n):
        if n < 0:
            raise ValueError("Invalid number of bytes: {0}".format(n))

        if n <= self.buffer_size:
            return self._take(n)

        # Larger than the buffer, drain it then read straight through
        parts = [self.buf[self.offset:]]
        have = len(parts[0])
        self.buf = b''
        self.offset = 0
        while have < n:
            chunk = self.FH.read(n - have)
            if not chunk:
                raise EndOfStreamError(
                    "Unexpected end of stream: needed {0} bytes, "
                    "{1} available".format(n, have))
            parts.append(chunk)
            have += len(chunk)

        return b''.join(parts)

    def read_u8(self):
        return construct.Int8ub.parse(self._take(1))

    def read_i8(self):
        return construct.Int8sb.parse(self._take(1))

    def read_u16(self):
        return construct.Int16ub.parse(self._take(2))

    def read_i16(self):
        return construct.Int16sb.parse(self._take(2))

    def read_u32(self):
        return construct.Int32ub.parse(self._take(4))

    def read_i32(self):
        return construct.Int32sb.parse(self._take(4))
