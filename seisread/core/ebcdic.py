#!/usr/bin/env python
#
# EBCDIC <-> ASCII text helpers for SEG-Y textual headers
#

import logging

PROG_VERSION = '2024.114'
LOGGER = logging.getLogger(__name__)

# IBM500 (international EBCDIC) and ISO-8859-1
EBCDIC_CODEC = 'cp500'
ASCII_CODEC = 'latin-1'


def is_ebcdic(buf):
    '''   True if any byte has the top bit set, a hint the text is EBCDIC   '''
    return any(b & 0x80 for b in bytearray(buf))


def EbcdicToAscii(buf):
    return bytes(buf).decode(EBCDIC_CODEC)


def AsciiToEbcdic(s):
    return s.encode(EBCDIC_CODEC, 'replace')


def decode(buf):
    '''   Decode a text record using the encoding its bytes suggest   '''
    if is_ebcdic(buf):
        return EbcdicToAscii(buf)

    return bytes(buf).decode(ASCII_CODEC)
