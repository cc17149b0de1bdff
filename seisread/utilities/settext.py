#!/usr/bin/env python

#
# Replace a textual header of an existing SEG-Y file
#
# The text file is read as up to 40 card images, each line is padded
# or cut to 80 columns.
#

import argparse
import logging
import sys

from seisread.core import segyfile, segyreader, segywriter

PROG_VERSION = '2024.114'
LOGGER = logging.getLogger(__name__)

CARDS = 40


def get_args(argv=None):
    parser = argparse.ArgumentParser(
                                formatter_class=argparse.RawTextHelpFormatter)

    parser.usage = "Version: {0} Usage: settext [options]".format(
        PROG_VERSION)

    parser.add_argument("-f", action="store", dest="infile", type=str,
                        required=True, help="SEG-Y file to change in place.")

    parser.add_argument("-t", action="store", dest="textfile", type=str,
                        required=True, help="Text file, 40 lines of 80.")

    parser.add_argument("-i", action="store", dest="index", type=int,
                        default=0,
                        help="Text header to replace, 0 is the first.\n"
                             "1 and up are extended text headers.")

    return parser.parse_args(argv)


def read_text_file(textfile):
    '''   Text header from a text file of card images   '''
    with open(textfile, 'r') as fh:
        lines = fh.read().splitlines()

    if len(lines) > CARDS:
        LOGGER.warning("{0} has {1} lines, using the first {2}".format(
            textfile, len(lines), CARDS))

    cards = [line[:segyfile.LINE_LENGTH].ljust(segyfile.LINE_LENGTH)
             for line in lines[:CARDS]]

    return segyfile.TextHeader(''.join(cards))


def main(argv=None):
    args = get_args(argv)

    try:
        text_header = read_text_file(args.textfile)
    except (IOError, OSError) as e:
        LOGGER.error("Failed to read {0}: {1}".format(args.textfile, e))
        sys.exit(1)

    sw = segywriter.Writer(args.infile)
    try:
        sw.write_text_header(text_header, index=args.index)
    except segyreader.SegyError as e:
        LOGGER.error(e)
        sys.exit(1)


if __name__ == "__main__":
    main()
