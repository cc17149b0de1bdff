#!/usr/bin/env python

#
# Simple program to read and display SEG-Y file
#

import argparse
import logging
import sys

from seisread.core import randomreader, segyreader

PROG_VERSION = '2024.114'
LOGGER = logging.getLogger(__name__)


def get_args(argv=None):
    parser = argparse.ArgumentParser(
                                formatter_class=argparse.RawTextHelpFormatter)

    parser.usage = "Version: {0} Usage: dumpsgy [options]".format(
        PROG_VERSION)

    parser.add_argument("-f", action="store", dest="infile", type=str,
                        required=True)

    parser.add_argument("-n", action="store_false", dest="read_traces",
                        default=True,
                        help="Headers only, do not read traces.")

    parser.add_argument("-p", action="store_true",
                        dest="print_samples", default=False,
                        help="Print trace samples.")

    parser.add_argument("-t", action="store", dest="trace_count", type=int,
                        help="Print only the first TRACE_COUNT traces.")

    parser.add_argument("-b", action="store", dest="buffer_size", type=int,
                        default=randomreader.DEFAULT_BUFFER_SIZE,
                        help="Read buffer size in bytes. Default = {0}"
                        .format(randomreader.DEFAULT_BUFFER_SIZE))

    args = parser.parse_args(argv)
    if args.buffer_size <= 0:
        parser.error("Buffer size must be positive: {0}".format(
            args.buffer_size))
    if args.trace_count is not None and args.trace_count < 0:
        parser.error("Trace count can not be negative: {0}".format(
            args.trace_count))

    return args


def print_text_header(text_header, index):
    if index == 0:
        print("--------------- Textural Header ---------------")
    else:
        print("--------------- Extended Textural Header {0} ---------------"
              .format(index))
    for i, line in enumerate(text_header.lines()):
        print("_{0:02d}_\t-\t{1:s}".format(i + 1, line.rstrip()))


def print_binary_header(binary_header):
    print("---------- Binary Header ----------")
    for k, v in zip(binary_header._fields, binary_header):
        print("{0:<30}\t---\t{1}".format(k, v))


def print_trace_header(trace_header):
    print("---------- Trace Header ----------")
    for k, v in zip(trace_header._fields, trace_header):
        print("{0:<30}\t---\t{1}".format(k, v))


def print_trace(trace, print_samples):
    print_trace_header(trace.header)
    if print_samples:
        print('------------------------')
        for s in trace.samples:
            print(s)


def main(argv=None):
    args = get_args(argv)

    sr = segyreader.Reader(args.infile, buffer_size=args.buffer_size)
    try:
        sf = sr.read(read_traces=args.read_traces)
    except segyreader.SegyError as e:
        LOGGER.error(e)
        sys.exit(1)

    for i, th in enumerate(sf.text_headers):
        print_text_header(th, i)

    print_binary_header(sf.binary_header)

    traces = sf.traces
    if args.trace_count is not None:
        traces = traces[:args.trace_count]
    for t in traces:
        print_trace(t, args.print_samples)

    print("Traces: {0}".format(sf.number_of_traces()))
    if args.read_traces and sf.number_of_traces() > 0:
        print("Min value: {0}".format(sf.min_value))
        print("Max value: {0}".format(sf.max_value))


if __name__ == "__main__":
    main()
