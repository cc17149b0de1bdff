#!/usr/bin/env python
#
# In memory model of a decoded SEG-Y file.
#
# Everything here is built once by the reader and not changed after.
#

import collections
import datetime
import logging
import math

import numpy as np

from seisread.core import ebcdic

PROG_VERSION = '2024.114'
LOGGER = logging.getLogger(__name__)

TEXT_HEADER_LENGTH = 3200
LINE_LENGTH = 80


class TextHeader(object):
    '''
       A 3200 character textual file header.
       Shorter text is right padded with spaces, longer text is truncated.
    '''
    def __init__(self, text):
        if text is None:
            raise ValueError("text cannot be None")

        self._text = text[:TEXT_HEADER_LENGTH].ljust(TEXT_HEADER_LENGTH)

    @classmethod
    def from_bytes(cls, buf):
        return cls(ebcdic.decode(buf))

    @property
    def text(self):
        return self._text

    def as_ebcdic(self):
        return ebcdic.AsciiToEbcdic(self._text)

    def as_ascii(self):
        return self._text.encode(ebcdic.ASCII_CODEC, 'replace')

    def lines(self):
        return [self._text[i:i + LINE_LENGTH]
                for i in range(0, TEXT_HEADER_LENGTH, LINE_LENGTH)]

    def __eq__(self, other):
        return isinstance(other, TextHeader) and self._text == other._text

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash(self._text)

    def __str__(self):
        return '\n'.join(self.lines())


BinaryFileHeader = collections.namedtuple(
    'BinaryFileHeader',
    ['job_no', 'line_no', 'reel_no',
     'traces_per_ensemble', 'aux_traces_per_ensemble',
     'sample_interval', 'sample_interval_original',
     'samples_per_trace', 'samples_per_trace_original',
     'data_format', 'ensemble_fold', 'sorting', 'vertical_sum',
     'sweep_frequency_start', 'sweep_frequency_end', 'sweep_length',
     'sweep_type', 'sweep_channel_no',
     'sweep_taper_length_start', 'sweep_taper_length_end',
     'sweep_taper_type', 'correlated', 'binary_gain_recovered',
     'amplitude_recovery', 'length_unit', 'impulse_signal_polarity',
     'vibratory_polarity', 'format_revision', 'fixed_length_traces',
     'extended_text_headers'])


TraceHeader = collections.namedtuple(
    'TraceHeader',
    [
        # Identity
        'trace_sequence_no', 'trace_sequence_no_reel',
        'field_record_no', 'field_record_trace_no',
        'energy_source_point_no', 'cdp_ensemble_no', 'ensemble_trace_no',
        'trace_type', 'vertically_summed_traces',
        'horizontally_stacked_traces', 'data_usage',
        'source_receiver_distance',
        # Elevations and depths, scaled
        'receiver_elevation', 'surface_elevation', 'source_depth',
        'datum_elevation_receiver', 'datum_elevation_source',
        'water_depth_source', 'water_depth_receiver',
        # Coordinates, scaled
        'source_x', 'source_y', 'group_x', 'group_y',
        'coordinate_unit', 'weathering_velocity', 'subweathering_velocity',
        # Times in ms, scaled
        'uphole_time_source', 'uphole_time_receiver',
        'source_static_correction', 'group_static_correction',
        'total_static_applied', 'lag_time_a', 'lag_time_b',
        'recording_delay', 'mute_time_start', 'mute_time_end',
        'samples', 'sample_interval', 'gain_type', 'gain_constant',
        'early_gain', 'correlated',
        'sweep_frequency_start', 'sweep_frequency_end', 'sweep_length',
        'sweep_type', 'sweep_taper_length_start', 'sweep_taper_length_end',
        'sweep_taper_type',
        'alias_filter_frequency', 'alias_filter_slope',
        'notch_filter_frequency', 'notch_filter_slope',
        'low_cut_frequency', 'high_cut_frequency',
        'low_cut_slope', 'high_cut_slope',
        # Recording time
        'year', 'day_of_year', 'hour', 'minute', 'second', 'time_basis',
        'trace_weighting_factor',
        'group_no_roll_switch', 'group_no_first_trace', 'group_no_last_trace',
        'gap_size', 'overtravel',
        'cdp_x', 'cdp_y', 'inline_no', 'crossline_no', 'shot_point',
        # Source characterization
        'trace_value_unit', 'transduction_constant', 'transduction_unit',
        'device_id', 'source_type', 'source_energy_direction',
        'source_measurement', 'source_unit',
    ])


class ValueRange(collections.namedtuple('ValueRange', ['min', 'max'])):
    '''   Running minimum and maximum sample value   '''
    __slots__ = ()

    def __new__(cls, min=math.inf, max=-math.inf):
        return super(ValueRange, cls).__new__(cls, min, max)

    def update(self, samples):
        '''   A new range widened to also cover samples   '''
        a = np.asarray(samples)
        if a.size == 0:
            return self

        return ValueRange(min(self.min, float(a.min())),
                          max(self.max, float(a.max())))

    def is_empty(self):
        return self.min > self.max


class Trace(object):
    def __init__(self, header, data_format, samples):
        self._header = header
        self._data_format = data_format
        samples = np.array(samples, dtype=data_format.dtype)
        samples.flags.writeable = False
        self._samples = samples

    @property
    def header(self):
        return self._header

    @property
    def data_format(self):
        return self._data_format

    @property
    def samples(self):
        return self._samples

    def __len__(self):
        return len(self._samples)

    def value_range(self):
        return ValueRange().update(self._samples)


TapeLabel = collections.namedtuple(
    'TapeLabel',
    ['storage_unit_sequence_number', 'segy_revision',
     'storage_unit_structure', 'binding_edition', 'max_block_size',
     'producer_organization_code', 'creation_date', 'serial_number',
     'storage_set_identifier'])


def parse_creation_date(s):
    '''   Tape label dates are DD-MMM-YYYY, returns None if unparsable   '''
    try:
        return datetime.datetime.strptime(s.strip(), "%d-%b-%Y").date()
    except ValueError:
        LOGGER.warning("Unexpected creation date: {0}".format(s))
        return None


class SeismicFile(object):
    def __init__(self, name, tape_label, text_headers, binary_header,
                 traces, value_range=None):
        text_headers = tuple(text_headers)
        if not text_headers:
            raise ValueError("At least one text header is required")
        if binary_header is None:
            raise ValueError("binary_header cannot be None")

        self._name = name
        self._tape_label = tape_label
        self._text_headers = text_headers
        self._binary_header = binary_header
        self._traces = tuple(traces)
        if value_range is None:
            value_range = ValueRange()
            for t in self._traces:
                value_range = value_range.update(t.samples)
        self._value_range = value_range

    @property
    def name(self):
        return self._name

    @property
    def tape_label(self):
        return self._tape_label

    @property
    def text_headers(self):
        return self._text_headers

    @property
    def text_header(self):
        '''   The mandatory first text header   '''
        return self._text_headers[0]

    @property
    def binary_header(self):
        return self._binary_header

    @property
    def traces(self):
        return self._traces

    @property
    def value_range(self):
        return self._value_range

    @property
    def min_value(self):
        return self._value_range.min

    @property
    def max_value(self):
        return self._value_range.max

    def number_of_traces(self):
        return len(self._traces)

    def samples_per_trace(self):
        if not self._traces:
            return 0

        return len(self._traces[0])

    def trace(self, index):
        if index < 0 or index >= len(self._traces):
            raise IndexError(
                "Invalid trace index: {0}, {1} traces".format(
                    index, len(self._traces)))

        return self._traces[index]

    def __str__(self):
        return "{0}: {1} text header(s), {2} trace(s)".format(
            self._name, len(self._text_headers), len(self._traces))
