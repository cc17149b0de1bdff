#!/usr/bin/env python
#
# A class to read SEG-Y rev 1 files into a SeismicFile
#
# The file is read front to back: textual header, binary header,
# extended textual headers, then trace header and samples for each trace.
#

import logging
import os

import numpy as np

from seisread.core import codes, ibmfloat, randomreader, scale, segy_h, \
    segyfile

PROG_VERSION = '2024.114'
LOGGER = logging.getLogger(__name__)

# Bytes per sample by data format
SAMPLE_LENGTH = {1: 4, 2: 4, 3: 2, 4: 4, 5: 4, 8: 1}
# On disk sample layout by data format, IBM floats are decoded separately
SAMPLE_DTYPE = {2: '>i4', 3: '>i2', 5: '>f4', 8: 'i1'}

TEXT_HEADER_LENGTH = segy_h.TEXT_HEADER_LENGTH
BINARY_HEADER_LENGTH = segy_h.BINARY_HEADER_LENGTH
TRACE_HEADER_LENGTH = segy_h.TRACE_HEADER_LENGTH
# Smaller files are not sniffed as SEG-Y, text header plus one trace header
MIN_SEGY_SIZE = TEXT_HEADER_LENGTH + TRACE_HEADER_LENGTH

SEGY_SUFFIXES = ('.sgy', '.segy')


class SegyError(Exception):
    """
    Base class of the errors that abort a read.
    """


class SegyIOError(SegyError):
    """
    Raised when the file can not be opened or read to the end.
    """


class UnsupportedFormatError(SegyError):
    """
    Raised for sample formats that can not be decoded.
    """


class Reader(object):
    def __init__(self, infile=None,
                 buffer_size=randomreader.DEFAULT_BUFFER_SIZE):
        self.infile = infile
        self.buffer_size = buffer_size
        # randomreader.Reader, only set while a read is in progress
        self.RR = None

    def set_source(self, fh):
        '''   Decode from an already open binary file object   '''
        self.RR = randomreader.Reader(fh, self.buffer_size)

    def read_text_header(self):
        buf = self.RR.read_bytes(TEXT_HEADER_LENGTH)
        container = segy_h.Text().parse(buf)

        return segyfile.TextHeader.from_bytes(b''.join(container.lines))

    def read_binary_header(self):
        buf = self.RR.read_bytes(BINARY_HEADER_LENGTH)
        c = segy_h.Reel().parse(buf)

        return segyfile.BinaryFileHeader(
            job_no=c.jobid,
            line_no=c.lino,
            reel_no=c.reno,
            traces_per_ensemble=c.ntrpr,
            aux_traces_per_ensemble=c.nart,
            sample_interval=c.hdt,
            sample_interval_original=c.dto,
            samples_per_trace=c.hns,
            samples_per_trace_original=c.nso,
            data_format=codes.resolve(codes.DataFormat, c.format,
                                      "data format",
                                      codes.DataFormat.UNKNOWN),
            ensemble_fold=c.fold,
            sorting=codes.resolve(codes.Sorting, c.tsort, "sorting",
                                  codes.Sorting.UNKNOWN),
            vertical_sum=c.vscode,
            sweep_frequency_start=c.hsfs,
            sweep_frequency_end=c.hsfe,
            sweep_length=c.hslen,
            sweep_type=codes.resolve(codes.SweepType, c.hstyp, "sweep type",
                                     codes.SweepType.UNKNOWN),
            sweep_channel_no=c.schn,
            sweep_taper_length_start=c.hstas,
            sweep_taper_length_end=c.hstae,
            sweep_taper_type=codes.resolve(codes.SweepTaperType, c.htatyp,
                                           "sweep taper type",
                                           codes.SweepTaperType.UNKNOWN),
            correlated=c.hcorr == 2,
            binary_gain_recovered=c.bgrcv == 1,
            amplitude_recovery=codes.resolve(codes.AmplitudeRecovery, c.rcvm,
                                             "amplitude recovery",
                                             codes.AmplitudeRecovery.OTHER),
            length_unit=codes.resolve(codes.LengthUnit, c.mfeet,
                                      "length unit",
                                      codes.LengthUnit.UNKNOWN),
            impulse_signal_polarity=codes.resolve(
                codes.ImpulseSignalPolarity, c.polyt,
                "impulse signal polarity",
                codes.ImpulseSignalPolarity.UNKNOWN),
            vibratory_polarity=codes.resolve(
                codes.VibratoryPolarity, c.vpol, "vibratory polarity",
                codes.VibratoryPolarity.from_angle(0.0)),
            format_revision=codes.resolve(codes.FormatRevision, c.rev,
                                          "format revision",
                                          codes.FormatRevision.STANDARD),
            fixed_length_traces=c.trlen == 1,
            extended_text_headers=c.extxt)

    def read_extended_text_headers(self, count):
        if count < 0:
            LOGGER.warning(
                "Unexpected number of extended text headers: {0}. "
                "Reading none".format(count))
            return []

        return [self.read_text_header() for i in range(count)]

    def read_trace_header(self):
        buf = self.RR.read_bytes(TRACE_HEADER_LENGTH)
        c = segy_h.Trace().parse(buf)

        def elevation(raw):
            return scale.apply_scale(raw, c.elevationScale)

        def coordinate(raw):
            return scale.apply_scale(raw, c.coordScale)

        def ms(raw):
            return scale.apply_time_modifier(raw, c.Tscaler)

        return segyfile.TraceHeader(
            trace_sequence_no=c.lineSeq,
            trace_sequence_no_reel=c.reelSeq,
            field_record_no=c.field_record_number,
            field_record_trace_no=c.channel_number,
            energy_source_point_no=c.energySourcePt,
            cdp_ensemble_no=c.cdpEns,
            ensemble_trace_no=c.traceInEnsemble,
            trace_type=codes.resolve(codes.TraceType, c.traceID,
                                     "trace type", codes.TraceType.UNKNOWN),
            vertically_summed_traces=c.vertSum,
            horizontally_stacked_traces=c.horSum,
            data_usage=codes.resolve(codes.DataUsage, c.dataUse,
                                     "data usage", codes.DataUsage.UNKNOWN),
            source_receiver_distance=c.sourceToRecDist,
            receiver_elevation=elevation(c.recElevation),
            surface_elevation=elevation(c.sourceSurfaceElevation),
            source_depth=elevation(c.sourceDepth),
            datum_elevation_receiver=elevation(c.datumElevRec),
            datum_elevation_source=elevation(c.datumElevSource),
            water_depth_source=elevation(c.sourceWaterDepth),
            water_depth_receiver=elevation(c.recWaterDepth),
            source_x=coordinate(c.sourceLongOrX),
            source_y=coordinate(c.sourceLatOrY),
            group_x=coordinate(c.recLongOrX),
            group_y=coordinate(c.recLatOrY),
            coordinate_unit=codes.resolve(codes.CoordinateUnit,
                                          c.coordUnits, "coordinate unit",
                                          codes.CoordinateUnit.UNKNOWN),
            weathering_velocity=c.weatheringVelocity,
            subweathering_velocity=c.subWeatheringVelocity,
            uphole_time_source=ms(c.sourceUpholeTime),
            uphole_time_receiver=ms(c.recUpholeTime),
            source_static_correction=ms(c.sourceStaticCor),
            group_static_correction=ms(c.recStaticCor),
            total_static_applied=ms(c.totalStatic),
            lag_time_a=ms(c.lagTimeA),
            lag_time_b=ms(c.lagTimeB),
            recording_delay=ms(c.delay),
            mute_time_start=ms(c.muteStart),
            mute_time_end=ms(c.muteEnd),
            samples=c.sampleLength,
            sample_interval=c.deltaSample,
            gain_type=codes.resolve(codes.GainType, c.gainType,
                                    "field gain type",
                                    codes.GainType.UNKNOWN),
            gain_constant=c.gainConst,
            early_gain=c.initialGain,
            correlated=c.correlated == 2,
            sweep_frequency_start=c.sweepStart,
            sweep_frequency_end=c.sweepEnd,
            sweep_length=c.sweepLength,
            sweep_type=codes.resolve(codes.SweepType, c.sweepType,
                                     "sweep type", codes.SweepType.UNKNOWN),
            sweep_taper_length_start=c.sweepTaperAtStart,
            sweep_taper_length_end=c.sweepTaperAtEnd,
            sweep_taper_type=codes.resolve(codes.SweepTaperType, c.taperType,
                                           "sweep taper type",
                                           codes.SweepTaperType.UNKNOWN),
            alias_filter_frequency=c.aliasFreq,
            alias_filter_slope=c.aliasSlope,
            notch_filter_frequency=c.notchFreq,
            notch_filter_slope=c.notchSlope,
            low_cut_frequency=c.lowCutFreq,
            high_cut_frequency=c.hiCutFreq,
            low_cut_slope=c.lowCutSlope,
            high_cut_slope=c.hiCutSlope,
            year=c.year,
            day_of_year=c.day,
            hour=c.hour,
            minute=c.minute,
            second=c.second,
            time_basis=codes.resolve(codes.TimeBasis, c.timeBasisCode,
                                     "time basis", codes.TimeBasis.UNKNOWN),
            trace_weighting_factor=c.traceWeightingFactor,
            group_no_roll_switch=c.phoneRollPos1,
            group_no_first_trace=c.phoneFirstTrace,
            group_no_last_trace=c.phoneLastTrace,
            gap_size=c.gapSize,
            overtravel=codes.resolve(codes.Overtravel, c.taperOvertravel,
                                     "overtravel", codes.Overtravel.UNKNOWN),
            cdp_x=coordinate(c.Xcoor),
            cdp_y=coordinate(c.Ycoor),
            inline_no=c.Inn,
            crossline_no=c.Cnn,
            shot_point=scale.apply_shotpoint_modifier(c.Spn, c.Scal),
            trace_value_unit=codes.resolve(codes.TraceValueUnit, c.Tvmu,
                                           "trace value unit",
                                           codes.TraceValueUnit.UNKNOWN),
            transduction_constant=scale.apply_exponent(c.Tucmant, c.Tucexp),
            transduction_unit=codes.resolve(codes.TraceValueUnit, c.Tdu,
                                            "transduction unit",
                                            codes.TraceValueUnit.UNKNOWN),
            device_id=c.Dti,
            source_type=codes.resolve(codes.SourceType, c.Sto,
                                      "source type",
                                      codes.SourceType.UNKNOWN),
            # Tenths of degrees
            source_energy_direction=tuple(d / 10.0 for d in c.Sed),
            source_measurement=scale.apply_exponent(c.Smsmant, c.Smsexp),
            source_unit=codes.resolve(codes.SourceUnit, c.Smu,
                                      "source unit",
                                      codes.SourceUnit.UNKNOWN))

    def read_trace(self, number_of_samples, data_format, value_range=None):
        '''
           Read number_of_samples samples in data_format.
           Returns the samples as a numpy array and value_range widened to
           cover them.
        '''
        if value_range is None:
            value_range = segyfile.ValueRange()

        f = data_format.tag
        if f not in SAMPLE_DTYPE and data_format != codes.DataFormat.FLOAT4:
            raise UnsupportedFormatError(
                "Unsupported data format: {0}".format(data_format))

        buf = self.RR.read_bytes(number_of_samples * SAMPLE_LENGTH[f])
        # IBM floats - 4 byte, range is taken before narrowing to float32
        if data_format == codes.DataFormat.FLOAT4:
            values = ibmfloat.ibm2float_array(buf)
            return values.astype(np.float32), value_range.update(values)

        ret = np.frombuffer(buf, dtype=SAMPLE_DTYPE[f]).astype(
            data_format.dtype)

        return ret, value_range.update(ret)

    def read(self, read_traces=True):
        '''
           Read the whole file.
           Returns a SeismicFile, raises SegyIOError or
           UnsupportedFormatError. Nothing is returned from a failed read.
        '''
        LOGGER.info("Reading {0}".format(self.infile))
        try:
            with open(self.infile, 'rb') as fh:
                self.set_source(fh)
                try:
                    return self._read(read_traces)
                finally:
                    self.RR = None
        except (IOError, OSError) as e:
            raise SegyIOError(
                "Failed to read {0}: {1}".format(self.infile, e)) from e

    def _read(self, read_traces):
        file_size = self.RR.remaining()

        text_headers = [self.read_text_header()]
        binary_header = self.read_binary_header()
        text_headers.extend(self.read_extended_text_headers(
            binary_header.extended_text_headers))

        traces = []
        value_range = segyfile.ValueRange()
        if read_traces:
            data_format = binary_header.data_format
            n_traces = number_of_traces(file_size, len(text_headers),
                                        SAMPLE_LENGTH.get(data_format.tag,
                                                          data_format.size),
                                        binary_header.samples_per_trace)
            LOGGER.debug("{0} traces of {1} samples, {2}".format(
                n_traces, binary_header.samples_per_trace, data_format))
            for i in range(n_traces):
                header = self.read_trace_header()
                samples, value_range = self.read_trace(
                    binary_header.samples_per_trace, data_format,
                    value_range)
                traces.append(segyfile.Trace(header, data_format, samples))

        return segyfile.SeismicFile(os.path.basename(self.infile), None,
                                    text_headers, binary_header, traces,
                                    value_range)


def number_of_traces(file_size, n_text_headers, sample_size,
                     samples_per_trace):
    '''
       Traces that fit in the file after the text and binary headers.
       A trailing partial trace is not counted.
    '''
    data_size = file_size - TEXT_HEADER_LENGTH * n_text_headers - \
        BINARY_HEADER_LENGTH
    trace_size = sample_size * samples_per_trace + TRACE_HEADER_LENGTH

    return max(0, data_size // trace_size)


def is_segy_file(path):
    '''
       Likelihood that path is a SEG-Y file, 0.0 to 1.0.
       Only the name and size are looked at.
    '''
    if not os.path.isfile(path):
        return 0.0

    if os.path.getsize(path) < MIN_SEGY_SIZE:
        return 0.0

    if os.path.basename(path).lower().endswith(SEGY_SUFFIXES):
        return 0.95

    return 0.001


def _label_int(s, field):
    try:
        return int(s)
    except ValueError:
        LOGGER.warning("Unexpected {0} value: {1}".format(field, s))
        return None


def read_tape_label(path):
    '''   Read a 128 byte SEG-Y storage unit label from the start of path   '''
    try:
        with open(path, 'rb') as fh:
            buf = fh.read(segy_h.TAPE_LABEL_LENGTH)
    except (IOError, OSError) as e:
        raise SegyIOError(
            "Failed to read tape label {0}: {1}".format(path, e)) from e

    if len(buf) != segy_h.TAPE_LABEL_LENGTH:
        raise SegyIOError(
            "Failed to read tape label {0}: {1} of {2} bytes".format(
                path, len(buf), segy_h.TAPE_LABEL_LENGTH))

    c = segy_h.TapeLabel().parse(buf)
    fields = {}
    for k in segy_h.TapeLabel.__keys__:
        fields[k] = c[k].decode('latin-1').strip()

    return segyfile.TapeLabel(
        storage_unit_sequence_number=_label_int(
            fields['storage_unit_sequence_number'],
            "storage unit sequence number"),
        segy_revision=fields['segy_revision'],
        storage_unit_structure=fields['storage_unit_structure'],
        binding_edition=fields['binding_edition'],
        max_block_size=_label_int(fields['max_block_size'],
                                  "max block size"),
        producer_organization_code=fields['producer_organization_code'],
        creation_date=segyfile.parse_creation_date(fields['creation_date']),
        serial_number=fields['serial_number'],
        storage_set_identifier=fields['storage_set_identifier'])
