#!/usr/bin/env python
#
# Write a SeismicFile back out as SEG-Y rev 1, big endian.
#
# Scaled header values are turned back into integer plus scalar, so values
# that need more precision than a power of ten scalar allows come back
# rounded.
#

import logging
import os

import construct
import numpy as np

from seisread.core import codes, ibmfloat, randomreader, scale, segy_h
from seisread.core.segyreader import SegyError, SAMPLE_DTYPE, \
    TEXT_HEADER_LENGTH, BINARY_HEADER_LENGTH

PROG_VERSION = '2024.114'
LOGGER = logging.getLogger(__name__)

# Offset of the extended text header count in the binary header
EXTXT_OFFSET = 304


class SegyWriteError(SegyError):
    '''
    Raised if SEG-Y file can't be written
    '''


def _tag(member):
    return member.tag


def text_header_offset(index):
    '''   Byte offset of text header index, 0 is the mandatory header   '''
    if index == 0:
        return 0

    return TEXT_HEADER_LENGTH + BINARY_HEADER_LENGTH + \
        (index - 1) * TEXT_HEADER_LENGTH


class Writer(object):
    def __init__(self, outfile):
        self.outfile = outfile

    def build_reel_header(self, seismic_file):
        bh = seismic_file.binary_header
        reel = segy_h.Reel()
        reel.set({
            "jobid": bh.job_no, "lino": bh.line_no, "reno": bh.reel_no,
            "ntrpr": bh.traces_per_ensemble,
            "nart": bh.aux_traces_per_ensemble,
            "hdt": bh.sample_interval, "dto": bh.sample_interval_original,
            "hns": bh.samples_per_trace,
            "nso": bh.samples_per_trace_original,
            "format": _tag(bh.data_format), "fold": bh.ensemble_fold,
            "tsort": _tag(bh.sorting), "vscode": bh.vertical_sum,
            "hsfs": bh.sweep_frequency_start, "hsfe": bh.sweep_frequency_end,
            "hslen": bh.sweep_length, "hstyp": _tag(bh.sweep_type),
            "schn": bh.sweep_channel_no,
            "hstas": bh.sweep_taper_length_start,
            "hstae": bh.sweep_taper_length_end,
            "htatyp": _tag(bh.sweep_taper_type),
            "hcorr": 2 if bh.correlated else 1,
            "bgrcv": 1 if bh.binary_gain_recovered else 2,
            "rcvm": _tag(bh.amplitude_recovery),
            "mfeet": _tag(bh.length_unit),
            "polyt": _tag(bh.impulse_signal_polarity),
            "vpol": _tag(bh.vibratory_polarity),
            "rev": _tag(bh.format_revision),
            "trlen": 1 if bh.fixed_length_traces else 0,
            # What is actually written, not what was read
            "extxt": len(seismic_file.text_headers) - 1})

        return reel.get()

    def build_trace_header(self, th):
        elevation_scale, elevations = scale.choose_scale(
            [th.receiver_elevation, th.surface_elevation, th.source_depth,
             th.datum_elevation_receiver, th.datum_elevation_source,
             th.water_depth_source, th.water_depth_receiver])
        coord_scale, coords = scale.choose_scale(
            [th.source_x, th.source_y, th.group_x, th.group_y,
             th.cdp_x, th.cdp_y])
        time_scale, times = scale.choose_scale(
            [th.uphole_time_source, th.uphole_time_receiver,
             th.source_static_correction, th.group_static_correction,
             th.total_static_applied, th.lag_time_a, th.lag_time_b,
             th.recording_delay, th.mute_time_start, th.mute_time_end],
            bits=16)
        sp_scale, sp = scale.choose_scale([th.shot_point])
        tuc_mant, tuc_exp = scale.choose_exponent(th.transduction_constant)
        sms_mant, sms_exp = scale.choose_exponent(th.source_measurement)

        trace = segy_h.Trace()
        trace.set({
            "lineSeq": th.trace_sequence_no,
            "reelSeq": th.trace_sequence_no_reel,
            "field_record_number": th.field_record_no,
            "channel_number": th.field_record_trace_no,
            "energySourcePt": th.energy_source_point_no,
            "cdpEns": th.cdp_ensemble_no,
            "traceInEnsemble": th.ensemble_trace_no,
            "traceID": _tag(th.trace_type),
            "vertSum": th.vertically_summed_traces,
            "horSum": th.horizontally_stacked_traces,
            "dataUse": _tag(th.data_usage),
            "sourceToRecDist": th.source_receiver_distance,
            "elevationScale": elevation_scale,
            "coordScale": coord_scale,
            "coordUnits": _tag(th.coordinate_unit),
            "weatheringVelocity": th.weathering_velocity,
            "subWeatheringVelocity": th.subweathering_velocity,
            "sampleLength": th.samples,
            "deltaSample": th.sample_interval,
            "gainType": _tag(th.gain_type),
            "gainConst": th.gain_constant,
            "initialGain": th.early_gain,
            "correlated": 2 if th.correlated else 1,
            "sweepStart": th.sweep_frequency_start,
            "sweepEnd": th.sweep_frequency_end,
            "sweepLength": th.sweep_length,
            "sweepType": _tag(th.sweep_type),
            "sweepTaperAtStart": th.sweep_taper_length_start,
            "sweepTaperAtEnd": th.sweep_taper_length_end,
            "taperType": _tag(th.sweep_taper_type),
            "aliasFreq": th.alias_filter_frequency,
            "aliasSlope": th.alias_filter_slope,
            "notchFreq": th.notch_filter_frequency,
            "notchSlope": th.notch_filter_slope,
            "lowCutFreq": th.low_cut_frequency,
            "hiCutFreq": th.high_cut_frequency,
            "lowCutSlope": th.low_cut_slope,
            "hiCutSlope": th.high_cut_slope,
            "year": th.year, "day": th.day_of_year, "hour": th.hour,
            "minute": th.minute, "second": th.second,
            "timeBasisCode": _tag(th.time_basis),
            "traceWeightingFactor": th.trace_weighting_factor,
            "phoneRollPos1": th.group_no_roll_switch,
            "phoneFirstTrace": th.group_no_first_trace,
            "phoneLastTrace": th.group_no_last_trace,
            "gapSize": th.gap_size,
            "taperOvertravel": _tag(th.overtravel),
            "Inn": th.inline_no,
            "Cnn": th.crossline_no,
            "Spn": sp[0],
            "Scal": sp_scale,
            "Tvmu": _tag(th.trace_value_unit),
            "Tucmant": tuc_mant,
            "Tucexp": tuc_exp,
            "Tdu": _tag(th.transduction_unit),
            "Dti": th.device_id,
            "Tscaler": time_scale,
            "Sto": _tag(th.source_type),
            # Tenths of degrees
            "Sed": [int(round(d * 10)) for d in th.source_energy_direction],
            "Smsmant": sms_mant,
            "Smsexp": sms_exp,
            "Smu": _tag(th.source_unit)})

        trace.set(dict(zip(
            ("recElevation", "sourceSurfaceElevation", "sourceDepth",
             "datumElevRec", "datumElevSource", "sourceWaterDepth",
             "recWaterDepth"), elevations)))
        trace.set(dict(zip(
            ("sourceLongOrX", "sourceLatOrY", "recLongOrX", "recLatOrY",
             "Xcoor", "Ycoor"), coords)))
        trace.set(dict(zip(
            ("sourceUpholeTime", "recUpholeTime", "sourceStaticCor",
             "recStaticCor", "totalStatic", "lagTimeA", "lagTimeB", "delay",
             "muteStart", "muteEnd"), times)))

        return trace.get()

    def build_data_array(self, samples, data_format):
        # IBM floats - 4 byte
        if data_format == codes.DataFormat.FLOAT4:
            return ibmfloat.float2ibm_array(samples)

        return np.asarray(samples).astype(
            SAMPLE_DTYPE[data_format.tag]).tobytes()

    def write(self, seismic_file):
        '''   Write seismic_file to outfile, replacing what is there   '''
        data_format = seismic_file.binary_header.data_format
        if data_format.tag not in SAMPLE_DTYPE and \
                data_format != codes.DataFormat.FLOAT4:
            raise SegyWriteError(
                "Can not write data format: {0}".format(data_format))

        n_samples = seismic_file.binary_header.samples_per_trace
        for i, t in enumerate(seismic_file.traces):
            if len(t) != n_samples:
                raise SegyWriteError(
                    "Trace {0} has {1} samples, binary header says {2}"
                    .format(i, len(t), n_samples))

        LOGGER.info("Writing {0}".format(self.outfile))
        try:
            with open(self.outfile, 'wb') as fd:
                fd.write(seismic_file.text_header.as_ebcdic())
                fd.write(self.build_reel_header(seismic_file))
                for th in seismic_file.text_headers[1:]:
                    fd.write(th.as_ebcdic())
                for t in seismic_file.traces:
                    fd.write(self.build_trace_header(t.header))
                    fd.write(self.build_data_array(t.samples, data_format))
        except (IOError, OSError) as e:
            raise SegyWriteError(
                "Failed to write {0}: {1}".format(self.outfile, e)) from e
        except (ValueError, construct.ConstructError) as e:
            raise SegyWriteError(
                "Failed to encode {0}: {1}".format(self.outfile, e)) from e

        LOGGER.info("Wrote {0} traces to {1}".format(
            seismic_file.number_of_traces(), self.outfile))

    def write_text_header(self, text_header, index=0):
        '''
           Overwrite text header index of an existing file, as EBCDIC.
           The file length does not change.
        '''
        if index < 0:
            raise SegyWriteError("Invalid text header index: {0}".format(
                index))

        offset = text_header_offset(index)
        try:
            with open(self.outfile, 'r+b') as fh:
                size = os.fstat(fh.fileno()).st_size
                if index > 0:
                    rr = randomreader.Reader(fh, BINARY_HEADER_LENGTH)
                    rr.seek(TEXT_HEADER_LENGTH + EXTXT_OFFSET)
                    n = rr.read_i16()
                    if index > n:
                        raise SegyWriteError(
                            "Invalid text header index: {0}, file has {1} "
                            "extended text headers".format(index, max(n, 0)))

                if offset + TEXT_HEADER_LENGTH > size:
                    raise SegyWriteError(
                        "File {0} too short for text header {1}".format(
                            self.outfile, index))

                fh.seek(offset)
                fh.write(text_header.as_ebcdic())
        except (IOError, OSError) as e:
            raise SegyWriteError(
                "Failed to write text header to {0}: {1}".format(
                    self.outfile, e)) from e

        LOGGER.info("Wrote text header {0} to {1}".format(
            index, self.outfile))
