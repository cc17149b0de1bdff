#!/usr/bin/env python
#
# A low level SEG-Y library
#
# SEG-Y REV1, header file descriptions. All records are big endian.
#
# "See SEG rev 1 Data Exchange format"
# SEG Technical Standards Committee
# Release 1.0, May 2002
#

import logging
import construct

PROG_VERSION = '2024.114'
LOGGER = logging.getLogger(__name__)

TEXT_HEADER_LENGTH = 3200
BINARY_HEADER_LENGTH = 400
TRACE_HEADER_LENGTH = 240
TAPE_LABEL_LENGTH = 128


class HeaderError(Exception):
    """
    Raised on an attempt to set a field a header does not have.
    """


class _Header(object):
    '''   Field values held by key, built and parsed with construct   '''
    __keys__ = ()

    def __init__(self):
        for c in self.__keys__:
            self.__dict__[c] = 0x00

    def set(self, keyval):
        for k in keyval.keys():
            if k in self.__dict__:
                self.__dict__[k] = keyval[k]
            else:
                raise HeaderError(
                    "Attempt to set unknown variable {0} in {1}.".format(
                        k, type(self).__name__))

    def layout(self):
        raise NotImplementedError

    def get(self):
        return self.layout().build(self.__dict__)

    def parse(self, buf):
        return self.layout().parse(buf)


# 3200 byte text header, 40 card images of 80 columns
def text_header():
    TEXT = "TEXT" / construct.Struct(
        "lines" / construct.Array(40, construct.Bytes(80)))
    return TEXT


class Text(_Header):
    __keys__ = ("lines",)

    def layout(self):
        return text_header()


# 400 byte reel header
def reel_header():
    REEL = "REEL" / construct.Struct(
        # Job identification number [3201-3204]
        "jobid" / construct.Int32sb,
        # Line number [3205-3208]
        "lino" / construct.Int32sb,
        # Reel number [3209-3212]
        "reno" / construct.Int32sb,
        # Traces per ensemble [3213-3214]
        "ntrpr" / construct.Int16sb,
        # Aux traces per ensemble [3215-3216]
        "nart" / construct.Int16sb,
        # Sample interval us [3217-3218]
        "hdt" / construct.Int16ub,
        # Field sample interval [3219-3220]
        "dto" / construct.Int16ub,
        # Number of samples per trace [3221-3222]
        "hns" / construct.Int16ub,
        # Field samples per trace [3223-3224]
        "nso" / construct.Int16ub,
        # Data format, 5 = 4-byte IEEE [3225-3226]
        "format" / construct.Int16sb,
        # Ensemble fold [3227-3228]
        "fold" / construct.Int16sb,
        # Trace sorting code, 5 == shot gathers [3229-3230]
        "tsort" / construct.Int16sb,
        # Vertical sum code [3231-3232]
        "vscode" / construct.Int16sb,
        # Starting sweep frequency [3233-3234]
        "hsfs" / construct.Int16sb,
        # Ending sweep frequency [3235-3236]
        "hsfe" / construct.Int16sb,
        # Sweep length us [3237-3238]
        "hslen" / construct.Int16sb,
        # Sweep type code [3239-3240]
        "hstyp" / construct.Int16sb,
        # Trace number of sweep channel [3241-3242]
        "schn" / construct.Int16sb,
        # Sweep taper length ms at start [3243-3244]
        "hstas" / construct.Int16sb,
        # Sweep taper length ms at end [3245-3246]
        "hstae" / construct.Int16sb,
        # Taper type [3247-3248]
        "htatyp" / construct.Int16sb,
        # Correlated data traces, 1 = no, 2 = yes [3249-3250]
        "hcorr" / construct.Int16sb,
        # Binary gain recovered, 1 = yes, 2 = no [3251-3252]
        "bgrcv" / construct.Int16sb,
        # Amplitude recovery method [3253-3254]
        "rcvm" / construct.Int16sb,
        # Measurement system [3255-3256]
        "mfeet" / construct.Int16sb,
        # Impulse signal polarity [3257-3258]
        "polyt" / construct.Int16sb,
        # Vibratory polarity code [3259-3260]
        "vpol" / construct.Int16sb,
        # Unassigned [3261-3500]
        "unass1" / construct.Bytes(240),
        # SEG-Y Revision number [3501-3502]
        "rev" / construct.Int16ub,
        # Fixed length trace flag [3503-3504]
        "trlen" / construct.Int16sb,
        # Number of extended text headers [3505-3506]
        "extxt" / construct.Int16sb,
        # Unassigned [3507-3600]
        "unass2" / construct.Bytes(94))

    return REEL


class Reel(_Header):
    __keys__ = ("jobid", "lino", "reno", "ntrpr", "nart", "hdt", "dto", "hns",
                "nso", "format", "fold", "tsort", "vscode", "hsfs", "hsfe",
                "hslen", "hstyp", "schn", "hstas", "hstae", "htatyp", "hcorr",
                "bgrcv", "rcvm", "mfeet", "polyt", "vpol", "unass1", "rev",
                "trlen", "extxt", "unass2")

    def __init__(self):
        _Header.__init__(self)
        self.unass1 = b'\x00' * 240
        self.unass2 = b'\x00' * 94

    def layout(self):
        return reel_header()


#
# 240 byte trace header
#
def trace_header():
    TRACE = "TRACE" / construct.Struct(
        # Line trace sequence number [1-4]
        "lineSeq" / construct.Int32sb,
        # Reel trace sequence number [5-8]
        "reelSeq" / construct.Int32sb,
        # Original field record number [9-12]
        "field_record_number" / construct.Int32sb,
        # Trace number within the original field record [13-16]
        "channel_number" / construct.Int32sb,
        # Energy source point number [17-20]
        "energySourcePt" / construct.Int32sb,
        # Ensemble number [21-24]
        "cdpEns" / construct.Int32sb,
        # Trace number within ensemble [25-28]
        "traceInEnsemble" / construct.Int32sb,
        # Trace ID code [29-30]
        "traceID" / construct.Int16sb,
        # Number of vertically summed traces [31-32]
        "vertSum" / construct.Int16sb,
        # Number of horizontally summed traces [33-34]
        "horSum" / construct.Int16sb,
        # Data use [35-36]
        "dataUse" / construct.Int16sb,
        # Offset (distance). Distance from center of the
        # source point to the center of the receiver group
        # (negative if opposite to direction in which line
        # is shot). [37-40]
        "sourceToRecDist" / construct.Int32sb,
        # Receiver group elevation [41-44]
        "recElevation" / construct.Int32sb,
        # Source elevation [45-48]
        "sourceSurfaceElevation" / construct.Int32sb,
        # Source depth [49-52]
        "sourceDepth" / construct.Int32sb,
        # Seismic Datum elevation at receiver group [53-56]
        "datumElevRec" / construct.Int32sb,
        # Seismic Datum elevation at source [57-60]
        "datumElevSource" / construct.Int32sb,
        # Water depth at source [61-64]
        "sourceWaterDepth" / construct.Int32sb,
        # Water depth at group [65-68]
        "recWaterDepth" / construct.Int32sb,
        # Elevation and depth scalar [69-70]
        "elevationScale" / construct.Int16sb,
        # Coordinate scalar [71-72]
        "coordScale" / construct.Int16sb,
        # X coordinate of source [73-76]
        "sourceLongOrX" / construct.Int32sb,
        # Y coordinate of source [77-80]
        "sourceLatOrY" / construct.Int32sb,
        # X coordinate of receiver group [81-84]
        "recLongOrX" / construct.Int32sb,
        # Y coordinate of receiver group [85-88]
        "recLatOrY" / construct.Int32sb,
        # Coordinate system [89-90]
        "coordUnits" / construct.Int16sb,
        # Weathering velocity [91-92]
        "weatheringVelocity" / construct.Int16sb,
        # Sub-weathering velocity [93-94]
        "subWeatheringVelocity" / construct.Int16sb,
        # Uphole time at source in ms [95-96]
        "sourceUpholeTime" / construct.Int16sb,
        # Uphole time at group in ms [97-98]
        "recUpholeTime" / construct.Int16sb,
        # Source static correction in ms [99-100]
        "sourceStaticCor" / construct.Int16sb,
        # Group static correction in ms [101-102]
        "recStaticCor" / construct.Int16sb,
        # Total static applied in ms [103-104]
        "totalStatic" / construct.Int16sb,
        # Lag time A, ms [105-106]
        "lagTimeA" / construct.Int16sb,
        # Lag time B, ms [107-108]
        "lagTimeB" / construct.Int16sb,
        # Delay recording time, ms [109-110]
        "delay" / construct.Int16sb,
        # Mute start time, ms [111-112]
        "muteStart" / construct.Int16sb,
        # Mute end time, ms [113-114]
        "muteEnd" / construct.Int16sb,
        # Number of samples [115-116]
        "sampleLength" / construct.Int16ub,
        # Sample interval, us [117-118]
        "deltaSample" / construct.Int16ub,
        # Gain type [119-120]
        "gainType" / construct.Int16sb,
        # Gain constant [121-122]
        "gainConst" / construct.Int16sb,
        # Early gain [123-124]
        "initialGain" / construct.Int16sb,
        # Correlated, 1 = no, 2 = yes [125-126]
        "correlated" / construct.Int16sb,
        # Sweep frequency at start [127-128]
        "sweepStart" / construct.Int16sb,
        # Sweep frequency at end [129-130]
        "sweepEnd" / construct.Int16sb,
        # Sweep length in ms [131-132]
        "sweepLength" / construct.Int16sb,
        # Sweep type [133-134]
        "sweepType" / construct.Int16sb,
        # Sweep taper at start, ms [135-136]
        "sweepTaperAtStart" / construct.Int16sb,
        # Sweep taper at end, ms [137-138]
        "sweepTaperAtEnd" / construct.Int16sb,
        # Taper type [139-140]
        "taperType" / construct.Int16sb,
        # Alias filter frequency, Hz [141-142]
        "aliasFreq" / construct.Int16sb,
        # Alias filter slope, dB/octave [143-144]
        "aliasSlope" / construct.Int16sb,
        # Notch filter frequency, Hz [145-146]
        "notchFreq" / construct.Int16sb,
        # Notch filter slope, dB/octave [147-148]
        "notchSlope" / construct.Int16sb,
        # Low-cut frequency, Hz [149-150]
        "lowCutFreq" / construct.Int16sb,
        # High-cut frequency, Hz [151-152]
        "hiCutFreq" / construct.Int16sb,
        # Low-cut slope, dB/octave [153-154]
        "lowCutSlope" / construct.Int16sb,
        # High-cut slope, dB/octave [155-156]
        "hiCutSlope" / construct.Int16sb,
        "year" / construct.Int16sb,  # Year [157-158]
        "day" / construct.Int16sb,  # Day of Year [159-160]
        "hour" / construct.Int16sb,  # Hour [161-162]
        "minute" / construct.Int16sb,  # Minute [163-164]
        "second" / construct.Int16sb,  # Seconds [165-166]
        # Time basis code [167-168]
        "timeBasisCode" / construct.Int16sb,
        # Trace weighting for LSB [169-170]
        "traceWeightingFactor" / construct.Int16sb,
        # Geophone group number [171-172]
        "phoneRollPos1" / construct.Int16ub,
        # Geophone group number (field) [173-174]
        "phoneFirstTrace" / construct.Int16ub,
        # Geophone group number, last trace (field) [175-176]
        "phoneLastTrace" / construct.Int16ub,
        # Gap size [177-178]
        "gapSize" / construct.Int16sb,
        # Over travel associated with taper at beginning
        # or end of line [179-180]
        "taperOvertravel" / construct.Int16ub,
        # X coordinate of ensemble (CDP) [181-184]
        "Xcoor" / construct.Int32sb,
        # Y coordinate of ensemble (CDP) [185-188]
        "Ycoor" / construct.Int32sb,
        # In-line number [189-192]
        "Inn" / construct.Int32sb,
        # Cross-line number [193-196]
        "Cnn" / construct.Int32sb,
        # Shot point number [197-200]
        "Spn" / construct.Int32sb,
        # Scaler to apply to Spn [201-202]
        "Scal" / construct.Int16sb,
        # Trace value measurement units [203-204]
        "Tvmu" / construct.Int16sb,
        # Transduction constant mantissa [205-208]
        "Tucmant" / construct.Int32sb,
        # Transduction constant exponent [209-210]
        "Tucexp" / construct.Int16sb,
        # Transduction units [211-212]
        "Tdu" / construct.Int16sb,
        # Device/Trace identifier [213-214]
        "Dti" / construct.Int16sb,
        # Time scalar [215-216]
        "Tscaler" / construct.Int16sb,
        # Source Type/Orientation [217-218]
        "Sto" / construct.Int16sb,
        # Source energy direction, tenths of degrees [219-224]
        "Sed" / construct.Array(3, construct.Int16sb),
        # Source measurement mantissa [225-228]
        "Smsmant" / construct.Int32sb,
        # Source measurement exponent [229-230]
        "Smsexp" / construct.Int16sb,
        # Source measurement Units [231-232]
        "Smu" / construct.Int16sb,
        # Unassigned [233-240]
        "unass" / construct.Bytes(8))

    return TRACE


class Trace(_Header):
    __keys__ = ("lineSeq", "reelSeq", "field_record_number", "channel_number",
                "energySourcePt", "cdpEns", "traceInEnsemble", "traceID",
                "vertSum", "horSum", "dataUse", "sourceToRecDist",
                "recElevation", "sourceSurfaceElevation", "sourceDepth",
                "datumElevRec", "datumElevSource", "sourceWaterDepth",
                "recWaterDepth", "elevationScale", "coordScale",
                "sourceLongOrX", "sourceLatOrY", "recLongOrX", "recLatOrY",
                "coordUnits", "weatheringVelocity", "subWeatheringVelocity",
                "sourceUpholeTime", "recUpholeTime", "sourceStaticCor",
                "recStaticCor", "totalStatic", "lagTimeA", "lagTimeB", "delay",
                "muteStart", "muteEnd", "sampleLength", "deltaSample",
                "gainType", "gainConst", "initialGain", "correlated",
                "sweepStart", "sweepEnd", "sweepLength", "sweepType",
                "sweepTaperAtStart", "sweepTaperAtEnd", "taperType",
                "aliasFreq", "aliasSlope", "notchFreq", "notchSlope",
                "lowCutFreq", "hiCutFreq", "lowCutSlope", "hiCutSlope", "year",
                "day", "hour", "minute", "second", "timeBasisCode",
                "traceWeightingFactor", "phoneRollPos1", "phoneFirstTrace",
                "phoneLastTrace", "gapSize", "taperOvertravel", "Xcoor",
                "Ycoor", "Inn", "Cnn", "Spn", "Scal", "Tvmu", "Tucmant",
                "Tucexp", "Tdu", "Dti", "Tscaler", "Sto", "Sed", "Smsmant",
                "Smsexp", "Smu", "unass")

    def __init__(self):
        _Header.__init__(self)
        self.Sed = [0, 0, 0]
        self.unass = b'\x00' * 8

    def layout(self):
        return trace_header()


#
# SEG-Y rev 1 storage unit (tape) label, 128 bytes of ASCII
#
def tape_label():
    LABEL = "LABEL" / construct.Struct(
        "storage_unit_sequence_number" / construct.Bytes(4),
        "segy_revision" / construct.Bytes(5),
        "storage_unit_structure" / construct.Bytes(6),
        "binding_edition" / construct.Bytes(4),
        "max_block_size" / construct.Bytes(10),
        "producer_organization_code" / construct.Bytes(10),
        "creation_date" / construct.Bytes(11),
        "serial_number" / construct.Bytes(12),
        "reserved01" / construct.Bytes(6),
        "storage_set_identifier" / construct.Bytes(60))

    return LABEL


class TapeLabel(_Header):
    __keys__ = ("storage_unit_sequence_number", "segy_revision",
                "storage_unit_structure", "binding_edition",
                "max_block_size", "producer_organization_code",
                "creation_date", "serial_number", "reserved01",
                "storage_set_identifier")

    SIZES = (4, 5, 6, 4, 10, 10, 11, 12, 6, 60)

    def __init__(self):
        _Header.__init__(self)
        for k, n in zip(TapeLabel.__keys__, TapeLabel.SIZES):
            self.__dict__[k] = b' ' * n

    def layout(self):
        return tape_label()
