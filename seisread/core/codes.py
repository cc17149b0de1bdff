#!/usr/bin/env python
#
# Coded values of the SEG-Y binary file header and trace header.
#
# Every set is closed: each member carries its integer tag and a
# description, and get(tag) returns the member or None so the reader can
# decide on a fallback.
#

import enum
import math
import logging

PROG_VERSION = '2024.114'
LOGGER = logging.getLogger(__name__)


class Coded(enum.Enum):
    def __init__(self, tag, description):
        self.tag = tag
        self.description = description

    @classmethod
    def get(cls, tag):
        for member in cls:
            if member.tag == tag:
                return member

        # Not found
        return None

    def __str__(self):
        return "{0} ({1})".format(self.description, self.tag)


def resolve(cls, tag, field, fallback):
    '''
       Look up tag in the coded set cls. Unknown tags log a warning naming
       the field and return fallback, the read goes on.
    '''
    member = cls.get(tag)
    if member is None:
        LOGGER.warning(
            "Unexpected {0} value: {1}. Using {2} instead".format(
                field, tag, fallback.name))
        member = fallback

    return member


#
# Binary file header
#


class DataFormat(Coded):
    UNKNOWN = (0, "Unknown", 1, 'int8')
    FLOAT4 = (1, "4-byte IBM floating-point", 4, 'float32')
    INT4 = (2, "4-byte, two's complement integer", 4, 'int32')
    INT2 = (3, "2-byte, two's complement integer", 2, 'int16')
    INT4_GAIN = (4, "4-byte fixed point with gain", 4, 'int32')
    FLOAT4_IEEE = (5, "4-byte IEEE floating point", 4, 'float32')
    BYTE = (8, "1-byte, two's complement integer", 1, 'int8')

    def __init__(self, tag, description, size, dtype):
        Coded.__init__(self, tag, description)
        # Bytes per sample and NumPy kind of the decoded samples
        self.size = size
        self.dtype = dtype


class Sorting(Coded):
    OTHER = (-1, "Other")
    UNKNOWN = (0, "Unknown")
    AS_RECORDED = (1, "As recorded")
    CDP_ENSEMBLE = (2, "CDP ensemble")
    SINGLE_FOLD = (3, "Single fold continuous profile")
    HORIZONTALLY_STACKED = (4, "Horizontally stacked")
    COMMON_SOURCE_POINT = (5, "Common source point")
    COMMON_RECEIVER_POINT = (6, "Common receiver point")
    COMMON_OFFSET_POINT = (7, "Common offset point")
    COMMON_MID_POINT = (8, "Common mid point")
    COMMON_CONVERSION_POINT = (9, "Common conversion point")


class SweepType(Coded):
    UNKNOWN = (0, "Unknown")
    LINEAR = (1, "Linear")
    PARABOLIC = (2, "Parabolic")
    EXPONENTIAL = (3, "Exponential")
    OTHER = (4, "Other")


class SweepTaperType(Coded):
    UNKNOWN = (0, "Unknown")
    LINEAR = (1, "Linear")
    COS2 = (2, "Cos2")
    OTHER = (3, "Other")


class AmplitudeRecovery(Coded):
    UNKNOWN = (0, "Unknown")
    NONE = (1, "None")
    SPHERICAL_DIVERGENCE = (2, "Spherical divergence")
    AGC = (3, "AGC")
    OTHER = (4, "Other")


class LengthUnit(Coded):
    UNKNOWN = (0, "Unknown", "")
    METER = (1, "Meter", "m")
    FEET = (2, "Feet", "ft")

    def __init__(self, tag, description, symbol):
        Coded.__init__(self, tag, description)
        self.symbol = symbol


class ImpulseSignalPolarity(Coded):
    UNKNOWN = (0, "Unknown")
    NEGATIVE = (1, "Increase in pressure or upward geophone case "
                   "movement gives negative number on tape")
    POSITIVE = (2, "Increase in pressure or upward geophone case "
                   "movement gives positive number on tape")


class VibratoryPolarity(Coded):
    '''   Seismic signal lags pilot signal by an angle in this sector   '''
    SECTOR1 = (1, 337.5, 22.5)
    SECTOR2 = (2, 22.5, 67.5)
    SECTOR3 = (3, 67.5, 112.5)
    SECTOR4 = (4, 112.5, 157.5)
    SECTOR5 = (5, 157.5, 202.5)
    SECTOR6 = (6, 202.5, 247.5)
    SECTOR7 = (7, 247.5, 292.5)
    SECTOR8 = (8, 292.5, 337.5)

    def __init__(self, tag, start_angle, end_angle):
        Coded.__init__(self, tag,
                       "{0} - {1}".format(start_angle, end_angle))
        self.start_angle = start_angle
        self.end_angle = end_angle

    @property
    def angle_interval(self):
        return self.start_angle, self.end_angle

    @classmethod
    def from_angle(cls, angle):
        '''   The sector holding angle, in degrees   '''
        # Bring angle into [0, 360)
        angle += math.ceil(-angle / 360.0) * 360.0
        for member in cls:
            if angle < member.end_angle:
                return member

        # [337.5, 360) wraps into the first sector
        return cls.SECTOR1


class FormatRevision(Coded):
    STANDARD = (0, "Standard")
    GECO06 = (1, "Geco 06")
    GECOSEIS54 = (2, "GecoSeis 54")
    REV1 = (0x0100, "SEG Y rev 1")
    REV2 = (0x0200, "SEG Y rev 2")


#
# Trace header
#


class TraceType(Coded):
    OTHER = (-1, "Other")
    UNKNOWN = (0, "Unknown")
    SEISMIC = (1, "Seismic data")
    DEAD = (2, "Dead")
    DUMMY = (3, "Dummy")
    TIME_BREAK = (4, "Time break")
    UPHOLE = (5, "Uphole")
    SWEEP = (6, "Sweep")
    TIMING = (7, "Timing")
    WATER_BREAK = (8, "Water break")
    NEAR_FIELD = (9, "Near-field gun signature")
    FAR_FIELD = (10, "Far-field gun signature")
    SEISMIC_PRESSURE = (11, "Seismic pressure sensor")
    SENSOR_VERTICAL = (12, "Multicomponent seismic sensor - "
                           "Vertical component")
    SENSOR_CROSSLINE = (13, "Multicomponent seismic sensor - "
                            "Cross-line component")
    SENSOR_INLINE = (14, "Multicomponent seismic sensor - "
                         "In-line component")
    ROTATED_VERTICAL = (15, "Rotated multicomponent seismic sensor - "
                            "Vertical component")
    ROTATED_TRANSVERSE = (16, "Rotated multicomponent seismic sensor - "
                              "Transverse component")
    ROTATED_RADIAL = (17, "Rotated multicomponent seismic sensor - "
                          "Radial component")
    VIBRATOR_MASS = (18, "Vibrator reaction mass")
    VIBRATOR_BASEPLATE = (19, "Vibrator baseplate")
    VIBRATOR_GROUND_FORCE = (20, "Vibrator estimated ground force")
    VIBRATOR_REFERENCE = (21, "Vibrator reference")
    TIME_VELOCITY = (22, "Time-velocity pairs")


class DataUsage(Coded):
    UNKNOWN = (0, "Unknown")
    PRODUCTION = (1, "Production")
    TEST = (2, "Test")


class CoordinateUnit(Coded):
    UNKNOWN = (0, "Unknown")
    LENGTH = (1, "Length (meters or feet)")
    ARCSECONDS = (2, "Seconds of arc")
    DEGREES = (3, "Decimal degrees")
    DMS = (4, "Degrees, minutes, seconds (DMS)")


class GainType(Coded):
    UNKNOWN = (0, "Unknown")
    FIXED = (1, "Fixed")
    BINARY = (2, "Binary")
    FLOATING_POINT = (3, "Floating point")
    AGC = (4, "AGC")
    PGC = (5, "PGC")
    GANG = (6, "Gang")


class TimeBasis(Coded):
    UNKNOWN = (0, "Unknown")
    LOCAL = (1, "Local")
    GMT = (2, "Greenwich Mean Time")
    OTHER = (3, "Other")
    UTC = (4, "Coordinated Universal Time")


class Overtravel(Coded):
    UNKNOWN = (0, "Unknown")
    DOWN = (1, "Down (or behind)")
    UP = (2, "Up (or ahead)")


class TraceValueUnit(Coded):
    OTHER = (-1, "Other")
    UNKNOWN = (0, "Unknown")
    PASCAL = (1, "Pa")
    VOLTS = (2, "V")
    MILLIVOLTS = (3, "mV")
    AMPERES = (4, "A")
    METERS = (5, "m")
    METERS_PER_SECOND = (6, "m/s")
    METERS_PER_SECOND2 = (7, "m/s2")
    NEWTON = (8, "N")
    WATT = (9, "W")


class SourceType(Coded):
    OTHER = (-1, "Other")
    UNKNOWN = (0, "Unknown")
    VIBRATORY_VERTICAL = (1, "Vibratory - Vertical orientation")
    VIBRATORY_CROSSLINE = (2, "Vibratory - Cross-line orientation")
    VIBRATORY_INLINE = (3, "Vibratory - In-line orientation")
    IMPULSIVE_VERTICAL = (4, "Impulsive - Vertical orientation")
    IMPULSIVE_CROSSLINE = (5, "Impulsive - Cross-line orientation")
    IMPULSIVE_INLINE = (6, "Impulsive - In-line orientation")
    DISTRIBUTED_VERTICAL = (7, "Distributed Impulsive - "
                               "Vertical orientation")
    DISTRIBUTED_CROSSLINE = (8, "Distributed Impulsive - "
                                "Cross-line orientation")
    DISTRIBUTED_INLINE = (9, "Distributed Impulsive - "
                             "In-line orientation")


class SourceUnit(Coded):
    OTHER = (-1, "Other")
    UNKNOWN = (0, "Unknown")
    JOULE = (1, "J")
    KILOWATT = (2, "kW")
    PASCAL = (3, "Pa")
    # Listed twice as 4 in rev 1, Bar and Bar-meter
    BAR = (4, "Bar")
    NEWTON = (5, "N")
    KILOGRAM = (6, "kg")
