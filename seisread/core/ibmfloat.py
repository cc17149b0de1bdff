#!/usr/bin/env python

#
# Convert 32 bit IBM floats to IEEE doubles
# and visa versa, one at a time or as NumPy arrays
#
# IBM bit pattern:
# SEEEEEEE MMMMMMMM MMMMMMMM MMMMMMMM
#
# value = M / 2^24 * 16^(E - 64), negated if S is set
#

import construct
import numpy as np

PROG_VERSION = '2024.114'

# Masks
IBMSIGN = 0x80000000
IBMEXP = 0x7F000000
IBMMANT = 0x00FFFFFF

TWO24 = 16777216.0


def ibm():
    IBM = "IBM" / construct.BitStruct("s" / construct.BitsInteger(1),
                                      "e" / construct.BitsInteger(7),
                                      "m" / construct.BitsInteger(24))
    return IBM


def ibm2float(ibm_float):
    '''   4 big endian bytes of IBM float to a Python float   '''
    b = ibm().parse(ibm_float)
    if b.s == 0 and b.e == 0 and b.m == 0:
        return 0.0

    a = b.m / TWO24 * 16.0 ** (b.e - 64)
    if b.s == 1:
        a = -a

    return a


def ibm2float_array(buf):
    '''   Decode a buffer of big endian IBM floats, returns float64   '''
    words = np.frombuffer(buf, dtype='>u4').astype(np.uint32)
    sign = (words & IBMSIGN) >> 31
    exponent = ((words & IBMEXP) >> 24).astype(np.int64)
    mantissa = (words & IBMMANT).astype(np.float64)

    ret = mantissa / TWO24 * np.power(16.0, exponent - 64)
    ret[sign == 1] *= -1.0

    return ret


def float2ibm_array(values):
    '''   Encode floats as big endian IBM floats, returns bytes   '''
    a = np.asarray(values, dtype=np.float64)
    sign = (a < 0).astype(np.uint32)
    a = np.abs(a)
    nonzero = a > 0

    exponent = np.zeros(a.shape, dtype=np.int64)
    exponent[nonzero] = \
        np.floor(np.log(a[nonzero]) / np.log(16.0)).astype(np.int64) + 1
    # The logarithm can land one hex digit off near powers of 16
    scale = np.power(16.0, exponent)
    high = nonzero & (a >= scale)
    exponent[high] += 1
    low = nonzero & (a < scale / 16.0)
    exponent[low] -= 1

    mantissa = np.zeros(a.shape, dtype=np.float64)
    mantissa[nonzero] = np.round(
        a[nonzero] / np.power(16.0, exponent[nonzero]) * TWO24)
    # Rounded up into the next hex digit
    carry = mantissa >= TWO24
    mantissa[carry] = TWO24 / 16.0
    exponent[carry] += 1

    exponent = exponent + 64
    # Underflow to zero, overflow to largest magnitude
    under = exponent < 0
    mantissa[under] = 0
    exponent[under] = 0
    over = exponent > 127
    mantissa[over] = IBMMANT
    exponent[over] = 127
    exponent[~nonzero] = 0
    sign[~nonzero] = 0

    words = (sign << 31) | (exponent.astype(np.uint32) << 24) | \
        mantissa.astype(np.uint32)

    return words.astype('>u4').tobytes()
