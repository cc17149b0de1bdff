#!/usr/bin/env python
#
# Integer to physical quantity conventions used in SEG-Y trace headers,
# and their inverses for writing.
#
# Several trace header values are stored as a raw integer plus a signed
# scalar: positive scalars multiply, negative scalars divide by their
# absolute value.
#

import logging

PROG_VERSION = '2024.114'
LOGGER = logging.getLogger(__name__)

# Scalars allowed by SEG-Y rev 1, most precise first
DIVISORS = (-10000, -1000, -100, -10)
MULTIPLIERS = (1, 10, 100, 1000, 10000)

INT_RANGE = {16: (-32768, 32767), 32: (-2147483648, 2147483647)}


def apply_scale(raw, scale):
    '''
       Elevations, depths and coordinates.
       A scale of 0 is used as 1. This is not what the SEG-Y document says
       but files in the wild write 0 when they mean unscaled.
    '''
    if scale == 0:
        scale = 1

    if scale >= 0:
        return float(raw) * scale

    return float(raw) / -scale


def apply_time_modifier(raw, modifier):
    '''   Uphole, statics, lag, delay and mute times. 0 is used as 1   '''
    if modifier == 0:
        modifier = 1

    if modifier > 0:
        return float(raw) * modifier

    return float(raw) / -modifier


def apply_shotpoint_modifier(raw, modifier):
    if modifier == 0:
        return float(raw)

    if modifier > 0:
        return float(raw) * modifier

    return float(raw) / -modifier


def apply_exponent(mantissa, exponent):
    '''   Transduction constant and source measurement   '''
    return mantissa * 10.0 ** exponent


def _unscale(value, scale):
    if scale >= 0:
        return value / scale

    return value * -scale


def _is_integral(x):
    return abs(x - round(x)) <= 1e-9 * max(1.0, abs(x))


def _fits(x, bits):
    lower, upper = INT_RANGE[bits]
    return lower <= round(x) <= upper


def choose_scale(values, bits=32):
    '''
       Pick one scalar for a group of values that share it.
       Returns (scalar, [raw integers]).
       Prefers the first scalar that holds every value exactly, falls back
       to the most precise scalar that fits the field width.
    '''
    values = [float(v) for v in values]
    candidates = MULTIPLIERS[:1] + DIVISORS[::-1] + MULTIPLIERS[1:]

    for s in candidates:
        raws = [_unscale(v, s) for v in values]
        if all(_is_integral(r) and _fits(r, bits) for r in raws):
            return s, [int(round(r)) for r in raws]

    for s in DIVISORS + MULTIPLIERS:
        raws = [_unscale(v, s) for v in values]
        if all(_fits(r, bits) for r in raws):
            LOGGER.debug("Values {0} not exact with scalar {1}".format(
                values, s))
            return s, [int(round(r)) for r in raws]

    raise ValueError(
        "Values {0} do not fit a {1} bit field".format(values, bits))


def choose_exponent(value, bits=32):
    '''
       Split value into (mantissa, exponent) with value ~ mantissa * 10^exp
    '''
    value = float(value)
    if value == 0.0:
        return 0, 0

    candidates = list(range(0, -10, -1)) + list(range(1, 10))
    for e in candidates:
        m = value * 10 ** -e if e <= 0 else value / 10 ** e
        if _is_integral(m) and _fits(m, bits):
            return int(round(m)), e

    for e in range(-9, 10):
        m = value * 10 ** -e if e <= 0 else value / 10 ** e
        if _fits(m, bits):
            return int(round(m)), e

    raise ValueError(
        "Value {0} does not fit a {1} bit mantissa".format(value, bits))
