"""Float decoding schemes.

Each scheme maps a generator word to the double an engine returns, and in the
other direction turns an observed double back into the mantissa bits the
generator must have produced. Mantissas come from exact float arithmetic or bit
patterns, never from rounding, so they agree with the engines' truncation.
"""
import enum
import struct

from z3 import LShR

from .constants import (
    EXPONENT_ONE,
    MANTISSA_MASK_52,
    MANTISSA_MASK_53,
    TWO_POW_53,
)


class Decoding(enum.Enum):
    DIVISION = "division"
    BINARY_CAST = "binary_cast"
    LOW_BITS = "low_bits"


def double_to_bits(value):
    return struct.unpack("<Q", struct.pack("<d", value))[0]


def bits_to_double(bits):
    return struct.unpack("<d", struct.pack("<Q", bits))[0]


# --- word -> double ---

def division_to_double(word):
    return (word >> 11) / TWO_POW_53


def binary_cast_to_double(word):
    return bits_to_double((word >> 12) | EXPONENT_ONE) - 1.0


def low_bits_to_double(word):
    return (word & MANTISSA_MASK_53) / TWO_POW_53


# --- double -> mantissa ---

def truncated_mantissa(value):
    # value * 2**53 is exact for a double in [0, 1), int() truncates
    return int(value * TWO_POW_53)


def binary_cast_mantissa(value):
    return double_to_bits(value + 1.0) & MANTISSA_MASK_52


# --- symbolic constraints on the post-transition words ---

def division_constraint(value, s0, s1):
    return LShR(s0, 11) == truncated_mantissa(value)


def binary_cast_constraint(value, s0, s1):
    return LShR(s0, 12) == binary_cast_mantissa(value)


def low_bits_constraint(value, s0, s1):
    return ((s0 + s1) & MANTISSA_MASK_53) == truncated_mantissa(value)


_TO_DOUBLE = {
    Decoding.DIVISION: division_to_double,
    Decoding.BINARY_CAST: binary_cast_to_double,
    Decoding.LOW_BITS: low_bits_to_double,
}

_MANTISSA = {
    Decoding.DIVISION: truncated_mantissa,
    Decoding.BINARY_CAST: binary_cast_mantissa,
    Decoding.LOW_BITS: truncated_mantissa,
}

_CONSTRAINT = {
    Decoding.DIVISION: division_constraint,
    Decoding.BINARY_CAST: binary_cast_constraint,
    Decoding.LOW_BITS: low_bits_constraint,
}


def to_double(decoding, word):
    return _TO_DOUBLE[decoding](word)


def recover_mantissa(decoding, value):
    return _MANTISSA[decoding](value)


def mantissa_constraint(decoding, value, s0, s1):
    """Bool expression tying an observed double to symbolic state words."""
    return _CONSTRAINT[decoding](value, s0, s1)
