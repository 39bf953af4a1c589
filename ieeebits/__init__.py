"""IEEE 754 bit patterns and approximate math, public API.

`round` is importable by name but left out of __all__ so a star import does
not shadow the builtin.
"""

from __future__ import annotations

from .approx import (
    DEFAULT_EPSILON,
    fast_sqrt,
    inv_sqrt,
    ln,
    log,
    log2,
    log10,
    power,
)
from .codec import CodecError, IeeeBitsError, bits_to_bytes, bytes_to_bits
from .constants import E, NAN, NEGATIVE_INFINITY, PI, POSITIVE_INFINITY
from .floats import (
    build_double,
    build_float,
    double_high_bits,
    double_low_bits,
    double_words,
    float_bits,
    long_bits_from_signed,
)
from .rounding import (
    DomainError,
    ceil,
    floor,
    is_finite,
    is_infinite,
    is_nan,
    is_whole_number,
    round,
)
from .shift import shift_double_left1, shift_double_right1

__all__ = [
    "CodecError",
    "DEFAULT_EPSILON",
    "DomainError",
    "E",
    "IeeeBitsError",
    "NAN",
    "NEGATIVE_INFINITY",
    "PI",
    "POSITIVE_INFINITY",
    "bits_to_bytes",
    "build_double",
    "build_float",
    "bytes_to_bits",
    "ceil",
    "double_high_bits",
    "double_low_bits",
    "double_words",
    "fast_sqrt",
    "float_bits",
    "floor",
    "inv_sqrt",
    "is_finite",
    "is_infinite",
    "is_nan",
    "is_whole_number",
    "ln",
    "log",
    "log10",
    "log2",
    "long_bits_from_signed",
    "power",
    "shift_double_left1",
    "shift_double_right1",
]
