"""Float/double marshalling — IEEE 754 bit patterns in and out of host floats.

Single precision values travel as one unsigned 32-bit word. Double precision
values travel as a (high, low) pair of words in big-endian order: the high
word holds the sign, the 11-bit exponent and the top 20 mantissa bits, the
low word holds the remaining 32 mantissa bits.
"""

from __future__ import annotations

import struct

from .codec import CodecError, bits_to_bytes, bytes_to_bits

F32_EXP_MASK: int = 0x7F800000
F64_HIGH_EXP_MASK: int = 0x7FF00000
F64_HIGH_FRAC_MASK: int = 0x000FFFFF


def _pack(fmt: str, x: float | int) -> bytes:
    try:
        return struct.pack(fmt, x)
    except (struct.error, OverflowError) as e:
        raise CodecError("cannot encode " + repr(x) + " as '" + fmt + "': " + str(e)) from e


# ---------------------------------------------------------------------------
# Extraction
# ---------------------------------------------------------------------------


def float_bits(x: float) -> int:
    """Bit pattern of x rounded to float32."""
    return bytes_to_bits(_pack(">f", x))


def long_bits_from_signed(x: int) -> int:
    """Two's-complement bit pattern of a signed 32-bit integer."""
    return bytes_to_bits(_pack(">i", x))


def double_high_bits(x: float) -> int:
    raw: bytes = _pack(">d", x)
    return bytes_to_bits(raw[0:4])


def double_low_bits(x: float) -> int:
    raw: bytes = _pack(">d", x)
    return bytes_to_bits(raw[4:8])


def double_words(x: float) -> tuple[int, int]:
    """Return (high, low) words of x's float64 encoding."""
    raw: bytes = _pack(">d", x)
    return (bytes_to_bits(raw[0:4]), bytes_to_bits(raw[4:8]))


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


def build_float(bits: int) -> float:
    """Float32 value whose encoding is bits, widened to a host float."""
    return struct.unpack(">f", bits_to_bytes(bits))[0]


def build_double(high: int, low: int) -> float:
    """Float64 value whose encoding is high followed by low."""
    return struct.unpack(">d", bits_to_bytes(high) + bits_to_bytes(low))[0]
